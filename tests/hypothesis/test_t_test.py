"""
Tests for t_test().

Validates:
    - Welch statistic, df and p-value against scipy.stats.ttest_ind
    - Paired statistic and p-value against scipy.stats.ttest_rel
    - Confidence interval built from the t critical value
    - Neutral result for paired samples of unequal length
    - Constant and tiny samples degrade to t = 0, p = 1
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from agristats.core.exceptions import ValidationError
from agristats.hypothesis import TTestDesign, t_test


@pytest.fixture
def yields(rng):
    """Two plots of wheat yield (t/ha) with a real difference."""
    control = rng.normal(4.0, 0.4, size=12)
    fertilized = rng.normal(4.6, 0.7, size=9)
    return control, fertilized


class TestWelch:

    def test_matches_scipy(self, yields):
        x, y = yields
        result = t_test(x, y)
        ref = sp_stats.ttest_ind(x, y, equal_var=False)
        assert result.t_statistic == pytest.approx(ref.statistic, rel=1e-10)
        assert result.p_value == pytest.approx(ref.pvalue, rel=1e-8)

    def test_welch_satterthwaite_df(self, yields):
        x, y = yields
        v1 = np.var(x, ddof=1) / len(x)
        v2 = np.var(y, ddof=1) / len(y)
        expected = (v1 + v2) ** 2 / (
            v1 ** 2 / (len(x) - 1) + v2 ** 2 / (len(y) - 1)
        )
        result = t_test(x, y)
        assert result.degrees_of_freedom == pytest.approx(expected, rel=1e-12)

    def test_mean_difference_sign(self, yields):
        x, y = yields
        result = t_test(x, y)
        assert result.mean_difference == pytest.approx(np.mean(x) - np.mean(y))
        assert t_test(y, x).t_statistic == pytest.approx(-result.t_statistic)

    def test_confidence_interval(self, yields):
        x, y = yields
        result = t_test(x, y)
        se = np.sqrt(np.var(x, ddof=1) / len(x) + np.var(y, ddof=1) / len(y))
        t_crit = sp_stats.t.ppf(0.975, result.degrees_of_freedom)
        md = result.mean_difference
        assert result.ci_lower == pytest.approx(md - t_crit * se, rel=1e-9)
        assert result.ci_upper == pytest.approx(md + t_crit * se, rel=1e-9)
        assert result.conf_int == (result.ci_lower, result.ci_upper)

    def test_significance_flag_follows_p(self, yields):
        result = t_test(*yields)
        assert result.is_significant == (result.p_value < 0.05)

    def test_clear_difference_is_significant(self):
        x = [10.1, 10.3, 9.8, 10.0, 10.2]
        y = [12.0, 12.4, 11.9, 12.1, 12.3]
        result = t_test(x, y)
        assert result.is_significant
        assert result.p_value < 0.001
        assert result.ci_upper < 0.0

    def test_identical_samples(self):
        x = [1.0, 2.0, 3.0, 4.0, 5.0]
        result = t_test(x, list(x))
        assert result.t_statistic == 0.0
        assert result.p_value == pytest.approx(1.0)
        assert not result.is_significant
        assert result.conf_int == (0.0, 0.0)

    def test_constant_data(self):
        result = t_test([3.0, 3.0, 3.0], [3.0, 3.0, 3.0])
        assert result.t_statistic == 0.0
        assert result.p_value == 1.0
        assert result.degrees_of_freedom == 4.0
        assert result.warnings

    def test_empty_samples_do_not_raise(self):
        result = t_test([], [])
        assert result.t_statistic == 0.0
        assert result.p_value == 1.0
        assert not result.is_significant

    def test_single_observation_sample_not_significant(self):
        result = t_test([5.0], [1.0, 2.0, 3.0, 4.0])
        assert result.t_statistic == 0.0
        assert result.p_value == 1.0
        assert not result.is_significant
        assert result.conf_int == (result.mean_difference, result.mean_difference)
        assert any("variance undefined" in w for w in result.warnings)

    def test_one_empty_sample(self):
        result = t_test([], [1.0, 2.0])
        assert result.t_statistic == 0.0
        assert result.p_value == 1.0
        assert result.mean_difference == 0.0
        assert not result.is_significant

    def test_not_paired(self, yields):
        result = t_test(*yields)
        assert result.paired is False
        assert result.info['test_type'] == 't_welch'


class TestPaired:

    def test_matches_scipy(self, rng):
        before = rng.normal(20.0, 3.0, size=10)
        after = before + rng.normal(1.0, 0.8, size=10)
        result = t_test(after, before, paired=True)
        ref = sp_stats.ttest_rel(after, before)
        assert result.t_statistic == pytest.approx(ref.statistic, rel=1e-10)
        assert result.p_value == pytest.approx(ref.pvalue, rel=1e-8)
        assert result.degrees_of_freedom == 9.0
        assert result.mean_difference == pytest.approx(np.mean(after - before))

    def test_confidence_interval(self, rng):
        x = rng.normal(5.0, 1.0, size=8)
        y = rng.normal(5.5, 1.0, size=8)
        d = x - y
        se = np.std(d, ddof=1) / np.sqrt(len(d))
        t_crit = sp_stats.t.ppf(0.975, len(d) - 1)
        result = t_test(x, y, paired=True)
        assert result.ci_lower == pytest.approx(np.mean(d) - t_crit * se, rel=1e-9)
        assert result.ci_upper == pytest.approx(np.mean(d) + t_crit * se, rel=1e-9)

    def test_length_mismatch_neutral(self):
        result = t_test([1.0, 2.0, 3.0], [1.0, 2.0], paired=True)
        assert result.t_statistic == 0.0
        assert result.p_value == 1.0
        assert result.degrees_of_freedom == 0.0
        assert result.mean_difference == 0.0
        assert result.conf_int == (0.0, 0.0)
        assert not result.is_significant
        assert result.paired is True
        assert any("length" in w for w in result.warnings)

    def test_constant_differences(self):
        x = [5.0, 6.0, 7.0, 8.0]
        y = [4.0, 5.0, 6.0, 7.0]
        result = t_test(x, y, paired=True)
        assert result.t_statistic == 0.0
        assert result.p_value == 1.0
        assert result.mean_difference == pytest.approx(1.0)
        # zero t collapses the interval onto the point estimate
        assert result.conf_int == (pytest.approx(1.0), pytest.approx(1.0))

    def test_single_pair(self):
        result = t_test([2.0], [1.0], paired=True)
        assert result.t_statistic == 0.0
        assert result.p_value == 1.0
        assert result.degrees_of_freedom == 0.0


class TestInputs:

    def test_design_input(self, yields):
        design = TTestDesign.for_t_test(*yields, paired=False)
        assert t_test(design).params == t_test(*yields).params

    def test_idempotent(self, yields):
        assert t_test(*yields).params == t_test(*yields).params

    def test_missing_y_raises(self):
        with pytest.raises(TypeError):
            t_test([1.0, 2.0])

    def test_nan_rejected(self):
        with pytest.raises(ValidationError):
            t_test([1.0, np.nan], [1.0, 2.0])

    def test_summary_and_dict(self, yields):
        result = t_test(*yields)
        assert "Welch" in result.summary()
        d = result.to_dict()
        assert d['t_statistic'] == result.t_statistic
        assert d['paired'] is False
