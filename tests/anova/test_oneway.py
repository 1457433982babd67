"""
Tests for one-way ANOVA.

Validates:
    - SS partition and degrees-of-freedom identities
    - F and p-value against scipy.stats.f_oneway
    - Degenerate layouts (identical groups, single group, empty groups)
    - Input validation
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from agristats.anova import anova_oneway
from agristats.core.compute import CPU_FP64
from agristats.core.exceptions import ValidationError


class TestPartition:

    def test_ss_sum_to_total(self, variety_trial):
        result = anova_oneway(variety_trial)
        pooled = np.concatenate([np.asarray(g) for g in variety_trial])
        direct_sst = np.sum((pooled - pooled.mean()) ** 2)
        assert (
            result.between.sum_of_squares + result.within.sum_of_squares
            == pytest.approx(result.total.sum_of_squares, rel=CPU_FP64.rtol)
        )
        assert result.total.sum_of_squares == pytest.approx(direct_sst, rel=1e-10)

    def test_df_identity(self, variety_trial):
        result = anova_oneway(variety_trial)
        assert result.between.degrees_of_freedom == 2
        assert result.within.degrees_of_freedom == 12
        assert result.total.degrees_of_freedom == 14
        assert (
            result.between.degrees_of_freedom + result.within.degrees_of_freedom
            == result.total.degrees_of_freedom
        )

    def test_mean_squares(self, variety_trial):
        result = anova_oneway(variety_trial)
        b, w = result.between, result.within
        assert b.mean_square == pytest.approx(b.sum_of_squares / 2)
        assert w.mean_square == pytest.approx(w.sum_of_squares / 12)
        assert b.f_statistic == pytest.approx(b.mean_square / w.mean_square)
        assert result.total.mean_square == 0.0
        assert w.f_statistic is None and w.p_value is None

    def test_r_squared(self, variety_trial):
        result = anova_oneway(variety_trial)
        expected = result.between.sum_of_squares / result.total.sum_of_squares
        assert result.r_squared == pytest.approx(expected)
        assert result.eta_squared == result.r_squared
        assert 0.0 <= result.r_squared <= 1.0


class TestAgainstScipy:

    def test_f_and_p_no_effect(self, no_effect_groups):
        result = anova_oneway(no_effect_groups)
        ref = sp_stats.f_oneway(*no_effect_groups)
        assert result.f_statistic == pytest.approx(ref.statistic, rel=CPU_FP64.rtol)
        assert result.p_value == pytest.approx(ref.pvalue, rel=1e-8)

    def test_f_strong_effect(self, variety_trial):
        result = anova_oneway(variety_trial)
        ref = sp_stats.f_oneway(*variety_trial)
        assert result.f_statistic == pytest.approx(ref.statistic, rel=CPU_FP64.rtol)
        assert result.p_value == pytest.approx(ref.pvalue, abs=1e-12)

    def test_unequal_group_sizes(self, rng):
        groups = [rng.normal(m, 1.0, size=n) for m, n in [(0, 4), (0.5, 7), (1, 5)]]
        result = anova_oneway(groups)
        ref = sp_stats.f_oneway(*groups)
        assert result.f_statistic == pytest.approx(ref.statistic, rel=CPU_FP64.rtol)


class TestSignificance:

    def test_separated_group_significant(self, variety_trial):
        result = anova_oneway(variety_trial)
        assert result.is_significant_05
        assert result.is_significant_01
        assert result.p_value < 0.01

    def test_flags_follow_p(self, no_effect_groups):
        result = anova_oneway(no_effect_groups)
        assert result.is_significant_05 == (result.p_value < 0.05)
        assert result.is_significant_01 == (result.p_value < 0.01)

    def test_strict_flag_implies_loose(self, variety_trial, no_effect_groups):
        for groups in (variety_trial, no_effect_groups):
            result = anova_oneway(groups)
            assert not result.is_significant_01 or result.is_significant_05


class TestDegenerate:

    def test_identical_groups(self):
        result = anova_oneway([[5.0, 5.0, 5.0]] * 3)
        assert result.between.sum_of_squares == 0.0
        assert result.within.sum_of_squares == 0.0
        assert result.f_statistic == 0.0
        assert result.p_value == 1.0
        assert result.r_squared == 0.0
        assert not result.is_significant_05
        assert result.warnings

    def test_single_group(self):
        result = anova_oneway([[1.0, 2.0, 3.0]])
        assert result.between.degrees_of_freedom == 0
        assert result.between.mean_square == 0.0
        assert result.p_value == 1.0

    def test_one_observation_per_group(self):
        result = anova_oneway([[1.0], [2.0], [3.0]])
        assert result.within.degrees_of_freedom == 0
        assert result.within.mean_square == 0.0
        assert result.f_statistic == 0.0
        assert result.p_value == 1.0

    def test_empty_group_included_in_k(self):
        result = anova_oneway([[1.0, 2.0, 3.0], [], [4.0, 5.0, 6.0]])
        assert result.group_sizes == (3, 0, 3)
        assert result.group_means[1] == 0.0
        assert result.between.degrees_of_freedom == 2
        assert result.within.degrees_of_freedom == 3
        assert any("empty" in w for w in result.warnings)

    def test_group_order_only_affects_numbering(self, variety_trial):
        forward = anova_oneway(variety_trial)
        backward = anova_oneway(variety_trial[::-1])
        assert forward.f_statistic == pytest.approx(backward.f_statistic)
        assert forward.group_means == pytest.approx(backward.group_means[::-1])


class TestInputs:

    def test_zero_groups_rejected(self):
        with pytest.raises(ValidationError):
            anova_oneway([])

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match=r"groups\[1\]"):
            anova_oneway([[1.0, 2.0], [np.nan, 3.0]])

    def test_labels(self, variety_trial):
        result = anova_oneway(variety_trial, labels=["Baj", "Roelfs", "Kingbird"])
        assert result.labels == ("Baj", "Roelfs", "Kingbird")
        assert "Kingbird" in result.summary()

    def test_default_labels(self, variety_trial):
        assert anova_oneway(variety_trial).labels == ("0", "1", "2")

    def test_label_length_mismatch(self, variety_trial):
        with pytest.raises(ValidationError, match="labels"):
            anova_oneway(variety_trial, labels=["a", "b"])

    def test_ndarray_input(self):
        groups = np.array([[1.0, 2.0, 3.0], [2.0, 3.0, 4.0]])
        result = anova_oneway(groups)
        assert result.group_means == pytest.approx((2.0, 3.0))


class TestSolution:

    def test_table_rows(self, variety_trial):
        result = anova_oneway(variety_trial)
        assert [row.term for row in result.table] == ['Between', 'Within', 'Total']

    def test_to_dict(self, variety_trial):
        d = anova_oneway(variety_trial).to_dict()
        assert d['between']['term'] == 'Between'
        assert d['n_obs'] == 15
        assert len(d['group_means']) == 3

    def test_idempotent(self, variety_trial):
        assert anova_oneway(variety_trial).params == anova_oneway(variety_trial).params

    def test_metadata(self, variety_trial):
        result = anova_oneway(variety_trial)
        assert result.backend_name == 'cpu'
        assert result.info['k'] == 3
        assert 'sums_of_squares' in result.timing
