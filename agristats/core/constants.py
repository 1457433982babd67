"""
Fixed statistical constants.

Significance levels, the confidence-interval quantile and the conservative
fallbacks returned when a distribution cannot be constructed.
"""

# Significance levels
ALPHA = 0.05
ALPHA_STRICT = 0.01

# Upper quantile for two-tailed 95% critical values
CI_PROBABILITY = 0.975

# Returned when degrees of freedom are invalid
FALLBACK_P_VALUE = 1.0
FALLBACK_T_CRITICAL = 1.96  # standard-normal asymptote

# Hyndman & Fan type 8 (median-unbiased)
DEFAULT_QUANTILE_TYPE = 8
