"""
Computation method constants for statlab.

This module is the SINGLE SOURCE OF TRUTH for method strings.
Import from here, never use raw strings.

Two methods exist for every routine that needs a critical value,
a p-value or a t-distribution CDF:

    METHOD_EXACT:  quantiles and CDFs from scipy.stats (default)
    METHOD_COMPAT: the fixed critical values (1.96, 7.815, 3.0), the
                   coarse p-values (0.01 / 0.1) and the 0.5 t-CDF
                   fallback of the reference application, reproduced
                   bit-for-bit

Usage:
    from statlab.core.methods import METHOD_COMPAT

    result = one_sample_t_test(x, 100, method=METHOD_COMPAT)
"""

METHOD_EXACT = 'exact'
METHOD_COMPAT = 'compat'

# Default for every public entry point
DEFAULT_METHOD = METHOD_EXACT

ALL_METHODS = frozenset({
    METHOD_EXACT,
    METHOD_COMPAT,
})

# Fixed values used by the compatibility method
COMPAT_Z_CRITICAL = 1.96
COMPAT_T_CRITICAL = 1.96
COMPAT_CHISQ_CRITICAL = 7.815
COMPAT_F_CRITICAL = 3.0
COMPAT_T_CDF_FALLBACK = 0.5
COMPAT_P_SIGNIFICANT = 0.01
COMPAT_P_NOT_SIGNIFICANT = 0.1

# Critical multipliers looked up by confidence level; anything else
# falls back to the 90% entry.
COMPAT_CONF_CRITICAL = {
    0.95: 1.96,
    0.99: 2.576,
}
COMPAT_CONF_FALLBACK = 1.645
COMPAT_CONF_LEVELS = frozenset({0.90, 0.95, 0.99})

__all__ = [
    'METHOD_EXACT',
    'METHOD_COMPAT',
    'DEFAULT_METHOD',
    'ALL_METHODS',
    'COMPAT_Z_CRITICAL',
    'COMPAT_T_CRITICAL',
    'COMPAT_CHISQ_CRITICAL',
    'COMPAT_F_CRITICAL',
    'COMPAT_T_CDF_FALLBACK',
    'COMPAT_P_SIGNIFICANT',
    'COMPAT_P_NOT_SIGNIFICANT',
    'COMPAT_CONF_CRITICAL',
    'COMPAT_CONF_FALLBACK',
    'COMPAT_CONF_LEVELS',
]
