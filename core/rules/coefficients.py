# =============================================================================
# core/rules/coefficients.py - Ownership Coefficient Validation
# =============================================================================
# Under Ley 675 the ownership coefficients of every unit in a property must
# add up to 100%. Spreadsheet rounding makes an exact match rare, so a small
# tolerance on either side is accepted.
#
# Usage:
#   from core.rules.coefficients import is_coefficient_sum_valid
#   is_coefficient_sum_valid(99.95)  # True
# =============================================================================

import math

# Accepted deviation from 100, in percentage points
COEFFICIENT_TOLERANCE_PERCENT = 0.1

TARGET_PERCENT = 100.0


def is_coefficient_sum_valid(total: float) -> bool:
    """
    Check whether a coefficient sum is acceptable.

    Accepts the closed interval [100 - tolerance, 100 + tolerance],
    i.e. 99.9% to 100.1% inclusive.

    Args:
        total: Sum of the per-unit ownership percentages

    Returns:
        True if the sum lies within tolerance, False otherwise
        (including NaN and infinities)
    """
    try:
        value = float(total)
    except (TypeError, ValueError):
        return False

    if not math.isfinite(value):
        return False

    return abs(value - TARGET_PERCENT) <= COEFFICIENT_TOLERANCE_PERCENT


def accepted_coefficient_range() -> str:
    """Accepted range for UI messages, e.g. "entre 99.9% y 100.1%"."""
    low = TARGET_PERCENT - COEFFICIENT_TOLERANCE_PERCENT
    high = TARGET_PERCENT + COEFFICIENT_TOLERANCE_PERCENT
    return f"entre {low:.1f}% y {high:.1f}%"
