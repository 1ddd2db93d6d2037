# =============================================================================
# core/rules/token_cost.py - Manager Token Wallet Pricing
# =============================================================================
# Billing model: each manager ("gestor") holds a wallet of tokens.
# 1 token = 1 housing unit, so an operation on a property costs as many
# tokens as the property has units.
#
# Paid operations (activating a vote, the audited minutes download, manual
# vote registration) are blocked when the wallet can't cover the cost.
# =============================================================================

from lib.utils import to_non_negative_int

TOKENS_PER_UNIT = 1


def token_cost(unit_count: float) -> int:
    """
    Tokens needed for an operation on a property.

    Args:
        unit_count: Number of units in the property. Negative values clamp
            to 0 and fractional values are floored.

    Returns:
        The cost in tokens (units * TOKENS_PER_UNIT)

    Example:
        token_cost(37)    # 37
        token_cost(12.9)  # 12
        token_cost(-3)    # 0
    """
    return to_non_negative_int(unit_count) * TOKENS_PER_UNIT


def can_afford(balance: float, unit_count: float) -> bool:
    """Check whether a wallet balance covers the cost for `unit_count` units."""
    try:
        return float(balance) >= token_cost(unit_count)
    except (TypeError, ValueError):
        return False
