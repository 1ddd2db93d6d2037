# =============================================================================
# core/rules/ - Billing & Entitlement Rules
# =============================================================================
# Pure functions with no I/O:
# - coefficients.py: Ownership coefficient sum validation
# - token_cost.py: Token wallet cost and affordability
# - plan_limits.py: Effective feature limits per plan tier
# - plan_status.py: Expiry-aware effective plan
# - pricing.py: Pro subscription price configuration
# - admin.py: Super admin recognition
#
# Safe to call from any request handler; nothing here raises for bad input.
# =============================================================================

from .admin import can_access_super_admin, is_super_admin
from .coefficients import (
    COEFFICIENT_TOLERANCE_PERCENT,
    accepted_coefficient_range,
    is_coefficient_sum_valid,
)
from .plan_limits import (
    FREE_LIMITS,
    PAID_LIMITS,
    PlanLimitOverrides,
    PlanLimits,
    find_plan_by_key,
    limits_key,
    merge_limits,
    qualifies_for_paid_tier,
    resolve_plan_limits,
)
from .plan_status import effective_plan, parse_timestamp
from .pricing import PricingConfig
from .token_cost import TOKENS_PER_UNIT, can_afford, token_cost

__all__ = [
    # Admin
    "can_access_super_admin",
    "is_super_admin",
    # Coefficients
    "COEFFICIENT_TOLERANCE_PERCENT",
    "accepted_coefficient_range",
    "is_coefficient_sum_valid",
    # Plan limits
    "FREE_LIMITS",
    "PAID_LIMITS",
    "PlanLimitOverrides",
    "PlanLimits",
    "find_plan_by_key",
    "limits_key",
    "merge_limits",
    "qualifies_for_paid_tier",
    "resolve_plan_limits",
    # Plan status
    "effective_plan",
    "parse_timestamp",
    # Pricing
    "PricingConfig",
    # Tokens
    "TOKENS_PER_UNIT",
    "can_afford",
    "token_cost",
]
