# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - billing.py: Plans, plan catalog edits, token cost previews
# - organization.py: Property wallet status and coefficient checks
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Billing Models - Plans and token wallet
# -----------------------------------------------------------------------------
from .billing import (
    PlanLimitsResponse,
    PlanList,
    PlanRecord,
    PlanSummary,
    PlanType,
    PlanUpdateRequest,
    ProPriceResponse,
    TokenCostRequest,
    TokenCostResponse,
)

# -----------------------------------------------------------------------------
# Organization Models - Property status
# -----------------------------------------------------------------------------
from .organization import (
    CoefficientCheckRequest,
    CoefficientSummary,
    OrganizationStatus,
)

__all__ = [
    # Billing
    "PlanLimitsResponse",
    "PlanList",
    "PlanRecord",
    "PlanSummary",
    "PlanType",
    "PlanUpdateRequest",
    "ProPriceResponse",
    "TokenCostRequest",
    "TokenCostResponse",
    # Organization
    "CoefficientCheckRequest",
    "CoefficientSummary",
    "OrganizationStatus",
]
