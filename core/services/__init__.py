# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .plan_service import PlanService
from .organization_service import OrganizationService

__all__ = [
    "PlanService",
    "OrganizationService",
]
