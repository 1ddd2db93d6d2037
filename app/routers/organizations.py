# =============================================================================
# app/routers/organizations.py - Property Status Endpoints
# =============================================================================
# Wallet/entitlement status and coefficient checks for one property.
# All endpoints require authentication and a profile in the property.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path

from app.auth import get_current_user, AuthUser
from core.models.organization import CoefficientSummary, OrganizationStatus
from core.services.organization_service import OrganizationService

router = APIRouter()


@router.get("/{organization_id}/status", response_model=OrganizationStatus)
async def get_organization_status(
    organization_id: Annotated[UUID, Path(description="Organization UUID")],
    user: AuthUser = Depends(get_current_user),
):
    """
    Token wallet vs. cost of a paid operation on this property.

    1 token = 1 unit, so the cost equals the number of units. Also returns
    the effective plan (expired plans count as free) and its limits.
    """
    return OrganizationService.get_status(str(organization_id), user_id=user.id)


@router.get("/{organization_id}/coeficientes", response_model=CoefficientSummary)
async def get_coefficient_summary(
    organization_id: Annotated[UUID, Path(description="Organization UUID")],
    user: AuthUser = Depends(get_current_user),
):
    """
    Sum of the property's ownership coefficients and whether it is valid.
    """
    return OrganizationService.get_coefficient_summary(str(organization_id), user_id=user.id)
