# =============================================================================
# app/routers/super_admin.py - Plan Catalog Administration
# =============================================================================
# Only the configured administrator emails may call these endpoints.
# =============================================================================

import logging

from fastapi import APIRouter, Depends

from app.auth import AuthUser, require_super_admin
from core.models.billing import PlanList, PlanRecord, PlanUpdateRequest
from core.services.plan_service import PlanService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/planes", response_model=PlanList)
async def list_plan_catalog(
    admin: AuthUser = Depends(require_super_admin),
):
    """List every plan, active or not, with its limits."""
    plans = PlanService.list_all_plans()
    return PlanList(planes=[PlanRecord(**p) for p in plans])


@router.patch("/planes")
async def update_plan(
    request: PlanUpdateRequest,
    admin: AuthUser = Depends(require_super_admin),
):
    """
    Update name, price or limits of a plan.

    The plan is identified by `id` or `key`. Blank names and negative
    numbers are ignored; at least one valid field is required.
    """
    result = PlanService.update_plan(request)
    logger.info(f"Plan {request.id or request.key} updated by {admin.email}")
    return result
