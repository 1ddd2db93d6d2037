# =============================================================================
# app/routers/planes.py - Public Plan Endpoints
# =============================================================================
# Plan listing and Pro price for the landing page and dashboard.
# No authentication required.
# =============================================================================

from fastapi import APIRouter

from app.dependencies import PricingDep
from core.models.billing import PlanSummary, ProPriceResponse
from core.services.plan_service import PlanService

router = APIRouter()


@router.get("")
async def list_plans() -> dict[str, list[PlanSummary]]:
    """
    List active plans, cheapest first.

    Returns:
        {"planes": [{"key": ..., "nombre": ..., "precio_cop_anual": ...}]}
    """
    plans = PlanService.list_active_plans()
    return {"planes": [PlanSummary(**p) for p in plans]}


@router.get("/pro/precio", response_model=ProPriceResponse)
async def get_pro_price(pricing: PricingDep):
    """Configured Pro annual price, in COP and in cents for the payment gateway."""
    return ProPriceResponse(
        precio_cop_anual=pricing.pro_annual_price_cop,
        precio_centavos=pricing.pro_price_cents,
        precio_formateado=pricing.format_pro_price(),
    )
