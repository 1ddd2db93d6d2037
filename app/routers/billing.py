# =============================================================================
# app/routers/billing.py - Live Calculation Endpoints
# =============================================================================
# Stateless previews used by the dashboard while the user types:
# - Token cost for a number of units
# - Coefficient sum validation
# No database access, no authentication.
# =============================================================================

from fastapi import APIRouter

from core.models.billing import TokenCostRequest, TokenCostResponse
from core.models.organization import CoefficientCheckRequest, CoefficientSummary
from core.rules.coefficients import accepted_coefficient_range, is_coefficient_sum_valid
from core.rules.token_cost import can_afford, token_cost
from lib.utils import to_non_negative_int

router = APIRouter()


@router.post("/billing/cost", response_model=TokenCostResponse)
async def preview_token_cost(request: TokenCostRequest):
    """
    Cost in tokens for a property with `unidades` units.

    When `tokens_disponibles` is given, also reports whether it covers the cost.
    """
    cost = token_cost(request.unidades)

    response = TokenCostResponse(
        unidades=to_non_negative_int(request.unidades),
        costo=cost,
    )
    if request.tokens_disponibles is not None:
        response.tokens_disponibles = request.tokens_disponibles
        response.puede_operar = can_afford(request.tokens_disponibles, request.unidades)
    return response


@router.post("/coeficientes/validar", response_model=CoefficientSummary)
async def validate_coefficients(request: CoefficientCheckRequest):
    """Check a coefficient sum against the accepted range."""
    return CoefficientSummary(
        suma=request.suma,
        valida=is_coefficient_sum_valid(request.suma),
        rango_aceptado=accepted_coefficient_range(),
    )
