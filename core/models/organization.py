# =============================================================================
# core/models/organization.py - Organization (Conjunto) Schemas
# =============================================================================
# An organization is one property (conjunto residencial) managed through the
# dashboard. These models describe what the dashboard needs to decide
# whether paid operations are available:
# - OrganizationStatus: Token wallet vs. cost of operating on the property
# - CoefficientCheckRequest / CoefficientSummary: Ownership share validation
# =============================================================================

from pydantic import BaseModel, Field

from .billing import PlanLimitsResponse


class OrganizationStatus(BaseModel):
    """
    Wallet and entitlement status for one property.

    Returned by GET /organizations/{id}/status.

    Example:
        {
            "organization_id": "550e8400-e29b-41d4-a716-446655440000",
            "tokens_disponibles": 120,
            "unidades_conjunto": 37,
            "costo_operacion": 37,
            "puede_operar": true,
            "plan_type": "pro",
            "plan_efectivo": "pro",
            "plan_active_until": "2027-01-01T00:00:00Z",
            "limites": {"max_preguntas_por_asamblea": 999, "incluye_acta_detallada": true}
        }
    """

    organization_id: str = Field(..., description="Property identifier")

    # Manager's wallet (never negative)
    tokens_disponibles: int = Field(default=0, ge=0)

    # Units in the property, which is also the cost in tokens
    unidades_conjunto: int = Field(default=0, ge=0)
    costo_operacion: int = Field(default=0, ge=0)

    puede_operar: bool = Field(
        default=False,
        description="Whether the wallet covers the cost of a paid operation"
    )

    plan_type: str | None = Field(
        default=None,
        description="Nominal plan stored for the property"
    )
    plan_efectivo: str = Field(
        default="free",
        description="Plan honored after expiry is considered"
    )
    plan_active_until: str | None = None

    limites: PlanLimitsResponse


class CoefficientCheckRequest(BaseModel):
    """Ad-hoc coefficient sum to validate (e.g. live feedback during import)."""
    suma: float = Field(..., description="Sum of ownership percentages")


class CoefficientSummary(BaseModel):
    """
    Coefficient validation result.

    Example:
        {"suma": 99.95, "valida": true, "rango_aceptado": "entre 99.9% y 100.1%"}
    """
    suma: float
    valida: bool
    rango_aceptado: str
    unidades: int | None = Field(
        default=None,
        description="Units counted, when computed from the database"
    )
