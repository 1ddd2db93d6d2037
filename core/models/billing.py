# =============================================================================
# core/models/billing.py - Plan & Token Wallet Schemas
# =============================================================================
# These models define the API contract for plans and the token wallet:
# - PlanType: Enum of subscription tiers
# - PlanSummary / PlanRecord: Rows of the `planes` catalog
# - PlanUpdateRequest: Super-admin catalog edits
# - TokenCostRequest / TokenCostResponse: Cost preview for a property
# - ProPriceResponse: Configured Pro annual price
#
# Field names follow the database columns (Spanish) since the dashboard
# consumes them directly.
# =============================================================================

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class PlanType(str, Enum):
    """
    Subscription tiers.

    - free: Basic limits (2 questions per assembly, no detailed minutes)
    - pro: Paid tier, honored only while the manager holds tokens
    - pilot: Pilot accounts, always get paid-tier limits while active
    """
    FREE = "free"
    PRO = "pro"
    PILOT = "pilot"


class PlanSummary(BaseModel):
    """
    Public view of an active plan.

    Returned by GET /planes for the landing page and dashboard.

    Example:
        {"key": "pro", "nombre": "Plan Pro", "precio_cop_anual": 200000}
    """
    key: str
    nombre: str | None = None
    precio_cop_anual: int | float | None = None


class PlanRecord(PlanSummary):
    """
    Full catalog row, as seen by the super admin.

    The limit columns are left loosely typed: the catalog is edited by hand
    and a bad value there must not break the listing.
    """
    id: str | None = None
    activo: bool | None = None
    max_preguntas_por_asamblea: Any = None
    incluye_acta_detallada: Any = None


class PlanList(BaseModel):
    """Wrapper for plan listings."""
    planes: list[PlanRecord] = Field(default_factory=list)


class PlanUpdateRequest(BaseModel):
    """
    Super-admin edit of a catalog row.

    The plan is located by `id` or, failing that, by `key`. Only fields
    that pass validation are written; at least one is required.

    Example:
        {"key": "pro", "precio_cop_anual": 250000}
    """
    id: str | None = None
    key: str | None = None
    nombre: str | None = None
    precio_cop_anual: int | float | None = None
    max_preguntas_por_asamblea: int | None = None
    incluye_acta_detallada: bool | None = None

    def to_updates(self) -> dict[str, Any]:
        """
        Collect the columns to write.

        Blank names and negative numbers are dropped rather than rejected.
        """
        updates: dict[str, Any] = {}
        if self.nombre is not None and self.nombre.strip():
            updates["nombre"] = self.nombre.strip()
        if self.precio_cop_anual is not None and self.precio_cop_anual >= 0:
            updates["precio_cop_anual"] = self.precio_cop_anual
        if self.max_preguntas_por_asamblea is not None and self.max_preguntas_por_asamblea >= 0:
            updates["max_preguntas_por_asamblea"] = self.max_preguntas_por_asamblea
        if self.incluye_acta_detallada is not None:
            updates["incluye_acta_detallada"] = self.incluye_acta_detallada
        return updates


class PlanLimitsResponse(BaseModel):
    """Effective limits after expiry and token balance are considered."""
    max_preguntas_por_asamblea: int
    incluye_acta_detallada: bool


class TokenCostRequest(BaseModel):
    """
    Cost preview input.

    Example:
        {"unidades": 37, "tokens_disponibles": 36}
    """
    unidades: float = Field(
        ...,
        description="Number of units in the property (negatives count as 0)"
    )
    tokens_disponibles: float | None = Field(
        default=None,
        description="Wallet balance; when given, affordability is included"
    )


class TokenCostResponse(BaseModel):
    """Cost in tokens and, if a balance was given, whether it covers it."""
    unidades: int
    costo: int
    tokens_disponibles: float | None = None
    puede_operar: bool | None = None


class ProPriceResponse(BaseModel):
    """
    Configured Pro subscription price.

    Example:
        {
            "precio_cop_anual": 200000,
            "precio_centavos": 20000000,
            "precio_formateado": "$ 200.000"
        }
    """
    precio_cop_anual: int
    precio_centavos: int
    precio_formateado: str
