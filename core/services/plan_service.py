# =============================================================================
# core/services/plan_service.py - Plan Catalog Business Logic
# =============================================================================
# Handles reads and super-admin edits of the `planes` catalog.
# Separates HTTP concerns from database/business logic.
# =============================================================================

import logging
from typing import Any

from app.exceptions import PlanUpdateError
from core.models.billing import PlanUpdateRequest
from core.rules.plan_limits import find_plan_by_key
from lib.supabase_client import SupabaseClient, SupabaseClientError

logger = logging.getLogger(__name__)


class PlanService:
    """Service for the plan catalog."""

    @staticmethod
    def list_active_plans() -> list[dict[str, Any]]:
        """Active plans for the landing page, cheapest first."""
        return SupabaseClient.fetch_active_plans()

    @staticmethod
    def list_all_plans() -> list[dict[str, Any]]:
        """Full catalog for the super admin."""
        return SupabaseClient.fetch_all_plans()

    @staticmethod
    def get_plan_record(plan_key: str) -> dict[str, Any] | None:
        """
        Catalog row for a plan key, limits included.

        Returns None when the catalog can't be read, so callers fall back
        to the hard-coded defaults.
        """
        try:
            plans = SupabaseClient.fetch_all_plans()
        except SupabaseClientError as e:
            logger.warning(f"Could not read plan catalog, using defaults: {e}")
            return None
        return find_plan_by_key(plans, plan_key)

    @staticmethod
    def update_plan(request: PlanUpdateRequest) -> dict[str, Any]:
        """
        Apply a super-admin edit.

        Args:
            request: Edit with the plan locator (id or key) and new values

        Returns:
            Dict with ok flag and the written columns

        Raises:
            PlanUpdateError: If no valid field was given or the plan isn't identified
        """
        updates = request.to_updates()

        if not updates:
            raise PlanUpdateError(
                "Falta al menos un campo: nombre, precio_cop_anual, "
                "max_preguntas_por_asamblea o incluye_acta_detallada",
                suggestion="Send at least one non-empty field to update",
            )

        if not request.id and not request.key:
            raise PlanUpdateError(
                "Falta id o key del plan",
                suggestion="Identify the plan by its id or key",
            )

        try:
            SupabaseClient.update_plan(updates, plan_id=request.id, plan_key=request.key)
        except Exception as e:
            logger.error(f"Failed to update plan: {e}")
            raise

        return {"ok": True, "updated": updates}
