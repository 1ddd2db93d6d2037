# =============================================================================
# core/services/organization_service.py - Property Status Business Logic
# =============================================================================
# Combines database reads with the billing rules to answer the dashboard's
# questions about one property:
# - Does the manager's wallet cover a paid operation?
# - Which plan and limits are actually honored?
# - Do the ownership coefficients add up?
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from app.exceptions import OrganizationAccessDeniedError, OrganizationNotFoundError
from core.models.billing import PlanLimitsResponse
from core.models.organization import CoefficientSummary, OrganizationStatus
from core.rules.coefficients import accepted_coefficient_range, is_coefficient_sum_valid
from core.rules.plan_limits import limits_key, resolve_plan_limits
from core.rules.plan_status import effective_plan
from core.rules.token_cost import can_afford, token_cost
from core.services.plan_service import PlanService
from lib.supabase_client import SupabaseClient
from lib.utils import normalize_uuid, to_non_negative_int

logger = logging.getLogger(__name__)


class OrganizationService:
    """
    Service for property-level status.

    Every method checks that the caller manages the property before
    reading anything else.
    """

    @staticmethod
    def verify_access(
        organization_id: str | UUID,
        user_id: str | UUID,
    ) -> dict[str, Any]:
        """
        Verify the user has a profile in the organization.

        Profiles are matched by user_id or, for older rows, by id.

        Returns:
            The matching profile row

        Raises:
            OrganizationAccessDeniedError: If no profile matches
        """
        organization_id_str = normalize_uuid(organization_id)
        user_id_str = normalize_uuid(user_id)

        profiles = SupabaseClient.fetch_organization_profiles(organization_id_str)
        for profile in profiles:
            if str(profile.get("user_id")) == user_id_str or str(profile.get("id")) == user_id_str:
                return profile

        logger.info(f"User {user_id_str} denied access to organization {organization_id_str}")
        raise OrganizationAccessDeniedError(organization_id_str)

    @staticmethod
    def get_token_balance(user_id: str | UUID, profile: dict[str, Any] | None = None) -> int:
        """
        Manager's wallet balance.

        The wallet belongs to the manager, not the property, so it is read
        from the user's own profile. Falls back to the organization profile.
        """
        balance = SupabaseClient.fetch_user_tokens(user_id)
        if balance is None and profile is not None:
            balance = profile.get("tokens_disponibles")
        return to_non_negative_int(balance)

    @staticmethod
    def get_status(
        organization_id: str | UUID,
        user_id: str | UUID,
    ) -> OrganizationStatus:
        """
        Wallet, cost and entitlement status for a property.

        Args:
            organization_id: The property UUID
            user_id: The authenticated manager

        Returns:
            OrganizationStatus

        Raises:
            OrganizationAccessDeniedError: If the user doesn't manage the property
            OrganizationNotFoundError: If the property doesn't exist
        """
        organization_id_str = normalize_uuid(organization_id)
        profile = OrganizationService.verify_access(organization_id_str, user_id)

        organization = SupabaseClient.fetch_organization(organization_id_str)
        if not organization:
            raise OrganizationNotFoundError(organization_id_str)

        tokens = OrganizationService.get_token_balance(user_id, profile)
        units = SupabaseClient.count_units(organization_id_str)
        cost = token_cost(units)

        plan_type = organization.get("plan_type")
        plan_active_until = organization.get("plan_active_until")
        plan = effective_plan(plan_type, plan_active_until)

        # A downgraded pro reads the free row, like any other free property
        limits = resolve_plan_limits(
            plan,
            tokens_disponibles=tokens,
            plan_record=PlanService.get_plan_record(limits_key(plan, tokens)),
        )

        logger.debug(
            f"Organization {organization_id_str}: plan={plan_type}->{plan}, "
            f"tokens={tokens}, units={units}"
        )

        return OrganizationStatus(
            organization_id=organization_id_str,
            tokens_disponibles=tokens,
            unidades_conjunto=units,
            costo_operacion=cost,
            puede_operar=can_afford(tokens, units),
            plan_type=plan_type,
            plan_efectivo=plan,
            plan_active_until=plan_active_until,
            limites=PlanLimitsResponse(**limits.to_dict()),
        )

    @staticmethod
    def get_coefficient_summary(
        organization_id: str | UUID,
        user_id: str | UUID,
    ) -> CoefficientSummary:
        """
        Sum the unit coefficients of a property and validate the total.

        Raises:
            OrganizationAccessDeniedError: If the user doesn't manage the property
        """
        organization_id_str = normalize_uuid(organization_id)
        OrganizationService.verify_access(organization_id_str, user_id)

        coefficients = SupabaseClient.fetch_unit_coefficients(organization_id_str)
        # Rounded to absorb float noise from summing many shares
        total = round(sum(coefficients), 6)

        return CoefficientSummary(
            suma=total,
            valida=is_coefficient_sum_valid(total),
            rango_aceptado=accepted_coefficient_range(),
            unidades=len(coefficients),
        )
