# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for Supabase database operations.
# It implements the singleton pattern to reuse a single client connection
# and provides specialized methods for fetching:
# - The plan catalog (`planes`)
# - Organizations (properties) and their plan fields
# - Manager profiles and token wallets
# - Units and their ownership coefficients
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   plans = SupabaseClient.fetch_active_plans()
# =============================================================================

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from supabase import create_client, Client

from app.config import settings
from lib.utils import normalize_uuid

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgREST code for "no rows" on .single()
NO_ROWS_CODE = "PGRST116"


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Carries a machine-readable code and a suggestion on how to fix it.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Typed wrapper for Supabase database operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.

    Example:
        tokens = SupabaseClient.fetch_user_tokens(user_id)
        units = SupabaseClient.count_units(organization_id)
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).
        Access checks are done by the services before any read.

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    # -------------------------------------------------------------------------
    # Plan Catalog
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_active_plans(cls) -> list[dict[str, Any]]:
        """
        Fetch active plans for public display, cheapest first.

        Returns:
            List of dicts with key, nombre, precio_cop_anual

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table("planes")
                .select("key, nombre, precio_cop_anual")
                .eq("activo", True)
                .order("precio_cop_anual")
                .execute()
            )
            return response.data or []

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch plans: {e}",
                code="FETCH_PLANS_FAILED",
                suggestion="Check that the planes table exists and is readable"
            )

    @classmethod
    def fetch_all_plans(cls) -> list[dict[str, Any]]:
        """
        Fetch the full plan catalog, including inactive plans and limits.

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table("planes")
                .select(
                    "id, key, nombre, precio_cop_anual, activo, "
                    "max_preguntas_por_asamblea, incluye_acta_detallada"
                )
                .order("precio_cop_anual")
                .execute()
            )
            return response.data or []

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch plan catalog: {e}",
                code="FETCH_PLANS_FAILED",
                suggestion="Check that the planes table exists and is readable"
            )

    @classmethod
    def update_plan(
        cls,
        updates: dict[str, Any],
        plan_id: str | None = None,
        plan_key: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        Update a catalog row located by id (preferred) or key.

        Args:
            updates: Columns to write
            plan_id: Row id
            plan_key: Plan key, used when no id is given

        Returns:
            Updated rows

        Raises:
            SupabaseClientError: If neither id nor key is given, or the update fails
        """
        if not plan_id and not plan_key:
            raise SupabaseClientError(
                message="Missing plan id or key",
                code="PLAN_LOCATOR_MISSING",
                suggestion="Pass either the plan id or its key"
            )

        client = cls.get_client()
        query = client.table("planes").update(updates)
        query = query.eq("id", plan_id) if plan_id else query.eq("key", plan_key)

        try:
            response = query.execute()
            logger.info(f"Updated plan {plan_id or plan_key}: {sorted(updates)}")
            return response.data or []

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to update plan: {e}",
                code="UPDATE_PLAN_FAILED",
                details={"plan_id": plan_id, "plan_key": plan_key}
            )

    # -------------------------------------------------------------------------
    # Organizations
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_organization(cls, organization_id: str | UUID) -> dict[str, Any] | None:
        """
        Fetch a property with its plan fields.

        Returns:
            Organization dict, or None if not found

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()
        organization_id_str = normalize_uuid(organization_id)

        try:
            response = (
                client.table("organizations")
                .select("id, name, plan_type, plan_active_until, plan_status")
                .eq("id", organization_id_str)
                .single()
                .execute()
            )
            return response.data

        except Exception as e:
            if NO_ROWS_CODE in str(e):
                return None
            raise SupabaseClientError(
                message=f"Failed to fetch organization: {e}",
                code="FETCH_ORGANIZATION_FAILED",
                suggestion="Check that the organization_id exists",
                details={"organization_id": organization_id_str}
            )

    @classmethod
    def fetch_organization_profiles(cls, organization_id: str | UUID) -> list[dict[str, Any]]:
        """
        Fetch the profiles linked to a property.

        Used to verify that the caller manages the property.

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()
        organization_id_str = normalize_uuid(organization_id)

        try:
            response = (
                client.table("profiles")
                .select("id, user_id, tokens_disponibles")
                .eq("organization_id", organization_id_str)
                .execute()
            )
            return response.data or []

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch profiles: {e}",
                code="FETCH_PROFILES_FAILED",
                details={"organization_id": organization_id_str}
            )

    # -------------------------------------------------------------------------
    # Token Wallet
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_user_tokens(cls, user_id: str | UUID) -> int | None:
        """
        Fetch the manager's token balance.

        Looks the profile up by user_id first, then by id (older profiles
        were keyed by the auth uid).

        Returns:
            The raw balance, or None if the user has no profile

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()
        user_id_str = normalize_uuid(user_id)

        try:
            for column in ("user_id", "id"):
                response = (
                    client.table("profiles")
                    .select("tokens_disponibles")
                    .eq(column, user_id_str)
                    .limit(1)
                    .execute()
                )
                if response.data:
                    return response.data[0].get("tokens_disponibles")
            return None

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch token balance: {e}",
                code="FETCH_TOKENS_FAILED",
                details={"user_id": user_id_str}
            )

    # -------------------------------------------------------------------------
    # Units
    # -------------------------------------------------------------------------

    @classmethod
    def count_units(cls, organization_id: str | UUID) -> int:
        """
        Count the units of a property.

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()
        organization_id_str = normalize_uuid(organization_id)

        try:
            response = (
                client.table("unidades")
                .select("id", count="exact", head=True)
                .eq("organization_id", organization_id_str)
                .execute()
            )
            return response.count or 0

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to count units: {e}",
                code="COUNT_UNITS_FAILED",
                details={"organization_id": organization_id_str}
            )

    @classmethod
    def fetch_unit_coefficients(cls, organization_id: str | UUID) -> list[float]:
        """
        Fetch the ownership coefficient of every unit in a property.

        Null coefficients are skipped.

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()
        organization_id_str = normalize_uuid(organization_id)

        try:
            response = (
                client.table("unidades")
                .select("coeficiente")
                .eq("organization_id", organization_id_str)
                .execute()
            )

            rows = response.data or []
            logger.debug(f"Fetched {len(rows)} units for organization {organization_id_str}")
            return [float(row["coeficiente"]) for row in rows if row.get("coeficiente") is not None]

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch unit coefficients: {e}",
                code="FETCH_UNITS_FAILED",
                details={"organization_id": organization_id_str}
            )
