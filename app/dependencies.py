# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from app.config import settings
from core.rules.pricing import PricingConfig
from lib.supabase_client import SupabaseClient


def get_supabase_client() -> type[SupabaseClient]:
    """
    Get Supabase client wrapper.

    Returns the singleton client wrapper.
    """
    return SupabaseClient


@lru_cache
def get_pricing_config() -> PricingConfig:
    """
    Pricing built once from settings.

    Tests override this with app.dependency_overrides.
    """
    return PricingConfig.from_settings(settings)


# Type aliases for dependency injection
SupabaseDep = Annotated[type[SupabaseClient], Depends(get_supabase_client)]
PricingDep = Annotated[PricingConfig, Depends(get_pricing_config)]
