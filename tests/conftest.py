# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides a TestClient with authentication overridden
# - Provides sample database rows
# =============================================================================

import os
from uuid import UUID

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret-for-hs256-tokens")
os.environ.setdefault("SUPER_ADMIN_EMAIL", "Admin@Example.com")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient


USER_ID = UUID("11111111-1111-4111-8111-111111111111")
ORGANIZATION_ID = "22222222-2222-4222-8222-222222222222"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def manager_user():
    """Authenticated manager (not an admin)."""
    from app.auth.models import AuthUser
    return AuthUser(id=USER_ID, email="gestor@conjunto.co")


@pytest.fixture
def admin_user():
    """Authenticated super admin (email differs only in case/whitespace)."""
    from app.auth.models import AuthUser
    return AuthUser(id=USER_ID, email="  admin@example.com ")


@pytest.fixture
def client():
    """TestClient without authentication overrides."""
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_client(manager_user):
    """TestClient authenticated as the manager."""
    from app.auth.dependencies import get_current_user
    from app.main import app

    app.dependency_overrides[get_current_user] = lambda: manager_user
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(admin_user):
    """TestClient authenticated as the super admin."""
    from app.auth.dependencies import get_current_user
    from app.main import app

    app.dependency_overrides[get_current_user] = lambda: admin_user
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def plan_catalog():
    """Rows of the `planes` table."""
    return [
        {
            "id": "plan-free",
            "key": "free",
            "nombre": "Plan Gratuito",
            "precio_cop_anual": 0,
            "activo": True,
            "max_preguntas_por_asamblea": 2,
            "incluye_acta_detallada": False,
        },
        {
            "id": "plan-pilot",
            "key": "pilot",
            "nombre": "Plan Piloto",
            "precio_cop_anual": 0,
            "activo": False,
            "max_preguntas_por_asamblea": 20,
            "incluye_acta_detallada": True,
        },
        {
            "id": "plan-pro",
            "key": "pro",
            "nombre": "Plan Pro",
            "precio_cop_anual": 200000,
            "activo": True,
            "max_preguntas_por_asamblea": 50,
            "incluye_acta_detallada": True,
        },
    ]


@pytest.fixture
def organization_row():
    """A property on an active Pro plan."""
    return {
        "id": ORGANIZATION_ID,
        "name": "Conjunto Los Pinos",
        "plan_type": "pro",
        "plan_active_until": "2999-12-31T23:59:59Z",
        "plan_status": "active",
    }


@pytest.fixture
def manager_profiles():
    """Profiles of the property; the manager is matched by user_id."""
    return [
        {"id": "profile-1", "user_id": str(USER_ID), "tokens_disponibles": 40},
        {"id": "profile-2", "user_id": "33333333-3333-4333-8333-333333333333", "tokens_disponibles": 5},
    ]
