# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Asambleas PH API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings
from app.exceptions import AsambleasException, asambleas_exception_handler
from app.routers import health, planes, organizations, billing, super_admin
from app.auth import routes as auth_routes
from lib.supabase_client import SupabaseClientError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Logs startup configuration; the Supabase client is created lazily on
    first use.
    """
    logger.info(f"Starting Asambleas API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    if not settings.SUPER_ADMIN_EMAIL and not settings.ADMIN_EMAIL:
        logger.warning("No admin email configured; super-admin endpoints are unreachable")

    yield

    logger.info("Shutting down Asambleas API")


# Create FastAPI application
app = FastAPI(
    title="Asambleas PH API",
    description="""
## Condominium Assembly Billing API

Token wallet, plan entitlements and ownership-coefficient checks for the
assembly voting dashboard.

### Billing Model

- **1 token = 1 unit**: operating on a property costs as many tokens as it has units
- **Plans**: `free` (2 questions, no detailed minutes), `pro` (needs tokens), `pilot`
- **Expiry**: paid plans past `plan_active_until` are treated as `free`
- **Coefficients**: ownership shares must sum to 100% (±0.1)
""",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Auth",
            "description": "Current user and token verification",
        },
        {
            "name": "Plans",
            "description": "Public plan catalog and Pro price",
        },
        {
            "name": "Organizations",
            "description": "Token wallet status and coefficient summary per property",
        },
        {
            "name": "Billing",
            "description": "Live token cost and coefficient previews",
        },
        {
            "name": "Super Admin",
            "description": "Plan catalog administration",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(AsambleasException)
async def handle_asambleas_exception(request: Request, exc: AsambleasException):
    """Handle custom Asambleas exceptions."""
    return await asambleas_exception_handler(request, exc)


@app.exception_handler(SupabaseClientError)
async def handle_supabase_error(request: Request, exc: SupabaseClientError):
    """Database errors: logged in full, reported by code only."""
    logger.error(f"Database error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=502,
        content={
            "detail": "Database request failed",
            "code": exc.code,
            "suggestion": exc.suggestion,
        }
    )


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

app.include_router(
    auth_routes.router,
    prefix="/api/v1/auth",
    tags=["Auth"]
)

app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

app.include_router(
    planes.router,
    prefix="/api/v1/planes",
    tags=["Plans"]
)

app.include_router(
    organizations.router,
    prefix="/api/v1/organizations",
    tags=["Organizations"]
)

app.include_router(
    billing.router,
    prefix="/api/v1",
    tags=["Billing"]
)

app.include_router(
    super_admin.router,
    prefix="/api/v1/super-admin",
    tags=["Super Admin"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """Root endpoint - returns API info."""
    return {
        "name": "Asambleas PH API",
        "version": __version__,
        "docs": "/docs",
        "health": "/api/v1/health",
    }
