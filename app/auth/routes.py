# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# Signup/login is handled by Supabase Auth client-side.
# These routes report who the current token belongs to.
# =============================================================================

import logging
from fastapi import APIRouter, Depends

from app.auth.dependencies import get_current_user
from app.auth.models import AuthUser, UserResponse
from app.config import settings
from core.rules.admin import can_access_super_admin
from core.services.organization_service import OrganizationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    user: AuthUser = Depends(get_current_user)
) -> UserResponse:
    """
    Get the current user with their token wallet.

    Raises:
        401: If not authenticated
    """
    tokens = OrganizationService.get_token_balance(user.id)

    return UserResponse(
        id=user.id,
        email=user.email,
        tokens_disponibles=tokens,
        is_super_admin=can_access_super_admin(user.email, *settings.admin_emails),
    )


@router.get("/verify")
async def verify_token(
    user: AuthUser = Depends(get_current_user)
) -> dict:
    """
    Verify that the current token is valid.

    Raises:
        401: If token is invalid or expired
    """
    return {
        "valid": True,
        "user_id": str(user.id),
        "email": user.email
    }
