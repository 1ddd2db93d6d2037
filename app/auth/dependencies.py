# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Verifies the Supabase session token sent by the dashboard.
#
# Supports both:
# - ES256 (current Supabase JWT signing keys) via JWKS
# - HS256 (legacy Supabase JWT secret) as fallback
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

import logging
import time
from uuid import UUID

import httpx
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError, ExpiredSignatureError

from app.config import settings
from app.auth.models import AuthUser
from app.exceptions import SuperAdminRequiredError
from core.rules.admin import can_access_super_admin

logger = logging.getLogger(__name__)

# HTTP Bearer token extractor
security = HTTPBearer()

JWKS_CACHE_TTL = 3600  # 1 hour
JWT_AUDIENCE = "authenticated"


class _JWKSCache:
    """Signing keys published by Supabase Auth, refreshed hourly."""

    def __init__(self):
        self.keys: dict = {}
        self.fetched_at: float = 0

    def url(self) -> str:
        return f"{settings.SUPABASE_URL.rstrip('/')}/auth/v1/.well-known/jwks.json"

    def get(self) -> dict:
        now = time.time()
        if self.keys and (now - self.fetched_at) < JWKS_CACHE_TTL:
            return self.keys

        try:
            response = httpx.get(self.url(), timeout=10)
            response.raise_for_status()
            self.keys = response.json()
            self.fetched_at = now
            logger.debug(f"Fetched JWKS from {self.url()}")
        except (httpx.HTTPError, ValueError) as e:
            # Stale keys are better than none
            logger.warning(f"Failed to fetch JWKS: {e}")

        return self.keys or {"keys": []}


_jwks = _JWKSCache()


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _get_signing_key(token: str) -> tuple:
    """
    Pick the key to verify a token with.

    Returns:
        Tuple of (key, algorithm)
    """
    try:
        header = jwt.get_unverified_header(token)
    except JWTError:
        return settings.SUPABASE_JWT_SECRET, "HS256"

    alg = header.get("alg", "HS256")
    kid = header.get("kid")

    if alg == "HS256":
        return settings.SUPABASE_JWT_SECRET, "HS256"

    if kid:
        for key in _jwks.get().get("keys", []):
            if key.get("kid") == kid:
                return key, alg

    logger.warning(f"Could not find key for alg={alg}, kid={kid}, falling back to HS256")
    return settings.SUPABASE_JWT_SECRET, "HS256"


def decode_token(token: str) -> AuthUser:
    """
    Verify a Supabase access token and extract the user.

    Raises:
        HTTPException: 401 if the token is invalid, expired or lacks a user id
    """
    try:
        signing_key, algorithm = _get_signing_key(token)
        payload = jwt.decode(
            token,
            signing_key,
            algorithms=[algorithm],
            audience=JWT_AUDIENCE,
        )
    except ExpiredSignatureError:
        logger.warning("JWT token has expired")
        raise _unauthorized("Token has expired")
    except JWTError as e:
        logger.warning(f"JWT validation failed: {e}")
        raise _unauthorized(f"Invalid token: {str(e)}")

    user_id = payload.get("sub")
    if not user_id:
        logger.warning("JWT token missing 'sub' claim")
        raise _unauthorized("Invalid token: missing user ID")

    try:
        user_uuid = UUID(user_id)
    except ValueError:
        logger.warning(f"Invalid UUID in token: {user_id}")
        raise _unauthorized("Invalid token: malformed user ID")

    logger.debug(f"Authenticated user: {user_id}")
    return AuthUser(id=user_uuid, email=payload.get("email"))


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> AuthUser:
    """
    Extract and validate the user from the Bearer token.

    Raises:
        HTTPException: 401 if token is invalid or expired
    """
    return decode_token(credentials.credentials)


async def require_super_admin(
    user: AuthUser = Depends(get_current_user)
) -> AuthUser:
    """
    Allow only the configured administrator accounts.

    Raises:
        HTTPException: 401 if the token carries no email
        SuperAdminRequiredError: 403 if the email isn't an admin email
    """
    if not user.email:
        raise _unauthorized("No autorizado")

    if not can_access_super_admin(user.email, *settings.admin_emails):
        logger.warning(f"Super-admin access denied for {user.email}")
        raise SuperAdminRequiredError()

    return user
