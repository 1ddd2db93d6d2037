# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors carry a code and, where possible, a suggestion on how to fix them.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class AsambleasException(Exception):
    """
    Base exception for the Asambleas API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "ASAMBLEAS_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Organization Exceptions
# =============================================================================

class OrganizationNotFoundError(AsambleasException):
    """Raised when an organization ID doesn't exist."""

    def __init__(self, organization_id: str):
        super().__init__(
            message=f"Organization not found: {organization_id}",
            code="ORGANIZATION_NOT_FOUND",
            status_code=404,
            suggestion="Check that the organization_id is correct",
            details={"organization_id": organization_id}
        )


class OrganizationAccessDeniedError(AsambleasException):
    """Raised when the caller has no profile in the organization."""

    def __init__(self, organization_id: str):
        super().__init__(
            message="No tienes acceso a este conjunto",
            code="ORGANIZATION_ACCESS_DENIED",
            status_code=403,
            suggestion="Select a property you manage",
            details={"organization_id": organization_id}
        )


# =============================================================================
# Admin Exceptions
# =============================================================================

class SuperAdminRequiredError(AsambleasException):
    """Raised when a non-admin calls a super-admin endpoint."""

    def __init__(self):
        super().__init__(
            message="Acceso denegado",
            code="SUPER_ADMIN_REQUIRED",
            status_code=403,
            suggestion="Sign in with the configured administrator account",
        )


class PlanUpdateError(AsambleasException):
    """Raised when a plan catalog edit is incomplete."""

    def __init__(self, message: str, suggestion: str | None = None):
        super().__init__(
            message=message,
            code="PLAN_UPDATE_INVALID",
            status_code=400,
            suggestion=suggestion,
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def asambleas_exception_handler(
    request: Request,
    exc: AsambleasException
) -> JSONResponse:
    """
    Convert AsambleasException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )
