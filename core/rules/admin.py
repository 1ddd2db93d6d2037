# =============================================================================
# core/rules/admin.py - Super Admin Recognition
# =============================================================================
# The super admin is identified by email, configured through
# SUPER_ADMIN_EMAIL (or ADMIN_EMAIL). Comparison ignores case and
# surrounding whitespace.
# =============================================================================


def is_super_admin(email: str | None, configured_email: str | None) -> bool:
    """
    Check whether `email` matches the configured admin email.

    Returns False when either side is missing or blank.
    """
    configured = (configured_email or "").strip().lower()
    candidate = (email or "").strip().lower()
    if not configured or not candidate:
        return False
    return candidate == configured


def can_access_super_admin(email: str | None, *configured_emails: str | None) -> bool:
    """True if `email` matches any of the configured admin emails."""
    return any(is_super_admin(email, configured) for configured in configured_emails)
