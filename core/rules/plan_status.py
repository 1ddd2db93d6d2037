# =============================================================================
# core/rules/plan_status.py - Effective Plan (expiry aware)
# =============================================================================
# A property stores its nominal `plan_type` and an optional
# `plan_active_until`. Once a pro/pilot plan expires it is treated as free
# for both the UI and the feature limits.
# =============================================================================

from __future__ import annotations

from datetime import datetime, timezone

from core.models.billing import PlanType

_PAID_PLANS = {PlanType.PRO.value, PlanType.PILOT.value}


def parse_timestamp(value: str) -> datetime | None:
    """
    Parse an ISO 8601 timestamp from the database.

    Accepts a trailing "Z". Naive timestamps are taken as UTC.

    Returns:
        Aware datetime, or None if the string can't be parsed
    """
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except (ValueError, TypeError, AttributeError):
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def effective_plan(
    plan_type: str | None,
    plan_active_until: str | None,
    now: datetime | None = None,
) -> str:
    """
    Plan actually honored for a property.

    Args:
        plan_type: Nominal plan key
        plan_active_until: ISO expiry timestamp; missing means it never expires
        now: Reference instant (defaults to the current UTC time)

    Returns:
        "free" for free, unknown, expired or unparseable-expiry plans;
        the nominal key otherwise

    Example:
        effective_plan("pro", "2020-01-01T00:00:00Z")  # "free"
        effective_plan("pro", None)                    # "pro"
        effective_plan("pro", "not-a-date")            # "free"
    """
    if isinstance(plan_type, PlanType):
        plan_type = plan_type.value

    if not plan_type or plan_type == PlanType.FREE.value:
        return PlanType.FREE.value
    if plan_type not in _PAID_PLANS:
        return PlanType.FREE.value
    if not plan_active_until:
        return plan_type

    until = parse_timestamp(plan_active_until)
    if until is None:
        return PlanType.FREE.value

    current = now or datetime.now(timezone.utc)
    if current.tzinfo is None:
        current = current.replace(tzinfo=timezone.utc)

    if until <= current:
        return PlanType.FREE.value
    return plan_type
