# =============================================================================
# core/rules/plan_limits.py - Effective Plan Limits
# =============================================================================
# Resolves what a property may actually do given its plan tier and the
# manager's token balance:
#   - max_questions_per_assembly
#   - includes_detailed_minutes (acta detallada)
#
# Entitlement gate:
#   pilot            -> paid-tier limits, always
#   pro, tokens > 0  -> paid-tier limits
#   pro, tokens <= 0 -> free limits (no grace period, no partial credit)
#   anything else    -> free limits
#
# The `planes` catalog may override the hard-coded defaults. Precedence is an
# explicit merge: tier defaults first, then any override field that is present
# and valid in the catalog row of the tier actually honored. A downgraded pro
# therefore gets the free row, the same as a nominal free plan.
#
# Usage:
#   from core.rules.plan_limits import resolve_plan_limits
#   limits = resolve_plan_limits("pro", tokens_disponibles=12, plan_record=row)
# =============================================================================

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Any, Iterable, Mapping

from core.models.billing import PlanType

logger = logging.getLogger(__name__)


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True)
class PlanLimits:
    """Feature limits for one tier."""
    max_questions_per_assembly: int
    includes_detailed_minutes: bool

    def to_dict(self) -> dict[str, Any]:
        """Database/API column names."""
        return {
            "max_preguntas_por_asamblea": self.max_questions_per_assembly,
            "incluye_acta_detallada": self.includes_detailed_minutes,
        }


@dataclass(frozen=True)
class PlanLimitOverrides:
    """
    Catalog overrides for a tier.

    A field set to None is absent and leaves the default untouched.
    """
    max_questions_per_assembly: int | None = None
    includes_detailed_minutes: bool | None = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any] | None) -> "PlanLimitOverrides":
        """
        Build overrides from a `planes` row.

        Only well-typed values count as present: a non-negative integer
        (bools excluded) for the question limit and a real bool for the
        minutes flag. Anything else is ignored.
        """
        if not record:
            return cls()

        max_questions = record.get("max_preguntas_por_asamblea")
        if isinstance(max_questions, bool) or not isinstance(max_questions, (int, float)):
            max_questions = None
        elif not math.isfinite(max_questions) or max_questions < 0 or max_questions != int(max_questions):
            max_questions = None
        else:
            max_questions = int(max_questions)

        detailed = record.get("incluye_acta_detallada")
        if not isinstance(detailed, bool):
            detailed = None

        return cls(
            max_questions_per_assembly=max_questions,
            includes_detailed_minutes=detailed,
        )


# =============================================================================
# Tier Defaults
# =============================================================================

FREE_LIMITS = PlanLimits(
    max_questions_per_assembly=2,
    includes_detailed_minutes=False,
)

# 999 questions is "unlimited" for any real assembly
PAID_LIMITS = PlanLimits(
    max_questions_per_assembly=999,
    includes_detailed_minutes=True,
)

DEFAULT_LIMITS: dict[str, PlanLimits] = {
    PlanType.FREE.value: FREE_LIMITS,
    PlanType.PRO.value: PAID_LIMITS,
    PlanType.PILOT.value: PAID_LIMITS,
}


# =============================================================================
# Resolution
# =============================================================================

def merge_limits(defaults: PlanLimits, overrides: PlanLimitOverrides) -> PlanLimits:
    """Apply the present override fields on top of `defaults`."""
    changes: dict[str, Any] = {}
    if overrides.max_questions_per_assembly is not None:
        changes["max_questions_per_assembly"] = overrides.max_questions_per_assembly
    if overrides.includes_detailed_minutes is not None:
        changes["includes_detailed_minutes"] = overrides.includes_detailed_minutes
    return replace(defaults, **changes) if changes else defaults


def qualifies_for_paid_tier(plan_key: str | None, tokens_disponibles: float) -> bool:
    """
    Check the entitlement gate.

    Args:
        plan_key: Nominal plan key
        tokens_disponibles: Manager's token balance

    Returns:
        True for pilot, True for pro with a strictly positive balance,
        False otherwise
    """
    if plan_key == PlanType.PILOT.value:
        return True
    if plan_key == PlanType.PRO.value:
        try:
            return float(tokens_disponibles) > 0
        except (TypeError, ValueError):
            return False
    return False


def limits_key(plan_key: str | None, tokens_disponibles: float = 0) -> str:
    """
    Key of the tier whose limits are honored.

    Unknown keys and downgraded paid plans both land on "free", so they
    share the free catalog row with nominal free plans.
    """
    if isinstance(plan_key, PlanType):
        plan_key = plan_key.value

    if plan_key not in DEFAULT_LIMITS:
        return PlanType.FREE.value

    if plan_key != PlanType.FREE.value and not qualifies_for_paid_tier(plan_key, tokens_disponibles):
        logger.debug(f"Plan '{plan_key}' downgraded to free limits (tokens={tokens_disponibles})")
        return PlanType.FREE.value

    return plan_key


def resolve_plan_limits(
    plan_key: str | None,
    tokens_disponibles: float = 0,
    plan_record: Mapping[str, Any] | None = None,
) -> PlanLimits:
    """
    Resolve the limits a property actually gets.

    Args:
        plan_key: Nominal plan key ("free", "pro", "pilot"). Unknown keys
            resolve to free limits.
        tokens_disponibles: Manager's token balance
        plan_record: Optional `planes` row. Its overrides apply only when
            its key matches the tier actually honored (see `limits_key`).

    Returns:
        PlanLimits for the tier that is actually honored

    Example:
        resolve_plan_limits("pro", 0)     # FREE_LIMITS
        resolve_plan_limits("pro", 1)     # PAID_LIMITS
        resolve_plan_limits("pilot", 0)   # PAID_LIMITS
    """
    key = limits_key(plan_key, tokens_disponibles)
    defaults = DEFAULT_LIMITS[key]

    if plan_record and plan_record.get("key") == key:
        return merge_limits(defaults, PlanLimitOverrides.from_record(plan_record))

    return defaults


def find_plan_by_key(
    plans: Iterable[Mapping[str, Any]] | None,
    plan_key: str,
) -> Mapping[str, Any] | None:
    """Return the first catalog row with `plan_key`, or None."""
    if not plans:
        return None
    return next((p for p in plans if p.get("key") == plan_key), None)
