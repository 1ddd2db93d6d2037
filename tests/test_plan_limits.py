# =============================================================================
# tests/test_plan_limits.py - Effective Plan Limits Tests
# =============================================================================
# Tests for:
# - The pilot/pro/free entitlement gate
# - Catalog overrides and their precedence over defaults
# - Override validation (only well-typed values count)
# - find_plan_by_key
# =============================================================================

import math

import pytest

from core.models.billing import PlanType
from core.rules.plan_limits import (
    FREE_LIMITS,
    PAID_LIMITS,
    PlanLimitOverrides,
    PlanLimits,
    find_plan_by_key,
    limits_key,
    merge_limits,
    qualifies_for_paid_tier,
    resolve_plan_limits,
)


# =============================================================================
# Entitlement Gate
# =============================================================================

class TestEntitlementGate:
    """Test which tiers get paid limits."""

    def test_pilot_without_tokens(self):
        """Pilot always qualifies, even with an empty wallet."""
        limits = resolve_plan_limits("pilot", tokens_disponibles=0)
        assert limits.includes_detailed_minutes is True
        assert limits.max_questions_per_assembly == 999

    def test_pro_without_tokens_degrades(self):
        """Pro with 0 tokens gets free defaults."""
        limits = resolve_plan_limits("pro", tokens_disponibles=0)
        assert limits == FREE_LIMITS
        assert limits.max_questions_per_assembly == 2
        assert limits.includes_detailed_minutes is False

    def test_pro_with_one_token(self):
        """A single token is enough for pro limits."""
        assert resolve_plan_limits("pro", tokens_disponibles=1) == PAID_LIMITS

    def test_pro_negative_balance_degrades(self):
        assert resolve_plan_limits("pro", tokens_disponibles=-10) == FREE_LIMITS

    def test_free(self):
        assert resolve_plan_limits("free", tokens_disponibles=500) == FREE_LIMITS

    @pytest.mark.parametrize("key", ["enterprise", "", None, "PRO"])
    def test_unknown_key_falls_back_to_free(self, key):
        assert resolve_plan_limits(key, tokens_disponibles=500) == FREE_LIMITS

    def test_enum_key_accepted(self):
        assert resolve_plan_limits(PlanType.PILOT) == PAID_LIMITS

    @pytest.mark.parametrize(
        "key, tokens, expected",
        [
            ("pilot", 0, True),
            ("pro", 0, False),
            ("pro", 0.5, True),
            ("pro", 1, True),
            ("pro", None, False),
            ("free", 100, False),
        ],
    )
    def test_qualifies_for_paid_tier(self, key, tokens, expected):
        assert qualifies_for_paid_tier(key, tokens) is expected


# =============================================================================
# Catalog Overrides
# =============================================================================

class TestCatalogOverrides:
    """Test merging catalog rows over tier defaults."""

    def test_matching_record_overrides(self):
        record = {"key": "pro", "max_preguntas_por_asamblea": 50, "incluye_acta_detallada": True}
        limits = resolve_plan_limits("pro", tokens_disponibles=10, plan_record=record)
        assert limits == PlanLimits(50, True)

    def test_record_for_other_key_ignored(self):
        record = {"key": "pilot", "max_preguntas_por_asamblea": 5, "incluye_acta_detallada": False}
        limits = resolve_plan_limits("pro", tokens_disponibles=10, plan_record=record)
        assert limits == PAID_LIMITS

    def test_downgraded_pro_ignores_pro_record(self):
        """No tokens: pro overrides don't leak into the free tier."""
        record = {"key": "pro", "max_preguntas_por_asamblea": 50, "incluye_acta_detallada": True}
        limits = resolve_plan_limits("pro", tokens_disponibles=0, plan_record=record)
        assert limits == FREE_LIMITS

    def test_downgraded_pro_uses_free_record(self):
        record = {"key": "free", "max_preguntas_por_asamblea": 3}
        limits = resolve_plan_limits("pro", tokens_disponibles=0, plan_record=record)
        assert limits == PlanLimits(3, False)

    def test_unknown_key_uses_free_record(self):
        record = {"key": "free", "incluye_acta_detallada": True}
        limits = resolve_plan_limits("enterprise", plan_record=record)
        assert limits == PlanLimits(2, True)

    def test_free_record_overrides_free(self):
        record = {"key": "free", "max_preguntas_por_asamblea": 3}
        limits = resolve_plan_limits("free", plan_record=record)
        assert limits == PlanLimits(3, False)

    def test_partial_override_keeps_other_default(self):
        record = {"key": "pilot", "incluye_acta_detallada": False}
        limits = resolve_plan_limits("pilot", plan_record=record)
        assert limits == PlanLimits(999, False)

    def test_zero_questions_is_a_valid_override(self):
        record = {"key": "free", "max_preguntas_por_asamblea": 0}
        assert resolve_plan_limits("free", plan_record=record).max_questions_per_assembly == 0

    @pytest.mark.parametrize(
        "value",
        [None, "50", -1, 2.5, True, math.nan, math.inf],
    )
    def test_invalid_question_override_ignored(self, value):
        record = {"key": "pilot", "max_preguntas_por_asamblea": value}
        assert resolve_plan_limits("pilot", plan_record=record).max_questions_per_assembly == 999

    def test_whole_float_question_override_accepted(self):
        """Numeric columns can come back as 50.0."""
        record = {"key": "pilot", "max_preguntas_por_asamblea": 50.0}
        limits = resolve_plan_limits("pilot", plan_record=record)
        assert limits.max_questions_per_assembly == 50
        assert isinstance(limits.max_questions_per_assembly, int)

    @pytest.mark.parametrize("value", [None, "true", 1, 0])
    def test_invalid_minutes_override_ignored(self, value):
        record = {"key": "pilot", "incluye_acta_detallada": value}
        assert resolve_plan_limits("pilot", plan_record=record).includes_detailed_minutes is True


class TestMergeLimits:
    """Test merge_limits precedence."""

    def test_no_overrides_returns_defaults(self):
        assert merge_limits(PAID_LIMITS, PlanLimitOverrides()) is PAID_LIMITS

    def test_present_fields_win(self):
        merged = merge_limits(FREE_LIMITS, PlanLimitOverrides(10, True))
        assert merged == PlanLimits(10, True)

    def test_defaults_untouched(self):
        merge_limits(FREE_LIMITS, PlanLimitOverrides(10, True))
        assert FREE_LIMITS == PlanLimits(2, False)

    def test_from_empty_record(self):
        assert PlanLimitOverrides.from_record(None) == PlanLimitOverrides()
        assert PlanLimitOverrides.from_record({}) == PlanLimitOverrides()


class TestPlanLimitsToDict:
    def test_column_names(self):
        assert FREE_LIMITS.to_dict() == {
            "max_preguntas_por_asamblea": 2,
            "incluye_acta_detallada": False,
        }


# =============================================================================
# find_plan_by_key
# =============================================================================

class TestFindPlanByKey:
    """Test catalog lookup."""

    def test_found(self, plan_catalog):
        assert find_plan_by_key(plan_catalog, "pro")["id"] == "plan-pro"

    def test_missing(self, plan_catalog):
        assert find_plan_by_key(plan_catalog, "enterprise") is None

    @pytest.mark.parametrize("plans", [None, []])
    def test_empty_catalog(self, plans):
        assert find_plan_by_key(plans, "pro") is None


class TestLimitsKey:
    """Test which catalog row applies."""

    @pytest.mark.parametrize(
        "key, tokens, expected",
        [
            ("pro", 5, "pro"),
            ("pro", 0, "free"),
            ("pilot", 0, "pilot"),
            ("free", 100, "free"),
            ("enterprise", 100, "free"),
            (None, 0, "free"),
            (PlanType.PRO, 1, "pro"),
        ],
    )
    def test_key(self, key, tokens, expected):
        assert limits_key(key, tokens) == expected
