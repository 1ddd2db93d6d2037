# =============================================================================
# tests/test_token_cost.py - Token Wallet Pricing Tests
# =============================================================================
# Tests for:
# - token_cost clamping (negative, fractional, unusable input)
# - can_afford against the cost
# =============================================================================

import math

import pytest

from core.rules.token_cost import TOKENS_PER_UNIT, can_afford, token_cost
from lib.utils import to_non_negative_int


class TestTokenCost:
    """Test token_cost."""

    @pytest.mark.parametrize("units", [0, 1, 2, 37, 250, 10_000])
    def test_one_token_per_unit(self, units):
        """For whole non-negative counts the cost equals the count."""
        assert token_cost(units) == units

    @pytest.mark.parametrize(
        "units, expected",
        [
            (-1, 0),
            (-0.5, 0),
            (12.9, 12),
            (0.99, 0),
            (37.0, 37),
        ],
    )
    def test_clamped(self, units, expected):
        """Negative counts clamp to 0; fractions are floored."""
        assert token_cost(units) == expected

    @pytest.mark.parametrize("units", [None, "muchas", math.nan, math.inf, -math.inf])
    def test_unusable_counts_are_zero(self, units):
        assert token_cost(units) == 0

    @pytest.mark.parametrize("units", [-3, 12.9, "12.7", None, math.nan])
    def test_same_coercion_as_wallet(self, units):
        """Unit counts and balances are cleaned up the same way."""
        assert token_cost(units) == to_non_negative_int(units)

    def test_numeric_string(self):
        """Database counts sometimes arrive as strings."""
        assert token_cost("37") == 37

    def test_rate(self):
        assert TOKENS_PER_UNIT == 1

    def test_returns_int(self):
        assert isinstance(token_cost(12.9), int)


class TestCanAfford:
    """Test can_afford."""

    def test_one_token_short(self):
        """37 units with 36 tokens is not enough."""
        assert can_afford(36, 37) is False

    def test_exact_balance(self):
        """37 units with 37 tokens is enough."""
        assert can_afford(37, 37) is True

    def test_surplus(self):
        assert can_afford(100, 37) is True

    def test_zero_units_always_affordable(self):
        assert can_afford(0, 0) is True
        assert can_afford(0, -5) is True

    def test_fractional_units_use_floored_cost(self):
        """12.9 units cost 12 tokens."""
        assert can_afford(12, 12.9) is True
        assert can_afford(11, 12.9) is False

    @pytest.mark.parametrize("balance", [0, 5, 36, 37, 38, 1000])
    @pytest.mark.parametrize("units", [0, 1, 36, 37, 38, -3, 7.5])
    def test_matches_cost_comparison(self, balance, units):
        """can_afford is exactly balance >= token_cost(units)."""
        assert can_afford(balance, units) == (balance >= token_cost(units))

    @pytest.mark.parametrize("balance", [math.nan, None, "x"])
    def test_unusable_balance_never_suffices(self, balance):
        assert can_afford(balance, 1) is False
