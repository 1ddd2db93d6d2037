# =============================================================================
# tests/test_pricing_admin.py - Pricing Config & Admin Recognition Tests
# =============================================================================

from dataclasses import FrozenInstanceError

import pytest

from core.rules.admin import can_access_super_admin, is_super_admin
from core.rules.pricing import DEFAULT_PRO_ANNUAL_PRICE_COP, PricingConfig


# =============================================================================
# PricingConfig Tests
# =============================================================================

class TestPricingConfig:
    """Test PricingConfig."""

    def test_default_price(self):
        pricing = PricingConfig()
        assert pricing.pro_annual_price_cop == DEFAULT_PRO_ANNUAL_PRICE_COP == 200000

    def test_cents(self):
        assert PricingConfig(200000).pro_price_cents == 20000000

    @pytest.mark.parametrize(
        "price, expected",
        [
            (200000, "$ 200.000"),
            (1500000, "$ 1.500.000"),
            (950, "$ 950"),
            (0, "$ 0"),
        ],
    )
    def test_format(self, price, expected):
        assert PricingConfig(price).format_pro_price() == expected

    def test_negative_price_clamps_to_zero(self):
        assert PricingConfig(-100).pro_annual_price_cop == 0

    def test_from_settings(self):
        """Built from any object exposing PRECIO_PRO_ANUAL_COP."""

        class FakeSettings:
            PRECIO_PRO_ANUAL_COP = 250000

        pricing = PricingConfig.from_settings(FakeSettings())
        assert pricing.pro_annual_price_cop == 250000

    def test_frozen(self):
        pricing = PricingConfig(1000)
        with pytest.raises(FrozenInstanceError):
            pricing.pro_annual_price_cop = 5


# =============================================================================
# Admin Recognition Tests
# =============================================================================

class TestIsSuperAdmin:
    """Test is_super_admin."""

    def test_exact_match(self):
        assert is_super_admin("admin@example.com", "admin@example.com")

    def test_case_and_whitespace_ignored(self):
        assert is_super_admin("  ADMIN@example.com ", "Admin@Example.com")

    def test_other_email(self):
        assert not is_super_admin("gestor@conjunto.co", "admin@example.com")

    @pytest.mark.parametrize(
        "email, configured",
        [
            (None, "admin@example.com"),
            ("", "admin@example.com"),
            ("admin@example.com", None),
            ("admin@example.com", "   "),
            (None, None),
        ],
    )
    def test_missing_side_is_false(self, email, configured):
        assert is_super_admin(email, configured) is False

    def test_any_configured_email(self):
        assert can_access_super_admin("ops@example.com", "admin@example.com", "ops@example.com")
        assert not can_access_super_admin("x@example.com", "admin@example.com", "")
