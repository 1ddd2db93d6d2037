# =============================================================================
# core/rules/pricing.py - Pro Subscription Price
# =============================================================================
# The Pro annual price (per property, in COP) comes from configuration.
# It is built once from Settings at startup and injected where needed, so
# tests can pass a fixed value.
#
# Usage:
#   from core.rules.pricing import PricingConfig
#   pricing = PricingConfig.from_settings(settings)
#   pricing.format_pro_price()  # "$ 200.000"
# =============================================================================

from __future__ import annotations

import math
from dataclasses import dataclass

DEFAULT_PRO_ANNUAL_PRICE_COP = 200000


@dataclass(frozen=True)
class PricingConfig:
    """Pricing values shared by the billing endpoints."""
    pro_annual_price_cop: int = DEFAULT_PRO_ANNUAL_PRICE_COP

    def __post_init__(self):
        # Negative or unusable prices clamp to 0
        price = self.pro_annual_price_cop
        if price is None or not math.isfinite(price) or price < 0:
            price = 0
        object.__setattr__(self, "pro_annual_price_cop", int(price))

    @classmethod
    def from_settings(cls, settings) -> "PricingConfig":
        return cls(pro_annual_price_cop=settings.PRECIO_PRO_ANUAL_COP)

    @property
    def pro_price_cents(self) -> int:
        """Price in cents, as the payment gateway expects it."""
        return self.pro_annual_price_cop * 100

    def format_pro_price(self) -> str:
        """
        Format the price in es-CO currency style.

        Thousands are grouped with "." and no decimals are shown,
        e.g. 200000 -> "$ 200.000".
        """
        grouped = f"{self.pro_annual_price_cop:,}".replace(",", ".")
        return f"$ {grouped}"
