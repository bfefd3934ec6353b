"""Charge cell facade — ties resolution, formatting, overrides and coupons together."""

from __future__ import annotations

from typing import Any

import structlog
from pydantic import BaseModel, Field

from pricing_display.core.config import DEFAULT_CONFIG, DisplayConfig
from pricing_display.coupons.discount import DiscountResult, apply_coupon, format_coupon_name
from pricing_display.overrides.diff import diff_override
from pricing_display.pricing.amounts import format_amount
from pricing_display.pricing.formatter import (
    TierTable,
    describe_tiers,
    effective_charge,
    format_charge,
    format_price_table_charge,
    format_tier_ranges,
)
from pricing_display.pricing.models import Coupon, Price, PriceOverride, PricingUnit
from pricing_display.pricing.resolver import ResolvedPrice, resolve_display
from pricing_display.pricing.validation import check_tiers, load_price

logger = structlog.get_logger(__name__)


class DiscountDisplay(BaseModel):
    """Formatted before/after amounts for a discounted charge."""

    original: str
    discounted: str
    coupon_name: str


class ChargeSummary(BaseModel):
    """Everything needed to render a price's charge cell."""

    charge: str
    discount: DiscountDisplay | None = None
    override_changes: list[str] = Field(default_factory=list)
    tier_table: TierTable | None = None

    @property
    def has_override(self) -> bool:
        return bool(self.override_changes)


class PriceDisplay:
    """Formats prices for display with a fixed :class:`DisplayConfig`.

    Args:
        config: Display settings. Defaults to :data:`DEFAULT_CONFIG`.
    """

    def __init__(self, config: DisplayConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> DisplayConfig:
        return self._config

    def load(self, payload: dict[str, Any], *, strict: bool = False) -> Price:
        """Parse an API payload into a :class:`Price` (see :func:`load_price`)."""
        return load_price(payload, strict=strict)

    def resolve(self, price: Price, pricing_unit: PricingUnit | None = None) -> ResolvedPrice:
        return resolve_display(price, pricing_unit, config=self._config)

    def charge(self, price: Price, pricing_unit: PricingUnit | None = None) -> str:
        """Short charge string for *price* under its own billing model."""
        resolved = self.resolve(price, pricing_unit)
        return format_charge(
            resolved.amount,
            resolved.symbol,
            price.billing_model,
            price.transform_quantity,
            resolved.tiers,
            precision=resolved.precision,
            config=self._config,
        )

    def table_charge(self, price: Price, pricing_unit: PricingUnit | None = None) -> str:
        return format_price_table_charge(price, pricing_unit, config=self._config)

    def tier_rows(self, price: Price, pricing_unit: PricingUnit | None = None) -> list[str]:
        resolved = self.resolve(price, pricing_unit)
        if not resolved.tiers:
            return []
        issues = check_tiers(resolved.tiers)
        if issues:
            logger.warning(
                "tier_integrity_issues",
                price_id=price.id,
                issues=[issue.message for issue in issues],
            )
        return format_tier_ranges(
            resolved.tiers, resolved.symbol, precision=resolved.precision, config=self._config
        )

    def diff(
        self,
        price: Price,
        override: PriceOverride | None,
        pricing_unit: PricingUnit | None = None,
    ) -> list[str]:
        return diff_override(price, override, pricing_unit, config=self._config)

    def discount(self, price: Price, coupon: Coupon | None) -> DiscountResult | None:
        return apply_coupon(price, coupon)

    def summarize(
        self,
        price: Price,
        *,
        override: PriceOverride | None = None,
        coupon: Coupon | None = None,
        overridden_amount: str | None = None,
        pricing_unit: PricingUnit | None = None,
    ) -> ChargeSummary:
        """Build the full charge cell for a line item.

        The discount block is only filled when a coupon applies and no
        overridden amount was given, since an overridden amount already
        reflects the negotiated price.
        """
        resolved = self.resolve(price, pricing_unit)
        charge = effective_charge(
            price,
            override,
            overridden_amount=overridden_amount,
            pricing_unit=pricing_unit,
            config=self._config,
        )

        discount: DiscountDisplay | None = None
        if coupon is not None and not overridden_amount:
            result = apply_coupon(price, coupon)
            if result is not None:
                discount = DiscountDisplay(
                    original=self._money(resolved, result.original_amount),
                    discounted=self._money(resolved, result.discounted_amount),
                    coupon_name=format_coupon_name(coupon, resolved.symbol, config=self._config),
                )

        summary = ChargeSummary(
            charge=charge,
            discount=discount,
            override_changes=self.diff(price, override, pricing_unit),
            tier_table=describe_tiers(price, override, pricing_unit, config=self._config),
        )
        logger.debug(
            "charge_summarized",
            price_id=price.id,
            discounted=discount is not None,
            override_changes=len(summary.override_changes),
        )
        return summary

    def _money(self, resolved: ResolvedPrice, amount: Any) -> str:
        return f"{resolved.symbol}{format_amount(amount, resolved.precision, config=self._config)}"
