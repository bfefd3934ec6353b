"""Charge strings for each billing model, plus tier range rows."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from pydantic import BaseModel, Field

from pricing_display.core.config import DisplayConfig
from pricing_display.core.constants import (
    INFINITY,
    TIERED_MODELS,
    BillingModel,
    PriceType,
    TierMode,
)
from pricing_display.pricing.amounts import format_amount, parse_decimal
from pricing_display.pricing.models import (
    Price,
    PriceOverride,
    PricingUnit,
    Tier,
    TransformQuantity,
)
from pricing_display.pricing.resolver import resolve_display


class TierTable(BaseModel):
    """Tier breakdown shown next to a tiered charge."""

    title: str
    tier_mode: str | None = None
    overridden: bool = False
    rows: list[str] = Field(default_factory=list)


def package_size(transform_quantity: TransformQuantity | None) -> int:
    if transform_quantity is None or not transform_quantity.divide_by:
        return 1
    return transform_quantity.divide_by


def format_charge(
    amount: str | None,
    symbol: str,
    billing_model: str | None,
    transform_quantity: TransformQuantity | None = None,
    tiers: Sequence[Tier] | None = None,
    *,
    precision: int | None = None,
    config: DisplayConfig | None = None,
) -> str:
    """Render a short charge string for *billing_model*.

    Tiered models have no single amount, so the first tier's unit rate is
    shown as the headline figure. Unknown models render like a flat fee.
    """
    if billing_model == BillingModel.PACKAGE:
        formatted = format_amount(amount, precision, config=config)
        return f"{symbol}{formatted} / {package_size(transform_quantity)} units"
    if billing_model in TIERED_MODELS:
        first_rate = tiers[0].unit_amount if tiers else "0"
        formatted = format_amount(first_rate or "0", precision, config=config)
        return f"starts at {symbol}{formatted} per unit"
    return f"{symbol}{format_amount(amount, precision, config=config)}"


def tier_lower_bound(tiers: Sequence[Tier], index: int) -> int:
    """Lower bound of the tier at *index*: the previous tier's ``up_to``, or 0."""
    if index == 0:
        return 0
    return tiers[index - 1].up_to or 0


def tier_upper_label(tier: Tier) -> str:
    return INFINITY if tier.up_to is None else str(tier.up_to)


def format_tier_range(
    tiers: Sequence[Tier],
    index: int,
    symbol: str,
    *,
    precision: int | None = None,
    config: DisplayConfig | None = None,
) -> str:
    tier = tiers[index]
    lower = tier_lower_bound(tiers, index)
    upper = INFINITY if index == len(tiers) - 1 else tier_upper_label(tier)
    line = (
        f"{lower} - {upper} units: "
        f"{symbol}{format_amount(tier.unit_amount, precision, config=config)} per unit"
    )
    if parse_decimal(tier.flat_amount) > 0:
        line += f" + {symbol}{format_amount(tier.flat_amount, precision, config=config)} flat fee"
    return line


def format_tier_ranges(
    tiers: Sequence[Tier],
    symbol: str,
    *,
    precision: int | None = None,
    config: DisplayConfig | None = None,
) -> list[str]:
    return [
        format_tier_range(tiers, i, symbol, precision=precision, config=config)
        for i in range(len(tiers))
    ]


def format_price_table_charge(
    price: Price,
    pricing_unit: PricingUnit | None = None,
    *,
    config: DisplayConfig | None = None,
) -> str:
    """Charge text for a price row in plan and subscription tables.

    Fixed prices show the bare amount. Usage prices are suffixed per unit or
    per package, and tiered usage prices show their starting rate.
    """
    resolved = resolve_display(price, pricing_unit, config=config)
    symbol = resolved.symbol
    amount = format_amount(resolved.amount, resolved.precision, config=config)

    if price.type == PriceType.FIXED:
        return f"{symbol}{amount}"
    if price.billing_model == BillingModel.PACKAGE:
        units = format_amount(package_size(price.transform_quantity), 0, config=config)
        return f"{symbol}{amount} / {units} units"
    if price.billing_model == BillingModel.FLAT_FEE:
        return f"{symbol}{amount} / unit"
    if price.billing_model in TIERED_MODELS:
        first_rate = resolved.tiers[0].unit_amount if resolved.tiers else "0"
        rate = format_amount(first_rate, resolved.precision, config=config)
        return f"Starts at {symbol}{rate} / unit"
    return price.display_amount or f"{symbol}{amount}"


def actual_price_for_total(price: Price, pricing_unit: PricingUnit | None = None) -> Decimal:
    """Numeric price used when summing line items.

    Tiered prices contribute their first tier's flat fee; everything else
    contributes the resolved amount.
    """
    resolved = resolve_display(price, pricing_unit)
    if price.billing_model in TIERED_MODELS:
        first = resolved.tiers[0] if resolved.tiers else None
        return parse_decimal(first.flat_amount if first else None)
    return parse_decimal(resolved.amount)


def effective_charge(
    price: Price,
    override: PriceOverride | None = None,
    *,
    overridden_amount: str | None = None,
    pricing_unit: PricingUnit | None = None,
    config: DisplayConfig | None = None,
) -> str:
    """Headline charge for a subscription line item.

    A structural override (billing model, tier mode, tiers, quantity or
    package size) is layered over the base price and formatted with
    :func:`format_charge`. Otherwise the price table charge is shown, with
    the amount replaced by *overridden_amount* or the override's amount.
    """
    resolved = resolve_display(price, pricing_unit, config=config)

    if override is not None and override.is_structural:
        billing_model = override.billing_model or price.billing_model
        amount = override.amount or resolved.amount
        transform_quantity = override.transform_quantity or price.transform_quantity
        tiers = override.tiers if override.tiers is not None else resolved.tiers
        return format_charge(
            amount,
            resolved.symbol,
            billing_model,
            transform_quantity,
            tiers,
            precision=resolved.precision,
            config=config,
        )

    amount = overridden_amount or (override.amount if override is not None else None)
    if amount:
        price = price.model_copy(update={"amount": amount})
    return format_price_table_charge(price, pricing_unit, config=config)


def describe_tiers(
    price: Price,
    override: PriceOverride | None = None,
    pricing_unit: PricingUnit | None = None,
    *,
    config: DisplayConfig | None = None,
) -> TierTable | None:
    """Tier breakdown for a tiered price, or ``None`` if it is not tiered."""
    resolved = resolve_display(price, pricing_unit, config=config)
    billing_model = (override.billing_model if override else None) or price.billing_model
    tier_mode = (override.tier_mode if override else None) or price.tier_mode
    tiers = resolved.tiers
    if override is not None and override.tiers is not None:
        tiers = override.tiers

    if billing_model not in TIERED_MODELS or not tiers:
        return None

    mode_label = "Volume" if tier_mode == TierMode.VOLUME else "Slab"
    return TierTable(
        title=f"{mode_label} Tier Pricing",
        tier_mode=tier_mode,
        overridden=override is not None and override.is_structural,
        rows=format_tier_ranges(
            tiers, resolved.symbol, precision=resolved.precision, config=config
        ),
    )
