"""Resolve which symbol, amount and tiers a price should be displayed with."""

from __future__ import annotations

from pydantic import BaseModel

from pricing_display.core.config import DEFAULT_CONFIG, DisplayConfig
from pricing_display.core.constants import PriceUnitType
from pricing_display.pricing.amounts import currency_precision, display_symbol
from pricing_display.pricing.models import Price, PricingUnit, Tier


class ResolvedPrice(BaseModel):
    """The effective display values of a :class:`Price`."""

    symbol: str
    amount: str
    tiers: list[Tier] | None = None
    precision: int = 2


def _is_custom(price: Price) -> bool:
    return price.price_unit_type == PriceUnitType.CUSTOM


def resolve_symbol(price: Price, pricing_unit: PricingUnit | None = None) -> str:
    unit = pricing_unit or price.pricing_unit
    if _is_custom(price):
        if unit is not None and unit.symbol:
            return unit.symbol
        if price.price_unit_config is not None and price.price_unit_config.price_unit:
            return price.price_unit_config.price_unit
    return display_symbol(price.currency)


def resolve_amount(price: Price) -> str:
    if _is_custom(price):
        config_amount = price.price_unit_config.amount if price.price_unit_config else None
        return price.price_unit_amount or config_amount or price.amount or "0"
    return price.amount or "0"


def resolve_tiers(price: Price) -> list[Tier] | None:
    if _is_custom(price):
        return price.price_unit_tiers
    return price.tiers


def resolve_precision(
    price: Price,
    pricing_unit: PricingUnit | None = None,
    *,
    config: DisplayConfig | None = None,
) -> int:
    cfg = config or DEFAULT_CONFIG
    if _is_custom(price):
        unit = pricing_unit or price.pricing_unit
        if unit is not None and unit.precision is not None:
            return unit.precision
        return cfg.default_precision
    return currency_precision(price.currency, cfg.default_precision)


def resolve_display(
    price: Price,
    pricing_unit: PricingUnit | None = None,
    *,
    config: DisplayConfig | None = None,
) -> ResolvedPrice:
    """Resolve the symbol, amount, tiers and precision to display *price* with.

    Custom-unit prices prefer their unit's symbol, then the unit code from
    ``price_unit_config``, and finally fall back to the currency symbol. An
    explicit *pricing_unit* takes precedence over one embedded in *price*.
    """
    return ResolvedPrice(
        symbol=resolve_symbol(price, pricing_unit),
        amount=resolve_amount(price),
        tiers=resolve_tiers(price),
        precision=resolve_precision(price, pricing_unit, config=config),
    )
