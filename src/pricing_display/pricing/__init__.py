from pricing_display.pricing.amounts import (
    currency_precision,
    currency_symbol,
    display_symbol,
    format_amount,
    parse_decimal,
)
from pricing_display.pricing.formatter import (
    TierTable,
    actual_price_for_total,
    describe_tiers,
    effective_charge,
    format_charge,
    format_price_table_charge,
    format_tier_range,
    format_tier_ranges,
)
from pricing_display.pricing.models import (
    Coupon,
    Price,
    PriceOverride,
    PriceUnitConfig,
    PricingUnit,
    Tier,
    TransformQuantity,
)
from pricing_display.pricing.resolver import ResolvedPrice, resolve_display
from pricing_display.pricing.validation import (
    TierIssue,
    check_tiers,
    load_price,
    validate_tiers,
)

__all__ = [
    "Coupon",
    "Price",
    "PriceOverride",
    "PriceUnitConfig",
    "PricingUnit",
    "ResolvedPrice",
    "Tier",
    "TierIssue",
    "TierTable",
    "TransformQuantity",
    "actual_price_for_total",
    "check_tiers",
    "currency_precision",
    "currency_symbol",
    "describe_tiers",
    "display_symbol",
    "effective_charge",
    "format_amount",
    "format_charge",
    "format_price_table_charge",
    "format_tier_range",
    "format_tier_ranges",
    "load_price",
    "parse_decimal",
    "resolve_display",
    "validate_tiers",
]
