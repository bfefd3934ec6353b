"""pricing-display — charge strings, override diffs and coupon maths for billing UIs."""

from pricing_display.__version__ import __version__
from pricing_display.core.config import DEFAULT_CONFIG, DisplayConfig
from pricing_display.core.constants import (
    BillingModel,
    CouponType,
    PriceType,
    PriceUnitType,
    TierMode,
)
from pricing_display.core.exceptions import (
    ConfigurationError,
    PriceValidationError,
    PricingDisplayError,
    TierIntegrityError,
    UnknownCurrencyError,
)
from pricing_display.coupons import DiscountResult, apply_coupon, format_coupon_name
from pricing_display.display import ChargeSummary, DiscountDisplay, PriceDisplay
from pricing_display.overrides import (
    OverrideChange,
    OverrideRule,
    detect_changes,
    diff_override,
    has_overrides,
    render_changes,
)
from pricing_display.pricing import (
    Coupon,
    Price,
    PriceOverride,
    PriceUnitConfig,
    PricingUnit,
    ResolvedPrice,
    Tier,
    TierTable,
    TransformQuantity,
    actual_price_for_total,
    check_tiers,
    currency_symbol,
    describe_tiers,
    effective_charge,
    format_amount,
    format_charge,
    format_price_table_charge,
    format_tier_range,
    format_tier_ranges,
    load_price,
    parse_decimal,
    resolve_display,
    validate_tiers,
)
from pricing_display.utils.logging import configure_from, configure_logging, get_logger

__all__ = [
    "__version__",
    # Config
    "DEFAULT_CONFIG",
    "DisplayConfig",
    # Constants
    "BillingModel",
    "CouponType",
    "PriceType",
    "PriceUnitType",
    "TierMode",
    # Exceptions
    "ConfigurationError",
    "PriceValidationError",
    "PricingDisplayError",
    "TierIntegrityError",
    "UnknownCurrencyError",
    # Models
    "Coupon",
    "Price",
    "PriceOverride",
    "PriceUnitConfig",
    "PricingUnit",
    "ResolvedPrice",
    "Tier",
    "TierTable",
    "TransformQuantity",
    # Formatting
    "actual_price_for_total",
    "currency_symbol",
    "describe_tiers",
    "effective_charge",
    "format_amount",
    "format_charge",
    "format_price_table_charge",
    "format_tier_range",
    "format_tier_ranges",
    "parse_decimal",
    "resolve_display",
    # Validation
    "check_tiers",
    "load_price",
    "validate_tiers",
    # Overrides
    "OverrideChange",
    "OverrideRule",
    "detect_changes",
    "diff_override",
    "has_overrides",
    "render_changes",
    # Coupons
    "DiscountResult",
    "apply_coupon",
    "format_coupon_name",
    # Facade
    "ChargeSummary",
    "DiscountDisplay",
    "PriceDisplay",
    # Logging
    "configure_from",
    "configure_logging",
    "get_logger",
]
