from pricing_display.coupons.discount import (
    DiscountResult,
    apply_coupon,
    format_coupon_name,
)

__all__ = [
    "DiscountResult",
    "apply_coupon",
    "format_coupon_name",
]
