"""Coupon discounts for fixed-type prices."""

from __future__ import annotations

from decimal import Decimal

import structlog
from pydantic import BaseModel

from pricing_display.core.config import DisplayConfig
from pricing_display.core.constants import CouponType, PriceType
from pricing_display.pricing.amounts import format_amount, parse_decimal
from pricing_display.pricing.models import Coupon, Price

logger = structlog.get_logger(__name__)

_HUNDRED = Decimal(100)


class DiscountResult(BaseModel):
    """Original and discounted amounts for a price with a coupon applied."""

    original_amount: Decimal
    discounted_amount: Decimal
    savings: Decimal


def apply_coupon(price: Price, coupon: Coupon | None) -> DiscountResult | None:
    """Apply *coupon* to a fixed-type *price*.

    Returns ``None`` when there is no coupon or the price is not FIXED; usage
    prices are never discounted here. Fixed discounts are clamped at zero.
    An unrecognised coupon type leaves the amount unchanged.
    """
    if coupon is None or price.type != PriceType.FIXED:
        return None

    original = parse_decimal(price.amount)
    discounted = original

    if coupon.type == CouponType.FIXED:
        discounted = max(Decimal(0), original - parse_decimal(coupon.amount_off or "0"))
    elif coupon.type == CouponType.PERCENTAGE:
        percentage = parse_decimal(coupon.percentage_off or "0")
        if not 0 <= percentage <= _HUNDRED:
            logger.warning(
                "coupon_percentage_out_of_range",
                coupon_id=coupon.id,
                percentage_off=str(percentage),
            )
        discounted = original * (1 - percentage / _HUNDRED)
    else:
        logger.debug("coupon_type_unrecognised", coupon_id=coupon.id, coupon_type=coupon.type)

    return DiscountResult(
        original_amount=original,
        discounted_amount=discounted,
        savings=original - discounted,
    )


def format_coupon_name(
    coupon: Coupon,
    symbol: str = "",
    *,
    config: DisplayConfig | None = None,
) -> str:
    """Short label for a coupon, e.g. ``"10% off"`` or ``"$5 off"``.

    A coupon's own ``name`` wins when it has one.
    """
    if coupon.name:
        return coupon.name
    if coupon.type == CouponType.PERCENTAGE:
        return f"{format_amount(coupon.percentage_off, config=config)}% off"
    return f"{symbol}{format_amount(coupon.amount_off, config=config)} off"
