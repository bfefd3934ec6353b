"""Tests for coupons/ — apply_coupon and format_coupon_name."""
from __future__ import annotations

from decimal import Decimal

from pricing_display.coupons import DiscountResult, apply_coupon, format_coupon_name
from pricing_display.pricing.models import Coupon, Price


def _fixed(amount: str) -> Price:
    return Price(type="FIXED", billing_model="FLAT_FEE", amount=amount, currency="USD")


# ---------------------------------------------------------------------------
# apply_coupon
# ---------------------------------------------------------------------------


def test_percentage_coupon() -> None:
    result = apply_coupon(_fixed("100"), Coupon(type="percentage", percentage_off="10"))
    assert result is not None
    assert result.original_amount == 100
    assert result.discounted_amount == 90
    assert result.savings == 10


def test_fixed_coupon() -> None:
    result = apply_coupon(_fixed("100"), Coupon(type="fixed", amount_off="15.50"))
    assert result == DiscountResult(
        original_amount=Decimal("100"),
        discounted_amount=Decimal("84.50"),
        savings=Decimal("15.50"),
    )


def test_fixed_coupon_is_clamped_at_zero() -> None:
    result = apply_coupon(_fixed("50"), Coupon(type="fixed", amount_off="1000"))
    assert result is not None
    assert result.discounted_amount == 0
    assert result.savings == 50


def test_zero_percent_coupon_saves_nothing() -> None:
    result = apply_coupon(_fixed("80"), Coupon(type="percentage", percentage_off="0"))
    assert result is not None
    assert result.discounted_amount == 80
    assert result.savings == 0


def test_missing_discount_values_default_to_zero() -> None:
    fixed = apply_coupon(_fixed("20"), Coupon(type="fixed"))
    percentage = apply_coupon(_fixed("20"), Coupon(type="percentage"))
    assert fixed is not None and fixed.savings == 0
    assert percentage is not None and percentage.savings == 0


def test_unknown_coupon_type_is_a_noop() -> None:
    result = apply_coupon(_fixed("60"), Coupon(type="bogo", amount_off="10"))
    assert result is not None
    assert result.discounted_amount == 60
    assert result.savings == 0


def test_usage_price_is_never_discounted(tiered_price: Price) -> None:
    assert apply_coupon(tiered_price, Coupon(type="percentage", percentage_off="50")) is None


def test_no_coupon_returns_none(flat_price: Price) -> None:
    assert apply_coupon(flat_price, None) is None


def test_unparseable_amount_is_zero() -> None:
    result = apply_coupon(_fixed("n/a"), Coupon(type="fixed", amount_off="5"))
    assert result is not None
    assert result.original_amount == 0
    assert result.discounted_amount == 0


def test_coupon_from_numeric_payload() -> None:
    coupon = Coupon.model_validate({"type": "percentage", "percentage_off": 25})
    result = apply_coupon(_fixed("200"), coupon)
    assert result is not None
    assert result.discounted_amount == 150


# ---------------------------------------------------------------------------
# format_coupon_name
# ---------------------------------------------------------------------------


def test_coupon_name_wins() -> None:
    assert format_coupon_name(Coupon(name="LAUNCH25", type="percentage", percentage_off="25")) == "LAUNCH25"


def test_percentage_coupon_label() -> None:
    assert format_coupon_name(Coupon(type="percentage", percentage_off="12.50")) == "12.5% off"


def test_fixed_coupon_label() -> None:
    assert format_coupon_name(Coupon(type="fixed", amount_off="5"), "$") == "$5 off"
