"""Shared test fixtures."""
from __future__ import annotations

import pytest

from pricing_display.pricing.models import (
    Price,
    PriceUnitConfig,
    PricingUnit,
    Tier,
    TransformQuantity,
)


@pytest.fixture
def flat_price() -> Price:
    return Price(
        id="price_flat",
        type="FIXED",
        billing_model="FLAT_FEE",
        amount="100",
        currency="USD",
    )


@pytest.fixture
def package_price() -> Price:
    return Price(
        id="price_package",
        type="USAGE",
        billing_model="PACKAGE",
        amount="100",
        currency="USD",
        transform_quantity=TransformQuantity(divide_by=5),
    )


@pytest.fixture
def tiered_price() -> Price:
    return Price(
        id="price_tiered",
        type="USAGE",
        billing_model="TIERED",
        tier_mode="VOLUME",
        amount="0",
        currency="USD",
        tiers=[
            Tier(up_to=100, unit_amount="2"),
            Tier(up_to=None, unit_amount="1"),
        ],
    )


@pytest.fixture
def custom_unit_price() -> Price:
    return Price(
        id="price_custom",
        type="USAGE",
        billing_model="FLAT_FEE",
        amount="10",
        currency="USD",
        price_unit_type="CUSTOM",
        price_unit_config=PriceUnitConfig(price_unit="TOK", amount="25"),
        price_unit_amount="20",
    )


@pytest.fixture
def credits_unit() -> PricingUnit:
    return PricingUnit(symbol="©", code="CRD", name="Credits", precision=4)
