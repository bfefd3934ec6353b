"""Price data models — prices, tiers, pricing units, overrides and coupons.

All models are read-only value objects parsed from billing API payloads.
Enum-typed fields are declared as plain strings so unknown values from a
newer API pass through instead of failing validation.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _PayloadModel(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True, frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # Explicit nulls fall back to the field defaults.
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Tier(_PayloadModel):
    """One band of a tiered price. ``up_to=None`` marks the unbounded last band."""

    up_to: int | None = None
    unit_amount: str = "0"
    flat_amount: str | None = None


class TransformQuantity(_PayloadModel):
    """Package sizing for the PACKAGE billing model."""

    divide_by: int = 1
    round: str | None = None


class PriceUnitConfig(_PayloadModel):
    price_unit: str | None = None
    amount: str | None = None


class PricingUnit(_PayloadModel):
    """A custom, non-fiat unit of account such as credits or tokens."""

    symbol: str | None = None
    code: str | None = None
    name: str | None = None
    precision: int | None = Field(default=None, ge=0, le=12)


class Price(_PayloadModel):
    """The canonical definition of a charge."""

    id: str | None = None
    type: str = "FIXED"
    billing_model: str = "FLAT_FEE"
    tier_mode: str | None = None
    amount: str | None = None
    currency: str = ""
    price_unit_type: str = "FIAT"
    price_unit_config: PriceUnitConfig | None = None
    price_unit_amount: str | None = None
    price_unit_tiers: list[Tier] | None = None
    tiers: list[Tier] | None = None
    transform_quantity: TransformQuantity | None = None
    display_amount: str | None = None
    pricing_unit: PricingUnit | None = None


class PriceOverride(_PayloadModel):
    """A line-item patch over a :class:`Price`. ``None`` means not overridden."""

    price_id: str | None = None
    billing_model: str | None = None
    tier_mode: str | None = None
    amount: str | None = None
    quantity: Decimal | None = None
    transform_quantity: TransformQuantity | None = None
    tiers: list[Tier] | None = None

    def overridden_fields(self) -> set[str]:
        """Names of the price fields this override sets."""
        return {
            name
            for name in _OVERRIDABLE_FIELDS
            if getattr(self, name) is not None
        }

    @property
    def is_structural(self) -> bool:
        """Whether the override changes more than the plain amount."""
        return bool(self.overridden_fields() & _STRUCTURAL_FIELDS)


_OVERRIDABLE_FIELDS = (
    "billing_model",
    "tier_mode",
    "amount",
    "quantity",
    "transform_quantity",
    "tiers",
)
_STRUCTURAL_FIELDS = frozenset(_OVERRIDABLE_FIELDS) - {"amount"}


class Coupon(_PayloadModel):
    id: str | None = None
    name: str | None = None
    type: str = "fixed"
    amount_off: str | None = None
    percentage_off: str | None = None
    currency: str | None = None
