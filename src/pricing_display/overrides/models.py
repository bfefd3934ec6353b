"""Structured records produced by the override diff rules."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

from pricing_display.pricing.models import Tier


class ChangeKind(StrEnum):
    BILLING_MODEL = "billing_model"
    TIER_MODE = "tier_mode"
    AMOUNT = "amount"
    QUANTITY = "quantity"
    TRANSFORM_QUANTITY = "transform_quantity"
    TIER_COUNT = "tier_count"
    TIERS = "tiers"
    TIER_STRUCTURE = "tier_structure"
    CONFIGURATION = "configuration"


class TierField(StrEnum):
    FROM = "from"
    UP_TO = "up_to"
    UNIT_AMOUNT = "unit_amount"
    FLAT_AMOUNT = "flat_amount"


class TierFieldChange(BaseModel):
    """One changed field of a tier. ``None`` stands for an unbounded ``up_to``."""

    field: TierField
    before: str | None = None
    after: str | None = None


class TierChange(BaseModel):
    """Changes to the tier at ``index``, or a tier the override adds."""

    index: int
    added: bool = False
    lower_bound: int = 0
    tier: Tier | None = None
    changes: list[TierFieldChange] = Field(default_factory=list)


class OverrideChange(BaseModel):
    """A single detected difference between a price and its override.

    ``before`` and ``after`` hold raw values; labels, symbols and amount
    formatting are applied when the change is rendered.
    """

    kind: ChangeKind
    before: str | None = None
    after: str | None = None
    tiers: list[TierChange] = Field(default_factory=list)
