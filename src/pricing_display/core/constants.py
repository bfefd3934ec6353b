from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import Mapping


class PriceType(StrEnum):
    FIXED = "FIXED"
    USAGE = "USAGE"


class BillingModel(StrEnum):
    FLAT_FEE = "FLAT_FEE"
    PACKAGE = "PACKAGE"
    TIERED = "TIERED"
    SLAB_TIERED = "SLAB_TIERED"


class TierMode(StrEnum):
    VOLUME = "VOLUME"
    SLAB = "SLAB"


class PriceUnitType(StrEnum):
    FIAT = "FIAT"
    CUSTOM = "CUSTOM"


class CouponType(StrEnum):
    FIXED = "fixed"
    PERCENTAGE = "percentage"


TIERED_MODELS: frozenset[str] = frozenset({BillingModel.TIERED, BillingModel.SLAB_TIERED})

BILLING_MODEL_LABELS: Mapping[str, str] = MappingProxyType(
    {
        BillingModel.FLAT_FEE: "Flat Fee",
        BillingModel.PACKAGE: "Package",
        BillingModel.TIERED: "Volume Tiered",
        BillingModel.SLAB_TIERED: "Slab Tiered",
    }
)

TIER_MODE_LABELS: Mapping[str, str] = MappingProxyType(
    {
        TierMode.VOLUME: "Volume",
        TierMode.SLAB: "Slab",
    }
)

INFINITY = "∞"
ARROW = "→"
MISSING_LABEL = "N/A"
