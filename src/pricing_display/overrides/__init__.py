"""Price override diffing — detect what an override changes and describe it."""
from __future__ import annotations

from pricing_display.overrides.diff import (
    detect_changes,
    diff_override,
    has_overrides,
    overridden_fields,
    render_changes,
)
from pricing_display.overrides.models import (
    ChangeKind,
    OverrideChange,
    TierChange,
    TierField,
    TierFieldChange,
)
from pricing_display.overrides.rules import (
    DEFAULT_RULES,
    AmountRule,
    BillingModelRule,
    OverrideRule,
    PackageSizeRule,
    QuantityRule,
    TierModeRule,
    TiersRule,
)

__all__ = [
    "DEFAULT_RULES",
    "AmountRule",
    "BillingModelRule",
    "ChangeKind",
    "OverrideChange",
    "OverrideRule",
    "PackageSizeRule",
    "QuantityRule",
    "TierChange",
    "TierField",
    "TierFieldChange",
    "TierModeRule",
    "TiersRule",
    "detect_changes",
    "diff_override",
    "has_overrides",
    "overridden_fields",
    "render_changes",
]
