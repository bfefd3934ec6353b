"""Override diff engine — change detection and rendering."""

from __future__ import annotations

from typing import Callable, Mapping, Sequence

import structlog

from pricing_display.core.config import DisplayConfig
from pricing_display.core.constants import (
    ARROW,
    BILLING_MODEL_LABELS,
    INFINITY,
    MISSING_LABEL,
    TIER_MODE_LABELS,
)
from pricing_display.overrides.models import (
    ChangeKind,
    OverrideChange,
    TierChange,
    TierField,
    TierFieldChange,
)
from pricing_display.overrides.rules import DEFAULT_RULES, OverrideRule
from pricing_display.pricing.amounts import format_amount
from pricing_display.pricing.formatter import tier_upper_label
from pricing_display.pricing.models import Price, PriceOverride, PricingUnit
from pricing_display.pricing.resolver import ResolvedPrice, resolve_display

logger = structlog.get_logger(__name__)


def has_overrides(override: PriceOverride | None) -> bool:
    """Whether *override* changes the structure of a price, not just its amount."""
    return override is not None and override.is_structural


def overridden_fields(override: PriceOverride | None) -> set[str]:
    return override.overridden_fields() if override is not None else set()


def detect_changes(
    base: Price,
    override: PriceOverride,
    rules: Sequence[OverrideRule] = DEFAULT_RULES,
) -> list[OverrideChange]:
    """Run *rules* in order and collect the changes they report.

    If no rule reports anything but the override sets at least one field, a
    single generic configuration change is returned.
    """
    changes: list[OverrideChange] = []
    for rule in rules:
        change = rule.evaluate(base, override)
        if change is not None:
            changes.append(change)

    if not changes and override.overridden_fields():
        changes.append(OverrideChange(kind=ChangeKind.CONFIGURATION))
    return changes


class _Renderer:
    """Turns change records into display lines for one resolved price."""

    def __init__(self, resolved: ResolvedPrice, config: DisplayConfig | None) -> None:
        self._resolved = resolved
        self._config = config

    def money(self, value: str | None) -> str:
        amount = format_amount(value or "0", self._resolved.precision, config=self._config)
        return f"{self._resolved.symbol}{amount}"

    @staticmethod
    def label(value: str | None, labels: Mapping[str, str] | None = None) -> str:
        if not value:
            return MISSING_LABEL
        return labels.get(value, value) if labels else value

    def tier_field(self, change: TierFieldChange) -> str:
        if change.field is TierField.FROM:
            return f"From (>): {change.before} {ARROW} {change.after}"
        if change.field is TierField.UP_TO:
            before = INFINITY if change.before is None else change.before
            after = INFINITY if change.after is None else change.after
            return f"Up to (<=): {before} {ARROW} {after}"
        if change.field is TierField.UNIT_AMOUNT:
            return f"Per unit price: {self.money(change.before)} {ARROW} {self.money(change.after)}"
        return f"Flat fee: {self.money(change.before)} {ARROW} {self.money(change.after)}"

    def tier(self, change: TierChange) -> str:
        if change.added and change.tier is not None:
            return (
                f"Tier {change.index + 1} added: "
                f"From (>): {change.lower_bound}, "
                f"Up to (<=): {tier_upper_label(change.tier)}, "
                f"Per unit price: {self.money(change.tier.unit_amount)}, "
                f"Flat fee: {self.money(change.tier.flat_amount)}"
            )
        details = ", ".join(self.tier_field(field) for field in change.changes)
        return f"Tier {change.index + 1}: {details}"

    def render(self, change: OverrideChange) -> list[str]:
        handler = self._handlers.get(change.kind)
        if handler is None:
            return []
        return handler(self, change)

    def _billing_model(self, change: OverrideChange) -> list[str]:
        before = self.label(change.before, BILLING_MODEL_LABELS)
        after = self.label(change.after, BILLING_MODEL_LABELS)
        return [f"Billing Model: {before} {ARROW} {after}"]

    def _tier_mode(self, change: OverrideChange) -> list[str]:
        before = self.label(change.before, TIER_MODE_LABELS)
        after = self.label(change.after, TIER_MODE_LABELS)
        return [f"Tier Mode: {before} {ARROW} {after}"]

    def _amount(self, change: OverrideChange) -> list[str]:
        return [f"Amount: {self.money(change.before)} {ARROW} {self.money(change.after)}"]

    def _quantity(self, change: OverrideChange) -> list[str]:
        return [f"Quantity: {change.before} {ARROW} {change.after}"]

    def _package_size(self, change: OverrideChange) -> list[str]:
        return [f"Package Size: {change.before} units {ARROW} {change.after} units"]

    def _tier_count(self, change: OverrideChange) -> list[str]:
        return [f"Tiers: {change.before} tiers {ARROW} {change.after} tiers"]

    def _tiers(self, change: OverrideChange) -> list[str]:
        return [self.tier(tier_change) for tier_change in change.tiers]

    def _tier_structure(self, change: OverrideChange) -> list[str]:
        return ["Tier structure modified"]

    def _configuration(self, change: OverrideChange) -> list[str]:
        return ["Price configuration modified"]

    _handlers: dict[ChangeKind, Callable[[_Renderer, OverrideChange], list[str]]] = {
        ChangeKind.BILLING_MODEL: _billing_model,
        ChangeKind.TIER_MODE: _tier_mode,
        ChangeKind.AMOUNT: _amount,
        ChangeKind.QUANTITY: _quantity,
        ChangeKind.TRANSFORM_QUANTITY: _package_size,
        ChangeKind.TIER_COUNT: _tier_count,
        ChangeKind.TIERS: _tiers,
        ChangeKind.TIER_STRUCTURE: _tier_structure,
        ChangeKind.CONFIGURATION: _configuration,
    }


def render_changes(
    changes: Sequence[OverrideChange],
    resolved: ResolvedPrice,
    *,
    config: DisplayConfig | None = None,
) -> list[str]:
    """Render change records as display lines, using *resolved* for symbol and precision."""
    renderer = _Renderer(resolved, config)
    lines: list[str] = []
    for change in changes:
        lines.extend(renderer.render(change))
    return lines


def diff_override(
    base: Price,
    override: PriceOverride | None,
    pricing_unit: PricingUnit | None = None,
    *,
    config: DisplayConfig | None = None,
    rules: Sequence[OverrideRule] = DEFAULT_RULES,
) -> list[str]:
    """Describe how *override* changes *base*, one line per change.

    Returns an empty list when there is no override or it sets no fields.
    """
    if override is None:
        return []
    changes = detect_changes(base, override, rules)
    if not changes:
        return []
    resolved = resolve_display(base, pricing_unit, config=config)
    lines = render_changes(changes, resolved, config=config)
    logger.debug(
        "override_diff_computed",
        price_id=base.id,
        kinds=[change.kind.value for change in changes],
        lines=len(lines),
    )
    return lines
