"""Override diff rules, one per price field category.

Each rule compares a base :class:`Price` with a :class:`PriceOverride` and
returns at most one :class:`OverrideChange`. Comparisons use raw equality, so
``"100"`` and ``"100.00"`` count as different amounts.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from pricing_display.core.constants import BillingModel, PriceType
from pricing_display.overrides.models import (
    ChangeKind,
    OverrideChange,
    TierChange,
    TierField,
    TierFieldChange,
)
from pricing_display.pricing.formatter import package_size, tier_lower_bound
from pricing_display.pricing.models import Price, PriceOverride, Tier
from pricing_display.pricing.resolver import resolve_amount


class OverrideRule(ABC):
    """Base class for override diff rules.

    Subclass and implement :meth:`evaluate` to inspect one aspect of an
    override and optionally return an :class:`OverrideChange`.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for this rule."""
        ...

    @abstractmethod
    def evaluate(self, base: Price, override: PriceOverride) -> OverrideChange | None:
        """Compare *override* against *base* and return a change if one applies."""
        ...


class BillingModelRule(OverrideRule):
    @property
    def name(self) -> str:
        return "billing_model"

    def evaluate(self, base: Price, override: PriceOverride) -> OverrideChange | None:
        if override.billing_model and override.billing_model != base.billing_model:
            return OverrideChange(
                kind=ChangeKind.BILLING_MODEL,
                before=base.billing_model,
                after=override.billing_model,
            )
        return None


class TierModeRule(OverrideRule):
    @property
    def name(self) -> str:
        return "tier_mode"

    def evaluate(self, base: Price, override: PriceOverride) -> OverrideChange | None:
        if override.tier_mode and override.tier_mode != base.tier_mode:
            return OverrideChange(
                kind=ChangeKind.TIER_MODE,
                before=base.tier_mode,
                after=override.tier_mode,
            )
        return None


class AmountRule(OverrideRule):
    """Reports a changed amount; the before value is the price's display amount."""

    @property
    def name(self) -> str:
        return "amount"

    def evaluate(self, base: Price, override: PriceOverride) -> OverrideChange | None:
        if override.amount and override.amount != base.amount:
            return OverrideChange(
                kind=ChangeKind.AMOUNT,
                before=resolve_amount(base),
                after=override.amount,
            )
        return None


class QuantityRule(OverrideRule):
    """Reports a quantity override on usage prices, which start at quantity 1."""

    @property
    def name(self) -> str:
        return "quantity"

    def evaluate(self, base: Price, override: PriceOverride) -> OverrideChange | None:
        quantity = override.quantity
        if quantity is None or quantity == 1 or base.type != PriceType.USAGE:
            return None
        return OverrideChange(
            kind=ChangeKind.QUANTITY, before="1", after=format(quantity.normalize(), "f")
        )


class PackageSizeRule(OverrideRule):
    """Reports a changed package size when either side bills per package."""

    @property
    def name(self) -> str:
        return "transform_quantity"

    def evaluate(self, base: Price, override: PriceOverride) -> OverrideChange | None:
        if override.transform_quantity is None:
            return None
        if BillingModel.PACKAGE not in (base.billing_model, override.billing_model):
            return None
        before = package_size(base.transform_quantity)
        after = package_size(override.transform_quantity)
        if before == after:
            return None
        return OverrideChange(
            kind=ChangeKind.TRANSFORM_QUANTITY,
            before=str(before),
            after=str(after),
        )


def _compare_tier(
    base_tiers: list[Tier],
    new_tiers: list[Tier],
    index: int,
) -> list[TierFieldChange]:
    old, new = base_tiers[index], new_tiers[index]
    changes: list[TierFieldChange] = []

    old_from = tier_lower_bound(base_tiers, index)
    new_from = tier_lower_bound(new_tiers, index)
    if old_from != new_from:
        changes.append(TierFieldChange(field=TierField.FROM, before=str(old_from), after=str(new_from)))

    if old.up_to != new.up_to:
        changes.append(
            TierFieldChange(
                field=TierField.UP_TO,
                before=None if old.up_to is None else str(old.up_to),
                after=None if new.up_to is None else str(new.up_to),
            )
        )

    if old.unit_amount != new.unit_amount:
        changes.append(
            TierFieldChange(field=TierField.UNIT_AMOUNT, before=old.unit_amount, after=new.unit_amount)
        )

    old_flat = old.flat_amount or "0"
    new_flat = new.flat_amount or "0"
    if old_flat != new_flat:
        changes.append(TierFieldChange(field=TierField.FLAT_AMOUNT, before=old_flat, after=new_flat))

    return changes


class TiersRule(OverrideRule):
    """Compares tier lists.

    A different tier count is reported as a single count change. With equal
    counts every tier is compared field by field; if nothing differs the
    override is still reported as a structural tier change.
    """

    @property
    def name(self) -> str:
        return "tiers"

    def evaluate(self, base: Price, override: PriceOverride) -> OverrideChange | None:
        new_tiers = override.tiers
        if not new_tiers:
            return None
        base_tiers = base.tiers or []

        if len(base_tiers) != len(new_tiers):
            return OverrideChange(
                kind=ChangeKind.TIER_COUNT,
                before=str(len(base_tiers)),
                after=str(len(new_tiers)),
            )

        tier_changes: list[TierChange] = []
        for index, new_tier in enumerate(new_tiers):
            if index >= len(base_tiers):
                tier_changes.append(
                    TierChange(
                        index=index,
                        added=True,
                        lower_bound=tier_lower_bound(new_tiers, index),
                        tier=new_tier,
                    )
                )
                continue
            changes = _compare_tier(base_tiers, new_tiers, index)
            if changes:
                tier_changes.append(TierChange(index=index, changes=changes))

        if not tier_changes:
            return OverrideChange(kind=ChangeKind.TIER_STRUCTURE)
        return OverrideChange(kind=ChangeKind.TIERS, tiers=tier_changes)


DEFAULT_RULES: tuple[OverrideRule, ...] = (
    BillingModelRule(),
    TierModeRule(),
    AmountRule(),
    QuantityRule(),
    PackageSizeRule(),
    TiersRule(),
)
