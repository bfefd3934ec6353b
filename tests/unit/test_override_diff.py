"""Tests for overrides/ — change detection rules and rendered diffs."""
from __future__ import annotations

from pricing_display.overrides import (
    AmountRule,
    ChangeKind,
    OverrideChange,
    TierChange,
    TierField,
    detect_changes,
    diff_override,
    has_overrides,
    overridden_fields,
    render_changes,
)
from pricing_display.pricing.models import (
    Price,
    PriceOverride,
    PricingUnit,
    Tier,
    TransformQuantity,
)
from pricing_display.pricing.resolver import ResolvedPrice


def _fixed(amount: str = "40") -> Price:
    return Price(type="FIXED", billing_model="FLAT_FEE", amount=amount, currency="USD")


# ---------------------------------------------------------------------------
# Empty / trivial overrides
# ---------------------------------------------------------------------------


def test_empty_override_yields_no_changes(flat_price: Price) -> None:
    assert diff_override(flat_price, PriceOverride()) == []


def test_none_override_yields_no_changes(flat_price: Price) -> None:
    assert diff_override(flat_price, None) == []


def test_price_id_alone_is_not_a_change(flat_price: Price) -> None:
    assert diff_override(flat_price, PriceOverride(price_id="price_flat")) == []


# ---------------------------------------------------------------------------
# Field rules
# ---------------------------------------------------------------------------


def test_amount_change() -> None:
    assert diff_override(_fixed("40"), PriceOverride(amount="50")) == ["Amount: $40 → $50"]


def test_amount_change_from_numeric_payload() -> None:
    override = PriceOverride.model_validate({"amount": 50})
    assert diff_override(_fixed("40"), override) == ["Amount: $40 → $50"]


def test_amount_comparison_is_raw_string_equality() -> None:
    assert diff_override(_fixed("100"), PriceOverride(amount="100.00")) == ["Amount: $100 → $100"]


def test_amount_uses_custom_unit_symbol_and_display_amount(
    custom_unit_price: Price, credits_unit: PricingUnit
) -> None:
    lines = diff_override(custom_unit_price, PriceOverride(amount="30"), credits_unit)
    assert lines == ["Amount: ©20 → ©30"]


def test_billing_model_change_uses_labels(tiered_price: Price) -> None:
    lines = diff_override(tiered_price, PriceOverride(billing_model="SLAB_TIERED"))
    assert lines == ["Billing Model: Volume Tiered → Slab Tiered"]


def test_unknown_billing_model_passes_through(flat_price: Price) -> None:
    lines = diff_override(flat_price, PriceOverride(billing_model="HYBRID"))
    assert lines == ["Billing Model: Flat Fee → HYBRID"]


def test_tier_mode_change(tiered_price: Price) -> None:
    assert diff_override(tiered_price, PriceOverride(tier_mode="SLAB")) == ["Tier Mode: Volume → Slab"]


def test_tier_mode_change_from_missing(flat_price: Price) -> None:
    assert diff_override(flat_price, PriceOverride(tier_mode="SLAB")) == ["Tier Mode: N/A → Slab"]


def test_quantity_change_on_usage_price(tiered_price: Price) -> None:
    assert diff_override(tiered_price, PriceOverride(quantity=5)) == ["Quantity: 1 → 5"]


def test_quantity_change_on_fixed_price_is_not_reported(flat_price: Price) -> None:
    assert diff_override(flat_price, PriceOverride(quantity=5)) == ["Price configuration modified"]


def test_quantity_change_drops_trailing_zeros(tiered_price: Price) -> None:
    assert diff_override(tiered_price, PriceOverride(quantity="5.50")) == ["Quantity: 1 → 5.5"]


def test_whole_quantity_is_not_rendered_in_exponent_form(tiered_price: Price) -> None:
    assert diff_override(tiered_price, PriceOverride(quantity=500)) == ["Quantity: 1 → 500"]


def test_quantity_of_one_is_not_reported(tiered_price: Price) -> None:
    assert diff_override(tiered_price, PriceOverride(quantity=1)) == ["Price configuration modified"]


def test_package_size_change(package_price: Price) -> None:
    override = PriceOverride(transform_quantity=TransformQuantity(divide_by=10))
    assert diff_override(package_price, override) == ["Package Size: 5 units → 10 units"]


def test_package_size_when_switching_to_package(tiered_price: Price) -> None:
    override = PriceOverride(
        billing_model="PACKAGE",
        transform_quantity=TransformQuantity(divide_by=10),
    )
    assert diff_override(tiered_price, override) == [
        "Billing Model: Volume Tiered → Package",
        "Package Size: 1 units → 10 units",
    ]


def test_zero_package_size_counts_as_one(package_price: Price) -> None:
    override = PriceOverride(transform_quantity=TransformQuantity(divide_by=0))
    assert diff_override(package_price, override) == ["Package Size: 5 units → 1 units"]


def test_package_size_ignored_for_non_package_prices(flat_price: Price) -> None:
    override = PriceOverride(transform_quantity=TransformQuantity(divide_by=10))
    assert diff_override(flat_price, override) == ["Price configuration modified"]


def test_unchanged_package_size_falls_back(package_price: Price) -> None:
    override = PriceOverride(transform_quantity=TransformQuantity(divide_by=5))
    assert diff_override(package_price, override) == ["Price configuration modified"]


def test_unchanged_amount_falls_back() -> None:
    assert diff_override(_fixed("40"), PriceOverride(amount="40")) == ["Price configuration modified"]


# ---------------------------------------------------------------------------
# Tiers
# ---------------------------------------------------------------------------


def test_tier_count_change_is_a_single_summary(tiered_price: Price) -> None:
    override = PriceOverride(
        tiers=[
            Tier(up_to=50, unit_amount="3"),
            Tier(up_to=100, unit_amount="2"),
            Tier(unit_amount="1"),
        ]
    )
    assert diff_override(tiered_price, override) == ["Tiers: 2 tiers → 3 tiers"]


def test_per_tier_changes(tiered_price: Price) -> None:
    override = PriceOverride(
        tiers=[
            Tier(up_to=200, unit_amount="2"),
            Tier(up_to=None, unit_amount="0.8", flat_amount="5"),
        ]
    )
    assert diff_override(tiered_price, override) == [
        "Tier 1: Up to (<=): 100 → 200",
        "Tier 2: From (>): 100 → 200, Per unit price: $1 → $0.8, Flat fee: $0 → $5",
    ]


def test_tier_becoming_unbounded(tiered_price: Price) -> None:
    override = PriceOverride(tiers=[Tier(up_to=None, unit_amount="2"), Tier(up_to=None, unit_amount="1")])
    lines = diff_override(tiered_price, override)
    assert lines == [
        "Tier 1: Up to (<=): 100 → ∞",
        "Tier 2: From (>): 100 → 0",
    ]


def test_identical_tiers_report_structure_modified(tiered_price: Price) -> None:
    override = PriceOverride(tiers=list(tiered_price.tiers or []))
    assert diff_override(tiered_price, override) == ["Tier structure modified"]


def test_empty_override_tiers_are_ignored(tiered_price: Price) -> None:
    assert diff_override(tiered_price, PriceOverride(tiers=[])) == ["Price configuration modified"]


def test_added_tier_rendering() -> None:
    resolved = ResolvedPrice(symbol="$", amount="0", precision=2)
    change = OverrideChange(
        kind=ChangeKind.TIERS,
        tiers=[
            TierChange(
                index=2,
                added=True,
                lower_bound=500,
                tier=Tier(up_to=None, unit_amount="0.5"),
            )
        ],
    )
    assert render_changes([change], resolved) == [
        "Tier 3 added: From (>): 500, Up to (<=): ∞, Per unit price: $0.5, Flat fee: $0"
    ]


# ---------------------------------------------------------------------------
# Ordering, structure and rule selection
# ---------------------------------------------------------------------------


def test_changes_follow_fixed_order(tiered_price: Price) -> None:
    override = PriceOverride(
        tiers=[Tier(up_to=10, unit_amount="4"), Tier(up_to=100, unit_amount="2"), Tier(unit_amount="1")],
        quantity=10,
        amount="5",
        tier_mode="SLAB",
        billing_model="SLAB_TIERED",
    )
    assert diff_override(tiered_price, override) == [
        "Billing Model: Volume Tiered → Slab Tiered",
        "Tier Mode: Volume → Slab",
        "Amount: $0 → $5",
        "Quantity: 1 → 10",
        "Tiers: 2 tiers → 3 tiers",
    ]


def test_detect_changes_returns_structured_records() -> None:
    changes = detect_changes(_fixed("40"), PriceOverride(amount="50"))
    assert changes == [OverrideChange(kind=ChangeKind.AMOUNT, before="40", after="50")]


def test_detect_changes_tier_records(tiered_price: Price) -> None:
    override = PriceOverride(tiers=[Tier(up_to=100, unit_amount="3"), Tier(unit_amount="1")])
    (change,) = detect_changes(tiered_price, override)
    assert change.kind is ChangeKind.TIERS
    assert len(change.tiers) == 1
    assert change.tiers[0].index == 0
    assert change.tiers[0].changes[0].field is TierField.UNIT_AMOUNT
    assert change.tiers[0].changes[0].before == "2"
    assert change.tiers[0].changes[0].after == "3"


def test_custom_rule_set(tiered_price: Price) -> None:
    override = PriceOverride(billing_model="PACKAGE", amount="9")
    assert diff_override(tiered_price, override, rules=[AmountRule()]) == ["Amount: $0 → $9"]


def test_diff_is_deterministic(tiered_price: Price) -> None:
    override = PriceOverride(tier_mode="SLAB", amount="3")
    assert diff_override(tiered_price, override) == diff_override(tiered_price, override)


# ---------------------------------------------------------------------------
# has_overrides / overridden_fields
# ---------------------------------------------------------------------------


def test_has_overrides() -> None:
    assert has_overrides(None) is False
    assert has_overrides(PriceOverride()) is False
    assert has_overrides(PriceOverride(amount="5")) is False
    assert has_overrides(PriceOverride(quantity=2)) is True
    assert has_overrides(PriceOverride(tiers=[])) is True


def test_overridden_fields() -> None:
    override = PriceOverride(price_id="p1", amount="5", tier_mode="SLAB")
    assert overridden_fields(override) == {"amount", "tier_mode"}
    assert overridden_fields(None) == set()
