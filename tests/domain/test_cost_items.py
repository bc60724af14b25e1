"""Tests for cost line items and mode toggling."""

from decimal import Decimal

import pytest

from investcalc.domain.models import (
    CostEffect,
    CostItem,
    CostMode,
    FixedAmount,
    PercentOf,
)
from investcalc.domain.services.cost_items import (
    CostModeLockedError,
    amount_of,
    find_item,
    section_total,
    set_enabled,
    toggle_mode,
)


def test_build_creates_tagged_amount_variants():
    percent = CostItem.build("notaryFees", "1,5")
    fixed = CostItem.build("renovationCosts", "2000", CostMode.CURRENCY)

    assert percent.amount == PercentOf(rate_pct=Decimal("1.5"))
    assert percent.mode is CostMode.PERCENT
    assert fixed.amount == FixedAmount(amount=Decimal("2000"))
    assert fixed.mode is CostMode.CURRENCY
    assert fixed.value == Decimal("2000")


def test_disabled_item_contributes_nothing():
    item = CostItem.build("brokerCommission", "3.57", enabled=False)

    assert amount_of(item, "300000") == Decimal("0")


def test_section_total_subtracts_subvention():
    items = [
        CostItem.build("renovationCosts", "10000", "currency"),
        CostItem.build(
            "subvention",
            "4000",
            "currency",
            effect=CostEffect.SUBTRACT,
        ),
        CostItem.build("appraisalFee", "1", enabled=False),
    ]

    assert section_total(items, "300000") == Decimal("6000")


def test_toggle_mode_preserves_absolute_amount_both_ways():
    """Percent to currency and back should restore the original rate."""
    item = CostItem.build("brokerCommission", "3.57")

    as_currency = toggle_mode(item, "300000")
    back = toggle_mode(as_currency, "300000")

    assert as_currency.mode is CostMode.CURRENCY
    assert as_currency.value == Decimal("10710.00")
    assert amount_of(as_currency, "300000") == amount_of(item, "300000")
    assert back.mode is CostMode.PERCENT
    assert back.value == Decimal("3.57")


def test_toggle_mode_with_zero_base_gives_zero_percent():
    item = CostItem.build("notaryFees", "1500", "currency")

    toggled = toggle_mode(item, "0")

    assert toggled.value == Decimal("0")
    assert toggled.mode is CostMode.PERCENT


def test_toggle_mode_rejects_locked_items():
    item = CostItem.build("incomeTax", "30", allow_mode_change=False)

    with pytest.raises(CostModeLockedError):
        toggle_mode(item, "12000")


def test_set_enabled_and_find_item():
    items = [CostItem.build("a", "1"), CostItem.build("b", "2")]

    disabled = set_enabled(items[1], False)

    assert disabled.enabled is False
    assert find_item(items, "b") is items[1]
    assert find_item(items, "missing") is None
