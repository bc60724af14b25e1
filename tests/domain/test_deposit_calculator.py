"""Tests for the fixed-term deposit calculator."""

from decimal import Decimal

import pytest

from investcalc.domain.models import Compounding, CostItem
from investcalc.domain.services.deposit import (
    coerce_compounding,
    coerce_term_months,
    compute_deposit,
    deposit_tax_annual,
    gross_gain,
)


def _german_taxes():
    return (
        CostItem.build("withholdingTax", "25"),
        CostItem.build("solidaritySurcharge", "5.5"),
        CostItem.build("churchTax", "9", enabled=False),
    )


def test_gross_gain_simple_interest():
    result = compute_deposit("10000", 12, "2", Compounding.NONE)

    assert result.gross_gain == Decimal("200.00")
    assert result.net_gain_yearly == Decimal("200.00")
    assert result.yield_pct_yearly == Decimal("2.00")


def test_gross_gain_monthly_compounding():
    result = compute_deposit("10000", 12, "2", Compounding.MONTHLY)

    assert result.gross_gain == Decimal("201.84")


def test_yearly_compounding_applies_simple_interest_to_remaining_months():
    """18 months: one compounded year, then six months of simple interest."""
    gain = gross_gain("10000", "2", 18, Compounding.YEARLY)

    assert gain == Decimal("302")


@pytest.mark.parametrize(
    ("start", "rate", "months"),
    [("0", "2", 12), ("10000", "0", 12), ("10000", "2", 0)],
)
def test_gross_gain_is_zero_for_non_positive_inputs(start, rate, months):
    assert gross_gain(start, rate, months, "MONTHLY") == Decimal("0")


def test_taxes_apply_above_allowance_with_cascading_surcharge():
    result = compute_deposit(
        "10000",
        18,
        "2",
        Compounding.YEARLY,
        tax_free_allowance=Decimal("100"),
        tax_items=_german_taxes(),
    )

    assert result.gross_gain_yearly == Decimal("201.33")
    assert result.annual_tax == Decimal("26.73")
    assert result.net_gain_yearly == Decimal("174.61")
    assert result.net_gain_monthly == Decimal("14.55")
    assert result.yield_pct_yearly == Decimal("1.75")


def test_allowance_above_gain_means_no_tax():
    breakdown = deposit_tax_annual("200", "1000", _german_taxes())

    assert breakdown.total == Decimal("0")


def test_fees_are_yearly_and_scale_with_term():
    fees = (
        CostItem.build("accountYearly", "12", "currency"),
        CostItem.build("custody", "0.1"),
    )

    result = compute_deposit(
        "10000",
        24,
        "2",
        Compounding.NONE,
        fee_items=fees,
    )

    assert result.gross_gain == Decimal("400.00")
    assert result.gross_gain_yearly == Decimal("200.00")
    assert result.fees_yearly == Decimal("22.00")
    assert result.fees_total == Decimal("44.00")
    assert result.net_gain_yearly == Decimal("178.00")
    assert result.net_gain_monthly == Decimal("14.83")


@pytest.mark.parametrize("months", ["abc", None, "", "-6"])
def test_unparseable_or_negative_term_yields_zero_figures(months):
    result = compute_deposit("10000", months, "2", Compounding.NONE)

    assert result.gross_gain == Decimal("0.00")
    assert result.gross_gain_yearly == Decimal("0.00")
    assert result.net_gain_monthly == Decimal("0.00")


def test_term_with_fractional_part_uses_whole_months():
    result = compute_deposit("10000", "12.7", "2", Compounding.NONE)

    assert result.gross_gain == Decimal("200.00")
    assert compute_deposit("10000", "12.0", "2", "NONE") == result


def test_compounding_is_parsed_case_insensitively():
    result = compute_deposit("10000", 12, "2", "monthly")

    assert result.gross_gain == Decimal("201.84")


def test_unknown_compounding_falls_back_to_simple_interest():
    result = compute_deposit("10000", 12, "2", "weekly")

    assert result.gross_gain == Decimal("200.00")


def test_coerce_helpers_accept_existing_values():
    assert coerce_term_months(24) == 24
    assert coerce_compounding(Compounding.YEARLY) is Compounding.YEARLY
    assert coerce_compounding(None) is Compounding.NONE
