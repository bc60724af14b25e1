"""Tests for the object investment calculator."""

from decimal import Decimal

from investcalc.domain.services.object_investment import (
    compute_object_investment,
)


def test_compute_object_investment_net_gain_and_yield():
    """Net gain is revenue minus cost; yield refers to the price."""
    result = compute_object_investment("1200", "300", "100000")

    assert result.net_gain_monthly == Decimal("900.00")
    assert result.net_gain_yearly == Decimal("10800.00")
    assert result.yield_pct_yearly == Decimal("10.80")


def test_compute_object_investment_zero_price_yields_zero():
    result = compute_object_investment("100", "0", "0")

    assert result.net_gain_yearly == Decimal("1200.00")
    assert result.yield_pct_yearly == Decimal("0.00")


def test_compute_object_investment_treats_garbage_as_zero():
    result = compute_object_investment("abc", None, "")

    assert result.net_gain_monthly == Decimal("0.00")
    assert result.yield_pct_yearly == Decimal("0.00")
