"""Tests for cashflow composition and enrichment."""

from decimal import Decimal
from unittest.mock import MagicMock

from investcalc.domain.models import (
    NOT_FOUND_LABEL,
    Cashflow,
    Credit,
    ObjectInvestment,
)
from investcalc.domain.services.cashflow import (
    compute_cashflow_monthly,
    enrich_cashflows,
    summarize_cashflows,
)
from investcalc.domain.services.fx import CurrencyConverter


def _investment(currency="EUR", net="900", price="100000"):
    return ObjectInvestment(
        id="obj_1",
        name="Parking lot",
        currency=currency,
        purchase_price=Decimal(price),
        net_gain_monthly=Decimal(net),
    )


def _credit():
    return Credit(
        id="cr_1",
        name="Loan",
        principal=Decimal("200000"),
        equity=Decimal("50000"),
        rate_annual_pct=Decimal("3.2"),
        amort_monthly=Decimal("600"),
        interest_monthly=Decimal("400"),
    )


def test_compute_cashflow_monthly_subtracts_interest_and_amortization():
    result = compute_cashflow_monthly(_investment(), _credit())

    assert result == Decimal("-100.00")


def test_compute_cashflow_monthly_without_credit():
    assert compute_cashflow_monthly(_investment(), None) == Decimal("900.00")


def test_enrich_rounds_converted_monthly_before_deriving_yearly():
    """Displayed yearly must equal displayed monthly times twelve."""
    converter = CurrencyConverter(
        "EUR",
        {"USD": Decimal("1.1")},
        MagicMock(),
    )
    cashflow = Cashflow(
        id="cf_1",
        name="Lot",
        investment_id="obj_1",
        cashflow_monthly=Decimal("110.55"),
    )

    [item] = enrich_cashflows(
        [cashflow],
        {"obj_1": _investment(currency="USD")},
        {},
        converter,
        MagicMock(),
    )

    assert item.display_cashflow_monthly == 101
    assert item.display_cashflow_yearly == 1212
    assert item.currency == "USD"
    assert item.yield_pct == Decimal("1.33")
    assert item.credit_name == NOT_FOUND_LABEL


def test_enrich_rounds_half_away_from_zero():
    converter = CurrencyConverter("EUR", {}, MagicMock())
    cashflows = [
        Cashflow("cf_1", "up", "obj_1", cashflow_monthly=Decimal("100.50")),
        Cashflow("cf_2", "down", "obj_1", cashflow_monthly=Decimal("-100.50")),
    ]

    items = enrich_cashflows(
        cashflows,
        {"obj_1": _investment()},
        {},
        converter,
        MagicMock(),
    )

    assert [item.display_cashflow_monthly for item in items] == [101, -101]


def test_enrich_missing_investment_contributes_zero_with_placeholder():
    logger = MagicMock()
    converter = CurrencyConverter("EUR", {}, logger)
    cashflow = Cashflow(
        id="cf_1",
        name="Orphan",
        investment_id="gone",
        credit_id="also_gone",
        cashflow_monthly=Decimal("500"),
    )

    [item] = enrich_cashflows([cashflow], {}, {}, converter, logger)

    assert item.investment_name == NOT_FOUND_LABEL
    assert item.credit_name == NOT_FOUND_LABEL
    assert item.display_cashflow_monthly == 0
    assert item.yield_pct == Decimal("0.00")
    assert logger.warning.call_count == 2


def test_summarize_cashflows_counts_signs():
    converter = CurrencyConverter("EUR", {}, MagicMock())
    cashflows = [
        Cashflow("cf_1", "a", "obj_1", cashflow_monthly=Decimal("101")),
        Cashflow("cf_2", "b", "obj_1", cashflow_monthly=Decimal("-100")),
        Cashflow("cf_3", "c", "obj_1", cashflow_monthly=Decimal("0")),
    ]
    items = enrich_cashflows(
        cashflows,
        {"obj_1": _investment()},
        {},
        converter,
        MagicMock(),
    )

    totals = summarize_cashflows(items, "EUR")

    assert totals.monthly == 1
    assert totals.yearly == 12
    assert totals.positive_count == 1
    assert totals.negative_count == 1
    assert totals.currency == "EUR"


def test_enrich_missing_credit_counts_as_zero():
    logger = MagicMock()
    converter = CurrencyConverter("EUR", {}, logger)
    cashflow = Cashflow(
        id="cf_1",
        name="Lot financed",
        investment_id="obj_1",
        credit_id="cr_deleted",
        cashflow_monthly=Decimal("-100"),
    )

    [item] = enrich_cashflows(
        [cashflow],
        {"obj_1": _investment()},
        {},
        converter,
        logger,
    )

    assert item.investment_name == "Parking lot"
    assert item.credit_name == NOT_FOUND_LABEL
    assert item.display_cashflow_monthly == 900
    assert item.display_cashflow_yearly == 10800
    assert item.yield_pct == Decimal("10.80")
    logger.warning.assert_called_once()


def test_enrich_resolved_credit_keeps_stored_snapshot():
    converter = CurrencyConverter("EUR", {}, MagicMock())
    cashflow = Cashflow(
        id="cf_1",
        name="Lot financed",
        investment_id="obj_1",
        credit_id="cr_1",
        cashflow_monthly=Decimal("-100"),
    )

    [item] = enrich_cashflows(
        [cashflow],
        {"obj_1": _investment(net="1000")},
        {"cr_1": _credit()},
        converter,
        MagicMock(),
    )

    assert item.credit_name == "Loan"
    assert item.display_cashflow_monthly == -100
