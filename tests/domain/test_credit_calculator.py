"""Tests for the credit calculator."""

from decimal import Decimal
from unittest.mock import MagicMock

from investcalc.domain.services.credit import (
    amort_monthly_from_initial_repayment,
    compute_credit,
)


def test_compute_credit_first_month_interest_and_total():
    """Interest applies to principal minus equity at a monthly rate."""
    result = compute_credit("200000", "50000", "3.2", "600")

    assert result.outstanding_debt == Decimal("150000.00")
    assert result.interest_monthly == Decimal("400.00")
    assert result.interest_yearly == Decimal("4800.00")
    assert result.total_monthly == Decimal("1000.00")


def test_compute_credit_allows_equity_above_principal():
    """Negative outstanding debt is permitted and produces a warning."""
    logger = MagicMock()

    result = compute_credit("100000", "120000", "3", "0", logger=logger)

    assert result.outstanding_debt == Decimal("-20000.00")
    assert result.interest_monthly == Decimal("-50.00")
    logger.warning.assert_called_once()


def test_compute_credit_without_logger_does_not_validate():
    result = compute_credit("1000", "2000", "12", "0")

    assert result.interest_monthly == Decimal("-10.00")


def test_amort_monthly_from_initial_repayment():
    assert amort_monthly_from_initial_repayment("200000", "2") == Decimal(
        "333.33"
    )
