"""Domain service for credit interest and payments."""

from decimal import Decimal
from logging import Logger

from investcalc.domain.models.results import CreditResult
from investcalc.domain.services.validation import validate_outstanding_debt
from investcalc.utils.decimal_utils import (
    HUNDRED,
    MONTHS_PER_YEAR,
    coerce_decimal,
    round_half_up,
)


def compute_credit(
    principal,
    equity,
    rate_annual_pct,
    amort_monthly,
    logger: Logger | None = None,
) -> CreditResult:
    """Compute first-month interest and payment of a credit.

    Interest is charged on principal minus equity at the monthly share of
    the annual rate. Principal decay over the term is not modelled.

    Args:
        principal: Credit amount.
        equity: Own capital reducing the interest-bearing debt.
        rate_annual_pct: Nominal annual interest rate in percent.
        amort_monthly: Monthly amortization (repayment) amount.
        logger: Optional logger used for plausibility warnings.

    Returns:
        CreditResult: Outstanding debt, interest and total monthly payment.
    """
    principal = coerce_decimal(principal)
    equity = coerce_decimal(equity)
    outstanding = principal - equity
    if logger is not None:
        validate_outstanding_debt(principal, equity, logger)
    monthly_rate = coerce_decimal(rate_annual_pct) / HUNDRED / MONTHS_PER_YEAR
    interest_monthly = round_half_up(outstanding * monthly_rate)
    amort = round_half_up(amort_monthly)
    return CreditResult(
        outstanding_debt=round_half_up(outstanding),
        interest_monthly=interest_monthly,
        interest_yearly=interest_monthly * MONTHS_PER_YEAR,
        total_monthly=interest_monthly + amort,
    )


def amort_monthly_from_initial_repayment(
    principal,
    repayment_annual_pct,
) -> Decimal:
    """Derive the monthly amortization from an initial annual repayment rate.

    Args:
        principal: Credit amount.
        repayment_annual_pct: Share of the principal repaid per year, in
            percent.

    Returns:
        Decimal: Monthly amortization rounded to cents.
    """
    yearly = coerce_decimal(principal) * coerce_decimal(repayment_annual_pct)
    return round_half_up(yearly / HUNDRED / MONTHS_PER_YEAR)


__all__ = ["compute_credit", "amort_monthly_from_initial_repayment"]
