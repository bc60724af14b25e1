"""Domain services composing investments and credits into cashflows."""

from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal
from logging import Logger

from investcalc.domain.models.cashflow import (
    NOT_FOUND_LABEL,
    Cashflow,
    CashflowTotals,
    EnrichedCashflow,
)
from investcalc.domain.models.investments import Credit, Investment
from investcalc.domain.services.fx import CurrencyConverter
from investcalc.utils.decimal_utils import (
    HUNDRED,
    MONTHS_PER_YEAR,
    ZERO,
    coerce_decimal,
    round_half_up,
)


def compute_cashflow_monthly(
    investment: Investment,
    credit: Credit | None,
) -> Decimal:
    """Compute the monthly net cashflow of an investment and its credit.

    The investment's derived ``net_gain_monthly`` is used as is; raw inputs
    are not recomputed.

    Args:
        investment: Investment with derived figures.
        credit: Financing credit, or None.

    Returns:
        Decimal: Net gain minus credit interest and amortization, in cents.
    """
    cashflow = coerce_decimal(investment.net_gain_monthly)
    if credit is not None:
        cashflow -= coerce_decimal(credit.interest_monthly)
        cashflow -= coerce_decimal(credit.amort_monthly)
    return round_half_up(cashflow)


def enrich_cashflows(
    cashflows: Iterable[Cashflow],
    investments: Mapping[str, Investment],
    credits: Mapping[str, Credit],
    converter: CurrencyConverter,
    logger: Logger,
) -> list[EnrichedCashflow]:
    """Resolve references and derive display figures for cashflows.

    The converted monthly value is rounded to a whole number before the
    yearly value is derived, so displayed yearly always equals displayed
    monthly times twelve. The yield uses the unrounded, unconverted monthly
    value over the investment's total price.

    A missing investment contributes zero. A missing credit contributes
    zero too: the investment's own net gain replaces the stored snapshot.

    Args:
        cashflows: Stored cashflows.
        investments: Investments keyed by id.
        credits: Credits keyed by id.
        converter: Converter into the display currency.
        logger: Logger used for dangling reference warnings.

    Returns:
        list[EnrichedCashflow]: One entry per cashflow, in input order.
    """
    enriched: list[EnrichedCashflow] = []
    for cashflow in cashflows:
        investment = investments.get(cashflow.investment_id)
        credit = credits.get(cashflow.credit_id) if cashflow.credit_id else None
        if investment is None:
            logger.warning(
                f"Cashflow {cashflow.id} references missing investment "
                f"{cashflow.investment_id}"
            )
        if cashflow.credit_id and credit is None:
            logger.warning(
                f"Cashflow {cashflow.id} references missing credit "
                f"{cashflow.credit_id}"
            )

        if investment is None:
            original_monthly = ZERO
        elif cashflow.credit_id and credit is None:
            original_monthly = compute_cashflow_monthly(investment, None)
        else:
            original_monthly = coerce_decimal(cashflow.cashflow_monthly)
        currency = (
            investment.currency if investment else converter.main_currency
        )
        converted = (
            converter.convert(original_monthly, currency)
            if converter.is_active
            else original_monthly
        )
        rounded_monthly = int(
            converted.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        )

        yield_pct = ZERO
        total_price = (
            coerce_decimal(investment.total_price) if investment else ZERO
        )
        if total_price > 0:
            yield_pct = (
                original_monthly * MONTHS_PER_YEAR / total_price * HUNDRED
            )

        investment_name = investment.name if investment else NOT_FOUND_LABEL
        enriched.append(
            EnrichedCashflow(
                cashflow=cashflow,
                investment_name=investment_name,
                credit_name=credit.name if credit else NOT_FOUND_LABEL,
                currency=currency,
                display_cashflow_monthly=rounded_monthly,
                display_cashflow_yearly=rounded_monthly * 12,
                yield_pct=round_half_up(yield_pct),
            )
        )
    return enriched


def summarize_cashflows(
    items: Iterable[EnrichedCashflow],
    currency: str,
) -> CashflowTotals:
    """Total the display figures of enriched cashflows."""
    monthly = 0
    positive = 0
    negative = 0
    for item in items:
        monthly += item.display_cashflow_monthly
        if item.display_cashflow_monthly > 0:
            positive += 1
        elif item.display_cashflow_monthly < 0:
            negative += 1
    return CashflowTotals(
        monthly=monthly,
        yearly=monthly * 12,
        positive_count=positive,
        negative_count=negative,
        currency=currency,
    )


__all__ = [
    "compute_cashflow_monthly",
    "enrich_cashflows",
    "summarize_cashflows",
]
