"""Domain service for fixed-term deposits."""

from collections.abc import Sequence
from decimal import ROUND_DOWN, Decimal

from investcalc.domain.models.cost_items import CostItem
from investcalc.domain.models.investments import Compounding
from investcalc.domain.models.results import DepositResult, TaxBreakdown
from investcalc.domain.services.cost_items import section_total
from investcalc.domain.services.tax_pipeline import (
    CHURCH_TAX,
    SOLIDARITY_SURCHARGE,
    WITHHOLDING_TAX,
    capital_income_tax,
)
from investcalc.utils.decimal_utils import (
    HUNDRED,
    MONTHS_PER_YEAR,
    ZERO,
    coerce_decimal,
    round_half_up,
)


def coerce_term_months(value) -> int:
    """Return the whole months of a term; unparseable values become 0."""
    months = coerce_decimal(value).to_integral_value(rounding=ROUND_DOWN)
    return max(int(months), 0)


def coerce_compounding(value) -> Compounding:
    """Parse a compounding schedule case-insensitively.

    Unknown values fall back to ``Compounding.NONE``.
    """
    if isinstance(value, Compounding):
        return value
    raw = str(value or "").strip().upper()
    try:
        return Compounding(raw)
    except ValueError:
        return Compounding.NONE


def gross_gain(
    start_amount,
    rate_nominal,
    term_months,
    compounding: Compounding | str,
) -> Decimal:
    """Compute the gross interest earned over the full term.

    ``YEARLY`` compounding compounds whole years and applies simple interest
    on the already compounded principal for the remaining months.

    Args:
        start_amount: Deposited amount.
        rate_nominal: Nominal annual rate in percent.
        term_months: Term length in months.
        compounding: Compounding schedule.

    Returns:
        Decimal: Unrounded gross gain; zero for non-positive inputs.
    """
    start = coerce_decimal(start_amount)
    rate = coerce_decimal(rate_nominal) / HUNDRED
    months = coerce_term_months(term_months)
    if start <= 0 or rate <= 0 or months <= 0:
        return ZERO
    compounding = coerce_compounding(compounding)
    if compounding is Compounding.NONE:
        return start * rate * Decimal(months) / MONTHS_PER_YEAR
    if compounding is Compounding.MONTHLY:
        return start * (1 + rate / MONTHS_PER_YEAR) ** months - start
    full_years, remaining_months = divmod(months, 12)
    principal = start * (1 + rate) ** full_years
    if remaining_months:
        principal += (
            principal * rate * Decimal(remaining_months) / MONTHS_PER_YEAR
        )
    return principal - start


def deposit_tax_annual(
    gross_gain_yearly,
    tax_free_allowance,
    tax_items: Sequence[CostItem],
) -> TaxBreakdown:
    """Compute the yearly tax on deposit interest above the allowance."""
    return capital_income_tax(gross_gain_yearly, tax_free_allowance, tax_items)


def compute_deposit(
    start_amount,
    term_months,
    rate_nominal,
    compounding: Compounding | str,
    *,
    tax_free_allowance=ZERO,
    tax_items: Sequence[CostItem] = (),
    fee_items: Sequence[CostItem] = (),
) -> DepositResult:
    """Compute all derived figures of a fixed-term deposit.

    Fee items are yearly amounts; percentages refer to the start amount.
    Taxes and fees never enter the gross gain.

    Args:
        start_amount: Deposited amount.
        term_months: Term length in months.
        rate_nominal: Nominal annual rate in percent.
        compounding: Compounding schedule.
        tax_free_allowance: Yearly gain exempt from withholding tax.
        tax_items: Withholding, solidarity and church tax items.
        fee_items: Yearly account fee items.

    Returns:
        DepositResult: Figures rounded to two fractional digits.
    """
    start = coerce_decimal(start_amount)
    months = coerce_term_months(term_months)
    term_years = Decimal(months) / MONTHS_PER_YEAR
    gross = gross_gain(start, rate_nominal, months, compounding)
    gross_yearly = gross / term_years if term_years > 0 else ZERO
    taxes = deposit_tax_annual(gross_yearly, tax_free_allowance, tax_items)
    fees_yearly = section_total(fee_items, start)
    net_yearly = gross_yearly - taxes.total - fees_yearly
    yield_pct = ZERO
    if start > 0:
        yield_pct = net_yearly / start * HUNDRED
    return DepositResult(
        gross_gain=round_half_up(gross),
        gross_gain_yearly=round_half_up(gross_yearly),
        annual_tax=round_half_up(taxes.total),
        fees_yearly=round_half_up(fees_yearly),
        fees_total=round_half_up(fees_yearly * term_years),
        net_gain_monthly=round_half_up(net_yearly / MONTHS_PER_YEAR),
        net_gain_yearly=round_half_up(net_yearly),
        yield_pct_yearly=round_half_up(yield_pct),
    )


__all__ = [
    "WITHHOLDING_TAX",
    "SOLIDARITY_SURCHARGE",
    "CHURCH_TAX",
    "coerce_term_months",
    "coerce_compounding",
    "gross_gain",
    "deposit_tax_annual",
    "compute_deposit",
]
