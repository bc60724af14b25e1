"""Domain service for real-estate investments.

The calculation runs in four stages: purchase-side costs, rent taxes,
running costs and the final net gain and yield over total invested capital.
"""

from collections.abc import Sequence
from dataclasses import replace
from decimal import Decimal

from investcalc.domain.models.cost_items import (
    CostItem,
    CostMode,
    FixedAmount,
    HouseFee,
    RunningCostBlock,
    RunningCostMode,
    RunningCostSplit,
)
from investcalc.domain.models.profiles import RunningCostRates
from investcalc.domain.models.results import RealEstateResult, TaxBreakdown
from investcalc.domain.services.cost_items import find_item, section_total
from investcalc.domain.services.tax_pipeline import (
    DeductionStage,
    run_tax_pipeline,
)
from investcalc.utils.decimal_utils import (
    HUNDRED,
    MONTHS_PER_YEAR,
    ZERO,
    coerce_decimal,
    percent_of,
    round_half_up,
)

INCOME_TAX = "incomeTax"
SOLIDARITY_SURCHARGE = "solidaritySurcharge"
CHURCH_TAX = "churchTax"
OTHER_DEDUCTIONS = "otherDeductions"
SUBVENTION = "subvention"


def purchase_side_costs(
    purchase_price,
    purchase_cost_items: Sequence[CostItem],
    additional_cost_items: Sequence[CostItem],
) -> tuple[Decimal, Decimal]:
    """Return the purchase cost and additional cost totals.

    Percent items refer to the purchase price. A subvention carries a
    subtractive effect and lowers the additional cost total.
    """
    price = coerce_decimal(purchase_price)
    return (
        section_total(purchase_cost_items, price),
        section_total(additional_cost_items, price),
    )


def rent_tax_breakdown(
    annual_cold_rent,
    tax_items: Sequence[CostItem],
) -> TaxBreakdown:
    """Compute the annual rent tax waterfall.

    Income tax applies to the annual cold rent; solidarity surcharge and
    church tax apply to the income tax amount. Other deductions are a
    percentage of the annual rent, or a monthly amount in currency mode.

    Args:
        annual_cold_rent: Twelve months of cold rent.
        tax_items: Rent tax items keyed by stage name.

    Returns:
        TaxBreakdown: Amount per stage and the total deduction.
    """
    other = find_item(tax_items, OTHER_DEDUCTIONS)
    if other is not None and isinstance(other.amount, FixedAmount):
        yearly = other.amount.amount * MONTHS_PER_YEAR
        other = replace(other, amount=FixedAmount(amount=yearly))
    stages = [
        DeductionStage(INCOME_TAX, find_item(tax_items, INCOME_TAX)),
        DeductionStage(
            SOLIDARITY_SURCHARGE,
            find_item(tax_items, SOLIDARITY_SURCHARGE),
            base=INCOME_TAX,
        ),
        DeductionStage(
            CHURCH_TAX,
            find_item(tax_items, CHURCH_TAX),
            base=INCOME_TAX,
        ),
        DeductionStage(OTHER_DEDUCTIONS, other),
    ]
    return run_tax_pipeline(annual_cold_rent, stages)


def running_costs_annual(
    annual_cold_rent,
    split: RunningCostSplit,
    rates: RunningCostRates,
) -> tuple[Decimal, Decimal]:
    """Return the apportionable and non-apportionable annual running costs."""
    annual_cold_rent = coerce_decimal(annual_cold_rent)
    apportionable = _block_amount(
        split.apportionable,
        annual_cold_rent,
        rates.apportionable_pct,
    )
    non_apportionable = _block_amount(
        split.non_apportionable,
        annual_cold_rent,
        rates.non_apportionable_pct,
    )
    return apportionable, non_apportionable


def house_fee_annual(monthly_cold_rent, house_fee: HouseFee) -> Decimal:
    """Return the yearly owner share of the house fee.

    The apportionable share is passed on to the tenant; only the rest is
    a cost.
    """
    if not house_fee.enabled:
        return ZERO
    total = coerce_decimal(house_fee.total)
    apportionable = coerce_decimal(house_fee.apportionable)
    if house_fee.mode is CostMode.PERCENT:
        rent = coerce_decimal(monthly_cold_rent)
        total = percent_of(rent, total)
        apportionable = percent_of(rent, apportionable)
    return (total - apportionable) * MONTHS_PER_YEAR


def other_running_costs_annual(
    monthly_cold_rent,
    items: Sequence[CostItem],
) -> Decimal:
    """Return the yearly total of other owner-borne running costs.

    Items are monthly: percentages refer to the monthly cold rent and
    currency amounts are monthly amounts.
    """
    return section_total(items, monthly_cold_rent) * MONTHS_PER_YEAR


def _block_amount(
    block: RunningCostBlock,
    annual_cold_rent: Decimal,
    standard_pct: Decimal,
) -> Decimal:
    if block.mode is RunningCostMode.NONE:
        return ZERO
    if block.mode is RunningCostMode.MANUAL:
        return coerce_decimal(block.manual_annual)
    return percent_of(annual_cold_rent, standard_pct)


def compute_real_estate(
    purchase_price,
    monthly_cold_rent,
    *,
    purchase_cost_items: Sequence[CostItem] = (),
    additional_cost_items: Sequence[CostItem] = (),
    tax_deduction_items: Sequence[CostItem] = (),
    running_costs: RunningCostSplit = RunningCostSplit(),
    other_running_cost_items: Sequence[CostItem] = (),
    rates: RunningCostRates = RunningCostRates(),
) -> RealEstateResult:
    """Compute all derived figures of a real-estate investment.

    Only owner-borne running costs reduce the net gain; apportionable costs
    and the apportionable house fee share are passed through to the tenant.
    The yield refers to the purchase price plus all enabled purchase-side
    costs.

    Args:
        purchase_price: Price of the property.
        monthly_cold_rent: Rent excluding operating costs.
        purchase_cost_items: Basic purchase costs (broker, transfer tax, ...).
        additional_cost_items: Optional costs and the subvention.
        tax_deduction_items: Rent tax items.
        running_costs: Running cost split selection and house fee.
        other_running_cost_items: Monthly owner-borne running costs.
        rates: Standard running cost percentages.

    Returns:
        RealEstateResult: Figures rounded to two fractional digits.
    """
    price = coerce_decimal(purchase_price)
    monthly_rent = coerce_decimal(monthly_cold_rent)
    purchase_total, additional_total = purchase_side_costs(
        price,
        purchase_cost_items,
        additional_cost_items,
    )
    annual_rent = monthly_rent * MONTHS_PER_YEAR
    taxes = rent_tax_breakdown(annual_rent, tax_deduction_items)
    apportionable, non_apportionable = running_costs_annual(
        annual_rent,
        running_costs,
        rates,
    )
    house_fee = house_fee_annual(monthly_rent, running_costs.house_fee)
    other_running = other_running_costs_annual(
        monthly_rent,
        other_running_cost_items,
    )

    net_rent_after_tax = annual_rent - taxes.total
    owner_running = non_apportionable + house_fee + other_running
    net_yearly = net_rent_after_tax - owner_running
    total_invested = price + purchase_total + additional_total
    yield_pct = ZERO
    if total_invested > 0:
        yield_pct = net_yearly / total_invested * HUNDRED

    return RealEstateResult(
        purchase_costs_total=round_half_up(purchase_total),
        additional_costs_total=round_half_up(additional_total),
        applied_purchase_costs_total=round_half_up(
            purchase_total + additional_total
        ),
        total_invested=round_half_up(total_invested),
        annual_cold_rent=round_half_up(annual_rent),
        income_tax_annual=round_half_up(taxes.amount(INCOME_TAX)),
        solidarity_annual=round_half_up(taxes.amount(SOLIDARITY_SURCHARGE)),
        church_tax_annual=round_half_up(taxes.amount(CHURCH_TAX)),
        other_deductions_annual=round_half_up(
            taxes.amount(OTHER_DEDUCTIONS)
        ),
        net_rent_after_tax_annual=round_half_up(net_rent_after_tax),
        apportionable_annual=round_half_up(apportionable),
        non_apportionable_annual=round_half_up(non_apportionable),
        house_fee_annual=round_half_up(house_fee),
        other_running_costs_annual=round_half_up(other_running),
        total_running_costs_annual=round_half_up(
            apportionable + owner_running
        ),
        net_gain_monthly=round_half_up(net_yearly / MONTHS_PER_YEAR),
        net_gain_yearly=round_half_up(net_yearly),
        yield_pct_yearly=round_half_up(yield_pct),
    )


__all__ = [
    "INCOME_TAX",
    "SOLIDARITY_SURCHARGE",
    "CHURCH_TAX",
    "OTHER_DEDUCTIONS",
    "SUBVENTION",
    "purchase_side_costs",
    "rent_tax_breakdown",
    "running_costs_annual",
    "house_fee_annual",
    "other_running_costs_annual",
    "compute_real_estate",
]
