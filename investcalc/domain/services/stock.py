"""Domain service for dividend-paying stock positions."""

from collections.abc import Sequence

from investcalc.domain.models.cost_items import CostItem
from investcalc.domain.models.results import StockResult
from investcalc.domain.services.cost_items import amount_of, find_item
from investcalc.domain.services.tax_pipeline import capital_income_tax
from investcalc.utils.decimal_utils import (
    HUNDRED,
    MONTHS_PER_YEAR,
    ZERO,
    coerce_decimal,
    round_half_up,
)

ORDER_COST_BUY = "orderCostBuy"
ORDER_COST_SELL = "orderCostSell"
DEPOT_COSTS_YEARLY = "depotCostsYearly"


def _cost(items: Sequence[CostItem], key: str, base):
    item = find_item(items, key)
    return amount_of(item, base) if item is not None else ZERO


def compute_stock(
    price_per_share,
    number_of_shares,
    dividend_per_share,
    *,
    expected_sell_price=ZERO,
    selling_costs=ZERO,
    tax_free_allowance=ZERO,
    cost_items: Sequence[CostItem] = (),
    tax_items: Sequence[CostItem] = (),
) -> StockResult:
    """Compute all derived figures of a stock position.

    The net gain is the yearly gross dividend minus dividend taxes and
    depot costs. One-off order costs and the exit figures are reported but
    do not enter the net gain. Percent order costs refer to the traded
    volume; percent depot costs refer to the total investment.

    Args:
        price_per_share: Purchase price of one share.
        number_of_shares: Shares held.
        dividend_per_share: Yearly dividend per share.
        expected_sell_price: Share price expected at exit.
        selling_costs: Flat costs of the exit.
        tax_free_allowance: Yearly dividend exempt from withholding tax.
        cost_items: Buy order, sell order and yearly depot cost items.
        tax_items: Withholding, solidarity and church tax items.

    Returns:
        StockResult: Figures rounded to two fractional digits.
    """
    shares = coerce_decimal(number_of_shares)
    total_investment = coerce_decimal(price_per_share) * shares
    gross_dividend = shares * coerce_decimal(dividend_per_share)
    taxes = capital_income_tax(gross_dividend, tax_free_allowance, tax_items)
    depot_costs = _cost(cost_items, DEPOT_COSTS_YEARLY, total_investment)
    net_yearly = gross_dividend - taxes.total - depot_costs
    yield_pct = ZERO
    if total_investment > 0:
        yield_pct = net_yearly / total_investment * HUNDRED

    gross_sale = coerce_decimal(expected_sell_price) * shares
    return StockResult(
        total_investment=round_half_up(total_investment),
        annual_gross_dividend=round_half_up(gross_dividend),
        annual_tax=round_half_up(taxes.total),
        depot_costs_yearly=round_half_up(depot_costs),
        order_costs_buy=round_half_up(
            _cost(cost_items, ORDER_COST_BUY, total_investment)
        ),
        order_costs_sell=round_half_up(
            _cost(cost_items, ORDER_COST_SELL, gross_sale)
        ),
        gross_sale_proceeds=round_half_up(gross_sale),
        net_sale_proceeds=round_half_up(
            gross_sale - coerce_decimal(selling_costs)
        ),
        net_gain_monthly=round_half_up(net_yearly / MONTHS_PER_YEAR),
        net_gain_yearly=round_half_up(net_yearly),
        yield_pct_yearly=round_half_up(yield_pct),
    )


__all__ = [
    "ORDER_COST_BUY",
    "ORDER_COST_SELL",
    "DEPOT_COSTS_YEARLY",
    "compute_stock",
]
