"""Domain service for object investments."""

from investcalc.domain.models.results import ObjectInvestmentResult
from investcalc.utils.decimal_utils import (
    HUNDRED,
    MONTHS_PER_YEAR,
    ZERO,
    coerce_decimal,
    round_half_up,
)


def compute_object_investment(
    gross_gain_monthly,
    cost_monthly,
    purchase_price,
) -> ObjectInvestmentResult:
    """Compute net gain and yield of an object investment.

    Args:
        gross_gain_monthly: Monthly revenue before costs.
        cost_monthly: Monthly running cost.
        purchase_price: Price paid for the object.

    Returns:
        ObjectInvestmentResult: Net gain per month and year plus the yearly
        yield over the purchase price (zero when the price is not positive).
    """
    net_monthly = round_half_up(
        coerce_decimal(gross_gain_monthly) - coerce_decimal(cost_monthly)
    )
    net_yearly = net_monthly * MONTHS_PER_YEAR
    price = coerce_decimal(purchase_price)
    yield_pct = ZERO
    if price > 0:
        yield_pct = net_yearly / price * HUNDRED
    return ObjectInvestmentResult(
        net_gain_monthly=net_monthly,
        net_gain_yearly=round_half_up(net_yearly),
        yield_pct_yearly=round_half_up(yield_pct),
    )


__all__ = ["compute_object_investment"]
