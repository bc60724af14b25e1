"""Domain models for calculator outputs."""

from dataclasses import dataclass, field
from decimal import Decimal

from investcalc.utils.decimal_utils import ZERO


@dataclass(frozen=True)
class ObjectInvestmentResult:
    """Derived figures of an object investment."""

    net_gain_monthly: Decimal
    net_gain_yearly: Decimal
    yield_pct_yearly: Decimal


@dataclass(frozen=True)
class CreditResult:
    """Derived first-month figures of a credit."""

    outstanding_debt: Decimal
    interest_monthly: Decimal
    interest_yearly: Decimal
    total_monthly: Decimal


@dataclass(frozen=True)
class TaxBreakdown:
    """Amounts produced by an ordered tax pipeline.

    Attributes:
        amounts: Amount per stage key, in pipeline order.
        total: Sum of all stage amounts.
    """

    amounts: dict[str, Decimal] = field(default_factory=dict)
    total: Decimal = ZERO

    def amount(self, key: str) -> Decimal:
        return self.amounts.get(key, ZERO)


@dataclass(frozen=True)
class RealEstateResult:
    """Derived figures of a real-estate investment."""

    purchase_costs_total: Decimal
    additional_costs_total: Decimal
    applied_purchase_costs_total: Decimal
    total_invested: Decimal
    annual_cold_rent: Decimal
    income_tax_annual: Decimal
    solidarity_annual: Decimal
    church_tax_annual: Decimal
    other_deductions_annual: Decimal
    net_rent_after_tax_annual: Decimal
    apportionable_annual: Decimal
    non_apportionable_annual: Decimal
    house_fee_annual: Decimal
    other_running_costs_annual: Decimal
    total_running_costs_annual: Decimal
    net_gain_monthly: Decimal
    net_gain_yearly: Decimal
    yield_pct_yearly: Decimal


@dataclass(frozen=True)
class DepositResult:
    """Derived figures of a fixed-term deposit."""

    gross_gain: Decimal
    gross_gain_yearly: Decimal
    annual_tax: Decimal
    fees_yearly: Decimal
    fees_total: Decimal
    net_gain_monthly: Decimal
    net_gain_yearly: Decimal
    yield_pct_yearly: Decimal


@dataclass(frozen=True)
class StockResult:
    """Derived figures of a stock position."""

    total_investment: Decimal
    annual_gross_dividend: Decimal
    annual_tax: Decimal
    depot_costs_yearly: Decimal
    order_costs_buy: Decimal
    order_costs_sell: Decimal
    gross_sale_proceeds: Decimal
    net_sale_proceeds: Decimal
    net_gain_monthly: Decimal
    net_gain_yearly: Decimal
    yield_pct_yearly: Decimal


__all__ = [
    "ObjectInvestmentResult",
    "CreditResult",
    "TaxBreakdown",
    "RealEstateResult",
    "DepositResult",
    "StockResult",
]
