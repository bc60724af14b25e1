"""Domain models for investments and credits."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from investcalc.domain.models.cost_items import (
    CostItem,
    RunningCostSplit,
)
from investcalc.utils.decimal_utils import ZERO


class InvestmentKind(str, Enum):
    """Supported investment types."""

    OBJECT = "OBJECT"
    REAL_ESTATE = "REAL_ESTATE"
    FIXED_TERM_DEPOSIT = "FIXED_TERM_DEPOSIT"
    STOCK = "STOCK"


class Compounding(str, Enum):
    """Interest compounding schedule of a fixed-term deposit."""

    NONE = "NONE"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


@dataclass(frozen=True)
class ObjectInvestment:
    """Physical object yielding a monthly gain (e.g. a rented parking lot).

    Attributes:
        purchase_price: Price paid for the object.
        gross_gain_monthly: Monthly revenue before costs.
        cost_monthly: Monthly running cost.
        net_gain_monthly: Derived monthly gain after costs.
        net_gain_yearly: Derived yearly gain.
        yield_pct_yearly: Derived yearly yield over the purchase price.
    """

    id: str
    name: str
    currency: str = "EUR"
    purchase_price: Decimal = ZERO
    gross_gain_monthly: Decimal = ZERO
    cost_monthly: Decimal = ZERO
    net_gain_monthly: Decimal = ZERO
    net_gain_yearly: Decimal = ZERO
    yield_pct_yearly: Decimal = ZERO

    kind = InvestmentKind.OBJECT

    @property
    def start_amount(self) -> Decimal:
        return self.purchase_price

    @property
    def total_price(self) -> Decimal:
        return self.purchase_price


@dataclass(frozen=True)
class RealEstateInvestment:
    """Rented property with purchase costs, rent taxes and running costs."""

    id: str
    name: str
    currency: str = "EUR"
    purchase_price: Decimal = ZERO
    monthly_cold_rent: Decimal = ZERO
    purchase_cost_items: tuple[CostItem, ...] = ()
    additional_cost_items: tuple[CostItem, ...] = ()
    tax_deduction_items: tuple[CostItem, ...] = ()
    running_costs: RunningCostSplit = RunningCostSplit()
    other_running_cost_items: tuple[CostItem, ...] = ()
    purchase_costs_total: Decimal = ZERO
    additional_costs_total: Decimal = ZERO
    applied_purchase_costs_total: Decimal = ZERO
    total_invested: Decimal = ZERO
    annual_cold_rent: Decimal = ZERO
    income_tax_annual: Decimal = ZERO
    solidarity_annual: Decimal = ZERO
    church_tax_annual: Decimal = ZERO
    other_deductions_annual: Decimal = ZERO
    net_rent_after_tax_annual: Decimal = ZERO
    apportionable_annual: Decimal = ZERO
    non_apportionable_annual: Decimal = ZERO
    house_fee_annual: Decimal = ZERO
    other_running_costs_annual: Decimal = ZERO
    total_running_costs_annual: Decimal = ZERO
    net_gain_monthly: Decimal = ZERO
    net_gain_yearly: Decimal = ZERO
    yield_pct_yearly: Decimal = ZERO

    kind = InvestmentKind.REAL_ESTATE

    @property
    def start_amount(self) -> Decimal:
        return self.purchase_price

    @property
    def total_price(self) -> Decimal:
        return self.total_invested


@dataclass(frozen=True)
class DepositInvestment:
    """Fixed-term deposit with compounding, taxes and account fees."""

    id: str
    name: str
    currency: str = "EUR"
    start_amount: Decimal = ZERO
    term_months: int = 0
    rate_nominal: Decimal = ZERO
    compounding: Compounding = Compounding.NONE
    tax_free_allowance: Decimal = ZERO
    tax_items: tuple[CostItem, ...] = ()
    fee_items: tuple[CostItem, ...] = ()
    gross_gain: Decimal = ZERO
    gross_gain_yearly: Decimal = ZERO
    annual_tax: Decimal = ZERO
    fees_yearly: Decimal = ZERO
    fees_total: Decimal = ZERO
    net_gain_monthly: Decimal = ZERO
    net_gain_yearly: Decimal = ZERO
    yield_pct_yearly: Decimal = ZERO

    kind = InvestmentKind.FIXED_TERM_DEPOSIT

    @property
    def total_price(self) -> Decimal:
        return self.start_amount

    @property
    def withholding_tax_rate(self) -> Decimal | None:
        return self._enabled_rate("withholdingTax")

    @property
    def solidarity_surcharge_rate(self) -> Decimal | None:
        return self._enabled_rate("solidaritySurcharge")

    @property
    def church_tax_rate(self) -> Decimal | None:
        return self._enabled_rate("churchTax")

    def _enabled_rate(self, key: str) -> Decimal | None:
        for item in self.tax_items:
            if item.key == key and item.enabled:
                return item.value
        return None


@dataclass(frozen=True)
class StockInvestment:
    """Stock position held for its dividends.

    Attributes:
        price_per_share: Purchase price of one share.
        number_of_shares: Shares held; fractional shares are allowed.
        current_price: Latest known share price, for reference only.
        expected_price: Expected share price, for reference only.
        dividend_per_share: Yearly dividend paid per share.
        expected_sell_price: Share price expected at exit.
        selling_costs: Flat costs of the exit besides the sell order.
        cost_items: Buy order, sell order and yearly depot costs.
        tax_items: Withholding, solidarity and church tax on dividends.
    """

    id: str
    name: str
    currency: str = "EUR"
    isin_wkn: str = ""
    price_per_share: Decimal = ZERO
    number_of_shares: Decimal = ZERO
    current_price: Decimal = ZERO
    expected_price: Decimal = ZERO
    dividend_per_share: Decimal = ZERO
    expected_sell_price: Decimal = ZERO
    selling_costs: Decimal = ZERO
    tax_free_allowance: Decimal = ZERO
    cost_items: tuple[CostItem, ...] = ()
    tax_items: tuple[CostItem, ...] = ()
    total_investment: Decimal = ZERO
    annual_gross_dividend: Decimal = ZERO
    annual_tax: Decimal = ZERO
    depot_costs_yearly: Decimal = ZERO
    order_costs_buy: Decimal = ZERO
    order_costs_sell: Decimal = ZERO
    gross_sale_proceeds: Decimal = ZERO
    net_sale_proceeds: Decimal = ZERO
    net_gain_monthly: Decimal = ZERO
    net_gain_yearly: Decimal = ZERO
    yield_pct_yearly: Decimal = ZERO

    kind = InvestmentKind.STOCK

    @property
    def start_amount(self) -> Decimal:
        return self.price_per_share

    @property
    def total_price(self) -> Decimal:
        return self.total_investment


Investment = (
    ObjectInvestment
    | RealEstateInvestment
    | DepositInvestment
    | StockInvestment
)


@dataclass(frozen=True)
class Credit:
    """Loan financing an investment, modelled as a first-month snapshot."""

    id: str
    name: str
    currency: str = "EUR"
    principal: Decimal = ZERO
    equity: Decimal = ZERO
    rate_annual_pct: Decimal = ZERO
    amort_monthly: Decimal = ZERO
    term_months: int = 0
    interest_monthly: Decimal = ZERO
    interest_yearly: Decimal = ZERO
    total_monthly: Decimal = ZERO

    @property
    def outstanding_debt(self) -> Decimal:
        return self.principal - self.equity


__all__ = [
    "InvestmentKind",
    "Compounding",
    "ObjectInvestment",
    "RealEstateInvestment",
    "DepositInvestment",
    "StockInvestment",
    "Investment",
    "Credit",
]
