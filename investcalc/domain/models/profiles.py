"""Domain models for country-specific default configuration."""

from dataclasses import dataclass, field
from decimal import Decimal

from investcalc.domain.models.cost_items import (
    CostEffect,
    CostItem,
    CostMode,
    HouseFee,
)
from investcalc.domain.models.investments import Compounding
from investcalc.utils.decimal_utils import ZERO


@dataclass(frozen=True)
class CostItemDefaults:
    """Default state of a cost or tax line item."""

    enabled: bool
    value: Decimal
    mode: CostMode = CostMode.PERCENT
    allow_mode_change: bool = True
    label: str = ""
    effect: CostEffect = CostEffect.ADD

    def to_cost_item(self, key: str) -> CostItem:
        return CostItem.build(
            key,
            self.value,
            self.mode,
            enabled=self.enabled,
            label=self.label or key,
            allow_mode_change=self.allow_mode_change,
            effect=self.effect,
        )


@dataclass(frozen=True)
class RunningCostRates:
    """Standard running-cost percentages of the annual cold rent."""

    apportionable_pct: Decimal = ZERO
    non_apportionable_pct: Decimal = ZERO


@dataclass(frozen=True)
class RealEstateDefaults:
    """Defaults for real-estate investments."""

    purchase_costs: dict[str, CostItemDefaults] = field(default_factory=dict)
    additional_costs: dict[str, CostItemDefaults] = field(
        default_factory=dict
    )
    rent_taxes: dict[str, CostItemDefaults] = field(default_factory=dict)
    running_cost_rates: RunningCostRates = RunningCostRates()
    house_fee: HouseFee = HouseFee()
    other_running_costs: dict[str, CostItemDefaults] = field(
        default_factory=dict
    )


@dataclass(frozen=True)
class DepositDefaults:
    """Defaults for fixed-term deposits."""

    start_amount: Decimal = ZERO
    term_months: int = 12
    rate_nominal: Decimal = ZERO
    compounding: Compounding = Compounding.YEARLY
    tax_free_allowance: Decimal = ZERO
    taxes: dict[str, CostItemDefaults] = field(default_factory=dict)
    fees: dict[str, CostItemDefaults] = field(default_factory=dict)


@dataclass(frozen=True)
class StockDefaults:
    """Defaults for stock positions."""

    tax_free_allowance: Decimal = ZERO
    selling_costs: Decimal = ZERO
    costs: dict[str, CostItemDefaults] = field(default_factory=dict)
    taxes: dict[str, CostItemDefaults] = field(default_factory=dict)


@dataclass(frozen=True)
class CreditDefaults:
    """Defaults for credits."""

    rate_annual_pct: Decimal = ZERO
    repayment_initial_pct: Decimal = ZERO
    term_months: int = 120


@dataclass(frozen=True)
class CountryProfile:
    """Default rates and enablement flags for one country."""

    code: str
    currency: str
    real_estate: RealEstateDefaults = RealEstateDefaults()
    deposit: DepositDefaults = DepositDefaults()
    stock: StockDefaults = StockDefaults()
    credit: CreditDefaults = CreditDefaults()


__all__ = [
    "CostItemDefaults",
    "RunningCostRates",
    "RealEstateDefaults",
    "DepositDefaults",
    "StockDefaults",
    "CreditDefaults",
    "CountryProfile",
]
