"""Domain models package."""

from .cashflow import (
    NOT_FOUND_LABEL,
    Cashflow,
    CashflowOverview,
    CashflowTotals,
    EnrichedCashflow,
)
from .cost_items import (
    CostEffect,
    CostItem,
    CostMode,
    FixedAmount,
    HouseFee,
    PercentOf,
    RunningCostBlock,
    RunningCostMode,
    RunningCostSplit,
)
from .investments import (
    Compounding,
    Credit,
    DepositInvestment,
    Investment,
    InvestmentKind,
    ObjectInvestment,
    RealEstateInvestment,
    StockInvestment,
)
from .profiles import (
    CostItemDefaults,
    CountryProfile,
    CreditDefaults,
    DepositDefaults,
    RealEstateDefaults,
    RunningCostRates,
    StockDefaults,
)
from .results import (
    CreditResult,
    DepositResult,
    ObjectInvestmentResult,
    RealEstateResult,
    StockResult,
    TaxBreakdown,
)

__all__ = [
    "NOT_FOUND_LABEL",
    "Cashflow",
    "CashflowOverview",
    "CashflowTotals",
    "EnrichedCashflow",
    "CostEffect",
    "CostItem",
    "CostMode",
    "FixedAmount",
    "HouseFee",
    "PercentOf",
    "RunningCostBlock",
    "RunningCostMode",
    "RunningCostSplit",
    "Compounding",
    "Credit",
    "DepositInvestment",
    "Investment",
    "InvestmentKind",
    "ObjectInvestment",
    "RealEstateInvestment",
    "StockInvestment",
    "CostItemDefaults",
    "CountryProfile",
    "CreditDefaults",
    "DepositDefaults",
    "RealEstateDefaults",
    "RunningCostRates",
    "StockDefaults",
    "CreditResult",
    "DepositResult",
    "ObjectInvestmentResult",
    "RealEstateResult",
    "StockResult",
    "TaxBreakdown",
]
