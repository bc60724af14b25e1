"""Domain package for business rules and core models."""

from .constants import DEFAULT_COUNTRY, ID_PREFIXES, SUPPORTED_COUNTRIES
from .models import (
    Cashflow,
    CashflowOverview,
    CashflowTotals,
    Compounding,
    CostItem,
    CostMode,
    CountryProfile,
    Credit,
    DepositInvestment,
    EnrichedCashflow,
    Investment,
    InvestmentKind,
    ObjectInvestment,
    RealEstateInvestment,
    RunningCostSplit,
)
from .services import (
    CurrencyConverter,
    compute_cashflow_monthly,
    compute_credit,
    compute_deposit,
    compute_object_investment,
    compute_real_estate,
    enrich_cashflows,
    summarize_cashflows,
    toggle_mode,
)

__all__ = [
    "DEFAULT_COUNTRY",
    "ID_PREFIXES",
    "SUPPORTED_COUNTRIES",
    "Cashflow",
    "CashflowOverview",
    "CashflowTotals",
    "Compounding",
    "CostItem",
    "CostMode",
    "CountryProfile",
    "Credit",
    "DepositInvestment",
    "EnrichedCashflow",
    "Investment",
    "InvestmentKind",
    "ObjectInvestment",
    "RealEstateInvestment",
    "RunningCostSplit",
    "CurrencyConverter",
    "compute_cashflow_monthly",
    "compute_credit",
    "compute_deposit",
    "compute_object_investment",
    "compute_real_estate",
    "enrich_cashflows",
    "summarize_cashflows",
    "toggle_mode",
]
