"""Application use cases package."""

from .drafts import DraftFactory
from .get_cashflow_overview import GetCashflowOverviewUseCase
from .manage_cashflows import CashflowService
from .manage_credits import CreditService
from .manage_investments import InvestmentService, derive_investment

__all__ = [
    "DraftFactory",
    "GetCashflowOverviewUseCase",
    "CashflowService",
    "CreditService",
    "InvestmentService",
    "derive_investment",
]
