"""Domain models for cashflow compositions."""

from dataclasses import dataclass
from decimal import Decimal

from investcalc.utils.decimal_utils import ZERO

NOT_FOUND_LABEL = "—"


@dataclass(frozen=True)
class Cashflow:
    """One investment combined with an optional credit.

    Attributes:
        investment_id: Identifier of the referenced investment.
        credit_id: Identifier of the referenced credit, if any.
        cashflow_monthly: Monthly net cashflow stored at the last edit.
    """

    id: str
    name: str
    investment_id: str
    credit_id: str | None = None
    cashflow_monthly: Decimal = ZERO


@dataclass(frozen=True)
class EnrichedCashflow:
    """Cashflow resolved against its references for display."""

    cashflow: Cashflow
    investment_name: str
    credit_name: str
    currency: str
    display_cashflow_monthly: int
    display_cashflow_yearly: int
    yield_pct: Decimal

    @property
    def id(self) -> str:
        return self.cashflow.id

    @property
    def name(self) -> str:
        return self.cashflow.name


@dataclass(frozen=True)
class CashflowTotals:
    """Totals across enriched cashflows."""

    monthly: int
    yearly: int
    positive_count: int
    negative_count: int
    currency: str


@dataclass(frozen=True)
class CashflowOverview:
    """Enriched cashflows plus their totals."""

    items: list[EnrichedCashflow]
    totals: CashflowTotals


__all__ = [
    "NOT_FOUND_LABEL",
    "Cashflow",
    "EnrichedCashflow",
    "CashflowTotals",
    "CashflowOverview",
]
