"""Ports for the entity collections owned by the stores."""

from typing import Protocol

from investcalc.domain.models import Cashflow, Credit, Investment


class EntityNotFoundError(LookupError):
    """Raised when a store has no entity with the requested id."""


class InvestmentRepositoryPort(Protocol):
    """Port exposing the investment collection."""

    def add(self, investment: Investment) -> Investment:
        """Store a new investment."""

    def get(self, investment_id: str) -> Investment | None:
        """Return the investment with the given id, if any."""

    def list(self) -> list[Investment]:
        """Return all investments in insertion order."""

    def update(self, investment: Investment) -> Investment:
        """Replace the investment with the same id."""

    def remove(self, investment_id: str) -> None:
        """Delete the investment with the given id."""


class CreditRepositoryPort(Protocol):
    """Port exposing the credit collection."""

    def add(self, credit: Credit) -> Credit:
        """Store a new credit."""

    def get(self, credit_id: str) -> Credit | None:
        """Return the credit with the given id, if any."""

    def list(self) -> list[Credit]:
        """Return all credits in insertion order."""

    def update(self, credit: Credit) -> Credit:
        """Replace the credit with the same id."""

    def remove(self, credit_id: str) -> None:
        """Delete the credit with the given id."""


class CashflowRepositoryPort(Protocol):
    """Port exposing the cashflow collection."""

    def add(self, cashflow: Cashflow) -> Cashflow:
        """Store a new cashflow."""

    def get(self, cashflow_id: str) -> Cashflow | None:
        """Return the cashflow with the given id, if any."""

    def list(self) -> list[Cashflow]:
        """Return all cashflows in insertion order."""

    def update(self, cashflow: Cashflow) -> Cashflow:
        """Replace the cashflow with the same id."""

    def remove(self, cashflow_id: str) -> None:
        """Delete the cashflow with the given id."""


__all__ = [
    "EntityNotFoundError",
    "InvestmentRepositoryPort",
    "CreditRepositoryPort",
    "CashflowRepositoryPort",
]
