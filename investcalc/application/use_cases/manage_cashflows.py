"""Use cases to compose investments and credits into cashflows."""

from __future__ import annotations

from dataclasses import replace

from investcalc.application.ports.repositories import (
    CashflowRepositoryPort,
    CreditRepositoryPort,
    EntityNotFoundError,
    InvestmentRepositoryPort,
)
from investcalc.domain.constants import ID_PREFIXES
from investcalc.domain.models import Cashflow, Credit
from investcalc.domain.services.cashflow import compute_cashflow_monthly
from investcalc.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from investcalc.utils.ids import new_entity_id


class CashflowService:
    """Create and maintain cashflow snapshots.

    The monthly value is computed when a cashflow is added or updated and is
    not recomputed when the referenced investment or credit later changes.
    ``find_stale`` reports such snapshots and ``refresh_all`` recomputes them
    on request.
    """

    def __init__(
        self,
        cashflows: CashflowRepositoryPort,
        investments: InvestmentRepositoryPort,
        credits: CreditRepositoryPort,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the service.

        Args:
            cashflows: Port owning the cashflow collection.
            investments: Port used to resolve investment references.
            credits: Port used to resolve credit references.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger for user actions.
        """
        self._cashflows = cashflows
        self._investments = investments
        self._credits = credits
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def add(
        self,
        name: str,
        investment_id: str,
        credit_id: str | None = None,
    ) -> Cashflow:
        """Compose a new cashflow from stored references.

        Args:
            name: Display name of the cashflow.
            investment_id: Id of an existing investment.
            credit_id: Id of an existing credit, or None.

        Returns:
            Cashflow: The stored cashflow with its monthly value.

        Raises:
            EntityNotFoundError: If a referenced entity does not exist.
        """
        cashflow = Cashflow(
            id=new_entity_id(ID_PREFIXES["CASHFLOW"]),
            name=name,
            investment_id=investment_id,
            credit_id=credit_id or None,
        )
        stored = self._cashflows.add(self._compute(cashflow))
        self._usage_logger.info(f"Added cashflow {stored.id} '{stored.name}'")
        return stored

    def update(self, cashflow: Cashflow) -> Cashflow:
        """Recompute the monthly value and replace a stored cashflow.

        Raises:
            EntityNotFoundError: If a referenced entity does not exist.
        """
        stored = self._cashflows.update(self._compute(cashflow))
        self._usage_logger.info(f"Updated cashflow {stored.id}")
        return stored

    def remove(self, cashflow_id: str) -> None:
        self._cashflows.remove(cashflow_id)
        self._usage_logger.info(f"Removed cashflow {cashflow_id}")

    def get(self, cashflow_id: str) -> Cashflow | None:
        return self._cashflows.get(cashflow_id)

    def list(self) -> list[Cashflow]:
        return self._cashflows.list()

    def find_stale(self) -> list[Cashflow]:
        """Return cashflows whose snapshot differs from a fresh computation.

        Cashflows with dangling references are not reported.
        """
        stale = []
        for cashflow in self._cashflows.list():
            try:
                fresh = self._compute(cashflow)
            except EntityNotFoundError:
                continue
            if fresh.cashflow_monthly != cashflow.cashflow_monthly:
                stale.append(cashflow)
        return stale

    def refresh_all(self) -> list[Cashflow]:
        """Recompute every cashflow whose references still resolve.

        Returns:
            list[Cashflow]: The cashflows whose stored value changed.
        """
        refreshed = []
        for cashflow in self._cashflows.list():
            try:
                fresh = self._compute(cashflow)
            except EntityNotFoundError as exc:
                self._logger.warning(
                    f"Skipping refresh of cashflow {cashflow.id}: {exc}"
                )
                continue
            if fresh.cashflow_monthly != cashflow.cashflow_monthly:
                refreshed.append(self._cashflows.update(fresh))
        self._usage_logger.info(f"Refreshed {len(refreshed)} cashflows")
        return refreshed

    def _compute(self, cashflow: Cashflow) -> Cashflow:
        investment = self._investments.get(cashflow.investment_id)
        if investment is None:
            raise EntityNotFoundError(
                f"Investment {cashflow.investment_id} not found"
            )
        credit: Credit | None = None
        if cashflow.credit_id:
            credit = self._credits.get(cashflow.credit_id)
            if credit is None:
                raise EntityNotFoundError(
                    f"Credit {cashflow.credit_id} not found"
                )
        monthly = compute_cashflow_monthly(investment, credit)
        self._logger.debug(
            f"Cashflow '{cashflow.name}' monthly value computed: {monthly}"
        )
        return replace(cashflow, cashflow_monthly=monthly)


__all__ = ["CashflowService"]
