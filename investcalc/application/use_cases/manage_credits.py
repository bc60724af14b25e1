"""Use cases to add, update and remove credits."""

from dataclasses import replace

from investcalc.application.ports.repositories import CreditRepositoryPort
from investcalc.domain.constants import ID_PREFIXES
from investcalc.domain.models import Credit
from investcalc.domain.services.credit import compute_credit
from investcalc.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from investcalc.utils.ids import new_entity_id


class CreditService:
    """Store operations that keep derived credit figures current."""

    def __init__(
        self,
        repository: CreditRepositoryPort,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the service.

        Args:
            repository: Port owning the credit collection.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger for user actions.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def add(self, credit: Credit) -> Credit:
        """Compute interest and store a new credit."""
        if not credit.id:
            credit = replace(credit, id=new_entity_id(ID_PREFIXES["CREDIT"]))
        stored = self._repository.add(self._derive(credit))
        self._usage_logger.info(f"Added credit {stored.id} '{stored.name}'")
        return stored

    def update(self, credit: Credit) -> Credit:
        """Recompute interest and replace a stored credit."""
        stored = self._repository.update(self._derive(credit))
        self._usage_logger.info(f"Updated credit {stored.id}")
        return stored

    def remove(self, credit_id: str) -> None:
        """Delete a credit; referencing cashflows are left dangling."""
        self._repository.remove(credit_id)
        self._usage_logger.info(f"Removed credit {credit_id}")

    def get(self, credit_id: str) -> Credit | None:
        return self._repository.get(credit_id)

    def list(self) -> list[Credit]:
        return self._repository.list()

    def _derive(self, credit: Credit) -> Credit:
        result = compute_credit(
            credit.principal,
            credit.equity,
            credit.rate_annual_pct,
            credit.amort_monthly,
            logger=self._logger,
        )
        self._logger.info(
            f"Derived credit '{credit.name}': "
            f"interest_monthly={result.interest_monthly}, "
            f"total_monthly={result.total_monthly}"
        )
        return replace(
            credit,
            interest_monthly=result.interest_monthly,
            interest_yearly=result.interest_yearly,
            total_monthly=result.total_monthly,
        )


__all__ = ["CreditService"]
