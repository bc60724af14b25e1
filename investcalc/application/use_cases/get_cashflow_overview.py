"""Use case to present all cashflows in the display currency."""

from investcalc.application.ports.repositories import (
    CashflowRepositoryPort,
    CreditRepositoryPort,
    InvestmentRepositoryPort,
)
from investcalc.domain.models import CashflowOverview
from investcalc.domain.services.cashflow import (
    enrich_cashflows,
    summarize_cashflows,
)
from investcalc.domain.services.fx import CurrencyConverter
from investcalc.infrastructure.logging.logger import get_app_logger


class GetCashflowOverviewUseCase:
    """Resolve stored cashflows and total them for display."""

    def __init__(
        self,
        cashflows: CashflowRepositoryPort,
        investments: InvestmentRepositoryPort,
        credits: CreditRepositoryPort,
        converter: CurrencyConverter,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            cashflows: Port providing stored cashflows.
            investments: Port used to resolve investment references.
            credits: Port used to resolve credit references.
            converter: Converter into the display currency.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._cashflows = cashflows
        self._investments = investments
        self._credits = credits
        self._converter = converter
        self._logger = logger or get_app_logger()

    def execute(self) -> CashflowOverview:
        """Return enriched cashflows and their totals.

        Returns:
            CashflowOverview: Items in insertion order plus totals in the
            display currency.
        """
        cashflows = self._cashflows.list()
        investments = {item.id: item for item in self._investments.list()}
        credits = {item.id: item for item in self._credits.list()}
        items = enrich_cashflows(
            cashflows,
            investments,
            credits,
            self._converter,
            self._logger,
        )
        currency = (
            self._converter.main_currency
            if self._converter.is_active
            else ""
        )
        totals = summarize_cashflows(items, currency)
        self._logger.info(
            f"Built cashflow overview with {len(items)} items, "
            f"monthly total {totals.monthly} {currency}".rstrip()
        )
        return CashflowOverview(items=items, totals=totals)


__all__ = ["GetCashflowOverviewUseCase"]
