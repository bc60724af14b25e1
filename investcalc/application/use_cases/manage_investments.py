"""Use cases to add, update and remove investments."""

from dataclasses import asdict, replace

from investcalc.application.ports.repositories import InvestmentRepositoryPort
from investcalc.domain.constants import ID_PREFIXES
from investcalc.domain.models import (
    CountryProfile,
    DepositInvestment,
    Investment,
    ObjectInvestment,
    RealEstateInvestment,
    StockInvestment,
)
from investcalc.domain.services.deposit import compute_deposit
from investcalc.domain.services.object_investment import (
    compute_object_investment,
)
from investcalc.domain.services.real_estate import compute_real_estate
from investcalc.domain.services.stock import compute_stock
from investcalc.domain.services.validation import validate_base_price
from investcalc.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from investcalc.utils.ids import new_entity_id


def derive_investment(
    investment: Investment,
    profile: CountryProfile,
) -> Investment:
    """Return the investment with all derived figures recomputed.

    Args:
        investment: Investment carrying raw inputs.
        profile: Country profile providing standard running cost rates.

    Returns:
        Investment: Copy with derived fields written back.

    Raises:
        TypeError: If the investment type is not supported.
    """
    if isinstance(investment, ObjectInvestment):
        result = compute_object_investment(
            investment.gross_gain_monthly,
            investment.cost_monthly,
            investment.purchase_price,
        )
        return replace(
            investment,
            net_gain_monthly=result.net_gain_monthly,
            net_gain_yearly=result.net_gain_yearly,
            yield_pct_yearly=result.yield_pct_yearly,
        )
    if isinstance(investment, RealEstateInvestment):
        result = compute_real_estate(
            investment.purchase_price,
            investment.monthly_cold_rent,
            purchase_cost_items=investment.purchase_cost_items,
            additional_cost_items=investment.additional_cost_items,
            tax_deduction_items=investment.tax_deduction_items,
            running_costs=investment.running_costs,
            other_running_cost_items=investment.other_running_cost_items,
            rates=profile.real_estate.running_cost_rates,
        )
        return replace(investment, **asdict(result))
    if isinstance(investment, DepositInvestment):
        result = compute_deposit(
            investment.start_amount,
            investment.term_months,
            investment.rate_nominal,
            investment.compounding,
            tax_free_allowance=investment.tax_free_allowance,
            tax_items=investment.tax_items,
            fee_items=investment.fee_items,
        )
        return replace(investment, **asdict(result))
    if isinstance(investment, StockInvestment):
        result = compute_stock(
            investment.price_per_share,
            investment.number_of_shares,
            investment.dividend_per_share,
            expected_sell_price=investment.expected_sell_price,
            selling_costs=investment.selling_costs,
            tax_free_allowance=investment.tax_free_allowance,
            cost_items=investment.cost_items,
            tax_items=investment.tax_items,
        )
        return replace(investment, **asdict(result))
    raise TypeError(f"Unsupported investment type: {type(investment)!r}")


class InvestmentService:
    """Store operations that keep derived investment figures current."""

    def __init__(
        self,
        repository: InvestmentRepositoryPort,
        profile: CountryProfile,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the service.

        Args:
            repository: Port owning the investment collection.
            profile: Country profile used for derived figures.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger for user actions.
        """
        self._repository = repository
        self._profile = profile
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def add(self, investment: Investment) -> Investment:
        """Compute derived figures and store a new investment.

        A fresh id is assigned when the investment has none.
        """
        if not investment.id:
            prefix = ID_PREFIXES[investment.kind.value]
            investment = replace(investment, id=new_entity_id(prefix))
        derived = self._derive(investment)
        stored = self._repository.add(derived)
        self._usage_logger.info(
            f"Added {stored.kind.value} investment {stored.id} "
            f"'{stored.name}'"
        )
        return stored

    def update(self, investment: Investment) -> Investment:
        """Recompute derived figures and replace a stored investment."""
        derived = self._derive(investment)
        stored = self._repository.update(derived)
        self._usage_logger.info(f"Updated investment {stored.id}")
        return stored

    def remove(self, investment_id: str) -> None:
        """Delete an investment; referencing cashflows are left dangling."""
        self._repository.remove(investment_id)
        self._usage_logger.info(f"Removed investment {investment_id}")

    def get(self, investment_id: str) -> Investment | None:
        return self._repository.get(investment_id)

    def list(self) -> list[Investment]:
        return self._repository.list()

    def _derive(self, investment: Investment) -> Investment:
        derived = derive_investment(investment, self._profile)
        validate_base_price(
            derived.name,
            derived.total_price,
            self._logger,
        )
        self._logger.info(
            f"Derived {derived.kind.value} '{derived.name}': "
            f"net_monthly={derived.net_gain_monthly}, "
            f"yield={derived.yield_pct_yearly}%"
        )
        return derived


__all__ = ["InvestmentService", "derive_investment"]
