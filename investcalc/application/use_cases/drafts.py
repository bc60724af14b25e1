"""Build new entities pre-filled from a country profile."""

from investcalc.domain.models import (
    Compounding,
    CostItem,
    CountryProfile,
    Credit,
    DepositInvestment,
    ObjectInvestment,
    RealEstateInvestment,
    RunningCostSplit,
    StockInvestment,
)
from investcalc.domain.models.profiles import CostItemDefaults
from investcalc.domain.services.credit import (
    amort_monthly_from_initial_repayment,
)
from investcalc.domain.services.deposit import (
    coerce_compounding,
    coerce_term_months,
)
from investcalc.utils.decimal_utils import coerce_decimal


def _items(defaults: dict[str, CostItemDefaults]) -> tuple[CostItem, ...]:
    return tuple(item.to_cost_item(key) for key, item in defaults.items())


class DraftFactory:
    """Create unsaved entities carrying the profile's default items.

    Drafts have an empty id and zero derived figures; the services assign
    the id and compute the figures when the draft is added.
    """

    def __init__(self, profile: CountryProfile) -> None:
        """Initialize the factory.

        Args:
            profile: Country profile providing default rates and flags.
        """
        self._profile = profile

    @property
    def profile(self) -> CountryProfile:
        return self._profile

    def object_investment(
        self,
        name: str,
        purchase_price,
        gross_gain_monthly,
        cost_monthly=0,
        currency: str | None = None,
    ) -> ObjectInvestment:
        return ObjectInvestment(
            id="",
            name=name,
            currency=currency or self._profile.currency,
            purchase_price=coerce_decimal(purchase_price),
            gross_gain_monthly=coerce_decimal(gross_gain_monthly),
            cost_monthly=coerce_decimal(cost_monthly),
        )

    def real_estate(
        self,
        name: str,
        purchase_price,
        monthly_cold_rent,
        currency: str | None = None,
        running_costs: RunningCostSplit | None = None,
    ) -> RealEstateInvestment:
        defaults = self._profile.real_estate
        return RealEstateInvestment(
            id="",
            name=name,
            currency=currency or self._profile.currency,
            purchase_price=coerce_decimal(purchase_price),
            monthly_cold_rent=coerce_decimal(monthly_cold_rent),
            purchase_cost_items=_items(defaults.purchase_costs),
            additional_cost_items=_items(defaults.additional_costs),
            tax_deduction_items=_items(defaults.rent_taxes),
            running_costs=(
                running_costs or RunningCostSplit(house_fee=defaults.house_fee)
            ),
            other_running_cost_items=_items(defaults.other_running_costs),
        )

    def deposit(
        self,
        name: str,
        start_amount=None,
        term_months: int | None = None,
        rate_nominal=None,
        compounding: Compounding | str | None = None,
        currency: str | None = None,
    ) -> DepositInvestment:
        defaults = self._profile.deposit
        return DepositInvestment(
            id="",
            name=name,
            currency=currency or self._profile.currency,
            start_amount=(
                defaults.start_amount
                if start_amount is None
                else coerce_decimal(start_amount)
            ),
            term_months=(
                defaults.term_months
                if term_months is None
                else coerce_term_months(term_months)
            ),
            rate_nominal=(
                defaults.rate_nominal
                if rate_nominal is None
                else coerce_decimal(rate_nominal)
            ),
            compounding=coerce_compounding(
                compounding or defaults.compounding
            ),
            tax_free_allowance=defaults.tax_free_allowance,
            tax_items=_items(defaults.taxes),
            fee_items=_items(defaults.fees),
        )

    def stock(
        self,
        name: str,
        price_per_share,
        number_of_shares,
        dividend_per_share=0,
        currency: str | None = None,
    ) -> StockInvestment:
        """Create a stock draft; the exit price starts at the purchase price."""
        defaults = self._profile.stock
        price = coerce_decimal(price_per_share)
        return StockInvestment(
            id="",
            name=name,
            currency=currency or self._profile.currency,
            price_per_share=price,
            number_of_shares=coerce_decimal(number_of_shares),
            current_price=price,
            expected_price=price,
            dividend_per_share=coerce_decimal(dividend_per_share),
            expected_sell_price=price,
            selling_costs=defaults.selling_costs,
            tax_free_allowance=defaults.tax_free_allowance,
            cost_items=_items(defaults.costs),
            tax_items=_items(defaults.taxes),
        )

    def credit(
        self,
        name: str,
        principal,
        equity=0,
        rate_annual_pct=None,
        repayment_initial_pct=None,
        term_months: int | None = None,
        currency: str | None = None,
    ) -> Credit:
        defaults = self._profile.credit
        repayment = (
            defaults.repayment_initial_pct
            if repayment_initial_pct is None
            else repayment_initial_pct
        )
        return Credit(
            id="",
            name=name,
            currency=currency or self._profile.currency,
            principal=coerce_decimal(principal),
            equity=coerce_decimal(equity),
            rate_annual_pct=(
                defaults.rate_annual_pct
                if rate_annual_pct is None
                else coerce_decimal(rate_annual_pct)
            ),
            amort_monthly=amort_monthly_from_initial_repayment(
                principal,
                repayment,
            ),
            term_months=(
                defaults.term_months
                if term_months is None
                else coerce_term_months(term_months)
            ),
        )


__all__ = ["DraftFactory"]
