"""Tests for profile-driven entity drafts."""

from decimal import Decimal
from unittest.mock import MagicMock

from investcalc.application.use_cases.drafts import DraftFactory
from investcalc.domain.models import Compounding, CostEffect, CostMode
from investcalc.domain.services.cost_items import find_item
from investcalc.infrastructure.country_profiles import (
    JsonCountryProfileProvider,
)


def _factory(code="de"):
    provider = JsonCountryProfileProvider(logger=MagicMock())
    return DraftFactory(provider.get_profile(code))


def test_real_estate_draft_carries_profile_items():
    draft = _factory().real_estate("Flat", "300000", "1000")

    assert draft.id == ""
    assert draft.currency == "EUR"
    assert draft.purchase_price == Decimal("300000")
    income_tax = find_item(draft.tax_deduction_items, "incomeTax")
    assert income_tax.enabled is True
    assert income_tax.value == Decimal("30")
    assert income_tax.allow_mode_change is False
    subvention = find_item(draft.additional_cost_items, "subvention")
    assert subvention.effect is CostEffect.SUBTRACT
    assert subvention.mode is CostMode.CURRENCY


def test_deposit_draft_uses_profile_defaults_unless_overridden():
    factory = _factory()

    default = factory.deposit("Savings")
    custom = factory.deposit("Savings", start_amount="5000", term_months=6)

    assert default.start_amount == Decimal("10000")
    assert default.compounding is Compounding.YEARLY
    assert default.tax_free_allowance == Decimal("1000")
    assert custom.start_amount == Decimal("5000")
    assert custom.term_months == 6


def test_credit_draft_derives_amortization_from_initial_repayment():
    credit = _factory().credit("Loan", "200000", equity="50000")

    assert credit.rate_annual_pct == Decimal("3.5")
    assert credit.amort_monthly == Decimal("333.33")
    assert credit.term_months == 120


def test_drafts_follow_profile_currency():
    draft = _factory("cz").object_investment("Garage", "400000", "3000")

    assert draft.currency == "CZK"
    assert draft.cost_monthly == Decimal("0")


def test_real_estate_draft_carries_other_running_costs():
    draft = _factory().real_estate("Flat", "300000", "1000")

    keys = [item.key for item in draft.other_running_cost_items]
    assert keys == ["maintenanceReserve", "propertyManagement"]
    assert draft.running_costs.house_fee.enabled is False


def test_stock_draft_starts_exit_price_at_purchase_price():
    draft = _factory().stock("Dividend fund", "50", "100", "1.5")

    assert draft.expected_sell_price == Decimal("50")
    assert draft.tax_free_allowance == Decimal("1000")
    assert draft.selling_costs == Decimal("19.99")
    assert len(draft.tax_items) == 3
    order_buy = find_item(draft.cost_items, "orderCostBuy")
    assert order_buy.mode is CostMode.CURRENCY
    assert order_buy.value == Decimal("9.99")
