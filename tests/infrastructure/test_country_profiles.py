"""Tests for the JSON country profile provider."""

import json
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from investcalc.domain.constants import SUPPORTED_COUNTRIES
from investcalc.domain.models import CostEffect, RunningCostRates
from investcalc.infrastructure.country_profiles import (
    JsonCountryProfileProvider,
    normalize_country_code,
)


def test_bundled_profiles_are_available():
    provider = JsonCountryProfileProvider(logger=MagicMock())

    assert provider.available_codes() == sorted(SUPPORTED_COUNTRIES)


def test_get_profile_parses_german_defaults():
    provider = JsonCountryProfileProvider(logger=MagicMock())

    profile = provider.get_profile("DE")

    assert profile.code == "de"
    assert profile.currency == "EUR"
    rent_taxes = profile.real_estate.rent_taxes
    assert rent_taxes["incomeTax"].value == Decimal("30")
    assert rent_taxes["churchTax"].enabled is False
    subvention = profile.real_estate.additional_costs["subvention"]
    assert subvention.effect is CostEffect.SUBTRACT
    assert profile.real_estate.running_cost_rates == RunningCostRates(
        Decimal("15"),
        Decimal("10"),
    )
    assert profile.deposit.taxes["withholdingTax"].value == Decimal("25")
    assert profile.stock.tax_free_allowance == Decimal("1000")
    assert profile.stock.costs["orderCostSell"].value == Decimal("9.99")
    assert profile.stock.taxes["solidaritySurcharge"].enabled is True
    assert profile.real_estate.house_fee.enabled is False
    assert set(profile.real_estate.other_running_costs) == {
        "maintenanceReserve",
        "propertyManagement",
    }
    assert provider.get_profile("de") is profile


def test_unknown_code_falls_back_to_default_with_warning():
    logger = MagicMock()
    provider = JsonCountryProfileProvider(logger=logger)

    profile = provider.get_profile("xx")

    assert profile.code == "de"
    logger.warning.assert_called_once()


def test_custom_directory_and_missing_default(tmp_path):
    (tmp_path / "de.json").write_text(
        json.dumps({"code": "de", "currency": "EUR"}),
        encoding="utf-8",
    )
    provider = JsonCountryProfileProvider(tmp_path, logger=MagicMock())

    profile = provider.get_profile("de")

    assert profile.deposit.term_months == 12
    assert profile.real_estate.purchase_costs == {}

    empty = JsonCountryProfileProvider(
        tmp_path / "missing",
        logger=MagicMock(),
    )
    with pytest.raises(RuntimeError):
        empty.get_profile("de")


def test_malformed_code_falls_back_to_default_with_warning():
    logger = MagicMock()
    provider = JsonCountryProfileProvider(logger=logger)

    profile = provider.get_profile("../de")

    assert profile.code == "de"
    logger.warning.assert_called_once()


def test_normalize_country_code_accepts_letters_only():
    assert normalize_country_code(" CZ ") == "cz"
    assert normalize_country_code("de.json") is None
    assert normalize_country_code(None) is None
