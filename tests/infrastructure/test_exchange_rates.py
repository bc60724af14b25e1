"""Tests for the JSON exchange rate provider."""

from decimal import Decimal
from unittest.mock import MagicMock

from investcalc.infrastructure.exchange_rates import JsonExchangeRatesProvider


def test_bundled_rates_are_decimal():
    rates = JsonExchangeRatesProvider(logger=MagicMock()).fetch_rates()

    assert rates["USD"] == Decimal("1.08")
    assert rates["EUR"] == Decimal("1")


def test_float_values_are_parsed_without_binary_drift(tmp_path):
    path = tmp_path / "rates.json"
    path.write_text('{"usd": 1.1}', encoding="utf-8")

    rates = JsonExchangeRatesProvider(path, logger=MagicMock()).fetch_rates()

    assert rates == {"USD": Decimal("1.1")}


def test_unreadable_file_returns_empty_mapping(tmp_path):
    logger = MagicMock()

    rates = JsonExchangeRatesProvider(
        tmp_path / "missing.json",
        logger=logger,
    ).fetch_rates()

    assert rates == {}
    logger.warning.assert_called_once()
