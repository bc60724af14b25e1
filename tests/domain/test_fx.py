"""Tests for currency conversion."""

from decimal import Decimal
from unittest.mock import MagicMock

from investcalc.domain.services.fx import (
    CurrencyConverter,
    build_rate_map,
    convert_amount,
    normalize_currency_code,
)

RATES = {"USD": Decimal("1.1"), "CHF": Decimal("0.95")}


def test_convert_amount_via_base_currency():
    logger = MagicMock()

    assert convert_amount("100", "USD", "EUR", RATES, logger) == Decimal(
        "90.91"
    )
    assert convert_amount("100", "EUR", "USD", RATES, logger) == Decimal(
        "110.00"
    )
    assert convert_amount("100", "USD", "CHF", RATES, logger) == Decimal(
        "86.36"
    )
    logger.warning.assert_not_called()


def test_missing_rate_returns_original_amount_with_warning():
    logger = MagicMock()

    result = convert_amount("100", "GBP", "EUR", RATES, logger)

    assert result == Decimal("100")
    logger.warning.assert_called_once()


def test_same_currency_and_zero_are_unchanged():
    logger = MagicMock()

    assert convert_amount("12.345", "EUR", "EUR", RATES, logger) == Decimal(
        "12.345"
    )
    assert convert_amount("0", "USD", "EUR", RATES, logger) == Decimal("0")


def test_converter_with_none_currency_is_inactive():
    converter = CurrencyConverter("NONE", RATES, MagicMock())

    assert converter.is_active is False
    assert converter.convert("100", "USD") == Decimal("100")


def test_build_rate_map_skips_invalid_rates():
    logger = MagicMock()

    rates = build_rate_map({"usd": "1.1", "XXX": "0", "YYY": "abc"}, logger)

    assert rates == {"USD": Decimal("1.1")}
    assert logger.warning.call_count == 2


def test_normalize_currency_code_accepts_iso_codes_and_none():
    assert normalize_currency_code(" usd ") == "USD"
    assert normalize_currency_code("none") == "NONE"
    assert normalize_currency_code("EURO") is None
    assert normalize_currency_code("U$D") is None
    assert normalize_currency_code("") is None
