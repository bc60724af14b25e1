"""Currency conversion against a single base currency."""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from logging import Logger

from investcalc.utils.decimal_utils import coerce_decimal, round_half_up

BASE_CURRENCY = "EUR"
NO_CONVERSION = "NONE"

_ISO_CODE = re.compile(r"[A-Z]{3}")


def normalize_currency_code(code: str | None) -> str | None:
    """Normalize an ISO 4217 currency code.

    Args:
        code: Raw currency code from a form or configuration.

    Returns:
        str | None: Upper-case three-letter code, ``NONE`` to disable
        conversion, or None when the code is empty or malformed.
    """
    if not code:
        return None
    cleaned = code.strip().upper()
    if cleaned == NO_CONVERSION or _ISO_CODE.fullmatch(cleaned):
        return cleaned
    return None


def build_rate_map(
    raw_rates: Mapping[str, object],
    logger: Logger,
) -> dict[str, Decimal]:
    """Normalize a mapping of currency code to rate against the base.

    Args:
        raw_rates: Rates as loaded from configuration.
        logger: Logger used for warnings.

    Returns:
        dict[str, Decimal]: Positive rates keyed by upper-case code.
    """
    rates: dict[str, Decimal] = {}
    for code, raw in raw_rates.items():
        normalized = normalize_currency_code(code)
        rate = coerce_decimal(raw)
        if not normalized or rate <= 0:
            logger.warning(f"Skipping invalid exchange rate {code}={raw}")
            continue
        rates[normalized] = rate
    return rates


def convert_amount(
    amount,
    from_currency: str | None,
    to_currency: str | None,
    rates: Mapping[str, Decimal],
    logger: Logger,
    base_currency: str = BASE_CURRENCY,
) -> Decimal:
    """Convert an amount between currencies via the base currency.

    Missing rates leave the amount unchanged.

    Args:
        amount: Amount in ``from_currency``.
        from_currency: Source currency code.
        to_currency: Target currency code.
        rates: Rate per currency relative to ``base_currency``.
        logger: Logger used for warnings.
        base_currency: Reference currency of ``rates``.

    Returns:
        Decimal: Converted amount rounded to cents, or the original amount.
    """
    value = coerce_decimal(amount)
    source = normalize_currency_code(from_currency)
    target = normalize_currency_code(to_currency)
    if value == 0 or not target or target == NO_CONVERSION:
        return value
    if source is None or source == target:
        return value

    if source == base_currency:
        in_base = value
    else:
        rate = rates.get(source)
        if rate is None:
            logger.warning(f"Exchange rate for {source} not found")
            return value
        in_base = value / rate

    if target == base_currency:
        converted = in_base
    else:
        target_rate = rates.get(target)
        if target_rate is None:
            logger.warning(f"Exchange rate for {target} not found")
            return value
        converted = in_base * target_rate
    return round_half_up(converted)


@dataclass(frozen=True)
class CurrencyConverter:
    """Converts amounts into the configured main currency.

    Attributes:
        main_currency: Display currency; ``NONE`` disables conversion.
        rates: Rate per currency relative to ``base_currency``.
        logger: Logger used for missing-rate warnings.
        base_currency: Reference currency of ``rates``.
    """

    main_currency: str
    rates: Mapping[str, Decimal]
    logger: Logger
    base_currency: str = BASE_CURRENCY

    @property
    def is_active(self) -> bool:
        code = normalize_currency_code(self.main_currency)
        return bool(code) and code != NO_CONVERSION

    def convert(self, amount, from_currency: str | None) -> Decimal:
        """Convert ``amount`` from ``from_currency`` to the main currency."""
        if not self.is_active:
            return coerce_decimal(amount)
        return convert_amount(
            amount,
            from_currency,
            self.main_currency,
            self.rates,
            self.logger,
            base_currency=self.base_currency,
        )


__all__ = [
    "BASE_CURRENCY",
    "NO_CONVERSION",
    "normalize_currency_code",
    "build_rate_map",
    "convert_amount",
    "CurrencyConverter",
]
