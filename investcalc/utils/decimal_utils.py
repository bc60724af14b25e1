"""Helpers for Decimal normalization and rounding."""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

ZERO = Decimal("0")
HUNDRED = Decimal("100")
MONTHS_PER_YEAR = Decimal("12")

_WHITESPACE = re.compile(r"\s+")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Strings may use a decimal comma and contain whitespace. Anything that
    cannot be parsed as a finite decimal becomes zero.

    Args:
        value: Raw numeric value from forms, storage or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return ZERO
    if isinstance(value, bool):
        return Decimal(int(value))
    if isinstance(value, Decimal):
        return value if value.is_finite() else ZERO
    raw = _WHITESPACE.sub("", str(value)).replace(",", ".")
    if not raw:
        return ZERO
    try:
        parsed = Decimal(raw)
    except InvalidOperation:
        return ZERO
    if not parsed.is_finite():
        return ZERO
    return parsed


def round_half_up(value, places: int = 2) -> Decimal:
    """Quantize a value to a fixed number of fractional digits.

    Args:
        value: Value to round.
        places: Number of fractional digits to keep.

    Returns:
        Decimal: Rounded value.
    """
    exponent = Decimal(1).scaleb(-places)
    return coerce_decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)


def to_money_str(value, places: int = 2) -> str:
    """Serialize a value as a canonical fixed-point decimal string."""
    rounded = round_half_up(value, places)
    if rounded == 0:
        rounded = abs(rounded)
    return f"{rounded:f}"


def safe_ratio(numerator, denominator) -> Decimal:
    """Divide two values, returning zero for a zero denominator."""
    denominator = coerce_decimal(denominator)
    if denominator == 0:
        return ZERO
    return coerce_decimal(numerator) / denominator


def percent_of(base, pct) -> Decimal:
    """Return ``pct`` percent of ``base``."""
    return coerce_decimal(base) * coerce_decimal(pct) / HUNDRED


def sanitize_decimal_input(raw) -> str:
    """Strip user input down to digits and a single decimal point.

    Args:
        raw: Text typed into a numeric field.

    Returns:
        str: Cleaned text; empty when nothing numeric remains.
    """
    if raw is None:
        return ""
    cleaned = re.sub(r"[^\d.]", "", str(raw).replace(",", "."))
    head, dot, tail = cleaned.partition(".")
    if not dot:
        return head
    return f"{head}.{tail.replace('.', '')}"


__all__ = [
    "ZERO",
    "HUNDRED",
    "MONTHS_PER_YEAR",
    "coerce_decimal",
    "round_half_up",
    "to_money_str",
    "safe_ratio",
    "percent_of",
    "sanitize_decimal_input",
]
