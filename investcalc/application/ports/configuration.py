"""Ports for configuration data consumed by the calculators."""

from decimal import Decimal
from typing import Protocol

from investcalc.domain.models import CountryProfile


class CountryProfileProviderPort(Protocol):
    """Port exposing country-specific default rates."""

    def get_profile(self, code: str) -> CountryProfile:
        """Return the profile for a country code."""

    def available_codes(self) -> list[str]:
        """Return the codes of all known profiles."""


class ExchangeRatesPort(Protocol):
    """Port exposing exchange rates relative to the base currency."""

    def fetch_rates(self) -> dict[str, Decimal]:
        """Return the rate per currency code."""


__all__ = ["CountryProfileProviderPort", "ExchangeRatesPort"]
