"""Exchange rate provider reading a JSON mapping."""

import json
from decimal import Decimal
from pathlib import Path

from investcalc.application.ports.configuration import ExchangeRatesPort
from investcalc.domain.services.fx import build_rate_map
from investcalc.infrastructure.logging.logger import get_app_logger

DEFAULT_RATES_FILE = (
    Path(__file__).resolve().parents[1] / "data" / "exchange_rates.json"
)


class JsonExchangeRatesProvider(ExchangeRatesPort):
    """Rates per currency code relative to the base currency."""

    def __init__(self, path: Path | None = None, logger=None) -> None:
        self._path = Path(path or DEFAULT_RATES_FILE)
        self._logger = logger or get_app_logger()

    def fetch_rates(self) -> dict[str, Decimal]:
        """Return the parsed rates, or an empty mapping if unreadable."""
        try:
            with self._path.open(encoding="utf-8") as handle:
                raw = json.load(handle, parse_float=Decimal)
        except (OSError, ValueError) as exc:
            self._logger.warning(
                f"Could not read exchange rates from {self._path}: {exc}"
            )
            return {}
        if not isinstance(raw, dict):
            self._logger.warning(
                f"Exchange rates in {self._path} are not a mapping"
            )
            return {}
        return build_rate_map(raw, self._logger)


__all__ = ["DEFAULT_RATES_FILE", "JsonExchangeRatesProvider"]
