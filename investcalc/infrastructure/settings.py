"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

from investcalc.domain.constants import DEFAULT_COUNTRY
from investcalc.domain.services.fx import normalize_currency_code
from investcalc.infrastructure.country_profiles import normalize_country_code
from investcalc.infrastructure.logging.logger import get_app_logger
from investcalc.utils.utils import get_project_root

STORE_BACKENDS = ("memory", "sqlalchemy")


@dataclass(frozen=True)
class AppSettings:
    """Runtime settings for the calculators and stores.

    Attributes:
        country: Country profile code.
        main_currency: Display currency, or ``NONE`` to disable conversion.
        store_backend: Store implementation (memory or sqlalchemy).
        db_url: SQLAlchemy URL used by the sqlalchemy backend.
        exchange_rates_file: Path to a JSON mapping of rates, if overridden.
    """

    country: str = DEFAULT_COUNTRY
    main_currency: str = "EUR"
    store_backend: str = "memory"
    db_url: str | None = None
    exchange_rates_file: Path | None = None

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Build settings from environment variables.

        Returns:
            AppSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        country = normalize_country_code(
            os.getenv("INVESTCALC_COUNTRY", DEFAULT_COUNTRY)
        )
        main_currency = normalize_currency_code(
            os.getenv("INVESTCALC_MAIN_CURRENCY", "EUR")
        )
        backend = (
            os.getenv("INVESTCALC_STORE_BACKEND", "memory").strip().lower()
        )
        if backend not in STORE_BACKENDS:
            logger.warning(
                f"Unknown store backend '{backend}', using memory"
            )
            backend = "memory"
        db_url = os.getenv("INVESTCALC_DB_URL") or cls._default_db_url()
        raw_rates = os.getenv("INVESTCALC_EXCHANGE_RATES")
        rates_file = None
        if raw_rates:
            rates_file = cls._normalize_path(raw_rates, logger=logger)
        return cls(
            country=country or DEFAULT_COUNTRY,
            main_currency=main_currency or "EUR",
            store_backend=backend,
            db_url=db_url,
            exchange_rates_file=rates_file,
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Resolve a user supplied path and warn when it is missing.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Absolute path.
        """
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Exchange rates file does not exist at {path}")
        return path

    @staticmethod
    def _default_db_url() -> str:
        """Return the SQLite URL of the default store file in data/."""
        return f"sqlite:///{get_project_root() / 'data' / 'investcalc.db'}"


__all__ = ["AppSettings", "STORE_BACKENDS"]
