"""Composition root for wiring infrastructure adapters."""

from dataclasses import dataclass

from investcalc.application.ports.configuration import (
    CountryProfileProviderPort,
)
from investcalc.application.ports.database import DatabaseEnginePort
from investcalc.application.ports.repositories import (
    CashflowRepositoryPort,
    CreditRepositoryPort,
    InvestmentRepositoryPort,
)
from investcalc.application.use_cases import (
    CashflowService,
    CreditService,
    DraftFactory,
    GetCashflowOverviewUseCase,
    InvestmentService,
)
from investcalc.domain.services.fx import CurrencyConverter
from investcalc.infrastructure.country_profiles import (
    JsonCountryProfileProvider,
)
from investcalc.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from investcalc.infrastructure.exchange_rates import JsonExchangeRatesProvider
from investcalc.infrastructure.logging.logger import get_app_logger
from investcalc.infrastructure.memory_repository import InMemoryRepository
from investcalc.infrastructure.settings import AppSettings
from investcalc.infrastructure.sqlalchemy_repository import (
    build_sqlalchemy_repositories,
)


@dataclass(frozen=True)
class Repositories:
    """The three entity collections."""

    investments: InvestmentRepositoryPort
    credits: CreditRepositoryPort
    cashflows: CashflowRepositoryPort


@dataclass(frozen=True)
class AppServices:
    """Services and use cases sharing one set of repositories."""

    settings: AppSettings
    drafts: DraftFactory
    investments: InvestmentService
    credits: CreditService
    cashflows: CashflowService
    overview: GetCashflowOverviewUseCase


def build_settings() -> AppSettings:
    """Return settings sourced from the environment."""
    return AppSettings.from_env()


def build_profile_provider() -> CountryProfileProviderPort:
    """Return the bundled country profile provider."""
    return JsonCountryProfileProvider(logger=get_app_logger())


def build_database_adapter(
    settings: AppSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance.

    Raises:
        RuntimeError: If no database URL is configured.
    """
    resolved = settings or build_settings()
    if not resolved.db_url:
        raise RuntimeError("Missing environment variable: INVESTCALC_DB_URL")
    return SqlAlchemyDatabaseEngineAdapter(resolved.db_url)


def build_converter(
    settings: AppSettings | None = None,
) -> CurrencyConverter:
    """Return a converter into the configured main currency."""
    resolved = settings or build_settings()
    logger = get_app_logger()
    rates = JsonExchangeRatesProvider(
        resolved.exchange_rates_file,
        logger=logger,
    ).fetch_rates()
    return CurrencyConverter(
        main_currency=resolved.main_currency,
        rates=rates,
        logger=logger,
    )


def build_repositories(
    settings: AppSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> Repositories:
    """Return the configured repositories."""
    resolved = settings or build_settings()
    if resolved.store_backend == "sqlalchemy":
        investments, credits, cashflows = build_sqlalchemy_repositories(
            db_port or build_database_adapter(resolved)
        )
        return Repositories(investments, credits, cashflows)
    return Repositories(
        investments=InMemoryRepository("investment"),
        credits=InMemoryRepository("credit"),
        cashflows=InMemoryRepository("cashflow"),
    )


def build_services(
    settings: AppSettings | None = None,
    repositories: Repositories | None = None,
    profile_provider: CountryProfileProviderPort | None = None,
) -> AppServices:
    """Return every service wired to one set of repositories."""
    resolved = settings or build_settings()
    repos = repositories or build_repositories(resolved)
    provider = profile_provider or build_profile_provider()
    profile = provider.get_profile(resolved.country)
    return AppServices(
        settings=resolved,
        drafts=DraftFactory(profile),
        investments=InvestmentService(repos.investments, profile),
        credits=CreditService(repos.credits),
        cashflows=CashflowService(
            repos.cashflows,
            repos.investments,
            repos.credits,
        ),
        overview=GetCashflowOverviewUseCase(
            repos.cashflows,
            repos.investments,
            repos.credits,
            build_converter(resolved),
        ),
    )


__all__ = [
    "Repositories",
    "AppServices",
    "build_settings",
    "build_profile_provider",
    "build_database_adapter",
    "build_converter",
    "build_repositories",
    "build_services",
]
