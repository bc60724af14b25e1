"""Application ports package."""

from .configuration import CountryProfileProviderPort, ExchangeRatesPort
from .database import DatabaseEnginePort
from .repositories import (
    CashflowRepositoryPort,
    CreditRepositoryPort,
    EntityNotFoundError,
    InvestmentRepositoryPort,
)

__all__ = [
    "CountryProfileProviderPort",
    "ExchangeRatesPort",
    "DatabaseEnginePort",
    "CashflowRepositoryPort",
    "CreditRepositoryPort",
    "EntityNotFoundError",
    "InvestmentRepositoryPort",
]
