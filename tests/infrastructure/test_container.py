"""Tests for the composition root."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from investcalc.infrastructure import container
from investcalc.infrastructure.memory_repository import InMemoryRepository
from investcalc.infrastructure.settings import AppSettings
from investcalc.infrastructure.sqlalchemy_repository import (
    SqlAlchemyEntityRepository,
)


@pytest.fixture(autouse=True)
def _quiet_loggers(monkeypatch):
    monkeypatch.setattr(container, "get_app_logger", MagicMock)


def test_build_repositories_memory_backend():
    repos = container.build_repositories(AppSettings())

    assert isinstance(repos.investments, InMemoryRepository)
    assert repos.investments is not repos.credits


def test_build_repositories_sqlalchemy_backend(tmp_path):
    settings = AppSettings(
        store_backend="sqlalchemy",
        db_url=f"sqlite:///{tmp_path / 'store.db'}",
    )

    repos = container.build_repositories(settings)

    assert isinstance(repos.cashflows, SqlAlchemyEntityRepository)


def test_build_database_adapter_requires_url():
    with pytest.raises(RuntimeError):
        container.build_database_adapter(AppSettings(db_url=None))


def test_build_services_wire_shared_repositories():
    services = container.build_services(
        AppSettings(country="cz", main_currency="NONE"),
    )

    assert services.drafts.profile.code == "cz"
    draft = services.drafts.object_investment("Garage", "400000", "3000")
    investment = services.investments.add(draft)
    services.cashflows.add("Garage", investment.id)

    overview = services.overview.execute()

    assert overview.items[0].display_cashflow_monthly == 3000
    assert overview.items[0].currency == "CZK"
    assert overview.totals.monthly == 3000
    assert investment.net_gain_monthly == Decimal("3000.00")
