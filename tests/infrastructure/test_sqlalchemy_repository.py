"""Tests for the SQLAlchemy entity repository."""

from dataclasses import replace
from decimal import Decimal

import pytest

from investcalc.application.ports.repositories import EntityNotFoundError
from investcalc.domain.models import (
    Cashflow,
    Compounding,
    CostItem,
    Credit,
    DepositInvestment,
    ObjectInvestment,
)
from investcalc.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from investcalc.infrastructure.sqlalchemy_repository import (
    build_sqlalchemy_repositories,
)


@pytest.fixture
def repositories(tmp_path):
    adapter = SqlAlchemyDatabaseEngineAdapter(
        f"sqlite:///{tmp_path / 'store.db'}"
    )
    return build_sqlalchemy_repositories(adapter)


def test_add_get_and_list_round_trip(repositories):
    investments, credits, cashflows = repositories
    deposit = DepositInvestment(
        id="dep_1",
        name="Savings",
        start_amount=Decimal("10000.00"),
        term_months=18,
        rate_nominal=Decimal("2"),
        compounding=Compounding.YEARLY,
        tax_items=(CostItem.build("withholdingTax", "25"),),
        net_gain_monthly=Decimal("14.55"),
    )
    lot = ObjectInvestment(id="obj_1", name="Lot")

    investments.add(deposit)
    investments.add(lot)
    credits.add(Credit(id="cr_1", name="Loan"))
    cashflows.add(Cashflow("cf_1", "Savings", "dep_1"))

    assert investments.get("dep_1") == deposit
    assert investments.list() == [deposit, lot]
    assert [item.id for item in credits.list()] == ["cr_1"]
    assert [item.id for item in cashflows.list()] == ["cf_1"]


def test_collections_do_not_see_each_other(repositories):
    investments, credits, _ = repositories
    credits.add(Credit(id="cr_1", name="Loan"))

    assert investments.get("cr_1") is None
    with pytest.raises(EntityNotFoundError):
        investments.remove("cr_1")
    with pytest.raises(ValueError):
        investments.add(Credit(id="cr_2", name="Wrong collection"))


def test_update_keeps_order_and_remove_deletes(repositories):
    _, credits, _ = repositories
    first = credits.add(Credit(id="cr_1", name="First"))
    credits.add(Credit(id="cr_2", name="Second"))

    credits.update(replace(first, principal=Decimal("5000")))
    assert [item.id for item in credits.list()] == ["cr_1", "cr_2"]
    assert credits.get("cr_1").principal == Decimal("5000")

    credits.remove("cr_2")
    assert [item.id for item in credits.list()] == ["cr_1"]


def test_duplicate_and_unknown_ids(repositories):
    _, credits, _ = repositories
    credits.add(Credit(id="cr_1", name="Loan"))

    with pytest.raises(ValueError):
        credits.add(Credit(id="cr_1", name="Again"))
    with pytest.raises(EntityNotFoundError):
        credits.update(Credit(id="cr_missing", name="Ghost"))
