"""Tests for the database engine helpers."""

from sqlalchemy import text

from investcalc.infrastructure import db


def test_get_engine_caches_per_url(tmp_path):
    url = f"sqlite:///{tmp_path / 'cache.db'}"

    assert db.get_engine(url) is db.get_engine(url)


def test_in_memory_engine_shares_one_connection():
    adapter = db.SqlAlchemyDatabaseEngineAdapter("sqlite://")
    engine = adapter.get_engine()

    with engine.begin() as conn:
        conn.execute(text("CREATE TABLE IF NOT EXISTS sample (x INTEGER)"))
        conn.execute(text("DELETE FROM sample"))
        conn.execute(text("INSERT INTO sample VALUES (1)"))
    with engine.connect() as conn:
        count = conn.execute(text("SELECT COUNT(*) FROM sample")).scalar_one()

    assert count == 1
