"""Schema creation on a fresh database."""

from __future__ import annotations

from sqlalchemy import create_engine, inspect

from crm_api.infrastructure import models  # noqa: F401
from crm_api.infrastructure.database import Base


def test_index_names_are_unique_across_tables():
    names = [index.name for table in Base.metadata.sorted_tables for index in table.indexes]

    assert len(names) == len(set(names))


def test_schema_builds_on_an_empty_sqlite_database():
    engine = create_engine("sqlite://")
    try:
        Base.metadata.create_all(bind=engine)
        inspector = inspect(engine)

        assert {"lead", "lead_status", "notification", "user"} <= set(inspector.get_table_names())
        assert "ix_lead_status_id" in {index["name"] for index in inspector.get_indexes("lead")}
    finally:
        engine.dispose()
