from __future__ import annotations

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect


def _make_alembic_config(database_url: str) -> Config:
    """Return an Alembic config pointing at the service migrations."""
    service_root = Path(__file__).resolve().parents[3]
    cfg = Config(str(service_root / "alembic.ini"))
    cfg.set_main_option("sqlalchemy.url", database_url)
    cfg.set_main_option("script_location", str(service_root / "migrations"))
    return cfg


@pytest.mark.integration
def test_alembic_upgrade_and_downgrade_cycle(tmp_path, monkeypatch) -> None:
    """Migrations upgrade from base to head and cleanly downgrade back to base."""
    database_url = f"sqlite:///{tmp_path / 'records.db'}"
    monkeypatch.delenv("TEST_DATABASE_URL", raising=False)
    monkeypatch.setenv("DATABASE_URL", database_url)
    cfg = _make_alembic_config(database_url)

    command.upgrade(cfg, "head")
    engine = create_engine(database_url)
    try:
        tables = set(inspect(engine).get_table_names())
        users_email = [ix for ix in inspect(engine).get_indexes("users") if ix["name"] == "ix_users_email"]
        assert len(users_email) == 1
        assert users_email[0]["unique"]
        assert users_email[0]["column_names"] == ["email"]
        assert {
            "users",
            "helprequests",
            "recommendationrequests",
            "menuitemreview",
            "articles",
            "ucsbdiningcommonsmenuitem",
            "ucsborganization",
        } <= tables

        command.downgrade(cfg, "base")
        assert set(inspect(engine).get_table_names()) <= {"alembic_version"}

        command.upgrade(cfg, "head")
    finally:
        engine.dispose()
