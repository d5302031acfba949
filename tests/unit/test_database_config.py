import pytest

import ucsb_records.db.database as dbmod


def test_is_pytest_runtime_detected():
    assert dbmod._is_pytest_runtime() is True


def test_pytest_uses_in_memory_sqlite():
    assert str(dbmod.engine.url).startswith("sqlite")


def test_database_url_prefers_explicit_url(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/records")
    assert dbmod._get_database_url() == "postgresql://u:p@db:5432/records"


def test_database_url_assembled_from_parts(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("POSTGRES_USER", "u")
    monkeypatch.setenv("POSTGRES_PASSWORD", "p")
    monkeypatch.setenv("POSTGRES_HOST", "db")
    monkeypatch.setenv("POSTGRES_PORT", "5432")
    monkeypatch.setenv("POSTGRES_DB", "records")
    assert dbmod._get_database_url() == "postgresql://u:p@db:5432/records"


def test_database_url_names_missing_parts(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    for name in ("POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_HOST", "POSTGRES_PORT", "POSTGRES_DB"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("POSTGRES_USER", "u")
    with pytest.raises(ValueError) as exc:
        dbmod._get_database_url()
    assert "POSTGRES_PASSWORD" in str(exc.value)
    assert "POSTGRES_USER" not in str(exc.value)
