import pytest
from fastapi.testclient import TestClient

# Importing the database module under pytest binds the in-memory SQLite engine.
import ucsb_records.db.database as db_module
from ucsb_records.db import models
from ucsb_records.api.main import app

ADMIN_EMAIL = "admin@ucsb.edu"
USER_EMAIL = "user@ucsb.edu"

ADMIN_HEADERS = {"x-auth-request-email": ADMIN_EMAIL, "x-auth-request-user": "Admin"}
USER_HEADERS = {"x-auth-request-email": USER_EMAIL, "x-auth-request-user": "User"}


@pytest.fixture(scope="session", autouse=True)
def _schema():
    models.Base.metadata.create_all(bind=db_module.engine)
    yield
    models.Base.metadata.drop_all(bind=db_module.engine)


@pytest.fixture(autouse=True)
def _auth_env(monkeypatch):
    monkeypatch.delenv("DEV_MODE", raising=False)
    monkeypatch.delenv("ALLOW_DEV_MODE", raising=False)
    monkeypatch.setenv("APP_BASE_URL", "http://localhost:3000")
    monkeypatch.setenv("ADMIN_EMAILS", ADMIN_EMAIL)
    yield


# Per-test session shared with the app; every table is emptied afterwards.
@pytest.fixture(autouse=True)
def db_session(_schema):
    session = db_module.SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        for table in reversed(models.Base.metadata.sorted_tables):
            session.execute(table.delete())
        session.commit()
        session.close()


@pytest.fixture
def client(db_session):
    def _override_get_db():
        yield db_session

    app.dependency_overrides[db_module.get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(db_module.get_db, None)


@pytest.fixture
def admin_headers():
    return dict(ADMIN_HEADERS)


@pytest.fixture
def user_headers():
    return dict(USER_HEADERS)
