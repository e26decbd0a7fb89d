"""Shared fixtures: a throwaway SQLite database and an application per test."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

_TMP_DIR = Path(tempfile.mkdtemp(prefix="crm-api-tests-"))
TEST_DB_PATH = _TMP_DIR / "test.db"

os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret-key"
for _optional in (
    "SENDGRID_API_KEY",
    "SENDGRID_SENDER",
    "AZURE_STORAGE_CONNECTION_STRING",
    "AZURE_STORAGE_CONTAINER_NAME",
):
    os.environ.pop(_optional, None)

from crm_api.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from fastapi.testclient import TestClient  # noqa: E402

from crm_api.application.use_cases.users import create_user  # noqa: E402
from crm_api.domain.entities import ROLE_ADMIN, ROLE_AGENT  # noqa: E402
from crm_api.infrastructure import database  # noqa: E402
from crm_api.infrastructure.security import create_access_token, password_signature  # noqa: E402
from crm_api.infrastructure.seed import seed_default_catalogs  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    """Rebuild the schema and the default catalogs for every test."""

    database.Base.metadata.drop_all(bind=database.engine)
    database.initialize_database()
    session = database.SessionLocal()
    try:
        seed_default_catalogs(session)
    finally:
        session.close()
    yield


@pytest.fixture()
def db_session():
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def app():
    from crm_api.main import create_app

    return create_app()


@pytest.fixture()
def client(app):
    # A single portal keeps HTTP requests and websockets on the same event loop.
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_user(db_session):
    def _make_user(
        email: str = "agent@example.com",
        *,
        name: str = "Agente",
        password: str = "Secret123",
        role: str = ROLE_AGENT,
    ):
        return create_user(
            db_session, name=name, email=email, password=password, role_alias=role
        )

    return _make_user


@pytest.fixture()
def agent(make_user):
    return make_user("agent@example.com", name="Agente Uno")


@pytest.fixture()
def admin(make_user):
    return make_user("admin@example.com", name="Administrador", role=ROLE_ADMIN)


def issue_token(user) -> str:
    return create_access_token(
        {
            "sub": user.email,
            "uid": user.id,
            "role": user.role.alias,
            "pwd_sig": password_signature(user.password, user.is_active),
        }
    )


@pytest.fixture()
def token_for():
    return issue_token


@pytest.fixture()
def auth_headers():
    def _auth_headers(user) -> dict[str, str]:
        return {"Authorization": f"Bearer {issue_token(user)}"}

    return _auth_headers
