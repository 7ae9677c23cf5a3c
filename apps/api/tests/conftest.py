import os
from datetime import datetime, timedelta, timezone

# Settings are read at import time; point the app at throwaway SQLite before importing it.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("DATABASE_URL_DDL", None)
os.environ["SCHEMA_MODE"] = "create"
os.environ["AUTH_MODE"] = "session"
os.environ["SESSION_SECRET"] = "test-session-secret-for-signing-cookies"

import jwt
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings
from app.core.db import get_db
from app.main import app
from app.models.base import Base
from app.models import entities  # noqa: F401


engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@event.listens_for(engine, "connect")
def _enable_foreign_keys(dbapi_connection, _):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


def make_session_token(email: str | None, name: str | None = None, expires_in: int = 3600, **claims) -> str:
    payload = {"exp": datetime.now(timezone.utc) + timedelta(seconds=expires_in), **claims}
    if email is not None:
        payload["email"] = email
    if name is not None:
        payload["name"] = name
    return jwt.encode(payload, settings.session_secret, algorithm=settings.session_algorithm)


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def auth_headers():
    def _headers(email: str, name: str | None = None) -> dict[str, str]:
        token = make_session_token(email, name)
        return {"Cookie": f"{settings.session_cookie_name}={token}"}

    return _headers


@pytest.fixture
def make_family(client, auth_headers):
    def _create(email: str = "alice@x.com", family_name: str = "Smiths", member_name: str = "Alice") -> int:
        response = client.post(
            "/v1/families",
            json={"familyName": family_name, "memberName": member_name},
            headers=auth_headers(email),
        )
        assert response.status_code == 201, response.text
        return response.json()["familyId"]

    return _create
