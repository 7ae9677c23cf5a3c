import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from app.core.db import init_schema, missing_tables


@pytest.fixture
def empty_engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    yield engine
    engine.dispose()


def test_verify_refuses_to_start_without_tables(empty_engine):
    with pytest.raises(RuntimeError) as exc_info:
        init_schema("verify", bind=empty_engine)
    assert "families" in str(exc_info.value)


def test_create_then_verify(empty_engine):
    init_schema("create", bind=empty_engine)
    assert missing_tables(empty_engine) == []
    init_schema("verify", bind=empty_engine)


def test_unknown_mode_is_rejected(empty_engine):
    with pytest.raises(RuntimeError):
        init_schema("lazy", bind=empty_engine)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
