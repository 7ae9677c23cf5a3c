from __future__ import annotations

import logging
from collections.abc import Iterator

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import settings
from app.models.base import Base

logger = logging.getLogger(__name__)

engine = create_engine(settings.database_url, pool_pre_ping=True)
# Schema statements may need an owner role the read/write pool does not have.
ddl_engine = engine if settings.database_url_ddl == settings.database_url else create_engine(settings.database_url_ddl)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def missing_tables(bind: Engine) -> list[str]:
    existing = set(inspect(bind).get_table_names())
    return sorted(name for name in Base.metadata.tables if name not in existing)


def init_schema(mode: str | None = None, bind: Engine | None = None) -> None:
    """
    Make sure the schema exists before the app serves requests.

    Runs once at process startup. "create" issues CREATE TABLE for anything
    missing through the DDL connection; "verify" only inspects and refuses to
    start when tables are absent (run the Alembic migrations first).
    """
    from app.models import entities  # noqa: F401

    mode = mode or settings.schema_mode
    if mode == "create":
        Base.metadata.create_all(bind=bind or ddl_engine)
        logger.info("database schema created or already present")
        return
    if mode != "verify":
        raise RuntimeError(f"unknown SCHEMA_MODE {mode!r}; expected 'verify' or 'create'")

    missing = missing_tables(bind or engine)
    if missing:
        raise RuntimeError(
            "database tables do not exist: " + ", ".join(missing) + ". Run `alembic upgrade head` first."
        )
    logger.info("database schema verified")
