# group_portal/adapters/persistence/session.py

from __future__ import annotations

import structlog
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .models import Base

logger = structlog.get_logger()

# ---------------------------------------------------------------------------
# Engine / Session factory
# ---------------------------------------------------------------------------


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Creates the SQLAlchemy engine for `database_url`.

    SQLite needs `check_same_thread=False` because FastAPI runs sync
    endpoints in a threadpool. In-memory SQLite additionally shares one
    connection so every session sees the same database.
    """
    kwargs: dict[str, object] = {"echo": echo, "future": True}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool

    engine = create_engine(database_url, **kwargs)
    logger.info("db_engine_created", dialect=engine.dialect.name)
    return engine


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
        class_=Session,
    )


def init_schema(engine: Engine) -> None:
    """Creates missing tables. Existing tables are left untouched."""
    Base.metadata.create_all(engine)
    logger.info("db_schema_ready", tables=sorted(Base.metadata.tables))


__all__ = ["build_engine", "build_session_factory", "init_schema"]
