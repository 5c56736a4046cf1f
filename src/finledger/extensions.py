"""Database wiring for the Flask app."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from flask import Flask, current_app, has_app_context
from sqlmodel import Session

from .config import BaseConfig
from .infra.database import create_db_engine, init_database
from .logging_config import get_logger

logger = get_logger(__name__)

_engine = None


def init_db(app: Flask) -> None:
    """Initialize the SQLModel engine using configuration from the app."""

    config: BaseConfig = app.config["FINLEDGER_CONFIG"]
    engine = create_db_engine(config)
    init_database(engine)

    global _engine
    _engine = engine
    app.extensions["finledger_engine"] = engine
    logger.info("Database ready", extra={"database_url": config.DATABASE_URL})


def get_engine():
    """Return the engine of the current app, or the last one initialized."""

    if has_app_context():
        engine = current_app.extensions.get("finledger_engine")
        if engine is not None:
            return engine
    if _engine is None:
        raise RuntimeError("Database engine not initialized")
    return _engine


@contextmanager
def session_scope() -> Iterator[Session]:
    """Provide a transactional scope around operations."""

    session = Session(get_engine(), expire_on_commit=False)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
