from __future__ import annotations

from collections.abc import Generator
from typing import TYPE_CHECKING

from fastapi import Request
from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from ats_api.core.config import get_settings

if TYPE_CHECKING:
    from fastapi import FastAPI


def create_db_engine(database_url: str, **kwargs) -> Engine:
    """Create an engine, turning on foreign key enforcement for SQLite."""
    engine = create_engine(database_url, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_tables(engine: Engine) -> None:
    """Create every mapped table that does not exist yet."""
    import ats_api.models  # noqa: F401  registers tables on Base.metadata
    from ats_api.db.base import Base

    Base.metadata.create_all(engine)


def init_db(app: FastAPI) -> None:
    """Initialize database engine and session factory at startup.

    Stores engine and session factory in app.state for thread-safe access.
    Should be called during FastAPI lifespan startup.
    """
    settings = get_settings()
    engine = create_db_engine(settings.database_url, echo=settings.sql_echo)
    session_factory = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )
    if settings.create_tables:
        create_tables(engine)
    app.state.db_engine = engine
    app.state.db_session_factory = session_factory


def close_db(app: FastAPI) -> None:
    """Dispose database engine at shutdown."""
    if hasattr(app.state, "db_engine"):
        app.state.db_engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield database session per request.

    Uses session factory stored in app.state during lifespan startup.
    """
    session_factory: sessionmaker = request.app.state.db_session_factory
    session = session_factory()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def get_count_db(request: Request) -> Generator[Session, None, None]:
    """Yield a second, read-only session for queries run alongside ``get_db``.

    A session is not safe to share between threads, so a list endpoint that
    counts rows while it fetches a page needs one of its own.
    """
    session_factory: sessionmaker = request.app.state.db_session_factory
    session = session_factory()
    try:
        yield session
    finally:
        session.close()
