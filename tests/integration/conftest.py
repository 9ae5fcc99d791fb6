"""Integration test fixtures: real uvicorn server + file-based SQLite."""

from __future__ import annotations

import asyncio
import os
import socket
import threading
import time
from pathlib import Path

import httpx
import pytest
import uvicorn
from sqlalchemy.orm import Session

from ats_api.core.config import get_settings
from ats_api.db.base import Base

_SQLITE_PATH = Path("/tmp/ats_integration_test.db")
_DATABASE_URL = f"sqlite:///{_SQLITE_PATH}"


def _find_free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


@pytest.fixture(scope="package")
def integration_server():
    """Start uvicorn in a background thread and yield its base URL.

    The lifespan handler creates the tables because ATS_API_CREATE_TABLES
    is set, so the server and the fixtures share one schema.
    """
    if _SQLITE_PATH.exists():
        _SQLITE_PATH.unlink()
    os.environ["ATS_API_DATABASE_URL"] = _DATABASE_URL
    os.environ["ATS_API_CREATE_TABLES"] = "true"
    get_settings.cache_clear()

    port = _find_free_port()
    config = uvicorn.Config("ats_api.main:app", host="127.0.0.1", port=port, log_level="warning")
    server = uvicorn.Server(config)

    thread = threading.Thread(target=asyncio.run, args=(server.serve(),), daemon=True)
    thread.start()

    base_url = f"http://127.0.0.1:{port}"
    for _ in range(50):
        try:
            resp = httpx.get(f"{base_url}/api/health", timeout=1.0)
            if resp.status_code == 200:
                break
        except httpx.ConnectError:
            pass
        time.sleep(0.1)
    else:
        raise RuntimeError("Integration server did not become ready in time")

    yield base_url

    server.should_exit = True
    thread.join(timeout=5)
    os.environ.pop("ATS_API_CREATE_TABLES", None)
    get_settings.cache_clear()
    if _SQLITE_PATH.exists():
        _SQLITE_PATH.unlink()


@pytest.fixture
def http_client(integration_server: str):
    with httpx.Client(base_url=integration_server) as client:
        yield client


@pytest.fixture
def server_session(integration_server: str):
    """Session bound to the running server's engine."""
    from ats_api.main import app

    session: Session = app.state.db_session_factory()
    yield session
    session.rollback()
    session.close()


@pytest.fixture(autouse=True)
def _clean_tables(integration_server: str):
    """Empty every table before each test, children first."""
    from ats_api.main import app

    session: Session = app.state.db_session_factory()
    try:
        for table in reversed(Base.metadata.sorted_tables):
            session.execute(table.delete())
        session.commit()
    finally:
        session.close()
    yield
