from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ats_api.core.config import get_settings
from ats_api.db.session import close_db, init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own the database engine for the lifetime of the process."""
    settings = get_settings()
    init_db(app)
    logger.info(
        "%s %s started (environment=%s, database=%s)",
        settings.app_name,
        settings.app_version,
        settings.environment,
        app.state.db_engine.dialect.name,
    )
    try:
        yield
    finally:
        close_db(app)
        logger.info("%s stopped, database engine disposed", settings.app_name)
