"""
Milk Collection API

FastAPI application factory. Run with:
    uvicorn --factory milkcoop.main:create_app
or ``milkcoop serve``.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from milkcoop.db import Database
from milkcoop.logging import setup_logging
from milkcoop.schema import ensure_schema
from milkcoop.settings import Settings, get_settings
from milkcoop.web import api_router, register_error_handlers

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """
    Build the API.

    Args:
        settings: defaults to get_settings()
        database: defaults to a Database on settings.DATABASE_URL
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    database = database or Database(settings.DATABASE_URL)

    app = FastAPI(
        title="Milk Collection API",
        description="API for milk collection: farmers, collection centers, collections, payments and stats",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.on_event("startup")
    def startup():
        """Ensure the schema exists before serving traffic. Failure aborts startup."""
        try:
            added = ensure_schema(database.engine)
        except Exception as e:
            logger.error(f"Schema initialization failed: {e}")
            raise
        logger.info("Schema ready", extra={"columns_added": added})

    @app.on_event("shutdown")
    def shutdown():
        database.dispose()

    @app.get("/")
    async def root():
        return {"message": "Milk Collection API", "version": "1.0.0", "docs": "/docs"}

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    return app
