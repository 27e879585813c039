"""Entry point for the Vidly FastAPI application."""

import logging
from typing import Optional

from fastapi import FastAPI

import vidly.models  # noqa: F401  (registers tables on Base.metadata)
from vidly.api.v1 import router as v1_router
from vidly.core.config import Settings, get_settings
from vidly.core.database import build_engine, build_session_factory, init_database
from vidly.core.error_handlers import register_exception_handlers
from vidly.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around an explicit configuration.

    The settings, engine and session factory live on ``app.state``; request
    dependencies read them from there.
    """

    settings = settings or get_settings()
    if not settings.SECRET_KEY:
        raise RuntimeError("SECRET_KEY is not configured")

    configure_logging(settings.LOG_LEVEL)

    engine = build_engine(settings)
    init_database(engine)

    app = FastAPI(title=settings.PROJECT_NAME)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    register_exception_handlers(app)

    app.include_router(v1_router, prefix=settings.API_PREFIX)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    logger.info("%s ready", settings.PROJECT_NAME)
    return app


def run() -> None:
    import uvicorn

    uvicorn.run("vidly.main:create_app", factory=True, host="0.0.0.0", port=8000)


__all__ = ["create_app", "run"]
