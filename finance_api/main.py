"""Finance tracker API: FastAPI entry point.

Serves CRUD over transaction records and aggregated statistics. The record
store is created once in the lifespan and injected into handlers.
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from finance_api.core.config import Settings, get_settings
from finance_api.core.errors import register_error_handlers
from finance_api.core.logging import install_request_context, setup_logging
from finance_api.core.store import build_store
from finance_api.domains.stats.router import router as stats_router
from finance_api.domains.transactions.router import router as transactions_router
from finance_api.routers import health

logger = structlog.get_logger()


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Build the application; settings are read from the environment by default."""
    app_settings = app_settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan: startup/shutdown hooks."""
        setup_logging(log_level=app_settings.log_level, json_output=app_settings.json_logs)
        logger.info("app_starting", version=app_settings.APP_VERSION, port=app_settings.PORT)
        app.state.store = build_store(app_settings)
        yield
        logger.info("app_stopping")

    app = FastAPI(
        title="Finance Tracker API",
        description="Income/expense records with totals, category and monthly statistics.",
        version=app_settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    register_error_handlers(app)
    install_request_context(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(transactions_router)
    app.include_router(stats_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    current = get_settings()
    uvicorn.run(
        "finance_api.main:app",
        host=current.HOST,
        port=current.PORT,
        log_level=current.log_level.lower(),
    )
