"""Application factory for the CRM Social Leads API."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from crm_api.application.use_cases.notifications import NotificationDispatcher
from crm_api.config import get_settings
from crm_api.infrastructure.database import SessionLocal, engine, initialize_database
from crm_api.infrastructure.notifications import (
    ChannelRegistry,
    NotificationPublisher,
    ReadStateSynchronizer,
)
from crm_api.infrastructure.seed import seed_default_catalogs
from crm_api.interfaces.api.errors import register_exception_handlers
from crm_api.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Inicializa la base de datos y los catálogos al arrancar y libera los recursos al cerrar."""

    initialize_database()
    session = SessionLocal()
    try:
        seed_default_catalogs(session)
    finally:
        session.close()
    logger.info("%s ready to accept requests", app.title)

    yield

    logger.info(
        "Shutting down with %d open notification channel(s)",
        app.state.channel_registry.connection_count(),
    )
    engine.dispose()


def create_app() -> FastAPI:
    """Crea y configura la aplicación principal de FastAPI."""

    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    registry = ChannelRegistry()
    publisher = NotificationPublisher(registry)
    app.state.channel_registry = registry
    app.state.notification_publisher = publisher
    app.state.notification_dispatcher = NotificationDispatcher(publisher)
    app.state.read_state_synchronizer = ReadStateSynchronizer(publisher, SessionLocal)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response

    register_exception_handlers(app)
    register_routes(app)
    return app


app = create_app()
