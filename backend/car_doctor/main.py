"""Car Doctor API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - One error-translation boundary (api/error_handlers.py) for every CarDoctorError
    - CORS configured from settings with credentials enabled (the auth cookie
      crosses origins only for the configured list)
    - The Mongo client is created, pinged and closed by the lifespan context manager
      and exposed to handlers only through app.state.db_manager

Design Decisions:
    - create_app(settings) factory so tests can build apps with other settings
    - A failed startup ping is logged, not fatal: /health/ready reports it
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from car_doctor.api.error_handlers import register_error_handlers
from car_doctor.api.routes import auth, checkout, health, services
from car_doctor.config import Settings, get_settings
from car_doctor.core.errors import StorageError
from car_doctor.infrastructure.database import init_db
from car_doctor.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    db_manager = init_db(settings.mongo_uri, settings.database_name)
    app.state.db_manager = db_manager
    try:
        await db_manager.ping()
        logger.info("Pinged deployment: connected to MongoDB")
    except StorageError as e:
        logger.error(f"MongoDB ping failed at startup: {e.message}")
    logger.info(f"Car Doctor API started on port {settings.port}")
    yield
    await db_manager.close()
    logger.info("Car Doctor API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title="Car Doctor API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(services.router)
    app.include_router(checkout.router)

    register_error_handlers(app, settings)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn on HOST:PORT."""
    settings = get_settings()
    uvicorn.run(
        "car_doctor.main:app", host=settings.host, port=settings.port,
    )
