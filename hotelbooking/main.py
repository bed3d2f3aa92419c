"""FastAPI application bootstrap and lifecycle wiring.

Run locally with either of:

    python -m hotelbooking.main
    uvicorn hotelbooking.main:app --reload
"""

from __future__ import annotations

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from hotelbooking.controllers.booking_controller import router as booking_router
from hotelbooking.repository.data_repository import (
    DataRepository,
    SQLiteBookingStore,
    SQLiteRoomStore,
)
from hotelbooking.services.booking_service import BookingAvailabilityService
from hotelbooking.utils.config import Settings, get_settings
from hotelbooking.utils.logger import get_logger


logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app with explicit startup lifecycle dependencies."""
    settings = settings or get_settings()
    repository = DataRepository(settings)
    booking_service = BookingAvailabilityService(
        booking_store=SQLiteBookingStore(repository),
        room_store=SQLiteRoomStore(repository),
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        startup(app)
        yield

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.include_router(booking_router)

    app.state.repository = repository
    app.state.booking_service = booking_service

    return app


def startup(app: FastAPI) -> None:
    """Create the schema and seed demo rooms; safe to re-run on restarts."""
    repository: DataRepository = app.state.repository

    logger.info("Startup: initializing database schema")
    repository.initialize_database()

    logger.info("Startup: seeding demo rooms and bookings (skipped if Rooms table not empty)")
    repository.seed_demo_data()

    logger.info("Startup complete, system ready")


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "hotelbooking.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
