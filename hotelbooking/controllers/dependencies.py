"""Shared FastAPI dependency providers for controller layer."""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from hotelbooking.repository.data_repository import (
    DataRepository,
    SQLiteBookingStore,
    SQLiteRoomStore,
)
from hotelbooking.services.booking_service import BookingAvailabilityService


def get_booking_service(request: Request) -> BookingAvailabilityService:
    service = getattr(request.app.state, "booking_service", None)
    if service is None:
        repository: DataRepository | None = getattr(request.app.state, "repository", None)
        if repository is not None:
            service = BookingAvailabilityService(
                booking_store=SQLiteBookingStore(repository),
                room_store=SQLiteRoomStore(repository),
            )
            request.app.state.booking_service = service
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Booking service is not initialized",
        )
    return service
