"""HTTP controller layer for booking availability."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from hotelbooking.controllers.dependencies import get_booking_service
from hotelbooking.domain.constraints import InvalidDateRangeError, NoBookingsExistError
from hotelbooking.domain.models import Booking
from hotelbooking.services.booking_service import BookingAvailabilityService
from hotelbooking.utils.logger import get_logger


logger = get_logger(__name__)

router = APIRouter(tags=["bookings"])


class CreateBookingRequest(BaseModel):
    """Input DTO; range rules are enforced by the service, not here."""

    start_date: date
    end_date: date
    customer_id: int = Field(gt=0)


class BookingResponse(BaseModel):
    booking_id: int = Field(gt=0)
    start_date: date
    end_date: date
    customer_id: int
    room_id: int
    is_active: bool


class AvailableRoomResponse(BaseModel):
    room_id: int


class OccupiedDatesResponse(BaseModel):
    dates: list[date]


class OccupancyCalendarResponse(BaseModel):
    year: int
    min_year: int
    max_year: int
    fully_occupied_dates: list[date]


class BookingBoundsResponse(BaseModel):
    min_booking_date: date
    max_booking_date: date


def _bad_range(exc: InvalidDateRangeError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=str(exc),
    )


@router.post(
    "/bookings",
    response_model=BookingResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_booking(
    payload: CreateBookingRequest,
    service: BookingAvailabilityService = Depends(get_booking_service),
) -> BookingResponse:
    try:
        created = service.create_booking(
            Booking(
                start_date=payload.start_date,
                end_date=payload.end_date,
                customer_id=payload.customer_id,
            )
        )
    except InvalidDateRangeError as exc:
        raise _bad_range(exc) from exc
    except Exception as exc:  # pragma: no cover - unexpected store failure
        logger.exception("Unexpected booking failure")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create booking",
        ) from exc

    if created is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="No room is available for the requested period",
        )
    return BookingResponse(
        booking_id=created.booking_id,
        start_date=created.start_date,
        end_date=created.end_date,
        customer_id=created.customer_id,
        room_id=created.room_id,
        is_active=created.is_active,
    )


@router.get(
    "/rooms/available",
    response_model=AvailableRoomResponse,
    status_code=status.HTTP_200_OK,
)
async def find_available_room(
    start_date: date = Query(...),
    end_date: date = Query(...),
    service: BookingAvailabilityService = Depends(get_booking_service),
) -> AvailableRoomResponse:
    """Return the first free room id, or -1 when every room is taken."""
    try:
        return AvailableRoomResponse(room_id=service.find_available_room(start_date, end_date))
    except InvalidDateRangeError as exc:
        raise _bad_range(exc) from exc


@router.get(
    "/occupied_dates",
    response_model=OccupiedDatesResponse,
    status_code=status.HTTP_200_OK,
)
async def fully_occupied_dates(
    start_date: date = Query(...),
    end_date: date = Query(...),
    service: BookingAvailabilityService = Depends(get_booking_service),
) -> OccupiedDatesResponse:
    try:
        return OccupiedDatesResponse(dates=service.get_fully_occupied_dates(start_date, end_date))
    except InvalidDateRangeError as exc:
        raise _bad_range(exc) from exc


@router.get(
    "/calendar",
    response_model=OccupancyCalendarResponse,
    status_code=status.HTTP_200_OK,
)
async def occupancy_calendar(
    year: int | None = Query(default=None, ge=1, le=9999),
    service: BookingAvailabilityService = Depends(get_booking_service),
) -> OccupancyCalendarResponse:
    calendar = service.occupancy_calendar(year if year is not None else service.today().year)
    return OccupancyCalendarResponse(
        year=calendar.year,
        min_year=calendar.min_year,
        max_year=calendar.max_year,
        fully_occupied_dates=calendar.fully_occupied_dates,
    )


@router.get(
    "/booking_bounds",
    response_model=BookingBoundsResponse,
    status_code=status.HTTP_200_OK,
)
async def booking_bounds(
    service: BookingAvailabilityService = Depends(get_booking_service),
) -> BookingBoundsResponse:
    try:
        return BookingBoundsResponse(
            min_booking_date=service.min_booking_date(),
            max_booking_date=service.max_booking_date(),
        )
    except NoBookingsExistError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
