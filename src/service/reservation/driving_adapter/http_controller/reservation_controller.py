from typing import List

from fastapi import APIRouter, Depends, Query
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.command.confirm_hold_use_case import ConfirmHoldUseCase
from src.service.reservation.app.command.create_hold_use_case import CreateHoldUseCase
from src.service.reservation.app.query.list_contact_bookings_use_case import (
    ListContactBookingsUseCase,
)
from src.service.reservation.app.query.list_movies_use_case import ListMoviesUseCase
from src.service.reservation.app.query.resolve_seat_status_use_case import (
    ResolveSeatStatusUseCase,
)
from src.service.reservation.domain.seat_selection_domain import MAX_CATALOG_ID
from src.service.reservation.driving_adapter.http_controller.schema.reservation_schema import (
    ConfirmBookingRequest,
    ConfirmBookingResponse,
    HoldSeatsRequest,
    HoldSeatsResponse,
    MovieResponse,
    MyBookingResponse,
    SeatResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.get('/movies', response_model=List[MovieResponse])
@Logger.io
async def list_movies(
    use_case: ListMoviesUseCase = Depends(ListMoviesUseCase.depends),
) -> List[MovieResponse]:
    movies = await use_case.list_movies()
    return [
        MovieResponse(
            id=movie.id,
            title=movie.title,
            duration=movie.duration,
            poster_url=movie.poster_url,
            show_id=movie.show_id,
        )
        for movie in movies
    ]


@router.get('/seats', response_model=List[SeatResponse])
@Logger.io(truncate_content=True)
async def get_seats(
    show_id: int = Query(..., ge=1, le=MAX_CATALOG_ID),
    use_case: ResolveSeatStatusUseCase = Depends(ResolveSeatStatusUseCase.depends),
) -> List[SeatResponse]:
    seats = await use_case.resolve_status(show_id=show_id)
    return [
        SeatResponse(
            id=seat.id,
            row=seat.row,
            number=seat.number,
            category=seat.category,
            price=seat.price,
            status=seat.status.value,
        )
        for seat in seats
    ]


@router.post('/hold-seats')
@Logger.io
async def hold_seats(
    request: HoldSeatsRequest,
    use_case: CreateHoldUseCase = Depends(CreateHoldUseCase.depends),
) -> HoldSeatsResponse:
    with tracer.start_as_current_span('controller.hold_seats') as span:
        span.set_attribute('show_id', request.show_id)
        span.set_attribute('seat_count', len(request.seat_ids))

        hold = await use_case.create_hold(
            show_id=request.show_id,
            seat_ids=request.seat_ids,
            contact=request.contact,
        )
        return HoldSeatsResponse(booking_id=hold.booking_id, expires_at=hold.expires_at)


@router.post('/confirm-booking')
@Logger.io
async def confirm_booking(
    request: ConfirmBookingRequest,
    use_case: ConfirmHoldUseCase = Depends(ConfirmHoldUseCase.depends),
) -> ConfirmBookingResponse:
    with tracer.start_as_current_span('controller.confirm_booking') as span:
        span.set_attribute('booking.id', str(request.booking_id))

        confirmation = await use_case.confirm_hold(booking_id=request.booking_id)
        return ConfirmBookingResponse(
            booking_code=confirmation.booking_code,
            movie_title=confirmation.movie_title,
            seats=confirmation.seats,
        )


@router.get('/my-bookings', response_model=List[MyBookingResponse])
@Logger.io
async def list_my_bookings(
    contact: str = Query(..., min_length=1),
    use_case: ListContactBookingsUseCase = Depends(ListContactBookingsUseCase.depends),
) -> List[MyBookingResponse]:
    bookings = await use_case.list_contact_bookings(contact=contact)
    return [
        MyBookingResponse(
            booking_code=booking.booking_code,
            movie_title=booking.movie_title,
            seats=booking.seats,
            date=booking.date,
        )
        for booking in bookings
    ]
