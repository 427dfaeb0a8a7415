from src.service.reservation.app.dto.reservation_dto import (
    ConfirmationResult,
    ContactBookingView,
    HoldResult,
    MovieView,
    SeatStatusView,
)

__all__ = [
    'ConfirmationResult',
    'ContactBookingView',
    'HoldResult',
    'MovieView',
    'SeatStatusView',
]
