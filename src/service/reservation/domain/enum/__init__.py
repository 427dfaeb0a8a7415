"""Reservation Domain Enums"""

from src.service.reservation.domain.enum.booking_status import BookingStatus
from src.service.reservation.domain.enum.seat_status import SeatStatus

__all__ = ['BookingStatus', 'SeatStatus']
