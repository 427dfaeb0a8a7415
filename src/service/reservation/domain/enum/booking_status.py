"""Booking Status Enum"""

from enum import StrEnum


class BookingStatus(StrEnum):
    HELD = 'HELD'
    CONFIRMED = 'CONFIRMED'
    EXPIRED = 'EXPIRED'
