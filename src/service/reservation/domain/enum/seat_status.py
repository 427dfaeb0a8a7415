"""Seat Status Enum (derived at read time, never stored)"""

from enum import StrEnum


class SeatStatus(StrEnum):
    AVAILABLE = 'AVAILABLE'
    HELD = 'HELD'
    SOLD = 'SOLD'
