"""Reservation DTOs returned by use cases to the driving adapters"""

from datetime import datetime
from typing import List

import attrs
from uuid_utils import UUID

from src.service.reservation.domain.enum.seat_status import SeatStatus


@attrs.define(frozen=True)
class HoldResult:
    booking_id: UUID
    expires_at: datetime


@attrs.define(frozen=True)
class ConfirmationResult:
    booking_code: str
    movie_title: str
    seats: List[str]  # labels in claim order, e.g. ['A1', 'A2']


@attrs.define(frozen=True)
class SeatStatusView:
    id: int
    row: str
    number: int
    category: str
    price: float
    status: SeatStatus


@attrs.define(frozen=True)
class MovieView:
    id: int
    title: str
    duration: int
    poster_url: str
    show_id: int


@attrs.define(frozen=True)
class ContactBookingView:
    booking_code: str
    movie_title: str
    seats: List[str]
    created_at: datetime

    @property
    def date(self) -> str:
        return self.created_at.strftime('%Y-%m-%d %H:%M')
