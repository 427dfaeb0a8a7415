from datetime import datetime, timedelta
from typing import List, Optional

import attrs
from uuid_utils import UUID

from src.platform.logging.loguru_io import Logger
from src.service.reservation.domain.enum.booking_status import BookingStatus
from src.service.reservation.domain.enum.seat_status import SeatStatus


def liveness_cutoff(*, now: datetime, ttl: timedelta) -> datetime:
    """Holds created at or before this instant are no longer live"""
    return now - ttl


def is_live(*, status: BookingStatus, created_at: datetime, ttl: timedelta, now: datetime) -> bool:
    """
    A booking blocks its seats when it is CONFIRMED, or HELD and younger than the TTL.

    Pure function of its inputs: no expiry timestamp is stored anywhere, so every reader
    (status resolver, hold check, confirmation) derives liveness the same way.
    """
    if status == BookingStatus.CONFIRMED:
        return True
    if status == BookingStatus.HELD:
        return created_at > liveness_cutoff(now=now, ttl=ttl)
    return False


@attrs.define
class Booking:
    id: UUID
    show_id: int
    contact: str
    code: str
    created_at: datetime
    seat_ids: List[int] = attrs.field(factory=list)  # claim order, fixed at creation
    status: BookingStatus = BookingStatus.HELD

    @classmethod
    @Logger.io
    def create_hold(
        cls,
        *,
        id: UUID,
        show_id: int,
        contact: str,
        code: str,
        seat_ids: List[int],
        now: datetime,
    ) -> 'Booking':
        return cls(
            id=id,
            show_id=show_id,
            contact=contact,
            code=code,
            created_at=now,
            seat_ids=list(seat_ids),
            status=BookingStatus.HELD,
        )

    def expires_at(self, *, ttl: timedelta) -> datetime:
        return self.created_at + ttl

    def is_live(self, *, ttl: timedelta, now: datetime) -> bool:
        return is_live(status=self.status, created_at=self.created_at, ttl=ttl, now=now)


def seat_status_for_claim(claim_status: Optional[BookingStatus]) -> SeatStatus:
    """Map the live claim on a seat (if any) to the status shown to clients"""
    if claim_status == BookingStatus.CONFIRMED:
        return SeatStatus.SOLD
    if claim_status == BookingStatus.HELD:
        return SeatStatus.HELD
    return SeatStatus.AVAILABLE
