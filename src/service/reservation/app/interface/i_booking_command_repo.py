"""
Booking Command Repository Interface

Every method is one atomic unit against the store: it either fully applies or
leaves the ledger untouched.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Sequence

from uuid_utils import UUID

from src.service.reservation.app.dto.reservation_dto import ConfirmationResult
from src.service.reservation.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def create_hold_atomically(
        self,
        *,
        booking_id: UUID,
        show_id: int,
        contact: str,
        seat_ids: Sequence[int],
        ttl: timedelta,
    ) -> Booking:
        """
        Lock the requested seats, read the clock, and insert a HELD booking with its
        seat claims and a unique confirmation code.

        Raises:
            ConflictError: any requested seat has a live claim for this show
            StoreError: the store failed; nothing was written
        """
        pass

    @abstractmethod
    async def confirm_hold_atomically(
        self, *, booking_id: UUID, ttl: timedelta
    ) -> ConfirmationResult:
        """
        Promote a live HELD booking to CONFIRMED with a single conditional update.

        Raises:
            ConflictError: booking unknown, not HELD, or older than the TTL
        """
        pass

    @abstractmethod
    async def expire_stale_holds(self, *, now: datetime, ttl: timedelta) -> int:
        """Set-based HELD -> EXPIRED for holds created at or before now - ttl; returns the count"""
        pass
