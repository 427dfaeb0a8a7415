from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import List

from src.service.reservation.app.dto.reservation_dto import ContactBookingView, SeatStatusView


class IBookingQueryRepo(ABC):
    """Repository interface for booking read operations"""

    @abstractmethod
    async def get_seat_statuses(
        self, *, show_id: int, hall_id: int, now: datetime, ttl: timedelta
    ) -> List[SeatStatusView]:
        """Every seat of the hall ordered by (row label, number), with status as of `now`"""
        pass

    @abstractmethod
    async def list_confirmed_by_contact(self, *, contact: str) -> List[ContactBookingView]:
        """CONFIRMED bookings of one contact, newest first"""
        pass
