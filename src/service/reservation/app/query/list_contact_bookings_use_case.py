from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.dto.reservation_dto import ContactBookingView
from src.service.reservation.app.interface.i_booking_query_repo import IBookingQueryRepo


class ListContactBookingsUseCase:
    """Confirmed bookings made under the contact identifier supplied at hold time"""

    def __init__(self, *, booking_query_repo: IBookingQueryRepo) -> None:
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo)

    @Logger.io
    async def list_contact_bookings(self, *, contact: str) -> List[ContactBookingView]:
        if not contact or not contact.strip():
            raise ValidationError('contact is required')
        return await self.booking_query_repo.list_confirmed_by_contact(contact=contact)
