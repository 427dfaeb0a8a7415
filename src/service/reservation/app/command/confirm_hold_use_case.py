from datetime import timedelta
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace
from uuid_utils import UUID

from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError, StoreError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.reservation_metrics import metrics
from src.service.reservation.app.dto.reservation_dto import ConfirmationResult
from src.service.reservation.app.interface.i_booking_command_repo import IBookingCommandRepo


class ConfirmHoldUseCase:
    """
    Promote a live hold to a permanent booking.

    The HELD -> CONFIRMED transition is one conditional update guarded by the same
    liveness rule the status resolver uses, so a hold that reads as AVAILABLE can
    never be confirmed, and of two concurrent confirms only one succeeds.
    """

    def __init__(self, *, booking_command_repo: IBookingCommandRepo, hold_ttl: timedelta) -> None:
        self.booking_command_repo = booking_command_repo
        self.hold_ttl = hold_ttl
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        booking_command_repo: IBookingCommandRepo = Depends(
            Provide[Container.booking_command_repo]
        ),
        hold_ttl: timedelta = Depends(Provide[Container.hold_ttl]),
    ) -> Self:
        return cls(booking_command_repo=booking_command_repo, hold_ttl=hold_ttl)

    @Logger.io
    async def confirm_hold(self, *, booking_id: UUID) -> ConfirmationResult:
        with self.tracer.start_as_current_span(
            'use_case.confirm_hold',
            attributes={'booking.id': str(booking_id)},
        ):
            try:
                result = await self.booking_command_repo.confirm_hold_atomically(
                    booking_id=booking_id, ttl=self.hold_ttl
                )
            except ConflictError:
                metrics.record_confirmation(result='conflict')
                raise
            except StoreError:
                metrics.record_confirmation(result='error')
                raise

            metrics.record_confirmation(result='success')
            return result
