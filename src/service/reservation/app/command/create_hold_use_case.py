from datetime import timedelta
import time
from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace
import uuid_utils

from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError, NotFoundError, StoreError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.reservation_metrics import metrics
from src.service.reservation.app.dto.reservation_dto import HoldResult
from src.service.reservation.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.reservation.app.interface.i_seat_catalog_query_repo import ISeatCatalogQueryRepo
from src.service.reservation.domain.seat_selection_domain import (
    validate_hold_request,
    validate_seats_in_hall,
    validate_show_id,
)


class CreateHoldUseCase:
    """
    Claim a batch of seats for one show as a time-boxed hold.

    Flow:
    1. Shape checks (non-empty, no duplicates, contact present) - no store access
    2. Catalog checks: show exists, every seat belongs to the show's hall
    3. One transaction in the repo: lock seats -> read clock -> live-claim check -> insert
    4. Return booking id and expiry (created_at + TTL)

    Either every requested seat is held by the new booking or nothing is written.
    """

    def __init__(
        self,
        *,
        seat_catalog_query_repo: ISeatCatalogQueryRepo,
        booking_command_repo: IBookingCommandRepo,
        hold_ttl: timedelta,
    ) -> None:
        self.seat_catalog_query_repo = seat_catalog_query_repo
        self.booking_command_repo = booking_command_repo
        self.hold_ttl = hold_ttl
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        seat_catalog_query_repo: ISeatCatalogQueryRepo = Depends(
            Provide[Container.seat_catalog_query_repo]
        ),
        booking_command_repo: IBookingCommandRepo = Depends(
            Provide[Container.booking_command_repo]
        ),
        hold_ttl: timedelta = Depends(Provide[Container.hold_ttl]),
    ) -> Self:
        return cls(
            seat_catalog_query_repo=seat_catalog_query_repo,
            booking_command_repo=booking_command_repo,
            hold_ttl=hold_ttl,
        )

    @Logger.io
    async def create_hold(self, *, show_id: int, seat_ids: List[int], contact: str) -> HoldResult:
        """
        Raises:
            ValidationError: bad seat ids (empty/duplicate/out of range/foreign), bad show id,
                empty contact
            NotFoundError: unknown show
            ConflictError: a requested seat is already live-claimed for this show
            StoreError: store failure, nothing committed
        """
        with self.tracer.start_as_current_span(
            'use_case.create_hold',
            attributes={'show.id': show_id, 'seat.count': len(seat_ids)},
        ) as span:
            validate_hold_request(seat_ids=seat_ids, contact=contact)
            validate_show_id(show_id)

            show = await self.seat_catalog_query_repo.get_show(show_id=show_id)
            if show is None:
                raise NotFoundError(f'Show {show_id} not found')

            seats = await self.seat_catalog_query_repo.get_seats_by_ids(seat_ids=seat_ids)
            validate_seats_in_hall(hall_id=show.hall_id, seat_ids=seat_ids, seats=seats)

            started = time.perf_counter()
            try:
                booking = await self.booking_command_repo.create_hold_atomically(
                    booking_id=uuid_utils.uuid7(),
                    show_id=show_id,
                    contact=contact,
                    seat_ids=seat_ids,
                    ttl=self.hold_ttl,
                )
            except ConflictError:
                metrics.record_hold(show_id=show_id, result='conflict')
                raise
            except StoreError:
                metrics.record_hold(show_id=show_id, result='error')
                raise

            metrics.record_hold(
                show_id=show_id,
                result='success',
                seat_count=len(seat_ids),
                duration=time.perf_counter() - started,
            )
            span.set_attribute('booking.id', str(booking.id))
            Logger.base.info(
                f'🎯 [HOLD] booking={booking.id} show={show_id} seats={booking.seat_ids}'
            )

            return HoldResult(
                booking_id=booking.id, expires_at=booking.expires_at(ttl=self.hold_ttl)
            )
