"""
Booking Command Repository Implementation

Hold and confirmation serialize on the seat rows they touch:
- PostgreSQL: `SELECT ... FOR UPDATE` on the seats, ordered by id so two
  overlapping requests always lock in the same order.
- SQLite: FOR UPDATE is not rendered; the transaction itself is opened with
  BEGIN IMMEDIATE by `Database`, which serializes writers.

The clock is read only after the locks are held, so the liveness check and the
write that depends on it see the same instant.
"""

from contextlib import AbstractAsyncContextManager
from datetime import datetime, timedelta
from typing import Callable, List, Sequence
import uuid

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_utils import UUID

from src.platform.exception.exceptions import ConflictError, StoreError
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.dto.reservation_dto import ConfirmationResult
from src.service.reservation.app.interface.i_booking_code_generator import IBookingCodeGenerator
from src.service.reservation.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.reservation.app.interface.i_clock import IClock
from src.service.reservation.domain.entity.booking_entity import Booking, liveness_cutoff
from src.service.reservation.domain.enum.booking_status import BookingStatus
from src.service.reservation.driven_adapter.model.booking_model import (
    BookingModel,
    BookingSeatModel,
)
from src.service.reservation.driven_adapter.model.movie_model import MovieModel
from src.service.reservation.driven_adapter.model.seat_model import SeatModel
from src.service.reservation.driven_adapter.model.show_model import ShowModel
from src.service.reservation.driven_adapter.repo.live_claim_predicate import (
    live_claim_condition,
    to_db_uuid,
)


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(
        self,
        *,
        transaction_factory: Callable[[], AbstractAsyncContextManager[AsyncSession]],
        clock: IClock,
        code_generator: IBookingCodeGenerator,
        max_code_attempts: int = 5,
    ) -> None:
        self.transaction_factory = transaction_factory
        self.clock = clock
        self.code_generator = code_generator
        self.max_code_attempts = max_code_attempts

    @staticmethod
    async def _lock_seats(session: AsyncSession, *, seat_ids: Sequence[int]) -> None:
        await session.execute(
            select(SeatModel.id)
            .where(SeatModel.id.in_(sorted(set(seat_ids))))
            .order_by(SeatModel.id)
            .with_for_update()
        )

    async def _allocate_booking_code(self, session: AsyncSession) -> str:
        for attempt in range(1, self.max_code_attempts + 1):
            code = self.code_generator.generate()
            taken = await session.scalar(
                select(BookingModel.id).where(BookingModel.booking_code == code).limit(1)
            )
            if taken is None:
                return code
            Logger.base.warning(f'🔁 [HOLD] Booking code collision on attempt {attempt}: {code}')
        raise StoreError('Could not allocate a unique booking code, please retry')

    @staticmethod
    async def _seat_labels(session: AsyncSession, *, booking_id: uuid.UUID) -> List[str]:
        result = await session.execute(
            select(SeatModel.row_label, SeatModel.number)
            .join(BookingSeatModel, BookingSeatModel.seat_id == SeatModel.id)
            .where(BookingSeatModel.booking_id == booking_id)
            .order_by(BookingSeatModel.position)
        )
        return [f'{row_label}{number}' for row_label, number in result.all()]

    @Logger.io
    async def create_hold_atomically(
        self,
        *,
        booking_id: UUID,
        show_id: int,
        contact: str,
        seat_ids: Sequence[int],
        ttl: timedelta,
    ) -> Booking:
        async with self.transaction_factory() as session:
            await self._lock_seats(session, seat_ids=seat_ids)
            now = self.clock.now()

            claimed = await session.execute(
                select(BookingSeatModel.seat_id)
                .join(BookingModel, BookingModel.id == BookingSeatModel.booking_id)
                .where(
                    BookingModel.show_id == show_id,
                    BookingSeatModel.seat_id.in_(list(seat_ids)),
                    live_claim_condition(now=now, ttl=ttl),
                )
            )
            claimed_seat_ids = sorted(set(claimed.scalars().all()))
            if claimed_seat_ids:
                Logger.base.info(
                    f'⛔ [HOLD] show={show_id} seats already claimed: {claimed_seat_ids}'
                )
                raise ConflictError('One or more seats are no longer available')

            code = await self._allocate_booking_code(session)
            booking = Booking.create_hold(
                id=booking_id,
                show_id=show_id,
                contact=contact,
                code=code,
                seat_ids=list(seat_ids),
                now=now,
            )

            db_booking_id = to_db_uuid(booking.id)
            session.add(
                BookingModel(
                    id=db_booking_id,
                    show_id=booking.show_id,
                    contact=booking.contact,
                    status=booking.status.value,
                    booking_code=booking.code,
                    created_at=booking.created_at,
                )
            )
            # flush the parent row first; booking_seats references it
            await session.flush()
            session.add_all(
                [
                    BookingSeatModel(booking_id=db_booking_id, seat_id=seat_id, position=position)
                    for position, seat_id in enumerate(booking.seat_ids)
                ]
            )
            await session.flush()

        return booking

    @Logger.io
    async def confirm_hold_atomically(
        self, *, booking_id: UUID, ttl: timedelta
    ) -> ConfirmationResult:
        db_booking_id = to_db_uuid(booking_id)

        async with self.transaction_factory() as session:
            seat_ids = (
                await session.scalars(
                    select(BookingSeatModel.seat_id).where(
                        BookingSeatModel.booking_id == db_booking_id
                    )
                )
            ).all()
            if seat_ids:
                await self._lock_seats(session, seat_ids=seat_ids)
            now = self.clock.now()

            result = await session.execute(
                update(BookingModel)
                .where(
                    BookingModel.id == db_booking_id,
                    BookingModel.status == BookingStatus.HELD.value,
                    BookingModel.created_at > liveness_cutoff(now=now, ttl=ttl),
                )
                .values(status=BookingStatus.CONFIRMED.value)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:  # type: ignore[attr-defined]
                raise ConflictError('Booking expired or invalid')

            code_and_title = await session.execute(
                select(BookingModel.booking_code, MovieModel.title)
                .join(ShowModel, ShowModel.id == BookingModel.show_id)
                .join(MovieModel, MovieModel.id == ShowModel.movie_id)
                .where(BookingModel.id == db_booking_id)
            )
            booking_code, movie_title = code_and_title.one()
            seat_labels = await self._seat_labels(session, booking_id=db_booking_id)

        Logger.base.info(f'🎟️ [CONFIRM] booking={booking_id} code={booking_code}')
        return ConfirmationResult(
            booking_code=booking_code, movie_title=movie_title, seats=seat_labels
        )

    @Logger.io
    async def expire_stale_holds(self, *, now: datetime, ttl: timedelta) -> int:
        async with self.transaction_factory() as session:
            result = await session.execute(
                update(BookingModel)
                .where(
                    BookingModel.status == BookingStatus.HELD.value,
                    BookingModel.created_at <= liveness_cutoff(now=now, ttl=ttl),
                )
                .values(status=BookingStatus.EXPIRED.value)
                .execution_options(synchronize_session=False)
            )
            expired_count = result.rowcount  # type: ignore[attr-defined]

        return expired_count or 0
