"""
Booking Query Repository Implementation - read side

Seat status is derived on every read from the ledger; nothing is cached.
"""

from collections import defaultdict
from contextlib import AbstractAsyncContextManager
from datetime import datetime, timedelta
from typing import Callable, Dict, List
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.dto.reservation_dto import ContactBookingView, SeatStatusView
from src.service.reservation.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.reservation.domain.entity.booking_entity import seat_status_for_claim
from src.service.reservation.domain.enum.booking_status import BookingStatus
from src.service.reservation.domain.enum.seat_status import SeatStatus
from src.service.reservation.driven_adapter.model.booking_model import (
    BookingModel,
    BookingSeatModel,
)
from src.service.reservation.driven_adapter.model.movie_model import MovieModel
from src.service.reservation.driven_adapter.model.seat_model import SeatCategoryModel, SeatModel
from src.service.reservation.driven_adapter.model.show_model import ShowModel
from src.service.reservation.driven_adapter.repo.live_claim_predicate import live_claim_condition


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(
        self, session_factory: Callable[[], AbstractAsyncContextManager[AsyncSession]]
    ) -> None:
        self.session_factory = session_factory

    @Logger.io(truncate_content=True)
    async def get_seat_statuses(
        self, *, show_id: int, hall_id: int, now: datetime, ttl: timedelta
    ) -> List[SeatStatusView]:
        live_claims = (
            select(BookingSeatModel.seat_id, BookingModel.status)
            .join(BookingModel, BookingModel.id == BookingSeatModel.booking_id)
            .where(BookingModel.show_id == show_id, live_claim_condition(now=now, ttl=ttl))
            .subquery()
        )

        async with self.session_factory() as session:
            result = await session.execute(
                select(
                    SeatModel.id,
                    SeatModel.row_label,
                    SeatModel.number,
                    SeatCategoryModel.name,
                    SeatCategoryModel.price,
                    live_claims.c.status,
                )
                .join(SeatCategoryModel, SeatCategoryModel.id == SeatModel.category_id)
                .outerjoin(live_claims, live_claims.c.seat_id == SeatModel.id)
                .where(SeatModel.hall_id == hall_id)
                .order_by(SeatModel.row_label, SeatModel.number)
            )
            rows = result.all()

        # a seat has at most one live claim; SOLD wins if the ledger ever says otherwise
        seats: Dict[int, SeatStatusView] = {}
        for seat_id, row_label, number, category, price, claim_status in rows:
            status = seat_status_for_claim(BookingStatus(claim_status) if claim_status else None)
            existing = seats.get(seat_id)
            if (
                existing is None
                or existing.status == SeatStatus.AVAILABLE
                or status == SeatStatus.SOLD
            ):
                seats[seat_id] = SeatStatusView(
                    id=seat_id,
                    row=row_label,
                    number=number,
                    category=category,
                    price=float(price),
                    status=status,
                )
        return list(seats.values())

    @Logger.io
    async def list_confirmed_by_contact(self, *, contact: str) -> List[ContactBookingView]:
        async with self.session_factory() as session:
            booking_rows = (
                await session.execute(
                    select(
                        BookingModel.id,
                        BookingModel.booking_code,
                        MovieModel.title,
                        BookingModel.created_at,
                    )
                    .join(ShowModel, ShowModel.id == BookingModel.show_id)
                    .join(MovieModel, MovieModel.id == ShowModel.movie_id)
                    .where(
                        BookingModel.contact == contact,
                        BookingModel.status == BookingStatus.CONFIRMED.value,
                    )
                    .order_by(BookingModel.created_at.desc())
                )
            ).all()
            if not booking_rows:
                return []

            seat_rows = (
                await session.execute(
                    select(BookingSeatModel.booking_id, SeatModel.row_label, SeatModel.number)
                    .join(SeatModel, SeatModel.id == BookingSeatModel.seat_id)
                    .where(BookingSeatModel.booking_id.in_([row.id for row in booking_rows]))
                    .order_by(BookingSeatModel.booking_id, BookingSeatModel.position)
                )
            ).all()

        labels: Dict[uuid.UUID, List[str]] = defaultdict(list)
        for booking_id, row_label, number in seat_rows:
            labels[booking_id].append(f'{row_label}{number}')

        return [
            ContactBookingView(
                booking_code=row.booking_code,
                movie_title=row.title,
                seats=labels[row.id],
                created_at=row.created_at,
            )
            for row in booking_rows
        ]
