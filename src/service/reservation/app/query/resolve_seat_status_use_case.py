from datetime import datetime, timedelta
from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.dto.reservation_dto import SeatStatusView
from src.service.reservation.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.reservation.app.interface.i_clock import IClock
from src.service.reservation.app.interface.i_seat_catalog_query_repo import ISeatCatalogQueryRepo
from src.service.reservation.domain.seat_selection_domain import validate_show_id


class ResolveSeatStatusUseCase:
    """Seat map of a show as of `now`: AVAILABLE / HELD / SOLD per seat"""

    def __init__(
        self,
        *,
        seat_catalog_query_repo: ISeatCatalogQueryRepo,
        booking_query_repo: IBookingQueryRepo,
        clock: IClock,
        hold_ttl: timedelta,
    ) -> None:
        self.seat_catalog_query_repo = seat_catalog_query_repo
        self.booking_query_repo = booking_query_repo
        self.clock = clock
        self.hold_ttl = hold_ttl
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        seat_catalog_query_repo: ISeatCatalogQueryRepo = Depends(
            Provide[Container.seat_catalog_query_repo]
        ),
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        clock: IClock = Depends(Provide[Container.clock]),
        hold_ttl: timedelta = Depends(Provide[Container.hold_ttl]),
    ) -> Self:
        return cls(
            seat_catalog_query_repo=seat_catalog_query_repo,
            booking_query_repo=booking_query_repo,
            clock=clock,
            hold_ttl=hold_ttl,
        )

    @Logger.io(truncate_content=True)
    async def resolve_status(
        self, *, show_id: int, now: Optional[datetime] = None
    ) -> List[SeatStatusView]:
        with self.tracer.start_as_current_span(
            'use_case.resolve_seat_status', attributes={'show.id': show_id}
        ):
            validate_show_id(show_id)

            show = await self.seat_catalog_query_repo.get_show(show_id=show_id)
            if show is None:
                raise NotFoundError(f'Show {show_id} not found')

            return await self.booking_query_repo.get_seat_statuses(
                show_id=show_id,
                hall_id=show.hall_id,
                now=now or self.clock.now(),
                ttl=self.hold_ttl,
            )
