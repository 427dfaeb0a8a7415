from datetime import datetime, timedelta
from typing import Optional

from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.reservation.app.interface.i_clock import IClock


class ExpireHoldsUseCase:
    """
    Bulk HELD -> EXPIRED for holds past their TTL.

    Housekeeping only: readers already treat stale holds as not live, so seat
    availability never waits on a sweep. Idempotent; never touches CONFIRMED
    or EXPIRED bookings.
    """

    def __init__(
        self, *, booking_command_repo: IBookingCommandRepo, clock: IClock, hold_ttl: timedelta
    ) -> None:
        self.booking_command_repo = booking_command_repo
        self.clock = clock
        self.hold_ttl = hold_ttl
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    async def run_expiry_sweep(self, *, now: Optional[datetime] = None) -> int:
        now = now or self.clock.now()
        with self.tracer.start_as_current_span('use_case.run_expiry_sweep') as span:
            expired_count = await self.booking_command_repo.expire_stale_holds(
                now=now, ttl=self.hold_ttl
            )
            span.set_attribute('booking.expired_count', expired_count)

        if expired_count:
            Logger.base.info(f'🧹 [SWEEP] Expired {expired_count} stale hold(s)')
        return expired_count
