import anyio
from anyio.abc import TaskGroup

from src.platform.logging.loguru_io import Logger
from src.platform.metrics.reservation_metrics import metrics
from src.service.reservation.app.command.expire_holds_use_case import ExpireHoldsUseCase


class ExpirySweeper:
    """
    Periodically demote stale holds to EXPIRED.

    Runs in the application task group. Cancellation (shutdown) lands between
    sweeps: a sweep in flight is shielded and bounded by the grace period, so it
    either finishes or rolls back before the engine is disposed.
    """

    def __init__(
        self,
        *,
        expire_holds_use_case: ExpireHoldsUseCase,
        interval_seconds: float = 60.0,
        shutdown_grace_seconds: float = 5.0,
    ) -> None:
        self.expire_holds_use_case = expire_holds_use_case
        self._interval = interval_seconds
        self._grace = shutdown_grace_seconds

    async def start(self, *, task_group: TaskGroup) -> None:
        task_group.start_soon(self._sweep_loop)  # pyrefly: ignore[bad-argument-type]
        Logger.base.info(f'🧹 [Expiry Sweeper] Started, interval={self._interval}s')

    async def _sweep_loop(self) -> None:
        try:
            while True:
                await anyio.sleep(self._interval)
                await self.sweep_once()
        finally:
            Logger.base.info('🛑 [Expiry Sweeper] Stopped')

    async def sweep_once(self) -> int:
        """One sweep; failures are logged and reported as 0 so the loop keeps going"""
        with anyio.CancelScope(shield=True) as scope:
            scope.deadline = anyio.current_time() + self._grace
            try:
                expired_count = await self.expire_holds_use_case.run_expiry_sweep()
            except Exception as e:
                Logger.base.error(f'❌ [Expiry Sweeper] Sweep failed: {type(e).__name__}: {e}')
                metrics.record_sweep(result='error')
                return 0

            metrics.record_sweep(result='success', expired_count=expired_count)
            return expired_count

        # deadline hit: the sweep transaction was rolled back
        Logger.base.warning(f'⏱️ [Expiry Sweeper] Sweep exceeded {self._grace}s and was abandoned')
        metrics.record_sweep(result='timeout')
        return 0
