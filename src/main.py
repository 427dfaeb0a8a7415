"""
Production FastAPI Application

Reservation API plus the background expiry sweeper.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import anyio
from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig
import src.service.reservation.driven_adapter.model  # noqa: F401  (register tables)
from src.service.reservation.driving_adapter.background.expiry_sweeper import ExpirySweeper


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Cinema Reservation] Starting up...')
    settings = container.config_service()

    tracing = TracingConfig(service_name='cinema-reservation')
    tracing.setup()
    Logger.base.info('📊 [Cinema Reservation] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Cinema Reservation] Dependency injection wired')

    database = container.database()
    tracing.instrument_sqlalchemy(engine=database.engine)
    if settings.DB_AUTO_CREATE_TABLES:
        await database.create_tables()
        Logger.base.info('🗄️  [Cinema Reservation] Database tables ensured')
    Logger.base.info('🗄️  [Cinema Reservation] Database engine ready + instrumented')

    sweeper = ExpirySweeper(
        expire_holds_use_case=container.expire_holds_use_case(),
        interval_seconds=settings.EXPIRY_SWEEP_INTERVAL_SECONDS,
        shutdown_grace_seconds=settings.SHUTDOWN_GRACE_SECONDS,
    )

    async with anyio.create_task_group() as tg:
        await sweeper.start(task_group=tg)
        Logger.base.info('✅ [Cinema Reservation] Ready to serve requests')

        yield

        Logger.base.info('🛑 [Cinema Reservation] Shutting down...')
        tg.cancel_scope.cancel()

    # Sweeper is stopped; no task can touch the pool any more
    await database.dispose()

    tracing.shutdown()
    Logger.base.info('📊 [Cinema Reservation] Tracing shutdown complete')

    container.unwire()

    Logger.base.info('👋 [Cinema Reservation] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
