"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from datetime import timedelta

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.service.reservation.app.command.expire_holds_use_case import ExpireHoldsUseCase
from src.service.reservation.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from src.service.reservation.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)
from src.service.reservation.driven_adapter.repo.seat_catalog_query_repo_impl import (
    SeatCatalogQueryRepoImpl,
)
from src.service.reservation.driven_adapter.system.hex_booking_code_generator import (
    HexBookingCodeGenerator,
)
from src.service.reservation.driven_adapter.system.system_clock import SystemClock


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database: one engine for the process lifetime, disposed in the lifespan shutdown
    database = providers.Singleton(
        Database,
        db_url=config_service.provided.DATABASE_URL_ASYNC,
        echo=config_service.provided.DB_ECHO,
        pool_size=config_service.provided.DB_POOL_SIZE,
        max_overflow=config_service.provided.DB_POOL_MAX_OVERFLOW,
        pool_timeout=config_service.provided.DB_POOL_TIMEOUT,
        pool_recycle=config_service.provided.DB_POOL_RECYCLE,
        pool_pre_ping=config_service.provided.DB_POOL_PRE_PING,
    )

    # Reservation rules
    hold_ttl = providers.Singleton(timedelta, seconds=config_service.provided.HOLD_TTL_SECONDS)

    # Infrastructure services
    clock = providers.Singleton(SystemClock)
    booking_code_generator = providers.Singleton(HexBookingCodeGenerator)

    # Repositories (stateless - open a session/transaction per call)
    seat_catalog_query_repo = providers.Singleton(
        SeatCatalogQueryRepoImpl, session_factory=database.provided.session
    )
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )
    booking_command_repo = providers.Singleton(
        BookingCommandRepoImpl,
        transaction_factory=database.provided.transaction,
        clock=clock,
        code_generator=booking_code_generator,
        max_code_attempts=config_service.provided.BOOKING_CODE_MAX_ATTEMPTS,
    )

    # Background use case (driven by the expiry sweeper, not by HTTP)
    expire_holds_use_case = providers.Singleton(
        ExpireHoldsUseCase,
        booking_command_repo=booking_command_repo,
        clock=clock,
        hold_ttl=hold_ttl,
    )


container = Container()


def cleanup() -> None:
    container.reset_singletons()
