"""
Test Configuration and Fixtures

- Unit tests (test/**/unit/): mocks only, marked `pytest.mark.unit`
- Integration tests: a fresh SQLite file per test, created with the ORM metadata
  and seeded with the demo catalog, driven by a controllable clock
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks read these at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # The app container never talks to this file: integration fixtures override `database`
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{test_log_dir / "unused.db"}'
    os.environ['DB_AUTO_CREATE_TABLES'] = 'false'
    os.environ['HOLD_TTL_SECONDS'] = '300'


_early_setup_test_environment()

from collections.abc import AsyncGenerator  # noqa: E402
from datetime import timedelta  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import select  # noqa: E402

from src.platform.config.di import container  # noqa: E402
from src.platform.database.orm_db_setting import Database  # noqa: E402
import src.service.reservation.driven_adapter.model  # noqa: E402, F401
from src.service.reservation.driven_adapter.model.seat_model import SeatModel  # noqa: E402
from src.service.reservation.driven_adapter.model.show_model import ShowModel  # noqa: E402
from src.service.reservation.driven_adapter.repo.booking_command_repo_impl import (  # noqa: E402
    BookingCommandRepoImpl,
)
from src.service.reservation.driven_adapter.repo.booking_query_repo_impl import (  # noqa: E402
    BookingQueryRepoImpl,
)
from src.service.reservation.driven_adapter.repo.seat_catalog_query_repo_impl import (  # noqa: E402
    SeatCatalogQueryRepoImpl,
)
from src.service.reservation.driven_adapter.seed.catalog_seeder import seed_catalog  # noqa: E402
from src.service.reservation.driven_adapter.system.hex_booking_code_generator import (  # noqa: E402
    HexBookingCodeGenerator,
)
from test.service.reservation.fake_clock import T0, FakeClock  # noqa: E402
from test.test_main import app as test_app  # noqa: E402


HOLD_TTL = timedelta(seconds=300)


# =============================================================================
# Clock / TTL
# =============================================================================
@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(T0)


@pytest.fixture
def hold_ttl() -> timedelta:
    return HOLD_TTL


# =============================================================================
# Database (fresh seeded SQLite file per test)
# =============================================================================
@pytest.fixture
async def database(tmp_path: Path) -> AsyncGenerator[Database, None]:
    db = Database(db_url=f'sqlite+aiosqlite:///{tmp_path / "cinema_test.db"}')
    await db.create_tables()
    async with db.transaction() as session:
        await seed_catalog(session, now=T0)

    yield db

    await db.dispose()


@pytest.fixture
async def show_id(database: Database) -> int:
    """First seeded show (Inception)"""
    async with database.session() as session:
        return await session.scalar(select(ShowModel.id).order_by(ShowModel.id).limit(1))


@pytest.fixture
async def other_show_id(database: Database) -> int:
    """Second seeded show, same hall as `show_id`"""
    async with database.session() as session:
        return await session.scalar(
            select(ShowModel.id).order_by(ShowModel.id).offset(1).limit(1)
        )


@pytest.fixture
async def seat_ids(database: Database) -> dict[str, int]:
    """Seat label ('A1') -> seat id"""
    async with database.session() as session:
        result = await session.execute(select(SeatModel.id, SeatModel.row_label, SeatModel.number))
        return {f'{row_label}{number}': seat_id for seat_id, row_label, number in result.all()}


# =============================================================================
# Repositories
# =============================================================================
@pytest.fixture
def seat_catalog_query_repo(database: Database) -> SeatCatalogQueryRepoImpl:
    return SeatCatalogQueryRepoImpl(session_factory=database.session)


@pytest.fixture
def booking_query_repo(database: Database) -> BookingQueryRepoImpl:
    return BookingQueryRepoImpl(session_factory=database.session)


@pytest.fixture
def booking_command_repo(database: Database, clock: FakeClock) -> BookingCommandRepoImpl:
    return BookingCommandRepoImpl(
        transaction_factory=database.transaction,
        clock=clock,
        code_generator=HexBookingCodeGenerator(),
    )


# =============================================================================
# HTTP client (test app, container pointed at the per-test database and clock)
# =============================================================================
@pytest.fixture
async def client(database: Database, clock: FakeClock) -> AsyncGenerator[httpx.AsyncClient, None]:
    container.reset_singletons()
    with container.database.override(database), container.clock.override(clock):
        async with test_app.router.lifespan_context(test_app):
            async with httpx.AsyncClient(
                transport=httpx.ASGITransport(app=test_app), base_url='http://test'
            ) as ac:
                yield ac
    container.reset_singletons()
