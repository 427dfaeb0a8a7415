"""
Database wrapper behaviour on SQLite

- UtcDateTime: aware in, aware UTC out, naive rejected
- transaction(): rollback on any exception, driver errors surface as StoreError
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import func, select, text

from src.platform.database.orm_db_setting import Database, UtcDateTime
from src.platform.exception.exceptions import ConflictError, StoreError
from src.service.reservation.driven_adapter.model.movie_model import MovieModel
from src.service.reservation.driven_adapter.model.show_model import ShowModel


class _SqliteDialect:
    name = 'sqlite'


@pytest.mark.unit
class TestUtcDateTime:
    def test_naive_datetime_rejected(self) -> None:
        with pytest.raises(ValueError, match='naive datetime not allowed'):
            UtcDateTime().process_bind_param(datetime(2030, 1, 1), _SqliteDialect())

    def test_offset_normalized_to_utc_for_sqlite(self) -> None:
        taipei = timezone(timedelta(hours=8))

        bound = UtcDateTime().process_bind_param(
            datetime(2030, 1, 1, 18, 0, tzinfo=taipei), _SqliteDialect()
        )

        assert bound == datetime(2030, 1, 1, 10, 0)

    def test_loaded_value_is_tagged_utc(self) -> None:
        loaded = UtcDateTime().process_result_value(datetime(2030, 1, 1, 10, 0), _SqliteDialect())

        assert loaded == datetime(2030, 1, 1, 10, 0, tzinfo=timezone.utc)


async def _movie_count(database: Database) -> int:
    async with database.session() as session:
        return await session.scalar(select(func.count()).select_from(MovieModel))


@pytest.mark.integration
class TestDatabaseTransaction:
    @pytest.mark.asyncio
    async def test_domain_error_rolls_back_and_propagates(self, database: Database) -> None:
        with pytest.raises(ConflictError):
            async with database.transaction() as session:
                session.add(MovieModel(title='Tenet', duration=150, poster_url='https://x/t.jpg'))
                await session.flush()
                raise ConflictError('One or more seats are no longer available')

        assert await _movie_count(database) == 3

    @pytest.mark.asyncio
    async def test_driver_error_becomes_store_error(self, database: Database) -> None:
        with pytest.raises(StoreError, match='Store transaction failed, please retry'):
            async with database.transaction() as session:
                await session.execute(text('SELECT * FROM no_such_table'))

    @pytest.mark.asyncio
    async def test_read_error_becomes_store_error(self, database: Database) -> None:
        with pytest.raises(StoreError, match='Store unavailable, please retry'):
            async with database.session() as session:
                await session.execute(text('SELECT * FROM no_such_table'))

    @pytest.mark.asyncio
    async def test_foreign_keys_enforced(self, database: Database) -> None:
        with pytest.raises(StoreError):
            async with database.transaction() as session:
                session.add(
                    ShowModel(
                        movie_id=9999,
                        hall_id=9999,
                        start_time=datetime(2030, 1, 1, tzinfo=timezone.utc),
                    )
                )
