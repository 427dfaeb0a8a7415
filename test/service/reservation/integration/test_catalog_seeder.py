from collections import Counter

import pytest
from sqlalchemy import func, select

from src.platform.database.orm_db_setting import Database
from src.service.reservation.driven_adapter.model.movie_model import MovieModel
from src.service.reservation.driven_adapter.model.seat_model import SeatCategoryModel, SeatModel
from src.service.reservation.driven_adapter.model.show_model import ShowModel
from src.service.reservation.driven_adapter.seed.catalog_seeder import seat_layout, seed_catalog
from test.service.reservation.fake_clock import T0


@pytest.mark.unit
def test_seat_layout() -> None:
    layout = {row: (count, category) for row, count, category in seat_layout()}

    assert sum(count for count, _ in layout.values()) == 72
    assert layout['A'] == (10, 'Silver')
    assert layout['F'] == (8, 'Gold')
    assert layout['I'] == (6, 'Recliner')


@pytest.mark.integration
class TestSeedCatalog:
    @pytest.mark.asyncio
    async def test_seeded_catalog_contents(self, database: Database) -> None:
        async with database.session() as session:
            movie_count = await session.scalar(select(func.count()).select_from(MovieModel))
            show_starts = (await session.scalars(select(ShowModel.start_time))).all()
            seats_per_category = Counter(
                (
                    await session.scalars(
                        select(SeatCategoryModel.name).join(
                            SeatModel, SeatModel.category_id == SeatCategoryModel.id
                        )
                    )
                ).all()
            )

        assert movie_count == 3
        assert len(show_starts) == 3
        assert all((start - T0).total_seconds() == 24 * 3600 for start in show_starts)
        assert seats_per_category == {'Silver': 42, 'Gold': 24, 'Recliner': 6}

    @pytest.mark.asyncio
    async def test_second_run_is_a_no_op(self, database: Database) -> None:
        async with database.transaction() as session:
            seeded = await seed_catalog(session, now=T0)

        async with database.session() as session:
            seat_count = await session.scalar(select(func.count()).select_from(SeatModel))

        assert seeded is False
        assert seat_count == 72
