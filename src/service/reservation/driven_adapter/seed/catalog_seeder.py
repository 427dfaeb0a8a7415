"""
Catalog seeder

Writes the demo venue: three movies, one hall, one show per movie 24h ahead,
three seat categories and the hall's seat map. Does nothing if any movie exists.
"""

from datetime import datetime, timedelta
from typing import Dict, List, Tuple

import attrs
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.reservation.driven_adapter.model.hall_model import HallModel
from src.service.reservation.driven_adapter.model.movie_model import MovieModel
from src.service.reservation.driven_adapter.model.seat_model import SeatCategoryModel, SeatModel
from src.service.reservation.driven_adapter.model.show_model import ShowModel


@attrs.define(frozen=True)
class MovieSeed:
    title: str
    duration: int
    poster_url: str


MOVIES: List[MovieSeed] = [
    MovieSeed(
        'Inception',
        148,
        'https://m.media-amazon.com/images/M/MV5BMjExMjkwNTQ0Nl5BMl5BanBnXkFtZTcwNTY0OTk1Mw@@._V1_.jpg',
    ),
    MovieSeed(
        'The Dark Knight', 152, 'https://image.tmdb.org/t/p/w500/qJ2tW6WMUDux911r6m7haRef0WH.jpg'
    ),
    MovieSeed(
        'Interstellar', 169, 'https://image.tmdb.org/t/p/w500/gEU2QniE6E77NI6lCU6MxlNBvIx.jpg'
    ),
]

HALL_NAME = 'IMAX Hall'
HALL_ROWS, HALL_COLS = 9, 10

CATEGORY_PRICES: List[Tuple[str, float]] = [('Silver', 10.0), ('Gold', 15.0), ('Recliner', 25.0)]

ROW_LABELS = ['A', 'B', 'C', 'D', 'E', 'F', 'G', 'H', 'I']


def seat_layout() -> List[Tuple[str, int, str]]:
    """(row label, seat count, category) per row: A has 10 seats, I has 6, others 8"""
    layout = []
    for row in ROW_LABELS:
        if row in ('F', 'G', 'H'):
            category = 'Gold'
        elif row == 'I':
            category = 'Recliner'
        else:
            category = 'Silver'
        seat_count = 10 if row == 'A' else 6 if row == 'I' else 8
        layout.append((row, seat_count, category))
    return layout


@Logger.io
async def seed_catalog(session: AsyncSession, *, now: datetime) -> bool:
    """Returns False when the catalog was already seeded"""
    movie_count = await session.scalar(select(func.count()).select_from(MovieModel))
    if movie_count:
        Logger.base.info(f'🌱 [SEED] Catalog already present ({movie_count} movies), skipping')
        return False

    movies = [
        MovieModel(title=m.title, duration=m.duration, poster_url=m.poster_url) for m in MOVIES
    ]
    hall = HallModel(name=HALL_NAME, total_rows=HALL_ROWS, total_cols=HALL_COLS)
    session.add_all([*movies, hall])
    await session.flush()

    session.add_all(
        [
            ShowModel(movie_id=movie.id, hall_id=hall.id, start_time=now + timedelta(hours=24))
            for movie in movies
        ]
    )

    categories: Dict[str, SeatCategoryModel] = {
        name: SeatCategoryModel(name=name, price=price) for name, price in CATEGORY_PRICES
    }
    session.add_all(list(categories.values()))
    await session.flush()

    seats = [
        SeatModel(
            hall_id=hall.id,
            row_label=row,
            number=number,
            category_id=categories[category].id,
        )
        for row, seat_count, category in seat_layout()
        for number in range(1, seat_count + 1)
    ]
    session.add_all(seats)
    await session.flush()

    Logger.base.info(
        f'🌱 [SEED] {len(movies)} movies, hall "{HALL_NAME}", {len(seats)} seats created'
    )
    return True
