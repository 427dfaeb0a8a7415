from contextlib import AbstractAsyncContextManager
from typing import Callable, List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.dto.reservation_dto import MovieView
from src.service.reservation.app.interface.i_seat_catalog_query_repo import ISeatCatalogQueryRepo
from src.service.reservation.domain.entity.catalog_entity import SeatEntity, ShowEntity
from src.service.reservation.driven_adapter.model.movie_model import MovieModel
from src.service.reservation.driven_adapter.model.seat_model import SeatCategoryModel, SeatModel
from src.service.reservation.driven_adapter.model.show_model import ShowModel


class SeatCatalogQueryRepoImpl(ISeatCatalogQueryRepo):
    def __init__(
        self, session_factory: Callable[[], AbstractAsyncContextManager[AsyncSession]]
    ) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_show(self, *, show_id: int) -> Optional[ShowEntity]:
        async with self.session_factory() as session:
            show = await session.get(ShowModel, show_id)
            if show is None:
                return None
            return ShowEntity(
                id=show.id,
                movie_id=show.movie_id,
                hall_id=show.hall_id,
                start_time=show.start_time,
            )

    @Logger.io
    async def get_seats_by_ids(self, *, seat_ids: Sequence[int]) -> List[SeatEntity]:
        if not seat_ids:
            return []
        async with self.session_factory() as session:
            result = await session.execute(
                select(SeatModel, SeatCategoryModel)
                .join(SeatCategoryModel, SeatCategoryModel.id == SeatModel.category_id)
                .where(SeatModel.id.in_(list(seat_ids)))
            )
            return [
                SeatEntity(
                    id=seat.id,
                    hall_id=seat.hall_id,
                    row_label=seat.row_label,
                    number=seat.number,
                    category_name=category.name,
                    price=category.price,
                )
                for seat, category in result.all()
            ]

    @Logger.io
    async def list_movies(self) -> List[MovieView]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(MovieModel, ShowModel.id)
                .join(ShowModel, ShowModel.movie_id == MovieModel.id)
                .order_by(MovieModel.id, ShowModel.id)
            )
            return [
                MovieView(
                    id=movie.id,
                    title=movie.title,
                    duration=movie.duration,
                    poster_url=movie.poster_url,
                    show_id=show_id,
                )
                for movie, show_id in result.all()
            ]
