from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.dto.reservation_dto import MovieView
from src.service.reservation.app.interface.i_seat_catalog_query_repo import ISeatCatalogQueryRepo


class ListMoviesUseCase:
    def __init__(self, *, seat_catalog_query_repo: ISeatCatalogQueryRepo) -> None:
        self.seat_catalog_query_repo = seat_catalog_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        seat_catalog_query_repo: ISeatCatalogQueryRepo = Depends(
            Provide[Container.seat_catalog_query_repo]
        ),
    ) -> Self:
        return cls(seat_catalog_query_repo=seat_catalog_query_repo)

    @Logger.io
    async def list_movies(self) -> List[MovieView]:
        return await self.seat_catalog_query_repo.list_movies()
