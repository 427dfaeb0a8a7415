from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from src.service.reservation.app.dto.reservation_dto import MovieView
from src.service.reservation.domain.entity.catalog_entity import SeatEntity, ShowEntity


class ISeatCatalogQueryRepo(ABC):
    """Read-only access to movies, shows and seats"""

    @abstractmethod
    async def get_show(self, *, show_id: int) -> Optional[ShowEntity]:
        pass

    @abstractmethod
    async def get_seats_by_ids(self, *, seat_ids: Sequence[int]) -> List[SeatEntity]:
        """Seats matching the given ids; unknown ids are simply absent from the result"""
        pass

    @abstractmethod
    async def list_movies(self) -> List[MovieView]:
        pass
