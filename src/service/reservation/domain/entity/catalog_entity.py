"""
Seat catalog entities

Shows and per-hall seats are written once by the seeding script and are
read-only while the service runs.
"""

from datetime import datetime
from typing import Optional

import attrs


@attrs.define(frozen=True)
class ShowEntity:
    id: int
    movie_id: int
    hall_id: int
    start_time: Optional[datetime] = None


@attrs.define(frozen=True)
class SeatEntity:
    id: int
    hall_id: int
    row_label: str
    number: int
    category_name: str
    price: float

    @property
    def label(self) -> str:
        return f'{self.row_label}{self.number}'
