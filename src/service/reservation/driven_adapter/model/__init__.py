"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.reservation.driven_adapter.model.booking_model import (
    BookingModel,
    BookingSeatModel,
)
from src.service.reservation.driven_adapter.model.hall_model import HallModel
from src.service.reservation.driven_adapter.model.movie_model import MovieModel
from src.service.reservation.driven_adapter.model.seat_model import SeatCategoryModel, SeatModel
from src.service.reservation.driven_adapter.model.show_model import ShowModel

__all__ = [
    'BookingModel',
    'BookingSeatModel',
    'HallModel',
    'MovieModel',
    'SeatCategoryModel',
    'SeatModel',
    'ShowModel',
]
