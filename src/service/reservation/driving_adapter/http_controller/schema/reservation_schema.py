from datetime import datetime
from typing import Annotated, List, Literal

from pydantic import AliasChoices, BaseModel, Field

from src.platform.types.uuid7_utils_types import UtilsUUID7
from src.service.reservation.domain.seat_selection_domain import MAX_CATALOG_ID


CatalogId = Annotated[int, Field(ge=1, le=MAX_CATALOG_ID)]


class MovieResponse(BaseModel):
    id: int
    title: str
    duration: int
    poster_url: str
    show_id: int


class SeatResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'id': 1,
                'row': 'A',
                'number': 1,
                'category': 'Silver',
                'price': 10.0,
                'status': 'AVAILABLE',
            }
        },
    }

    id: int
    row: str
    number: int
    category: str
    price: float
    status: Literal['AVAILABLE', 'HELD', 'SOLD']


class HoldSeatsRequest(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {'show_id': 1, 'seat_ids': [1, 2], 'contact': 'guest@example.com'}
        },
    }

    show_id: CatalogId
    seat_ids: List[CatalogId]
    # `user_email` is accepted for older clients
    contact: str = Field(validation_alias=AliasChoices('contact', 'user_email'))


class HoldSeatsResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'booking_id': '01936d8f-5e73-7c4e-a9c5-123456789abc',  # UUID7
                'expires_at': '2025-01-10T10:35:00Z',
            }
        },
    }

    booking_id: UtilsUUID7
    expires_at: datetime


class ConfirmBookingRequest(BaseModel):
    booking_id: UtilsUUID7

    class Config:
        json_schema_extra = {'example': {'booking_id': '01936d8f-5e73-7c4e-a9c5-123456789abc'}}


class ConfirmBookingResponse(BaseModel):
    status: Literal['confirmed'] = 'confirmed'
    booking_code: str
    movie_title: str
    seats: List[str]


class MyBookingResponse(BaseModel):
    booking_code: str
    movie_title: str
    seats: List[str]
    date: str  # YYYY-MM-DD HH:MM
