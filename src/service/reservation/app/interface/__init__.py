from src.service.reservation.app.interface.i_booking_code_generator import IBookingCodeGenerator
from src.service.reservation.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.reservation.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.reservation.app.interface.i_clock import IClock
from src.service.reservation.app.interface.i_seat_catalog_query_repo import ISeatCatalogQueryRepo

__all__ = [
    'IBookingCodeGenerator',
    'IBookingCommandRepo',
    'IBookingQueryRepo',
    'IClock',
    'ISeatCatalogQueryRepo',
]
