"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.reservation.app.command import confirm_hold_use_case, create_hold_use_case
from src.service.reservation.app.query import (
    list_contact_bookings_use_case,
    list_movies_use_case,
    resolve_seat_status_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    create_hold_use_case,
    confirm_hold_use_case,
    resolve_seat_status_use_case,
    list_movies_use_case,
    list_contact_bookings_use_case,
]
