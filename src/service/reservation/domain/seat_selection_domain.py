"""
Seat selection rules

Pure checks on a hold request. The shape checks run before anything touches the
store; the hall check runs once the show's hall and the requested seats are known.
"""

from collections import Counter
from typing import Iterable, List, Sequence

from src.platform.exception.exceptions import ValidationError
from src.service.reservation.domain.entity.catalog_entity import SeatEntity


# Catalog ids are INTEGER columns; anything outside this range cannot name a row
MAX_CATALOG_ID = 2**31 - 1


def validate_show_id(show_id: int) -> None:
    if not 1 <= show_id <= MAX_CATALOG_ID:
        raise ValidationError(f'Invalid show id: {show_id}')


def validate_hold_request(*, seat_ids: Sequence[int], contact: str) -> None:
    if not seat_ids:
        raise ValidationError('At least one seat must be selected')

    duplicates = sorted(seat_id for seat_id, count in Counter(seat_ids).items() if count > 1)
    if duplicates:
        raise ValidationError(f'Duplicate seat ids in request: {duplicates}')

    out_of_range = [seat_id for seat_id in seat_ids if not 1 <= seat_id <= MAX_CATALOG_ID]
    if out_of_range:
        raise ValidationError(f'Invalid seat ids: {out_of_range}')

    if not contact or not contact.strip():
        raise ValidationError('contact is required')


def validate_seats_in_hall(
    *, hall_id: int, seat_ids: Sequence[int], seats: Iterable[SeatEntity]
) -> None:
    """Every requested id must name a seat of the show's hall"""
    known = {seat.id for seat in seats if seat.hall_id == hall_id}
    foreign: List[int] = [seat_id for seat_id in seat_ids if seat_id not in known]
    if foreign:
        raise ValidationError(f'Seats do not belong to this show: {foreign}')
