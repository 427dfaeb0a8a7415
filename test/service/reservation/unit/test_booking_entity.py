from datetime import datetime, timedelta, timezone

import pytest
import uuid_utils

from src.service.reservation.domain.entity.booking_entity import (
    Booking,
    is_live,
    liveness_cutoff,
    seat_status_for_claim,
)
from src.service.reservation.domain.enum.booking_status import BookingStatus
from src.service.reservation.domain.enum.seat_status import SeatStatus


NOW = datetime(2030, 1, 10, 10, 0, tzinfo=timezone.utc)
TTL = timedelta(seconds=300)


@pytest.mark.unit
class TestLiveness:
    def test_cutoff_is_now_minus_ttl(self) -> None:
        assert liveness_cutoff(now=NOW, ttl=TTL) == NOW - timedelta(seconds=300)

    @pytest.mark.parametrize(
        ('age_seconds', 'expected'),
        [
            (0, True),
            (299, True),
            (300, False),  # exactly TTL old: already lapsed
            (301, False),
        ],
    )
    def test_held_booking_is_live_only_within_ttl(self, age_seconds: int, expected: bool) -> None:
        created_at = NOW - timedelta(seconds=age_seconds)

        assert (
            is_live(status=BookingStatus.HELD, created_at=created_at, ttl=TTL, now=NOW)
            is expected
        )

    def test_confirmed_booking_never_lapses(self) -> None:
        created_at = NOW - timedelta(days=30)

        assert is_live(status=BookingStatus.CONFIRMED, created_at=created_at, ttl=TTL, now=NOW)

    def test_expired_booking_is_never_live(self) -> None:
        assert not is_live(status=BookingStatus.EXPIRED, created_at=NOW, ttl=TTL, now=NOW)


@pytest.mark.unit
class TestBookingEntity:
    def test_create_hold__starts_held_at_now(self) -> None:
        booking_id = uuid_utils.uuid7()

        booking = Booking.create_hold(
            id=booking_id,
            show_id=1,
            contact='guest@example.com',
            code='9f1c03ab',
            seat_ids=[3, 1, 2],
            now=NOW,
        )

        assert booking.id == booking_id
        assert booking.status == BookingStatus.HELD
        assert booking.created_at == NOW
        assert booking.seat_ids == [3, 1, 2]  # request order kept

    def test_expires_at_and_is_live(self) -> None:
        booking = Booking.create_hold(
            id=uuid_utils.uuid7(),
            show_id=1,
            contact='guest@example.com',
            code='9f1c03ab',
            seat_ids=[1],
            now=NOW,
        )

        assert booking.expires_at(ttl=TTL) == NOW + TTL
        assert booking.is_live(ttl=TTL, now=NOW + timedelta(seconds=299))
        assert not booking.is_live(ttl=TTL, now=booking.expires_at(ttl=TTL))


@pytest.mark.unit
@pytest.mark.parametrize(
    ('claim_status', 'expected'),
    [
        (None, SeatStatus.AVAILABLE),
        (BookingStatus.HELD, SeatStatus.HELD),
        (BookingStatus.CONFIRMED, SeatStatus.SOLD),
    ],
)
def test_seat_status_for_claim(claim_status: BookingStatus | None, expected: SeatStatus) -> None:
    assert seat_status_for_claim(claim_status) == expected
