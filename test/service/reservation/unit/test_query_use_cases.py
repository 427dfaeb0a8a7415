from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, Mock

import pytest

from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.service.reservation.app.dto.reservation_dto import (
    ContactBookingView,
    MovieView,
    SeatStatusView,
)
from src.service.reservation.app.query.list_contact_bookings_use_case import (
    ListContactBookingsUseCase,
)
from src.service.reservation.app.query.list_movies_use_case import ListMoviesUseCase
from src.service.reservation.app.query.resolve_seat_status_use_case import (
    ResolveSeatStatusUseCase,
)
from src.service.reservation.domain.entity.catalog_entity import ShowEntity
from src.service.reservation.domain.enum.seat_status import SeatStatus


NOW = datetime(2030, 1, 10, 10, 0, tzinfo=timezone.utc)
TTL = timedelta(seconds=300)


@pytest.fixture
def mock_seat_catalog_query_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.get_show.return_value = ShowEntity(id=1, movie_id=1, hall_id=5)
    return repo


@pytest.fixture
def mock_booking_query_repo() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def mock_clock() -> Mock:
    clock = Mock()
    clock.now.return_value = NOW
    return clock


@pytest.fixture
def resolve_seat_status_use_case(
    mock_seat_catalog_query_repo: AsyncMock, mock_booking_query_repo: AsyncMock, mock_clock: Mock
) -> ResolveSeatStatusUseCase:
    return ResolveSeatStatusUseCase(
        seat_catalog_query_repo=mock_seat_catalog_query_repo,
        booking_query_repo=mock_booking_query_repo,
        clock=mock_clock,
        hold_ttl=TTL,
    )


@pytest.mark.unit
class TestResolveSeatStatusUseCase:
    @pytest.mark.asyncio
    async def test_resolves_against_show_hall_at_clock_now(
        self,
        resolve_seat_status_use_case: ResolveSeatStatusUseCase,
        mock_booking_query_repo: AsyncMock,
    ) -> None:
        seats = [
            SeatStatusView(
                id=1, row='A', number=1, category='Silver', price=10.0, status=SeatStatus.HELD
            )
        ]
        mock_booking_query_repo.get_seat_statuses.return_value = seats

        result = await resolve_seat_status_use_case.resolve_status(show_id=1)

        assert result == seats
        mock_booking_query_repo.get_seat_statuses.assert_awaited_once_with(
            show_id=1, hall_id=5, now=NOW, ttl=TTL
        )

    @pytest.mark.asyncio
    async def test_explicit_now_wins_over_clock(
        self,
        resolve_seat_status_use_case: ResolveSeatStatusUseCase,
        mock_booking_query_repo: AsyncMock,
    ) -> None:
        later = NOW + timedelta(seconds=301)
        mock_booking_query_repo.get_seat_statuses.return_value = []

        await resolve_seat_status_use_case.resolve_status(show_id=1, now=later)

        assert mock_booking_query_repo.get_seat_statuses.await_args.kwargs['now'] == later

    @pytest.mark.asyncio
    async def test_unknown_show(
        self,
        resolve_seat_status_use_case: ResolveSeatStatusUseCase,
        mock_seat_catalog_query_repo: AsyncMock,
        mock_booking_query_repo: AsyncMock,
    ) -> None:
        mock_seat_catalog_query_repo.get_show.return_value = None

        with pytest.raises(NotFoundError, match='Show 9 not found'):
            await resolve_seat_status_use_case.resolve_status(show_id=9)

        mock_booking_query_repo.get_seat_statuses.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize('show_id', [0, -1, 2**70])
    async def test_out_of_range_show_id_rejected(
        self,
        resolve_seat_status_use_case: ResolveSeatStatusUseCase,
        mock_seat_catalog_query_repo: AsyncMock,
        show_id: int,
    ) -> None:
        with pytest.raises(ValidationError, match='Invalid show id'):
            await resolve_seat_status_use_case.resolve_status(show_id=show_id)

        mock_seat_catalog_query_repo.get_show.assert_not_awaited()


@pytest.mark.unit
class TestListMoviesUseCase:
    @pytest.mark.asyncio
    async def test_list_movies(self, mock_seat_catalog_query_repo: AsyncMock) -> None:
        movies = [
            MovieView(id=1, title='Inception', duration=148, poster_url='p.jpg', show_id=1)
        ]
        mock_seat_catalog_query_repo.list_movies.return_value = movies

        use_case = ListMoviesUseCase(seat_catalog_query_repo=mock_seat_catalog_query_repo)

        assert await use_case.list_movies() == movies


@pytest.mark.unit
class TestListContactBookingsUseCase:
    @pytest.mark.asyncio
    async def test_lists_confirmed_bookings_for_contact(
        self, mock_booking_query_repo: AsyncMock
    ) -> None:
        bookings = [
            ContactBookingView(
                booking_code='9f1c03ab',
                movie_title='Inception',
                seats=['A1'],
                created_at=NOW,
            )
        ]
        mock_booking_query_repo.list_confirmed_by_contact.return_value = bookings
        use_case = ListContactBookingsUseCase(booking_query_repo=mock_booking_query_repo)

        result = await use_case.list_contact_bookings(contact='guest@example.com')

        assert result == bookings
        assert result[0].date == '2030-01-10 10:00'
        mock_booking_query_repo.list_confirmed_by_contact.assert_awaited_once_with(
            contact='guest@example.com'
        )

    @pytest.mark.asyncio
    async def test_blank_contact_rejected(self, mock_booking_query_repo: AsyncMock) -> None:
        use_case = ListContactBookingsUseCase(booking_query_repo=mock_booking_query_repo)

        with pytest.raises(ValidationError, match='contact is required'):
            await use_case.list_contact_bookings(contact=' ')

        mock_booking_query_repo.list_confirmed_by_contact.assert_not_awaited()
