from datetime import timedelta
from unittest.mock import AsyncMock

import pytest
import uuid_utils

from src.platform.exception.exceptions import ConflictError
from src.service.reservation.app.command.confirm_hold_use_case import ConfirmHoldUseCase
from src.service.reservation.app.dto.reservation_dto import ConfirmationResult


TTL = timedelta(seconds=300)


@pytest.fixture
def mock_booking_command_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.confirm_hold_atomically.return_value = ConfirmationResult(
        booking_code='9f1c03ab', movie_title='Inception', seats=['A1', 'A2']
    )
    return repo


@pytest.fixture
def confirm_hold_use_case(mock_booking_command_repo: AsyncMock) -> ConfirmHoldUseCase:
    return ConfirmHoldUseCase(booking_command_repo=mock_booking_command_repo, hold_ttl=TTL)


@pytest.mark.unit
class TestConfirmHoldUseCase:
    @pytest.mark.asyncio
    async def test_confirm_success(
        self, confirm_hold_use_case: ConfirmHoldUseCase, mock_booking_command_repo: AsyncMock
    ) -> None:
        booking_id = uuid_utils.uuid7()

        result = await confirm_hold_use_case.confirm_hold(booking_id=booking_id)

        mock_booking_command_repo.confirm_hold_atomically.assert_awaited_once_with(
            booking_id=booking_id, ttl=TTL
        )
        assert result.booking_code == '9f1c03ab'
        assert result.movie_title == 'Inception'
        assert result.seats == ['A1', 'A2']

    @pytest.mark.asyncio
    async def test_confirm_fail__expired_or_unknown(
        self, confirm_hold_use_case: ConfirmHoldUseCase, mock_booking_command_repo: AsyncMock
    ) -> None:
        mock_booking_command_repo.confirm_hold_atomically.side_effect = ConflictError(
            'Booking expired or invalid'
        )

        with pytest.raises(ConflictError, match='Booking expired or invalid') as exc_info:
            await confirm_hold_use_case.confirm_hold(booking_id=uuid_utils.uuid7())

        assert exc_info.value.status_code == 409
