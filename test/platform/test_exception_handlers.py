"""
Error mapping on a bare app with only the shared exception handlers registered
"""

from collections.abc import AsyncGenerator

from fastapi import FastAPI
import httpx
import pytest

from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.exception.exceptions import (
    ConflictError,
    NotFoundError,
    StoreError,
    ValidationError,
)


def _build_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get('/raise/{kind}')
    async def raise_error(kind: str) -> None:
        errors: dict[str, Exception] = {
            'validation': ValidationError('Invalid seat ids: [0]'),
            'not-found': NotFoundError('Show 9 not found'),
            'conflict': ConflictError('Seats already taken: [1]'),
            'store': StoreError('Store transaction failed, please retry'),
            'value': ValueError('naive datetime not allowed'),
        }
        raise errors[kind]

    return app


@pytest.fixture
async def error_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    # the 500 handler runs in ServerErrorMiddleware, which re-raises after responding
    transport = httpx.ASGITransport(app=_build_app(), raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac


@pytest.mark.unit
class TestExceptionHandlers:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'kind, status_code',
        [('validation', 400), ('not-found', 404), ('conflict', 409), ('store', 503)],
    )
    async def test_domain_errors_keep_their_status(
        self, error_client: httpx.AsyncClient, kind: str, status_code: int
    ) -> None:
        response = await error_client.get(f'/raise/{kind}')

        assert response.status_code == status_code
        assert 'detail' in response.json()

    @pytest.mark.asyncio
    async def test_store_error_carries_retry_after(self, error_client: httpx.AsyncClient) -> None:
        response = await error_client.get('/raise/store')

        assert response.headers['Retry-After'] == '1'

    @pytest.mark.asyncio
    async def test_internal_value_error_is_500(self, error_client: httpx.AsyncClient) -> None:
        """
        Given: a ValueError raised by server code, not by request validation
        When: the request is handled
        Then: 500 with a generic detail, never a 400 echoing the internal message
        """
        response = await error_client.get('/raise/value')

        assert response.status_code == 500
        assert response.json() == {'detail': 'Internal server error'}
