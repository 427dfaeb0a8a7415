"""
HTTP error mapping

    ValidationError / malformed body -> 400
    NotFoundError                    -> 404
    ConflictError                    -> 409  (client should re-read seat status)
    StoreError                       -> 503  + Retry-After (nothing was committed)
    anything else (ValueError too)   -> 500

Every error body is `{"detail": ...}`.
"""

from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.responses import Response

from src.platform.exception.exceptions import CustomBaseError, StoreError
from src.platform.logging.loguru_io import Logger


ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]

STORE_RETRY_AFTER_SECONDS = 1


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc), 500)
    return JSONResponse(status_code=error.status_code, content={'detail': error.message})


async def store_error_handler(request: Request, exc: Exception) -> JSONResponse:
    message = exc.message if isinstance(exc, StoreError) else 'Store unavailable, please retry'
    Logger.base.warning(f'🗄️ [HTTP] {request.method} {request.url.path} -> 503: {message}')
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={'detail': message},
        headers={'Retry-After': str(STORE_RETRY_AFTER_SECONDS)},
    )


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    # ctx may carry the raw exception object
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'detail': jsonable_encoder(errors)},
    )


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.error(f'Unhandled {type(exc).__name__} on {request.url.path}: {exc}')
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'detail': 'Internal server error'},
    )


# Most specific first; Starlette picks the handler by walking the exception's MRO
EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    StoreError: store_error_handler,
    CustomBaseError: custom_error_handler,
    RequestValidationError: validation_error_handler,
    Exception: general_500_exception_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
