class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ValidationError(DomainError):
    """Malformed request rejected before the ledger is touched"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    """Seat already claimed, or booking no longer confirmable. Caller should re-read status."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class StoreError(CustomBaseError):
    """Store unavailable or transaction aborted; nothing was committed, safe to retry"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 503)
