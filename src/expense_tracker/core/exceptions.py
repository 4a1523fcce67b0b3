"""Application-level exceptions."""

from typing import Any


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class InvalidArgumentError(AppError, ValueError):
    """Raised when an argument fails validation. Nothing is mutated."""

    def __init__(self, message: str):
        super().__init__(message, code="INVALID_ARGUMENT")


class ListenerNotificationError(AppError):
    """Raised after a broadcast in which one or more listeners failed."""

    def __init__(self, errors: list[tuple[Any, Exception]]):
        self.errors = errors
        details = "; ".join(f"{type(exc).__name__}: {exc}" for _, exc in errors)
        super().__init__(
            f"{len(errors)} listener(s) failed during notification: {details}",
            code="LISTENER_ERROR",
        )
