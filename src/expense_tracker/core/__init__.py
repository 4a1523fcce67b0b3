"""Core utilities and shared functionality."""

from expense_tracker.core.timezone import (
    get_local_tz,
    now_local,
    to_local,
    parse_local_datetime,
)
from expense_tracker.core.exceptions import (
    AppError,
    InvalidArgumentError,
    ListenerNotificationError,
)

__all__ = [
    "get_local_tz",
    "now_local",
    "to_local",
    "parse_local_datetime",
    "AppError",
    "InvalidArgumentError",
    "ListenerNotificationError",
]
