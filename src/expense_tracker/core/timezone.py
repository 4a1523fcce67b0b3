"""Timezone helpers. Transactions are stamped in the configured local zone."""

from datetime import datetime

import pytz
from dateutil import parser as date_parser

from expense_tracker.config.settings import get_settings


def get_local_tz() -> pytz.BaseTzInfo:
    """Return the configured local timezone (US/Eastern unless overridden)."""
    return pytz.timezone(get_settings().timezone)


def now_local() -> datetime:
    return datetime.now(get_local_tz())


def to_local(dt: datetime) -> datetime:
    """Convert a datetime to the local timezone; naive values are taken as local."""
    tz = get_local_tz()
    if dt.tzinfo is None:
        return tz.localize(dt)
    return dt.astimezone(tz)


def parse_local_datetime(value: str) -> datetime:
    """Parse free-form date text, e.g. from an input field."""
    return to_local(date_parser.parse(value))
