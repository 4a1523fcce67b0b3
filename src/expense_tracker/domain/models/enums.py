"""Enumerations for domain models."""

from enum import Enum


class Category(str, Enum):
    """Expense categories."""

    FOOD = "FOOD"
    TRAVEL = "TRAVEL"
    BILLS = "BILLS"
    ENTERTAINMENT = "ENTERTAINMENT"
    OTHER = "OTHER"


class ListenerErrorPolicy(str, Enum):
    """How a failing listener affects the rest of a notification broadcast."""

    PROPAGATE = "PROPAGATE"  # raise at once, later listeners are skipped
    COLLECT = "COLLECT"  # notify everyone, then raise all failures together
    ISOLATE = "ISOLATE"  # log each failure and keep going
