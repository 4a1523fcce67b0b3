"""Domain models package."""

from expense_tracker.domain.models.enums import Category, ListenerErrorPolicy
from expense_tracker.domain.models.transaction import Transaction

__all__ = [
    "Category",
    "ListenerErrorPolicy",
    "Transaction",
]
