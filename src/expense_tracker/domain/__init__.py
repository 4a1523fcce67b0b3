"""Domain layer - plain value types with no knowledge of the model."""

from expense_tracker.domain.models import Category, ListenerErrorPolicy, Transaction

__all__ = [
    "Category",
    "ListenerErrorPolicy",
    "Transaction",
]
