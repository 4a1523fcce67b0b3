"""Observable in-memory model for the expense tracker."""

from expense_tracker.domain.models import Category, ListenerErrorPolicy, Transaction
from expense_tracker.model import ExpenseTrackerModel, ExpenseTrackerModelListener

__all__ = [
    "Category",
    "ListenerErrorPolicy",
    "Transaction",
    "ExpenseTrackerModel",
    "ExpenseTrackerModelListener",
]
