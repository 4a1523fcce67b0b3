"""Observable model package."""

from expense_tracker.model.listener import ExpenseTrackerModelListener
from expense_tracker.model.expense_tracker_model import ExpenseTrackerModel

__all__ = [
    "ExpenseTrackerModelListener",
    "ExpenseTrackerModel",
]
