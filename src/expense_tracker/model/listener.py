"""Listener protocol for model state changes."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from expense_tracker.model.expense_tracker_model import ExpenseTrackerModel


@runtime_checkable
class ExpenseTrackerModelListener(Protocol):
    """Interface for anything that wants to hear about model changes."""

    def update(self, model: "ExpenseTrackerModel") -> None:
        """Called synchronously, with the changed model, after each mutation."""
        ...
