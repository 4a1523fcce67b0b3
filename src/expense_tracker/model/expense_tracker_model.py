"""Observable data model holding transactions and the current filter result."""

import logging
from typing import Iterable, Optional

from expense_tracker.config.settings import get_settings
from expense_tracker.core.exceptions import InvalidArgumentError, ListenerNotificationError
from expense_tracker.domain.models import ListenerErrorPolicy, Transaction
from expense_tracker.model.listener import ExpenseTrackerModelListener

logger = logging.getLogger(__name__)


class ExpenseTrackerModel:
    """
    The Model in the expense tracker's MVC split.

    Holds the ordered list of transactions together with the indices of the
    transactions matched by the most recent filter, and notifies registered
    listeners after every change. The matched indices always point into the
    current transaction list: adding or removing a transaction clears them.

    Getters return copies, so callers can never alias internal state.
    """

    def __init__(self, listener_error_policy: Optional[ListenerErrorPolicy] = None):
        """
        Initialize an empty model.

        Args:
            listener_error_policy: What to do when a listener raises during
                notification. Defaults to the configured policy.
        """
        self._transactions: list[Transaction] = []
        self._matched_filter_indices: list[int] = []
        self._listeners: list[ExpenseTrackerModelListener] = []

        if listener_error_policy is None:
            listener_error_policy = get_settings().listener_error_policy
        try:
            self._listener_error_policy = ListenerErrorPolicy(listener_error_policy)
        except ValueError:
            raise InvalidArgumentError(
                f"Unknown listener error policy: {listener_error_policy!r}"
            ) from None

    @property
    def listener_error_policy(self) -> ListenerErrorPolicy:
        return self._listener_error_policy

    # -------------------------------------------------------------------------
    # Transactions
    # -------------------------------------------------------------------------

    def add_transaction(self, transaction: Transaction) -> None:
        """
        Append a transaction and notify listeners.

        Raises:
            InvalidArgumentError: If transaction is None.
        """
        if transaction is None:
            raise InvalidArgumentError("The new transaction must be non-null.")

        self._transactions.append(transaction)
        # The previous filter result is no longer valid
        self._matched_filter_indices.clear()
        logger.debug("Added transaction %r (total %d)", transaction, len(self._transactions))
        self._state_changed()

    def remove_transaction(self, transaction: Optional[Transaction]) -> None:
        """
        Remove the first transaction equal to the given one, if any.

        The matched indices are cleared and listeners are notified even when
        nothing was removed.
        """
        try:
            self._transactions.remove(transaction)
            logger.debug("Removed transaction %r", transaction)
        except ValueError:
            logger.debug("Transaction %r not present, nothing removed", transaction)

        self._matched_filter_indices.clear()
        self._state_changed()

    def get_transactions(self) -> tuple[Transaction, ...]:
        """Return a read-only snapshot of the transactions in insertion order."""
        return tuple(self._transactions)

    # -------------------------------------------------------------------------
    # Filter result
    # -------------------------------------------------------------------------

    def set_matched_filter_indices(self, indices: Iterable[int]) -> None:
        """
        Replace the matched filter indices and notify listeners.

        Every index must be an int in [0, number of transactions). The whole
        list is validated before anything changes.

        Raises:
            InvalidArgumentError: If indices is None or any index is invalid.
        """
        if indices is None:
            raise InvalidArgumentError("The matched filter indices list must be non-null.")

        new_indices = list(indices)
        count = len(self._transactions)
        for index in new_indices:
            if isinstance(index, bool) or not isinstance(index, int):
                raise InvalidArgumentError(
                    f"Each matched filter index must be an integer, got {index!r}."
                )
            if index < 0 or index > count - 1:
                raise InvalidArgumentError(
                    "Each matched filter index must be between 0 (inclusive) "
                    f"and the number of transactions (exclusive), got {index} "
                    f"for {count} transaction(s)."
                )

        self._matched_filter_indices = new_indices
        logger.debug("Matched filter indices set to %s", new_indices)
        self._state_changed()

    def get_matched_filter_indices(self) -> list[int]:
        """Return a copy of the matched filter indices."""
        return list(self._matched_filter_indices)

    # -------------------------------------------------------------------------
    # Listeners
    # -------------------------------------------------------------------------

    def register(self, listener: Optional[ExpenseTrackerModelListener]) -> bool:
        """
        Register a listener for state change events.

        Returns:
            True if the listener is non-null and was not already registered,
            False otherwise.
        """
        if listener is None or listener in self._listeners:
            return False
        self._listeners.append(listener)
        logger.debug("Registered listener %r (%d total)", listener, len(self._listeners))
        return True

    def number_of_listeners(self) -> int:
        """Return the number of registered listeners."""
        return len(self._listeners)

    def contains_listener(self, listener: Optional[ExpenseTrackerModelListener]) -> bool:
        """Check whether the listener is registered."""
        if listener is None:
            return False
        return listener in self._listeners

    def _state_changed(self) -> None:
        """Notify every listener, in registration order, of a state change."""
        errors: list[tuple[ExpenseTrackerModelListener, Exception]] = []

        # Iterate a copy: a listener may register another listener mid-broadcast
        for listener in list(self._listeners):
            if self._listener_error_policy is ListenerErrorPolicy.PROPAGATE:
                listener.update(self)
                continue
            try:
                listener.update(self)
            except Exception as exc:
                if self._listener_error_policy is ListenerErrorPolicy.ISOLATE:
                    logger.exception("Listener %r failed during notification", listener)
                else:
                    errors.append((listener, exc))

        if errors:
            raise ListenerNotificationError(errors)
