"""Transaction domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Optional

from expense_tracker.core.exceptions import InvalidArgumentError
from expense_tracker.core.timezone import now_local, to_local, parse_local_datetime
from expense_tracker.domain.models.enums import Category


@dataclass(frozen=True)
class Transaction:
    """
    A single expense entry.

    Immutable once created. Two transactions with the same amount, category,
    timestamp and note compare equal, but the model still stores them as
    separate entries.
    """

    amount: Decimal
    category: Category
    timestamp: datetime = field(default_factory=now_local)
    note: Optional[str] = None

    def __post_init__(self) -> None:
        # frozen dataclass: normalised values go in through object.__setattr__
        amount = self.amount
        if not isinstance(amount, Decimal):
            try:
                amount = Decimal(str(amount))
            except InvalidOperation:
                raise InvalidArgumentError(f"Invalid amount: {self.amount!r}") from None
        if not amount.is_finite() or amount <= 0:
            raise InvalidArgumentError(f"Amount must be positive, got {amount}")
        object.__setattr__(self, "amount", amount)

        if not isinstance(self.category, Category):
            try:
                category = Category(str(self.category).upper())
            except ValueError:
                raise InvalidArgumentError(f"Unknown category: {self.category!r}") from None
            object.__setattr__(self, "category", category)

        if not isinstance(self.timestamp, datetime):
            raise InvalidArgumentError(f"Invalid timestamp: {self.timestamp!r}")
        object.__setattr__(self, "timestamp", to_local(self.timestamp))

    @classmethod
    def from_strings(
        cls,
        amount: str,
        category: str,
        timestamp: Optional[str] = None,
        note: Optional[str] = None,
    ) -> "Transaction":
        """Build a transaction from raw text input, e.g. a form submission."""
        if timestamp:
            try:
                when = parse_local_datetime(timestamp)
            except (ValueError, OverflowError):
                raise InvalidArgumentError(f"Invalid timestamp: {timestamp!r}") from None
        else:
            when = now_local()
        return cls(
            amount=amount.strip(),
            category=category.strip(),
            timestamp=when,
            note=note or None,
        )
