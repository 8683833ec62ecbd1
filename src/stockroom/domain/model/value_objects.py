"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from stockroom.domain.exceptions import InvalidFieldError


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount with currency.

    Uses Decimal so transaction amounts round-trip exactly.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidFieldError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}",
                field="amount",
            )
        if self.amount < Decimal("0"):
            raise InvalidFieldError(
                f"Money amount cannot be negative, got {self.amount}",
                field="amount",
            )

    def __add__(self, other: Money) -> Money:
        if self.currency != other.currency:
            raise InvalidFieldError(
                f"Cannot combine {self.currency} with {other.currency}",
                field="currency",
            )
        return Money(self.amount + other.amount, self.currency)

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    @staticmethod
    def of(amount: str | int | Decimal, currency: str = "USD") -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise InvalidFieldError(
                f"Invalid money amount: {amount!r}", field="amount"
            ) from exc
