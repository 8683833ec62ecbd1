"""Transactions and the accounts they are applied to.

Account behaviour is a closed set of kinds.  Each kind maps to one entry
in ``_APPLY_BY_KIND`` instead of a subclass overriding a base method.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Callable

from stockroom.domain.exceptions import InvalidFieldError
from stockroom.domain.model.fields import require_int, require_text
from stockroom.domain.model.value_objects import Money


@dataclass(frozen=True)
class Transaction:
    id: int
    date: datetime
    amount: Money
    category: str

    def __post_init__(self) -> None:
        require_int(self.id, "id")
        require_text(self.category, "category")
        if not isinstance(self.amount, Money):
            raise InvalidFieldError("amount must be Money", field="amount")


class AccountKind(Enum):
    STANDARD = "STANDARD"
    SAVINGS = "SAVINGS"


class TransactionOutcome(Enum):
    APPLIED = "APPLIED"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"


@dataclass
class Account:
    """A balance-holding account.

    ``balance`` is a plain Decimal: a STANDARD account may be overdrawn.
    """

    number: str
    balance: Decimal
    kind: AccountKind = AccountKind.STANDARD

    def __post_init__(self) -> None:
        require_text(self.number, "number")
        if self.balance < Decimal("0"):
            raise InvalidFieldError(
                "Initial balance cannot be negative", field="balance"
            )


def _apply_standard(account: Account, transaction: Transaction) -> TransactionOutcome:
    account.balance -= transaction.amount.amount
    return TransactionOutcome.APPLIED


def _apply_savings(account: Account, transaction: Transaction) -> TransactionOutcome:
    if transaction.amount.amount > account.balance:
        return TransactionOutcome.INSUFFICIENT_FUNDS
    account.balance -= transaction.amount.amount
    return TransactionOutcome.APPLIED


_APPLY_BY_KIND: dict[AccountKind, Callable[[Account, Transaction], TransactionOutcome]] = {
    AccountKind.STANDARD: _apply_standard,
    AccountKind.SAVINGS: _apply_savings,
}


def apply_transaction(account: Account, transaction: Transaction) -> TransactionOutcome:
    """Deduct ``transaction`` from ``account`` according to its kind.

    A SAVINGS account refuses a debit larger than its balance and reports
    ``INSUFFICIENT_FUNDS``, leaving the balance untouched.
    """
    return _APPLY_BY_KIND[account.kind](account, transaction)


def total_amount(transactions: list[Transaction], currency: str = "USD") -> Money:
    result = Money(Decimal("0.00"), currency)
    for transaction in transactions:
        result = result + transaction.amount
    return result
