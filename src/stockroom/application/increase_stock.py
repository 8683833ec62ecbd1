"""Application service: Increase Stock use case.

An unknown id and a bad amount are reported separately: the first raises
NotFoundError, the second InvalidQuantityError.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from stockroom.domain.exceptions import InvalidQuantityError
from stockroom.domain.repository.repository import Repository

T = TypeVar("T")


class IncreaseStockHandler(Generic[T]):

    def __init__(self, repo: Repository[T]) -> None:
        self._repo = repo

    def handle(self, item_id: int, amount: int) -> T:
        if amount <= 0:
            raise InvalidQuantityError(
                f"Stock increase must be positive, got {amount}"
            )
        item = self._repo.get_by_id(item_id)
        return self._repo.update_quantity(item_id, item.quantity + amount)
