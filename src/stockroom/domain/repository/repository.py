"""Generic in-memory repository keyed by integer id.

One ``Repository`` holds one entity variant.  It only looks at an entity
through its key (``id`` unless another key function is given) and, for
``update_quantity``, its ``quantity`` field.  Every other attribute is
opaque to it.

Lookup by id is O(1).  ``find_first`` is a linear scan; callers that
query by a non-key attribute often should build a secondary index with
``build_index`` instead.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Iterable
from operator import attrgetter
from typing import Generic, TypeVar

from stockroom.domain.exceptions import (
    DuplicateKeyError,
    InvalidFieldError,
    InvalidQuantityError,
    NotFoundError,
)
from stockroom.domain.model.fields import require_int

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Repository(Generic[T]):
    """Keyed store over one entity variant.

    Invariants:
    - no two stored entities share a key
    - insertion order is preserved for ``get_all`` and ``find_first``
    - a failed operation leaves the store unchanged
    """

    def __init__(self, key: Callable[[T], int] = attrgetter("id")) -> None:
        self._key = key
        self._items: dict[int, T] = {}

    @classmethod
    def from_items(
        cls,
        items: Iterable[T],
        key: Callable[[T], int] = attrgetter("id"),
    ) -> Repository[T]:
        repo: Repository[T] = cls(key)
        for item in items:
            repo.add(item)
        return repo

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    # --- CRUD -----------------------------------------------------------------

    def add(self, item: T) -> None:
        item_id = self._key(item)
        if item_id in self._items:
            raise DuplicateKeyError(f"Item with ID {item_id} already exists.")
        self._items[item_id] = item
        logger.debug("Added item %s", item_id)

    def get_by_id(self, item_id: int) -> T:
        try:
            return self._items[item_id]
        except KeyError:
            raise NotFoundError(f"Item with ID {item_id} not found.") from None

    def remove(self, item_id: int) -> None:
        if item_id not in self._items:
            raise NotFoundError(f"Item with ID {item_id} not found.")
        del self._items[item_id]
        logger.debug("Removed item %s", item_id)

    def get_all(self) -> list[T]:
        """Return a snapshot of every stored entity, in insertion order."""
        return list(self._items.values())

    def update_quantity(self, item_id: int, new_quantity: int) -> T:
        """Replace the stored entity's quantity and return the updated entity.

        The entity is a frozen dataclass, so a copy carrying the new quantity
        is stored under the same key; its position in insertion order is kept.
        A non-integer quantity, or an entity without a ``quantity`` field,
        raises InvalidFieldError.
        """
        require_int(new_quantity, "quantity")
        if new_quantity < 0:
            raise InvalidQuantityError("Quantity cannot be negative.")
        current = self.get_by_id(item_id)
        if not dataclasses.is_dataclass(current) or "quantity" not in {
            field.name for field in dataclasses.fields(current)
        }:
            raise InvalidFieldError(
                f"Item with ID {item_id} has no quantity.", field="quantity"
            )
        updated = dataclasses.replace(current, quantity=new_quantity)
        self._items[item_id] = updated
        logger.debug("Item %s quantity set to %s", item_id, new_quantity)
        return updated

    # --- Queries --------------------------------------------------------------

    def find_first(self, predicate: Callable[[T], bool]) -> T | None:
        """Return the first entity matching ``predicate``, or None. O(n)."""
        for item in self._items.values():
            if predicate(item):
                return item
        return None
