"""Secondary index: entities grouped by a non-key attribute.

The index is a snapshot built in one pass over ``get_all()``.  It is not
updated when the source repository changes; rebuild it after mutating.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import TypeVar

from stockroom.domain.repository.repository import Repository

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def build_index(repository: Repository[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """Group every entity in ``repository`` by ``key``.

    Entities within a group keep the repository's insertion order.
    """
    index: dict[K, list[T]] = {}
    for item in repository.get_all():
        index.setdefault(key(item), []).append(item)
    return index
