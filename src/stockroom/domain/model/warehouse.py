"""Warehouse stock items.

Both variants are held in their own ``Repository``; the repository only
looks at ``id`` and ``quantity``, the remaining attributes are opaque to it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from stockroom.domain.model.fields import (
    require_date,
    require_int,
    require_non_negative,
    require_text,
)


@dataclass(frozen=True)
class ElectronicItem:
    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int

    def __post_init__(self) -> None:
        require_int(self.id, "id")
        require_text(self.name, "name")
        require_non_negative(self.quantity, "quantity")
        require_text(self.brand, "brand")
        require_non_negative(self.warranty_months, "warranty_months")


@dataclass(frozen=True)
class GroceryItem:
    id: int
    name: str
    quantity: int
    expiry_date: date

    def __post_init__(self) -> None:
        require_int(self.id, "id")
        require_text(self.name, "name")
        require_non_negative(self.quantity, "quantity")
        require_date(self.expiry_date, "expiry_date")

    def is_expired(self, today: date) -> bool:
        return self.expiry_date < today
