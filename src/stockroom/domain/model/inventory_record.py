"""InventoryRecord: one entry of the persisted inventory log."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from stockroom.domain.exceptions import InvalidFieldError
from stockroom.domain.model.fields import (
    require_int,
    require_non_negative,
    require_text,
)


@dataclass(frozen=True)
class InventoryRecord:
    """An immutable log entry recording stock on hand at ``date_added``.

    Compared field-by-field, which is what makes a saved-then-loaded log
    equal to the one that was saved.
    """

    id: int
    name: str
    quantity: int
    date_added: datetime

    def __post_init__(self) -> None:
        require_int(self.id, "id")
        require_text(self.name, "name")
        require_non_negative(self.quantity, "quantity")
        if not isinstance(self.date_added, datetime):
            raise InvalidFieldError("date_added must be a datetime", field="date_added")
