"""Application service: Add Inventory Record use case."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from stockroom.domain.model.inventory_record import InventoryRecord
from stockroom.domain.repository.repository import Repository


class AddInventoryRecordHandler:

    def __init__(
        self,
        inventory_repo: Repository[InventoryRecord],
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._clock = clock

    def handle(self, record_id: int, name: str, quantity: int) -> InventoryRecord:
        """Record ``quantity`` of ``name`` as added now.

        Field validation happens when the record is built, before the
        repository is touched.
        """
        record = InventoryRecord(
            id=record_id,
            name=name.strip(),
            quantity=quantity,
            date_added=self._clock(),
        )
        self._inventory_repo.add(record)
        return record
