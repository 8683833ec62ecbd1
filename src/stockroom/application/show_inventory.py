"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from stockroom.application.dto import InventoryLineDTO
from stockroom.domain.model.inventory_record import InventoryRecord
from stockroom.domain.repository.repository import Repository


class ShowInventoryHandler:

    def __init__(self, inventory_repo: Repository[InventoryRecord]) -> None:
        self._inventory_repo = inventory_repo

    def handle(self) -> list[InventoryLineDTO]:
        return [
            InventoryLineDTO(
                id=record.id,
                name=record.name,
                quantity=record.quantity,
                date_added=record.date_added.strftime("%Y-%m-%d %H:%M"),
            )
            for record in self._inventory_repo.get_all()
        ]
