"""Field-by-field JSON codecs for the persisted entity variants.

Each codec lists the entity's declared fields in a fixed order, with a
pair of converters per field: one to a JSON value, one back from it.
Decoding tags every failure with the record position and field name.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime
from typing import Any, Generic, TypeVar

from stockroom.domain.exceptions import (
    InvalidFieldError,
    MalformedRecordError,
    MissingFieldError,
)
from stockroom.domain.model.inventory_record import InventoryRecord
from stockroom.domain.model.warehouse import ElectronicItem, GroceryItem

T = TypeVar("T")

FieldConverters = tuple[Callable[[Any], Any], Callable[[Any], Any]]


# --- Converters ---------------------------------------------------------------


def _identity(value: Any) -> Any:
    return value


def _from_json_int(value: Any) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value


def _from_json_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value


def _to_iso(value: date) -> str:
    return value.isoformat()


def _from_iso_datetime(value: Any) -> datetime:
    return datetime.fromisoformat(_from_json_str(value))


def _from_iso_date(value: Any) -> date:
    return date.fromisoformat(_from_json_str(value))


INT: FieldConverters = (_identity, _from_json_int)
STR: FieldConverters = (_identity, _from_json_str)
DATETIME: FieldConverters = (_to_iso, _from_iso_datetime)
DATE: FieldConverters = (_to_iso, _from_iso_date)


# --- Codecs -------------------------------------------------------------------


class RecordCodec(Generic[T]):
    """Maps one entity variant to and from a JSON object."""

    entity_type: Callable[..., T]
    fields: dict[str, FieldConverters]

    def encode(self, item: T) -> dict[str, Any]:
        return {
            name: to_json(getattr(item, name))
            for name, (to_json, _) in self.fields.items()
        }

    def decode(self, raw: Any, position: int) -> T:
        """Rebuild an entity from the ``position``-th (1-based) record."""
        if not isinstance(raw, dict):
            raise MalformedRecordError(
                f"Record {position}: expected an object, got {type(raw).__name__}",
                position=position,
            )

        values: dict[str, Any] = {}
        for name, (_, from_json) in self.fields.items():
            if name not in raw:
                raise MissingFieldError(
                    f"Record {position}: missing field '{name}'",
                    position=position,
                    field=name,
                )
            try:
                values[name] = from_json(raw[name])
            except (TypeError, ValueError) as exc:
                raise MalformedRecordError(
                    f"Record {position}: invalid value for '{name}' ({exc})",
                    position=position,
                    field=name,
                ) from exc

        try:
            return self.entity_type(**values)
        except InvalidFieldError as exc:
            raise MalformedRecordError(
                f"Record {position}: {exc.message}",
                position=position,
                field=exc.field,
            ) from exc


class InventoryRecordCodec(RecordCodec[InventoryRecord]):
    entity_type = InventoryRecord
    fields = {
        "id": INT,
        "name": STR,
        "quantity": INT,
        "date_added": DATETIME,
    }


class ElectronicItemCodec(RecordCodec[ElectronicItem]):
    entity_type = ElectronicItem
    fields = {
        "id": INT,
        "name": STR,
        "quantity": INT,
        "brand": STR,
        "warranty_months": INT,
    }


class GroceryItemCodec(RecordCodec[GroceryItem]):
    entity_type = GroceryItem
    fields = {
        "id": INT,
        "name": STR,
        "quantity": INT,
        "expiry_date": DATE,
    }
