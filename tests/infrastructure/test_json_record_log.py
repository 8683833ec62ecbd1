"""Tests for the JSON-file-backed record log."""

import json
from datetime import date, datetime
from pathlib import Path

import pytest

from stockroom.domain.exceptions import MalformedRecordError, MissingFieldError
from stockroom.domain.model.inventory_record import InventoryRecord
from stockroom.domain.model.warehouse import ElectronicItem, GroceryItem
from stockroom.domain.repository.repository import Repository
from stockroom.infrastructure.persistence.json_record_log import JsonRecordLog
from stockroom.infrastructure.persistence.record_codecs import (
    ElectronicItemCodec,
    GroceryItemCodec,
    InventoryRecordCodec,
)


def _records() -> list[InventoryRecord]:
    added = datetime(2026, 10, 19, 9, 30, 15, 123456)
    return [
        InventoryRecord(1, "Laptop", 10, added),
        InventoryRecord(2, "Mouse", 50, added),
        InventoryRecord(3, "Keyboard", 30, added),
        InventoryRecord(4, "Monitor", 15, added),
    ]


def _log(tmp_path: Path) -> JsonRecordLog[InventoryRecord]:
    return JsonRecordLog(tmp_path / "inventory.json", InventoryRecordCodec())


def _write_raw(tmp_path: Path, payload: object) -> None:
    (tmp_path / "inventory.json").write_text(json.dumps(payload), encoding="utf-8")


def _valid_raw(**overrides: object) -> dict:
    raw = {"id": 1, "name": "Laptop", "quantity": 10, "date_added": "2026-10-19T09:30:00"}
    raw.update(overrides)
    return raw


class TestRoundTrip:

    def test_load_returns_what_was_saved(self, tmp_path):
        log = _log(tmp_path)
        log.save(_records())
        assert log.load() == _records()

    def test_new_log_instance_reads_previous_session(self, tmp_path):
        _log(tmp_path).save(_records())
        assert _log(tmp_path).load() == _records()

    def test_order_preserved(self, tmp_path):
        log = _log(tmp_path)
        reordered = list(reversed(_records()))
        log.save(reordered)
        assert [r.id for r in log.load()] == [4, 3, 2, 1]

    def test_empty_sequence(self, tmp_path):
        log = _log(tmp_path)
        log.save([])
        assert log.load() == []

    def test_warehouse_codecs(self, tmp_path):
        electronics = JsonRecordLog(tmp_path / "electronics.json", ElectronicItemCodec())
        groceries = JsonRecordLog(tmp_path / "groceries.json", GroceryItemCodec())
        laptops = [ElectronicItem(1, "Laptop", 10, "Dell", 24)]
        milk = [GroceryItem(1, "Milk", 100, date(2026, 10, 29))]

        electronics.save(laptops)
        groceries.save(milk)

        assert electronics.load() == laptops
        assert groceries.load() == milk

    def test_repository_helpers(self, tmp_path):
        log = _log(tmp_path)
        repo = Repository.from_items(_records())
        repo.update_quantity(2, 45)
        log.save_repository(repo)

        restored = log.load_repository()
        assert restored.get_all() == repo.get_all()
        assert restored.get_by_id(2).quantity == 45

    def test_grocery_expiry_stays_a_pure_date(self, tmp_path):
        groceries = JsonRecordLog(tmp_path / "groceries.json", GroceryItemCodec())
        groceries.save([GroceryItem(1, "Milk", 100, date(2026, 10, 29))])

        raw = json.loads((tmp_path / "groceries.json").read_text(encoding="utf-8"))
        assert raw[0]["expiry_date"] == "2026-10-29"
        assert type(groceries.load()[0].expiry_date) is date


class TestSave:

    def test_writes_every_field_by_name(self, tmp_path):
        _log(tmp_path).save(_records()[:1])
        raw = json.loads((tmp_path / "inventory.json").read_text(encoding="utf-8"))
        assert raw == [
            {
                "id": 1,
                "name": "Laptop",
                "quantity": 10,
                "date_added": "2026-10-19T09:30:15.123456",
            }
        ]

    def test_replaces_previous_content(self, tmp_path):
        log = _log(tmp_path)
        log.save(_records())
        log.save(_records()[:1])
        assert len(log.load()) == 1

    def test_creates_parent_directories(self, tmp_path):
        log = JsonRecordLog(tmp_path / "nested" / "dir" / "log.json", InventoryRecordCodec())
        log.save(_records())
        assert log.load() == _records()

    def test_leaves_no_temporary_files(self, tmp_path):
        _log(tmp_path).save(_records())
        assert [p.name for p in tmp_path.iterdir()] == ["inventory.json"]

    def test_failed_write_keeps_previous_file(self, tmp_path, monkeypatch):
        log = _log(tmp_path)
        log.save(_records())

        def _fail(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr("stockroom.infrastructure.persistence.json_record_log.os.replace", _fail)
        with pytest.raises(OSError, match="disk full"):
            log.save(_records()[:1])

        monkeypatch.undo()
        assert log.load() == _records()
        assert [p.name for p in tmp_path.iterdir()] == ["inventory.json"]


class TestLoad:

    def test_missing_file_returns_empty(self, tmp_path):
        assert _log(tmp_path).load() == []

    def test_missing_file_is_not_created(self, tmp_path):
        _log(tmp_path).load()
        assert not (tmp_path / "inventory.json").exists()

    def test_invalid_json_rejected(self, tmp_path):
        (tmp_path / "inventory.json").write_text("[\n  {\"id\": 1,\n", encoding="utf-8")
        with pytest.raises(MalformedRecordError, match="invalid JSON"):
            _log(tmp_path).load()

    def test_invalid_utf8_rejected(self, tmp_path):
        (tmp_path / "inventory.json").write_bytes(b'[{"id": 1, "name": "\xff"}]')
        with pytest.raises(MalformedRecordError, match="not valid UTF-8"):
            _log(tmp_path).load()

    def test_top_level_must_be_list(self, tmp_path):
        _write_raw(tmp_path, {"id": 1})
        with pytest.raises(MalformedRecordError, match="expected a list"):
            _log(tmp_path).load()

    def test_record_must_be_object(self, tmp_path):
        _write_raw(tmp_path, [_valid_raw(), [1, "Mouse", 5]])
        with pytest.raises(MalformedRecordError, match="Record 2: expected an object") as info:
            _log(tmp_path).load()
        assert info.value.position == 2

    def test_missing_field_tagged(self, tmp_path):
        raw = _valid_raw(id=2)
        del raw["quantity"]
        _write_raw(tmp_path, [_valid_raw(), raw])
        with pytest.raises(MissingFieldError, match="Record 2: missing field 'quantity'") as info:
            _log(tmp_path).load()
        assert info.value.position == 2
        assert info.value.field == "quantity"

    def test_non_numeric_id_tagged(self, tmp_path):
        _write_raw(tmp_path, [_valid_raw(id="one")])
        with pytest.raises(MalformedRecordError) as info:
            _log(tmp_path).load()
        assert info.value.position == 1
        assert info.value.field == "id"

    def test_fractional_quantity_rejected(self, tmp_path):
        _write_raw(tmp_path, [_valid_raw(quantity=2.5)])
        with pytest.raises(MalformedRecordError) as info:
            _log(tmp_path).load()
        assert info.value.field == "quantity"

    def test_bad_timestamp_tagged(self, tmp_path):
        _write_raw(tmp_path, [_valid_raw(date_added="yesterday")])
        with pytest.raises(MalformedRecordError) as info:
            _log(tmp_path).load()
        assert info.value.field == "date_added"

    def test_entity_validation_failure_tagged(self, tmp_path):
        _write_raw(tmp_path, [_valid_raw(), _valid_raw(id=2), _valid_raw(id=3, quantity=-4)])
        with pytest.raises(MalformedRecordError, match="Record 3") as info:
            _log(tmp_path).load()
        assert info.value.position == 3
        assert info.value.field == "quantity"

    def test_extra_fields_ignored(self, tmp_path):
        _write_raw(tmp_path, [_valid_raw(note="restocked")])
        assert _log(tmp_path).load()[0].name == "Laptop"

    def test_repeated_id_is_malformed_record(self, tmp_path):
        _write_raw(tmp_path, [_valid_raw(), _valid_raw(name="Mouse")])
        with pytest.raises(MalformedRecordError, match="Record 2: Item with ID 1 already exists") as info:
            _log(tmp_path).load_repository()
        assert info.value.position == 2
        assert info.value.field == "id"
