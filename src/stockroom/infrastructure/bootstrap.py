"""Composition root — wires concrete implementations to the application layer.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on the domain.
"""

from __future__ import annotations

import os
from pathlib import Path

from stockroom.application.grade_report import StudentReader
from stockroom.domain.model.inventory_record import InventoryRecord
from stockroom.infrastructure.persistence.delimited_student_reader import (
    read_students,
)
from stockroom.infrastructure.persistence.json_record_log import JsonRecordLog
from stockroom.infrastructure.persistence.record_codecs import InventoryRecordCodec

DATA_DIR_ENV = "STOCKROOM_DATA_DIR"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def inventory_log(directory: Path | None = None) -> JsonRecordLog[InventoryRecord]:
    return JsonRecordLog(
        (directory or data_dir()) / "inventory.json", InventoryRecordCodec()
    )


def student_reader() -> StudentReader:
    return read_students
