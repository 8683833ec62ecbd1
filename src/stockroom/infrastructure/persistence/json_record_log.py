"""JSON-file-backed log of one entity variant.

The whole file is a single JSON array, one object per entity, in the
order the entities were saved.  Saving replaces the file atomically: the
new content is written to a temporary file beside the destination, synced,
then renamed over it, so a reader never sees a half-written log.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path
from typing import Generic, TypeVar

from stockroom.domain.exceptions import DuplicateKeyError, MalformedRecordError
from stockroom.domain.repository.repository import Repository
from stockroom.infrastructure.persistence.record_codecs import RecordCodec

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonRecordLog(Generic[T]):

    def __init__(self, file_path: Path, codec: RecordCodec[T]) -> None:
        self._file_path = file_path
        self._codec = codec

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- Save / load ----------------------------------------------------------

    def save(self, entities: Iterable[T]) -> None:
        """Replace the log with ``entities``.

        OS errors propagate; the previous file is left in place when the
        write fails.
        """
        records = [self._codec.encode(item) for item in entities]
        self._write_atomically(json.dumps(records, indent=2) + "\n")
        logger.info("Saved %d records to %s", len(records), self._file_path)

    def load(self) -> list[T]:
        """Decode every record, or return [] when the file does not exist.

        Decoding stops at the first malformed record; nothing is returned
        for a partially valid file.
        """
        if not self._file_path.exists():
            logger.info("No data at %s", self._file_path)
            return []

        try:
            text = self._file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedRecordError(
                f"{self._file_path.name}: not valid UTF-8 at byte {exc.start}"
            ) from exc

        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MalformedRecordError(
                f"{self._file_path.name}: invalid JSON at line {exc.lineno} ({exc.msg})",
                position=exc.lineno,
            ) from exc

        if not isinstance(raw, list):
            raise MalformedRecordError(
                f"{self._file_path.name}: expected a list of records, "
                f"got {type(raw).__name__}"
            )

        items = [
            self._codec.decode(record, position)
            for position, record in enumerate(raw, start=1)
        ]
        logger.info("Loaded %d records from %s", len(items), self._file_path)
        return items

    # --- Repository helpers ---------------------------------------------------

    def load_repository(self) -> Repository[T]:
        """Build a fresh repository from the log.

        A log that repeats an id is corrupt, so the repeat is reported as a
        malformed record rather than as a rejected add.
        """
        repo: Repository[T] = Repository()
        for position, item in enumerate(self.load(), start=1):
            try:
                repo.add(item)
            except DuplicateKeyError as exc:
                raise MalformedRecordError(
                    f"Record {position}: {exc.message}",
                    position=position,
                    field="id",
                ) from exc
        return repo

    def save_repository(self, repository: Repository[T]) -> None:
        self.save(repository.get_all())

    # --- File helpers ---------------------------------------------------------

    def _write_atomically(self, payload: str) -> None:
        directory = self._file_path.parent
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=directory, prefix=f".{self._file_path.name}.", suffix=".tmp"
        )
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, self._file_path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
