"""Reader for ``id,name,score`` student result files.

One student per line, comma-delimited, surrounding whitespace trimmed.
The first bad line aborts the whole read; every error is tagged with the
1-based line number.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from stockroom.domain.exceptions import (
    InvalidFieldError,
    MalformedRecordError,
    MissingFieldError,
)
from stockroom.domain.model.student import MAX_SCORE, MIN_SCORE, Student

logger = logging.getLogger(__name__)

DELIMITER = ","
FIELD_COUNT = 3


def _parse_int(text: str) -> int | None:
    # int() also accepts "+5", " 5" and "1_000"; only plain digits count here
    digits = text[1:] if text.startswith("-") else text
    if not digits.isdigit() or not digits.isascii():
        return None
    return int(text)


def parse_delimited_line(line: str, line_number: int) -> Student:
    """Parse one ``id,name,score`` line into a Student."""
    parts = line.split(DELIMITER)
    if len(parts) != FIELD_COUNT:
        raise MissingFieldError(
            f"Line {line_number}: Missing fields.", position=line_number
        )

    raw_id, raw_name, raw_score = (part.strip() for part in parts)

    student_id = _parse_int(raw_id)
    if student_id is None:
        raise InvalidFieldError(
            f"Line {line_number}: Invalid ID format.",
            position=line_number,
            field="id",
        )

    if not raw_name:
        raise MissingFieldError(
            f"Line {line_number}: Missing student name.",
            position=line_number,
            field="full_name",
        )

    score = _parse_int(raw_score)
    if score is None:
        raise InvalidFieldError(
            f"Line {line_number}: Score format is invalid.",
            position=line_number,
            field="score",
        )
    if not MIN_SCORE <= score <= MAX_SCORE:
        raise InvalidFieldError(
            f"Line {line_number}: Score out of valid range ({MIN_SCORE}-{MAX_SCORE}).",
            position=line_number,
            field="score",
        )

    return Student(id=student_id, full_name=raw_name, score=score)


def parse_lines(lines: Iterable[str]) -> list[Student]:
    return [
        parse_delimited_line(line.rstrip("\r\n"), line_number)
        for line_number, line in enumerate(lines, start=1)
    ]


def _decode_lines(data: bytes) -> list[str]:
    # lines are decoded one by one so a bad byte can be reported by line
    lines: list[str] = []
    for line_number, raw in enumerate(data.splitlines(), start=1):
        try:
            lines.append(raw.decode("utf-8-sig" if line_number == 1 else "utf-8"))
        except UnicodeDecodeError as exc:
            raise MalformedRecordError(
                f"Line {line_number}: Not valid UTF-8.", position=line_number
            ) from exc
    return lines


def read_students(path: Path) -> list[Student]:
    """Read every student from ``path``.

    A leading UTF-8 byte order mark is skipped.  Raises FileNotFoundError
    when ``path`` does not exist.
    """
    with path.open("rb") as handle:
        data = handle.read()
    students = parse_lines(_decode_lines(data))
    logger.info("Read %d students from %s", len(students), path)
    return students
