"""Application service: Grade Report use case.

Reads a student result file, derives each student's grade, and writes
one report line per student.  A bad input line aborts the whole run
before the report file is touched.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from stockroom.application.dto import ReportLineDTO
from stockroom.domain.model.student import Student

StudentReader = Callable[[Path], list[Student]]


class GradeReportHandler:

    def __init__(self, read_students: StudentReader) -> None:
        self._read_students = read_students

    def handle(self, input_path: Path, output_path: Path) -> list[ReportLineDTO]:
        students = self._read_students(input_path)
        lines = [self._to_dto(student) for student in students]
        output_path.write_text(
            "".join(line.render() + "\n" for line in lines), encoding="utf-8"
        )
        return lines

    @staticmethod
    def _to_dto(student: Student) -> ReportLineDTO:
        return ReportLineDTO(
            id=student.id,
            full_name=student.full_name,
            score=student.score,
            grade=student.grade,
        )
