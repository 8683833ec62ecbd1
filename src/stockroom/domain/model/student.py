"""Student results and grade derivation."""

from __future__ import annotations

from dataclasses import dataclass

from stockroom.domain.exceptions import InvalidFieldError
from stockroom.domain.model.fields import require_int, require_text

MIN_SCORE = 0
MAX_SCORE = 100

# Checked top to bottom; both ends inclusive.
GRADE_BANDS: tuple[tuple[int, int, str], ...] = (
    (80, 100, "A"),
    (70, 79, "B"),
    (60, 69, "C"),
    (50, 59, "D"),
)
FAILING_GRADE = "F"


def grade_for(score: int) -> str:
    """Return the letter grade for ``score``."""
    for low, high, grade in GRADE_BANDS:
        if low <= score <= high:
            return grade
    return FAILING_GRADE


@dataclass(frozen=True)
class Student:
    id: int
    full_name: str
    score: int

    def __post_init__(self) -> None:
        require_int(self.id, "id")
        require_text(self.full_name, "full_name")
        require_int(self.score, "score")
        if not MIN_SCORE <= self.score <= MAX_SCORE:
            raise InvalidFieldError(
                f"Score out of valid range ({MIN_SCORE}-{MAX_SCORE}), got {self.score}",
                field="score",
            )

    @property
    def grade(self) -> str:
        return grade_for(self.score)
