"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InventoryLineDTO:
    """Output: one inventory log entry as displayed to the user."""

    id: int
    name: str
    quantity: int
    date_added: str  # formatted, e.g. "2026-10-19 14:05"


@dataclass(frozen=True)
class ReportLineDTO:
    """Output: one student's result in the grade report."""

    id: int
    full_name: str
    score: int
    grade: str

    def render(self) -> str:
        return (
            f"{self.full_name} (ID: {self.id}): "
            f"Score = {self.score}, Grade = {self.grade}"
        )
