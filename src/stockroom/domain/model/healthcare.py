"""Patients and the prescriptions issued to them.

Prescriptions reference their patient by ``patient_id`` only; grouping by
patient is done with a secondary index, not by the repository.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from stockroom.domain.model.fields import (
    require_date,
    require_int,
    require_non_negative,
    require_text,
)


@dataclass(frozen=True)
class Patient:
    id: int
    name: str
    age: int
    gender: str

    def __post_init__(self) -> None:
        require_int(self.id, "id")
        require_text(self.name, "name")
        require_non_negative(self.age, "age")


@dataclass(frozen=True)
class Prescription:
    id: int
    patient_id: int
    medication_name: str
    date_issued: date

    def __post_init__(self) -> None:
        require_int(self.id, "id")
        require_int(self.patient_id, "patient_id")
        require_text(self.medication_name, "medication_name")
        require_date(self.date_issued, "date_issued")
