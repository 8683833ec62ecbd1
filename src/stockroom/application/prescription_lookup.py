"""Application service: Prescriptions by Patient query.

Holds a secondary index of prescriptions keyed by ``patient_id``.  The
index is a snapshot; call ``rebuild()`` after the prescription repository
changes.
"""

from __future__ import annotations

from stockroom.domain.model.healthcare import Prescription
from stockroom.domain.repository.repository import Repository
from stockroom.domain.repository.secondary_index import build_index


class PrescriptionLookup:

    def __init__(self, prescription_repo: Repository[Prescription]) -> None:
        self._prescription_repo = prescription_repo
        self._by_patient: dict[int, list[Prescription]] = {}
        self.rebuild()

    def rebuild(self) -> None:
        self._by_patient = build_index(
            self._prescription_repo, lambda p: p.patient_id
        )

    def handle(self, patient_id: int) -> list[Prescription]:
        """Return the patient's prescriptions, or [] if they have none."""
        return list(self._by_patient.get(patient_id, []))
