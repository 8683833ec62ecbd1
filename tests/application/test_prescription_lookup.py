"""Tests for the prescriptions-per-patient query."""

from datetime import date

from stockroom.application.prescription_lookup import PrescriptionLookup
from stockroom.domain.model.healthcare import Prescription
from stockroom.domain.repository.repository import Repository


def _setup() -> tuple[PrescriptionLookup, Repository[Prescription]]:
    repo = Repository.from_items([
        Prescription(1, 1, "Paracetamol", date(2026, 10, 9)),
        Prescription(2, 1, "Ibuprofen", date(2026, 10, 14)),
        Prescription(3, 2, "Amoxicillin", date(2026, 10, 12)),
    ])
    return PrescriptionLookup(repo), repo


class TestPrescriptionLookup:

    def test_returns_patient_prescriptions(self):
        lookup, _ = _setup()
        assert [p.medication_name for p in lookup.handle(1)] == ["Paracetamol", "Ibuprofen"]

    def test_unknown_patient_gets_empty_list(self):
        lookup, _ = _setup()
        assert lookup.handle(42) == []

    def test_stale_until_rebuilt(self):
        lookup, repo = _setup()
        repo.add(Prescription(4, 2, "Cetirizine", date(2026, 10, 17)))
        assert len(lookup.handle(2)) == 1

        lookup.rebuild()
        assert len(lookup.handle(2)) == 2

    def test_result_is_a_copy(self):
        lookup, _ = _setup()
        lookup.handle(1).clear()
        assert len(lookup.handle(1)) == 2
