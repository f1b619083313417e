from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from stockroom.domain.entities import Patient, Prescription
from stockroom.domain.value_objects.ids import PatientId, PrescriptionId
from stockroom.repositories import EntityRepository, group_by


class ClinicService:
    """Patients and prescriptions linked by ``Prescription.patient_id``.

    The patient-to-prescriptions map is a snapshot built by
    :meth:`build_prescription_map`; call it again after changing the
    prescriptions repository.
    """

    def __init__(self) -> None:
        self.patients = EntityRepository[Patient](label="Patient")
        self.prescriptions = EntityRepository[Prescription](label="Prescription")
        self._prescription_map: dict[int, list[Prescription]] = {}

    def seed_data(self, now: Optional[datetime] = None) -> None:
        ts = now or datetime.now(timezone.utc)
        self.patients.add(Patient(id=PatientId(1), name="Kwame Nkrumah", age=28, gender="Male"))
        self.patients.add(Patient(id=PatientId(2), name="Kofi Baboni", age=23, gender="Male"))
        self.patients.add(Patient(id=PatientId(3), name="Ella Akosuah", age=80, gender="Female"))

        for rx_id, patient_id, medication, days_ago in (
            (1, 1, "Amoxicillin", 10),
            (2, 1, "Ibuprofen", 5),
            (3, 2, "Paracetamol", 7),
            (4, 3, "Metformin", 3),
        ):
            self.prescriptions.add(
                Prescription(
                    id=PrescriptionId(rx_id),
                    patient_id=PatientId(patient_id),
                    medication_name=medication,
                    date_issued=ts - timedelta(days=days_ago),
                )
            )

    def build_prescription_map(self) -> dict[int, list[Prescription]]:
        self._prescription_map = group_by(self.prescriptions.get_all(), lambda p: p.patient_id)
        return self._prescription_map

    def get_prescriptions_by_patient_id(self, patient_id: int) -> list[Prescription]:
        return list(self._prescription_map.get(patient_id, []))

    def get_patient(self, patient_id: int) -> Patient:
        return self.patients.get_by_id(patient_id)
