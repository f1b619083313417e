from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ..value_objects.ids import PatientId, PrescriptionId


class Patient(BaseModel):
    id: PatientId = Field(..., frozen=True, description="Unique identifier of the patient")
    name: str = Field(..., min_length=1)
    age: int = Field(..., ge=0)
    gender: str

    model_config = ConfigDict(validate_assignment=True)

    @property
    def key(self) -> PatientId:
        return self.id


class Prescription(BaseModel):
    id: PrescriptionId = Field(..., frozen=True, description="Unique identifier")
    patient_id: PatientId = Field(..., description="Owning patient")
    medication_name: str = Field(..., min_length=1)
    date_issued: datetime

    model_config = ConfigDict(validate_assignment=True)

    @property
    def key(self) -> PrescriptionId:
        return self.id
