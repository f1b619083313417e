from typing import NewType

ItemId = NewType("ItemId", int)
PatientId = NewType("PatientId", int)
PrescriptionId = NewType("PrescriptionId", int)
