from __future__ import annotations

import argparse
from typing import Sequence

from stockroom.application.services.clinic_service import ClinicService
from stockroom.logging_config import get_logger


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="List patients and their prescriptions")
    p.add_argument(
        "--patient", type=int, metavar="ID", help="Show prescriptions for this patient ID"
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    get_logger()

    svc = ClinicService()
    svc.seed_data()
    svc.build_prescription_map()

    print("=== Patient List ===")
    for patient in svc.patients.get_all():
        print(f"ID: {patient.id}, Name: {patient.name}, Age: {patient.age}, Gender: {patient.gender}")
    print()

    if args.patient is None:
        return 0

    prescriptions = svc.get_prescriptions_by_patient_id(args.patient)
    if not prescriptions:
        print("No prescriptions found for this patient.")
        return 0

    print(f"=== Prescriptions for Patient {args.patient} ===")
    for p in prescriptions:
        print(
            f"Prescription ID: {p.id}, Medication: {p.medication_name}, "
            f"Date: {p.date_issued.date().isoformat()}"
        )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
