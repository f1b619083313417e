from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from stockroom.application.services.inventory_service import SAMPLE_ITEMS, InventoryService
from stockroom.domain.exceptions import DeserializationError, DuplicateKeyError

NOW = datetime(2024, 6, 1, 8, 0, 0, 987654, tzinfo=timezone.utc)


def test_seed_save_and_reload_in_new_session(tmp_path: Path) -> None:
    path = tmp_path / "inventory.json"
    first = InventoryService(path)
    seeded = first.seed_sample_data(now=NOW)
    assert [(i.id, i.name, i.quantity) for i in seeded] == list(SAMPLE_ITEMS)
    assert first.save() == 5

    second = InventoryService(path)
    assert second.items() == []
    result = second.load()
    assert result.found
    assert second.items() == seeded
    assert second.repository.get_by_id(5).name == "Printer"


def test_load_missing_file_keeps_repository(tmp_path: Path) -> None:
    svc = InventoryService(tmp_path / "absent.json")
    svc.seed_sample_data(now=NOW)
    result = svc.load()
    assert result.missing
    assert len(svc.items()) == 5


def test_seeding_twice_raises_duplicate(tmp_path: Path) -> None:
    svc = InventoryService(tmp_path / "inventory.json")
    svc.seed_sample_data(now=NOW)
    with pytest.raises(DuplicateKeyError):
        svc.seed_sample_data(now=NOW)


def test_load_with_duplicate_ids_keeps_current_state(tmp_path: Path) -> None:
    path = tmp_path / "inventory.json"
    path.write_text(
        '[{"id": 1, "name": "A", "quantity": 1, "date_added": "2024-01-01T00:00:00Z"},'
        ' {"id": 1, "name": "B", "quantity": 2, "date_added": "2024-01-01T00:00:00Z"}]',
        encoding="utf-8",
    )
    svc = InventoryService(path)
    svc.seed_sample_data(now=NOW)
    with pytest.raises(DuplicateKeyError):
        svc.load()
    assert len(svc.items()) == 5


def test_corrupt_file_propagates(tmp_path: Path) -> None:
    path = tmp_path / "inventory.json"
    path.write_text("corrupt", encoding="utf-8")
    with pytest.raises(DeserializationError):
        InventoryService(path).load()


def test_atomic_service_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "inventory.json"
    svc = InventoryService(path, atomic=True)
    svc.seed_sample_data(now=NOW)
    svc.save()
    other = InventoryService(path)
    other.load()
    assert other.items() == svc.items()
