from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from stockroom.domain.entities import InventoryItem
from stockroom.domain.value_objects.ids import ItemId
from stockroom.repositories import EntityRepository, JsonLog, LoadResult

logger = logging.getLogger(__name__)

SAMPLE_ITEMS: tuple[tuple[int, str, int], ...] = (
    (1, "Laptop", 10),
    (2, "Mouse", 50),
    (3, "Keyboard", 30),
    (4, "Monitor", 15),
    (5, "Printer", 5),
)


class InventoryService:
    """Inventory log backed by a repository and mirrored to a JSON file.

    - ``save`` snapshots the repository into the file.
    - ``load`` rebuilds the repository from the file; a missing file leaves
      the current contents in place.
    """

    def __init__(self, path: Path | str, *, atomic: bool = False) -> None:
        self._repo = EntityRepository[InventoryItem]()
        self._log = JsonLog(path, InventoryItem, atomic=atomic)

    @property
    def repository(self) -> EntityRepository[InventoryItem]:
        return self._repo

    def seed_sample_data(self, now: Optional[datetime] = None) -> list[InventoryItem]:
        ts = now or datetime.now(timezone.utc)
        for item_id, name, quantity in SAMPLE_ITEMS:
            self._repo.add(
                InventoryItem(id=ItemId(item_id), name=name, quantity=quantity, date_added=ts)
            )
        logger.info("Sample data seeded", extra={"count": len(SAMPLE_ITEMS)})
        return self._repo.get_all()

    def save(self) -> int:
        snapshot = self._repo.get_all()
        self._log.save(snapshot)
        return len(snapshot)

    def load(self) -> LoadResult[InventoryItem]:
        result = self._log.load()
        if result.found:
            # Build aside so a duplicate id in the file leaves the current repository intact
            repo = EntityRepository[InventoryItem]()
            for item in result.items:
                repo.add(item)
            self._repo = repo
        return result

    def items(self) -> list[InventoryItem]:
        return self._repo.get_all()
