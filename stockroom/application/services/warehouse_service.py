from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, TypeVar

from stockroom.domain.entities import ElectronicItem, GroceryItem, StockItem
from stockroom.domain.value_objects.ids import ItemId
from stockroom.repositories import EntityRepository

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=StockItem)


def _non_negative(quantity: int) -> None:
    if quantity < 0:
        raise ValueError("Quantity cannot be negative.")


class WarehouseManager:
    """Holds one repository per item category.

    Stock operations raise the repository's typed errors; reporting them is
    left to the caller.
    """

    def __init__(self) -> None:
        self.electronics = EntityRepository[ElectronicItem]()
        self.groceries = EntityRepository[GroceryItem]()

    def seed_data(self, now: Optional[datetime] = None) -> None:
        ts = now or datetime.now(timezone.utc)
        self.electronics.add(
            ElectronicItem(id=ItemId(1), name="Laptop", quantity=5, brand="Dell", warranty_months=24)
        )
        self.electronics.add(
            ElectronicItem(
                id=ItemId(2), name="Smartphone", quantity=10, brand="Samsung", warranty_months=12
            )
        )
        self.groceries.add(
            GroceryItem(id=ItemId(1), name="Rice", quantity=100, expiry_date=ts + timedelta(days=182))
        )
        self.groceries.add(
            GroceryItem(id=ItemId(2), name="Milk", quantity=50, expiry_date=ts + timedelta(days=10))
        )
        logger.info(
            "Warehouse seeded",
            extra={"electronics": len(self.electronics), "groceries": len(self.groceries)},
        )

    @staticmethod
    def update_quantity(repo: EntityRepository[S], item_id: int, quantity: int) -> S:
        return repo.update_field(item_id, "quantity", lambda _: quantity, validator=_non_negative)

    @staticmethod
    def increase_stock(repo: EntityRepository[S], item_id: int, amount: int) -> S:
        item = repo.update_field(
            item_id, "quantity", lambda current: current + amount, validator=_non_negative
        )
        logger.info("Stock updated", extra={"item_id": item_id, "quantity": item.quantity})
        return item

    @staticmethod
    def remove_item(repo: EntityRepository[S], item_id: int) -> None:
        repo.remove(item_id)
        logger.info("Item removed", extra={"item_id": item_id})
