from __future__ import annotations

import argparse
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Sequence

from stockroom.application.services.warehouse_service import WarehouseManager
from stockroom.domain.entities import GroceryItem, StockItem
from stockroom.domain.exceptions import StockroomError
from stockroom.domain.value_objects.ids import ItemId
from stockroom.logging_config import get_logger


def _format_items(items: Iterable[StockItem]) -> str:
    out_lines: List[str] = []
    for item in items:
        out_lines.append(f"ID: {item.id}, Name: {item.name}, Quantity: {item.quantity}")
    return "\n".join(out_lines)


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        description="Seed the warehouse, list both categories and exercise the error paths"
    )


def main(argv: Sequence[str] | None = None) -> int:
    build_parser().parse_args(argv)
    logger = get_logger()

    manager = WarehouseManager()
    manager.seed_data()

    print("=== Grocery Items ===")
    print(_format_items(manager.groceries.get_all()))
    print()
    print("=== Electronic Items ===")
    print(_format_items(manager.electronics.get_all()))
    print()

    print("=== Testing Exceptions ===")
    try:
        manager.groceries.add(
            GroceryItem(
                id=ItemId(1),
                name="Bread",
                quantity=30,
                expiry_date=datetime.now(timezone.utc) + timedelta(days=5),
            )
        )
    except StockroomError as exc:
        logger.warning("Duplicate add rejected", extra={"item_id": 1})
        print(f"Error adding duplicate: {exc}")

    try:
        manager.remove_item(manager.electronics, 99)
    except StockroomError as exc:
        logger.warning("Remove rejected", extra={"item_id": 99})
        print(f"Error removing item: {exc}")

    try:
        manager.update_quantity(manager.electronics, 1, -5)
    except StockroomError as exc:
        logger.warning("Quantity update rejected", extra={"item_id": 1})
        print(f"Error updating quantity: {exc}")

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
