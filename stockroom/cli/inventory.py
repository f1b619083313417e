from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, List, Sequence

from stockroom.application.services.inventory_service import InventoryService
from stockroom.config.settings import get_settings
from stockroom.domain.entities import InventoryItem
from stockroom.domain.exceptions import DeserializationError, StockroomError
from stockroom.logging_config import get_logger


def _format_items(items: Iterable[InventoryItem]) -> str:
    out_lines: List[str] = []
    for item in items:
        out_lines.append(
            f"ID: {item.id}, Name: {item.name}, Quantity: {item.quantity}, "
            f"DateAdded: {item.date_added.isoformat(sep=' ', timespec='seconds')}"
        )
    return "\n".join(out_lines)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Seed, save and display the JSON inventory log")
    p.add_argument(
        "--file",
        type=Path,
        metavar="PATH",
        help="Inventory JSON file (defaults to STOCKROOM_DATA_FILE or inventory.json)",
    )
    p.add_argument(
        "action",
        choices=("seed", "show"),
        help="'seed' writes the sample items, 'show' loads and prints the file",
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    logger = get_logger(settings)
    path = args.file or settings.data_file
    svc = InventoryService(path, atomic=settings.atomic_save)

    try:
        if args.action == "seed":
            svc.seed_sample_data()
            count = svc.save()
            print(f"Saved {count} items to {path}.")
            return 0

        result = svc.load()
        if result.missing:
            print("File not found. No data loaded.")
    except DeserializationError as exc:
        # A corrupt data file is fatal for this run
        logger.error("Inventory file unreadable", extra={"path": str(path)})
        print(f"Error loading data: {exc}", file=sys.stderr)
        return 2
    except StockroomError as exc:
        logger.warning("Inventory command failed", extra={"action": args.action})
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    items = svc.items()
    if not items:
        print("No inventory data to display.")
    else:
        print("Inventory Items:")
        print(_format_items(items))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
