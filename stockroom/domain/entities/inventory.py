from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ..value_objects.ids import ItemId


class StockItem(BaseModel):
    """Common shape of every stocked item: identity, name and quantity."""

    id: ItemId = Field(..., frozen=True, description="Unique identifier of the item")
    name: str = Field(..., min_length=1, description="Display name")
    quantity: int = Field(..., ge=0, description="Units in stock")

    model_config = ConfigDict(validate_assignment=True)

    @property
    def key(self) -> ItemId:
        return self.id


class InventoryItem(StockItem):
    date_added: datetime = Field(..., description="When the item was logged")


class ElectronicItem(StockItem):
    brand: str = Field(..., description="Manufacturer brand")
    warranty_months: int = Field(..., ge=0, description="Warranty length in months")


class GroceryItem(StockItem):
    expiry_date: datetime = Field(..., description="Best-before date")
