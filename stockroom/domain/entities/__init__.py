from .clinic import Patient, Prescription
from .inventory import ElectronicItem, GroceryItem, InventoryItem, StockItem

__all__ = [
    "ElectronicItem",
    "GroceryItem",
    "InventoryItem",
    "Patient",
    "Prescription",
    "StockItem",
]
