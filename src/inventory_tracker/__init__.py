"""
Inventory Tracker - An interactive console tracker for stock items

Features:
- Add items with id, name, quantity and unit price
- List the inventory in insertion order
- Search by id and total the stock value
- Bounded capacity, kept in memory for the length of a session
"""

__version__ = "0.1.0"

from .models import Item, NAME_MAX_LENGTH
from .inventory import Inventory, InventoryFullError, DEFAULT_CAPACITY
from .session import InventorySession

__all__ = [
    "Item",
    "NAME_MAX_LENGTH",
    "Inventory",
    "InventoryFullError",
    "DEFAULT_CAPACITY",
    "InventorySession",
]
