"""
Bounded, append-only inventory collection.
"""
from typing import Iterator, List, Optional, Tuple

from .models import Item


DEFAULT_CAPACITY = 100


class InventoryFullError(ValueError):
    """Raised when adding to an inventory that has reached its capacity."""


class Inventory:
    """
    Ordered collection of items with a fixed upper bound.

    Items are kept in insertion order, which is also display order.
    Ids are not required to be unique; search returns the first match.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"Capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._items: List[Item] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def items(self) -> Tuple[Item, ...]:
        return tuple(self._items)

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def add(self, item: Item) -> Item:
        """Append an item. Raises InventoryFullError when at capacity."""
        if self.is_full:
            raise InventoryFullError(f"Inventory full ({self._capacity} items)")
        self._items.append(item)
        return item

    def find(self, item_id: int) -> Optional[Item]:
        """Return the first item with the given id, or None."""
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def total_value(self) -> float:
        """Sum of quantity * price over all items."""
        return sum((item.value for item in self._items), 0.0)
