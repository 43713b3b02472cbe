from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from vending_demo.errors import CatalogError
from vending_demo.models import Category, Item

logger = logging.getLogger(__name__)

# code, name, category, price (pence), stock
INITIAL_ITEMS: Tuple[Tuple[int, str, Category, int, int], ...] = (
    (101, "Coffee", Category.HOT_DRINKS, 150, 5),
    (102, "Tea", Category.HOT_DRINKS, 120, 5),
    (201, "Cola", Category.COLD_DRINKS, 100, 5),
    (202, "Orange Juice", Category.COLD_DRINKS, 130, 5),
    (301, "Chocolate Bar", Category.CHOCOLATE, 90, 5),
    (302, "Biscuits", Category.SNACK, 80, 5),
    (303, "Crisps", Category.SNACK, 70, 5),
)


class Catalog:
    """
    In-memory item store for one vending session.

    Holds:
    - the fixed set of items, keyed by code, in menu order
    - a list of event lines (for the demo and for tests)

    Items are never added or removed once the catalog is initialized; only
    their stock goes down.
    """

    def __init__(self) -> None:
        self._items: Dict[int, Item] = {}
        self._initialized = False

        self.logs: List[str] = []

    def log(self, message: str) -> None:
        self.logs.append(message)
        logger.info(message)

    def initialize(self) -> None:
        if self._initialized:
            raise CatalogError("Catalog is already initialized")
        for code, name, category, price, stock in INITIAL_ITEMS:
            self._items[code] = Item(code=code, name=name, category=category, price=price, stock=stock)
        self._initialized = True
        self.log(f"catalog initialized: {len(self._items)} items")

    @property
    def items(self) -> List[Item]:
        return list(self._items.values())

    def find_by_code(self, code: int) -> Optional[Item]:
        return self._items.get(code)

    def is_available(self, item: Item) -> bool:
        return item.stock > 0

    def dispense_one(self, item: Item) -> None:
        if not self.is_available(item):
            # Callers check availability first; reaching here is a caller bug.
            logger.warning("dispense requested for %s (code=%s) with no stock left", item.name, item.code)
            return
        item.stock -= 1
        self.log(f"dispensed: {item.name} code={item.code} (stock={item.stock})")

    def list_affordable(self, balance: int) -> List[Item]:
        return [item for item in self._items.values() if self.is_available(item) and item.price <= balance]
