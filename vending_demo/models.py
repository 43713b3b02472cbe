from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Category(Enum):
    HOT_DRINKS = "Hot Drinks"
    COLD_DRINKS = "Cold Drinks"
    CHOCOLATE = "Chocolate"
    SNACK = "Snack"


@dataclass(slots=True)
class Item:
    """
    A product slot in the machine.

    Prices are whole pence; conversion to pounds happens only on display.
    """

    code: int
    name: str
    category: Category
    price: int
    stock: int


class SessionState(Enum):
    ACCEPTING_MONEY = "ACCEPTING_MONEY"
    PURCHASING = "PURCHASING"
    COMPLETE = "COMPLETE"


class PurchaseStatus(Enum):
    DISPENSED = "DISPENSED"
    INVALID_CODE = "INVALID_CODE"
    OUT_OF_STOCK = "OUT_OF_STOCK"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"


@dataclass(slots=True)
class PurchaseResult:
    status: PurchaseStatus
    code: int
    balance: int
    item: Optional[Item] = None
    shortfall: int = 0
    suggestion: Optional[Item] = None

    @property
    def ok(self) -> bool:
        return self.status is PurchaseStatus.DISPENSED
