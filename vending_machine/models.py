from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

CENTS = Decimal("0.01")


class VendingSelection(str, Enum):
    SODA = "soda"
    DIET_SODA = "dietSoda"
    CHIPS = "chips"
    COOKIE = "cookie"
    SANDWICH = "sandwich"
    WRAP = "wrap"
    CANDY_BAR = "candyBar"
    POP_TART = "popTart"
    WATER = "water"
    FRUIT_JUICE = "fruitJuice"
    SPORTS_DRINK = "sportsDrink"
    GUM = "gum"

    def icon(self) -> str:
        """Image name for the selection grid, e.g. ``DietSoda``."""
        return self.value[0].upper() + self.value[1:]


@dataclass(slots=True)
class Item:
    price: Decimal
    quantity: int

    def total_price(self, quantity: int) -> Decimal:
        return (self.price * Decimal(quantity)).quantize(CENTS)


class VendErrorCode(str, Enum):
    INVALID_SELECTION = "INVALID_SELECTION"
    OUT_OF_STOCK = "OUT_OF_STOCK"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"


@dataclass(slots=True)
class VendResult:
    """
    Outcome of a vend attempt.

    Refusals are ordinary results: the caller shows ``message`` and lets the
    user pick again. ``required`` is only set for insufficient funds.
    """

    success: bool
    code: str = "OK"
    message: str = ""
    required: Optional[Decimal] = None

    @classmethod
    def ok(cls, message: str = "") -> "VendResult":
        return cls(success=True, message=message)

    @classmethod
    def fail(cls, code: VendErrorCode, message: str, required: Optional[Decimal] = None) -> "VendResult":
        return cls(success=False, code=code.value, message=message, required=required)
