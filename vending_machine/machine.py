from __future__ import annotations

import logging
import threading
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Optional, Tuple, Union

from vending_machine.config import VendingConfig
from vending_machine.inventory import load_inventory
from vending_machine.models import CENTS, Item, VendErrorCode, VendingSelection, VendResult

logger = logging.getLogger(__name__)

Amount = Union[Decimal, int, float, str]


def _to_money(amount: Amount) -> Decimal:
    try:
        value = Decimal(str(amount))
        if not value.is_finite():
            raise ValueError(f"not a money amount: {amount!r}")
        cents = value.quantize(CENTS)
    except InvalidOperation as e:
        raise ValueError(f"not a money amount: {amount!r}") from e
    if value != cents:
        raise ValueError(f"amount {value} is not a whole number of cents")
    return cents


class FoodVendingMachine:
    """
    Inventory plus the money the user has put in.

    ``vend`` checks, in this order: the selection is stocked at all, there is
    enough of it, the balance covers the total. A refused vend changes nothing.
    """

    def __init__(self, inventory: Dict[VendingSelection, Item], amount_deposited: Amount = Decimal("10.00")) -> None:
        self.selection: Tuple[VendingSelection, ...] = tuple(VendingSelection)
        self.inventory: Dict[VendingSelection, Item] = dict(inventory)
        self.amount_deposited: Decimal = _to_money(amount_deposited)
        if self.amount_deposited < 0:
            raise ValueError("amount_deposited must be >= 0")

        self.logs: List[str] = []
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, config: Optional[VendingConfig] = None) -> "FoodVendingMachine":
        """Load the configured inventory resource; load errors propagate to the caller."""
        config = config or VendingConfig()
        inventory = load_inventory(
            config.resource_name,
            config.resource_type,
            resource_dir=config.resource_dir,
            strict=config.strict_inventory,
        )
        return cls(inventory, amount_deposited=config.starting_balance)

    def log(self, message: str) -> None:
        self.logs.append(message)
        logger.info(message)

    def item_for(self, selection: VendingSelection) -> Optional[Item]:
        return self.inventory.get(selection)

    def deposit(self, amount: Amount) -> None:
        value = _to_money(amount)
        if value <= 0:
            raise ValueError("deposit amount must be > 0")
        with self._lock:
            self.amount_deposited += value
            self.log(f"deposited {value} (balance={self.amount_deposited})")

    def vend(self, selection: VendingSelection, quantity: int) -> VendResult:
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise ValueError("quantity must be a positive integer")

        with self._lock:
            item = self.inventory.get(selection)
            if item is None:
                self.log(f"vend refused: {selection!r} is not a valid selection")
                return VendResult.fail(VendErrorCode.INVALID_SELECTION, "Please make another selection")

            if item.quantity < quantity:
                self.log(f"vend refused: {selection.value} out of stock (have={item.quantity}, need={quantity})")
                return VendResult.fail(VendErrorCode.OUT_OF_STOCK, "This item is unavailable. Please make another selection")

            total = item.total_price(quantity)
            if self.amount_deposited < total:
                required = total - self.amount_deposited
                self.log(f"vend refused: insufficient funds for {selection.value} (balance={self.amount_deposited}, total={total})")
                return VendResult.fail(
                    VendErrorCode.INSUFFICIENT_FUNDS,
                    f"You need ${required} to complete the transaction",
                    required=required,
                )

            self.amount_deposited -= total
            self.inventory[selection] = Item(price=item.price, quantity=item.quantity - quantity)
            self.log(
                f"vended {selection.value} qty={quantity} total={total} "
                f"(quantity={self.inventory[selection].quantity}, balance={self.amount_deposited})"
            )
            return VendResult.ok(f"Vended {quantity} x {selection.value}")
