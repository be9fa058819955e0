from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from vending_machine.machine import FoodVendingMachine
from vending_machine.models import VendErrorCode, VendingSelection

ZERO = Decimal("0.00")

_ALERT_TITLES = {
    VendErrorCode.INVALID_SELECTION.value: "Invalid Selection",
    VendErrorCode.OUT_OF_STOCK.value: "Out of Stock",
    VendErrorCode.INSUFFICIENT_FUNDS.value: "Insufficient Funds",
}


@dataclass(slots=True)
class Display:
    balance: Decimal
    total_price: Decimal = ZERO
    item_price: Decimal = ZERO
    item_quantity: int = 1


@dataclass(slots=True)
class Alert:
    title: str
    message: str


class VendingPanel:
    """
    Front panel of the machine: the current selection, the quantity stepper
    and the labels a screen would show. The machine is passed in, the panel
    never builds one itself.
    """

    def __init__(self, machine: FoodVendingMachine, deposit_step: Decimal = Decimal("5.00")):
        self.machine = machine
        self.deposit_step = deposit_step
        self.current_selection: Optional[VendingSelection] = None
        self.quantity = 1
        self.display = Display(balance=machine.amount_deposited)

    def _refresh_prices(self) -> None:
        item = self.machine.item_for(self.current_selection) if self.current_selection else None
        if item is None:
            self.display.item_price = ZERO
            self.display.total_price = ZERO
            return
        self.display.item_price = item.price
        self.display.total_price = item.total_price(self.quantity)

    def _reset(self) -> None:
        self.quantity = 1
        self.display = Display(balance=self.machine.amount_deposited)

    def select(self, selection: VendingSelection) -> None:
        self.current_selection = selection
        self.quantity = 1
        self.display.item_quantity = 1
        self._refresh_prices()

    def set_quantity(self, quantity: int) -> None:
        if quantity < 1:
            raise ValueError("quantity must be >= 1")
        self.quantity = quantity
        self.display.item_quantity = quantity
        self._refresh_prices()

    def deposit_funds(self) -> None:
        self.machine.deposit(self.deposit_step)
        self.display.balance = self.machine.amount_deposited

    def purchase(self) -> Optional[Alert]:
        if self.current_selection is None:
            return Alert("No Selection", "Please make a selection")

        result = self.machine.vend(self.current_selection, self.quantity)
        if result.success:
            self.current_selection = None
            self._reset()
            return None
        return Alert(_ALERT_TITLES[result.code], result.message)

    def dismiss_alert(self) -> None:
        self.current_selection = None
        self._reset()
