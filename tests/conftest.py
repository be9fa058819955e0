"""Pytest fixtures for the vending machine."""

import json
from decimal import Decimal

import pytest

from vending_machine.machine import FoodVendingMachine
from vending_machine.models import Item, VendingSelection


@pytest.fixture
def machine() -> FoodVendingMachine:
    inventory = {
        VendingSelection.SODA: Item(price=Decimal("1.50"), quantity=2),
        VendingSelection.CHIPS: Item(price=Decimal("1.25"), quantity=5),
        VendingSelection.SANDWICH: Item(price=Decimal("4.50"), quantity=3),
        VendingSelection.GUM: Item(price=Decimal("0.75"), quantity=0),  # Out of stock
    }
    return FoodVendingMachine(inventory, amount_deposited=Decimal("10.00"))


@pytest.fixture
def resource_dir(tmp_path):
    """Directory with a small well-formed JSON inventory named ``Snacks``."""
    data = {
        "soda": {"price": 1.5, "quantity": 2},
        "chips": {"price": 1.25, "quantity": 5},
        "cookie": {"price": 1, "quantity": 0},
    }
    (tmp_path / "Snacks.json").write_text(json.dumps(data), encoding="utf-8")
    return tmp_path
