from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(slots=True)
class VendingConfig:
    resource_name: str = "VendingInventory"
    resource_type: str = "plist"
    # None means the inventory shipped in vending_machine/data
    resource_dir: Optional[str] = None
    starting_balance: Decimal = Decimal("10.00")
    deposit_step: Decimal = Decimal("5.00")
    strict_inventory: bool = False
