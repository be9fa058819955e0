from __future__ import annotations

import argparse
import logging
from decimal import Decimal

from vending_machine.config import VendingConfig
from vending_machine.machine import FoodVendingMachine
from vending_machine.models import VendingSelection
from vending_machine.panel import VendingPanel


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    p = argparse.ArgumentParser(description="Load an inventory, make one purchase and print the machine state.")
    p.add_argument("--resource", type=str, default="VendingInventory", help="Resource name without extension")
    p.add_argument("--type", type=str, default="plist", choices=["plist", "json"])
    p.add_argument("--resource-dir", type=str, default=None, help="Directory holding the resource (default: bundled data)")
    p.add_argument("--balance", type=Decimal, default=Decimal("10.00"))
    p.add_argument("--deposit", type=Decimal, action="append", default=[], help="Amount to deposit; may be repeated")
    p.add_argument("--selection", type=str, default="soda", choices=[s.value for s in VendingSelection])
    p.add_argument("--qty", type=int, default=1)
    p.add_argument("--strict", action="store_true", help="Reject malformed inventory records instead of skipping them")
    args = p.parse_args()

    config = VendingConfig(
        resource_name=args.resource,
        resource_type=args.type,
        resource_dir=args.resource_dir,
        starting_balance=args.balance,
        strict_inventory=args.strict,
    )
    machine = FoodVendingMachine.from_config(config)
    panel = VendingPanel(machine, deposit_step=config.deposit_step)

    for amount in args.deposit:
        machine.deposit(amount)

    panel.select(VendingSelection(args.selection))
    panel.set_quantity(args.qty)
    alert = panel.purchase()

    print("\n=== RESULT ===")
    print("success:", alert is None)
    if alert is not None:
        print(f"{alert.title}: {alert.message}")
    print("balance:", machine.amount_deposited)
    for selection in machine.selection:
        item = machine.item_for(selection)
        if item is not None:
            print(f"  {selection.value:<12} price={item.price} quantity={item.quantity}")


if __name__ == "__main__":
    main()
