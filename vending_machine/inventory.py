from __future__ import annotations

import json
import logging
import plistlib
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union
from xml.parsers.expat import ExpatError

from vending_machine.models import CENTS, Item, VendingSelection

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"

Inventory = Dict[VendingSelection, Item]


class InventoryError(Exception):
    pass


class ResourceNotFound(InventoryError):
    pass


class FormatError(InventoryError):
    pass


class UnknownSelection(InventoryError):
    pass


def _read_plist(path: Path) -> Any:
    with path.open("rb") as fh:
        return plistlib.load(fh)


def _read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


_READERS: Dict[str, Callable[[Path], Any]] = {
    "plist": _read_plist,
    "json": _read_json,
}


def dictionary_from_file(
    name: str,
    of_type: str = "plist",
    resource_dir: Optional[Union[str, Path]] = None,
) -> Dict[str, Any]:
    """
    Read ``<resource_dir>/<name>.<of_type>`` into a plain dictionary.

    Without ``resource_dir`` the resource is looked up among the files shipped
    with the package.
    """
    reader = _READERS.get(of_type)
    if reader is None:
        raise FormatError(f"Unsupported resource type: {of_type}")

    path = Path(resource_dir or DATA_DIR) / f"{name}.{of_type}"
    if not path.is_file():
        raise ResourceNotFound(f"Resource {name}.{of_type} not found in {path.parent}")

    try:
        data = reader(path)
    except (ValueError, ExpatError) as e:
        raise FormatError(f"Resource {path.name} could not be parsed: {e}") from e

    if not isinstance(data, dict) or not all(isinstance(k, str) for k in data):
        raise FormatError(f"Resource {path.name} is not a mapping of string keys")
    return data


def _money(value: Any) -> Optional[Decimal]:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return None
    price = Decimal(str(value))
    if not price.is_finite() or price < 0:
        return None
    try:
        cents = price.quantize(CENTS)
    except InvalidOperation:
        return None
    # sub-cent prices are malformed, not rounded
    return cents if cents == price else None


def _count(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


def vending_inventory(dictionary: Dict[str, Any], strict: bool = False) -> Inventory:
    """
    Turn a ``{selection: {"price": ..., "quantity": ...}}`` mapping into an inventory.

    Records missing a usable price or quantity are skipped with a warning,
    or rejected with ``FormatError`` when ``strict`` is set.
    """
    inventory: Inventory = {}
    for key, value in dictionary.items():
        if not isinstance(value, dict):
            raise FormatError(f"Entry {key!r} is not a record")

        price = _money(value.get("price"))
        quantity = _count(value.get("quantity"))
        if price is None or quantity is None:
            if strict:
                raise FormatError(f"Entry {key!r} needs a numeric price and an integer quantity")
            logger.warning("skipping inventory entry %r: price=%r quantity=%r", key, value.get("price"), value.get("quantity"))
            continue

        try:
            selection = VendingSelection(key)
        except ValueError:
            raise UnknownSelection(f"Unknown selection {key!r}") from None

        inventory[selection] = Item(price=price, quantity=quantity)

    logger.info("inventory loaded: %d selections", len(inventory))
    return inventory


def load_inventory(
    name: str = "VendingInventory",
    of_type: str = "plist",
    resource_dir: Optional[Union[str, Path]] = None,
    strict: bool = False,
) -> Inventory:
    return vending_inventory(dictionary_from_file(name, of_type, resource_dir), strict=strict)
