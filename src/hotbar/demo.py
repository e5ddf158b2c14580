from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Sequence, TextIO

from .exceptions import LayoutMismatchError
from .hotbar import Hotbar
from .items.model import Item, ring, weapon

logger = logging.getLogger(__name__)

ID_SWORD = 0
ID_WATERGUN = 1
ID_RING_TELEPORTATION = 2
ID_RING_HEALING = 3

# Expected item id per slot after each operation on the sample layout.
PACK_EXPECTED = (ID_SWORD, ID_RING_TELEPORTATION, ID_WATERGUN, ID_RING_HEALING, None, None, None, None)
SORT_EXPECTED = (ID_SWORD, ID_WATERGUN, ID_RING_HEALING, ID_RING_TELEPORTATION, None, None, None, None)


def sample_items() -> Dict[int, Item]:
    return {
        ID_SWORD: weapon(ID_SWORD, "Excalibur"),
        ID_WATERGUN: weapon(ID_WATERGUN, "Watergun"),
        ID_RING_TELEPORTATION: ring(ID_RING_TELEPORTATION, "Ring of Teleportation"),
        ID_RING_HEALING: ring(ID_RING_HEALING, "Ring of Healing"),
    }


def set_items(hotbar: Hotbar) -> None:
    """Place the sample items, leaving slots 0, 2, 5 and 7 empty."""
    items = sample_items()
    hotbar.put_item_into_slot(items[ID_SWORD], 1)
    hotbar.put_item_into_slot(items[ID_RING_TELEPORTATION], 3)
    hotbar.put_item_into_slot(items[ID_WATERGUN], 4)
    hotbar.put_item_into_slot(items[ID_RING_HEALING], 6)


def reset_hotbar(hotbar: Hotbar) -> None:
    hotbar.remove_all_items()
    set_items(hotbar)


def check_layout(hotbar: Hotbar, expected_ids: Sequence[Optional[int]]) -> None:
    """
    Verify slot contents by item id; None expects an empty slot.

    Raises LayoutMismatchError on the first slot that differs.
    """
    for slot, expected_id in enumerate(expected_ids):
        item = hotbar.get_item(slot)
        actual_id = item.id if item is not None else None
        if actual_id != expected_id:
            raise LayoutMismatchError(slot, expected_id, item)


def _run(hotbar: Hotbar, label: str, operation: Callable[[], None], out: TextIO) -> None:
    reset_hotbar(hotbar)
    out.write(f"Hotbar before {label}:\n")
    out.write(hotbar.dump())
    operation()
    out.write(f"Hotbar after {label}:\n")
    out.write(hotbar.dump())


def do_pack(hotbar: Hotbar, out: TextIO) -> None:
    _run(hotbar, "Pack()", hotbar.pack, out)
    check_layout(hotbar, PACK_EXPECTED)
    logger.info("Pack layout verified")


def do_sort(hotbar: Hotbar, out: TextIO) -> None:
    _run(hotbar, "SortByItemType()", hotbar.sort_by_item_type, out)
    check_layout(hotbar, SORT_EXPECTED)
    logger.info("SortByItemType layout verified")
