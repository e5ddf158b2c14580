from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional, Tuple

from .exceptions import SlotOutOfRangeError
from .items.model import Item

if TYPE_CHECKING:
    from .config import HotbarConfig

logger = logging.getLogger(__name__)

NUM_SLOTS = 8
EMPTY_MARKER = "NULL"


class Hotbar:
    """
    Fixed-size row of item slots. Each slot holds an Item or None.

    - The number of slots is fixed at construction and never changes.
    - pack() and sort_by_item_type() only rearrange the items already held;
      the new layout is built first and then written back in one step.

    Example of pack() ('|' separates slots):
        {empty} | sword | {empty} | ring    | {empty}
        sword   | ring  | {empty} | {empty} | {empty}
    """

    def __init__(self, num_slots: int = NUM_SLOTS, empty_marker: str = EMPTY_MARKER) -> None:
        if num_slots < 1:
            raise ValueError(f"num_slots must be positive, got {num_slots}")
        self._num_slots = num_slots
        self._empty_marker = empty_marker
        self._slots: List[Optional[Item]] = [None] * num_slots

    @classmethod
    def from_config(cls, config: "HotbarConfig") -> "Hotbar":
        return cls(num_slots=config.num_slots, empty_marker=config.empty_marker)

    # ---- Slot access ----

    def get_num_slots(self) -> int:
        return self._num_slots

    def _check_slot(self, slot: int) -> None:
        if not 0 <= slot < self._num_slots:
            logger.warning('Slot %d out of range for hotbar of %d slots', slot, self._num_slots)
            raise SlotOutOfRangeError(slot, self._num_slots)

    def get_item(self, slot: int) -> Optional[Item]:
        """Return the item at ``slot`` or None if the slot is empty."""
        self._check_slot(slot)
        return self._slots[slot]

    def put_item_into_slot(self, item: Optional[Item], slot: int) -> Optional[Item]:
        """
        Put ``item`` (None for "no item") into ``slot``.

        Returns the item previously in the slot, or None if it was empty.
        """
        self._check_slot(slot)
        previous = self._slots[slot]
        self._slots[slot] = item
        logger.debug('Slot %d: %s -> %s', slot, previous, item)
        return previous

    def remove_all_items(self) -> None:
        self._slots = [None] * self._num_slots
        logger.debug('Removed all items')

    def slots(self) -> Tuple[Optional[Item], ...]:
        return tuple(self._slots)

    def items(self) -> List[Item]:
        return [item for item in self._slots if item is not None]

    # ---- Reordering ----

    def _write_back(self, items: List[Item]) -> None:
        padding: List[Optional[Item]] = [None] * (self._num_slots - len(items))
        self._slots = list(items) + padding

    def pack(self) -> None:
        """Move items to the front, keeping their order, with no gaps between them."""
        items = self.items()
        self._write_back(items)
        logger.debug('Packed %d items into %d slots', len(items), self._num_slots)

    def sort_by_item_type(self) -> None:
        """
        Group items by ItemType (declaration order) and sort each group by name.

        Also packs the items. Items with the same type and name keep their
        previous relative order.
        """
        items = sorted(self.items(), key=lambda item: (item.item_type.rank, item.name))
        self._write_back(items)
        logger.debug('Sorted %d items: %s', len(items), [item.id for item in items])

    # ---- Debug ----

    def dump(self) -> str:
        lines = ["    Hotbar {"]
        for slot, item in enumerate(self._slots):
            text = self._empty_marker if item is None else str(item)
            lines.append(f"        Slot {slot} - {text}")
        lines.append("    }")
        lines.append("")
        return "\n".join(lines) + "\n"
