from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ItemType(Enum):
    """Item categories. Declaration order is the hotbar sort order."""

    WEAPON = "Weapon"
    RING = "Ring"

    @property
    def rank(self) -> int:
        return _TYPE_RANK[self]


_TYPE_RANK = {item_type: index for index, item_type in enumerate(ItemType)}


@dataclass(frozen=True)
class Item:
    """
    Immutable item value. Only ``item_type`` and ``name`` take part in
    ordering; ``id`` is identity.
    """

    id: int
    name: str
    item_type: ItemType

    def __str__(self) -> str:
        return f"{self.name} [{self.item_type.value}] - Id {self.id}"


def weapon(id: int, name: str) -> Item:
    return Item(id=id, name=name, item_type=ItemType.WEAPON)


def ring(id: int, name: str) -> Item:
    return Item(id=id, name=name, item_type=ItemType.RING)
