"""
Hotbar package root.

A fixed-size row of item slots with packing and grouped sorting. The demo
driver and command line live in :mod:`hotbar.demo` and ``python -m hotbar``.
"""

from .exceptions import HotbarError, SlotOutOfRangeError
from .hotbar import NUM_SLOTS, Hotbar
from .items import Item, ItemType, ring, weapon

__version__ = "0.1.0"

__all__ = [
    "Hotbar",
    "HotbarError",
    "Item",
    "ItemType",
    "NUM_SLOTS",
    "SlotOutOfRangeError",
    "ring",
    "weapon",
]
