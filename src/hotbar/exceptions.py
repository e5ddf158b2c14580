from __future__ import annotations

from typing import Optional


class HotbarError(Exception):
    """Base exception for the hotbar package."""


class SlotOutOfRangeError(HotbarError, IndexError):
    """Raised when a slot index is outside ``[0, num_slots)``."""

    def __init__(self, slot: int, num_slots: int) -> None:
        super().__init__(f"slot must be between 0 and {num_slots - 1}")
        self.slot = slot
        self.num_slots = num_slots


class LayoutMismatchError(HotbarError):
    """Raised when a hotbar does not hold the expected items (demo checks)."""

    def __init__(self, slot: int, expected_id: Optional[int], actual: object) -> None:
        super().__init__(f"slot {slot}: expected id {expected_id}, found {actual}")
        self.slot = slot
        self.expected_id = expected_id
        self.actual = actual


class ConfigError(HotbarError):
    """Raised for invalid configuration values."""
