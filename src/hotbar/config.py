from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Optional

import yaml

from .exceptions import ConfigError
from .hotbar import EMPTY_MARKER, NUM_SLOTS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HotbarConfig:
    num_slots: int = NUM_SLOTS
    empty_marker: str = EMPTY_MARKER

    def ensure_valid(self) -> None:
        if isinstance(self.num_slots, bool) or not isinstance(self.num_slots, int):
            raise ConfigError(f"num_slots must be an integer, got {self.num_slots!r}")
        if self.num_slots < 1:
            raise ConfigError(f"num_slots must be positive, got {self.num_slots}")
        if not isinstance(self.empty_marker, str):
            raise ConfigError(f"empty_marker must be a string, got {self.empty_marker!r}")


def _load_default_data() -> dict:
    text = resources.files("hotbar").joinpath("default_config.yaml").read_text(encoding="utf-8")
    return yaml.safe_load(text) or {}


def load_config(path: Optional[Path] = None) -> HotbarConfig:
    """Load hotbar settings from the embedded defaults and an optional user file.

    A missing user file is logged and ignored.
    """
    data = _load_default_data()
    if path is not None:
        path = Path(path)
        if path.exists():
            with path.open("r", encoding="utf-8") as f:
                user_data = yaml.safe_load(f) or {}
            if not isinstance(user_data, dict):
                raise ConfigError(f"Config file {path} must contain a mapping")
            data.update(user_data)
            logger.info("Loaded hotbar config from %s", path)
        else:
            logger.warning("Hotbar config file not found: %s", path)

    unknown = set(data) - {"num_slots", "empty_marker"}
    if unknown:
        raise ConfigError(f"Unknown config keys: {sorted(unknown)}")

    config = HotbarConfig(**data)
    config.ensure_valid()
    logger.info("Hotbar config: num_slots=%d | empty_marker=%s", config.num_slots, config.empty_marker)
    return config
