from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .config import load_config
from .demo import do_pack, do_sort
from .exceptions import HotbarError
from .hotbar import Hotbar

logger = logging.getLogger(__name__)


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="hotbar-demo",
        description="Hotbar - pack and sort demo",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", type=Path, default=None, help="YAML file overriding the default settings")
    parser.add_argument("--sort", action="store_true", help="Also run the SortByItemType() demo")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        hotbar = Hotbar.from_config(load_config(args.config))
        do_pack(hotbar, sys.stdout)
        if args.sort:
            do_sort(hotbar, sys.stdout)
    except HotbarError as exc:
        logger.error("Hotbar demo failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
