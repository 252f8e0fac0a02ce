from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from . import __version__
from .exceptions import GildedRoseError
from .items import Item, load_catalogue
from .shop import GildedRose
from .stock import default_stock, load_stock

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


def _print_day(day: int, items: List[Item]) -> None:
    print(f"-------- day {day} --------")
    print("name, sellIn, quality")
    for item in items:
        print(item)
    print()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="gilded-rose",
        description="Advance the Gilded Rose stock by one day",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--catalogue", type=Path, default=None, help="YAML file overlaying the item name catalogue")
    parser.add_argument("--stock", type=Path, default=None, help="YAML list of items (name, sell_in, quality)")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        catalogue = load_catalogue(args.catalogue)
        items = load_stock(args.stock, catalogue) if args.stock else default_stock(catalogue)
    except (GildedRoseError, FileNotFoundError) as e:
        logger.error("%s", e)
        return 2

    shop = GildedRose(items)
    _print_day(0, shop.items)
    shop.update_quality()
    _print_day(1, shop.items)
    return 0


if __name__ == "__main__":
    sys.exit(main())
