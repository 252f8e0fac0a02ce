from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import yaml

from .exceptions import StockError
from .items import DEFAULT_CATALOGUE, Catalogue, Item, ItemCategory

logger = logging.getLogger(__name__)

# name, sell_in, quality
DEFAULT_STOCK = (
    ("+5 Dexterity Vest", 10, 20),
    ("Aged Brie", 2, 0),
    ("Elixir of the Mongoose", 5, 7),
    ("Sulfuras, Hand of Ragnaros", 0, 80),
    ("Sulfuras, Hand of Ragnaros", -1, 80),
    ("Backstage passes to a TAFKAL80ETC concert", 15, 20),
    ("Backstage passes to a TAFKAL80ETC concert", 10, 49),
    ("Backstage passes to a TAFKAL80ETC concert", 5, 49),
    ("Conjured Mana Cake", 3, 6),
)


def default_stock(catalogue: Optional[Catalogue] = None) -> List[Item]:
    catalogue = catalogue or DEFAULT_CATALOGUE
    return [Item.from_catalogue(catalogue, name, sell_in, quality) for name, sell_in, quality in DEFAULT_STOCK]


def _whole_number(name: str, key: str, value) -> int:
    # bool is an int subclass; YAML "true" must not become 1
    if isinstance(value, bool):
        raise StockError(f"Stock entry '{name}' needs an integer {key}, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise StockError(f"Stock entry '{name}' needs an integer {key}, got {value!r}")
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise StockError(f"Stock entry '{name}' needs an integer {key}, got {value!r}") from exc


def item_from_dict(data: dict, catalogue: Optional[Catalogue] = None) -> Item:
    """Build an item from a ``{name, sell_in, quality, category?}`` mapping."""
    catalogue = catalogue or DEFAULT_CATALOGUE
    if not isinstance(data, dict):
        raise StockError(f"Stock entry must be a mapping, got {data!r}")
    missing = [k for k in ("name", "sell_in", "quality") if k not in data]
    if missing:
        raise StockError(f"Stock entry {data!r} is missing: {', '.join(missing)}")
    name = str(data["name"])
    sell_in = _whole_number(name, "sell_in", data["sell_in"])
    quality = _whole_number(name, "quality", data["quality"])

    category = data.get("category")
    if category is None:
        return Item.from_catalogue(catalogue, name, sell_in, quality)
    try:
        return Item(name, sell_in, quality, category=ItemCategory(str(category).lower()))
    except ValueError as exc:
        raise StockError(f"Stock entry '{name}' has unknown category '{category}'") from exc


def load_stock(path: Path, catalogue: Optional[Catalogue] = None) -> List[Item]:
    """Read a YAML list of stock entries. Raises FileNotFoundError if ``path`` is missing."""
    if not path.exists():
        raise FileNotFoundError(f"Stock file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or []
    except yaml.YAMLError as exc:
        raise StockError(f"Stock file {path} is not valid YAML: {exc}") from exc
    if isinstance(raw, dict):
        raw = raw.get("items", [])
    if not isinstance(raw, list):
        raise StockError(f"Stock file {path} must contain a list of items")
    items = [item_from_dict(entry, catalogue) for entry in raw]
    logger.info("Loaded %d items from %s", len(items), path)
    return items
