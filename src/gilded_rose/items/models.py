from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .catalogue import Catalogue, DEFAULT_CATALOGUE
from .category import ItemCategory


@dataclass
class Item:
    """
    A stocked item. ``sell_in`` and ``quality`` change as days pass; ``name``
    never does.

    The category is resolved once, at construction, from the name using the
    default catalogue unless one is passed explicitly. No range checks are made
    here: out of range quality is clamped by the next transition. Items with
    the same name and state but different categories are not equal.
    """

    name: str
    sell_in: int
    quality: int
    category: Optional[ItemCategory] = None

    def __post_init__(self) -> None:
        if self.category is None:
            self.category = DEFAULT_CATALOGUE.classify(self.name)
        elif not isinstance(self.category, ItemCategory):
            self.category = ItemCategory(self.category)

    @classmethod
    def from_catalogue(
        cls,
        catalogue: Catalogue,
        name: str,
        sell_in: int,
        quality: int,
    ) -> "Item":
        return cls(name, sell_in, quality, category=catalogue.classify(name))

    def __str__(self) -> str:
        return f"{self.name}, {self.sell_in}, {self.quality}"
