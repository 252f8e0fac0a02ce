"""
Gilded Rose inventory package.

Items age one day at a time; the update engine lives in :mod:`gilded_rose.rules`
and :mod:`gilded_rose.shop`, item models and name classification in
:mod:`gilded_rose.items`.
"""

__version__ = "0.1.0"

from .items import Catalogue, Item, ItemCategory, classify
from .rules import MAX_QUALITY, MIN_QUALITY, advance_item, transition
from .shop import GildedRose, advance_day

__all__ = [
    "Catalogue",
    "GildedRose",
    "Item",
    "ItemCategory",
    "MAX_QUALITY",
    "MIN_QUALITY",
    "advance_day",
    "advance_item",
    "classify",
    "transition",
]
