"""
Per-category transition rules for one elapsed day.

Every rule takes the state at the start of the day, ``(sell_in, quality)``,
and returns the state at the end of it. Except for legendary items the day
starts by decrementing ``sell_in``; an item whose decremented ``sell_in`` is
negative is past its sell-by date for that same day.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Tuple

from .items import Item, ItemCategory

logger = logging.getLogger(__name__)

MIN_QUALITY = 0
MAX_QUALITY = 50

State = Tuple[int, int]
Rule = Callable[[int, int], State]

# (before sell-by, after sell-by) quality deltas for the linear categories
RATES: Dict[ItemCategory, Tuple[int, int]] = {
    ItemCategory.ORDINARY: (-1, -2),
    ItemCategory.AGED: (1, 2),
    ItemCategory.CONJURED: (-2, -4),
}

BACKSTAGE_STEPS = (
    # (days left at most, quality gain)
    (5, 3),
    (10, 2),
)


def clamp_quality(quality: int) -> int:
    return max(MIN_QUALITY, min(quality, MAX_QUALITY))


def _linear_rule(category: ItemCategory) -> Rule:
    before, after = RATES[category]

    def rule(sell_in: int, quality: int) -> State:
        sell_in -= 1
        delta = after if sell_in < 0 else before
        return sell_in, clamp_quality(quality + delta)

    rule.__name__ = f"{category.value}_rule"
    return rule


def legendary_rule(sell_in: int, quality: int) -> State:
    return sell_in, quality


def backstage_rule(sell_in: int, quality: int) -> State:
    """Passes gain value as the concert nears and are worthless once it has happened."""
    if sell_in <= 0:
        return sell_in - 1, MIN_QUALITY
    gain = 1
    for days_left, step_gain in BACKSTAGE_STEPS:
        if sell_in <= days_left:
            gain = step_gain
            break
    return sell_in - 1, clamp_quality(quality + gain)


RULES: Dict[ItemCategory, Rule] = {
    ItemCategory.ORDINARY: _linear_rule(ItemCategory.ORDINARY),
    ItemCategory.AGED: _linear_rule(ItemCategory.AGED),
    ItemCategory.CONJURED: _linear_rule(ItemCategory.CONJURED),
    ItemCategory.LEGENDARY: legendary_rule,
    ItemCategory.BACKSTAGE: backstage_rule,
}


def transition(category: ItemCategory, sell_in: int, quality: int) -> State:
    """Return ``(sell_in, quality)`` after one day for an item of ``category``."""
    return RULES[category](sell_in, quality)


def advance_item(item: Item) -> Item:
    """Advance ``item`` by one day in place and return it."""
    old = (item.sell_in, item.quality)
    item.sell_in, item.quality = transition(item.category, item.sell_in, item.quality)
    logger.debug("%s (%s): %s -> %s", item.name, item.category.value, old, (item.sell_in, item.quality))
    return item
