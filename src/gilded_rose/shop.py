import logging
from typing import List, MutableSequence, TypeVar

from .items import Item
from .rules import advance_item

logger = logging.getLogger(__name__)

Items = TypeVar("Items", bound=MutableSequence[Item])


def advance_day(items: Items) -> Items:
    """Advance every item by one day, in order, and return the same sequence."""
    for item in items:
        advance_item(item)
    logger.info("Advanced %d items by one day", len(items))
    return items


class GildedRose:
    """The inn's stock.

    Holds the caller's list as is; each :meth:`update_quality` call is one day.
    There is no internal locking, so callers sharing the list between threads
    must serialise calls themselves.
    """

    def __init__(self, items: List[Item]) -> None:
        self.items = items

    def update_quality(self) -> List[Item]:
        return advance_day(self.items)
