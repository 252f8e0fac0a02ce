from enum import Enum


class ItemCategory(Enum):
    ORDINARY = "ordinary"
    AGED = "aged"  # gains quality with age
    LEGENDARY = "legendary"  # never sold, never degrades
    BACKSTAGE = "backstage"
    CONJURED = "conjured"  # degrades twice as fast as ordinary
