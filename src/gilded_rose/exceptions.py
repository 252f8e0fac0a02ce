class GildedRoseError(Exception):
    """Base exception for the Gilded Rose project."""


class CatalogueError(GildedRoseError):
    """Raised when a name catalogue file is malformed (e.g., unknown category)."""


class StockError(GildedRoseError):
    """Raised when a stock entry cannot be turned into an item."""
