'''
Items package: item model, categories and name classification.
'''
from .catalogue import DEFAULT_CATALOGUE, Catalogue, classify, load_catalogue
from .category import ItemCategory
from .models import Item

__all__ = [
    'Catalogue',
    'DEFAULT_CATALOGUE',
    'Item',
    'ItemCategory',
    'classify',
    'load_catalogue',
]
