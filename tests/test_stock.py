import textwrap

import pytest

from gilded_rose.exceptions import StockError
from gilded_rose.items import Catalogue, ItemCategory
from gilded_rose.stock import DEFAULT_STOCK, default_stock, item_from_dict, load_stock


def test_default_stock_matches_fixture():
    items = default_stock()
    assert [(i.name, i.sell_in, i.quality) for i in items] == list(DEFAULT_STOCK)
    assert items[3].category is ItemCategory.LEGENDARY
    assert items[-1].category is ItemCategory.CONJURED


def test_item_from_dict_uses_catalogue():
    catalogue = Catalogue.from_dict({"names": {"aged": ["Fine Wine"]}})
    item = item_from_dict({"name": "Fine Wine", "sell_in": 3, "quality": 10}, catalogue)
    assert item.category is ItemCategory.AGED


def test_item_from_dict_explicit_category_wins():
    item = item_from_dict({"name": "Aged Brie", "sell_in": 3, "quality": 10, "category": "Ordinary"})
    assert item.category is ItemCategory.ORDINARY


@pytest.mark.parametrize(
    "entry",
    [
        {"name": "x", "sell_in": 1},
        {"sell_in": 1, "quality": 1},
        {"name": "x", "sell_in": "soon", "quality": 1},
        {"name": "x", "sell_in": 1, "quality": None},
        {"name": "x", "sell_in": 1, "quality": 1, "category": "mythic"},
        ["x", 1, 1],
        {"name": "x", "sell_in": 1, "quality": 3.7},
        {"name": "x", "sell_in": 1, "quality": True},
        {"name": "x", "sell_in": False, "quality": 1},
        {"name": "x", "sell_in": "1.5", "quality": 1},
    ],
)
def test_item_from_dict_rejects_bad_entries(entry):
    with pytest.raises(StockError):
        item_from_dict(entry)


def test_load_stock(tmp_path):
    path = tmp_path / "stock.yaml"
    path.write_text(
        textwrap.dedent(
            """
            - name: Aged Brie
              sell_in: 2
              quality: 0
            - name: Elixir of the Mongoose
              sell_in: 5
              quality: 7
            """
        ),
        encoding="utf-8",
    )
    items = load_stock(path)
    assert [(i.name, i.category) for i in items] == [
        ("Aged Brie", ItemCategory.AGED),
        ("Elixir of the Mongoose", ItemCategory.ORDINARY),
    ]


def test_load_stock_items_key(tmp_path):
    path = tmp_path / "stock.yaml"
    path.write_text("items:\n  - {name: Conjured, sell_in: 1, quality: 4}\n", encoding="utf-8")
    assert load_stock(path)[0].category is ItemCategory.CONJURED


def test_load_stock_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_stock(tmp_path / "missing.yaml")


def test_load_stock_not_a_list(tmp_path):
    path = tmp_path / "stock.yaml"
    path.write_text("just text\n", encoding="utf-8")
    with pytest.raises(StockError):
        load_stock(path)


def test_item_from_dict_accepts_whole_numbers():
    item = item_from_dict({"name": "x", "sell_in": "4", "quality": 7.0})
    assert (item.sell_in, item.quality) == (4, 7)
    assert isinstance(item.quality, int)


def test_load_stock_rejects_invalid_yaml(tmp_path):
    path = tmp_path / "stock.yaml"
    path.write_text("- {name: x, sell_in: 1\n", encoding="utf-8")
    with pytest.raises(StockError):
        load_stock(path)
