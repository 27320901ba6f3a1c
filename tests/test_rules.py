"""
Tick Rule Tests
===============
Category classification and the per-category single-day rules.
"""

import pytest

from gilded_rose import GildedRose, Item, ItemCategory, RuleConfig, classify, tick
from gilded_rose.rules import TICK_RULES, apply_rule


@pytest.mark.parametrize("name, expected", [
    ("Sulfuras, Hand of Ragnaros", ItemCategory.LEGENDARY),
    ("Conjured Mana Cake", ItemCategory.CONJURED),
    ("Aged Brie", ItemCategory.AGED_BRIE),
    ("Backstage passes to a TAFKAL80ETC concert", ItemCategory.BACKSTAGE_PASSES),
    ("+5 Dexterity Vest", ItemCategory.NORMAL),
    ("", ItemCategory.NORMAL),
    # Prefix match only, case sensitive
    ("aged brie", ItemCategory.NORMAL),
    ("Fine Aged Brie", ItemCategory.NORMAL),
    # Earlier prefixes win
    ("Conjured Aged Brie", ItemCategory.CONJURED),
])
def test_classify(name, expected):
    assert classify(name) is expected


def test_every_category_has_a_rule():
    assert set(TICK_RULES) == set(ItemCategory)


@pytest.mark.parametrize("name, sell_in, quality, expected", [
    ("Normal Item", 0, 0, (-1, 0)),
    ("Normal Item", -1, 20, (-2, 18)),
    ("Normal Item", 5, 10, (4, 9)),
    ("Normal Item", 1, 10, (0, 9)),
    ("Normal Item", 0, 1, (-1, 0)),
    # Out-of-range stock is pulled back into bounds
    ("Normal Item", 5, 60, (4, 50)),
    ("Sulfuras, Hand of Ragnaros", -1, 50, (-1, 80)),
    ("Sulfuras, Hand of Ragnaros", 10, 80, (10, 80)),
    ("Conjured Mana Cake", 1, 4, (0, 2)),
    ("Conjured Mana Cake", 0, 10, (-1, 6)),
    ("Conjured Mana Cake", -3, 3, (-4, 0)),
    ("Aged Brie", 2, 0, (1, 1)),
    ("Aged Brie", 0, 0, (-1, 2)),
    ("Aged Brie", -1, 49, (-2, 50)),
    ("Aged Brie", 5, 50, (4, 50)),
    ("Aged Brie", 2, -5, (1, 0)),
])
def test_single_tick(name, sell_in, quality, expected):
    item = tick(Item(name, sell_in, quality))
    assert (item.sell_in, item.quality) == expected


@pytest.mark.parametrize("sell_in, quality, expected", [
    (15, 0, (14, 1)),
    (11, 0, (10, 1)),
    (10, 0, (9, 2)),
    (6, 0, (5, 2)),
    (5, 0, (4, 3)),
    (1, 0, (0, 3)),
    (0, 50, (-1, 0)),
    (-5, 30, (-6, 0)),
    (3, 49, (2, 50)),
    (8, 49, (7, 50)),
])
def test_backstage_passes_thresholds(sell_in, quality, expected):
    item = tick(Item("Backstage passes to a TAFKAL80ETC concert", sell_in, quality))
    assert (item.sell_in, item.quality) == expected


def test_tick_returns_same_item():
    item = Item("Aged Brie", 2, 0)
    assert tick(item) is item
    assert item.name == "Aged Brie"


def test_tick_with_custom_rules():
    rules = RuleConfig(max_quality=100)
    item = tick(Item("Aged Brie", -1, 99), rules)
    assert item.quality == 100

    item = tick(Item("Normal Item", 5, 80), rules)
    assert item.quality == 79


def test_constructing_an_item_has_no_side_effects():
    item = Item("Sulfuras, Hand of Ragnaros", 3, 10)
    assert (item.sell_in, item.quality) == (3, 10)
    assert repr(item) == "Sulfuras, Hand of Ragnaros, 3, 10"
    assert item.to_dict() == {'name': "Sulfuras, Hand of Ragnaros", 'sell_in': 3, 'quality': 10}


def test_apply_rule_returns_category():
    item = Item("Backstage passes to a TAFKAL80ETC concert", 10, 0)
    assert apply_rule(item, RuleConfig()) is ItemCategory.BACKSTAGE_PASSES
    assert (item.sell_in, item.quality) == (9, 2)


def test_engine_and_tick_agree():
    stock = [("Aged Brie", -1, 10), ("Conjured Mana Cake", 0, 9),
             ("Backstage passes to a TAFKAL80ETC concert", 5, 40),
             ("Sulfuras, Hand of Ragnaros", 4, 3), ("Normal Item", 0, 7)]
    by_engine = [Item(*row) for row in stock]
    by_tick = [Item(*row) for row in stock]

    GildedRose(by_engine).update_quality()
    for item in by_tick:
        tick(item)

    assert by_engine == by_tick


def test_items_compare_by_value():
    assert Item("Aged Brie", 2, 0) == Item("Aged Brie", 2, 0)
    assert Item("Aged Brie", 2, 0) != Item("Aged Brie", 1, 0)
    assert str(Item("Aged Brie", 2, 0)) == "Aged Brie, 2, 0"


def test_base_rate_scales_growth_and_decay():
    rules = RuleConfig(base_rate=2)
    assert tick(Item("Aged Brie", 3, 10), rules).quality == 12
    assert tick(Item("Backstage passes to a TAFKAL80ETC concert", 3, 10), rules).quality == 16
    assert tick(Item("Normal Item", 3, 10), rules).quality == 8
