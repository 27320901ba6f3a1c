"""
Gilded Rose - Item Categories
=============================

Every item belongs to exactly one category, decided by the start of its
name. Prefixes are checked in order and the first match wins; anything
unmatched is a normal item.

Categories:
- LEGENDARY: "Sulfuras..." - never sold, never degrades
- CONJURED: "Conjured..." - degrades twice as fast
- AGED_BRIE: "Aged Brie..." - improves with age
- BACKSTAGE_PASSES: "Backstage passes..." - improves until the concert, then worthless
- NORMAL: everything else
"""

from enum import Enum
from typing import Tuple


class ItemCategory(Enum):
    """Behavior categories for inventory items"""
    NORMAL = "normal"
    CONJURED = "conjured"
    LEGENDARY = "legendary"
    AGED_BRIE = "aged_brie"
    BACKSTAGE_PASSES = "backstage_passes"


# Precedence order matters
CATEGORY_PREFIXES: Tuple[Tuple[str, ItemCategory], ...] = (
    ("Sulfuras", ItemCategory.LEGENDARY),
    ("Conjured", ItemCategory.CONJURED),
    ("Aged Brie", ItemCategory.AGED_BRIE),
    ("Backstage passes", ItemCategory.BACKSTAGE_PASSES),
)


def classify(name: str) -> ItemCategory:
    """Map an item name to its category"""
    for prefix, category in CATEGORY_PREFIXES:
        if name.startswith(prefix):
            return category
    return ItemCategory.NORMAL
