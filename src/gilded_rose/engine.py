"""
Gilded Rose - Update Engine
===========================

Applies one day to every item of an inventory.
"""

import logging
from typing import List, Optional

from .config import Config, DEFAULT_CONFIG
from .item import Item
from .rules import apply_rule

logger = logging.getLogger(__name__)


class GildedRose:
    """
    Daily quality update over a collection of items.

    Usage:
        items = [Item("Aged Brie", 2, 0)]
        GildedRose(items).update_quality()
    """

    def __init__(self, items: List[Item], config: Optional[Config] = None):
        """
        Args:
            items: Items to update; mutated in place by update_quality
            config: Engine configuration (defaults to DEFAULT_CONFIG)
        """
        self.items = items
        self.config = config or DEFAULT_CONFIG

    def update_quality(self) -> None:
        """Advance every item by one day."""
        rules = self.config.rules
        for item in self.items:
            before = (item.sell_in, item.quality)
            category = apply_rule(item, rules)
            logger.debug(
                f"{item.name} [{category.value}]: sell_in {before[0]} -> {item.sell_in}, "
                f"quality {before[1]} -> {item.quality}"
            )
