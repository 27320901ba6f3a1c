"""
Gilded Rose - Tick Rules
========================

One function per item category, each applying a single day to one item
in place. ``TICK_RULES`` maps every category to its rule and ``tick``
dispatches through it.

Order of operations for every dated category: decrement ``sell_in``
first, then decide the quality change from the new value.
"""

from typing import Callable, Dict, Optional

from .categories import ItemCategory, classify
from .config import RuleConfig, DEFAULT_CONFIG
from .item import Item

TickRule = Callable[[Item, RuleConfig], None]


def _degrade(item: Item, rules: RuleConfig, multiplier: int) -> None:
    item.sell_in -= 1
    step = rules.base_rate * multiplier
    if item.sell_in < 0:
        step *= rules.expired_multiplier
    item.quality = rules.clamp(item.quality - step)


def tick_normal(item: Item, rules: RuleConfig) -> None:
    """Lose 1 quality a day, 2 once past due."""
    _degrade(item, rules, 1)


def tick_conjured(item: Item, rules: RuleConfig) -> None:
    """Degrade at twice the normal rate."""
    _degrade(item, rules, rules.conjured_multiplier)


def tick_legendary(item: Item, rules: RuleConfig) -> None:
    # sell_in is never touched
    item.quality = rules.legendary_quality


def tick_aged_brie(item: Item, rules: RuleConfig) -> None:
    """Gain 1 quality a day, 2 once past due."""
    item.sell_in -= 1
    step = rules.base_rate
    if item.sell_in < 0:
        step *= rules.expired_multiplier
    item.quality = rules.clamp(item.quality + step)


def tick_backstage_passes(item: Item, rules: RuleConfig) -> None:
    """
    Gain value as the concert approaches, drop to zero after it.

    On the decremented sell_in: below 0 the pass is worthless, below
    ``backstage_triple_days`` it gains 3, below ``backstage_double_days``
    it gains 2, otherwise 1.
    """
    item.sell_in -= 1
    if item.sell_in < 0:
        item.quality = 0
        return

    if item.sell_in < rules.backstage_triple_days:
        step = 3
    elif item.sell_in < rules.backstage_double_days:
        step = 2
    else:
        step = 1
    item.quality = rules.clamp(item.quality + step * rules.base_rate)


TICK_RULES: Dict[ItemCategory, TickRule] = {
    ItemCategory.NORMAL: tick_normal,
    ItemCategory.CONJURED: tick_conjured,
    ItemCategory.LEGENDARY: tick_legendary,
    ItemCategory.AGED_BRIE: tick_aged_brie,
    ItemCategory.BACKSTAGE_PASSES: tick_backstage_passes,
}


def apply_rule(item: Item, rules: RuleConfig) -> ItemCategory:
    """Classify an item, apply its category rule and return the category."""
    category = classify(item.name)
    TICK_RULES[category](item, rules)
    return category


def tick(item: Item, rules: Optional[RuleConfig] = None) -> Item:
    """
    Advance one item by one day.

    Args:
        item: The item to update in place
        rules: Rule constants (defaults to DEFAULT_CONFIG.rules)

    Returns:
        The same item, for chaining
    """
    apply_rule(item, rules or DEFAULT_CONFIG.rules)
    return item
