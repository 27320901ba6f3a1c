"""
Gilded Rose - Inventory Quality Engine
======================================

Daily sell-in and quality updates for the Gilded Rose inventory.

Modules:
- config: Rule constants and logging settings
- item: The item record
- categories: Name-based category classification
- rules: Per-category tick rules
- engine: The daily update over a collection of items
- validators: Inventory invariant checks
- simulation: Multi-day runs, history tables and reports

Usage:
    from gilded_rose import GildedRose, Item

    items = [Item("Aged Brie", 2, 0)]
    GildedRose(items).update_quality()
"""

__version__ = "1.0.0"
__author__ = "Gilded Rose Team"

from .config import Config, RuleConfig, DEFAULT_CONFIG
from .item import Item
from .categories import ItemCategory, classify
from .rules import tick
from .engine import GildedRose
from .validators import InventoryValidator, ValidationResult
from .simulation import simulate, render_report, summarize, default_inventory

__all__ = [
    'Config',
    'RuleConfig',
    'DEFAULT_CONFIG',
    'Item',
    'ItemCategory',
    'classify',
    'tick',
    'GildedRose',
    'InventoryValidator',
    'ValidationResult',
    'simulate',
    'render_report',
    'summarize',
    'default_inventory',
]
