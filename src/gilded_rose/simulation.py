"""
Gilded Rose - Simulation Driver
===============================

Runs the update engine over several days and records what happened.

The history is a DataFrame with one row per item per day. Day 0 is the
stock as it arrived; day N is the state after N updates.

Usage:
    items = default_inventory()
    history = simulate(items, days=5)
    print(render_report(history))
"""

import logging
from typing import List, Optional

import pandas as pd

from .categories import classify
from .config import Config, DEFAULT_CONFIG
from .engine import GildedRose
from .item import Item

logger = logging.getLogger(__name__)

# One row per item per day
HISTORY_COLUMNS = ['day', 'item_id', 'name', 'category', 'sell_in', 'quality']


def default_inventory() -> List[Item]:
    """The standard shop inventory used by the day-by-day report."""
    return [
        Item("+5 Dexterity Vest", 10, 20),
        Item("Aged Brie", 2, 0),
        Item("Elixir of the Mongoose", 5, 7),
        Item("Sulfuras, Hand of Ragnaros", 0, 80),
        Item("Sulfuras, Hand of Ragnaros", -1, 80),
        Item("Backstage passes to a TAFKAL80ETC concert", 15, 20),
        Item("Backstage passes to a TAFKAL80ETC concert", 10, 49),
        Item("Backstage passes to a TAFKAL80ETC concert", 5, 49),
        Item("Conjured Mana Cake", 3, 6),
    ]


def _snapshot(items: List[Item], day: int) -> List[dict]:
    return [
        {
            'day': day,
            'item_id': index,
            'name': item.name,
            'category': classify(item.name).value,
            'sell_in': item.sell_in,
            'quality': item.quality,
        }
        for index, item in enumerate(items)
    ]


def simulate(
    items: List[Item],
    days: int,
    config: Optional[Config] = None
) -> pd.DataFrame:
    """
    Advance an inventory by a number of days.

    Args:
        items: Items to update; mutated in place
        days: Number of daily updates to apply
        config: Engine configuration (defaults to DEFAULT_CONFIG)

    Returns:
        History DataFrame with columns day, item_id, name, category,
        sell_in, quality

    Raises:
        ValueError: if days is negative
    """
    if days < 0:
        raise ValueError(f"days must be >= 0, got {days}")

    engine = GildedRose(items, config or DEFAULT_CONFIG)
    logger.info(f"Simulating {days} day(s) for {len(items)} item(s)")

    rows = _snapshot(items, 0)
    for day in range(1, days + 1):
        engine.update_quality()
        rows.extend(_snapshot(items, day))

    return pd.DataFrame(rows, columns=HISTORY_COLUMNS)


def render_report(history: pd.DataFrame) -> str:
    """
    Render a history as the classic day-by-day text report.

    Each day reads:
        -------- day N --------
        name, sellIn, quality
        <name>, <sell_in>, <quality>
        ...
    followed by a blank line.
    """
    lines = []
    for day, frame in history.groupby('day', sort=True):
        lines.append(f"-------- day {day} --------")
        lines.append("name, sellIn, quality")
        for row in frame.sort_values('item_id').itertuples():
            lines.append(f"{row.name}, {row.sell_in}, {row.quality}")
        lines.append("")
    return "\n".join(lines)


def summarize(history: pd.DataFrame) -> pd.DataFrame:
    """
    Per-category summary of the last simulated day.

    Returns:
        DataFrame indexed by category with item_count, mean_quality,
        min_quality and max_quality
    """
    if history.empty:
        return pd.DataFrame(
            columns=['item_count', 'mean_quality', 'min_quality', 'max_quality']
        )

    last_day = history[history['day'] == history['day'].max()]
    summary = last_day.groupby('category').agg(
        item_count=('item_id', 'count'),
        mean_quality=('quality', 'mean'),
        min_quality=('quality', 'min'),
        max_quality=('quality', 'max'),
    )
    summary['mean_quality'] = summary['mean_quality'].round(2)
    return summary
