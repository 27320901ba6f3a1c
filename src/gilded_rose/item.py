"""
Item record.

A plain data holder. The engine mutates ``sell_in`` and ``quality`` in
place; ``name`` is only read.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(repr=False)
class Item:
    """A single inventory item"""
    name: str
    sell_in: int
    quality: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert item to dictionary"""
        return {
            'name': self.name,
            'sell_in': self.sell_in,
            'quality': self.quality,
        }

    def __repr__(self):
        return f"{self.name}, {self.sell_in}, {self.quality}"
