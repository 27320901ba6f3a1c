"""
Inventory Invariant Validation
==============================
Checks items and simulation histories against the inventory invariants.

Design Principles:
- Never raise on a violation - collect it and log it
- Return structured validation results
- Only post-tick states are held to the quality bounds; an inventory
  may be stocked with any starting values
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from .categories import ItemCategory, classify
from .config import Config, DEFAULT_CONFIG
from .item import Item
from .simulation import HISTORY_COLUMNS

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """
    Structured result of a validation operation.

    Attributes
    ----------
    is_valid : bool
        Overall validation status
    errors : List[str]
        Invariant violations
    warnings : List[str]
        Non-critical issues to be aware of
    info : Dict[str, Any]
        Additional validation metadata
    """
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    info: Dict[str, Any] = field(default_factory=dict)

    def add_error(self, message: str) -> None:
        """Add an error and mark as invalid."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning (doesn't affect validity)."""
        self.warnings.append(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "is_valid": self.is_valid,
            "errors": self.errors,
            "warnings": self.warnings,
            "info": self.info
        }


class InventoryValidator:
    """
    Validates inventory state against the quality invariants.

    Usage
    -----
    validator = InventoryValidator()
    result = validator.validate_items(items)

    if not result.is_valid:
        print(f"Validation failed: {result.errors}")
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or DEFAULT_CONFIG

    def validate_items(self, items: Iterable[Item]) -> ValidationResult:
        """
        Validate the current state of a list of items.

        Parameters
        ----------
        items : iterable of Item
            Items after at least one tick

        Returns
        -------
        ValidationResult
            One error per item that breaks an invariant
        """
        rules = self.config.rules
        result = ValidationResult()
        count = 0

        for item in items:
            count += 1
            if classify(item.name) is ItemCategory.LEGENDARY:
                if item.quality != rules.legendary_quality:
                    result.add_error(
                        f"Legendary item '{item.name}' has quality {item.quality}, "
                        f"expected {rules.legendary_quality}"
                    )
            elif not rules.min_quality <= item.quality <= rules.max_quality:
                result.add_error(
                    f"Item '{item.name}' has quality {item.quality} outside "
                    f"[{rules.min_quality}, {rules.max_quality}]"
                )

        result.info["item_count"] = count
        self._log(result, "items")
        return result

    def validate_history(self, history: pd.DataFrame) -> ValidationResult:
        """
        Validate a simulation history table.

        Parameters
        ----------
        history : pd.DataFrame
            Output of simulation.simulate()

        Returns
        -------
        ValidationResult
            Structured validation result with errors/warnings
        """
        rules = self.config.rules
        result = ValidationResult()
        result.info["row_count"] = len(history)

        missing = [col for col in HISTORY_COLUMNS if col not in history.columns]
        if missing:
            result.add_error(f"Missing required history columns: {missing}")
            self._log(result, "history")
            return result

        if history.empty:
            result.add_warning("History is empty")
            self._log(result, "history")
            return result

        result.info["days"] = int(history['day'].max())

        ticked = history[history['day'] >= 1]
        is_legendary = ticked['category'] == ItemCategory.LEGENDARY.value

        out_of_bounds = ticked[
            ~is_legendary
            & ((ticked['quality'] < rules.min_quality) | (ticked['quality'] > rules.max_quality))
        ]
        for row in out_of_bounds.itertuples():
            result.add_error(
                f"Day {row.day}: '{row.name}' quality {row.quality} outside "
                f"[{rules.min_quality}, {rules.max_quality}]"
            )

        wrong_legendary = ticked[is_legendary & (ticked['quality'] != rules.legendary_quality)]
        for row in wrong_legendary.itertuples():
            result.add_error(
                f"Day {row.day}: legendary '{row.name}' quality {row.quality}, "
                f"expected {rules.legendary_quality}"
            )

        # sell_in steps between consecutive days
        ordered = history.sort_values(['item_id', 'day'])
        steps = ordered.groupby('item_id')['sell_in'].diff()
        expected = ordered['category'].map(
            lambda c: 0 if c == ItemCategory.LEGENDARY.value else -1
        )
        bad_steps = ordered[steps.notna() & (steps != expected)]
        for row in bad_steps.itertuples():
            result.add_error(
                f"Day {row.day}: '{row.name}' sell_in moved to {row.sell_in} "
                f"by an unexpected step"
            )

        self._log(result, "history")
        return result

    def _log(self, result: ValidationResult, subject: str) -> None:
        if result.is_valid:
            logger.debug(f"Validation PASSED for {subject}")
        else:
            logger.error(f"Validation FAILED for {subject}: {len(result.errors)} error(s)")

        for warning in result.warnings:
            logger.warning(warning)
