"""
Gilded Rose - Configuration Module
==================================

Centralized configuration for the quality engine, the simulation
driver and logging.
"""

import logging
from pathlib import Path
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class RuleConfig:
    """Numeric constants used by the tick rules"""
    # Quality bounds for every non-legendary item
    min_quality: int = 0
    max_quality: int = 50

    # Legendary items are pinned to this value
    legendary_quality: int = 80

    # Backstage passes: +2 below the first threshold, +3 below the second
    backstage_double_days: int = 10
    backstage_triple_days: int = 5

    # Quality change per day, up or down, and how much faster it runs once past due
    base_rate: int = 1
    expired_multiplier: int = 2
    conjured_multiplier: int = 2

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{f.name} must be an integer, got {value!r}")
        if self.min_quality > self.max_quality:
            raise ValueError(
                f"min_quality ({self.min_quality}) exceeds max_quality ({self.max_quality})"
            )
        if self.backstage_triple_days > self.backstage_double_days:
            raise ValueError("backstage_triple_days must not exceed backstage_double_days")

    def clamp(self, quality: int) -> int:
        """Clamp a quality value to [min_quality, max_quality]"""
        return max(self.min_quality, min(self.max_quality, quality))


@dataclass
class Config:
    """
    Master configuration for the Gilded Rose engine

    Usage:
        config = Config(log_level='DEBUG')
        config.rules.max_quality
    """

    rules: RuleConfig = field(default_factory=RuleConfig)

    # Logging
    log_level: str = 'INFO'
    log_file: Optional[Path] = None

    # Simulation
    default_days: int = 2
    output_path: Optional[Path] = None

    def __post_init__(self):
        """Check values and convert string paths to Path objects"""
        if not isinstance(self.rules, RuleConfig):
            raise ValueError(f"rules must be a RuleConfig, got {self.rules!r}")
        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)
        if isinstance(self.output_path, str):
            self.output_path = Path(self.output_path)
        if isinstance(self.default_days, bool) or not isinstance(self.default_days, int):
            raise ValueError(f"default_days must be an integer, got {self.default_days!r}")
        if self.default_days < 0:
            raise ValueError(f"default_days must be >= 0, got {self.default_days}")

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for log_level"""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """
        Build a config from a plain mapping.

        Args:
            data: Top-level settings, with rule constants under 'rules'

        Returns:
            Configured Config instance
        """
        known = {f.name for f in fields(cls)}
        rule_names = {f.name for f in fields(RuleConfig)}

        kwargs = {}
        for key, value in data.items():
            if key not in known:
                logger.warning(f"Ignoring unknown config key: {key}")
                continue
            kwargs[key] = value

        rules = kwargs.pop('rules', None)
        if rules is None:
            rules = RuleConfig()
        elif isinstance(rules, dict):
            for key in rules:
                if key not in rule_names:
                    logger.warning(f"Ignoring unknown rule key: {key}")
            rules = RuleConfig(**{k: v for k, v in rules.items() if k in rule_names})
        elif not isinstance(rules, RuleConfig):
            raise ValueError(f"rules must be a mapping, got {rules!r}")

        return cls(rules=rules, **kwargs)


# Default configuration instance
DEFAULT_CONFIG = Config()
