"""
Centralized Logging Configuration
==================================
Provides consistent logging for the command-line runner and scripts.

Library modules log through ``logging.getLogger(__name__)``; the runner
attaches handlers with ``get_logger`` so their records show up.

Usage:
    from gilded_rose.utils.logger import get_logger
    logger = get_logger("gilded_rose")
    logger.info("Simulation started")
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional, Union


def get_logger(
    name: str,
    log_file: Optional[Union[str, Path]] = None,
    level: int = logging.INFO
) -> logging.Logger:
    """
    Create and configure a logger instance.
    
    Parameters
    ----------
    name : str
        Logger name (typically the package name or __name__)
    log_file : str or Path, optional
        Path to log file. If None, logs only to console.
    level : int
        Logging level (default: INFO)
    
    Returns
    -------
    logging.Logger
        Configured logger instance
    
    Example
    -------
    >>> logger = get_logger("gilded_rose")
    >>> logger.info("Simulating 2 day(s)")
    2026-10-19 10:30:00 | INFO     | gilded_rose | Simulating 2 day(s)
    """
    logger = logging.getLogger(name)
    
    # Avoid adding duplicate handlers
    if logger.handlers:
        logger.setLevel(level)
        return logger
    
    logger.setLevel(level)
    
    formatter = logging.Formatter(
        fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    
    # Console handler on stderr so the report on stdout stays clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    
    logger.propagate = False
    
    return logger


def log_history_info(logger: logging.Logger, history) -> None:
    """
    Log summary information about a simulation history.
    
    Parameters
    ----------
    logger : logging.Logger
        Logger instance
    history : pd.DataFrame
        Output of simulation.simulate()
    """
    if history.empty:
        logger.warning("History is empty")
        return
    
    days = int(history['day'].max())
    items = history['item_id'].nunique()
    logger.info(f"History: {len(history):,} rows, {items} item(s) over {days} day(s)")
    
    expired = history[(history['day'] == days) & (history['sell_in'] < 0)]
    if len(expired) > 0:
        logger.info(f"{len(expired)} item(s) past their sell-by date on day {days}")


class LogContext:
    """
    Context manager for structured logging of operations.
    
    Usage:
        with LogContext(logger, "Simulating inventory"):
            # ... operation code ...
    """
    
    def __init__(self, logger: logging.Logger, operation: str):
        self.logger = logger
        self.operation = operation
        self.start_time = None
    
    def __enter__(self):
        self.start_time = datetime.now()
        self.logger.info(f"Starting: {self.operation}")
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        elapsed = (datetime.now() - self.start_time).total_seconds()
        
        if exc_type is None:
            self.logger.info(f"Completed: {self.operation} ({elapsed:.2f}s)")
        else:
            self.logger.error(f"Failed: {self.operation} ({elapsed:.2f}s) - {exc_val}")
        
        # Don't suppress exceptions
        return False
