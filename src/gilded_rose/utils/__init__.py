"""
Utils Package
=============
Utility functions for the Gilded Rose inventory engine.

Modules:
- logger: Centralized logging configuration
"""

from .logger import get_logger, log_history_info, LogContext

__all__ = [
    'get_logger',
    'log_history_info',
    'LogContext'
]
