"""Utility modules for monadparse.

Provides:
- logger: get_logger for logging
"""

from monadparse.utils.logger import get_logger

__all__ = [
    "get_logger",
]
