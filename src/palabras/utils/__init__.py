"""Utility modules for Palabras.

Provides:
- logger: get_logger for logging
"""

from palabras.utils.logger import get_logger

__all__ = [
    "get_logger",
]
