"""Utility modules for Resalta.

Provides:
- text: escape_html for renderers
- logger: get_logger for logging
"""

from resalta.utils.logger import get_logger
from resalta.utils.text import escape_html

__all__ = [
    "escape_html",
    "get_logger",
]
