# Area: Shared
"""
Shared utilities used by every command.

This package contains:
- Logging configuration
- Terminal color helpers
- Value formatters for status output
"""

from .logging_config import setup_logging
from .display import paint, supports_color
from .formatters import (
    currency_symbol,
    format_ether,
    format_difficulty,
    format_draw_time,
    format_time_until_draw,
)

__all__ = [
    "setup_logging",
    "paint",
    "supports_color",
    "currency_symbol",
    "format_ether",
    "format_difficulty",
    "format_draw_time",
    "format_time_until_draw",
]
