# Area: Shared
"""
lotto_cli._shared.display — Terminal colors
============================================

ANSI color codes for command output. Colors are only applied when the
target stream is a terminal and NO_COLOR is unset, so piped or captured
output stays plain text.
"""

import os
from typing import TextIO

# ══════════════════════════════════════════════════════════════
# ANSI COLOR CODES
# ══════════════════════════════════════════════════════════════

CYAN = "\033[36m"        # Notices, field labels
YELLOW = "\033[33m"      # Section headers
GREEN = "\033[32m"       # Success
RED = "\033[31m"         # Errors
RESET = "\033[0m"


def supports_color(stream: TextIO) -> bool:
    """Check whether ANSI colors should be written to stream."""
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def paint(text: str, color: str, stream: TextIO) -> str:
    """Wrap text in color codes if stream supports them."""
    if not supports_color(stream):
        return text
    return f"{color}{text}{RESET}"
