# Area: Shared
"""Value formatters for game status output."""

from datetime import datetime
from decimal import Decimal

from web3 import Web3

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400

INVALID_DATE = "Invalid Date"


def currency_symbol(network: str) -> str:
    """Native currency label shown next to amounts."""
    return "WLD" if network == "worldchain" else "ETH"


def format_ether(wei: int) -> str:
    """Convert a wei amount to a plain decimal ether string.

    No exponent notation and no trailing zeros: 10**18 -> "1",
    1 -> "0.000000000000000001".
    """
    text = format(Decimal(Web3.from_wei(int(wei), "ether")), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_difficulty(difficulty: int) -> str:
    """Difficulty with thousands separators, e.g. 1000000 -> "1,000,000"."""
    return f"{int(difficulty):,}"


def format_draw_time(draw_time: int) -> str:
    """Unix seconds rendered in local time with the locale's date/time format.

    Timestamps the platform cannot represent render as INVALID_DATE.
    """
    try:
        return datetime.fromtimestamp(int(draw_time)).strftime("%c")
    except (OverflowError, OSError, ValueError):
        return INVALID_DATE


def format_time_until_draw(seconds: int) -> str:
    """Human-readable countdown, e.g. "2h 15m". Zero or less is "now"."""
    seconds = int(seconds)
    if seconds <= 0:
        return "now"

    days, remainder = divmod(seconds, SECONDS_PER_DAY)
    hours, remainder = divmod(remainder, SECONDS_PER_HOUR)
    minutes, secs = divmod(remainder, SECONDS_PER_MINUTE)

    if days:
        return f"{days}d {hours}h {minutes}m"
    if hours:
        return f"{hours}h {minutes}m"
    if minutes:
        return f"{minutes}m {secs}s"
    return f"{secs}s"
