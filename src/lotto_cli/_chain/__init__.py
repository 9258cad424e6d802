# Area: Chain
"""
Blockchain access for lotto-cli.

This package contains:
- Read-only Web3 client construction
- Game contract ABI and reads
"""

from .client import create_public_client
from .game_service import get_current_game_info
from .abi import GAME_ABI

__all__ = [
    "create_public_client",
    "get_current_game_info",
    "GAME_ABI",
]
