"""
lotto_cli — On-chain lottery game CLI
======================================

Reads the current game round from an Ethereum-compatible lottery
contract and prints it to the terminal.

Quick Start:
    $ lotto setup
    $ lotto status

From Python:
    from lotto_cli import StatusCommand, load_config
    exit_code = StatusCommand(config=load_config()).run()

Errors
------
Every failure is a LottoCliError subclass with a full `message` and an
optional `short_message`; `display_message` picks the short one first:

    from lotto_cli import ConfigError, ClientError, QueryError
"""

from .commands import StatusCommand, ShowConfigCommand, SetupWizard
from .config import Config, Network, NETWORKS, load_config, save_config
from .errors import (
    LottoCliError,
    ConfigError,
    ClientError,
    QueryError,
)
from .types import GameInfo

__all__ = [
    # Commands
    "StatusCommand",
    "ShowConfigCommand",
    "SetupWizard",
    # Settings
    "Config",
    "Network",
    "NETWORKS",
    "load_config",
    "save_config",
    # Errors
    "LottoCliError",
    "ConfigError",
    "ClientError",
    "QueryError",
    # Types
    "GameInfo",
]
__version__ = "1.0.0"
