# Area: Commands
"""
lotto_cli.commands.status — Current game status
================================================

Loads settings, opens a read-only client, reads the current game from
the contract and prints five fields:

    🎮 Current Game Round: 42
    🎯 Difficulty: 1,000
    💰 Prize Pool: 1.5 WLD ✨
    📅 Next Possible Draw Time: Tue Nov 14 22:13:20 2023
    ⏳ Time Until Draw: 2h 15m

Any ConfigError, ClientError or QueryError ends the command with exit
code 1 after an error notice on stderr. Nothing is retried.
"""

from __future__ import annotations
import logging
import sys
from typing import Callable, List, Optional, TextIO, Tuple

from web3 import Web3

from ..config import Config, load_config
from ..errors import LottoCliError
from ..types import GameInfo
from .._chain import create_public_client, get_current_game_info
from .._shared.display import CYAN, RED, YELLOW, paint
from .._shared.formatters import (
    currency_symbol,
    format_difficulty,
    format_draw_time,
    format_ether,
    format_time_until_draw,
)

logger = logging.getLogger("lotto_cli.commands")

# Status field labels
GAME_ROUND_LABEL = "🎮 Current Game Round"
DIFFICULTY_LABEL = "🎯 Difficulty"
PRIZE_POOL_LABEL = "💰 Prize Pool"
NEXT_DRAW_LABEL = "📅 Next Possible Draw Time"
TIME_UNTIL_DRAW_LABEL = "⏳ Time Until Draw"

FETCHING_NOTICE = "\n🔍 Fetching current game status..."
STATUS_HEADER = "\n📊 Status:"
ERROR_LABEL = "\n❌ Error:"
SETTINGS_HINT = (
    "\n⚠️ Make sure your settings are correct."
    "\n🔧 Run 'config' to view them and 'setup' to reset them."
)


def build_status_fields(game_info: GameInfo, network: str) -> List[Tuple[str, str]]:
    """Ordered (label, value) pairs for a game snapshot."""
    prize_pool = f"{format_ether(game_info.prize_pool)} {currency_symbol(network)} ✨"
    return [
        (GAME_ROUND_LABEL, str(game_info.game_number)),
        (DIFFICULTY_LABEL, format_difficulty(game_info.difficulty)),
        (PRIZE_POOL_LABEL, prize_pool),
        (NEXT_DRAW_LABEL, format_draw_time(game_info.draw_time)),
        (TIME_UNTIL_DRAW_LABEL, format_time_until_draw(game_info.time_until_draw)),
    ]


class StatusCommand:
    """
    Print the status of the current game.

    Usage
    -----
        exit_code = StatusCommand().run()

    Collaborators can be swapped for testing or embedding:

        StatusCommand(config=my_config, game_info_reader=fake_reader).run()
    """

    name = "status"
    description = "Get the status of the current game"

    def __init__(
        self,
        config: Optional[Config] = None,
        config_loader: Callable[[], Config] = load_config,
        client_factory: Callable[[Config], Web3] = create_public_client,
        game_info_reader: Callable[[Web3, str], GameInfo] = get_current_game_info,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self.config = config
        self.config_loader = config_loader
        self.client_factory = client_factory
        self.game_info_reader = game_info_reader
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    def run(self) -> int:
        """Fetch and print the game status. Returns the process exit code."""
        print(paint(FETCHING_NOTICE, CYAN, self.stdout), file=self.stdout)

        try:
            config = self.config if self.config is not None else self.config_loader()
            client = self.client_factory(config)
            game_info = self.game_info_reader(client, config.contract_address)
        except LottoCliError as e:
            self._report_error(e)
            return 1

        self._display_game_status(game_info, config.network)
        return 0

    def _display_game_status(self, game_info: GameInfo, network: str) -> None:
        print(paint(STATUS_HEADER, YELLOW, self.stdout), file=self.stdout)
        for label, value in build_status_fields(game_info, network):
            print(f"{paint(label + ':', CYAN, self.stdout)} {value}", file=self.stdout)

    def _report_error(self, error: LottoCliError) -> None:
        logger.debug(f"status failed: {error.__class__.__name__}", exc_info=True)
        print(f"{paint(ERROR_LABEL, RED, self.stderr)} {error.display_message}", file=self.stderr)
        print(paint(SETTINGS_HINT, RED, self.stderr), file=self.stderr)
