# Area: Commands
"""Show the current settings."""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from ..config import Config, get_config_path, load_config
from ..errors import ConfigError
from .._shared.display import CYAN, RED, YELLOW, paint
from .status import ERROR_LABEL

logger = logging.getLogger("lotto_cli.commands")

NOT_SET = "(not set)"
SETUP_HINT = "\n🔧 Run 'setup' to create or reset your settings."


class ShowConfigCommand:
    """Print network, contract address, endpoint and settings file location."""

    name = "config"
    description = "View the current settings"

    def __init__(
        self,
        config: Optional[Config] = None,
        config_loader: Callable[[], Config] = load_config,
        config_path: Optional[Path] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self.config = config
        self.config_loader = config_loader
        self.config_path = config_path
        self._stdout = stdout
        self._stderr = stderr

    def run(self) -> int:
        out = self._stdout or sys.stdout
        err = self._stderr or sys.stderr

        try:
            config = self.config if self.config is not None else self.config_loader()
        except ConfigError as e:
            logger.debug("config failed: ConfigError", exc_info=True)
            print(f"{paint(ERROR_LABEL, RED, err)} {e.display_message}", file=err)
            print(paint(SETUP_HINT, RED, err), file=err)
            return 1

        fields = [
            ("🌐 Network", config.network),
            ("📜 Contract Address", config.contract_address),
            ("🔗 RPC URL", config.endpoint or NOT_SET),
            ("📁 Config File", str(self.config_path or get_config_path())),
        ]

        print(paint("\n⚙️ Current Configuration:", YELLOW, out), file=out)
        for label, value in fields:
            print(f"{paint(label + ':', CYAN, out)} {value}", file=out)
        return 0
