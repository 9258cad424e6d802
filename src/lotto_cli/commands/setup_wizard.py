# Area: Commands
"""
lotto_cli.commands.setup_wizard — Interactive settings setup
=============================================================

Prompts for network, contract address and an optional RPC endpoint,
validates them and writes the settings file. Press Enter to accept
default values shown in [brackets].
"""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from pydantic import ValidationError

from ..config import Config, DEFAULT_NETWORK, NETWORKS, save_config
from ..errors import ConfigError
from .._shared.display import GREEN, RED, paint

logger = logging.getLogger("lotto_cli.commands")


class SetupWizard:
    """Collect settings interactively and save them."""

    name = "setup"
    description = "Create or reset your settings"

    def __init__(
        self,
        config_path: Optional[Path] = None,
        input_fn: Callable[[str], str] = input,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self.config_path = config_path
        self.input_fn = input_fn
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    def prompt(self, question: str, default: str = "", required: bool = True) -> str:
        """Prompt user for input with optional default value."""
        if default:
            display = f"{question} [{default}]: "
        else:
            display = f"{question}: "

        while True:
            value = self.input_fn(display).strip()
            if not value and default:
                return default
            if value:
                return value
            if not required:
                return ""
            print("  This field is required. Please enter a value.", file=self.stdout)

    def print_header(self) -> None:
        out = self.stdout
        print(file=out)
        print("=" * 60, file=out)
        print("  lotto-cli - Settings Setup", file=out)
        print("=" * 60, file=out)
        print(file=out)
        print("Known networks:", file=out)
        for network in NETWORKS.values():
            print(f"  - {network.name} (chain id {network.chain_id})", file=out)
        print(file=out)

    def collect(self) -> Config:
        """Interactively collect and validate settings."""
        data = {
            "network": self.prompt("Network", default=DEFAULT_NETWORK),
            "contract_address": self.prompt("Game contract address"),
        }
        rpc_url = self.prompt("Custom RPC URL (blank for network default)", required=False)
        if rpc_url:
            data["rpc_url"] = rpc_url

        try:
            return Config.model_validate(data)
        except ValidationError as e:
            messages = "; ".join(item["msg"] for item in e.errors())
            raise ConfigError(f"Invalid settings: {messages}") from e

    def run(self) -> int:
        self.print_header()

        try:
            config = self.collect()
            path = save_config(config, self.config_path)
        except (KeyboardInterrupt, EOFError):
            print("\n\nSetup cancelled.", file=self.stdout)
            return 1
        except ConfigError as e:
            print(paint(f"\n❌ {e.display_message}", RED, self.stderr), file=self.stderr)
            return 1
        except OSError as e:
            logger.debug("Could not write settings", exc_info=True)
            print(paint(f"\n❌ Could not write settings: {e}", RED, self.stderr), file=self.stderr)
            return 1

        print(paint(f"\n✅ Configuration saved to {path}", GREEN, self.stdout), file=self.stdout)
        return 0
