# Area: Commands Tests
"""Tests for the config command."""

import io
from pathlib import Path
from unittest.mock import Mock

from lotto_cli.commands.show_config import ShowConfigCommand
from lotto_cli.config import Config, NETWORKS
from lotto_cli.errors import ConfigError

ADDRESS = "0x5fbdb2315678afecb367f032d93f642f64180aa3"


class TestShowConfig:

    def test_prints_settings(self):
        stdout = io.StringIO()
        config = Config(network="worldchain", contract_address=ADDRESS)
        command = ShowConfigCommand(
            config=config,
            config_path=Path("/home/me/.lotto-cli/config.json"),
            stdout=stdout,
        )

        assert command.run() == 0

        lines = stdout.getvalue().splitlines()
        assert lines[1] == "⚙️ Current Configuration:"
        assert "🌐 Network: worldchain" in lines
        assert f"📜 Contract Address: {config.contract_address}" in lines
        assert f"🔗 RPC URL: {NETWORKS['worldchain'].rpc_url}" in lines
        assert "📁 Config File: /home/me/.lotto-cli/config.json" in lines

    def test_unknown_network_endpoint_not_set(self):
        stdout = io.StringIO()
        command = ShowConfigCommand(
            config=Config(network="mystery", contract_address=ADDRESS),
            config_path=Path("c.json"),
            stdout=stdout,
        )
        command.run()
        assert "🔗 RPC URL: (not set)" in stdout.getvalue().splitlines()

    def test_config_error(self):
        stdout, stderr = io.StringIO(), io.StringIO()
        loader = Mock(side_effect=ConfigError("No configuration found at /x.json"))
        command = ShowConfigCommand(config_loader=loader, stdout=stdout, stderr=stderr)

        assert command.run() == 1

        err_lines = stderr.getvalue().splitlines()
        assert "❌ Error: No configuration found at /x.json" in err_lines
        assert "🔧 Run 'setup' to create or reset your settings." in err_lines
        assert stdout.getvalue() == ""
