# Area: Shared Tests
"""Tests for CLI parsing and dispatch."""

import json
import logging
from unittest.mock import MagicMock, patch

import pytest

from lotto_cli.cli import create_parser, main
from lotto_cli.config import ENV_MAPPINGS


def _subparser(name):
    parser = create_parser()
    action = next(a for a in parser._actions if a.dest == "command")
    return action.choices[name]


class TestParser:

    def test_status_description(self):
        assert _subparser("status").description == "Get the status of the current game"

    def test_status_takes_no_arguments(self):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["status", "--json"])
        assert exc_info.value.code == 2

    def test_command_required(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args([])

    def test_verbose_flag(self):
        args = create_parser().parse_args(["-v", "status"])
        assert args.verbose is True
        assert args.command == "status"


class TestMain:
    """Tests for main() dispatch and exit codes."""

    @patch("lotto_cli.cli.setup_logging")
    def test_returns_command_exit_code(self, mock_logging):
        fake = MagicMock()
        fake.description = "fake"
        fake.return_value.run.return_value = 1

        with patch.dict("lotto_cli.cli.COMMANDS", {"status": fake}):
            assert main(["status"]) == 1

        fake.return_value.run.assert_called_once_with()
        mock_logging.assert_called_once_with(verbose=False, log_file_path=None)

    @patch("lotto_cli.cli.setup_logging")
    def test_log_file_from_env(self, mock_logging, monkeypatch):
        monkeypatch.setenv("LOTTO_LOG_FILE", "/tmp/lotto.log")
        fake = MagicMock()
        fake.description = "fake"
        fake.return_value.run.return_value = 0

        with patch.dict("lotto_cli.cli.COMMANDS", {"config": fake}):
            assert main(["-v", "config"]) == 0

        mock_logging.assert_called_once_with(verbose=True, log_file_path="/tmp/lotto.log")


class TestEndToEnd:
    """Runs real commands against settings files, without a network."""

    @pytest.fixture(autouse=True)
    def isolated(self, monkeypatch, tmp_path):
        for env_key in ENV_MAPPINGS:
            monkeypatch.delenv(env_key, raising=False)
        monkeypatch.delenv("LOTTO_LOG_FILE", raising=False)
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("LOTTO_CONFIG_PATH", str(tmp_path / "config.json"))
        monkeypatch.setattr("lotto_cli.config.load_dotenv", lambda: None)
        yield
        logging.getLogger("lotto_cli").handlers.clear()

    def test_status_without_settings_exits_1(self, capsys):
        assert main(["status"]) == 1

        captured = capsys.readouterr()
        assert "🔍 Fetching current game status..." in captured.out
        assert "❌ Error: No configuration found" in captured.err
        assert "🔧 Run 'config' to view them and 'setup' to reset them." in captured.err

    def test_status_unsupported_network_exits_1(self, capsys, tmp_path):
        (tmp_path / "config.json").write_text(json.dumps({
            "network": "mystery",
            "contract_address": "0x5fbdb2315678afecb367f032d93f642f64180aa3",
        }), encoding="utf-8")

        assert main(["status"]) == 1
        assert "❌ Error: Unsupported network: mystery" in capsys.readouterr().err

    def test_config_shows_file(self, capsys, tmp_path):
        (tmp_path / "config.json").write_text(json.dumps({
            "network": "base",
            "contract_address": "0x5fbdb2315678afecb367f032d93f642f64180aa3",
        }), encoding="utf-8")

        assert main(["config"]) == 0

        out = capsys.readouterr().out
        assert "🌐 Network: base" in out
        assert f"📁 Config File: {tmp_path / 'config.json'}" in out
