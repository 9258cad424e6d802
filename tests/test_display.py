# Area: Shared Tests
"""Tests for terminal color handling."""

import io

from lotto_cli._shared.display import CYAN, RESET, paint, supports_color


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


class TestPaint:

    def test_plain_when_not_tty(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        assert paint("label:", CYAN, io.StringIO()) == "label:"

    def test_colored_on_tty(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        assert paint("label:", CYAN, FakeTTY()) == f"{CYAN}label:{RESET}"

    def test_no_color_env_disables(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert supports_color(FakeTTY()) is False

    def test_stream_without_isatty(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        assert supports_color(object()) is False
