# Area: Shared Tests
"""Tests for the error hierarchy."""

from lotto_cli.errors import LottoCliError, ConfigError, ClientError, QueryError


class TestDisplayMessage:
    """Tests for short/long message selection."""

    def test_short_message_preferred(self):
        error = QueryError("RPC said a great many things", short_message="Call reverted.")
        assert error.display_message == "Call reverted."

    def test_falls_back_to_message(self):
        error = ConfigError("No configuration found at /tmp/x.json")
        assert error.short_message is None
        assert error.display_message == "No configuration found at /tmp/x.json"

    def test_empty_short_message_falls_back(self):
        error = ClientError("Unsupported network 'x'", short_message="")
        assert error.display_message == "Unsupported network 'x'"

    def test_str_is_full_message(self):
        error = QueryError("full text", short_message="short")
        assert str(error) == "full text"


class TestHierarchy:
    """All CLI errors share one base so commands can catch them together."""

    def test_subclasses(self):
        for cls in (ConfigError, ClientError, QueryError):
            assert issubclass(cls, LottoCliError)

    def test_query_error_context(self):
        error = QueryError(
            "boom",
            function_name="getCurrentGameInfo",
            contract_address="0xabc",
        )
        assert error.function_name == "getCurrentGameInfo"
        assert error.contract_address == "0xabc"

    def test_client_error_network(self):
        error = ClientError("bad", network="mystery")
        assert error.network == "mystery"
