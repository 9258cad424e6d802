"""
lotto_cli.errors — Custom exception classes
============================================

Defines the exception hierarchy raised by the config, client and query
layers. Every error carries a full message and an optional short form
suited to a single terminal line.
"""

from __future__ import annotations
from typing import Optional


class LottoCliError(Exception):
    """Base exception for all lotto-cli errors."""

    def __init__(self, message: str, short_message: Optional[str] = None):
        self.message = message
        self.short_message = short_message
        super().__init__(message)

    @property
    def display_message(self) -> str:
        """Short form when present, full message otherwise."""
        return self.short_message or self.message


class ConfigError(LottoCliError):
    """Raised when settings are missing, unreadable or invalid."""
    pass


class ClientError(LottoCliError):
    """Raised when a chain client cannot be built for the configured network."""

    def __init__(
        self,
        message: str,
        short_message: Optional[str] = None,
        network: Optional[str] = None,
    ):
        self.network = network
        super().__init__(message, short_message)


class QueryError(LottoCliError):
    """Raised when a contract read fails or its result cannot be decoded."""

    def __init__(
        self,
        message: str,
        short_message: Optional[str] = None,
        function_name: Optional[str] = None,
        contract_address: Optional[str] = None,
    ):
        self.function_name = function_name
        self.contract_address = contract_address
        super().__init__(message, short_message)
