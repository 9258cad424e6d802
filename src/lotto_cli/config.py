# Area: Config
"""
lotto_cli.config — Settings model and persistence
==================================================

Settings are read from a JSON file and overridden by environment
variables (a .env file in the working directory is loaded first):

    LOTTO_CONFIG_PATH        Path to the JSON file (default ~/.lotto-cli/config.json)
    LOTTO_NETWORK            Network name, e.g. "worldchain"
    LOTTO_CONTRACT_ADDRESS   Game contract address
    LOTTO_RPC_URL            Custom RPC endpoint
    LOTTO_REQUEST_TIMEOUT    HTTP timeout in seconds
"""

from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, NamedTuple, Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator
from web3 import Web3

from .errors import ConfigError

logger = logging.getLogger("lotto_cli.config")

DEFAULT_CONFIG_PATH = Path.home() / ".lotto-cli" / "config.json"


class Network(NamedTuple):
    """A chain the CLI knows how to reach without a custom endpoint."""
    name: str
    chain_id: int
    rpc_url: str


NETWORKS: Dict[str, Network] = {
    "worldchain": Network("worldchain", 480, "https://worldchain-mainnet.g.alchemy.com/public"),
    "worldchain-sepolia": Network("worldchain-sepolia", 4801, "https://worldchain-sepolia.g.alchemy.com/public"),
    "base": Network("base", 8453, "https://mainnet.base.org"),
    "base-sepolia": Network("base-sepolia", 84532, "https://sepolia.base.org"),
    "localhost": Network("localhost", 31337, "http://127.0.0.1:8545"),
}

DEFAULT_NETWORK = "worldchain"

ENV_MAPPINGS = {
    "LOTTO_NETWORK": "network",
    "LOTTO_CONTRACT_ADDRESS": "contract_address",
    "LOTTO_RPC_URL": "rpc_url",
    "LOTTO_REQUEST_TIMEOUT": "request_timeout",
}


class Config(BaseModel):
    """Validated CLI settings."""

    network: str
    contract_address: str
    rpc_url: Optional[str] = None
    request_timeout: float = 10.0

    @field_validator("network")
    @classmethod
    def _normalize_network(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("network must not be empty")
        return value

    @field_validator("contract_address")
    @classmethod
    def _checksum_address(cls, value: str) -> str:
        value = value.strip()
        if not Web3.is_address(value):
            raise ValueError(f"'{value}' is not a valid contract address")
        return Web3.to_checksum_address(value)

    @field_validator("rpc_url")
    @classmethod
    def _blank_rpc_url(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None

    @field_validator("request_timeout")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("request_timeout must be positive")
        return value

    @property
    def known_network(self) -> Optional[Network]:
        return NETWORKS.get(self.network)

    @property
    def endpoint(self) -> Optional[str]:
        """RPC endpoint: explicit override, else the network default."""
        if self.rpc_url:
            return self.rpc_url
        network = self.known_network
        return network.rpc_url if network else None


def get_config_path(path: Union[str, Path, None] = None) -> Path:
    """Resolve the settings file location."""
    if path:
        return Path(path).expanduser()
    env_path = os.environ.get("LOTTO_CONFIG_PATH")
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH


def load_config(path: Union[str, Path, None] = None) -> Config:
    """
    Load settings from file and environment.

    Args:
        path: Settings file; defaults to get_config_path()

    Returns:
        Validated Config

    Raises:
        ConfigError: If no settings exist or they fail validation
    """
    load_dotenv()
    config_path = get_config_path(path)
    data: Dict[str, Any] = {}

    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(
                f"Could not read config file {config_path}: {e}",
                short_message=f"Config file {config_path} is unreadable",
            ) from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {config_path} must contain a JSON object")
        logger.debug(f"Loaded config file {config_path}")

    # Override with environment variables
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            data[config_key] = os.environ[env_key]
            logger.debug(f"{config_key} overridden by {env_key}")

    if not data:
        raise ConfigError(f"No configuration found at {config_path}")

    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(
            f"Invalid configuration: {_summarize(e)}",
            short_message=_summarize(e, first_only=True),
        ) from e


def save_config(config: Config, path: Union[str, Path, None] = None) -> Path:
    """Write settings as JSON, creating parent directories. Returns the path."""
    config_path = get_config_path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config.model_dump(exclude_none=True), f, indent=4)
    logger.debug(f"Saved config to {config_path}")
    return config_path


def _summarize(error: ValidationError, first_only: bool = False) -> str:
    """Flatten pydantic errors into 'field: message' text."""
    parts = []
    for item in error.errors():
        field = ".".join(str(p) for p in item["loc"]) or "config"
        parts.append(f"{field}: {item['msg']}")
        if first_only:
            break
    return "; ".join(parts)
