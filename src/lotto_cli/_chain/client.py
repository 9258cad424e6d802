# Area: Chain
"""
lotto_cli._chain.client — Read-only chain client factory
=========================================================

Builds a web3 instance for the configured network. Construction never
touches the network; the first RPC request happens on the contract call.
"""

from __future__ import annotations
import logging
from urllib.parse import urlparse

from web3 import Web3
from web3.providers.rpc import HTTPProvider

from ..config import Config, NETWORKS
from ..errors import ClientError

logger = logging.getLogger("lotto_cli.chain")


def create_public_client(config: Config) -> Web3:
    """
    Create a read-only Web3 client from settings.

    Args:
        config: Validated settings

    Returns:
        Web3 bound to the network's HTTP endpoint

    Raises:
        ClientError: If the network is unknown and no rpc_url is set,
            or the endpoint is not an http(s) URL
    """
    endpoint = config.endpoint
    if not endpoint:
        supported = ", ".join(sorted(NETWORKS))
        raise ClientError(
            f"Unsupported network '{config.network}' and no rpc_url configured. "
            f"Supported networks: {supported}",
            short_message=f"Unsupported network: {config.network}",
            network=config.network,
        )

    parsed = urlparse(endpoint)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ClientError(
            f"RPC endpoint '{endpoint}' must be an http(s) URL",
            short_message=f"Invalid RPC URL: {endpoint}",
            network=config.network,
        )

    logger.debug(f"Using RPC endpoint {endpoint} for network {config.network}")
    return Web3(HTTPProvider(endpoint, request_kwargs={"timeout": config.request_timeout}))
