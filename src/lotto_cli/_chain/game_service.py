# Area: Chain
"""Game contract reads."""

from __future__ import annotations
import logging
from typing import Optional

from pydantic import ValidationError
from requests.exceptions import RequestException
from web3 import Web3
from web3.exceptions import BadFunctionCallOutput, ContractLogicError, Web3Exception

from ..errors import QueryError
from ..types import GameInfo
from .abi import GAME_ABI, GAME_INFO_FIELDS, GAME_INFO_FUNCTION

logger = logging.getLogger("lotto_cli.chain")

REVERTED = f'The contract function "{GAME_INFO_FUNCTION}" reverted.'
NO_DATA = (
    f'Returned no data for "{GAME_INFO_FUNCTION}". '
    "Is the contract deployed on this network?"
)
TRANSPORT_FAILED = "HTTP request to the RPC endpoint failed."


def get_current_game_info(w3: Web3, contract_address: str) -> GameInfo:
    """Call getCurrentGameInfo() on the game contract and decode the result."""
    logger.debug(f"Calling {GAME_INFO_FUNCTION}() on {contract_address}")

    try:
        contract = w3.eth.contract(
            address=Web3.to_checksum_address(contract_address),
            abi=GAME_ABI,
        )
        result = contract.functions.getCurrentGameInfo().call()
    except ContractLogicError as e:
        raise _query_error(e, contract_address, REVERTED) from e
    except BadFunctionCallOutput as e:
        raise _query_error(e, contract_address, NO_DATA) from e
    except (RequestException, OSError) as e:
        raise _query_error(e, contract_address, TRANSPORT_FAILED) from e
    except (Web3Exception, ValueError) as e:
        raise _query_error(e, contract_address) from e

    logger.debug(f"{GAME_INFO_FUNCTION}() returned {result!r}")

    values = tuple(result) if isinstance(result, (list, tuple)) else ()
    if len(values) != len(GAME_INFO_FIELDS):
        raise QueryError(
            f"Expected {len(GAME_INFO_FIELDS)} values from {GAME_INFO_FUNCTION}(), "
            f"got {result!r}",
            short_message=NO_DATA,
            function_name=GAME_INFO_FUNCTION,
            contract_address=contract_address,
        )

    try:
        return GameInfo.model_validate(dict(zip(GAME_INFO_FIELDS, values)))
    except ValidationError as e:
        raise _query_error(e, contract_address, NO_DATA) from e


def _query_error(error: Exception, contract_address: str, short_message: Optional[str] = None) -> QueryError:
    return QueryError(
        str(error) or error.__class__.__name__,
        short_message=short_message,
        function_name=GAME_INFO_FUNCTION,
        contract_address=contract_address,
    )
