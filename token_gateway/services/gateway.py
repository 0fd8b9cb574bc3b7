"""
Token gateway - composes the codec and chain client into the token read operations.
"""
import logging
from dataclasses import dataclass
from typing import Any, Protocol

from web3 import Web3

from ..core.errors import TransportError, ValidationError
from .codec import ContractCodec

logger = logging.getLogger(__name__)


class CallExecutor(Protocol):
    def is_connected(self) -> bool: ...

    def call(self, contract_address: str, payload: bytes) -> bytes: ...


@dataclass(frozen=True)
class TokenDetails:
    name: str
    symbol: str


def is_valid_address(address: str) -> bool:
    """Hex address check; mixed-case input must carry a valid checksum."""
    if not Web3.is_address(address):
        return False
    body = address[2:] if address.lower().startswith("0x") else address
    if body in (body.lower(), body.upper()):
        return True
    return Web3.is_checksum_address(address)


class TokenGateway:
    """Read operations against one fixed ERC-20 contract."""

    def __init__(self, codec: ContractCodec, client: CallExecutor, contract_address: str):
        if not is_valid_address(contract_address):
            raise ValueError(f"Invalid contract address: {contract_address}")
        self.codec = codec
        self.client = client
        self.contract_address = Web3.to_checksum_address(contract_address)

    def _call(self, function_name: str, *args: Any) -> Any:
        payload = self.codec.encode(function_name, args)
        logger.debug(f"Calling {function_name} on {self.contract_address}")
        try:
            data = self.client.call(self.contract_address, payload)
        except TransportError as e:
            # The client has no notion of functions; tag it for error reporting
            if e.function is None:
                e.function = function_name
            raise
        return self.codec.decode(function_name, data)

    def get_token_details(self) -> TokenDetails:
        name = self._call("name")
        symbol = self._call("symbol")
        return TokenDetails(name=name, symbol=symbol)

    def get_total_supply(self) -> int:
        return self._call("totalSupply")

    def get_balance(self, address: str) -> int:
        if not address:
            raise ValidationError("Missing address parameter", function="balanceOf")
        if not is_valid_address(address):
            raise ValidationError(f"Invalid address: {address}", function="balanceOf")
        return self._call("balanceOf", Web3.to_checksum_address(address))

    def get_decimals(self) -> int:
        return self._call("decimals")
