"""
Read-only access to an EVM node over JSON-RPC.
"""
import logging

import requests
from web3 import Web3
from web3.exceptions import Web3Exception

from ..core.errors import TransportError

logger = logging.getLogger(__name__)


class ChainClient:
    """Executes eth_call against a single node, shared by all requests."""

    def __init__(self, rpc_url: str, timeout: float = 10.0, block_identifier="latest"):
        self.rpc_url = rpc_url
        self.timeout = timeout
        self.block_identifier = block_identifier
        self.w3 = Web3(
            Web3.HTTPProvider(
                rpc_url,
                request_kwargs={"timeout": timeout},
                # Failures surface on the request that triggered them
                exception_retry_configuration=None,
            )
        )

    def is_connected(self) -> bool:
        try:
            return self.w3.is_connected()
        except requests.exceptions.RequestException as e:
            logger.warning(f"Node at {self.rpc_url} is not reachable: {e}")
            return False

    def call(self, contract_address: str, payload: bytes) -> bytes:
        """Run a non-state-changing call and return the raw return data."""
        tx = {"to": contract_address, "data": Web3.to_hex(payload)}
        try:
            result = self.w3.eth.call(tx, block_identifier=self.block_identifier)
        except requests.exceptions.Timeout as e:
            raise TransportError(
                f"Node did not respond within {self.timeout}s: {e}"
            ) from e
        except (requests.exceptions.RequestException, Web3Exception, ValueError) as e:
            raise TransportError(str(e)) from e
        return bytes(result)
