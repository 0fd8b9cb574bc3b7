import pytest
from eth_abi import encode
from fastapi.testclient import TestClient
from web3 import Web3

from token_gateway.core.abi import load_contract_abi
from token_gateway.main import create_app
from token_gateway.services.codec import ContractCodec
from token_gateway.services.gateway import TokenGateway

TOKEN_ADDRESS = "0x68E1Acf6b9f56267adDf65e1249B6aE321c0560E"
HOLDER = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"

SIGNATURES = ["name()", "symbol()", "totalSupply()", "balanceOf(address)", "decimals()"]
SELECTORS = {bytes(Web3.keccak(text=sig)[:4]): sig.split("(")[0] for sig in SIGNATURES}


class StubChainClient:
    """
    Stands in for a node. `results` maps a function name to the raw bytes the
    node returns, an exception to raise, or a callable taking the payload.
    """

    def __init__(self, results=None, connected=True):
        self.results = dict(results or {})
        self.connected = connected
        self.calls = []

    def is_connected(self):
        return self.connected

    def call(self, contract_address, payload):
        function_name = SELECTORS[bytes(payload[:4])]
        self.calls.append((contract_address, function_name))

        result = self.results[function_name]
        if isinstance(result, Exception):
            raise result
        if callable(result):
            return result(payload)
        return result


def abi_string(value):
    return encode(["string"], [value])


def abi_uint(value):
    return encode(["uint256"], [value])


@pytest.fixture
def codec():
    return ContractCodec(load_contract_abi())


@pytest.fixture
def stub_node():
    return StubChainClient(
        {
            "name": abi_string("Test Token"),
            "symbol": abi_string("TOK"),
            "totalSupply": abi_uint(10**24),
            "balanceOf": abi_uint(1500),
            "decimals": encode(["uint8"], [18]),
        }
    )


@pytest.fixture
def gateway(codec, stub_node):
    return TokenGateway(codec, stub_node, TOKEN_ADDRESS)


@pytest.fixture
def client(gateway):
    app = create_app(gateway=gateway)
    with TestClient(app) as c:
        yield c
