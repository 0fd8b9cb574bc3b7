import json

import pytest

from token_gateway.core.abi import ERC20_ABI, load_contract_abi, parse_abi


def test_builtin_abi_declares_erc20_reads():
    names = {entry["name"] for entry in load_contract_abi()}
    assert names == {"name", "symbol", "totalSupply", "balanceOf", "decimals"}


def test_parse_artifact_with_abi_key():
    artifact = json.dumps({"contractName": "Token", "abi": json.loads(ERC20_ABI)})
    assert len(parse_abi(artifact)) == 5


def test_load_from_file(tmp_path):
    path = tmp_path / "Token.json"
    path.write_text(ERC20_ABI)
    assert load_contract_abi(str(path)) == parse_abi(ERC20_ABI)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_contract_abi(str(tmp_path / "missing.json"))


@pytest.mark.parametrize("raw", ['{"bytecode": "0x"}', "[1, 2]", "not json"])
def test_malformed_abi(raw):
    with pytest.raises(ValueError):
        parse_abi(raw)
