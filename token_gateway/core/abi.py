"""
Contract interface description for the ERC-20 token.
"""
import json
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

ERC20_ABI = """[
  {"constant": true, "inputs": [], "name": "name", "outputs": [{"name": "", "type": "string"}], "payable": false, "stateMutability": "view", "type": "function"},
  {"constant": true, "inputs": [], "name": "symbol", "outputs": [{"name": "", "type": "string"}], "payable": false, "stateMutability": "view", "type": "function"},
  {"constant": true, "inputs": [], "name": "totalSupply", "outputs": [{"name": "", "type": "uint256"}], "payable": false, "stateMutability": "view", "type": "function"},
  {"constant": true, "inputs": [{"name": "", "type": "address"}], "name": "balanceOf", "outputs": [{"name": "", "type": "uint256"}], "payable": false, "stateMutability": "view", "type": "function"},
  {"constant": true, "inputs": [], "name": "decimals", "outputs": [{"name": "", "type": "uint8"}], "payable": false, "stateMutability": "view", "type": "function"}
]"""


def parse_abi(raw: str) -> tuple:
    """
    Parse an ABI JSON document into an immutable tuple of entries.

    Accepts either a bare ABI list or a compiler artifact holding an "abi" key.
    Raises ValueError if the document is not usable.
    """
    data = json.loads(raw)
    if isinstance(data, dict):
        data = data.get("abi")
    if not isinstance(data, list):
        raise ValueError("ABI must be a JSON list of entries")

    entries = []
    for entry in data:
        if not isinstance(entry, dict) or "type" not in entry:
            raise ValueError(f"Malformed ABI entry: {entry!r}")
        entries.append(entry)
    return tuple(entries)


def load_contract_abi(abi_path: Optional[str] = None) -> tuple:
    """Load the ABI from a file when configured, otherwise the built-in ERC-20 ABI."""
    if abi_path is None:
        return parse_abi(ERC20_ABI)

    path = Path(abi_path)
    if not path.exists():
        raise FileNotFoundError(f"ABI not found at {path}")

    logger.info(f"Loading contract ABI from {path}")
    with open(path) as f:
        return parse_abi(f.read())
