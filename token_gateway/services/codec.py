"""
ABI codec for contract calls: builds call data and decodes return data.
"""
from typing import Any, Sequence

from eth_abi import decode as abi_decode
from eth_abi import encode as abi_encode
from eth_abi.exceptions import DecodingError as AbiDecodingError
from eth_abi.exceptions import EncodingError as AbiEncodingError
from web3 import Web3

from ..core.errors import DecodingError, EncodingError


def _collapse_type(param: dict) -> str:
    """Canonical type string of an ABI parameter, expanding tuples."""
    abi_type = param["type"]
    if abi_type.startswith("tuple"):
        inner = ",".join(_collapse_type(c) for c in param.get("components", []))
        return f"({inner}){abi_type[len('tuple'):]}"
    return abi_type


class ContractCodec:
    """Encodes and decodes calls for the functions declared in an ABI."""

    def __init__(self, abi: Sequence[dict]):
        self._functions = {}
        for entry in abi:
            if entry.get("type", "function") != "function":
                continue
            input_types = tuple(_collapse_type(p) for p in entry.get("inputs", []))
            output_types = tuple(_collapse_type(p) for p in entry.get("outputs", []))
            signature = f"{entry['name']}({','.join(input_types)})"
            self._functions[entry["name"]] = (
                Web3.keccak(text=signature)[:4],
                input_types,
                output_types,
            )

    @property
    def function_names(self) -> frozenset:
        return frozenset(self._functions)

    def encode(self, function_name: str, args: Sequence[Any] = ()) -> bytes:
        if function_name not in self._functions:
            raise EncodingError(f"Unknown function: {function_name}", function=function_name)
        selector, input_types, _ = self._functions[function_name]

        if len(args) != len(input_types):
            raise EncodingError(
                f"{function_name} expects {len(input_types)} argument(s), got {len(args)}",
                function=function_name,
            )

        try:
            return bytes(selector) + abi_encode(list(input_types), list(args))
        except (AbiEncodingError, TypeError, ValueError) as e:
            raise EncodingError(
                f"Could not encode arguments for {function_name}: {e}",
                function=function_name,
            ) from e

    def decode(self, function_name: str, data: bytes) -> Any:
        """
        Decode return data for a function.

        A function with a single output returns the bare value, otherwise a tuple.
        """
        if function_name not in self._functions:
            raise DecodingError(f"Unknown function: {function_name}", function=function_name)
        _, _, output_types = self._functions[function_name]

        if not data:
            raise DecodingError(
                f"Empty return data for {function_name}", function=function_name
            )

        try:
            values = abi_decode(list(output_types), bytes(data))
        except (AbiDecodingError, TypeError, ValueError) as e:
            raise DecodingError(
                f"Could not decode result of {function_name}: {e}",
                function=function_name,
            ) from e

        if len(values) == 1:
            return values[0]
        return values
