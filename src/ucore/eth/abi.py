"""
ABI Loader - Loads contract ABI fragments shipped with the SDK.

The fragments live in ucore/abis/<Contract>.json and only contain the
methods the SDK calls. Encoding and decoding go through eth-abi.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from eth_abi import decode, encode
from eth_hash.auto import keccak


ABI_DIR = Path(__file__).resolve().parent.parent / "abis"


@lru_cache(maxsize=16)
def load_abi(contract_name: str) -> list[dict[str, Any]]:
    """
    Load the ABI fragment for a contract.

    Args:
        contract_name: Contract name (e.g., "Controller", "UCORE")

    Returns:
        ABI as a list of dicts

    Raises:
        FileNotFoundError: If no fragment ships for that contract
    """
    abi_path = ABI_DIR / f"{contract_name}.json"

    if not abi_path.exists():
        raise FileNotFoundError(f"ABI not found: {abi_path}")

    with abi_path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _keccak256(data: bytes) -> bytes:
    # Keccak-256, not NIST SHA3-256.
    return keccak(data)


def abi_type(param: dict[str, Any]) -> str:
    """Canonical type string of an ABI parameter, expanding tuples."""
    typ = param["type"]
    if typ.startswith("tuple"):
        inner = ",".join(abi_type(c) for c in param.get("components", []))
        return f"({inner}){typ[len('tuple'):]}"
    return typ


def function_signature(func: dict[str, Any]) -> str:
    input_types = [abi_type(inp) for inp in func.get("inputs", [])]
    return f"{func['name']}({','.join(input_types)})"


def find_function(abi: list[dict[str, Any]], method: str) -> dict[str, Any]:
    """
    Find a function entry by name or by full signature.

    ``"claimUcore"`` returns the first overload; ``"claimUcore(address)"``
    returns exactly that overload.
    """
    wanted = method.replace(" ", "")
    by_signature = "(" in wanted

    for entry in abi:
        if entry.get("type") != "function":
            continue
        if by_signature:
            if function_signature(entry) == wanted:
                return entry
        elif entry.get("name") == wanted:
            return entry

    raise ValueError(f"Function {method} not found in ABI")


def function_selector(func: dict[str, Any]) -> bytes:
    return _keccak256(function_signature(func).encode("utf-8"))[:4]


def encode_call(abi: list[dict[str, Any]], method: str, args: list) -> str:
    """
    ABI-encode a function call.

    Args:
        abi: Contract ABI
        method: Function name or full signature
        args: Function arguments

    Returns:
        0x-prefixed hex encoded calldata
    """
    func = find_function(abi, method)
    input_types = [abi_type(inp) for inp in func.get("inputs", [])]

    if len(args) != len(input_types):
        raise ValueError(
            f"{function_signature(func)} expects {len(input_types)} arguments, got {len(args)}"
        )

    encoded_args = encode(input_types, list(args)) if args else b""
    return "0x" + function_selector(func).hex() + encoded_args.hex()


def _named(param: dict[str, Any], value: Any) -> Any:
    # Struct outputs come back as plain tuples; give them their field names.
    if param["type"] == "tuple" and param.get("components"):
        return {
            comp.get("name") or str(i): _named(comp, item)
            for i, (comp, item) in enumerate(zip(param["components"], value))
        }
    return value


def decode_result(abi: list[dict[str, Any]], method: str, data: str) -> Any:
    """
    ABI-decode a function call result.

    Returns:
        None for functions without outputs, the single value for one
        output (a dict for a struct), otherwise a tuple
    """
    func = find_function(abi, method)
    outputs = func.get("outputs", [])
    if not outputs:
        return None

    raw = bytes.fromhex(data[2:]) if data.startswith("0x") else bytes.fromhex(data)
    decoded = decode([abi_type(out) for out in outputs], raw)
    values = tuple(_named(out, value) for out, value in zip(outputs, decoded))

    if len(values) == 1:
        return values[0]
    return values
