"""
JSON-RPC Client.

Thin httpx wrapper: one POST per call, node errors surfaced untouched as
RpcError. Supports read-only contract calls, chain/account queries and
transaction receipt polling.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Optional

import httpx

from ..errors import ContractError, RpcError
from .abi import decode_result, encode_call, find_function

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


def rpc_call(method: str, params: list, rpc_url: str) -> Any:
    """
    Make a JSON-RPC call.

    Args:
        method: RPC method name (e.g., "eth_call")
        params: RPC parameters
        rpc_url: RPC endpoint URL

    Returns:
        Result field from the RPC response

    Raises:
        RpcError: If the node answers with an error object
        httpx.HTTPStatusError: On a non-2xx HTTP response
    """
    payload = {
        "jsonrpc": "2.0",
        "method": method,
        "params": params,
        "id": 1,
    }
    logger.debug("rpc %s -> %s", method, rpc_url)

    with httpx.Client(timeout=DEFAULT_TIMEOUT) as client:
        response = client.post(rpc_url, json=payload)
        response.raise_for_status()
        data = response.json()

    if "error" in data:
        raise RpcError(data["error"])

    return data.get("result")


def get_chain_id(rpc_url: str) -> int:
    return int(rpc_call("eth_chainId", [], rpc_url), 16)


def call(
    contract_address: str,
    method: str,
    args: Optional[list] = None,
    *,
    abi: list,
    rpc_url: str,
    block: str = "latest",
) -> Any:
    """
    Read from a smart contract (eth_call).

    Args:
        contract_address: 0x-prefixed contract address
        method: Function name or full signature
        args: Function arguments (default: [])
        abi: Contract ABI
        rpc_url: RPC endpoint URL
        block: Block tag or hex block number

    Returns:
        Decoded return value(s)

    Raises:
        ContractError: If a method with outputs returns no data (no
            contract at the address)
    """
    calldata = encode_call(abi, method, args or [])

    result = rpc_call(
        "eth_call",
        [{"to": contract_address, "data": calldata}, block],
        rpc_url,
    )

    if result is None or result == "0x":
        if find_function(abi, method).get("outputs"):
            raise ContractError(f"{method} on {contract_address} returned no data")
        return None

    return decode_result(abi, method, result)


def get_nonce(address: str, rpc_url: str) -> int:
    result = rpc_call("eth_getTransactionCount", [address, "pending"], rpc_url)
    return int(result, 16)


def get_gas_price(rpc_url: str) -> int:
    result = rpc_call("eth_gasPrice", [], rpc_url)
    return int(result, 16)


def estimate_gas(tx: dict, rpc_url: str) -> int:
    """Ask the node for a gas estimate of an unsigned call."""
    result = rpc_call("eth_estimateGas", [tx], rpc_url)
    return int(result, 16)


def send_raw_transaction(raw_tx: str, rpc_url: str) -> str:
    """
    Send a signed raw transaction.

    Returns:
        Transaction hash (0x-prefixed hex)
    """
    return rpc_call("eth_sendRawTransaction", [raw_tx], rpc_url)


def wait_for_receipt(
    tx_hash: str,
    rpc_url: str,
    timeout: int = 120,
    poll_interval: float = 2.0,
) -> dict:
    """
    Wait for a transaction receipt.

    Raises:
        TimeoutError: If receipt not found within timeout
    """
    start = time.time()
    while time.time() - start < timeout:
        receipt = rpc_call("eth_getTransactionReceipt", [tx_hash], rpc_url)
        if receipt is not None:
            return receipt
        time.sleep(poll_interval)

    raise TimeoutError(f"Transaction {tx_hash} not confirmed within {timeout}s")
