"""
Eth - On-chain interaction layer for the Ucore SDK.

Provides the JSON-RPC client, ABI fragments, providers and transaction
dispatch. Uses httpx + eth-account + eth-abi instead of web3.py.
"""

from .abi import load_abi
from .provider import (
    Network,
    Provider,
    create_provider,
    get_provider_network,
    to_checksum_address,
)
from .rpc import rpc_call
from .tx import CallOptions, TrxResponse, read, trx

__all__ = [
    "CallOptions",
    "Network",
    "Provider",
    "TrxResponse",
    "create_provider",
    "get_provider_network",
    "load_abi",
    "read",
    "rpc_call",
    "to_checksum_address",
    "trx",
]
