__all__ = [
    # SDK
    "Ucore",
    # Calls
    "CallOptions",
    "TrxResponse",
    "Provider",
    "Network",
    "create_provider",
    # Signatures
    "Signature",
    # Static reads
    "get_ucore_balance",
    "get_ucore_accrued",
    # Errors
    "UcoreError",
    "ArgumentError",
    "NetworkError",
    "ContractError",
    "RpcError",
]

from .client import Ucore
from .errors import ArgumentError, ContractError, NetworkError, RpcError, UcoreError
from .eth import CallOptions, Network, Provider, TrxResponse, create_provider
from .signing import Signature
from .token import get_ucore_accrued, get_ucore_balance
