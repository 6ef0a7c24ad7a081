"""
Ucore SDK errors.

Validation failures carry the name of the SDK function that rejected the
input, e.g. ``Ucore [enter_markets] | Argument `markets` must be ...``.
Failures reported by the node are wrapped in :class:`RpcError` with the
node's error object kept as-is.
"""

from __future__ import annotations

from typing import Any


class UcoreError(RuntimeError):
    exit_code: int = 1


class ArgumentError(UcoreError, ValueError):
    exit_code = 2


class NetworkError(UcoreError):
    exit_code = 3


class ContractError(UcoreError):
    exit_code = 4


class RpcError(UcoreError):
    exit_code = 5

    def __init__(self, error: Any):
        self.error = error
        super().__init__(f"RPC error: {error}")


def error_prefix(function_name: str) -> str:
    return f"Ucore [{function_name}] | "


__all__ = [
    "ArgumentError",
    "ContractError",
    "NetworkError",
    "RpcError",
    "UcoreError",
    "error_prefix",
]
