"""
Lookup helpers exposed as ``Ucore.util``.
"""

from __future__ import annotations

from typing import Any, Optional

from . import constants
from .config import NETWORKS


def get_address(contract: str, network: str = "mainnet") -> Optional[str]:
    """
    Address of a contract or token on a network.

    Returns:
        Checksummed address, or None if not deployed there

    Example:
        >>> Ucore.util.get_address(Ucore.vSXP, "mainnet")
        '0x2fF3d0F6990a40261c66E1ff2017aCBc282EB6d0'
    """
    return constants.address.get(network, {}).get(contract)


def get_abi(contract: str) -> list[dict[str, Any]]:
    """
    ABI fragment used for a contract.

    vToken symbols map to the vToken ABI (vBNB has its own).

    Raises:
        KeyError: If no ABI is known for the contract
    """
    if contract in constants.abi:
        return constants.abi[contract]
    if contract in constants.vTokens:
        return constants.abi["vToken"]
    if contract in constants.underlyings.values() or contract == "UAI":
        return constants.abi["ERC20"]
    raise KeyError(f"No ABI for {contract}")


def get_net_name_with_chain_id(chain_id: int) -> str:
    """Network name for a chain id, ``"unknown"`` for unsupported chains."""
    return NETWORKS.get(chain_id, "unknown")
