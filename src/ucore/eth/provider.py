"""
Provider - where calls go and who signs them.

A provider is an RPC endpoint plus an optional eth-account signer. Network
names ("mainnet", "testnet") resolve to their configured RPC URL; any
other string is used as the RPC URL itself.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from eth_account import Account
from eth_account.signers.local import LocalAccount
from eth_utils import is_hex_address
from eth_utils import to_checksum_address as _checksum

from ..config import NETWORKS, get_rpc_url, is_network_name
from .rpc import get_chain_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Network:
    id: int
    name: str


@dataclass(frozen=True)
class Provider:
    """
    Resolved provider.

    Attributes:
        rpc_url: JSON-RPC endpoint
        account: Signer for write calls, if any
        name: Network name the provider was created from, if any
    """
    rpc_url: str
    account: Optional[LocalAccount] = None
    name: Optional[str] = None

    @property
    def address(self) -> Optional[str]:
        return self.account.address if self.account is not None else None


def to_checksum_address(address: str) -> str:
    """
    Convert an address to EIP-55 checksummed format.

    Raises:
        ValueError: If ``address`` is not a 20-byte hex address
    """
    if not isinstance(address, str) or not is_hex_address(address):
        raise ValueError(f"Not a valid Ethereum address: {address!r}")
    return _checksum(address)


def create_provider(
    provider: Union[Provider, str, None] = "mainnet",
    private_key: Optional[str] = None,
    mnemonic: Optional[str] = None,
) -> Provider:
    """
    Create a provider.

    Args:
        provider: Network name, RPC URL, or an existing Provider
        private_key: 0x-prefixed hex key to sign write calls with
        mnemonic: BIP-39 phrase, used when no private key is given

    Returns:
        Provider instance
    """
    if isinstance(provider, Provider):
        if private_key is None and mnemonic is None:
            return provider
        rpc_url, name = provider.rpc_url, provider.name
    else:
        provider = provider or "mainnet"
        if is_network_name(provider):
            rpc_url, name = get_rpc_url(provider), provider
        else:
            rpc_url, name = provider, None

    account = None
    if private_key:
        account = Account.from_key(private_key)
    elif mnemonic:
        Account.enable_unaudited_hdwallet_features()
        account = Account.from_mnemonic(mnemonic)

    return Provider(rpc_url=rpc_url, account=account, name=name)


def get_provider_network(provider: Provider) -> Network:
    """Identify the chain a provider points to."""
    chain_id = get_chain_id(provider.rpc_url)
    network = Network(id=chain_id, name=NETWORKS.get(chain_id, "unknown"))
    logger.debug("provider %s is on %s (%d)", provider.rpc_url, network.name, network.id)
    return network
