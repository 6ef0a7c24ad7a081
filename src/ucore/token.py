"""
UCORE - governance token operations.

Balances and accrued rewards can be read without a Ucore instance; the
remaining operations need one (and a signer for anything that writes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from . import eth
from .constants import abi
from .errors import ArgumentError, error_prefix
from .eth import CallOptions, Provider, TrxResponse
from .helpers import check_uint256, checksum_argument, contract_address, net_id, signer_address
from .signing import EIP712_DOMAIN_TYPE, Signature, sign, split_signature

if TYPE_CHECKING:
    from .client import Ucore


DELEGATION_TYPE = [
    {"name": "delegatee", "type": "address"},
    {"name": "nonce", "type": "uint256"},
    {"name": "expiry", "type": "uint256"},
]

DEFAULT_EXPIRY = 10_000_000_000


def get_ucore_balance(address: str, provider: Union[Provider, str] = "mainnet") -> str:
    """
    UCORE balance of an account, in the token's base unit.

    Args:
        address: Account to check
        provider: Network name, RPC URL or Provider

    Example:
        >>> Ucore.ucore.get_ucore_balance("0x2775...", "mainnet")
        '1000000000000000000'
    """
    address = checksum_argument(address, "get_ucore_balance")

    provider = eth.create_provider(provider)
    network = eth.get_provider_network(provider)

    result = eth.read(
        contract_address(network.name, "UCORE"),
        "balanceOf",
        [address],
        abi=abi["UCORE"],
        provider=provider,
    )
    return str(result)


def get_ucore_accrued(address: str, provider: Union[Provider, str] = "mainnet") -> str:
    """UCORE rewards accrued by an account and not yet claimed."""
    address = checksum_argument(address, "get_ucore_accrued")

    provider = eth.create_provider(provider)
    network = eth.get_provider_network(provider)

    lens = contract_address(network.name, "UcoreLens")
    ucore_token = contract_address(network.name, "UCORE")
    controller = contract_address(network.name, "Controller")

    result = eth.read(
        lens,
        "getXVSBalanceMetadataExt",
        [ucore_token, controller, address],
        abi=abi["UcoreLens"],
        provider=provider,
    )
    return str(result["allocated"])


def claim_ucore(ucore: "Ucore", options: Optional[CallOptions] = None) -> TrxResponse:
    """Claim all UCORE accrued by the signer across every market."""
    network = net_id(ucore)
    holder = signer_address(ucore, "claim_ucore")

    return eth.trx(
        contract_address(network.name, "Controller"),
        "claimUcore(address)",
        [holder],
        abi=abi["Controller"],
        provider=ucore._provider,
        options=options,
    )


def delegate(ucore: "Ucore", address: str, options: Optional[CallOptions] = None) -> TrxResponse:
    """Delegate the signer's UCORE votes to ``address``."""
    network = net_id(ucore)
    address = checksum_argument(address, "delegate")

    return eth.trx(
        contract_address(network.name, "UCORE"),
        "delegate",
        [address],
        abi=abi["UCORE"],
        provider=ucore._provider,
        options=options,
    )


def _is_signature(signature: Any) -> bool:
    if isinstance(signature, Signature):
        return bool(signature.v and signature.r and signature.s)
    if isinstance(signature, Mapping):
        return all(signature.get(part) for part in ("v", "r", "s"))
    return False


def delegate_by_sig(
    ucore: "Ucore",
    address: str,
    nonce: int,
    expiry: int,
    signature: Union[Signature, Mapping[str, Any], None] = None,
    options: Optional[CallOptions] = None,
) -> TrxResponse:
    """
    Delegate votes using a signature made by the token holder.

    The transaction can be sent by anyone; the signature decides whose
    votes move.

    Args:
        address: Delegatee
        nonce: Holder's current UCORE nonce
        expiry: Unix time after which the signature is void
        signature: v, r, s of the EIP-712 Delegation signature
    """
    network = net_id(ucore)
    prefix = error_prefix("delegate_by_sig")
    address = checksum_argument(address, "delegate_by_sig")

    nonce = check_uint256(nonce, "delegate_by_sig", "nonce")
    expiry = check_uint256(expiry, "delegate_by_sig", "expiry")

    if not _is_signature(signature):
        raise ArgumentError(
            prefix + "Argument `signature` must be an object that contains the v, r, and s pieces of an EIP-712 signature."
        )

    try:
        v, r, s = split_signature(signature)
    except (KeyError, TypeError, ValueError) as exc:
        raise ArgumentError(prefix + f"Argument `signature` is malformed: {exc}") from exc

    return eth.trx(
        contract_address(network.name, "UCORE"),
        "delegateBySig",
        [address, nonce, expiry, v, r, s],
        abi=abi["UCORE"],
        provider=ucore._provider,
        options=options,
    )


def create_delegate_signature(
    ucore: "Ucore",
    delegatee: str,
    expiry: int = DEFAULT_EXPIRY,
) -> Signature:
    """
    Sign a Delegation message for ``delegate_by_sig``.

    The signer's current nonce is read from the UCORE contract.
    """
    network = net_id(ucore)
    delegatee = checksum_argument(delegatee, "create_delegate_signature", "delegatee")
    expiry = check_uint256(expiry, "create_delegate_signature", "expiry")
    holder = signer_address(ucore, "create_delegate_signature")
    ucore_token = contract_address(network.name, "UCORE")

    nonce = int(eth.read(
        ucore_token,
        "nonces",
        [holder],
        abi=abi["UCORE"],
        provider=ucore._provider,
    ))

    domain = {
        "name": "Ucore",
        "chainId": network.id,
        "verifyingContract": ucore_token,
    }
    message = {"delegatee": delegatee, "nonce": nonce, "expiry": expiry}
    types = {
        "EIP712Domain": EIP712_DOMAIN_TYPE,
        "Delegation": DELEGATION_TYPE,
    }

    return sign(domain, "Delegation", message, types, ucore._provider.account)
