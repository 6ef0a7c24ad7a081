"""
EIP-712 typed-data signing for off-chain approvals.

Used for delegation (UCORE.delegateBySig) and governance votes
(GovernorAlpha.castVoteBySig). Hashing and signing are done by
eth-account; this module only assembles the typed-data payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from eth_account import Account
from eth_account.messages import encode_typed_data
from eth_account.signers.local import LocalAccount

from .config import load_private_key


@dataclass(frozen=True)
class Signature:
    """
    EIP-712 signature split into its on-chain parts.

    Attributes:
        v: Recovery id (27 or 28)
        r: 0x-prefixed 32-byte hex
        s: 0x-prefixed 32-byte hex
    """
    v: int
    r: str
    s: str


EIP712_DOMAIN_TYPE = [
    {"name": "name", "type": "string"},
    {"name": "chainId", "type": "uint256"},
    {"name": "verifyingContract", "type": "address"},
]


def typed_data(
    domain: Mapping[str, Any],
    primary_type: str,
    message: Mapping[str, Any],
    types: Mapping[str, list],
) -> dict[str, Any]:
    return {
        "types": dict(types),
        "primaryType": primary_type,
        "domain": dict(domain),
        "message": dict(message),
    }


def sign(
    domain: Mapping[str, Any],
    primary_type: str,
    message: Mapping[str, Any],
    types: Mapping[str, list],
    signer: LocalAccount,
) -> Signature:
    """Sign an EIP-712 message and split the signature into v, r, s."""
    signable = encode_typed_data(full_message=typed_data(domain, primary_type, message, types))
    signed = signer.sign_message(signable)
    return Signature(
        v=signed.v,
        r="0x" + signed.r.to_bytes(32, "big").hex(),
        s="0x" + signed.s.to_bytes(32, "big").hex(),
    )


def get_account(private_key: Optional[str] = None) -> LocalAccount:
    """
    Get an eth-account LocalAccount from a private key.

    Args:
        private_key: 0x-prefixed hex private key.
                     If None, loads from ~/.ucore/.env.
    """
    if private_key is None:
        private_key = load_private_key()
    return Account.from_key(private_key)


def get_address(private_key: Optional[str] = None) -> str:
    return get_account(private_key).address


def split_signature(signature: Union[Signature, Mapping[str, Any]]) -> tuple[int, bytes, bytes]:
    """Turn a Signature or ``{"v", "r", "s"}`` mapping into delegateBySig args."""
    if isinstance(signature, Signature):
        v, r, s = signature.v, signature.r, signature.s
    else:
        v, r, s = signature["v"], signature["r"], signature["s"]

    return _to_int(v), _to_bytes32(r), _to_bytes32(s)


def _to_int(value: Union[int, str]) -> int:
    if isinstance(value, str):
        value = int(value, 16) if value.startswith("0x") else int(value)
    elif not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"Expected an int or hex string, got {type(value).__name__}")
    if not 0 <= value <= 255:
        raise ValueError(f"v must fit in a uint8, got {value}")
    return value


def _to_bytes32(value: Union[bytes, str]) -> bytes:
    if isinstance(value, str):
        value = bytes.fromhex(value[2:] if value.startswith("0x") else value)
    elif not isinstance(value, (bytes, bytearray)):
        raise TypeError(f"Expected 32-byte hex or bytes, got {type(value).__name__}")
    if len(value) != 32:
        raise ValueError(f"Expected 32 bytes, got {len(value)}")
    return bytes(value)
