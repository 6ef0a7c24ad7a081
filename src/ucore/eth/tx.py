"""
Transaction Builder - Build, sign, and send contract transactions.

Uses eth-account for signing and the httpx JSON-RPC client for sending.
Gas is paid by the provider's signer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from ..errors import UcoreError
from .abi import encode_call
from .provider import Provider, to_checksum_address
from .rpc import (
    call,
    estimate_gas,
    get_chain_id,
    get_gas_price,
    get_nonce,
    send_raw_transaction,
    wait_for_receipt,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallOptions:
    """
    Per-call options.

    Attributes:
        mantissa: Amounts are already scaled to the token's base unit
        gas_limit: Gas limit (default: node estimate)
        gas_price: Gas price in wei (default: eth_gasPrice)
        value: Native value in wei sent with the transaction
        wait: Block until the receipt is available
        timeout: Receipt wait timeout in seconds
        block: Block tag for reads
    """
    mantissa: bool = False
    gas_limit: Optional[int] = None
    gas_price: Optional[int] = None
    value: int = 0
    wait: bool = False
    timeout: int = 120
    block: str = "latest"


@dataclass(frozen=True)
class TrxResponse:
    tx_hash: str
    status: Optional[int] = None
    receipt: Optional[dict[str, Any]] = None


def read(
    contract_address: str,
    method: str,
    args: Optional[list] = None,
    *,
    abi: list,
    provider: Provider,
    options: Optional[CallOptions] = None,
) -> Any:
    """Call a view method through the provider (eth_call)."""
    options = options or CallOptions()
    return call(
        contract_address,
        method,
        args,
        abi=abi,
        rpc_url=provider.rpc_url,
        block=options.block,
    )


def build_trx(
    contract_address: str,
    method: str,
    args: list,
    *,
    abi: list,
    provider: Provider,
    options: Optional[CallOptions] = None,
) -> dict:
    """
    Build a contract call transaction (unsigned).

    Raises:
        UcoreError: If the provider has no signer
    """
    if provider.account is None:
        raise UcoreError("Provider has no signer. Pass a private_key or mnemonic to send transactions.")

    options = options or CallOptions()
    calldata = encode_call(abi, method, args)
    to = to_checksum_address(contract_address)
    sender = provider.account.address

    gas = options.gas_limit
    if gas is None:
        gas = estimate_gas(
            {"from": sender, "to": to, "data": calldata, "value": hex(options.value)},
            provider.rpc_url,
        )

    return {
        "to": to,
        "data": calldata,
        "value": options.value,
        "nonce": get_nonce(sender, provider.rpc_url),
        "gas": gas,
        "gasPrice": options.gas_price if options.gas_price is not None else get_gas_price(provider.rpc_url),
        "chainId": get_chain_id(provider.rpc_url),
    }


def sign_and_send(
    tx: dict,
    *,
    provider: Provider,
    wait: bool = False,
    timeout: int = 120,
) -> TrxResponse:
    """Sign a transaction with the provider's signer and send it."""
    signed = provider.account.sign_transaction(tx)
    raw_tx = "0x" + bytes(signed.raw_transaction).hex()

    tx_hash = send_raw_transaction(raw_tx, provider.rpc_url)

    if not wait:
        return TrxResponse(tx_hash=tx_hash)

    receipt = wait_for_receipt(tx_hash, provider.rpc_url, timeout=timeout)
    return TrxResponse(
        tx_hash=tx_hash,
        status=int(receipt.get("status", "0x0"), 16),
        receipt=receipt,
    )


def trx(
    contract_address: str,
    method: str,
    args: Optional[list] = None,
    *,
    abi: list,
    provider: Provider,
    options: Optional[CallOptions] = None,
) -> TrxResponse:
    """
    Build, sign, and send a contract call transaction.

    Args:
        contract_address: 0x-prefixed contract address
        method: Function name or full signature
        args: Function arguments
        abi: Contract ABI
        provider: Provider with a signer
        options: Call options

    Returns:
        TrxResponse with the transaction hash (and receipt if waited for)
    """
    options = options or CallOptions()
    tx = build_trx(
        contract_address,
        method,
        list(args or []),
        abi=abi,
        provider=provider,
        options=options,
    )
    response = sign_and_send(tx, provider=provider, wait=options.wait, timeout=options.timeout)
    logger.info("sent %s to %s: %s", method, tx["to"], response.tx_hash)
    return response
