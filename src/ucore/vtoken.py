"""
vToken - supply, redeem, borrow and repay in Ucore Protocol markets.

Amounts are given in the underlying asset's units (or vToken units for
``redeem`` with a vToken symbol) and scaled to base units unless
``options.mantissa`` is set. The BNB market takes native value instead of
an ERC-20 approval.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any, Optional

from . import eth
from .constants import abi, underlyings, vTokens
from .errors import ArgumentError, error_prefix
from .eth import CallOptions, TrxResponse
from .helpers import checksum_argument, contract_address, net_id, to_mantissa, vtoken_symbol

if TYPE_CHECKING:
    from .client import Ucore

logger = logging.getLogger(__name__)

NATIVE = "BNB"


def _market(asset: Any, function_name: str) -> tuple[str, str]:
    if not isinstance(asset, str) or asset == "":
        raise ArgumentError(error_prefix(function_name) + "Argument `asset` must be a non-empty string of an asset symbol.")
    vtoken = vtoken_symbol(asset, function_name)
    return vtoken, underlyings[vtoken]


def _vtoken_abi(underlying: str) -> list:
    return abi["vBNB"] if underlying == NATIVE else abi["vToken"]


def _approve(
    ucore: "Ucore",
    network: str,
    underlying: str,
    spender: str,
    amount: int,
    options: CallOptions,
) -> TrxResponse:
    # The market pulls the tokens in the same block; wait for the approval to land first.
    logger.debug("approving %s %s for %s", amount, underlying, spender)
    return eth.trx(
        contract_address(network, underlying),
        "approve",
        [spender, amount],
        abi=abi["ERC20"],
        provider=ucore._provider,
        options=replace(options, wait=True, value=0),
    )


def supply(
    ucore: "Ucore",
    asset: str,
    amount: Any,
    no_approve: bool = False,
    options: Optional[CallOptions] = None,
) -> TrxResponse:
    """
    Supply an asset to its market and receive vTokens.

    Args:
        asset: Underlying symbol (``"USDC"``) or its vToken (``"vUSDC"``)
        amount: Amount of the underlying to supply
        no_approve: Skip the ERC-20 approval transaction
        options: Call options
    """
    network = net_id(ucore)
    options = options or CallOptions()
    vtoken, underlying = _market(asset, "supply")
    amount = to_mantissa(amount, ucore.decimals[underlying], "supply", mantissa=options.mantissa)
    market = contract_address(network.name, vtoken)

    if underlying == NATIVE:
        return eth.trx(
            market,
            "mint",
            [],
            abi=abi["vBNB"],
            provider=ucore._provider,
            options=replace(options, value=amount),
        )

    if not no_approve:
        _approve(ucore, network.name, underlying, market, amount, options)

    return eth.trx(
        market,
        "mint",
        [amount],
        abi=abi["vToken"],
        provider=ucore._provider,
        options=options,
    )


def redeem(
    ucore: "Ucore",
    asset: str,
    amount: Any,
    options: Optional[CallOptions] = None,
) -> TrxResponse:
    """
    Redeem from a market.

    With a vToken symbol the amount is in vTokens (``redeem``); with an
    underlying symbol it is in the underlying (``redeemUnderlying``).
    """
    network = net_id(ucore)
    options = options or CallOptions()

    if isinstance(asset, str) and asset in vTokens:
        vtoken, underlying = asset, underlyings[asset]
        method, scale = "redeem", ucore.decimals[asset]
    else:
        vtoken, underlying = _market(asset, "redeem")
        method, scale = "redeemUnderlying", ucore.decimals[underlying]

    amount = to_mantissa(amount, scale, "redeem", mantissa=options.mantissa)

    return eth.trx(
        contract_address(network.name, vtoken),
        method,
        [amount],
        abi=_vtoken_abi(underlying),
        provider=ucore._provider,
        options=options,
    )


def borrow(
    ucore: "Ucore",
    asset: str,
    amount: Any,
    options: Optional[CallOptions] = None,
) -> TrxResponse:
    """Borrow an asset against entered collateral."""
    network = net_id(ucore)
    options = options or CallOptions()
    vtoken, underlying = _market(asset, "borrow")
    amount = to_mantissa(amount, ucore.decimals[underlying], "borrow", mantissa=options.mantissa)

    return eth.trx(
        contract_address(network.name, vtoken),
        "borrow",
        [amount],
        abi=_vtoken_abi(underlying),
        provider=ucore._provider,
        options=options,
    )


def repay_borrow(
    ucore: "Ucore",
    asset: str,
    amount: Any,
    borrower: Optional[str] = None,
    no_approve: bool = False,
    options: Optional[CallOptions] = None,
) -> TrxResponse:
    """
    Repay a borrow, for the signer or on behalf of ``borrower``.
    """
    network = net_id(ucore)
    options = options or CallOptions()
    vtoken, underlying = _market(asset, "repay_borrow")
    amount = to_mantissa(amount, ucore.decimals[underlying], "repay_borrow", mantissa=options.mantissa)
    market = contract_address(network.name, vtoken)

    behalf = borrower is not None
    if behalf:
        borrower = checksum_argument(borrower, "repay_borrow", "borrower")
    method = "repayBorrowBehalf" if behalf else "repayBorrow"

    if underlying == NATIVE:
        return eth.trx(
            market,
            method,
            [borrower] if behalf else [],
            abi=abi["vBNB"],
            provider=ucore._provider,
            options=replace(options, value=amount),
        )

    if not no_approve:
        _approve(ucore, network.name, underlying, market, amount, options)

    return eth.trx(
        market,
        method,
        [borrower, amount] if behalf else [amount],
        abi=abi["vToken"],
        provider=ucore._provider,
        options=options,
    )
