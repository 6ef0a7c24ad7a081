"""
Controller - interactions with the Ucore Protocol Controller contract.

Entering a market makes the supplied asset count as collateral; exiting
removes it again.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Union

from . import constants, eth
from .constants import abi
from .errors import ArgumentError, error_prefix
from .eth import CallOptions, TrxResponse
from .helpers import checksum_argument, contract_address, net_id, vtoken_symbol

if TYPE_CHECKING:
    from .client import Ucore


def enter_markets(
    ucore: "Ucore",
    markets: Union[str, list[str], None] = None,
    options: Optional[CallOptions] = None,
) -> TrxResponse:
    """
    Enter the signer's address into Ucore Protocol markets.

    Args:
        markets: A market symbol or a list of them. ``"SXP"`` and
            ``"vSXP"`` are equivalent.
        options: Call options for the transaction

    Returns:
        TrxResponse of the enterMarkets transaction

    Example:
        >>> ucore = Ucore("mainnet", private_key=key)
        >>> ucore.enter_markets([Ucore.SXP, Ucore.USDC])
    """
    network = net_id(ucore)
    prefix = error_prefix("enter_markets")

    if markets is None:
        markets = []

    if isinstance(markets, str):
        markets = [markets]

    if not isinstance(markets, (list, tuple)):
        raise ArgumentError(prefix + "Argument `markets` must be an array or string.")

    addresses = []
    for market in markets:
        if not isinstance(market, str) or not market:
            raise ArgumentError(prefix + f"Provided market `{market}` is not a recognized vToken.")
        addresses.append(contract_address(network.name, vtoken_symbol(market, "enter_markets")))

    controller = contract_address(network.name, "Controller")
    return eth.trx(
        controller,
        "enterMarkets",
        [addresses],
        abi=abi["Controller"],
        provider=ucore._provider,
        options=options,
    )


def exit_market(
    ucore: "Ucore",
    market: str,
    options: Optional[CallOptions] = None,
) -> TrxResponse:
    """
    Exit the signer's address from a Ucore Protocol market.

    Args:
        market: Symbol of the market to exit
        options: Call options for the transaction

    Returns:
        TrxResponse of the exitMarket transaction
    """
    network = net_id(ucore)

    if not isinstance(market, str) or market == "":
        raise ArgumentError(error_prefix("exit_market") + "Argument `market` must be a string of a vToken market name.")

    vtoken = contract_address(network.name, vtoken_symbol(market, "exit_market"))
    controller = contract_address(network.name, "Controller")

    return eth.trx(
        controller,
        "exitMarket",
        [vtoken],
        abi=abi["Controller"],
        provider=ucore._provider,
        options=options,
    )


def get_assets_in(ucore: "Ucore", address: str, options: Optional[CallOptions] = None) -> list[str]:
    """Markets the account has entered, as vToken symbols."""
    network = net_id(ucore)
    address = checksum_argument(address, "get_assets_in")
    controller = contract_address(network.name, "Controller")

    result = eth.read(
        controller,
        "getAssetsIn",
        [address],
        abi=abi["Controller"],
        provider=ucore._provider,
        options=options,
    )

    contracts = constants.address[network.name]
    by_address = {contracts[name].lower(): name for name in constants.vTokens if name in contracts}
    return [by_address.get(addr.lower(), addr) for addr in result or []]


def markets(ucore: "Ucore", market: str, options: Optional[CallOptions] = None) -> dict[str, Any]:
    """Listing status and collateral factor of a market."""
    network = net_id(ucore)

    if not isinstance(market, str) or market == "":
        raise ArgumentError(error_prefix("markets") + "Argument `market` must be a string of a vToken market name.")

    vtoken = contract_address(network.name, vtoken_symbol(market, "markets"))
    controller = contract_address(network.name, "Controller")

    is_listed, collateral_factor, is_ucore = eth.read(
        controller,
        "markets",
        [vtoken],
        abi=abi["Controller"],
        provider=ucore._provider,
        options=options,
    )
    return {
        "isListed": is_listed,
        "collateralFactorMantissa": str(collateral_factor),
        "isUcore": is_ucore,
    }
