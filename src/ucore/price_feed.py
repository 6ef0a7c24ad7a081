"""
Price feed - USD prices from the protocol's price oracle.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from . import eth
from .constants import abi, underlyings
from .errors import ArgumentError, error_prefix
from .eth import CallOptions
from .helpers import contract_address, net_id, vtoken_symbol

if TYPE_CHECKING:
    from .client import Ucore


def get_price(ucore: "Ucore", asset: str, options: Optional[CallOptions] = None) -> Decimal:
    """
    USD price of one unit of an asset.

    The oracle returns prices scaled by ``1e(36 - underlying decimals)``.

    Args:
        asset: Underlying symbol (``"BNB"``) or its vToken (``"vBNB"``)

    Example:
        >>> ucore.get_price(Ucore.BNB)
        Decimal('312.45')
    """
    network = net_id(ucore)

    if not isinstance(asset, str) or asset == "":
        raise ArgumentError(error_prefix("get_price") + "Argument `asset` must be a non-empty string of an asset symbol.")

    vtoken = vtoken_symbol(asset, "get_price")
    underlying = underlyings[vtoken]
    token_decimals = ucore.decimals[underlying]

    raw = eth.read(
        contract_address(network.name, "PriceOracle"),
        "getUnderlyingPrice",
        [contract_address(network.name, vtoken)],
        abi=abi["PriceOracle"],
        provider=ucore._provider,
        options=options,
    )
    return Decimal(raw) / (Decimal(10) ** (36 - token_decimals))
