"""
Shared plumbing for the Ucore operation modules.

Every instance method that talks to the chain goes through ``net_id``
first: addresses depend on the network, and the network is only known
once the provider has answered ``eth_chainId``.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, localcontext
from typing import TYPE_CHECKING, Any

from . import constants
from .errors import ArgumentError, NetworkError, UcoreError, error_prefix
from .eth import Network, to_checksum_address

if TYPE_CHECKING:
    from .client import Ucore


def net_id(ucore: "Ucore") -> Network:
    """Hold a call until the instance knows which network it is on."""
    return ucore.network


def contract_address(network: str, contract: str) -> str:
    """
    Look up a deployed contract.

    Raises:
        NetworkError: If the network or the contract on it is unknown
    """
    if network not in constants.address:
        raise NetworkError(f"Unsupported network: {network}")
    contracts = constants.address[network]
    if contract not in contracts:
        raise NetworkError(f"{contract} is not deployed on {network}")
    return contracts[contract]


def checksum_argument(value: Any, function_name: str, name: str = "address") -> str:
    """Validate an address argument and return it checksummed."""
    prefix = error_prefix(function_name)

    if not isinstance(value, str):
        raise ArgumentError(prefix + f"Argument `{name}` must be a string.")

    try:
        return to_checksum_address(value)
    except ValueError:
        raise ArgumentError(prefix + f"Argument `{name}` must be a valid Ethereum address.") from None


def vtoken_symbol(market: str, function_name: str) -> str:
    """Prefix a bare symbol with ``v`` and check it names a known market."""
    if not market.startswith("v"):
        market = "v" + market

    if market not in constants.vTokens:
        raise ArgumentError(error_prefix(function_name) + f"Provided market `{market}` is not a recognized vToken.")

    return market


UINT256_MAX = 2**256 - 1


def check_uint256(value: Any, function_name: str, name: str) -> int:
    """Validate an integer argument that is sent as a uint256."""
    prefix = error_prefix(function_name)

    if not isinstance(value, int) or isinstance(value, bool):
        raise ArgumentError(prefix + f"Argument `{name}` must be an integer.")

    if not 0 <= value <= UINT256_MAX:
        raise ArgumentError(prefix + f"Argument `{name}` must fit in a uint256.")

    return value


def is_amount(value: Any) -> bool:
    return isinstance(value, (str, int, float, Decimal)) and not isinstance(value, bool)


def to_mantissa(value: Any, decimals: int, function_name: str, mantissa: bool = False) -> int:
    """
    Convert a user amount to the token's base unit.

    ``1.5`` with 18 decimals becomes ``1500000000000000000``. With
    ``mantissa=True`` the value is taken as already scaled. Fractions of a
    base unit are rejected, not rounded.
    """
    prefix = error_prefix(function_name)

    if not is_amount(value):
        raise ArgumentError(prefix + "Argument `amount` must be a string, int, float or Decimal.")

    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ArgumentError(prefix + f"Argument `amount` is not a number: {value!r}") from None

    if not amount.is_finite() or amount < 0:
        raise ArgumentError(prefix + f"Argument `amount` must be a non-negative number: {value!r}")

    # Wide enough for any uint256 so scaling never rounds
    with localcontext() as ctx:
        ctx.prec = 100
        if not mantissa:
            amount = amount.scaleb(decimals)
        if amount != amount.to_integral_value():
            raise ArgumentError(prefix + "Argument `amount` has more precision than the token supports.")

    if amount > UINT256_MAX:
        raise ArgumentError(prefix + "Argument `amount` must fit in a uint256.")

    return int(amount)


def signer_address(ucore: "Ucore", function_name: str) -> str:
    address = ucore._provider.address
    if address is None:
        raise UcoreError(
            error_prefix(function_name) + "No signer available. Create Ucore with a private_key or mnemonic."
        )
    return address
