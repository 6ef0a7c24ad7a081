"""
UAI - the stablecoin minted against collateral through the Controller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from . import eth
from .constants import abi
from .errors import ContractError, error_prefix
from .eth import CallOptions, TrxResponse
from .helpers import checksum_argument, contract_address, net_id, to_mantissa

if TYPE_CHECKING:
    from .client import Ucore

UAI_DECIMALS = 18


def _read_controller(ucore: "Ucore", method: str, args: list, options: Optional[CallOptions]) -> Any:
    network = net_id(ucore)
    return eth.read(
        contract_address(network.name, "Controller"),
        method,
        args,
        abi=abi["Controller"],
        provider=ucore._provider,
        options=options,
    )


def get_mintable_uai(ucore: "Ucore", address: str, options: Optional[CallOptions] = None) -> str:
    """
    UAI the account can still mint against its collateral.

    Raises:
        ContractError: If the Controller reports a non-zero error code
    """
    address = checksum_argument(address, "get_mintable_uai")
    error, amount = _read_controller(ucore, "getMintableUAI", [address], options)

    if error != 0:
        raise ContractError(error_prefix("get_mintable_uai") + "Contract error occured")
    return str(amount)


def get_uai_mint_rate(ucore: "Ucore", options: Optional[CallOptions] = None) -> str:
    return str(_read_controller(ucore, "getUAIMintRate", [], options))


def mint_uai_guardian_paused(ucore: "Ucore", options: Optional[CallOptions] = None) -> bool:
    return _read_controller(ucore, "mintUAIGuardianPaused", [], options)


def repay_uai_guardian_paused(ucore: "Ucore", options: Optional[CallOptions] = None) -> bool:
    return _read_controller(ucore, "repayUAIGuardianPaused", [], options)


def minted_uai_of(ucore: "Ucore", address: str, options: Optional[CallOptions] = None) -> str:
    address = checksum_argument(address, "minted_uai_of")
    return str(_read_controller(ucore, "mintedUAIOf", [address], options))


def minted_uais(ucore: "Ucore", address: str, options: Optional[CallOptions] = None) -> str:
    address = checksum_argument(address, "minted_uais")
    return str(_read_controller(ucore, "mintedUAIs", [address], options))


def uai_controller(ucore: "Ucore", options: Optional[CallOptions] = None) -> str:
    return _read_controller(ucore, "uaiController", [], options)


def uai_mint_rate(ucore: "Ucore", options: Optional[CallOptions] = None) -> str:
    return str(_read_controller(ucore, "uaiMintRate", [], options))


def mint_uai(ucore: "Ucore", amount: Any, options: Optional[CallOptions] = None) -> TrxResponse:
    """
    Mint UAI against the signer's collateral.

    Args:
        amount: UAI to mint. Scaled by 1e18 unless ``options.mantissa``.
    """
    network = net_id(ucore)
    options = options or CallOptions()
    amount = to_mantissa(amount, UAI_DECIMALS, "mint_uai", mantissa=options.mantissa)

    return eth.trx(
        contract_address(network.name, "Controller"),
        "mintUAI",
        [amount],
        abi=abi["Controller"],
        provider=ucore._provider,
        options=options,
    )


def repay_uai(ucore: "Ucore", amount: Any, options: Optional[CallOptions] = None) -> TrxResponse:
    """Repay minted UAI. Scaled by 1e18 unless ``options.mantissa``."""
    network = net_id(ucore)
    options = options or CallOptions()
    amount = to_mantissa(amount, UAI_DECIMALS, "repay_uai", mantissa=options.mantissa)

    return eth.trx(
        contract_address(network.name, "Controller"),
        "repayUAI",
        [amount],
        abi=abi["Controller"],
        provider=ucore._provider,
        options=options,
    )
