"""
Ucore Protocol deployment tables.

- address:     network name -> contract/token name -> address
- abi:         contract name -> ABI fragment
- vTokens:     recognized vToken market symbols
- underlyings: vToken symbol -> underlying symbol
- decimals:    symbol -> token decimals

The built-in table is the Venus Protocol deployment on BNB Chain that the
Ucore contracts fork: ``UCORE`` is the XVS token, ``Controller`` the Venus
Comptroller, ``UcoreLens`` the VenusLens and ``UAI`` the VAI stablecoin.
Testnet lacks the lens, oracle, governor and UAI entries. To target an actual
Ucore deployment, point UCORE_DEPLOYMENTS at a JSON file (same shape as
``address``); it is merged over the built-in table per network.

Addresses are checksummed on load.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from .config import get_deployments_path
from .eth.abi import load_abi
from .eth.provider import to_checksum_address

logger = logging.getLogger(__name__)


_ADDRESSES: dict[str, dict[str, str]] = {
    "mainnet": {
        "Controller": "0xfD36E2c2a6789Db23113685031d7F16329158384",
        "UCORE": "0xcF6BB5389c92Bdda8a3747Ddb454cB7a64626C63",
        "UcoreLens": "0x595e9DDfEbd47B54b996c839Ef3Dd97db3ED19bA",
        "PriceOracle": "0xd8B6dA2bfEC71D684D3E2a2FC9492dDad5C3787F",
        "GovernorAlpha": "0x406f48f47D25E9caa29f17e7Cfbd1dc6878F078f",
        "UAIController": "0x004065D34C6b18cE4370ced1CeBDE94865DbFAFE",
        "UAI": "0x4BD17003473389A42DAF6a0a729f6Fdb328BbBd7",
        "vSXP": "0x2fF3d0F6990a40261c66E1ff2017aCBc282EB6d0",
        "vUSDC": "0xecA88125a5ADbe82614ffC12D0DB554E2e2867C8",
        "vUSDT": "0xfD5840Cd36d94D7229439859C0112a4185BC0255",
        "vBUSD": "0x95c78222B3D6e262426483D42CfA53685A67Ab9D",
        "vBNB": "0xA07c5b74C9B40447a954e1466938b865b6BBea36",
        "vUCORE": "0x151B1e2635A717bcDc836ECd6FbB62B674FE3E1D",
        "vBTC": "0x882C173bC7Ff3b7786CA16dfeD3DFFfb9Ee7847B",
        "vETH": "0xf508fCD89b8bd15579dc79A6827cB4686A3592c8",
        "SXP": "0x47BEAd2563dCBf3bF2c9407fEa4dC236fAbA485A",
        "USDC": "0x8AC76a51cc950d9822D68b83fE1Ad97B32Cd580d",
        "USDT": "0x55d398326f99059fF775485246999027B3197955",
        "BUSD": "0xe9e7CEA3DedcA5984780Bafc599bD69ADd087D56",
        "BTC": "0x7130d2A12B9BCbFAe4f2634d864A1Ee1Ce3Ead9c",
        "ETH": "0x2170Ed0880ac9A755fd29B2688956BD959F933F8",
    },
    "testnet": {
        "Controller": "0x94d1820b2D1c7c7452A163983Dc888CEC546b77D",
        "UCORE": "0xB9e0E753630434d7863528cc73CB7AC638a7c8ff",
        "vSXP": "0x74469281310195A04840Daf6EdF576F788C1a5C7",
        "vUSDC": "0xD5C4C2e2facBEB59D0216D0595d63FcDc6F9A1a7",
        "vUSDT": "0xb7526572FFE56AB9D7489838Bf2E18e3323b441A",
        "vBUSD": "0x08e0A5575De71037aE36AbfAfb516595fE68e5e4",
        "vBNB": "0x2E7222e51c0f6e98610A1543Aa3836E092CDe62c",
        "vUCORE": "0x6d6F697e34145Bb95c54E77482d97cc261Dc237E",
        "vBTC": "0xb6e9322C49FD75a367Fcb17B0Fcd62C5070EbCBe",
        "vETH": "0x162D005F0Fff510E54958Cfc5CF32A3180A84aab",
        "USDC": "0x16227D60f7a0e586C66B005219dfc887D13C9531",
        "USDT": "0xA11c8D9DC9b66E209Ef60F0C8D969D3CD988782c",
        "BUSD": "0x8301F2213c0eeD49a7E28Ae4c3e91722919B8B47",
    },
}


def load_addresses(override_path: Optional[Path] = None) -> dict[str, dict[str, str]]:
    """
    Build the address table, merging an optional JSON override file.

    Raises:
        ValueError: If any address in the table is malformed
    """
    table = {net: dict(contracts) for net, contracts in _ADDRESSES.items()}

    if override_path is not None:
        with override_path.open("r", encoding="utf-8") as f:
            overrides = json.load(f)
        for net, contracts in overrides.items():
            table.setdefault(net, {}).update(contracts)
        logger.debug("merged deployment overrides from %s", override_path)

    return {
        net: {name: to_checksum_address(addr) for name, addr in contracts.items()}
        for net, contracts in table.items()
    }


address: dict[str, dict[str, str]] = load_addresses(get_deployments_path())

ABI_NAMES = (
    "Controller",
    "UCORE",
    "UcoreLens",
    "PriceOracle",
    "GovernorAlpha",
    "vToken",
    "vBNB",
    "ERC20",
)

abi: dict[str, list] = {name: load_abi(name) for name in ABI_NAMES}

vTokens: list[str] = [
    "vSXP",
    "vUSDC",
    "vUSDT",
    "vBUSD",
    "vBNB",
    "vUCORE",
    "vBTC",
    "vETH",
]

underlyings: dict[str, str] = {vtoken: vtoken[1:] for vtoken in vTokens}

decimals: dict[str, int] = {
    "SXP": 18,
    "USDC": 6,
    "USDT": 6,
    "BUSD": 18,
    "BNB": 18,
    "UCORE": 18,
    "BTC": 18,
    "ETH": 18,
    "UAI": 18,
    **{vtoken: 8 for vtoken in vTokens},
}

# Symbol constants, exported as Ucore.SXP, Ucore.vSXP, ...
constants: dict[str, str] = {
    **{symbol: symbol for symbol in underlyings.values()},
    **{vtoken: vtoken for vtoken in vTokens},
    "UAI": "UAI",
}
