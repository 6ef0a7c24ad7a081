"""
Ucore - entry point of the SDK.

An instance wraps a provider and exposes every protocol operation as a
method. Contract addresses depend on the network, which is looked up
(once) the first time a method needs it.

Examples:
    ucore = Ucore()                                   # public mainnet RPC, read-only
    ucore = Ucore("testnet")
    ucore = Ucore("http://127.0.0.1:8545")
    ucore = Ucore("mainnet", private_key=os.environ["PRIVATE_KEY"])
    ucore = Ucore("mainnet", mnemonic="clutch captain shoe ...")
"""

from __future__ import annotations

import logging
import threading
from types import SimpleNamespace
from typing import Optional, Union

from . import constants, controller, eth, gov, price_feed, token, uai, util, vtoken
from .eth import Network, Provider

logger = logging.getLogger(__name__)

MAINNET_CHAIN_ID = 56


class Ucore:
    """
    Ucore SDK instance.

    Args:
        provider: Network name, RPC URL, or a Provider
        private_key: Signer key for write calls
        mnemonic: BIP-39 phrase, used when no private key is given
    """

    eth = eth
    util = util
    decimals = constants.decimals
    ucore = SimpleNamespace(
        get_ucore_balance=token.get_ucore_balance,
        get_ucore_accrued=token.get_ucore_accrued,
    )

    def __init__(
        self,
        provider: Union[Provider, str, None] = "mainnet",
        *,
        private_key: Optional[str] = None,
        mnemonic: Optional[str] = None,
    ):
        self._original_provider = provider
        self._provider = eth.create_provider(provider, private_key=private_key, mnemonic=mnemonic)
        self._network: Optional[Network] = None
        self._network_lock = threading.Lock()

    @property
    def network(self) -> Network:
        """Network the provider points to, resolved on first use."""
        if self._network is None:
            with self._network_lock:
                if self._network is None:
                    self._resolve_network()
        return self._network

    def _resolve_network(self) -> None:
        network = eth.get_provider_network(self._provider)

        instance_decimals = dict(constants.decimals)
        if network.id == MAINNET_CHAIN_ID or network.name == "mainnet":
            instance_decimals["USDC"] = 18
            instance_decimals["USDT"] = 18

        self.decimals = instance_decimals
        self._network = network
        logger.debug("Ucore instance bound to %s (%d)", network.name, network.id)

    @property
    def address(self) -> Optional[str]:
        """Signer address, if the instance can send transactions."""
        return self._provider.address

    def __repr__(self) -> str:
        network = self._network.name if self._network else "unresolved"
        return f"Ucore(rpc_url={self._provider.rpc_url!r}, network={network!r})"

    # Controller
    enter_markets = controller.enter_markets
    exit_market = controller.exit_market
    get_assets_in = controller.get_assets_in
    markets = controller.markets

    # vToken markets
    supply = vtoken.supply
    redeem = vtoken.redeem
    borrow = vtoken.borrow
    repay_borrow = vtoken.repay_borrow

    # Price feed
    get_price = price_feed.get_price

    # Governance
    cast_vote = gov.cast_vote
    cast_vote_by_sig = gov.cast_vote_by_sig
    create_vote_signature = gov.create_vote_signature

    # UCORE token
    claim_ucore = token.claim_ucore
    delegate = token.delegate
    delegate_by_sig = token.delegate_by_sig
    create_delegate_signature = token.create_delegate_signature

    # UAI
    get_mintable_uai = uai.get_mintable_uai
    get_uai_mint_rate = uai.get_uai_mint_rate
    mint_uai_guardian_paused = uai.mint_uai_guardian_paused
    repay_uai_guardian_paused = uai.repay_uai_guardian_paused
    minted_uai_of = uai.minted_uai_of
    minted_uais = uai.minted_uais
    uai_controller = uai.uai_controller
    uai_mint_rate = uai.uai_mint_rate
    mint_uai = uai.mint_uai
    repay_uai = uai.repay_uai


for _symbol, _value in constants.constants.items():
    setattr(Ucore, _symbol, _value)
