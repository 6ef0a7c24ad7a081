"""Tests for the Ucore constructor and network readiness gate."""

from __future__ import annotations

from ucore import Ucore, constants, get_ucore_balance
from ucore.eth import Provider

from conftest import PRIVATE_KEY, SIGNER


class TestConstructor:
    """Tests for Ucore()."""

    def test_defaults_to_mainnet(self) -> None:
        sdk = Ucore()
        assert sdk._provider.name == "mainnet"
        assert sdk.address is None

    def test_with_private_key(self) -> None:
        sdk = Ucore("http://127.0.0.1:8545", private_key=PRIVATE_KEY)
        assert sdk._provider.rpc_url == "http://127.0.0.1:8545"
        assert sdk.address == SIGNER

    def test_keeps_original_provider(self) -> None:
        provider = Provider(rpc_url="http://127.0.0.1:8545")
        sdk = Ucore(provider)
        assert sdk._original_provider is provider
        assert sdk._provider is provider

    def test_network_not_resolved_eagerly(self, mainnet_network) -> None:
        Ucore()
        mainnet_network.assert_not_called()


class TestNetworkGate:
    """Tests for lazy network resolution."""

    def test_resolves_once(self, mainnet_network) -> None:
        sdk = Ucore()
        assert sdk.network.name == "mainnet"
        assert sdk.network.id == 56
        assert mainnet_network.call_count == 1

    def test_mainnet_stablecoins_use_18_decimals(self, mainnet_network) -> None:
        sdk = Ucore()
        sdk.network
        assert sdk.decimals["USDC"] == 18
        assert sdk.decimals["USDT"] == 18

    def test_testnet_keeps_default_decimals(self, testnet_network) -> None:
        sdk = Ucore("testnet")
        sdk.network
        assert sdk.decimals["USDC"] == 6
        assert sdk.decimals["USDT"] == 6

    def test_global_decimals_untouched(self, mainnet_network) -> None:
        sdk = Ucore()
        sdk.network
        assert constants.decimals["USDC"] == 6
        assert sdk.decimals is not constants.decimals


class TestClassExports:
    """Tests for attributes available on the class itself."""

    def test_symbol_constants(self) -> None:
        assert Ucore.SXP == "SXP"
        assert Ucore.vUSDC == "vUSDC"
        assert Ucore.UAI == "UAI"

    def test_static_token_reads(self) -> None:
        assert Ucore.ucore.get_ucore_balance is get_ucore_balance

    def test_namespaces(self) -> None:
        assert Ucore.decimals is constants.decimals
        assert callable(Ucore.eth.read)
        assert callable(Ucore.util.get_address)

    def test_methods_are_bound(self) -> None:
        sdk = Ucore()
        assert sdk.enter_markets.__self__ is sdk
