"""Tests for the price feed."""

from __future__ import annotations

from decimal import Decimal

import pytest

from ucore import ArgumentError, Ucore
from ucore.constants import abi, address

CONTRACTS = address["mainnet"]


class TestGetPrice:
    """Tests for get_price."""

    def test_eighteen_decimals(self, sdk: Ucore, read) -> None:
        read.return_value = 312_450_000_000_000_000_000

        assert sdk.get_price(Ucore.BNB) == Decimal("312.45")
        args, kwargs = read.call_args
        assert args == (CONTRACTS["PriceOracle"], "getUnderlyingPrice", [CONTRACTS["vBNB"]])
        assert kwargs["abi"] is abi["PriceOracle"]

    def test_vtoken_symbol(self, sdk: Ucore, read) -> None:
        read.return_value = 10**18
        assert sdk.get_price("vSXP") == Decimal(1)
        assert read.call_args.args[2] == [CONTRACTS["vSXP"]]

    def test_testnet_six_decimals(self, testnet_network, read, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(address["testnet"], "PriceOracle", "0x" + "33" * 20)
        read.return_value = 10**30

        assert Ucore("testnet").get_price("USDC") == Decimal(1)

    def test_rejects_unknown(self, sdk: Ucore, read) -> None:
        with pytest.raises(ArgumentError, match=r"Ucore \[get_price\]"):
            sdk.get_price("DOGE")
