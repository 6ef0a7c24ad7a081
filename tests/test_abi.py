"""Unit tests for ABI loading, encoding and decoding."""

from __future__ import annotations

import pytest
from eth_abi import encode

from ucore.eth.abi import (
    abi_type,
    decode_result,
    encode_call,
    find_function,
    function_signature,
    load_abi,
)

ACCOUNT = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"


class TestLoadAbi:
    """Tests for load_abi."""

    @pytest.mark.parametrize(
        "name",
        ["Controller", "UCORE", "UcoreLens", "PriceOracle", "GovernorAlpha", "vToken", "vBNB", "ERC20"],
    )
    def test_ships_fragment(self, name: str) -> None:
        abi = load_abi(name)
        assert isinstance(abi, list)
        assert all(entry["type"] == "function" for entry in abi)

    def test_unknown_contract(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_abi("NoSuchContract")


class TestSignatures:
    """Tests for function lookup and signatures."""

    def test_tuple_type_is_expanded(self) -> None:
        (output,) = find_function(load_abi("UcoreLens"), "getXVSBalanceMetadataExt")["outputs"]
        assert abi_type(output) == "(uint256,uint256,address,uint256)"

    def test_bare_name_picks_first_overload(self) -> None:
        func = find_function(load_abi("Controller"), "claimUcore")
        assert function_signature(func) == "claimUcore(address)"

    def test_full_signature_picks_overload(self) -> None:
        func = find_function(load_abi("Controller"), "claimUcore(address, address[])")
        assert function_signature(func) == "claimUcore(address,address[])"

    def test_missing_function(self) -> None:
        with pytest.raises(ValueError, match="not found"):
            find_function(load_abi("UCORE"), "transferFrom")


class TestEncodeCall:
    """Tests for encode_call."""

    def test_balance_of_selector(self) -> None:
        calldata = encode_call(load_abi("UCORE"), "balanceOf", [ACCOUNT])
        assert calldata.startswith("0x70a08231")
        assert calldata.endswith(ACCOUNT[2:].lower())
        assert len(calldata) == 2 + 8 + 64

    def test_no_arguments(self) -> None:
        calldata = encode_call(load_abi("Controller"), "getUAIMintRate", [])
        assert len(calldata) == 2 + 8

    def test_argument_count_checked(self) -> None:
        with pytest.raises(ValueError, match="expects 1 arguments"):
            encode_call(load_abi("UCORE"), "balanceOf", [])

    def test_approve_selector(self) -> None:
        calldata = encode_call(load_abi("ERC20"), "approve", [ACCOUNT, 1])
        assert calldata.startswith("0x095ea7b3")


class TestDecodeResult:
    """Tests for decode_result."""

    def test_single_value(self) -> None:
        data = "0x" + encode(["uint256"], [42]).hex()
        assert decode_result(load_abi("UCORE"), "balanceOf", data) == 42

    def test_multiple_values(self) -> None:
        data = "0x" + encode(["uint256", "uint256"], [0, 5]).hex()
        assert decode_result(load_abi("Controller"), "getMintableUAI", data) == (0, 5)

    def test_struct_is_named(self) -> None:
        data = encode(["(uint256,uint256,address,uint256)"], [(1, 2, ACCOUNT, 3)]).hex()
        result = decode_result(load_abi("UcoreLens"), "getXVSBalanceMetadataExt", data)
        assert result["balance"] == 1
        assert result["votes"] == 2
        assert result["delegate"].lower() == ACCOUNT.lower()
        assert result["allocated"] == 3

    def test_no_outputs(self) -> None:
        assert decode_result(load_abi("UCORE"), "delegate", "0x") is None
