"""Tests for UCORE token operations and delegation signatures."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from eth_account import Account
from eth_account.messages import encode_typed_data

from ucore import ArgumentError, ContractError, Signature, Ucore, UcoreError
from ucore.constants import abi, address
from ucore.signing import EIP712_DOMAIN_TYPE, typed_data
from ucore.token import DELEGATION_TYPE, get_ucore_accrued, get_ucore_balance

from conftest import ACCOUNT, MAINNET, SIGNER

CONTRACTS = address["mainnet"]
SIG = {"v": 27, "r": "0x" + "11" * 32, "s": "0x" + "22" * 32}


class TestStaticReads:
    """Tests for get_ucore_balance and get_ucore_accrued."""

    def test_balance(self, read) -> None:
        read.return_value = 123 * 10**18
        with patch("ucore.eth.get_provider_network", return_value=MAINNET):
            result = get_ucore_balance(ACCOUNT.lower())

        assert result == "123000000000000000000"
        args, kwargs = read.call_args
        assert args == (CONTRACTS["UCORE"], "balanceOf", [ACCOUNT])
        assert kwargs["abi"] is abi["UCORE"]

    def test_accrued(self, read) -> None:
        read.return_value = {"balance": 1, "votes": 2, "delegate": ACCOUNT, "allocated": 55}
        with patch("ucore.eth.get_provider_network", return_value=MAINNET):
            result = get_ucore_accrued(ACCOUNT, "mainnet")

        assert result == "55"
        args, _ = read.call_args
        assert args == (
            CONTRACTS["UcoreLens"],
            "getXVSBalanceMetadataExt",
            [CONTRACTS["UCORE"], CONTRACTS["Controller"], ACCOUNT],
        )

    def test_accrued_without_contract(self) -> None:
        with patch("ucore.eth.get_provider_network", return_value=MAINNET), patch(
            "ucore.eth.rpc.rpc_call", return_value="0x"
        ):
            with pytest.raises(ContractError, match="getXVSBalanceMetadataExt on .* returned no data"):
                get_ucore_accrued(ACCOUNT)

    def test_rejects_non_string(self) -> None:
        with pytest.raises(ArgumentError, match=r"Ucore \[get_ucore_balance\] \| Argument `address` must be a string."):
            get_ucore_balance(12345)

    def test_rejects_bad_address(self) -> None:
        with pytest.raises(ArgumentError, match="must be a valid Ethereum address"):
            get_ucore_accrued("0x1234")


class TestClaimAndDelegate:
    """Tests for claim_ucore and delegate."""

    def test_claim_uses_signer(self, sdk: Ucore, trx) -> None:
        sdk.claim_ucore()

        args, kwargs = trx.call_args
        assert args == (CONTRACTS["Controller"], "claimUcore(address)", [SIGNER])
        assert kwargs["abi"] is abi["Controller"]

    def test_claim_without_signer(self, mainnet_network, trx) -> None:
        with pytest.raises(UcoreError, match=r"Ucore \[claim_ucore\] \| No signer"):
            Ucore().claim_ucore()

    def test_delegate(self, sdk: Ucore, trx) -> None:
        sdk.delegate(ACCOUNT.lower())
        assert trx.call_args.args == (CONTRACTS["UCORE"], "delegate", [ACCOUNT])

    def test_delegate_rejects_bad_address(self, sdk: Ucore, trx) -> None:
        with pytest.raises(ArgumentError, match=r"Ucore \[delegate\] \| Argument `address` must be a valid Ethereum address."):
            sdk.delegate("not-an-address")
        trx.assert_not_called()


class TestDelegateBySig:
    """Tests for delegate_by_sig."""

    def test_parameters(self, sdk: Ucore, trx) -> None:
        sdk.delegate_by_sig(ACCOUNT, 3, 10_000_000_000, SIG)

        args, _ = trx.call_args
        assert args[:2] == (CONTRACTS["UCORE"], "delegateBySig")
        assert args[2] == [ACCOUNT, 3, 10_000_000_000, 27, b"\x11" * 32, b"\x22" * 32]

    def test_accepts_signature_object(self, sdk: Ucore, trx) -> None:
        sdk.delegate_by_sig(ACCOUNT, 0, 1, Signature(**SIG))
        assert trx.call_args.args[2][3] == 27

    @pytest.mark.parametrize("nonce", ["3", 1.5, None, True])
    def test_nonce_must_be_int(self, sdk: Ucore, trx, nonce) -> None:
        with pytest.raises(ArgumentError, match="Argument `nonce` must be an integer."):
            sdk.delegate_by_sig(ACCOUNT, nonce, 1, SIG)

    def test_expiry_must_be_int(self, sdk: Ucore, trx) -> None:
        with pytest.raises(ArgumentError, match="Argument `expiry` must be an integer."):
            sdk.delegate_by_sig(ACCOUNT, 1, "soon", SIG)

    @pytest.mark.parametrize(
        "signature",
        [None, {}, {"v": "", "r": "", "s": ""}, {"v": 27, "r": "0x11"}, "0xdeadbeef"],
    )
    def test_signature_must_have_parts(self, sdk: Ucore, trx, signature) -> None:
        with pytest.raises(ArgumentError, match="must be an object that contains the v, r, and s pieces"):
            sdk.delegate_by_sig(ACCOUNT, 1, 1, signature)
        trx.assert_not_called()

    @pytest.mark.parametrize(
        "signature",
        [
            {"v": 27, "r": "0x11", "s": "0x" + "22" * 32},
            {"v": 27, "r": 5, "s": 7},
            {"v": 300, "r": "0x" + "11" * 32, "s": "0x" + "22" * 32},
            {"v": 27.0, "r": "0x" + "11" * 32, "s": "0x" + "22" * 32},
        ],
    )
    def test_malformed_signature_is_rejected(self, sdk: Ucore, trx, signature) -> None:
        with pytest.raises(ArgumentError, match=r"Ucore \[delegate_by_sig\] \| Argument `signature` is malformed"):
            sdk.delegate_by_sig(ACCOUNT, 1, 1, signature)
        trx.assert_not_called()

    @pytest.mark.parametrize(("nonce", "expiry"), [(-1, 1), (1, -5), (2**256, 1), (1, 2**256)])
    def test_values_must_fit_uint256(self, sdk: Ucore, trx, nonce: int, expiry: int) -> None:
        with pytest.raises(ArgumentError, match="must fit in a uint256"):
            sdk.delegate_by_sig(ACCOUNT, nonce, expiry, SIG)
        trx.assert_not_called()


class TestCreateDelegateSignature:
    """Tests for create_delegate_signature."""

    def test_signature_recovers_signer(self, sdk: Ucore, read) -> None:
        read.return_value = 4

        signature = sdk.create_delegate_signature(ACCOUNT, 2_000_000_000)

        args, _ = read.call_args
        assert args == (CONTRACTS["UCORE"], "nonces", [SIGNER])

        message = typed_data(
            {"name": "Ucore", "chainId": 56, "verifyingContract": CONTRACTS["UCORE"]},
            "Delegation",
            {"delegatee": ACCOUNT, "nonce": 4, "expiry": 2_000_000_000},
            {"EIP712Domain": EIP712_DOMAIN_TYPE, "Delegation": DELEGATION_TYPE},
        )
        recovered = Account.recover_message(
            encode_typed_data(full_message=message),
            vrs=(signature.v, int(signature.r, 16), int(signature.s, 16)),
        )
        assert recovered == SIGNER

    def test_signature_shape(self, sdk: Ucore, read) -> None:
        read.return_value = 0

        signature = sdk.create_delegate_signature(ACCOUNT)

        assert signature.v in (27, 28)
        assert signature.r.startswith("0x") and len(signature.r) == 66
        assert signature.s.startswith("0x") and len(signature.s) == 66

    def test_default_expiry(self, sdk: Ucore, read) -> None:
        read.return_value = 0
        with patch("ucore.token.sign", return_value=Signature(27, SIG["r"], SIG["s"])) as signer:
            sdk.create_delegate_signature(ACCOUNT)

        domain, primary_type, message, types, account = signer.call_args.args
        assert primary_type == "Delegation"
        assert message == {"delegatee": ACCOUNT, "nonce": 0, "expiry": 10_000_000_000}
        assert domain == {"name": "Ucore", "chainId": 56, "verifyingContract": CONTRACTS["UCORE"]}
        assert [field["name"] for field in types["Delegation"]] == ["delegatee", "nonce", "expiry"]
        assert account.address == SIGNER
