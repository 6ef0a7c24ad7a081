from __future__ import annotations

from unittest.mock import patch

import pytest

from ucore import Ucore
from ucore.eth import Network, TrxResponse

# Well-known development key; never holds funds.
PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
SIGNER = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

ACCOUNT = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"

MAINNET = Network(id=56, name="mainnet")
TESTNET = Network(id=97, name="testnet")


@pytest.fixture()
def mainnet_network():
    with patch("ucore.eth.get_provider_network", return_value=MAINNET) as mocked:
        yield mocked


@pytest.fixture()
def testnet_network():
    with patch("ucore.eth.get_provider_network", return_value=TESTNET) as mocked:
        yield mocked


@pytest.fixture()
def sdk(mainnet_network) -> Ucore:
    """Mainnet instance with a signer; network lookup is mocked."""
    return Ucore("mainnet", private_key=PRIVATE_KEY)


@pytest.fixture()
def trx():
    with patch("ucore.eth.trx", return_value=TrxResponse(tx_hash="0x" + "ab" * 32)) as mocked:
        yield mocked


@pytest.fixture()
def read():
    with patch("ucore.eth.read") as mocked:
        yield mocked
