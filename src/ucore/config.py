"""
Ucore SDK configuration.

Everything is read from the environment. A ``~/.ucore/.env`` file, when
present, is loaded first so that keys and RPC endpoints can live outside
the shell profile.

Variables:
- PRIVATE_KEY:           signer key for write calls (0x-prefixed hex)
- UCORE_MAINNET_RPC:     RPC endpoint used for the ``mainnet`` network
- UCORE_TESTNET_RPC:     RPC endpoint used for the ``testnet`` network
- UCORE_NETWORK:         default network for the CLI
- UCORE_DEPLOYMENTS:     JSON file overriding contract addresses
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


UCORE_DIR = Path.home() / ".ucore"
UCORE_ENV = UCORE_DIR / ".env"

# chain id -> network name
NETWORKS: dict[int, str] = {
    56: "mainnet",
    97: "testnet",
}

DEFAULT_RPC_URLS: dict[str, str] = {
    "mainnet": "https://bsc-dataseed.binance.org",
    "testnet": "https://data-seed-prebsc-1-s1.binance.org:8545",
}


def load_env(env_path: Optional[Path] = None) -> None:
    """Load ``~/.ucore/.env`` (or ``env_path``) into the environment."""
    env_path = env_path or UCORE_ENV
    if env_path.exists():
        load_dotenv(env_path, override=True)


def is_network_name(name: str) -> bool:
    return name in DEFAULT_RPC_URLS


def get_rpc_url(network: str = "mainnet") -> str:
    """
    Get the RPC URL for a network name.

    Args:
        network: Network name ("mainnet" or "testnet")

    Returns:
        Value of UCORE_<NETWORK>_RPC if set, else the public endpoint

    Raises:
        ValueError: If the network name is unknown
    """
    if network not in DEFAULT_RPC_URLS:
        raise ValueError(f"Unknown network: {network}")
    return os.environ.get(f"UCORE_{network.upper()}_RPC", DEFAULT_RPC_URLS[network])


def get_default_network() -> str:
    return os.environ.get("UCORE_NETWORK", "mainnet")


def get_deployments_path() -> Optional[Path]:
    path = os.environ.get("UCORE_DEPLOYMENTS")
    return Path(path) if path else None


def load_private_key(env_path: Optional[Path] = None) -> str:
    """
    Load the signer private key from .env file or environment.

    Args:
        env_path: Path to .env file (default: ~/.ucore/.env)

    Returns:
        0x-prefixed hex private key

    Raises:
        ValueError: If PRIVATE_KEY is not set
    """
    env_path = env_path or UCORE_ENV
    load_env(env_path)

    private_key = os.environ.get("PRIVATE_KEY")
    if not private_key:
        raise ValueError(f"PRIVATE_KEY not found. Set PRIVATE_KEY in the environment or in {env_path}")

    if not private_key.startswith("0x"):
        private_key = "0x" + private_key

    return private_key
