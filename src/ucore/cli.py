"""
Ucore CLI

Command-line access to the Ucore Protocol through the SDK.

Reads need only a network; writes need PRIVATE_KEY (environment or
~/.ucore/.env).

Commands:
  info      - Show SDK and deployment information
  whoami    - Show the signer address
  balance   - UCORE balance of an address
  accrued   - UCORE accrued by an address
  price     - USD price of an asset
  markets   - Markets an address has entered
  enter     - Enter markets (use supplied assets as collateral)
  exit      - Exit a market
  delegate  - Delegate UCORE votes
  uai       - UAI stablecoin commands
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click
import httpx
from eth_abi.exceptions import EncodingError

from . import constants
from .client import Ucore
from .config import get_default_network, load_env, load_private_key
from .errors import UcoreError
from .eth import CallOptions
from .signing import get_address
from .token import get_ucore_accrued, get_ucore_balance


# ============ Constants ============

VERSION = "0.1.0"

# Failures reported as a red ERROR line instead of a traceback
CLI_ERRORS = (UcoreError, httpx.HTTPError, TimeoutError, EncodingError)


# ============ Helpers ============


def _fail(exc: Exception) -> None:
    click.secho(f"ERROR: {exc}", fg="red")
    sys.exit(getattr(exc, "exit_code", 1))


def _provider(ctx: click.Context) -> str:
    return ctx.obj["rpc_url"] or ctx.obj["network"]


def _reader(ctx: click.Context) -> Ucore:
    return Ucore(_provider(ctx))


def _writer(ctx: click.Context) -> Ucore:
    try:
        private_key = load_private_key()
    except ValueError as exc:
        _fail(exc)
    return Ucore(_provider(ctx), private_key=private_key)


def _options(wait: bool) -> CallOptions:
    return CallOptions(wait=wait)


def _echo_trx(result) -> None:
    if result.status is None:
        click.secho("Transaction sent.", fg="green")
    elif result.status == 1:
        click.secho("SUCCESS: Transaction confirmed!", fg="green")
    else:
        click.secho("FAILED: Transaction reverted", fg="red")
    click.echo(f"  TX: {result.tx_hash}")
    if result.status == 0:
        sys.exit(1)


wait_option = click.option("--wait/--no-wait", default=True, help="Wait for the transaction receipt")


# ============ Main CLI Group ============


@click.group()
@click.version_option(version=VERSION, prog_name="ucore")
@click.option("--network", "-n", default=None, help="Network name (mainnet, testnet)")
@click.option("--rpc-url", default=None, help="RPC URL (overrides --network)")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging")
@click.pass_context
def cli(ctx: click.Context, network: Optional[str], rpc_url: Optional[str], verbose: bool) -> None:
    """Ucore Protocol SDK command line."""
    load_env()
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    ctx.ensure_object(dict)
    ctx.obj["network"] = network or get_default_network()
    ctx.obj["rpc_url"] = rpc_url


# ============ Info ============


@cli.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Show SDK and deployment information."""
    network = ctx.obj["network"]
    click.echo(f"Ucore SDK v{VERSION}")
    click.echo(f"  Network: {network}")
    click.echo(f"  Markets: {', '.join(constants.vTokens)}")

    contracts = constants.address.get(network, {})
    for name in ("Controller", "UCORE", "UcoreLens", "PriceOracle", "GovernorAlpha"):
        click.echo(f"  {name}: {contracts.get(name, '(not deployed)')}")


@cli.command()
def whoami() -> None:
    """Show the signer address."""
    try:
        address = get_address(load_private_key())
    except ValueError as exc:
        _fail(exc)
    click.echo(f"Address: {address}")


# ============ Reads ============


@cli.command()
@click.argument("address")
@click.pass_context
def balance(ctx: click.Context, address: str) -> None:
    """UCORE balance of ADDRESS (base units)."""
    try:
        click.echo(get_ucore_balance(address, _provider(ctx)))
    except CLI_ERRORS as exc:
        _fail(exc)


@cli.command()
@click.argument("address")
@click.pass_context
def accrued(ctx: click.Context, address: str) -> None:
    """UCORE accrued by ADDRESS and not yet claimed (base units)."""
    try:
        click.echo(get_ucore_accrued(address, _provider(ctx)))
    except CLI_ERRORS as exc:
        _fail(exc)


@cli.command()
@click.argument("asset")
@click.pass_context
def price(ctx: click.Context, asset: str) -> None:
    """USD price of ASSET."""
    try:
        click.echo(str(_reader(ctx).get_price(asset)))
    except CLI_ERRORS as exc:
        _fail(exc)


@cli.command()
@click.argument("address")
@click.pass_context
def markets(ctx: click.Context, address: str) -> None:
    """Markets ADDRESS has entered."""
    try:
        entered = _reader(ctx).get_assets_in(address)
    except CLI_ERRORS as exc:
        _fail(exc)
    for market in entered:
        click.echo(market)


# ============ Writes ============


@cli.command()
@click.argument("market_names", metavar="MARKET...", nargs=-1, required=True)
@wait_option
@click.pass_context
def enter(ctx: click.Context, market_names: tuple[str, ...], wait: bool) -> None:
    """Enter markets, using the supplied assets as collateral."""
    try:
        result = _writer(ctx).enter_markets(list(market_names), _options(wait))
    except CLI_ERRORS as exc:
        _fail(exc)
    _echo_trx(result)


@cli.command(name="exit")
@click.argument("market")
@wait_option
@click.pass_context
def exit_(ctx: click.Context, market: str, wait: bool) -> None:
    """Exit MARKET."""
    try:
        result = _writer(ctx).exit_market(market, _options(wait))
    except CLI_ERRORS as exc:
        _fail(exc)
    _echo_trx(result)


@cli.command()
@click.argument("address")
@wait_option
@click.pass_context
def delegate(ctx: click.Context, address: str, wait: bool) -> None:
    """Delegate UCORE votes to ADDRESS."""
    try:
        result = _writer(ctx).delegate(address, _options(wait))
    except CLI_ERRORS as exc:
        _fail(exc)
    _echo_trx(result)


# ============ UAI ============


@cli.group()
def uai() -> None:
    """UAI stablecoin commands."""


@uai.command()
@click.pass_context
def rate(ctx: click.Context) -> None:
    """Current UAI mint rate."""
    try:
        click.echo(_reader(ctx).get_uai_mint_rate())
    except CLI_ERRORS as exc:
        _fail(exc)


@uai.command()
@click.argument("address")
@click.pass_context
def minted(ctx: click.Context, address: str) -> None:
    """UAI minted by ADDRESS."""
    try:
        click.echo(_reader(ctx).minted_uais(address))
    except CLI_ERRORS as exc:
        _fail(exc)


@uai.command()
@click.argument("address")
@click.pass_context
def mintable(ctx: click.Context, address: str) -> None:
    """UAI ADDRESS can still mint."""
    try:
        click.echo(_reader(ctx).get_mintable_uai(address))
    except CLI_ERRORS as exc:
        _fail(exc)


@uai.command()
@click.argument("amount")
@wait_option
@click.pass_context
def mint(ctx: click.Context, amount: str, wait: bool) -> None:
    """Mint AMOUNT UAI."""
    try:
        result = _writer(ctx).mint_uai(amount, _options(wait))
    except CLI_ERRORS as exc:
        _fail(exc)
    _echo_trx(result)


@uai.command()
@click.argument("amount")
@wait_option
@click.pass_context
def repay(ctx: click.Context, amount: str, wait: bool) -> None:
    """Repay AMOUNT UAI."""
    try:
        result = _writer(ctx).repay_uai(amount, _options(wait))
    except CLI_ERRORS as exc:
        _fail(exc)
    _echo_trx(result)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
