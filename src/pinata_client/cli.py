"""CLI entry point for pinata_client."""

from __future__ import annotations

import json
import logging
import sys

import click

from pinata_client.client import PinataClient
from pinata_client.config import load_config
from pinata_client.errors import PinataError
from pinata_client.models.records import PinResponse


def _require_credentials(cfg) -> None:
    """Exit with error if no API key/secret is configured."""
    if not cfg.has_credentials():
        click.echo("Error: No Pinata credentials configured.", err=True)
        click.echo(
            "Set PINATA_API_KEY and PINATA_SECRET_KEY env vars or api_key/api_secret in config.",
            err=True,
        )
        sys.exit(1)


def _log_level(verbose: bool, name: str) -> int:
    """--verbose wins; otherwise the configured level name, WARNING if unknown."""
    if verbose:
        return logging.DEBUG
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def _client(ctx: click.Context) -> PinataClient:
    cfg = load_config(ctx.obj["config_path"])
    logging.getLogger().setLevel(_log_level(ctx.obj["verbose"], cfg.log_level))
    _require_credentials(cfg)
    try:
        return PinataClient.from_config(cfg)
    except PinataError as exc:
        _fail(exc)


def _show(resp: PinResponse, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(resp.to_dict(), indent=2))
        return
    click.echo(f"  Hash:      {resp.ipfs_hash}")
    click.echo(f"  Size:      {resp.pin_size} bytes")
    click.echo(f"  Timestamp: {resp.timestamp}")
    if resp.name:
        click.echo(f"  Name:      {resp.name}")


def _fail(exc: PinataError) -> None:
    click.echo(f"Error: {exc}", err=True)
    sys.exit(1)


@click.group()
@click.option("-c", "--config", "config_path", default=None, help="Path to config TOML file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """pinata-client - pin files and JSON to IPFS through Pinata."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose

    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@cli.command("pin-file")
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print the raw pin response")
@click.pass_context
def pin_file(ctx: click.Context, path: str, as_json: bool) -> None:
    """Pin a local file."""
    with _client(ctx) as client:
        try:
            resp = client.pin_file(path)
        except PinataError as exc:
            _fail(exc)
    _show(resp, as_json)


@cli.command("pin-json")
@click.argument("data")
@click.option("--json", "as_json", is_flag=True, help="Print the raw pin response")
@click.pass_context
def pin_json(ctx: click.Context, data: str, as_json: bool) -> None:
    """Pin a JSON document.

    DATA is a JSON literal, or @path to read the document from a file.
    """
    try:
        if data.startswith("@"):
            with open(data[1:], encoding="utf-8") as f:
                payload = json.load(f)
        else:
            payload = json.loads(data)
    except (OSError, ValueError) as exc:
        raise click.BadParameter(str(exc), param_hint="DATA") from exc

    with _client(ctx) as client:
        try:
            resp = client.pin_json(payload)
        except PinataError as exc:
            _fail(exc)
    _show(resp, as_json)


@cli.command()
@click.argument("ipfs_hash", metavar="HASH")
@click.pass_context
def unpin(ctx: click.Context, ipfs_hash: str) -> None:
    """Unpin previously pinned content."""
    with _client(ctx) as client:
        try:
            client.unpin(ipfs_hash)
        except PinataError as exc:
            _fail(exc)
    click.echo(f"Unpinned {ipfs_hash}")


if __name__ == "__main__":
    cli()
