"""Typer-based command line interface for shard reconstruction."""
from __future__ import annotations

import json
import sys
from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from ..config import AppConfig, dump_default_config, load_config
from ..documents import document_from_path
from ..errors import ShamirError
from ..field import PRIME
from ..logging import configure_logging, get_logger
from ..paths import runtime_config_dir
from ..reconstruct import ShamirReconstructor

app = typer.Typer(help="Shamir disclosure command line interface")


class OutputFormat(str, Enum):
    decimal = "decimal"
    hex = "hex"


def format_field_element(value: int, output_format: str) -> str:
    if output_format == OutputFormat.hex.value:
        return f"0x{value:064x}"
    return str(value)


def _current_config(ctx: typer.Context) -> AppConfig:
    config = ctx.obj
    if isinstance(config, AppConfig):
        return config
    return load_config()


def _resolve_format(ctx: typer.Context, output_format: Optional[OutputFormat]) -> str:
    if output_format is not None:
        return output_format.value
    return _current_config(ctx).output.format


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    try:
        ctx.obj = load_config(config)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    configure_logging(ctx.obj.logging.normalized_level(), stream=sys.stderr)


@app.command()
def reconstruct(
    ctx: typer.Context,
    document: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    recipients: Optional[int] = typer.Option(None, "--recipients", "-n", help="Total number of recipients"),
    threshold: Optional[int] = typer.Option(None, "--threshold", "-t", help="Shards required to reconstruct"),
    output_format: Optional[OutputFormat] = typer.Option(None, "--format", case_sensitive=False),
) -> None:
    """Reconstruct the secret from a JSON or YAML shard document."""
    log = get_logger("shamir_disclosure.cli")
    fmt = _resolve_format(ctx, output_format)

    try:
        shard_document = document_from_path(document)
    except ShamirError as exc:
        log.error("reconstruct.failed", error=type(exc).__name__, detail=str(exc))
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    recipient_amount = recipients if recipients is not None else shard_document.recipient_amount
    threshold_amount = threshold if threshold is not None else shard_document.threshold_amount
    if recipient_amount is None or threshold_amount is None:
        typer.echo(
            "recipient_amount and threshold_amount must be given in the document or via --recipients/--threshold",
            err=True,
        )
        raise typer.Exit(code=2)

    log.info("shards.loaded", path=str(document), count=len(shard_document.shards))
    try:
        reconstructor = ShamirReconstructor(recipient_amount, threshold_amount)
        secret = reconstructor.reconstruct(shard_document.points())
    except ShamirError as exc:
        log.error("reconstruct.failed", error=type(exc).__name__, detail=str(exc))
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    log.info("secret.reconstructed", recipients=recipient_amount, threshold=threshold_amount)
    typer.echo(json.dumps({"secret": format_field_element(secret, fmt)}))


@app.command()
def modulus(
    ctx: typer.Context,
    output_format: Optional[OutputFormat] = typer.Option(None, "--format", case_sensitive=False),
) -> None:
    """Print the field modulus shards are reduced by."""
    typer.echo(format_field_element(PRIME, _resolve_format(ctx, output_format)))


@app.command("config-init")
def config_init(
    destination: Optional[Path] = typer.Option(None, "--destination", help="Where to write the default config"),
) -> None:
    target = destination or runtime_config_dir() / "config.yaml"
    dump_default_config(target)
    typer.echo(f"Default configuration written to {target}")


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(f"shamir-disclosure {__version__}")


if __name__ == "__main__":  # pragma: no cover
    app()
