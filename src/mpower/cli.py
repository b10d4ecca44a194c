from __future__ import annotations

import json
from pathlib import Path

import typer
import yaml
from pydantic import ValidationError

from .config.invoice_file import build_invoice, load_invoice_file
from .config.settings import settings
from .errors import MpowerError
from .gateway.mapper import build_request_payload
from .gateway.setup import Setup
from .logs import log_error, log_gateway, log_system

app = typer.Typer(add_completion=False)


@app.command("preview")
def preview(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="YAML invoice file"),
    pretty: bool = typer.Option(True, "--pretty/--compact", help="Indent the JSON output"),
):
    """Build the request payload for an invoice file and print it."""
    log_system(f"Previewing invoice file {path}")
    try:
        inv = build_invoice(load_invoice_file(path), Setup.from_settings())
        payload = build_request_payload(inv)
    except (MpowerError, ValidationError, ValueError, yaml.YAMLError) as e:
        log_error(f"Invoice file {path} rejected", e)
        typer.echo(f"Invalid invoice: {e}", err=True)
        raise typer.Exit(code=1)

    log_gateway(
        f"Prepared {inv.kind} payload with {len(payload['invoice']['items'])} items "
        f"for store {inv.store.name}"
    )
    typer.echo(json.dumps(payload, indent=2 if pretty else None))


@app.command("config-status")
def config_status():
    """Show which gateway settings are configured."""
    try:
        setup = Setup.from_settings()
    except ValidationError as e:
        log_error("Gateway settings rejected", e)
        typer.echo(f"Invalid settings: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Mode: {setup.mode}")
    typer.echo(f"API base: {setup.base_url}")
    for label, value in (
        ("Master key", setup.master_key),
        ("Private key", setup.private_key),
        ("Public key", setup.public_key),
        ("Token", setup.token),
    ):
        status = "✓" if value else "✗"
        typer.echo(f"{status} {label}")
    typer.echo(f"Log dir: {settings.log_dir}")


if __name__ == "__main__":
    app()
