"""CLI: siwe create|parse|verify|nonce"""

from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from siwe_message import (
    SiweError,
    create_message,
    generate_nonce,
    parse_message,
    validate_message,
)
from siwe_message.timestamps import format_timestamp

console = Console()


def _load_config() -> dict:
    from siwe_message.cli.main import _load_config
    return _load_config()


def _fail(message: str) -> None:
    from siwe_message.cli.main import _fail
    _fail(message)


@click.command("create")
@click.option("--address", required=True, help="0x-prefixed account address")
@click.option("--domain", default=None)
@click.option("--uri", default=None)
@click.option("--chain-id", default=None, help="EIP-155 chain ID")
@click.option("--nonce", default=None, help="Defaults to a fresh random nonce")
@click.option("--scheme", default=None)
@click.option("--statement", default=None)
@click.option("--issued-at", default=None, help="ISO-8601, defaults to now")
@click.option("--expiration-time", default=None)
@click.option("--not-before", default=None)
@click.option("--request-id", default=None)
@click.option("--resource", "resources", multiple=True, help="Repeat for each resource URI")
def create_cmd(address, domain, uri, chain_id, nonce, scheme, statement, issued_at,
               expiration_time, not_before, request_id, resources):
    """Build a message and print it."""
    cfg = _load_config()
    fields = {
        "address": address,
        "domain": domain or cfg.get("domain"),
        "uri": uri or cfg.get("uri"),
        "version": "1",
        "chain_id": chain_id or cfg.get("chain_id"),
        "nonce": nonce or generate_nonce(),
        "scheme": scheme or cfg.get("scheme"),
        "statement": statement or cfg.get("statement"),
        "issued_at": issued_at,
        "expiration_time": expiration_time,
        "not_before": not_before,
        "request_id": request_id,
        "resources": list(resources) or None,
    }
    try:
        text = create_message({k: v for k, v in fields.items() if v is not None})
    except ValidationError as e:
        missing = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        _fail(f"Invalid or missing fields: {', '.join(missing)}")
    except SiweError as e:
        _fail(str(e))
    click.echo(text)


def _display(value) -> str:
    if isinstance(value, tuple):
        return "\n".join(value)
    if hasattr(value, "isoformat"):
        return format_timestamp(value)
    return str(value)


@click.command("parse")
@click.argument("file", type=click.File("r"), default="-")
@click.option("--json-output", "--json", is_flag=True)
def parse_cmd(file, json_output):
    """Show the fields found in a message (reads stdin by default)."""
    parsed = parse_message(file.read())
    if json_output:
        click.echo(parsed.model_dump_json(exclude_none=True, indent=2))
        return
    fields = parsed.fields()
    if not fields:
        console.print("[yellow]No message fields found.[/yellow]")
        return
    table = Table(title="Sign-In with Ethereum message")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for name, value in fields.items():
        table.add_row(name, _display(value))
    console.print(table)


@click.command("verify")
@click.argument("file", type=click.File("r"), default="-")
@click.option("--address", default=None)
@click.option("--domain", default=None)
@click.option("--nonce", default=None)
@click.option("--scheme", default=None)
def verify_cmd(file, address: Optional[str], domain: Optional[str], nonce: Optional[str],
               scheme: Optional[str]):
    """Check a message against expected values and its validity window."""
    parsed = parse_message(file.read())
    if not validate_message(parsed, address=address, domain=domain, nonce=nonce, scheme=scheme):
        _fail("Message is not valid.")
    console.print("[green]Message is valid.[/green]")


@click.command("nonce")
@click.option("--length", default=96, type=click.IntRange(min=8))
def nonce_cmd(length: int):
    """Print a fresh random nonce."""
    click.echo(generate_nonce(length))
