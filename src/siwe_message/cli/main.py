"""
siwe CLI — `siwe` command.

Commands:
  siwe create              Build a message from options (and saved defaults)
  siwe parse [FILE]        Show the fields found in a message
  siwe verify FILE         Check a message against expected values
  siwe nonce               Print a fresh nonce
  siwe config <cmd>        Manage saved defaults
"""

import json
import logging
import os
from pathlib import Path

try:
    import click
    from rich.console import Console
    from rich.logging import RichHandler
    from rich.markup import escape
except ImportError:
    raise SystemExit("CLI requires extras: pip install siwe-message[cli]")

console = Console()
err_console = Console(stderr=True)
CONFIG_FILE = Path(os.environ.get("SIWE_CONFIG", Path.home() / ".siwe" / "config.json"))
CONFIG_KEYS = ("domain", "uri", "scheme", "chain_id", "statement")


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def _fail(message: str) -> None:
    err_console.print(f"[red]{escape(message)}[/red]")
    raise SystemExit(1)


@click.group()
@click.version_option("0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
def main(verbose: bool):
    """Build and parse EIP-4361 Sign-In with Ethereum messages."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


# Register subcommands from separate modules
from siwe_message.cli.config import config
from siwe_message.cli.message import create_cmd, parse_cmd, verify_cmd, nonce_cmd

main.add_command(config)
main.add_command(create_cmd)
main.add_command(parse_cmd)
main.add_command(verify_cmd)
main.add_command(nonce_cmd)


if __name__ == "__main__":
    main()
