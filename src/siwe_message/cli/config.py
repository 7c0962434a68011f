"""CLI: siwe config set|show|clear"""

import click
from rich.console import Console
from rich.table import Table

console = Console()


def _load_config() -> dict:
    from siwe_message.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from siwe_message.cli.main import _save_config
    _save_config(cfg)


def _config_keys() -> tuple:
    from siwe_message.cli.main import CONFIG_KEYS
    return CONFIG_KEYS


@click.group()
def config():
    """Saved defaults for `siwe create`."""


@config.command("set")
@click.argument("key")
@click.argument("value")
def config_set(key: str, value: str):
    """Save a default value."""
    if key not in _config_keys():
        raise click.BadParameter(f"must be one of: {', '.join(_config_keys())}", param_hint="KEY")
    cfg = _load_config()
    cfg[key] = value
    _save_config(cfg)
    console.print(f"[green]{key} saved.[/green]")


@config.command("show")
def config_show():
    """Show saved defaults."""
    cfg = _load_config()
    if not cfg:
        console.print("[yellow]No defaults saved. Use `siwe config set`.[/yellow]")
        return
    table = Table(title="Defaults")
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for key, value in cfg.items():
        table.add_row(key, str(value))
    console.print(table)


@config.command("clear")
def config_clear():
    """Remove all saved defaults."""
    _save_config({})
    console.print("[green]Defaults cleared.[/green]")
