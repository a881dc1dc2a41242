"""CLI: atkit auth login|status|logout"""

from typing import Optional

import click
from rich.console import Console

console = Console()


def _load_config() -> dict:
    from atproto_kit.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from atproto_kit.cli.main import _save_config
    _save_config(cfg)


@click.group()
def auth():
    """Session token commands."""


@auth.command("login")
@click.option("--token", prompt="Access token", hide_input=True, help="Access JWT from createSession")
@click.option("--service-url", default=None, help="PDS base URL")
@click.option("--handle", default=None)
@click.option("--did", default=None)
def auth_login(token: str, service_url: Optional[str], handle: Optional[str], did: Optional[str]):
    """Save an existing session token."""
    from atproto_kit.transport.xrpc import DEFAULT_PDS_URL

    cfg = _load_config()
    url = service_url or cfg.get("service_url", DEFAULT_PDS_URL)
    handle = handle or cfg.get("handle")
    did = did or cfg.get("did")
    _save_config({**cfg, "access_token": token, "service_url": url, "handle": handle, "did": did})
    console.print(f"[green]Session saved for {handle or 'unknown handle'} on {url}[/green]")
    console.print("[dim]Token saved to ~/.atproto-kit/config.json[/dim]")


@auth.command("status")
def auth_status():
    """Show current auth status."""
    cfg = _load_config()
    if cfg.get("access_token"):
        console.print(f"[green]Logged in[/green] as {cfg.get('handle') or 'unknown'} on {cfg.get('service_url')}")
    else:
        console.print("[yellow]Not logged in. Run `atkit auth login`.[/yellow]")


@auth.command("logout")
def auth_logout():
    """Clear saved credentials."""
    _save_config({})
    console.print("[green]Logged out.[/green]")
