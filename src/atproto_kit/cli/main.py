"""
atproto-kit CLI, the `atkit` command.

Commands:
  atkit auth login              Store a PDS session token
  atkit record get <repo> ...   Fetch a repository record
  atkit notifications <cmd>     List / count / mark notifications
  atkit lists blocks            Moderation lists you block
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

try:
    import click
    from rich.console import Console
    from rich.logging import RichHandler
except ImportError:
    raise SystemExit("CLI requires extras: pip install atproto-kit[cli]")

from atproto_kit import __version__
from atproto_kit.client import AsyncATProtoKit
from atproto_kit.result import Result
from atproto_kit.session import Session
from atproto_kit.transport.xrpc import DEFAULT_PDS_URL

console = Console()
CONFIG_FILE = Path.home() / ".atproto-kit" / "config.json"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def _get_client(authenticated: bool = True) -> AsyncATProtoKit:
    cfg = _load_config()
    base_url = cfg.get("service_url", DEFAULT_PDS_URL)
    if not cfg.get("access_token"):
        if authenticated:
            console.print("[red]Not logged in. Run `atkit auth login` first.[/red]")
            raise SystemExit(1)
        return AsyncATProtoKit(base_url=base_url)
    session = Session(
        service_url=base_url,
        access_token=cfg["access_token"],
        did=cfg.get("did"),
        handle=cfg.get("handle"),
    )
    return AsyncATProtoKit(session=session, base_url=base_url)


def _run(coro):
    return asyncio.run(coro)


def _unwrap(result: Result[Any]) -> Any:
    """Print a failed result and exit 1, else hand back the value."""
    if not result.ok:
        console.print(f"[red]{result.error}[/red]")
        raise SystemExit(1)
    return result.value


@click.group()
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log requests to stderr.")
def main(verbose: bool):
    """atproto-kit CLI. Query an AT Protocol PDS."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


# Register subcommands from separate modules
from atproto_kit.cli.auth import auth
from atproto_kit.cli.lists import lists
from atproto_kit.cli.notifications import notifications
from atproto_kit.cli.records import record

main.add_command(auth)
main.add_command(record)
main.add_command(notifications)
main.add_command(lists)


if __name__ == "__main__":
    main()
