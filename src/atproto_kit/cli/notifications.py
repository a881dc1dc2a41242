"""CLI: atkit notifications list|unread|seen"""

import json
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

console = Console()


def _get_client():
    from atproto_kit.cli.main import _get_client
    return _get_client()


def _run(coro):
    from atproto_kit.cli.main import _run
    return _run(coro)


def _unwrap(result):
    from atproto_kit.cli.main import _unwrap
    return _unwrap(result)


@click.group()
def notifications():
    """Notification commands."""


@notifications.command("list")
@click.option("--limit", default=50, type=int)
@click.option("--cursor", default=None)
@click.option("--priority", is_flag=True, help="Priority notifications only")
@click.option("--json-output", "--json", is_flag=True)
def notifications_list(limit: int, cursor: Optional[str], priority: bool, json_output: bool):
    """List notifications."""

    async def _list():
        client = _get_client()
        try:
            result = await client.notifications.list_notifications(limit=limit, cursor=cursor, priority=priority or None)
        finally:
            await client.close()
        output = _unwrap(result)
        if json_output:
            click.echo(json.dumps(output.encode(), indent=2))
            return
        table = Table(title=f"Notifications ({len(output.notifications)})")
        table.add_column("Reason", style="bold")
        table.add_column("From")
        table.add_column("Read")
        table.add_column("Indexed")
        for n in output.notifications:
            table.add_row(n.reason.value, n.author.handle, "yes" if n.is_read else "", n.indexed_at.isoformat())
        console.print(table)
        if output.cursor:
            console.print(f"[dim]Next page: --cursor {output.cursor}[/dim]")

    _run(_list())


@notifications.command("unread")
def notifications_unread():
    """Show the unread notification count."""

    async def _count():
        client = _get_client()
        try:
            result = await client.notifications.get_unread_count()
        finally:
            await client.close()
        console.print(f"{_unwrap(result).count} unread")

    _run(_count())


@notifications.command("seen")
def notifications_seen():
    """Mark all notifications as read."""

    async def _seen():
        client = _get_client()
        try:
            with console.status("Updating..."):
                result = await client.notifications.update_seen()
        finally:
            await client.close()
        _unwrap(result)
        console.print("[green]Notifications marked as seen.[/green]")

    _run(_seen())
