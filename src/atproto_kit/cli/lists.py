"""CLI: atkit lists blocks"""

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
def lists():
    """Moderation list commands."""


@lists.command("blocks")
@click.option("--limit", default=50, type=int)
@click.option("--cursor", default=None)
@click.option("--json-output", "--json", is_flag=True)
def lists_blocks(limit: int, cursor: Optional[str], json_output: bool):
    """Moderation lists the account blocks."""

    async def _blocks():
        client = _get_client()
        try:
            result = await client.graph.get_list_blocks(limit=limit, cursor=cursor)
        finally:
            await client.close()
        output = _unwrap(result)
        if json_output:
            click.echo(json.dumps(output.encode(), indent=2))
            return
        table = Table(title="Blocked lists")
        table.add_column("Name", style="bold")
        table.add_column("Creator")
        table.add_column("Items")
        table.add_column("URI")
        for lv in output.lists:
            count = "" if lv.list_item_count is None else str(lv.list_item_count)
            table.add_row(lv.name, lv.creator.handle, count, lv.uri)
        console.print(table)
        if output.cursor:
            console.print(f"[dim]Next page: --cursor {output.cursor}[/dim]")

    _run(_blocks())
