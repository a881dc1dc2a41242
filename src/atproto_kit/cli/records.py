"""CLI: atkit record get"""

from typing import Optional

import click
from rich.console import Console
from rich.syntax import Syntax

from atproto_kit.transport.xrpc import DEFAULT_PDS_URL

console = Console()


def _get_client(authenticated: bool = True):
    from atproto_kit.cli.main import _get_client
    return _get_client(authenticated)


def _run(coro):
    from atproto_kit.cli.main import _run
    return _run(coro)


def _unwrap(result):
    from atproto_kit.cli.main import _unwrap
    return _unwrap(result)


@click.group()
def record():
    """Repository records."""


@record.command("get")
@click.argument("repo")
@click.argument("collection")
@click.argument("rkey")
@click.option("--cid", default=None, help="Pin a specific record version")
@click.option("--pds-url", default=DEFAULT_PDS_URL, show_default=True)
def record_get(repo: str, collection: str, rkey: str, cid: Optional[str], pds_url: str):
    """Fetch REPO/COLLECTION/RKEY and print it as JSON."""

    async def _get():
        client = _get_client(authenticated=False)
        try:
            with console.status("Fetching record..."):
                result = await client.repo.get_record(repo, collection, rkey, cid=cid, pds_url=pds_url)
        finally:
            await client.close()
        output = _unwrap(result)
        console.print(f"[bold]{output.uri}[/bold] [dim]{output.cid or ''}[/dim]")
        console.print(Syntax(output.value.model_dump_json(indent=2), "json"))

    _run(_get())
