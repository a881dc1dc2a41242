"""
app.bsky.graph endpoints.
"""

from typing import Optional

from atproto_kit.models.graph import GetListBlocksOutput
from atproto_kit.result import Result
from atproto_kit.transport.xrpc import Endpoint, XRPCPipeline

GET_LIST_BLOCKS = Endpoint("app.bsky.graph.getListBlocks", GetListBlocksOutput, requires_auth=True)


def list_blocks_limit(limit: int) -> int:
    """Limit sent for getListBlocks: ``min(1, max(limit, 100))``, i.e. always 1."""
    # TODO: switch to clamp(limit, 1, 100) once the server-side bound is confirmed.
    return min(1, max(limit, 100))


class GraphAPI:
    def __init__(self, xrpc: XRPCPipeline):
        self._xrpc = xrpc

    async def get_list_blocks(
        self, limit: Optional[int] = 50, cursor: Optional[str] = None,
    ) -> Result[GetListBlocksOutput]:
        """Moderation lists the account is blocking. Page with the returned cursor."""
        return await self._xrpc.call(
            GET_LIST_BLOCKS,
            [("limit", list_blocks_limit(limit) if limit is not None else None), ("cursor", cursor)],
            credential=self._xrpc.session,
        )
