"""
com.atproto.repo endpoints.
"""

from typing import Optional

from atproto_kit.models.repo import GetRecordOutput
from atproto_kit.result import Result
from atproto_kit.transport.xrpc import DEFAULT_PDS_URL, Endpoint, XRPCPipeline

GET_RECORD = Endpoint("com.atproto.repo.getRecord", GetRecordOutput)


class RepoAPI:
    def __init__(self, xrpc: XRPCPipeline):
        self._xrpc = xrpc

    async def get_record(
        self,
        repo: str,
        collection: str,
        record_key: str,
        cid: Optional[str] = None,
        pds_url: str = DEFAULT_PDS_URL,
    ) -> Result[GetRecordOutput]:
        """Fetch one record from a repository. No auth; served by the record's PDS."""
        return await self._xrpc.call(
            GET_RECORD,
            [("repo", repo), ("collection", collection), ("rkey", record_key), ("cid", cid)],
            base_url=pds_url,
        )
