"""
Read-only credential handed to the pipeline.

Creating and refreshing sessions happens elsewhere; this only carries the
PDS host and the bearer token for requests.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Session(BaseModel):
    model_config = ConfigDict(frozen=True)

    service_url: str
    access_token: str
    did: Optional[str] = None
    handle: Optional[str] = None

    def __repr__(self) -> str:
        return f"Session(service_url={self.service_url!r}, handle={self.handle!r})"
