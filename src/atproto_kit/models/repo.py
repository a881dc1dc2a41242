"""
Repository records: com.atproto.repo.
"""

from typing import Optional

from pydantic import Field, StrictStr

from atproto_kit.models.base import Record
from atproto_kit.models.unknown import UnknownType


class StrongReference(Record):
    """Points at one specific version of a record: URI plus content hash."""

    uri: StrictStr = Field(alias="uri")
    cid: StrictStr = Field(alias="cid")


class GetRecordOutput(Record):
    """com.atproto.repo.getRecord output. ``value`` is the record as stored."""

    uri: StrictStr = Field(alias="uri")
    cid: Optional[StrictStr] = Field(None, alias="cid")
    value: UnknownType = Field(alias="value")
