"""
Moderation labels: com.atproto.label.defs#label.
"""

from typing import Optional

from pydantic import Field, StrictBool, StrictInt, StrictStr

from atproto_kit.models.base import Record
from atproto_kit.models.dates import DateTime, OptionalDateTime
from atproto_kit.models.unknown import UnknownType


class Label(Record):
    """A label attached to an account or record by a labeler."""

    version: Optional[StrictInt] = Field(None, alias="ver")
    source_did: StrictStr = Field(alias="src")
    uri: StrictStr = Field(alias="uri")
    cid: Optional[StrictStr] = Field(None, alias="cid")
    value: StrictStr = Field(alias="val")
    is_negated: Optional[StrictBool] = Field(None, alias="neg")
    created_at: DateTime = Field(alias="cts")
    expires_at: OptionalDateTime = Field(None, alias="exp")
    signature: Optional[UnknownType] = Field(None, alias="sig")
