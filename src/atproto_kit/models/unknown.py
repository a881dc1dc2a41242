"""
Passthrough container for payloads whose shape the schema leaves open.
"""

import json
from typing import Any, Optional, Union

from pydantic import ConfigDict, JsonValue, RootModel

from atproto_kit.models.base import M, decode


class UnknownType(RootModel[JsonValue]):
    """Any JSON value, kept exactly as decoded.

    Decoding never fails for JSON input and encoding reproduces the value.
    The held value belongs to the caller: edit it in place and re-encode to
    send the edited payload.
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_json(cls, raw: Union[str, bytes]) -> "UnknownType":
        return cls.model_validate(json.loads(raw))

    @property
    def value(self) -> Any:
        return self.root

    @property
    def record_type(self) -> Optional[str]:
        """The ``$type`` of an object payload, if it names one."""
        if isinstance(self.root, dict):
            type_id = self.root.get("$type")
            if isinstance(type_id, str):
                return type_id
        return None

    def as_record(self, model: type[M]) -> M:
        return decode(model, self.root)

    def encode(self) -> Any:
        return self.model_dump(mode="json")

    def to_json(self) -> str:
        return self.model_dump_json()
