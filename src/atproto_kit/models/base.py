"""
Record base model, ordered union decoding and the decode entry point.

Every protocol entity derives from ``Record``: a frozen pydantic model whose
fields each name their wire key through ``Field(alias=...)``. Entities that
carry a ``$type`` literal set ``type_id``; it is checked on decode and always
written on encode, never stored as a field.

Unions are declared as ``Annotated[Union[A, B, C], OneOf("label")]``. The
candidate order inside ``Union[...]`` is the decode priority: the first
candidate that validates wins, so a more specific shape must be listed ahead
of a looser one that would also accept its payload.
"""

from typing import Any, ClassVar, Optional, TypeVar, get_args

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    ValidationError,
    model_serializer,
    model_validator,
)
from pydantic_core import PydanticCustomError, core_schema

from atproto_kit.errors import DecodeError, FormatError, RequiredFieldError, UnrecognizedVariantError

M = TypeVar("M", bound=BaseModel)

FORMAT_ERROR_TYPES = {"datetime_format", "type_mismatch", "enum", "literal_error"}


class Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    type_id: ClassVar[Optional[str]] = None

    @model_validator(mode="before")
    @classmethod
    def check_type_id(cls, data: Any) -> Any:
        if cls.type_id is not None and isinstance(data, dict):
            actual = data.get("$type")
            if actual is not None and actual != cls.type_id:
                raise PydanticCustomError(
                    "type_mismatch",
                    "expected $type '{expected}', got '{actual}'",
                    {"expected": cls.type_id, "actual": str(actual)},
                )
        return data

    @model_serializer(mode="wrap")
    def serialize_wire(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> dict[str, Any]:
        data = handler(self)
        # Absent optionals stay absent on the wire.
        for name, field in type(self).model_fields.items():
            if getattr(self, name) is None:
                data.pop(field.alias if info.by_alias and field.alias else name, None)
        if self.type_id is not None:
            data = {"$type": self.type_id, **data}
        return data

    @classmethod
    def decode(cls: type[M], data: Any) -> M:
        return decode(cls, data)

    def encode(self) -> dict[str, Any]:
        """Wire representation as plain JSON-compatible Python values."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class OneOf:
    """Ordered trial decoding for a ``Union[...]`` of records.

    Used as ``Annotated`` metadata. Each candidate is validated in turn
    against the same input and the first clean parse is adopted. Instances
    of a candidate pass through untouched. Encoding dumps whichever variant
    is held with no wrapper.
    """

    def __init__(self, label: str):
        self.label = label

    def __get_pydantic_core_schema__(self, source: Any, handler: Any) -> core_schema.CoreSchema:
        candidates: tuple[type[BaseModel], ...] = get_args(source) or (source,)

        def decode_variant(value: Any) -> BaseModel:
            if isinstance(value, candidates):
                return value
            rejected = []
            for candidate in candidates:
                try:
                    return candidate.model_validate(value)
                except ValidationError as exc:
                    err = exc.errors(include_url=False)[0]
                    rejected.append(f"{candidate.__name__}: {format_path(tuple(err['loc']))}: {err['msg']}")
            raise PydanticCustomError(
                "unrecognized_variant",
                "value matched none of the {label} variants ({names})",
                {
                    "label": self.label,
                    "names": ", ".join(c.__name__ for c in candidates),
                    "rejected": rejected,
                },
            )

        def encode_variant(value: BaseModel, info: SerializationInfo) -> Any:
            return value.model_dump(mode=info.mode, by_alias=bool(info.by_alias))

        return core_schema.no_info_plain_validator_function(
            decode_variant,
            serialization=core_schema.plain_serializer_function_ser_schema(encode_variant, info_arg=True),
        )


def format_path(loc: tuple[Any, ...]) -> str:
    """``("notifications", 0, "reason")`` -> ``notifications[0].reason``"""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path


def translate_error(exc: ValidationError) -> DecodeError:
    """Map the first pydantic validation error onto the decode error taxonomy."""
    error = exc.errors(include_url=False)[0]
    path = format_path(tuple(error["loc"]))
    kind = error["type"]
    message = error["msg"]
    details = {"type": kind, **error.get("ctx", {})}
    if kind == "unrecognized_variant":
        return UnrecognizedVariantError(path, message, details)
    if kind in FORMAT_ERROR_TYPES:
        return FormatError(path, message, details)
    return RequiredFieldError(path, message, details)


def decode(model: type[M], data: Any) -> M:
    """Validate ``data`` as ``model`` or raise a ``DecodeError``. No partial objects."""
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise translate_error(exc) from exc
