"""
Date-time fields in the protocol's timestamp format.

Decoding accepts ``2024-01-26T18:04:05.123Z`` style strings (any fraction
precision, ``Z`` or a numeric offset) and aware or naive ``datetime``
objects. Encoding always writes UTC with millisecond precision.
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Annotated, Any, Optional

from pydantic import PlainSerializer, PlainValidator
from pydantic_core import PydanticCustomError

_DATETIME_RE = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})[Tt](?P<time>\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<zone>[Zz]|[+-]\d{2}:?\d{2})$"
)


def _zone(zone: str) -> timezone:
    if zone in ("Z", "z"):
        return timezone.utc
    sign = -1 if zone[0] == "-" else 1
    digits = zone[1:].replace(":", "")
    hours, minutes = int(digits[:2]), int(digits[2:])
    if hours > 23 or minutes > 59:
        raise ValueError(f"offset {zone} out of range")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def parse_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if not isinstance(value, str):
        raise PydanticCustomError(
            "datetime_format", "expected a date-time string, got {kind}", {"kind": type(value).__name__}
        )
    match = _DATETIME_RE.match(value)
    if not match:
        raise PydanticCustomError("datetime_format", "'{value}' is not a protocol date-time", {"value": value})

    fraction = (match["fraction"] or "")[:6].ljust(6, "0")
    try:
        tz = _zone(match["zone"])
        parsed = datetime.strptime(f"{match['date']}T{match['time']}", "%Y-%m-%dT%H:%M:%S")
        return parsed.replace(microsecond=int(fraction), tzinfo=tz)
    except ValueError:
        raise PydanticCustomError("datetime_format", "'{value}' is not a valid date-time", {"value": value})


def format_datetime(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S") + f".{value.microsecond // 1000:03d}Z"


DateTime = Annotated[datetime, PlainValidator(parse_datetime), PlainSerializer(format_datetime, return_type=str)]
OptionalDateTime = Optional[DateTime]
