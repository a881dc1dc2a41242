"""
atproto-kit: AT Protocol client for Python.

Typed XRPC calls against a PDS or AppView, with lossless handling of
open-ended record payloads.
"""

from atproto_kit.client import ATProtoKit, AsyncATProtoKit
from atproto_kit.errors import (
    ATProtoError,
    DecodeError,
    FormatError,
    RequestCancelledError,
    RequiredFieldError,
    SessionRequiredError,
    TransportError,
    UnrecognizedVariantError,
    URLConstructionError,
    XRPCResponseError,
)
from atproto_kit.models.base import OneOf, Record, decode
from atproto_kit.models.unknown import UnknownType
from atproto_kit.result import Result
from atproto_kit.session import Session

__version__ = "0.1.0"
__all__ = [
    "ATProtoKit",
    "AsyncATProtoKit",
    "Session",
    "Result",
    "Record",
    "OneOf",
    "UnknownType",
    "decode",
    "ATProtoError",
    "URLConstructionError",
    "TransportError",
    "XRPCResponseError",
    "RequestCancelledError",
    "SessionRequiredError",
    "DecodeError",
    "UnrecognizedVariantError",
    "FormatError",
    "RequiredFieldError",
]
