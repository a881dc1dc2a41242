"""
atproto-kit error types.

Endpoint calls never raise these; they come back inside a ``Result``.
``Result.unwrap()`` re-raises them for callers who prefer exceptions.
"""

from typing import Any, Optional


class ATProtoError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class URLConstructionError(ATProtoError):
    def __init__(self, message: str, code: str = "invalid_url"):
        super().__init__(code, message)


class TransportError(ATProtoError):
    """Connection failure or unreadable response body. Never retried here."""

    def __init__(self, message: str, code: str = "transport_error", details: Optional[dict[str, Any]] = None):
        super().__init__(code, message, details)


class XRPCResponseError(ATProtoError):
    """The server answered with an HTTP error status."""

    def __init__(self, status: int, error: Optional[str] = None, message: Optional[str] = None):
        super().__init__(error or "http_error", f"HTTP {status}: {message or error or 'request failed'}")
        self.status = status
        self.error = error


class RequestCancelledError(ATProtoError):
    def __init__(self, message: str = "request cancelled"):
        super().__init__("cancelled", message)


class SessionRequiredError(ATProtoError):
    def __init__(self, nsid: str):
        super().__init__("session_required", f"{nsid} requires an authenticated session")


class DecodeError(ATProtoError):
    """A response body did not fit the declared record shape.

    ``path`` names the offending field using wire names, e.g.
    ``notifications[0].reason``; it is empty for a top-level failure.
    """

    def __init__(self, code: str, path: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(code, f"{path or '<root>'}: {message}", details)
        self.path = path


class UnrecognizedVariantError(DecodeError):
    def __init__(self, path: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("unrecognized_variant", path, message, details)


class FormatError(DecodeError):
    def __init__(self, path: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("format_error", path, message, details)


class RequiredFieldError(DecodeError):
    def __init__(self, path: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("required_field", path, message, details)
