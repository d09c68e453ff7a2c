"""
Error taxonomy for metagen.

Server and client share these so a failure reads the same on both sides of
the wire.
"""
from __future__ import annotations
from typing import Optional


class MetagenError(Exception):
    """Base class for all metagen errors."""


class ConfigurationError(MetagenError):
    """A required setting is missing. Fatal at process start."""


class BadRequest(MetagenError):
    """The request cannot be turned into a prompt."""

    status_code = 400

    def __init__(self, reason: str = "No prompt in the request"):
        super().__init__(reason)
        self.reason = reason


class RequestFailed(MetagenError):
    """A non-success HTTP status from the relay or from upstream.

    ``status_code`` is 0 when the request never got an HTTP response.
    """

    def __init__(self, status_code: int, reason: str, detail: Optional[str] = None):
        message = f"{status_code} {reason}" if status_code else reason
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.detail = detail


class DecodeError(MetagenError):
    """Malformed UTF-8 in a streamed body. Recorded, never raised to the UI."""

    def __init__(self, position: int, invalid: bytes):
        super().__init__(f"invalid UTF-8 {invalid!r} at byte {position}")
        self.position = position
        self.invalid = invalid
