# Role: Error taxonomy for a chat turn. The API layer maps RelayError.status_code straight onto the
# HTTP response, so every failure a client can see is one of these.

from __future__ import annotations


class RelayError(Exception):
    """Base class for errors surfaced to HTTP clients."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ValidationError(RelayError):
    """Raised when the request lacks a usable message."""

    status_code = 400


class UpstreamError(RelayError):
    """Raised when the Gemini call fails for any reason (transient or not)."""

    status_code = 500
