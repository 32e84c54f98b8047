"""Errors raised by the Pexels client."""

from typing import Any, Optional


class PexelsError(Exception):
    """Base class for every error raised by the client."""


class TransportError(PexelsError):
    """The HTTP request could not be issued or completed."""


class RateLimitHeaderError(PexelsError):
    """The response carried no usable X-Ratelimit-Remaining header."""

    def __init__(self, value: Optional[str]):
        self.value = value
        if value is None:
            message = "Rate limit header missing from response"
        else:
            message = f"Rate limit header is not an integer: {value!r}"
        super().__init__(message)


class DecodeError(PexelsError):
    """The response body did not match the expected schema.

    `partial` holds the result as decoded so far: fields of the wrong type
    are left at their zero value, and a body that is not JSON at all gives
    the zero-valued result.
    """

    def __init__(self, message: str, partial: Any = None):
        self.partial = partial
        super().__init__(message)
