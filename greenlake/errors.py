"""Exceptions raised by the GreenLake client."""
from __future__ import annotations


class GreenLakeError(Exception):
    """Base class for every error raised by :mod:`greenlake`."""


class GreenLakeRequestError(GreenLakeError):
    """The request could not be built (bad URL, unserialisable body)."""


class GreenLakeTransportError(GreenLakeError):
    """The HTTP round trip failed before a response was received."""


class GreenLakeHTTPError(GreenLakeError):
    """The server answered with a status other than 200 OK."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.status = f"{status_code} {reason}".strip()
        super().__init__(f"error in response and response status: {self.status}")


class GreenLakeDecodeError(GreenLakeError):
    """A response body was not valid JSON of the expected shape."""
