"""
GreenLake tenant API client

Exchanges client credentials for a bearer token and fetches SCIM user
collections under a tenant.
"""

from .client import GreenLakeClient
from .errors import (
    GreenLakeDecodeError,
    GreenLakeError,
    GreenLakeHTTPError,
    GreenLakeRequestError,
    GreenLakeTransportError,
)
from .models import ClientConfig, Name, Token, User, UserListResponse

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "GreenLakeClient",
    "GreenLakeDecodeError",
    "GreenLakeError",
    "GreenLakeHTTPError",
    "GreenLakeRequestError",
    "GreenLakeTransportError",
    "Name",
    "Token",
    "User",
    "UserListResponse",
]
