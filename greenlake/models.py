"""Data models for GreenLake token and SCIM user payloads."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ClientConfig(BaseModel):
    """Static client configuration, read-only for the lifetime of a client."""

    model_config = ConfigDict(frozen=True)

    grant_type: str
    client_id: str
    client_secret: str
    tenant_id: str
    host: str
    api_key: str = ""
    verify_tls: bool = True
    timeout: Optional[float] = None


class TokenRequest(BaseModel):
    grant_type: str
    client_id: str
    client_secret: str
    tenant_id: str


class Token(BaseModel):
    """Bearer token issued by ``/identity/v1/token``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    access_token: str
    scope: str = ""
    token_type: str = ""
    expiry: str = ""
    expires_in: int = 0
    access_token_only: bool = Field(default=False, alias="accessTokenOnly")

    @classmethod
    def zero(cls) -> "Token":
        return cls(access_token="")


class _SCIMBaseModel(BaseModel):
    """Permissive base: SCIM records carry many more attributes than we model."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        """Return the record with its SCIM attribute names."""

        return self.model_dump(by_alias=True, exclude_none=True)


class Name(_SCIMBaseModel):
    family_name: str = Field(default="", alias="familyName")
    given_name: str = Field(default="", alias="givenName")


class User(_SCIMBaseModel):
    active: bool = False
    display_name: str = Field(default="", alias="displayName")
    user_name: str = Field(default="", alias="userName")
    name: Name = Field(default_factory=Name)


class UserListResponse(_SCIMBaseModel):
    """SCIM ListResponse envelope around a page of users."""

    schemas: List[str] = Field(default_factory=list)
    total_results: int = Field(default=0, alias="totalResults")
    items_per_page: Optional[int] = Field(default=None, alias="itemsPerPage")
    start_index: Optional[int] = Field(default=None, alias="startIndex")
    resources: List[User] = Field(default_factory=list, alias="Resources")
