"""Synchronous GreenLake identity/tenant API client built on top of httpx."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from opentelemetry.trace import get_tracer
from pydantic import BaseModel, ValidationError

from .errors import (
    GreenLakeDecodeError,
    GreenLakeHTTPError,
    GreenLakeRequestError,
    GreenLakeTransportError,
)
from .models import ClientConfig, Token, TokenRequest, UserListResponse
from .utils.telemetry import redact_auth

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

API_KEY_GRANT_TYPE = "client_credentials"
API_KEY_CLIENT_SECRET = "LOCAL"

TOKEN_PATH = "/identity/v1/token"
SCIM_TENANT_PATH = "/scim/v1/tenant"
SCIM_MEDIA_TYPE = "application/scim+json"

ModelT = TypeVar("ModelT", bound=BaseModel)


class GreenLakeClient:
    """Thin wrapper around the GreenLake identity and SCIM endpoints.

    Every call opens its own ``httpx.Client`` and buffers the whole response
    body before returning. Nothing is cached between calls.
    """

    def __init__(
        self,
        grant_type: str,
        client_id: str,
        client_secret: str,
        tenant_id: str,
        host: str,
        *,
        api_key: str = "",
        verify_tls: bool = True,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        if not host:
            raise ValueError("host is required")

        self._config = ClientConfig(
            grant_type=grant_type,
            client_id=client_id,
            client_secret=client_secret,
            tenant_id=tenant_id,
            host=host.rstrip("/"),
            api_key=api_key,
            verify_tls=verify_tls,
            timeout=timeout,
        )
        self._transport = transport

        if not verify_tls:
            logger.warning("TLS certificate verification is disabled for %s", self._config.host)

    @classmethod
    def from_api_key(
        cls,
        host: str,
        tenant_id: str,
        api_key: str,
        *,
        verify_tls: bool = True,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "GreenLakeClient":
        """Create a client from an existing API session key."""

        return cls(
            API_KEY_GRANT_TYPE,
            "",
            API_KEY_CLIENT_SECRET,
            tenant_id,
            host,
            api_key=api_key,
            verify_tls=verify_tls,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Any = None, **kwargs: Any) -> "GreenLakeClient":
        """Create a client from :class:`~greenlake.config.settings.Settings`.

        A configured ``api_key`` selects the API-key flow, otherwise the
        client credentials are used.
        """

        if settings is None:
            from .config.settings import get_settings

            settings = get_settings()

        kwargs.setdefault("verify_tls", settings.verify_tls)
        kwargs.setdefault("timeout", settings.timeout)

        if settings.api_key:
            return cls.from_api_key(settings.host, settings.tenant_id, settings.api_key, **kwargs)
        return cls(
            settings.grant_type,
            settings.client_id,
            settings.client_secret,
            settings.tenant_id,
            settings.host,
            **kwargs,
        )

    # ------------------------------------------------------------------
    # Read-only configuration
    # ------------------------------------------------------------------
    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def grant_type(self) -> str:
        return self._config.grant_type

    @property
    def client_id(self) -> str:
        return self._config.client_id

    @property
    def client_secret(self) -> str:
        return self._config.client_secret

    @property
    def tenant_id(self) -> str:
        return self._config.tenant_id

    @property
    def host(self) -> str:
        return self._config.host

    @property
    def api_key(self) -> str:
        return self._config.api_key

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def get_token(self) -> Token:
        """Exchange the configured credentials for a bearer token."""

        try:
            body = TokenRequest(
                grant_type=self.grant_type,
                client_id=self.client_id,
                client_secret=self.client_secret,
                tenant_id=self.tenant_id,
            ).model_dump_json().encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise GreenLakeRequestError(f"could not encode token request: {exc}") from exc

        request = self._build_request(
            "POST",
            f"{self.host}{TOKEN_PATH}",
            headers={"Content-Type": "application/json"},
            content=body,
        )
        payload = self._do_request(request)

        try:
            return Token.model_validate_json(payload)
        except ValidationError as exc:
            raise GreenLakeDecodeError(f"invalid token response: {exc}") from exc

    def users_url(self, path: str) -> str:
        """Return the URL list-users requests for ``path`` target, percent-encoded as sent."""

        url = f"{self.host}{SCIM_TENANT_PATH}/{self.tenant_id}/{path}"
        try:
            return str(httpx.URL(url))
        except httpx.InvalidURL as exc:
            raise GreenLakeRequestError(f"could not build GET request for {url}: {exc}") from exc

    def get_users(self, path: str) -> bytes:
        """Fetch ``path`` under the tenant's SCIM endpoint and return the raw body.

        Decoding is left to the caller; see :meth:`get_users_as` for a typed
        variant.
        """

        request = self._build_request(
            "GET",
            self.users_url(path),
            headers={
                "Accept": SCIM_MEDIA_TYPE,
                "Authorization": f"Bearer {self.api_key}",
            },
        )
        return self._do_request(request)

    def get_users_as(self, path: str, model: Type[ModelT] = UserListResponse) -> ModelT:  # type: ignore[assignment]
        payload = self.get_users(path)
        try:
            return model.model_validate_json(payload)
        except ValidationError as exc:
            raise GreenLakeDecodeError(f"invalid {model.__name__} payload: {exc}") from exc

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _build_request(
        self,
        method: str,
        url: str,
        *,
        headers: Dict[str, str],
        content: Optional[bytes] = None,
    ) -> httpx.Request:
        try:
            return httpx.Request(method, url, headers=headers, content=content)
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise GreenLakeRequestError(f"could not build {method} request for {url}: {exc}") from exc

    def _do_request(self, request: httpx.Request) -> bytes:
        with _tracer.start_as_current_span("greenlake.request") as span:
            span.set_attribute("http.method", request.method)
            span.set_attribute("http.url", str(request.url))
            logger.debug(
                "%s %s headers=%s", request.method, request.url, redact_auth(dict(request.headers))
            )

            try:
                with httpx.Client(
                    verify=self._config.verify_tls,
                    timeout=self._config.timeout,
                    transport=self._transport,
                    follow_redirects=True,
                ) as client:
                    response = client.send(request)
            except httpx.RequestError as exc:
                raise GreenLakeTransportError(f"{request.method} {request.url} failed: {exc}") from exc

            span.set_attribute("http.status_code", response.status_code)
            logger.debug("%s %s -> %s", request.method, request.url, response.status_code)

            if response.status_code != httpx.codes.OK:
                raise GreenLakeHTTPError(response.status_code, response.reason_phrase)

            return response.content
