import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from greenlake.config import settings as settings_module  # noqa: E402



@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    for name in list(os.environ):
        if name.upper().startswith("GREENLAKE_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setitem(settings_module.Settings.model_config, "env_file", None)
    settings_module.reset_settings()
    yield
    settings_module.reset_settings()


@pytest.fixture
def token_payload():
    return {
        "access_token": "eyJhbGciOiJSUzI1NiJ9.payload.signature",
        "scope": "openid profile",
        "token_type": "Bearer",
        "expiry": "2026-10-19T12:00:00Z",
        "expires_in": 7200,
        "accessTokenOnly": True,
    }


@pytest.fixture
def users_payload():
    return {
        "schemas": ["urn:ietf:params:scim:api:messages:2.0:ListResponse"],
        "totalResults": 2,
        "itemsPerPage": 2,
        "startIndex": 1,
        "Resources": [
            {
                "id": "u-1",
                "active": True,
                "displayName": "Alice Smith",
                "userName": "alice@example.com",
                "name": {"familyName": "Smith", "givenName": "Alice"},
            },
            {
                "id": "u-2",
                "active": False,
                "displayName": "Bob Jones",
                "userName": "bob@example.com",
                "name": {"familyName": "Jones", "givenName": "Bob"},
            },
        ],
    }
