import pytest
from pydantic import ValidationError

from greenlake.models import ClientConfig, Name, Token, User, UserListResponse


def test_token_accepts_wire_and_field_names():
    by_alias = Token.model_validate({"access_token": "a", "accessTokenOnly": True})
    by_name = Token(access_token="a", access_token_only=True)

    assert by_alias == by_name


def test_client_config_is_frozen():
    config = ClientConfig(
        grant_type="client_credentials",
        client_id="",
        client_secret="LOCAL",
        tenant_id="t-1",
        host="https://greenlake.example.com",
    )

    with pytest.raises(ValidationError):
        config.host = "https://elsewhere.example.com"


def test_user_keeps_extra_scim_attributes():
    user = User.model_validate(
        {
            "userName": "carol@example.com",
            "emails": [{"value": "carol@example.com", "primary": True}],
            "name": {"givenName": "Carol", "familyName": "White", "middleName": "Ann"},
        }
    )

    assert user.user_name == "carol@example.com"
    assert user.active is False
    assert user.to_dict()["emails"][0]["primary"] is True
    assert user.to_dict()["name"] == {"familyName": "White", "givenName": "Carol", "middleName": "Ann"}


def test_user_defaults_to_empty_name():
    user = User()

    assert user.name == Name()
    assert user.name.given_name == ""


def test_list_response_defaults_to_no_resources():
    page = UserListResponse.model_validate({"schemas": ["urn:ietf:params:scim:api:messages:2.0:ListResponse"]})

    assert page.resources == []
    assert page.total_results == 0
