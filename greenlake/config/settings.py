from typing import Literal, Optional
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    host: str = Field(default="", description="GreenLake API base URL, e.g. https://client.greenlake.hpe.com")
    tenant_id: str = Field(default="", description="Tenant ID owning the SCIM user directory")

    grant_type: str = Field(default="client_credentials", description="OAuth2 grant type for the token exchange")
    client_id: str = Field(default="", description="API client ID")
    client_secret: str = Field(default="", description="API client secret")
    api_key: str = Field(default="", description="Pre-issued API key; skips the credential flow when set")

    verify_tls: bool = Field(default=True, description="Verify server TLS certificates")
    timeout: Optional[float] = Field(default=None, description="Per-request timeout in seconds (none by default)")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")

    class Config:
        env_prefix = "GREENLAKE_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


_settings_instance = None


def get_settings() -> Settings:
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings() -> None:
    global _settings_instance
    _settings_instance = None
