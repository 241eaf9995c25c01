from functools import lru_cache
from typing import Literal
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Console settings loaded from environment.

    Every value can be overridden with an environment variable of the same
    name (case-insensitive) or from a local `.env` file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "jclaw Operator Console"
    app_version: str = "0.1.0"
    environment: Literal["local", "dev", "staging", "prod"] = "local"

    # Admin API
    base_url: str = "http://localhost:8080"
    api_prefix: str = "/admin/api"
    sso_login_path: str = "/oauth2/authorization/sso"
    request_timeout: float = 30.0  # seconds
    verify_tls: bool = True

    # Anti-forgery
    xsrf_cookie_name: str = "XSRF-TOKEN"
    xsrf_header_name: str = "X-XSRF-TOKEN"

    # Console behaviour
    default_tab: Literal["chat", "skills", "admin"] = "chat"
    audit_page_size: int = Field(default=20, ge=1, le=200)
    default_max_tokens: int = 4096
    default_max_tool_calls: int = 10
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"

    # Observability
    log_level: int = 20  # INFO by default (DEBUG=10, INFO=20, WARNING=30, ERROR=40)
    log_format: Literal["json", "console"] = "console"
    log_mask_secrets: bool = True

    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        """Normalize the prefix to a leading slash and no trailing slash."""
        return "/" + v.strip("/")

    @property
    def is_production(self) -> bool:
        return self.environment == "prod"

    @property
    def sso_login_url(self) -> str:
        return self.base_url.rstrip("/") + self.sso_login_path


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
