"""
Name: Application Configuration (Settings)

Responsibilities:
  - Centralized, typed configuration using pydantic-settings
  - Validate environment variables at startup
  - Provide defaults that work for local development against a dev server

Collaborators:
  - container.py: picks the gateway implementation and its transport settings
  - crosscutting/logger.py: reads log level and format
  - application/navigation.py: receives the folder path segment

Constraints:
  - No business logic — pure configuration

Notes:
  - Uses pydantic-settings for env parsing and validation
  - Singleton via lru_cache for performance
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.entities import FolderType


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_env: Application environment (development/test/production)
        api_base_url: Base URL of the folder service (default: local dev server)
        api_token: Bearer token sent to the folder service (optional)
        request_timeout_s: Timeout for one creation call in seconds (default: 30)
        folder_path_segment: Path segment placed before a folder id (default: "f")
        default_folder_type: Folder type used when the caller does not pass one
        log_level: Logging level (default: INFO)
        log_json: Emit JSON logs (default: True)
    """

    # Environment
    app_env: str = "development"

    # Folder service transport
    api_base_url: str = "http://localhost:3000/api/v1"
    api_token: str = ""
    request_timeout_s: float = 30.0

    # Navigation
    folder_path_segment: str = "f"
    default_folder_type: FolderType = FolderType.TEMPLATE

    # Observability
    log_level: str = "INFO"
    log_json: bool = True

    @field_validator("api_base_url")
    @classmethod
    def api_base_url_must_be_http(cls, v: str) -> str:
        url = (v or "").strip().rstrip("/")
        if not url.startswith(("http://", "https://")):
            raise ValueError("api_base_url must start with http:// or https://")
        return url

    @field_validator("request_timeout_s")
    @classmethod
    def request_timeout_must_be_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("request_timeout_s must be greater than 0")
        return v

    @field_validator("folder_path_segment")
    @classmethod
    def folder_path_segment_valid(cls, v: str) -> str:
        segment = (v or "").strip()
        if not segment or "/" in segment:
            raise ValueError("folder_path_segment must be a single non-empty segment")
        return segment

    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    def is_test_env(self) -> bool:
        return self.app_env.strip().lower() in {"test", "testing", "ci"}

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get singleton Settings instance.

    Raises:
        ValidationError: If env vars are invalid
    """
    return Settings()
