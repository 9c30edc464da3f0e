"""Client configuration loaded from environment variables."""

import re
from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Jira project keys: leading uppercase letter, then uppercase letters, digits or underscores.
_PROJECT_KEY_PATTERN = re.compile(r"^[A-Z][A-Z0-9_]*$")

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Validated client settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Jira server (Data Center / Server REST v2 with personal access token)
    JIRA_BASE_URL: str | None = None
    JIRA_API_TOKEN: SecretStr | None = None
    JIRA_PROJECT_KEY: str = "RHEL"
    JIRA_REQUEST_TIMEOUT_SEC: float = 30.0

    # Server-defined field ids; these differ between Jira instances.
    JIRA_STORY_POINTS_FIELD: str = "customfield_12310243"
    JIRA_PRIORITY_FIELD: str = "priority"

    LOG_LEVEL: str = "INFO"
    # Terminal styling for presented labels; NO_COLOR in the environment also disables it.
    COLOR: bool = True
    NO_COLOR: str | None = Field(default=None)

    @field_validator("JIRA_BASE_URL")
    @classmethod
    def validate_jira_base_url(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        s = v.strip().rstrip("/").lower()
        if not (s.startswith("http://") or s.startswith("https://")):
            raise ValueError(
                "JIRA_BASE_URL must use http or https (e.g. https://issues.example.com)"
            )
        return v.strip().rstrip("/")

    @field_validator("JIRA_PROJECT_KEY")
    @classmethod
    def validate_project_key(cls, v: str) -> str:
        key = (v or "").strip()
        if not _PROJECT_KEY_PATTERN.match(key):
            raise ValueError(
                f"JIRA_PROJECT_KEY must be an uppercase Jira project key (e.g. RHEL), got {v!r}"
            )
        return key

    @field_validator("JIRA_STORY_POINTS_FIELD", "JIRA_PRIORITY_FIELD")
    @classmethod
    def validate_field_id(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Jira field ids must be set and non-empty")
        return v.strip()

    @field_validator("JIRA_REQUEST_TIMEOUT_SEC")
    @classmethod
    def validate_jira_timeout(cls, v: float) -> float:
        if v <= 0 or v > 120:
            raise ValueError(
                "JIRA_REQUEST_TIMEOUT_SEC must be greater than 0 and at most 120"
            )
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = (v or "").strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {list(VALID_LOG_LEVELS)}, got {v!r}")
        return level

    @property
    def color_enabled(self) -> bool:
        return self.COLOR and self.NO_COLOR is None


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
