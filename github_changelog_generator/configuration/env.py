"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from github_changelog_generator.utils.constants import DEFAULT_GITHUB_SITE


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # Repository settings
    REPO: str | None = None
    GITHUB_SITE: str = DEFAULT_GITHUB_SITE
