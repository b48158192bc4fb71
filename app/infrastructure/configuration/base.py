"""Base classes shared by the settings modules."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Shared by every settings class; unknown keys in .env are ignored
ENV_SETTINGS_CONFIG = SettingsConfigDict(
    env_file=".env",
    case_sensitive=True,
    extra="ignore",
)


class IntegrationSettings(BaseSettings):
    """Settings for an external network the tooling talks to."""

    model_config = ENV_SETTINGS_CONFIG


class InfrastructureSettings(BaseSettings):
    """Settings for internal behaviour such as retry bounds."""

    model_config = ENV_SETTINGS_CONFIG
