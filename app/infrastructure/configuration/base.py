"""Base classes shared by the settings sections.

Every section reads the process environment and an optional ``.env`` file,
matches variable names case-sensitively and ignores unrelated variables.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_CONFIG = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


class IntegrationSettings(BaseSettings):
    """Settings for an outbound dependency (geolocation provider, Redis)."""

    model_config = ENV_CONFIG


class InfrastructureSettings(BaseSettings):
    """Settings for the listener itself and the networks it treats as internal."""

    model_config = ENV_CONFIG
