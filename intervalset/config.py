"""Environment-based configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class ShellConfig(BaseSettings):
    """Interactive shell configuration loaded from INTERVALSET_* variables."""

    model_config = SettingsConfigDict(env_prefix="INTERVALSET_")

    log_level: str = "WARNING"
    prompt: str = "Enter choice: "
    title: str = "Interval Manager"
