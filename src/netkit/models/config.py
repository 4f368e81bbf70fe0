from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from netkit.constants import DEFAULT_TIMEOUT, EnvironmentName

__all__ = ["Settings"]


class Settings(BaseSettings):
    """Process-wide settings, read from ``NETKIT_*`` variables or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix="NETKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: EnvironmentName = EnvironmentName.PRODUCTION
    base_url: str | None = None
    api_key: SecretStr | None = None
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    log_level: str = "INFO"
