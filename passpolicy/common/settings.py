from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Policy file (YAML); built-in defaults apply when unset
    config_path: Optional[str] = None

    # Logging
    log_level: str = "WARNING"
    log_dir: str = "/var/log/passpolicy"
    file_logging: bool = False

    model_config = SettingsConfigDict(
        env_prefix="PASSPOLICY_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
