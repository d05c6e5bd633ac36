from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Enumeration
    cache_orbits: bool = True

    # Logging (applied by entry-point scripts only)
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="HCUBE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
