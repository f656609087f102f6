"""
Storefront configuration settings
"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache


class StorefrontSettings(BaseSettings):
    """Settings for the storefront host and its plugin system"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Database
    database_url: str = Field(default="sqlite:///./storefront.db")

    # Plugin system
    plugin_config_path: str = Field(default="config/storefront.yaml")

    # Text domain used for every translatable storefront string
    text_domain: str = Field(default="storefront")

    # Seed for the "rand" product ordering; unset means non-deterministic
    random_seed: Optional[int] = Field(default=None)

    log_level: str = Field(default="INFO")


@lru_cache()
def get_settings() -> StorefrontSettings:
    """Get cached settings instance"""
    return StorefrontSettings()
