from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GroceryListSettings(BaseSettings):
    APP_NAME: str = Field(default="grocerylist")
    APP_VERSION: str = Field(default="0.1.0")
    HOST: str = Field(default="127.0.0.1")
    PORT: int = Field(default=3030)
    BODY_MAX_BYTES: int = Field(default=16 * 1024)  # 16 KiB
    LOG_LEVEL: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_prefix="GROCERY_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> GroceryListSettings:
    return GroceryListSettings()
