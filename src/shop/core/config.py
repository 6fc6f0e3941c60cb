# src/shop/core/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Search: maximale Anzahl Einträge pro Suchergebnis
    result_limit: int = Field(default=10, ge=1)

    # Format des langen Namens: "<producer><separator><name>"
    long_name_separator: str = " - "

    model_config = SettingsConfigDict(
        env_prefix="SHOP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
