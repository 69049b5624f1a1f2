"""Application configuration."""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    rows: int = 3
    cols: int = 3
    seed: Optional[int] = None
    log_level: str = "WARNING"

    class Config:
        env_prefix = "SLOT_"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
