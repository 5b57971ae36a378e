from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


class Settings:
    """Application settings loaded from environment variables.

    Keep the lookup endpoint and transport knobs centralized here.
    """

    app_env: str = os.getenv("APP_ENV", "development")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    scouter_lookup_url: Optional[str] = os.getenv(
        "SCOUTER_LOOKUP_URL", "https://tagciccone.com/scouterLookup"
    )
    scouter_lookup_timeout: float = float(os.getenv("SCOUTER_LOOKUP_TIMEOUT", "10.0"))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
