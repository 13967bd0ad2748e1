import os
from dataclasses import dataclass

DEFAULT_LRCLIB_BASE_URL = "https://lrclib.net"


@dataclass(frozen=True)
class Settings:
    lrclib_base_url: str
    log_level: str


def get_settings() -> Settings:
    """Read settings from environment variables."""
    base_url = os.getenv("LRCLIB_BASE_URL") or DEFAULT_LRCLIB_BASE_URL
    return Settings(
        lrclib_base_url=base_url.rstrip("/"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
