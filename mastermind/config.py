"""
Single place to:
- Load env vars from .env if present (game service only)
- Read service settings into a frozen Settings object
- Set up logging once for the CLI and the service

The CLI reads no environment at all: its service URL and timeout are
constants in api_client.py, and game constants live in types.py.
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

DEFAULT_DATABASE_URL = "sqlite+pysqlite:///:memory:"
CLI_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    app_env: str = "local"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # dev convenience; a real deployment injects env vars directly
    load_dotenv()

    port_text = os.getenv("MASTERMIND_PORT", "8000")
    try:
        port = int(port_text)
    except ValueError:
        raise RuntimeError(f"MASTERMIND_PORT must be an integer, got {port_text!r}.")

    return Settings(
        database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
        app_env=os.getenv("APP_ENV", "local"),
        host=os.getenv("MASTERMIND_HOST", "127.0.0.1"),
        port=port,
        log_level=os.getenv("MASTERMIND_LOG_LEVEL", "INFO").upper(),
    )

def configure_logging(level: str) -> None:
    """Logs go to stderr so they never mix with the game transcript on stdout."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
