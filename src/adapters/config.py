import os
from dataclasses import dataclass

from dotenv import load_dotenv

from utils.get_logger import get_logger

logger = get_logger(__name__)

DEFAULT_BOOK_API_URL = "http://localhost:3000"


def load_env():
    """Load environment variables from env file.

    Defaults to config/local.env for local development.
    Set ENV_FILE environment variable to override.
    Skipped when ENVIRONMENT=test (set by the test conftest).
    """
    if os.getenv("ENVIRONMENT", "").lower() == "test":
        return
    env = os.getenv("ENV_FILE", "config/local.env")
    load_dotenv(env)


@dataclass(frozen=True)
class BookApiSettings:
    base_url: str = DEFAULT_BOOK_API_URL
    timeout: float | None = None


def get_book_api_settings() -> BookApiSettings:
    """Read book API settings from the environment (after load_env)."""
    load_env()
    base_url = os.getenv("BOOK_API_URL") or DEFAULT_BOOK_API_URL
    timeout = _parse_timeout(os.getenv("BOOK_API_TIMEOUT"))
    return BookApiSettings(base_url=base_url.rstrip("/"), timeout=timeout)


def _parse_timeout(raw_timeout: str | None) -> float | None:
    """Invalid or non-positive values are ignored with a warning (no timeout)."""
    if not raw_timeout:
        return None
    try:
        timeout = float(raw_timeout)
    except ValueError:
        logger.warning(f"Ignoring BOOK_API_TIMEOUT={raw_timeout!r}: not a number")
        return None
    if timeout <= 0:
        logger.warning(f"Ignoring BOOK_API_TIMEOUT={raw_timeout!r}: must be positive")
        return None
    return timeout
