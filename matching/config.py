import os
import logging
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load env vars (if not already loaded)
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


class Settings(BaseModel):
    """Runtime settings for the matching engine, read from the environment."""
    default_limit: int = Field(default=DEFAULT_LIMIT)
    catalog_path: Optional[str] = None
    log_level: str = "INFO"


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid {name}={raw!r}, using default {default}")
        return default


def get_settings() -> Settings:
    """Build settings from MATCHING_* environment variables."""
    return Settings(
        default_limit=_int_from_env("MATCHING_DEFAULT_LIMIT", DEFAULT_LIMIT),
        catalog_path=os.getenv("MATCHING_CATALOG_PATH") or None,
        log_level=(os.getenv("MATCHING_LOG_LEVEL") or "INFO").upper(),
    )


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format='%(levelname)s - %(name)s - %(message)s'
    )
