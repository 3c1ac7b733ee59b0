import logging
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

APP_VERSION = "1.0.0"
DEFAULT_PORT = 8000

# Load environment variables only for local development
if os.path.exists(".env"):
    load_dotenv()
    logger.info("Loading from .env file (local development)")


def _parse_port(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid PORT {raw!r}, falling back to {DEFAULT_PORT}")
        return DEFAULT_PORT


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning(f"Invalid LOG_LEVEL {raw!r}, falling back to INFO")
        return "INFO"
    return level


@dataclass
class Settings:
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])


def get_settings() -> Settings:
    """Build settings from the process environment"""
    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=_parse_port(os.getenv("PORT", str(DEFAULT_PORT))),
        log_level=_parse_log_level(os.getenv("LOG_LEVEL", "INFO")),
        cors_origins=[origin.strip() for origin in origins.split(",") if origin.strip()] or ["*"],
    )
