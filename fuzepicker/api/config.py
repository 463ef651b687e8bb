import logging
import os
from typing import List

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()

API_PREFIX = os.getenv("API_PREFIX", "/api/v1")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS: List[str] = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
]

MAX_HTML_BYTES = int(os.getenv("MAX_HTML_BYTES", str(2 * 1024 * 1024)))

CAPTURE_TIMEOUT_MS = int(os.getenv("CAPTURE_TIMEOUT_MS", "3000"))


def get_log_level() -> int:
    level = logging.getLevelName(LOG_LEVEL)
    if not isinstance(level, int):
        logger.warning(f"Unknown LOG_LEVEL '{LOG_LEVEL}', falling back to INFO")
        return logging.INFO
    return level
