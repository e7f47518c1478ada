"""Environment-driven settings and logging setup."""
import logging
import os
import sys
from dataclasses import dataclass

import structlog
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    api_prefix: str = "/api"
    default_location: str = "New York, NY"
    default_page_size: int = 10
    seed_data: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            api_prefix=os.getenv("API_PREFIX", "/api").rstrip("/"),
            default_location=os.getenv("DEFAULT_LOCATION", "New York, NY"),
            default_page_size=int(os.getenv("DEFAULT_PAGE_SIZE", "10")),
            seed_data=_env_bool("SEED_DATA", True),
        )


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog to write to stderr."""
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
