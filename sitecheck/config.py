from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 5.0
DEFAULT_RETRIES = 0
DEFAULT_OUTPUT_PATH = "status.json"


def default_workers() -> int:
    return os.cpu_count() or 1


def resolve_workers(value: object) -> int:
    """Coerce a worker count, falling back to host parallelism when invalid."""
    if value is None:
        return default_workers()
    try:
        workers = int(value)
    except (TypeError, ValueError):
        workers = 0
    if workers < 1:
        logger.warning("Invalid worker count, using default")
        return default_workers()
    return workers


def resolve_timeout(value: object) -> float:
    if value is None:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout_s = float(value)
    except (TypeError, ValueError):
        timeout_s = 0.0
    if not timeout_s > 0:
        logger.warning("Invalid timeout %r, using %ss", value, DEFAULT_TIMEOUT_SECONDS)
        return DEFAULT_TIMEOUT_SECONDS
    return timeout_s


def resolve_retries(value: object) -> int:
    if value is None:
        return DEFAULT_RETRIES
    try:
        retries = int(value)
    except (TypeError, ValueError):
        retries = -1
    if retries < 0:
        logger.warning("Invalid retry count %r, using %s", value, DEFAULT_RETRIES)
        return DEFAULT_RETRIES
    return retries


class Settings:
    SITECHECK_WORKERS: int = resolve_workers(os.getenv("SITECHECK_WORKERS"))
    SITECHECK_TIMEOUT_SECONDS: float = resolve_timeout(
        os.getenv("SITECHECK_TIMEOUT_SECONDS")
    )
    SITECHECK_RETRIES: int = resolve_retries(os.getenv("SITECHECK_RETRIES"))
    SITECHECK_OUTPUT_PATH: str = (
        os.getenv("SITECHECK_OUTPUT_PATH") or DEFAULT_OUTPUT_PATH
    )
    SITECHECK_LOG_LEVEL: str = os.getenv("SITECHECK_LOG_LEVEL", "WARNING").upper()


settings = Settings()
