from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

import requests

from sitecheck.checks.http_check import run_http
from sitecheck.checks.results import Failure, StatusRecord

logger = logging.getLogger(__name__)

DEFAULT_BACKOFF_S = 0.1


@dataclass(frozen=True)
class RetryPolicy:
    retries: int = 0
    backoff_s: float = DEFAULT_BACKOFF_S

    def __post_init__(self) -> None:
        if self.retries < 0:
            raise ValueError(f"retries must be >= 0, got {self.retries}")
        if self.backoff_s < 0:
            raise ValueError(f"backoff_s must be >= 0, got {self.backoff_s}")

    @property
    def attempts(self) -> int:
        return self.retries + 1

    def backoff(self, attempt: int) -> float:
        # Fixed delay, independent of the attempt number.
        return self.backoff_s


def check_url(
    session: requests.Session,
    url: str,
    timeout_s: float,
    policy: RetryPolicy,
    sleep: Callable[[float], None] | None = None,
) -> StatusRecord:
    sleep = sleep or time.sleep
    attempt = 1
    result = run_http(session, url, timeout_s=timeout_s)
    while isinstance(result.outcome, Failure):
        logger.debug(
            "Attempt %s/%s for %s failed: %s",
            attempt,
            policy.attempts,
            url,
            result.outcome.message,
        )
        if attempt >= policy.attempts:
            break
        sleep(policy.backoff(attempt))
        attempt += 1
        result = run_http(session, url, timeout_s=timeout_s)

    return StatusRecord(
        url=url,
        outcome=result.outcome,
        response_time_ms=result.elapsed_ms,
        timestamp=time.time(),
    )
