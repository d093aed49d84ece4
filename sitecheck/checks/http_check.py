from __future__ import annotations

import time

import requests

from sitecheck.checks.results import AttemptResult, Failure, Success


def run_http(session: requests.Session, url: str, timeout_s: float) -> AttemptResult:
    # Any response counts as reachable, whatever the status code. Only the
    # headers are awaited; the body is never read.
    start = time.perf_counter()
    try:
        r = session.get(url, timeout=timeout_s, stream=True)
        try:
            elapsed_ms = int((time.perf_counter() - start) * 1000)
            return AttemptResult(outcome=Success(code=r.status_code), elapsed_ms=elapsed_ms)
        finally:
            r.close()
    except Exception as e:
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        return AttemptResult(outcome=Failure(message=str(e)), elapsed_ms=elapsed_ms)
