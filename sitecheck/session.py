from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter


class SessionError(RuntimeError):
    pass


def build_session(pool_size: int, user_agent: str = "sitecheck/1.0") -> requests.Session:
    """Build the single HTTP client shared by every worker.

    The connection pool is sized to the worker count so that concurrent
    workers reuse connections instead of discarding them. Retries are handled
    by the worker loop, so the adapter itself never retries.
    """
    try:
        session = requests.Session()
        adapter = HTTPAdapter(
            pool_connections=pool_size,
            pool_maxsize=pool_size,
            max_retries=0,
        )
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        session.headers.update({"User-Agent": user_agent})
    except Exception as exc:
        raise SessionError(f"Failed to create HTTP client: {exc}") from exc
    return session
