from __future__ import annotations

import logging
import threading
from typing import Callable, Iterable

import requests

from sitecheck.checks.results import StatusRecord
from sitecheck.collector import Collector
from sitecheck.config import (
    DEFAULT_TIMEOUT_SECONDS,
    resolve_retries,
    resolve_timeout,
    resolve_workers,
)
from sitecheck.retry import RetryPolicy, check_url
from sitecheck.session import build_session
from sitecheck.work_queue import WorkQueue

logger = logging.getLogger(__name__)

Observer = Callable[[StatusRecord], None]


def _notify(observer: Observer | None, record: StatusRecord) -> None:
    if observer is None:
        return
    try:
        observer(record)
    except Exception:
        # Notification errors should never stop a worker.
        logger.exception("Observer failed for %s", record.url)


class WorkerPool:
    """Fixed set of worker threads draining a shared ``WorkQueue``.

    Usage: ``start()``, ``submit()`` every URL, ``close()``, ``join()``, then
    ``results()`` exactly once. ``run()`` does all of that in order.
    """

    def __init__(
        self,
        session: requests.Session,
        workers: int,
        timeout_s: float,
        policy: RetryPolicy,
        observer: Observer | None = None,
    ) -> None:
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        self.session = session
        self.workers = workers
        self.timeout_s = timeout_s
        self.policy = policy
        self.observer = observer
        self._queue = WorkQueue()
        self._collector = Collector()
        self._threads: list[threading.Thread] = []
        self._submitted = 0

    def _work(self) -> None:
        while True:
            url = self._queue.get()
            if url is None:
                return
            record = check_url(self.session, url, self.timeout_s, self.policy)
            self._collector.add(record)
            _notify(self.observer, record)

    def start(self) -> None:
        if self._threads:
            raise RuntimeError("worker pool already started")
        for i in range(self.workers):
            t = threading.Thread(
                target=self._work,
                name=f"sitecheck-worker-{i}",
                daemon=True,
            )
            t.start()
            self._threads.append(t)
        logger.debug("Started %s workers", self.workers)

    def submit(self, url: str) -> None:
        self._queue.put(url)
        self._submitted += 1

    def close(self) -> None:
        self._queue.close()

    def join(self) -> None:
        for t in self._threads:
            t.join()

    def results(self) -> list[StatusRecord]:
        records = self._collector.drain()
        if len(records) != self._submitted:
            logger.error(
                "Collected %s records for %s submitted URLs",
                len(records),
                self._submitted,
            )
        return records

    def run(self, urls: Iterable[str]) -> list[StatusRecord]:
        self.start()
        try:
            for url in urls:
                self.submit(url)
        finally:
            self.close()
        self.join()
        return self.results()


def run_checks(
    urls: Iterable[str],
    workers: int | None = None,
    timeout_s: float = DEFAULT_TIMEOUT_SECONDS,
    retries: int = 0,
    session: requests.Session | None = None,
    observer: Observer | None = None,
) -> list[StatusRecord]:
    """Check every URL concurrently and return one record per URL.

    Duplicated URLs are checked independently. Records come back in completion
    order, not submission order. A session is built (and closed afterwards)
    when none is supplied.
    """
    workers = resolve_workers(workers)
    timeout_s = resolve_timeout(timeout_s)
    policy = RetryPolicy(retries=resolve_retries(retries))

    owns_session = session is None
    if session is None:
        session = build_session(pool_size=workers)
    try:
        pool = WorkerPool(
            session=session,
            workers=workers,
            timeout_s=timeout_s,
            policy=policy,
            observer=observer,
        )
        return pool.run(urls)
    finally:
        if owns_session:
            session.close()
