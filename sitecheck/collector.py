from __future__ import annotations

import threading

from sitecheck.checks.results import StatusRecord


class Collector:
    def __init__(self) -> None:
        self._records: list[StatusRecord] = []
        self._drained = False
        self._lock = threading.Lock()

    def add(self, record: StatusRecord) -> None:
        with self._lock:
            if self._drained:
                raise RuntimeError("collector already drained")
            self._records.append(record)

    def drain(self) -> list[StatusRecord]:
        """Hand over every collected record. Only valid once."""
        with self._lock:
            if self._drained:
                raise RuntimeError("collector already drained")
            self._drained = True
            records, self._records = self._records, []
            return records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
