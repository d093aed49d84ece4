from __future__ import annotations

import threading
from collections import deque


class QueueClosed(RuntimeError):
    pass


class WorkQueue:
    """FIFO of pending URLs shared by one producer and many workers.

    ``get`` blocks until an item arrives or the queue is closed and empty,
    in which case it returns ``None``. Each item is handed to exactly one
    caller of ``get``.
    """

    def __init__(self) -> None:
        self._items: deque[str] = deque()
        self._closed = False
        self._cond = threading.Condition()

    def put(self, url: str) -> None:
        with self._cond:
            if self._closed:
                raise QueueClosed("cannot put on a closed queue")
            self._items.append(url)
            self._cond.notify()

    def close(self) -> None:
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def get(self) -> str | None:
        with self._cond:
            while not self._items and not self._closed:
                self._cond.wait()
            if self._items:
                return self._items.popleft()
            return None

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)
