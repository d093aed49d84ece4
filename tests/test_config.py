import unittest
from unittest.mock import patch

import requests

from sitecheck.config import (
    default_workers,
    resolve_retries,
    resolve_timeout,
    resolve_workers,
)
from sitecheck.session import SessionError, build_session


class ResolveTests(unittest.TestCase):
    def test_workers(self) -> None:
        with patch("sitecheck.config.os.cpu_count", return_value=4):
            self.assertEqual(default_workers(), 4)
            self.assertEqual(resolve_workers(None), 4)
            self.assertEqual(resolve_workers("8"), 8)
            with self.assertLogs("sitecheck.config", level="WARNING"):
                self.assertEqual(resolve_workers("0"), 4)
                self.assertEqual(resolve_workers("many"), 4)

        with patch("sitecheck.config.os.cpu_count", return_value=None):
            self.assertEqual(default_workers(), 1)

    def test_timeout(self) -> None:
        self.assertEqual(resolve_timeout(None), 5.0)
        self.assertEqual(resolve_timeout("0.5"), 0.5)
        with self.assertLogs("sitecheck.config", level="WARNING"):
            self.assertEqual(resolve_timeout("0"), 5.0)
            self.assertEqual(resolve_timeout("soon"), 5.0)

    def test_retries(self) -> None:
        self.assertEqual(resolve_retries(None), 0)
        self.assertEqual(resolve_retries("3"), 3)
        with self.assertLogs("sitecheck.config", level="WARNING"):
            self.assertEqual(resolve_retries("-2"), 0)


class SessionTests(unittest.TestCase):
    def test_pool_sized_to_workers(self) -> None:
        session = build_session(pool_size=5)
        try:
            adapter = session.get_adapter("https://example.local")
            self.assertEqual(adapter._pool_maxsize, 5)
            self.assertEqual(adapter.max_retries.total, 0)
            self.assertIs(session.get_adapter("http://example.local"), adapter)
        finally:
            session.close()

    def test_construction_failure_is_wrapped(self) -> None:
        with patch("sitecheck.session.requests.Session", side_effect=RuntimeError("no ssl")):
            with self.assertRaises(SessionError):
                build_session(pool_size=1)

    def test_session_type(self) -> None:
        session = build_session(pool_size=1)
        self.assertIsInstance(session, requests.Session)
        session.close()


if __name__ == "__main__":
    unittest.main()
