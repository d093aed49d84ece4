import unittest
from unittest.mock import patch

from fastapi import HTTPException
from fastapi.testclient import TestClient

from sitecheck.checks.results import Failure, StatusRecord, Success
from sitecheck.main import app, checks_run
from sitecheck.models import CheckOptions


def _records():
    return [
        StatusRecord(url="http://a", outcome=Success(code=200), response_time_ms=5, timestamp=1700000000),
        StatusRecord(url="http://b", outcome=Failure(message="refused"), response_time_ms=9, timestamp=1700000002),
    ]


class OpenAPITests(unittest.TestCase):
    def test_openapi_schema_generation(self) -> None:
        schema = app.openapi()

        self.assertIn("openapi", schema)
        paths = schema["paths"]
        self.assertIn("/health", paths)
        self.assertIn("/config", paths)
        self.assertIn("/api/checks/run", paths)


class ChecksRunTests(unittest.TestCase):
    def test_returns_records_and_counts(self) -> None:
        with patch("sitecheck.main.run_checks", return_value=_records()) as run_mock:
            resp = checks_run(CheckOptions(urls=["http://a", "http://b"], workers=2, retries=1))

        run_mock.assert_called_once()
        self.assertEqual(run_mock.call_args.kwargs["workers"], 2)
        self.assertEqual(run_mock.call_args.kwargs["retries"], 1)
        self.assertEqual(resp["total"], 2)
        self.assertEqual(resp["ok"], 1)
        self.assertEqual(resp["failed"], 1)
        self.assertEqual(resp["records"][1]["status"], "refused")

    def test_empty_url_list_rejected(self) -> None:
        with self.assertRaises(HTTPException) as ctx:
            checks_run(CheckOptions(urls=[]))
        self.assertEqual(ctx.exception.status_code, 400)

    def test_http_roundtrip(self) -> None:
        client = TestClient(app)
        with patch("sitecheck.main.run_checks", return_value=_records()):
            resp = client.post("/api/checks/run", json={"urls": ["http://a", "http://b"]})

        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(
            list(body["records"][0].keys()),
            ["url", "status", "response_time_ms", "timestamp"],
        )
        self.assertEqual(body["records"][0]["status"], 200)

    def test_invalid_options_rejected(self) -> None:
        client = TestClient(app)
        resp = client.post("/api/checks/run", json={"urls": ["http://a"], "workers": 0})
        self.assertEqual(resp.status_code, 422)

    def test_health(self) -> None:
        client = TestClient(app)
        self.assertEqual(client.get("/health").json(), {"status": "ok"})
        self.assertIn("workers", client.get("/config").json())


if __name__ == "__main__":
    unittest.main()
