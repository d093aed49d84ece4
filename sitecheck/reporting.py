from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from sitecheck.checks.results import StatusRecord

logger = logging.getLogger(__name__)


def record_to_dict(record: StatusRecord) -> dict[str, Any]:
    # Key order is part of the report format.
    status: int | str
    if record.ok:
        status = record.status_code
    else:
        status = record.error or ""
    return {
        "url": record.url,
        "status": status,
        "response_time_ms": int(record.response_time_ms),
        "timestamp": int(record.timestamp),
    }


def serialize_record(record: StatusRecord) -> str:
    return json.dumps(record_to_dict(record))


def serialize_report(records: Iterable[StatusRecord]) -> str:
    """Render records as a JSON array with one object per line.

    Records keep the order they are given in.
    """
    lines = [f"    {serialize_record(r)}" for r in records]
    if not lines:
        return "[]"
    return "[\n" + ",\n".join(lines) + "\n]"


def write_report(records: Iterable[StatusRecord], path: str | Path) -> bool:
    """Write the JSON report to ``path``.

    Returns False on I/O failure; the records themselves stay valid.
    """
    payload = serialize_report(records)
    try:
        Path(path).write_text(payload + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("Failed to write report to %s: %s", path, exc)
        return False
    return True
