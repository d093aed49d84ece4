from __future__ import annotations

from sitecheck.checks.results import StatusRecord


def format_status_line(record: StatusRecord) -> str:
    if record.ok:
        outcome = f"HTTP {record.status_code}"
    else:
        outcome = f"ERROR: {record.error}"
    return f"{record.url} - {outcome} in {record.response_time_ms}ms"


def print_status_line(record: StatusRecord) -> None:
    print(format_status_line(record), flush=True)
