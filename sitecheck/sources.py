from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_url_lines(lines: list[str]) -> list[str]:
    out: list[str] = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        out.append(line)
    return out


def read_url_file(path: str | Path) -> list[str]:
    """Read one URL per line, skipping blank lines and ``#`` comments.

    Lines that are not valid UTF-8 are skipped with a warning. I/O errors
    propagate to the caller.
    """
    lines: list[str] = []
    for lineno, raw in enumerate(Path(path).read_bytes().splitlines(), start=1):
        try:
            lines.append(raw.decode("utf-8"))
        except UnicodeDecodeError:
            logger.warning("Skipping undecodable line %s in %s", lineno, path)
    return parse_url_lines(lines)
