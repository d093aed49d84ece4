"""Command-line entry point: check URLs from arguments and/or a file."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from sitecheck.config import (
    resolve_retries,
    resolve_timeout,
    resolve_workers,
    settings,
)
from sitecheck.formatting import print_status_line
from sitecheck.reporting import write_report
from sitecheck.runner import run_checks
from sitecheck.session import SessionError, build_session
from sitecheck.sources import read_url_file

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_USAGE = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sitecheck",
        description="Check reachability and latency of HTTP(S) endpoints concurrently.",
    )
    parser.add_argument("urls", nargs="*", metavar="URL", help="URLs to check")
    parser.add_argument("--file", dest="file_path", help="File with one URL per line")
    # Numeric options stay strings so invalid or missing values fall back to
    # defaults instead of aborting.
    parser.add_argument(
        "--workers", nargs="?", const="", help="Number of worker threads (default: CPU count)"
    )
    parser.add_argument(
        "--timeout", nargs="?", const="", help="Per-request timeout in seconds (default: 5)"
    )
    parser.add_argument(
        "--retries", nargs="?", const="", help="Extra attempts after a failed request (default: 0)"
    )
    parser.add_argument("--output", help="Path of the JSON report (default: status.json)")
    return parser


def _configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.SITECHECK_LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    _configure_logging()
    parser = _build_parser()
    try:
        args, unknown = parser.parse_known_intermixed_args(argv)
    except SystemExit as exc:
        # argparse already printed usage or help.
        return exc.code if isinstance(exc.code, int) else EXIT_USAGE
    if unknown:
        print(f"Unknown option: {unknown[0]}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return EXIT_USAGE

    urls = list(args.urls)
    if args.file_path:
        try:
            urls.extend(read_url_file(args.file_path))
        except OSError as exc:
            print(f"Error reading file: {exc}", file=sys.stderr)
            return EXIT_IO_ERROR

    if not urls:
        parser.print_usage(sys.stderr)
        return EXIT_USAGE

    workers = (
        resolve_workers(args.workers) if args.workers is not None else settings.SITECHECK_WORKERS
    )
    timeout_s = (
        resolve_timeout(args.timeout)
        if args.timeout is not None
        else settings.SITECHECK_TIMEOUT_SECONDS
    )
    retries = (
        resolve_retries(args.retries) if args.retries is not None else settings.SITECHECK_RETRIES
    )
    output_path = args.output or settings.SITECHECK_OUTPUT_PATH

    try:
        session = build_session(pool_size=workers)
    except SessionError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_IO_ERROR

    logger.info(
        "Checking %s URLs with %s workers (timeout=%ss, retries=%s)",
        len(urls),
        workers,
        timeout_s,
        retries,
    )
    try:
        records = run_checks(
            urls,
            workers=workers,
            timeout_s=timeout_s,
            retries=retries,
            session=session,
            observer=print_status_line,
        )
    finally:
        session.close()

    if write_report(records, output_path):
        print(f"Results written to {output_path}")
    else:
        print(f"Failed to write {output_path}", file=sys.stderr)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
