import logging

from fastapi import FastAPI, HTTPException

from sitecheck.api_schemas import (
    CheckRunSummary,
    ConfigResponse,
    HealthResponse,
)
from sitecheck.config import settings
from sitecheck.models import CheckOptions
from sitecheck.reporting import record_to_dict
from sitecheck.runner import run_checks

logger = logging.getLogger(__name__)


app = FastAPI(
    title="Sitecheck",
    version="1.0.0",
    description=(
        "Checks reachability and latency of HTTP(S) endpoints concurrently, "
        "with retries, and returns one status record per URL."
    ),
)


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["system"],
    summary="Health Check",
    description="Liveness endpoint used by probes and orchestration.",
)
def health():
    return {"status": "ok"}


@app.get(
    "/config",
    response_model=ConfigResponse,
    tags=["system"],
    summary="Current Effective Config",
    description="Default check parameters used when a request omits them.",
)
def config():
    return {
        "workers": settings.SITECHECK_WORKERS,
        "timeout_s": settings.SITECHECK_TIMEOUT_SECONDS,
        "retries": settings.SITECHECK_RETRIES,
        "output_path": settings.SITECHECK_OUTPUT_PATH,
    }


@app.post(
    "/api/checks/run",
    response_model=CheckRunSummary,
    tags=["checks"],
    summary="Run Checks",
    description=(
        "Checks every URL in the request body and returns one record per URL, "
        "duplicates included, in completion order."
    ),
)
def checks_run(options: CheckOptions):
    if not options.urls:
        raise HTTPException(status_code=400, detail="No URLs to check")

    records = run_checks(
        options.urls,
        workers=options.workers or settings.SITECHECK_WORKERS,
        timeout_s=options.timeout_s or settings.SITECHECK_TIMEOUT_SECONDS,
        retries=(
            options.retries if options.retries is not None else settings.SITECHECK_RETRIES
        ),
    )
    ok = sum(1 for r in records if r.ok)
    logger.info("Checked %s URLs: %s ok, %s failed", len(records), ok, len(records) - ok)
    return {
        "total": len(records),
        "ok": ok,
        "failed": len(records) - ok,
        "records": [record_to_dict(r) for r in records],
    }
