from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(description="Health status")


class ConfigResponse(BaseModel):
    workers: int = Field(ge=1)
    timeout_s: float = Field(gt=0)
    retries: int = Field(ge=0)
    output_path: str


class StatusRecordResponse(BaseModel):
    url: str
    status: int | str = Field(
        description="HTTP status code, or the error message when every attempt failed"
    )
    response_time_ms: int = Field(ge=0, description="Duration of the final attempt")
    timestamp: int = Field(description="Epoch seconds when the check finished")


class CheckRunSummary(BaseModel):
    total: int
    ok: int
    failed: int
    records: list[StatusRecordResponse]
