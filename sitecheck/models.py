from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field


class CheckOptions(BaseModel):
    urls: List[str] = Field(default_factory=list)
    workers: Optional[int] = Field(default=None, ge=1)
    timeout_s: Optional[float] = Field(default=None, gt=0)
    retries: Optional[int] = Field(default=None, ge=0)
