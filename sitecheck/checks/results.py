from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Success:
    code: int


@dataclass(frozen=True)
class Failure:
    message: str


Outcome = Union[Success, Failure]


@dataclass(frozen=True)
class AttemptResult:
    outcome: Outcome
    elapsed_ms: int


@dataclass(frozen=True)
class StatusRecord:
    """Final outcome of checking one URL, retries included.

    ``response_time_ms`` is the duration of the last attempt only.
    ``timestamp`` is epoch seconds at the moment the record was built.
    """

    url: str
    outcome: Outcome
    response_time_ms: int
    timestamp: float

    @property
    def ok(self) -> bool:
        return isinstance(self.outcome, Success)

    @property
    def status_code(self) -> int | None:
        if isinstance(self.outcome, Success):
            return self.outcome.code
        return None

    @property
    def error(self) -> str | None:
        if isinstance(self.outcome, Failure):
            return self.outcome.message
        return None
