# addicted/services/results.py
"""
Outcome wrapper shared by every fetcher.

Dashboard code only cares about "value or nothing" and reads `.value`.
API routes need more: whether the upstream failed, or whether the
function simply is not built yet, so they can pick a status code.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class FetchStatus(str, Enum):
    OK = "ok"
    UNAVAILABLE = "unavailable"
    NOT_IMPLEMENTED = "not_implemented"


class ErrorKind(str, Enum):
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class FetchResult:
    status: FetchStatus
    value: Any = None
    error: Optional[ErrorKind] = None
    detail: str = ""
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status is FetchStatus.OK

    @classmethod
    def success(cls, value: Any) -> "FetchResult":
        return cls(FetchStatus.OK, value=value)

    @classmethod
    def unavailable(cls, error: ErrorKind, detail: str = "", status_code: Optional[int] = None) -> "FetchResult":
        return cls(FetchStatus.UNAVAILABLE, error=error, detail=detail, status_code=status_code)

    @classmethod
    def not_implemented(cls, detail: str = "") -> "FetchResult":
        return cls(FetchStatus.NOT_IMPLEMENTED, detail=detail)

    def to_dict(self) -> dict:
        """Error body for API responses. Success bodies are built by the routes."""
        body = {"ok": self.ok, "status": self.status.value}
        if self.error is not None:
            body["error"] = self.error.value
        if self.detail:
            body["detail"] = self.detail
        if self.status_code is not None:
            body["upstream_status"] = self.status_code
        return body
