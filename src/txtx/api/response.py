"""Response envelope shared by every API route.

Every payload has the shape::

    {"success": bool, "data": ... | null,
     "error": {"code", "message", "details"?} | null,
     "meta": {"timestamp", "version", "rateLimit"?}}
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from fastapi.responses import JSONResponse

from txtx.types import RateLimitResult


class ApiException(Exception):
    """An expected API failure rendered as an error envelope."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details
        self.headers = headers

    @classmethod
    def bad_request(cls, message: str, details: dict[str, Any] | None = None) -> ApiException:
        return cls("BAD_REQUEST", message, 400, details)

    @classmethod
    def not_found(cls, resource: str) -> ApiException:
        return cls("NOT_FOUND", f"{resource} not found", 404)

    @classmethod
    def validation_error(cls, field: str, message: str) -> ApiException:
        return cls("VALIDATION_ERROR", message, 400, {"field": field})

    @classmethod
    def too_many_requests(cls, retry_after: int) -> ApiException:
        return cls(
            "RATE_LIMIT_EXCEEDED",
            f"Too many requests. Retry after {retry_after} seconds",
            429,
            {"retryAfter": retry_after},
            headers={"Retry-After": str(retry_after)},
        )

    @classmethod
    def internal_error(cls, message: str = "Internal server error") -> ApiException:
        return cls("INTERNAL_ERROR", message, 500)


def _meta(version: str, rate_limit: RateLimitResult | None = None) -> dict[str, Any]:
    meta: dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": version,
    }
    if rate_limit is not None:
        meta["rateLimit"] = {"remaining": rate_limit.remaining, "reset": rate_limit.reset}
    return meta


def success_response(
    data: Any,
    *,
    version: str,
    rate_limit: RateLimitResult | None = None,
    status_code: int = 200,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": True,
            "data": data,
            "error": None,
            "meta": _meta(version, rate_limit),
        },
    )


def error_response(exc: ApiException, *, version: str) -> JSONResponse:
    error: dict[str, Any] = {"code": exc.code, "message": exc.message}
    if exc.details is not None:
        error["details"] = exc.details
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "data": None,
            "error": error,
            "meta": _meta(version),
        },
        headers=exc.headers,
    )
