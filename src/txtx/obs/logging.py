"""Logging setup, HTTP request logging and tool trace logging."""

from __future__ import annotations

import logging
import time
from uuid import uuid4

from fastapi import Request
from starlette.responses import Response

from txtx.types import ToolTrace

_HTTP_LOGGER = "txtx.http"
_TOOLS_LOGGER = "txtx.tools"


def configure_logging(*, level: str = "INFO") -> None:
    logger = logging.getLogger("txtx")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = True


def log_tool_trace(trace: ToolTrace) -> None:
    """Registry observer that records each tool execution."""
    logging.getLogger(_TOOLS_LOGGER).debug(
        "tool=%s latency_ms=%.3f output_chars=%d",
        trace.name,
        trace.latency_ms,
        len(trace.output_preview),
    )


async def request_id_middleware(request: Request, call_next) -> Response:
    request_id = request.headers.get("X-Request-Id") or uuid4().hex[:12]
    request.state.request_id = request_id

    start = time.perf_counter()
    status_code = 500
    response: Response | None = None
    try:
        response = await call_next(request)
        status_code = int(response.status_code)
        return response
    finally:
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        logging.getLogger(_HTTP_LOGGER).info(
            "request_id=%s method=%s path=%s status_code=%s duration_ms=%s",
            request_id,
            request.method,
            request.url.path,
            status_code,
            elapsed_ms,
        )
        if response is not None:
            response.headers["X-Request-Id"] = request_id
