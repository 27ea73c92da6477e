"""FastAPI entrypoint for tool listing, search and transform endpoints."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from fastapi import Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from txtx.api.rate_limit import RateLimiter, rate_limit_key
from txtx.api.response import ApiException, error_response, success_response
from txtx.config import RateLimitConfig, RateLimits, Settings
from txtx.errors import TransformationError
from txtx.obs.logging import configure_logging, log_tool_trace, request_id_middleware
from txtx.registry.catalog import build_default_registry
from txtx.registry.registry import ToolRegistry, ToolSpec
from txtx.search.index import SearchType, ToolSearchIndex
from txtx.types import RateLimitResult, SearchResult

logger = logging.getLogger(__name__)


class TransformRequest(BaseModel):
    input: str | None = None
    options: dict[str, Any] = Field(default_factory=dict)


def _rate_limited(preset: RateLimitConfig) -> Callable[[Request], RateLimitResult]:
    def _check(request: Request) -> RateLimitResult:
        limiter: RateLimiter = request.app.state.limiter
        result = limiter.check(rate_limit_key(request.headers), preset)
        if not result.success:
            raise ApiException.too_many_requests(result.retry_after or 0)
        return result

    return _check


def _endpoint(spec: ToolSpec) -> str:
    return f"/api/transform/{spec.category_id}/{spec.slug}"


def _tool_summary(spec: ToolSpec) -> dict[str, Any]:
    return {
        "name": spec.name,
        "slug": spec.slug,
        "category": spec.category_id,
        "description": spec.description,
        "endpoint": _endpoint(spec),
        "isGenerator": spec.is_generator,
    }


def _result_payload(result: SearchResult) -> dict[str, Any]:
    return {
        "id": result.id,
        "type": result.type,
        "name": result.name,
        "description": result.description,
        "slug": result.slug,
        "categorySlug": result.category_slug,
        "categoryName": result.category_name,
        "icon": result.icon,
        "score": result.score,
        "keywords": result.keywords,
    }


def create_app(
    settings: Settings | None = None,
    *,
    registry: ToolRegistry | None = None,
    limiter: RateLimiter | None = None,
    search_index: ToolSearchIndex | None = None,
) -> FastAPI:
    settings = settings or Settings()
    configure_logging(level=settings.log_level)

    if registry is None:
        registry = build_default_registry()
    registry.set_observer(log_tool_trace)

    app = FastAPI(title="txtx Text Transform API", version=settings.api_version)
    app.state.settings = settings
    app.state.registry = registry
    app.state.limiter = limiter if limiter is not None else RateLimiter(
        cleanup_interval_seconds=settings.rate_limit_cleanup_seconds
    )
    app.state.search_index = (
        search_index if search_index is not None else ToolSearchIndex(registry)
    )
    app.middleware("http")(request_id_middleware)

    version = settings.api_version

    @app.exception_handler(ApiException)
    async def _api_exception_handler(request: Request, exc: ApiException) -> JSONResponse:
        return error_response(exc, version=version)

    @app.exception_handler(RequestValidationError)
    async def _request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        first = exc.errors()[0] if exc.errors() else {"loc": (), "msg": "Invalid request"}
        field = str(first["loc"][-1]) if first["loc"] else "request"
        return error_response(ApiException.validation_error(field, first["msg"]), version=version)

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(ApiException.internal_error(), version=version)

    @app.get("/api/health")
    def health() -> dict[str, Any]:
        return {
            "status": "healthy",
            "version": version,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "stats": {
                "totalTools": len(registry.all_tools()),
                "categories": len(registry.all_categories()),
            },
            "endpoints": {
                "tools": "/api/tools",
                "search": "/api/search",
                "transform": "/api/transform/{category}/{tool}",
                "health": "/api/health",
                "docs": "/docs",
            },
        }

    @app.get("/api/tools")
    def list_tools(
        category: str | None = None,
        rate_limit: RateLimitResult = Depends(_rate_limited(RateLimits.generous)),
    ) -> JSONResponse:
        if category:
            found = registry.get_category_by_slug(category)
            if found is None:
                raise ApiException.not_found(f"Category '{category}'")
            tools = registry.tools_in_category(found.id)
            return success_response(
                {
                    "category": category,
                    "tools": [
                        {
                            **_tool_summary(spec),
                            "params": [param.model_dump() for param in spec.params],
                        }
                        for spec in tools
                    ],
                },
                version=version,
                rate_limit=rate_limit,
            )

        tools = registry.all_tools()
        return success_response(
            {
                "totalTools": len(tools),
                "categories": [
                    {
                        "id": item.id,
                        "name": item.name,
                        "slug": item.slug,
                        "description": item.description,
                        "icon": item.icon,
                        "toolCount": count,
                        "endpoint": f"/api/tools?category={item.slug}",
                    }
                    for item, count in registry.categories_with_counts()
                ],
                "tools": [_tool_summary(spec) for spec in tools],
            },
            version=version,
            rate_limit=rate_limit,
        )

    @app.get("/api/search")
    def search(
        q: str = "",
        limit: int = Query(default=10, ge=1, le=100),
        category: str | None = None,
        item_type: SearchType = Query(default="all", alias="type"),
        threshold: float = 1,
        rate_limit: RateLimitResult = Depends(_rate_limited(RateLimits.generous)),
    ) -> JSONResponse:
        index: ToolSearchIndex = app.state.search_index
        results = index.search(
            q, limit=limit, category=category, item_type=item_type, threshold=threshold
        )
        return success_response(
            {
                "query": q,
                "count": len(results),
                "results": [_result_payload(result) for result in results],
            },
            version=version,
            rate_limit=rate_limit,
        )

    @app.get("/api/transform/{category}/{tool}")
    def tool_detail(
        category: str,
        tool: str,
        rate_limit: RateLimitResult = Depends(_rate_limited(RateLimits.generous)),
    ) -> JSONResponse:
        spec = registry.get_tool(category, tool)
        if spec is None:
            raise ApiException.not_found(f"Tool '{tool}' in category '{category}'")

        example: dict[str, Any] = {}
        if not spec.is_generator:
            example["input"] = "example input"
        defaults = {p.name: p.default for p in spec.params if p.default is not None}
        if defaults:
            example["options"] = defaults

        return success_response(
            {
                **_tool_summary(spec),
                "method": "POST",
                "keywords": spec.keywords,
                "params": [param.model_dump() for param in spec.params],
                "example": {"request": example},
            },
            version=version,
            rate_limit=rate_limit,
        )

    @app.post("/api/transform/{category}/{tool}")
    async def transform(
        category: str,
        tool: str,
        request: Request,
        rate_limit: RateLimitResult = Depends(_rate_limited(RateLimits.standard)),
    ) -> JSONResponse:
        spec = registry.get_tool(category, tool)
        if spec is None:
            raise ApiException.not_found(f"Tool '{tool}' in category '{category}'")

        try:
            body = TransformRequest.model_validate(await request.json())
        except json.JSONDecodeError as exc:
            raise ApiException.bad_request("Invalid JSON in request body") from exc
        except ValidationError as exc:
            first = exc.errors()[0]
            field = str(first["loc"][0]) if first["loc"] else "body"
            raise ApiException.validation_error(field, first["msg"]) from exc

        if not spec.is_generator and body.input is None:
            raise ApiException.validation_error("input", "Input text is required")
        for param in spec.params:
            if param.required and body.options.get(param.name) is None:
                raise ApiException.validation_error(
                    param.name,
                    f"Parameter '{param.name}' is required: {param.description}",
                )

        payload = dict(body.options)
        if not spec.is_generator:
            payload["input"] = body.input

        try:
            output = registry.execute(spec.id, payload)
        except ValidationError as exc:
            first = exc.errors()[0]
            field = str(first["loc"][0]) if first["loc"] else "options"
            raise ApiException.validation_error(field, first["msg"]) from exc
        except TransformationError as exc:
            logger.info("Transformation %s failed: %s (%s)", spec.id, exc, exc.code.value)
            raise ApiException.bad_request(
                str(exc),
                {"tool": spec.name, "category": spec.category_id, "cause": exc.to_dict()},
            ) from exc
        except ValueError as exc:
            logger.info("Transformation %s failed: %s", spec.id, exc)
            raise ApiException.bad_request(
                str(exc), {"tool": spec.name, "category": spec.category_id}
            ) from exc

        data: dict[str, Any] = {
            "tool": spec.name,
            "category": spec.category_id,
            "input": body.input or None,
            "output": output,
        }
        if body.options:
            data["options"] = body.options
        return success_response(data, version=version, rate_limit=rate_limit)

    return app


app = create_app()
