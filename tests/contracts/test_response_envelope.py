import json

from txtx.api.response import ApiException, error_response, success_response
from txtx.types import RateLimitResult


def _body(response) -> dict:
    return json.loads(response.body)


def test_success_envelope() -> None:
    rate_limit = RateLimitResult(success=True, remaining=7, reset=1_700_000_060)

    body = _body(success_response({"x": 1}, version="1.0.0", rate_limit=rate_limit))

    assert set(body) == {"success", "data", "error", "meta"}
    assert body["success"] is True
    assert body["data"] == {"x": 1}
    assert body["error"] is None
    assert body["meta"]["version"] == "1.0.0"
    assert body["meta"]["rateLimit"] == {"remaining": 7, "reset": 1_700_000_060}
    assert body["meta"]["timestamp"]


def test_error_envelope() -> None:
    response = error_response(ApiException.not_found("Tool 'x'"), version="1.0.0")
    body = _body(response)

    assert response.status_code == 404
    assert body["success"] is False
    assert body["data"] is None
    assert body["error"] == {"code": "NOT_FOUND", "message": "Tool 'x' not found"}
    assert "rateLimit" not in body["meta"]


def test_rate_limit_error_carries_retry_after() -> None:
    response = error_response(ApiException.too_many_requests(42), version="1.0.0")
    body = _body(response)

    assert response.status_code == 429
    assert response.headers["retry-after"] == "42"
    assert body["error"]["code"] == "RATE_LIMIT_EXCEEDED"
    assert body["error"]["details"] == {"retryAfter": 42}


def test_validation_error_names_field() -> None:
    exc = ApiException.validation_error("input", "Input text is required")

    assert (exc.code, exc.status_code, exc.details) == ("VALIDATION_ERROR", 400, {"field": "input"})
