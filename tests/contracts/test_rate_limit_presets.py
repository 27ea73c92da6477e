import pytest
from pydantic import ValidationError

from txtx.config import RateLimits, Settings
from txtx.errors import ErrorCode, TransformationError


def test_rate_limit_presets_are_stable() -> None:
    assert (RateLimits.standard.limit, RateLimits.standard.window_seconds) == (100, 60)
    assert (RateLimits.strict.limit, RateLimits.strict.window_seconds) == (20, 60)
    assert (RateLimits.generous.limit, RateLimits.generous.window_seconds) == (300, 60)


def test_settings_read_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("TXTX_APP_ENV", "staging")
    monkeypatch.setenv("TXTX_API_VERSION", "2.0.0")

    settings = Settings()

    assert settings.app_env == "staging"
    assert settings.api_version == "2.0.0"


def test_settings_reject_unknown_app_env() -> None:
    with pytest.raises(ValidationError):
        Settings(app_env="qa")


def test_transformation_error_shape() -> None:
    error = TransformationError("Invalid JSON input", ErrorCode.INVALID_JSON)

    assert isinstance(error, ValueError)
    assert error.to_dict() == {"code": "INVALID_JSON", "message": "Invalid JSON input"}
    assert TransformationError("bad").code is ErrorCode.INVALID_INPUT
