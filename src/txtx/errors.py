"""Error types raised by transformation functions."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_BASE64 = "INVALID_BASE64"
    INVALID_HEX = "INVALID_HEX"
    INVALID_BINARY = "INVALID_BINARY"
    INVALID_JSON = "INVALID_JSON"
    INVALID_YAML = "INVALID_YAML"
    INVALID_XML = "INVALID_XML"
    INVALID_CSV = "INVALID_CSV"
    INVALID_JWT = "INVALID_JWT"
    INVALID_TIMESTAMP = "INVALID_TIMESTAMP"
    INVALID_COLOR = "INVALID_COLOR"
    INVALID_KEY = "INVALID_KEY"
    INVALID_OPTIONS = "INVALID_OPTIONS"


class TransformationError(ValueError):
    """Raised when a transformation cannot process its input."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_INPUT) -> None:
        super().__init__(message)
        self.code = code

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code.value, "message": str(self)}
