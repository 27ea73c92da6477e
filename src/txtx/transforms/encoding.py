"""Encoding and decoding transformations."""

from __future__ import annotations

import base64
import binascii
import html
from urllib.parse import quote, unquote

from txtx.errors import ErrorCode, TransformationError


def base64_encode(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def base64_decode(text: str) -> str:
    try:
        return base64.b64decode(text.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise TransformationError("Invalid Base64 input", ErrorCode.INVALID_BASE64) from exc


def base32_encode(text: str) -> str:
    return base64.b32encode(text.encode("utf-8")).decode("ascii")


def base32_decode(text: str) -> str:
    try:
        return base64.b32decode(text.strip().upper()).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise TransformationError("Invalid Base32 input", ErrorCode.INVALID_INPUT) from exc


def url_encode(text: str) -> str:
    return quote(text, safe="")


def url_decode(text: str) -> str:
    return unquote(text)


def html_encode(text: str) -> str:
    return html.escape(text, quote=True)


def html_decode(text: str) -> str:
    return html.unescape(text)


def text_to_binary(text: str) -> str:
    return " ".join(f"{byte:08b}" for byte in text.encode("utf-8"))


def binary_to_text(text: str) -> str:
    groups = text.split()
    if not groups or any(set(group) - {"0", "1"} or len(group) > 8 for group in groups):
        raise TransformationError(
            "Invalid binary input - must contain only 0s and 1s",
            ErrorCode.INVALID_BINARY,
        )
    try:
        return bytes(int(group, 2) for group in groups).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TransformationError("Binary input is not valid UTF-8", ErrorCode.INVALID_BINARY) from exc


def text_to_hex(text: str) -> str:
    return text.encode("utf-8").hex()


def hex_to_text(text: str) -> str:
    cleaned = "".join(text.split())
    if cleaned.lower().startswith("0x"):
        cleaned = cleaned[2:]
    try:
        return bytes.fromhex(cleaned).decode("utf-8")
    except (ValueError, UnicodeDecodeError) as exc:
        raise TransformationError("Invalid hexadecimal input", ErrorCode.INVALID_HEX) from exc


def text_to_ascii(text: str) -> str:
    return " ".join(str(ord(char)) for char in text)


def ascii_to_text(text: str) -> str:
    try:
        return "".join(chr(int(code)) for code in text.replace(",", " ").split())
    except (ValueError, OverflowError) as exc:
        raise TransformationError("Invalid ASCII code list", ErrorCode.INVALID_INPUT) from exc


def utf8_encode(text: str) -> str:
    """Expose the UTF-8 bytes of `text` as Latin-1 characters (`é` -> `Ã©`)."""
    return text.encode("utf-8").decode("latin-1")


def utf8_decode(text: str) -> str:
    try:
        return text.encode("latin-1").decode("utf-8")
    except UnicodeError as exc:
        raise TransformationError("Invalid UTF-8 input", ErrorCode.INVALID_INPUT) from exc
