"""Hashing, identifiers, JWT and timestamp helpers."""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import json
import secrets
import time
import uuid
import zlib
from datetime import datetime, timezone

from txtx.errors import ErrorCode, TransformationError

_NANOID_ALPHABET = "_-0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


def md5_hash(text: str) -> str:
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def sha1_hash(text: str) -> str:
    return hashlib.sha1(text.encode("utf-8")).hexdigest()


def sha256_hash(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def sha512_hash(text: str) -> str:
    return hashlib.sha512(text.encode("utf-8")).hexdigest()


def hmac_sha256(text: str, key: str) -> str:
    if not key:
        raise TransformationError("Invalid or missing key", ErrorCode.INVALID_KEY)
    return hmac.new(key.encode("utf-8"), text.encode("utf-8"), hashlib.sha256).hexdigest()


def generate_uuid4() -> str:
    return str(uuid.uuid4())


def generate_nanoid(size: int = 21) -> str:
    if size < 1:
        raise TransformationError("size must be positive", ErrorCode.INVALID_OPTIONS)
    return "".join(secrets.choice(_NANOID_ALPHABET) for _ in range(size))


def _b64url_json(segment: str) -> dict:
    padded = segment + "=" * (-len(segment) % 4)
    return json.loads(base64.urlsafe_b64decode(padded.encode("ascii")))


def decode_jwt(token: str) -> str:
    """Decode header and payload of a JWT without verifying the signature."""
    parts = token.strip().split(".")
    if len(parts) != 3:
        raise TransformationError("Invalid JWT format", ErrorCode.INVALID_JWT)
    try:
        header = _b64url_json(parts[0])
        payload = _b64url_json(parts[1])
    except (binascii.Error, ValueError, UnicodeDecodeError) as exc:
        raise TransformationError(f"Invalid JWT: {exc}", ErrorCode.INVALID_JWT) from exc
    return json.dumps({"header": header, "payload": payload}, indent=2)


def unix_to_date(text: str) -> str:
    try:
        value = float(text.strip())
        # 13-digit values are milliseconds
        if abs(value) >= 1e12:
            value /= 1000.0
        return datetime.fromtimestamp(value, tz=timezone.utc).isoformat()
    except (ValueError, OverflowError, OSError) as exc:
        raise TransformationError("Invalid timestamp", ErrorCode.INVALID_TIMESTAMP) from exc


def date_to_unix(text: str) -> str:
    try:
        parsed = datetime.fromisoformat(text.strip().replace("Z", "+00:00"))
    except ValueError as exc:
        raise TransformationError("Invalid timestamp", ErrorCode.INVALID_TIMESTAMP) from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return str(int(parsed.timestamp()))


_CROCKFORD_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"


def generate_ulid() -> str:
    """48-bit millisecond timestamp followed by 80 random bits, Crockford base32."""
    value = (int(time.time() * 1000) << 80) | secrets.randbits(80)
    chars = []
    for _ in range(26):
        value, index = divmod(value, 32)
        chars.append(_CROCKFORD_ALPHABET[index])
    return "".join(reversed(chars))


def crc32_checksum(text: str) -> str:
    return f"{zlib.crc32(text.encode('utf-8')):08X}"
