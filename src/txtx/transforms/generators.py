"""Random data and test fixture generators."""

from __future__ import annotations

import ipaddress
import re
import secrets
import string
import unicodedata
from datetime import datetime, timedelta, timezone

from txtx.errors import ErrorCode, TransformationError

_LOREM_WORDS = (
    "lorem ipsum dolor sit amet consectetur adipiscing elit sed do eiusmod tempor "
    "incididunt ut labore et dolore magna aliqua ut enim ad minim veniam quis nostrud "
    "exercitation ullamco laboris nisi ut aliquip ex ea commodo consequat"
).split()

_PASSWORD_ALPHABET = string.ascii_letters + string.digits + "!@#$%^&*()-_=+"


def _require_positive(value: int, name: str) -> None:
    if value < 1:
        raise TransformationError(f"{name} must be positive", ErrorCode.INVALID_OPTIONS)


def generate_password(length: int = 16) -> str:
    _require_positive(length, "length")
    return "".join(secrets.choice(_PASSWORD_ALPHABET) for _ in range(length))


def generate_api_key(prefix: str = "sk") -> str:
    token = secrets.token_urlsafe(24)
    return f"{prefix}_{token}" if prefix else token


def generate_random_string(length: int = 16) -> str:
    _require_positive(length, "length")
    alphabet = string.ascii_letters + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(length))


def generate_ipv4() -> str:
    return str(ipaddress.IPv4Address(secrets.randbits(32)))


def generate_ipv6() -> str:
    return str(ipaddress.IPv6Address(secrets.randbits(128)))


def generate_mac_address() -> str:
    octets = bytearray(secrets.token_bytes(6))
    # locally administered, unicast
    octets[0] = (octets[0] | 0x02) & 0xFE
    return ":".join(f"{octet:02x}" for octet in octets)


def generate_lorem_ipsum(paragraphs: int = 1) -> str:
    _require_positive(paragraphs, "paragraphs")
    result: list[str] = []
    for _ in range(paragraphs):
        sentences = []
        for _ in range(4):
            count = 8 + secrets.randbelow(8)
            words = [secrets.choice(_LOREM_WORDS) for _ in range(count)]
            sentences.append(" ".join(words).capitalize() + ".")
        result.append(" ".join(sentences))
    return "\n\n".join(result)


def generate_slug(text: str) -> str:
    normalized = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    return re.sub(r"[^a-z0-9]+", "-", normalized.lower()).strip("-")


_USERNAME_ADJECTIVES = ("happy", "cool", "fast", "clever", "bright", "swift", "bold", "calm")
_USERNAME_NOUNS = ("tiger", "eagle", "wolf", "bear", "fox", "hawk", "lion", "deer")


def _parse_date(value: str, name: str) -> datetime:
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError as exc:
        raise TransformationError(f"Invalid {name} date", ErrorCode.INVALID_OPTIONS) from exc
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def generate_random_date(start: str = "2020-01-01", end: str | None = None) -> str:
    """Uniform random instant in `[start, end]`, `end` defaulting to now (UTC)."""
    lower = _parse_date(start, "start")
    upper = _parse_date(end, "end") if end else datetime.now(timezone.utc)
    if upper < lower:
        raise TransformationError("end must not precede start", ErrorCode.INVALID_OPTIONS)
    span_ms = int((upper - lower).total_seconds() * 1000)
    picked = lower + timedelta(milliseconds=secrets.randbelow(span_ms + 1))
    return picked.isoformat(timespec="milliseconds")


def generate_random_email(domain: str = "example.com") -> str:
    local = "".join(secrets.choice(string.ascii_lowercase) for _ in range(8))
    return f"{local}@{domain}"


def generate_random_username() -> str:
    adjective = secrets.choice(_USERNAME_ADJECTIVES)
    noun = secrets.choice(_USERNAME_NOUNS)
    return f"{adjective}_{noun}{secrets.randbelow(1000)}"


def generate_random_phone(style: str = "us") -> str:
    if style == "us":
        area = 100 + secrets.randbelow(900)
        exchange = 100 + secrets.randbelow(900)
        subscriber = 1000 + secrets.randbelow(9000)
        return f"({area}) {exchange}-{subscriber}"
    if style == "international":
        country = 1 + secrets.randbelow(99)
        number = "".join(str(secrets.randbelow(10)) for _ in range(10))
        return f"+{country} {number}"
    raise TransformationError(
        "style must be 'us' or 'international'", ErrorCode.INVALID_OPTIONS
    )


def luhn_check_digit(digits: str) -> int:
    total = 0
    for position, char in enumerate(reversed(digits)):
        digit = int(char)
        if position % 2 == 0:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return (10 - total % 10) % 10


def generate_test_credit_card(card_type: str = "visa") -> str:
    """Luhn-valid card number for test fixtures; never a real account."""
    if card_type == "visa":
        prefix, length = "4", 16
    elif card_type == "mastercard":
        prefix, length = f"5{1 + secrets.randbelow(5)}", 16
    elif card_type == "amex":
        prefix, length = secrets.choice(("34", "37")), 15
    else:
        raise TransformationError(
            "card_type must be visa, mastercard or amex", ErrorCode.INVALID_OPTIONS
        )
    body = prefix + "".join(str(secrets.randbelow(10)) for _ in range(length - 1 - len(prefix)))
    return body + str(luhn_check_digit(body))
