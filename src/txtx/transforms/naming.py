"""Naming convention conversions."""

from __future__ import annotations

import re
from collections.abc import Callable

from txtx.errors import ErrorCode, TransformationError

_BOUNDARY = re.compile(r"[A-Z]?[a-z]+|[A-Z]+(?=[A-Z][a-z]|\d|\b|[^A-Za-z])|[A-Z]+|\d+")


def split_words(text: str) -> list[str]:
    """Split identifiers such as `fooBar`, `foo_bar` or `Foo-Bar` into words."""
    return [word.lower() for word in _BOUNDARY.findall(text)]


def to_camel_case(text: str) -> str:
    words = split_words(text)
    if not words:
        return ""
    return words[0] + "".join(word.capitalize() for word in words[1:])


def to_pascal_case(text: str) -> str:
    return "".join(word.capitalize() for word in split_words(text))


def to_snake_case(text: str) -> str:
    return "_".join(split_words(text))


def to_screaming_snake_case(text: str) -> str:
    return to_snake_case(text).upper()


def to_kebab_case(text: str) -> str:
    return "-".join(split_words(text))


def to_train_case(text: str) -> str:
    return "-".join(word.capitalize() for word in split_words(text))


def to_dot_case(text: str) -> str:
    return ".".join(split_words(text))


def to_path_case(text: str) -> str:
    return "/".join(split_words(text))


def to_ada_case(text: str) -> str:
    return "_".join(word.capitalize() for word in split_words(text))


def to_cobol_case(text: str) -> str:
    return to_kebab_case(text).upper()


def to_namespace_case(text: str) -> str:
    return "\\".join(word.capitalize() for word in split_words(text))


def to_flat_case(text: str) -> str:
    return "".join(split_words(text))


def to_upper_flat_case(text: str) -> str:
    return to_flat_case(text).upper()


_CONVENTIONS: list[tuple[str, re.Pattern[str]]] = [
    ("SCREAMING_SNAKE_CASE", re.compile(r"^[A-Z0-9]+(_[A-Z0-9]+)+$")),
    ("snake_case", re.compile(r"^[a-z0-9]+(_[a-z0-9]+)+$")),
    ("COBOL-CASE", re.compile(r"^[A-Z0-9]+(-[A-Z0-9]+)+$")),
    ("Train-Case", re.compile(r"^[A-Z][a-z0-9]*(-[A-Z][a-z0-9]*)+$")),
    ("kebab-case", re.compile(r"^[a-z0-9]+(-[a-z0-9]+)+$")),
    ("dot.case", re.compile(r"^[a-z0-9]+(\.[a-z0-9]+)+$")),
    ("path/case", re.compile(r"^[a-z0-9]+(/[a-z0-9]+)+$")),
    ("Namespace\\Case", re.compile(r"^[A-Z][a-z0-9]*(\\[A-Z][a-z0-9]*)+$")),
    ("camelCase", re.compile(r"^[a-z][a-z0-9]*([A-Z][a-z0-9]*)+$")),
    ("PascalCase", re.compile(r"^([A-Z][a-z0-9]+)+$")),
    ("UPPERFLATCASE", re.compile(r"^[A-Z0-9]+$")),
    ("flatcase", re.compile(r"^[a-z0-9]+$")),
]


def detect_naming_convention(text: str) -> str:
    candidate = text.strip()
    for name, pattern in _CONVENTIONS:
        if pattern.match(candidate):
            return name
    return "unknown"


_CONVERTERS: dict[str, Callable[[str], str]] = {
    "camelcase": to_camel_case,
    "pascalcase": to_pascal_case,
    "snakecase": to_snake_case,
    "screamingsnakecase": to_screaming_snake_case,
    "constantcase": to_screaming_snake_case,
    "kebabcase": to_kebab_case,
    "traincase": to_train_case,
    "dotcase": to_dot_case,
    "pathcase": to_path_case,
    "namespacecase": to_namespace_case,
    "adacase": to_ada_case,
    "cobolcase": to_cobol_case,
    "flatcase": to_flat_case,
    "upperflatcase": to_upper_flat_case,
}


def convert_naming_convention(text: str, target: str = "camelCase") -> str:
    """Convert `text` to the convention named by `target`.

    Separators and case in `target` are ignored, so `snake_case`, `SnakeCase`
    and `snake-case` all select the same converter.
    """
    key = re.sub(r"[^a-z]", "", target.lower())
    try:
        converter = _CONVERTERS[key]
    except KeyError as exc:
        raise TransformationError(
            f"Unknown naming convention '{target}'", ErrorCode.INVALID_OPTIONS
        ) from exc
    return converter(text)
