"""Color format conversions."""

from __future__ import annotations

import colorsys
import math
import re
import secrets

from txtx.errors import ErrorCode, TransformationError

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_TRIPLE_PATTERN = re.compile(r"(-?\d+(?:\.\d+)?)%?")


def _parse_hex(text: str) -> tuple[int, int, int]:
    match = _HEX_PATTERN.match(text.strip())
    if match is None:
        raise TransformationError("Invalid HEX color format", ErrorCode.INVALID_COLOR)
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(char * 2 for char in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def _parse_triple(text: str, label: str) -> tuple[float, float, float]:
    values = [float(value) for value in _TRIPLE_PATTERN.findall(text)]
    if len(values) != 3 or not all(math.isfinite(value) for value in values):
        raise TransformationError(f"Invalid {label} color format", ErrorCode.INVALID_COLOR)
    return values[0], values[1], values[2]


def _to_hex(red: int, green: int, blue: int) -> str:
    return f"#{red:02x}{green:02x}{blue:02x}"


def hex_to_rgb(text: str) -> str:
    red, green, blue = _parse_hex(text)
    return f"rgb({red}, {green}, {blue})"


def hex_to_rgba(text: str, alpha: float = 1.0) -> str:
    if not 0.0 <= alpha <= 1.0:
        raise TransformationError("alpha must be between 0 and 1", ErrorCode.INVALID_OPTIONS)
    red, green, blue = _parse_hex(text)
    return f"rgba({red}, {green}, {blue}, {alpha:g})"


def rgb_to_hex(text: str) -> str:
    red, green, blue = (int(value) for value in _parse_triple(text, "RGB"))
    if any(not 0 <= value <= 255 for value in (red, green, blue)):
        raise TransformationError("RGB values must be between 0 and 255", ErrorCode.INVALID_COLOR)
    return _to_hex(red, green, blue)


def hex_to_hsl(text: str) -> str:
    red, green, blue = _parse_hex(text)
    hue, lightness, saturation = colorsys.rgb_to_hls(red / 255, green / 255, blue / 255)
    return f"hsl({round(hue * 360)}, {round(saturation * 100)}%, {round(lightness * 100)}%)"


def hsl_to_hex(text: str) -> str:
    hue, saturation, lightness = _parse_triple(text, "HSL")
    if not (0 <= saturation <= 100 and 0 <= lightness <= 100):
        raise TransformationError(
            "Saturation and lightness must be between 0 and 100", ErrorCode.INVALID_COLOR
        )
    red, green, blue = colorsys.hls_to_rgb((hue % 360) / 360, lightness / 100, saturation / 100)
    return _to_hex(round(red * 255), round(green * 255), round(blue * 255))


def complementary_color(text: str) -> str:
    red, green, blue = _parse_hex(text)
    return _to_hex(255 - red, 255 - green, 255 - blue)


def random_hex_color() -> str:
    return "#" + secrets.token_hex(3)


def decimal_to_hex(text: str) -> str:
    try:
        value = int(text.strip())
    except ValueError as exc:
        raise TransformationError("Invalid decimal color", ErrorCode.INVALID_COLOR) from exc
    if not 0 <= value <= 0xFFFFFF:
        raise TransformationError(
            "Decimal color must be between 0 and 16777215", ErrorCode.INVALID_COLOR
        )
    return f"#{value:06x}"


def hex_to_decimal(text: str) -> str:
    red, green, blue = _parse_hex(text)
    return str((red << 16) | (green << 8) | blue)


def hex_to_css_variable(text: str, variable: str = "color-primary") -> str:
    red, green, blue = _parse_hex(text)
    return f"--{variable.strip().lstrip('-')}: {_to_hex(red, green, blue)};"
