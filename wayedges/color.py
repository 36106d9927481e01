"""Colour values, CSS-style colour parsing and blending."""

from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass


class ParseColorError(ValueError):
    """Raised when a colour string cannot be parsed."""


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name, value in zip("rgba", self.as_rgba()):
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name} out of range: {value}")

    def as_rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


COLOR_BLACK = Color(0, 0, 0)
COLOR_RED = Color(255, 0, 0)
COLOR_GREEN = Color(0, 255, 0)
COLOR_BLUE = Color(0, 0, 255)
COLOR_WHITE = Color(255, 255, 255)
COLOR_TRANSPARENT = Color(0, 0, 0, 0)

_RGB_RE = re.compile(
    r"rgba?\(\s*([0-9]+%?)\s*,\s*([0-9]+%?)\s*,\s*([0-9]+%?)\s*"
    r"(?:,\s*([0-9.]+%?)\s*)?\)",
    re.IGNORECASE | re.ASCII,
)
_HSL_RE = re.compile(
    r"hsla?\(\s*([0-9]+\.?[0-9]*)\s*,\s*([0-9]+\.?[0-9]*)%\s*,\s*([0-9]+\.?[0-9]*)%\s*"
    r"(?:,\s*([0-9.]+%?)\s*)?\)",
    re.IGNORECASE | re.ASCII,
)
_HEX_COMPONENT_RE = re.compile(r"\+?[0-9a-fA-F]+")

# number of characters -> (digits per channel, has alpha)
_HEX_LAYOUT = {
    3: (1, False),
    4: (1, True),
    6: (2, False),
    8: (2, True),
    9: (3, False),
    12: (3, True),
    16: (4, True),
}


def _f32(x: float) -> float:
    """Round a value to single precision."""
    try:
        return struct.unpack("f", struct.pack("f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


def _round_u8(x: float) -> int:
    """Round half away from zero and saturate into 0..=255."""
    if math.isnan(x):
        return 0
    if math.isinf(x):
        return 255 if x > 0 else 0
    rounded = math.copysign(math.floor(abs(x) + 0.5), x)
    return int(min(max(rounded, 0), 255))


def _clamp(x: float, low: float, high: float) -> float:
    return min(max(x, low), high)


def _parse_f32(s: str) -> float:
    try:
        return _f32(float(s))
    except ValueError:
        raise ParseColorError("parse float error") from None


def parse_color(s: str) -> Color:
    """Parse ``#hex``, ``rgb()/rgba()`` or ``hsl()/hsla()`` notation."""
    text = s.strip().lower()
    if text.startswith("#"):
        channels = _parse_hex(text[1:])
    elif text.startswith("rgb"):
        channels = _parse_rgb(text)
    elif text.startswith("hsl"):
        channels = _parse_hsl(text)
    else:
        raise ParseColorError("invalid color format")
    return Color(*channels)


def _parse_hex(hex_str: str) -> tuple[int, int, int, int]:
    try:
        digits, has_alpha = _HEX_LAYOUT[len(hex_str)]
    except KeyError:
        raise ParseColorError("invalid hex format") from None
    count = 4 if has_alpha else 3
    parts = [hex_str[i : i + digits] for i in range(0, digits * count, digits)]
    channels = [_parse_hex_component(part, digits) for part in parts]
    if not has_alpha:
        channels.append(255)
    return tuple(channels)  # type: ignore[return-value]


def _parse_hex_component(s: str, digits: int) -> int:
    if not _HEX_COMPONENT_RE.fullmatch(s):
        raise ParseColorError("parse int error: invalid digit found in string")
    value = int(s, 16)
    max_val = (1 << (digits * 4)) - 1
    return _round_u8(_f32(_f32(_f32(value) * 255.0) / _f32(max_val)))


def _percent_to_u8(percent: str) -> int:
    value = _clamp(_parse_f32(percent), 0.0, 100.0)
    return _round_u8(_f32(value * _f32(2.55)))


def _parse_percent_or_byte(s: str) -> int:
    if s.endswith("%"):
        return _percent_to_u8(s[:-1])
    value = int(s)
    if value > 255:
        raise ParseColorError("parse int error: number too large to fit in target type")
    return value


def _parse_alpha(s: str) -> int:
    if s.endswith("%"):
        return _percent_to_u8(s[:-1])
    value = _clamp(_parse_f32(s), 0.0, 1.0)
    return _round_u8(_f32(value * 255.0))


def _parse_rgb(s: str) -> tuple[int, int, int, int]:
    match = _RGB_RE.fullmatch(s)
    if match is None:
        raise ParseColorError("invalid color format")
    r, g, b = (_parse_percent_or_byte(match.group(i)) for i in (1, 2, 3))
    alpha = match.group(4)
    a = _parse_alpha(alpha) if alpha is not None else 255
    return (r, g, b, a)


def _parse_hsl(s: str) -> tuple[int, int, int, int]:
    match = _HSL_RE.fullmatch(s)
    if match is None:
        raise ParseColorError("invalid color format")
    h = _f32(math.fmod(_parse_f32(match.group(1)), 360.0))
    sat = _f32(_clamp(_parse_f32(match.group(2)), 0.0, 100.0) / 100.0)
    light = _f32(_clamp(_parse_f32(match.group(3)), 0.0, 100.0) / 100.0)
    alpha = match.group(4)
    a = _parse_alpha(alpha) if alpha is not None else 255
    r, g, b = _hsl_to_rgb(h, sat, light)
    return (r, g, b, a)


def _hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    c = _f32(_f32(1.0 - abs(_f32(_f32(2.0 * l) - 1.0))) * s)
    sector = _f32(math.fmod(_f32(h / 60.0), 2.0))
    x = _f32(c * _f32(1.0 - abs(_f32(sector - 1.0))))
    m = _f32(l - _f32(c / 2.0))

    if 0.0 <= h < 60.0:
        r, g, b = c, x, 0.0
    elif 60.0 <= h < 120.0:
        r, g, b = x, c, 0.0
    elif 120.0 <= h < 180.0:
        r, g, b = 0.0, c, x
    elif 180.0 <= h < 240.0:
        r, g, b = 0.0, x, c
    elif 240.0 <= h < 300.0:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return tuple(_round_u8(_f32(_f32(v + m) * 255.0)) for v in (r, g, b))  # type: ignore[return-value]


def color_transition(start: Color, end: Color, t: float) -> Color:
    """Interpolate between two colours; ``t`` is clamped to 0..1."""
    if t <= 0.0:
        return start
    if t >= 1.0:
        return end
    n = _round_u8(_f32(_f32(t) * 256.0)) if t * 256.0 < 255.5 else 256

    def channel(a: int, b: int) -> int:
        return ((a * (256 - n) + b * n + 128) >> 8) & 0xFF

    return Color(*(channel(a, b) for a, b in zip(start.as_rgba(), end.as_rgba())))


def color_mix(one: Color, two: Color) -> Color:
    """Composite ``one`` over ``two``."""
    r1, g1, b1, a1 = (v / 255.0 for v in one.as_rgba())
    r2, g2, b2, a2 = (v / 255.0 for v in two.as_rgba())

    a = 1.0 - (1.0 - a1) * (1.0 - a2)
    if a == 0.0:
        return Color(0, 0, 0, 0)
    r = (r1 * a1 + r2 * a2 * (1.0 - a1)) / a
    g = (g1 * a1 + g2 * a2 * (1.0 - a1)) / a
    b = (b1 * a1 + b2 * a2 * (1.0 - a1)) / a

    return Color(*(_round_u8(v * 255.0) for v in (r, g, b, a)))