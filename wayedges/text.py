"""Rendering text into premultiplied BGRA pixel canvases."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional, Union

from PIL import Image, ImageDraw, ImageFont

from .color import Color
from .search import premultiply_to_bgra

AnyFont = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


@dataclass
class Canvas:
    """A pixel buffer in premultiplied BGRA order, four bytes per pixel."""

    width: int
    height: int
    buffer: bytearray = field(default_factory=bytearray)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"invalid canvas size: {self.width}x{self.height}")
        expected = self.width * self.height * 4
        if not self.buffer:
            self.buffer = bytearray(expected)
        elif len(self.buffer) != expected:
            raise ValueError(
                f"buffer holds {len(self.buffer)} bytes, expected {expected}"
            )

    @property
    def stride(self) -> int:
        return self.width * 4

    def set_pixel_color(self, color: Color, x: int, y: int) -> None:
        """Write one pixel; offsets outside the buffer are ignored."""
        start = self.stride * y + x * 4
        if start < 0 or start > len(self.buffer) - 4:
            return
        self.buffer[start : start + 4] = premultiply_to_bgra(color.as_rgba())

    def to_image(self) -> Image.Image:
        """Return the canvas as a straight-alpha RGBA image."""
        premultiplied = bytearray(len(self.buffer))
        premultiplied[0::4] = self.buffer[2::4]
        premultiplied[1::4] = self.buffer[1::4]
        premultiplied[2::4] = self.buffer[0::4]
        premultiplied[3::4] = self.buffer[3::4]
        if self.width == 0 or self.height == 0:
            return Image.new("RGBA", (self.width, self.height))
        image = Image.frombytes("RGBa", (self.width, self.height), bytes(premultiplied))
        return image.convert("RGBA")


@dataclass(frozen=True)
class TextConfig:
    """Font family (name or file), optional weight, colour and pixel size."""

    family: str
    weight: Optional[int]
    color: Color
    size: int


def _apply_weight(font: AnyFont, weight: int) -> None:
    try:
        axes = font.get_variation_axes()  # type: ignore[union-attr]
    except (AttributeError, OSError):
        return
    if not axes:
        return
    values = []
    for axis in axes:
        name = axis.get("name", b"")
        if isinstance(name, bytes):
            name = name.decode("utf-8", errors="replace")
        if "weight" in str(name).lower():
            values.append(min(max(weight, axis["minimum"]), axis["maximum"]))
        else:
            values.append(axis["default"])
    try:
        font.set_variation_by_axes(values)  # type: ignore[union-attr]
    except (AttributeError, OSError):
        pass


@lru_cache(maxsize=32)
def _load_font(family: str, size: int, weight: Optional[int]) -> AnyFont:
    font: AnyFont
    try:
        font = ImageFont.truetype(family, size)
    except OSError:
        try:
            font = ImageFont.load_default(size=size)
        except (TypeError, OSError):
            font = ImageFont.load_default()
    if weight is not None:
        _apply_weight(font, weight)
    return font


def draw_text(text: str, config: TextConfig) -> Canvas:
    """Render ``text`` into a canvas just large enough to hold it."""
    font = _load_font(config.family, config.size, config.weight)
    probe = ImageDraw.Draw(Image.new("L", (1, 1)))
    _, _, right, bottom = probe.textbbox((0, 0), text, font=font, spacing=0)
    width = max(0, math.ceil(right))
    height = max(0, math.ceil(bottom))

    canvas = Canvas(width, height)
    if width == 0 or height == 0:
        return canvas

    mask = Image.new("L", (width, height), 0)
    ImageDraw.Draw(mask).text((0, 0), text, fill=255, font=font, spacing=0)

    red, green, blue, alpha = config.color.as_rgba()
    for index, coverage in enumerate(mask.tobytes()):
        if coverage == 0:
            continue
        pixel_alpha = (alpha * coverage + 127) // 255
        if pixel_alpha == 0:
            continue
        y, x = divmod(index, width)
        canvas.set_pixel_color(Color(red, green, blue, pixel_alpha), x, y)
    return canvas