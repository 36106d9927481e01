"""Path construction for rounded shapes and raw pixmap copying."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple, Union

Point = Tuple[float, float]


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class Arc:
    """A clockwise arc; ``angle2`` is never smaller than ``angle1``."""

    xc: float
    yc: float
    radius: float
    angle1: float
    angle2: float

    @property
    def start_point(self) -> Point:
        return (
            self.xc + self.radius * math.cos(self.angle1),
            self.yc + self.radius * math.sin(self.angle1),
        )

    @property
    def end_point(self) -> Point:
        return (
            self.xc + self.radius * math.cos(self.angle2),
            self.yc + self.radius * math.sin(self.angle2),
        )


@dataclass(frozen=True)
class ClosePath:
    pass


PathElement = Union[MoveTo, LineTo, Arc, ClosePath]


@dataclass
class Path:
    """A recorded vector path made of moves, lines, arcs and closes."""

    elements: list = field(default_factory=list)
    current_point: Optional[Point] = None
    _subpath_start: Optional[Point] = field(default=None, init=False, repr=False)

    def move_to(self, x: float, y: float) -> None:
        self.elements.append(MoveTo(x, y))
        self.current_point = (x, y)
        self._subpath_start = (x, y)

    def line_to(self, x: float, y: float) -> None:
        if self.current_point is None:
            self.move_to(x, y)
            return
        self.elements.append(LineTo(x, y))
        self.current_point = (x, y)

    def arc(self, xc: float, yc: float, radius: float, angle1: float, angle2: float) -> None:
        while angle2 < angle1:
            angle2 += 2 * math.pi
        arc = Arc(xc, yc, radius, angle1, angle2)
        start = arc.start_point
        if self.current_point is None:
            self.move_to(*start)
        else:
            self.line_to(*start)
        self.elements.append(arc)
        self.current_point = arc.end_point

    def close_path(self) -> None:
        if self.current_point is None:
            return
        self.elements.append(ClosePath())
        self.current_point = self._subpath_start


def draw_rect_path(radius: float, size: Tuple[float, float], corners: Sequence[bool]) -> Path:
    """Build a rectangle path; each corner flag (tl, tr, br, bl) rounds that corner."""
    top_left, top_right, bottom_right, bottom_left = corners
    width, height = size
    path = Path()

    path.move_to(0.0, radius)
    if top_left:
        path.arc(radius, radius, radius, math.pi, 1.5 * math.pi)
    else:
        path.line_to(0.0, 0.0)
    path.line_to(width - radius, 0.0)

    if top_right:
        path.arc(width - radius, radius, radius, 1.5 * math.pi, 2.0 * math.pi)
    else:
        path.line_to(width, 0.0)
    path.line_to(width, height - radius)

    if bottom_right:
        path.arc(width - radius, height - radius, radius, 0.0, 0.5 * math.pi)
    else:
        path.line_to(width, height)
    path.line_to(radius, height)

    if bottom_left:
        path.arc(radius, height - radius, radius, 0.5 * math.pi, math.pi)
    else:
        path.line_to(0.0, height)
    path.line_to(0.0, radius)

    path.close_path()
    return path


def draw_fan(path: Path, point: Point, radius: float, start: float, end: float) -> None:
    """Append a pie slice; ``start`` and ``end`` are in multiples of pi."""
    path.arc(point[0], point[1], radius, start * math.pi, end * math.pi)
    path.line_to(point[0], point[1])
    path.close_path()


def copy_pixmap(
    src_data: bytes,
    src_width: int,
    src_height: int,
    dst_data: bytearray,
    dst_width: int,
    dst_height: int,
    x: int,
    y: int,
) -> None:
    """Copy a 4-byte-per-pixel image into ``dst_data`` at (x, y), clipping at the edges."""
    sx_start, dx_start = max(-x, 0), max(x, 0)
    copy_width = max(0, min(src_width - sx_start, dst_width - dx_start))

    sy_start, dy_start = max(-y, 0), max(y, 0)
    copy_height = max(0, min(src_height - sy_start, dst_height - dy_start))

    if copy_width == 0 or copy_height == 0:
        return

    row_bytes = copy_width * 4
    for row in range(copy_height):
        src_start = ((sy_start + row) * src_width + sx_start) * 4
        dst_start = ((dy_start + row) * dst_width + dx_start) * 4
        dst_data[dst_start : dst_start + row_bytes] = src_data[src_start : src_start + row_bytes]