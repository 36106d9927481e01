"""Lookups over sorted ranges and pixel premultiplication."""

from __future__ import annotations

from bisect import bisect_right
from typing import Optional, Sequence, Tuple, TypeVar

T = TypeVar("T", int, float)


def binary_search_within_range(ranges: Sequence[Tuple[T, T]], v: T) -> Optional[int]:
    """Index of the half-open range ``[start, end)`` holding ``v``.

    ``ranges`` must be sorted and non-overlapping. Returns None when no
    range contains ``v``.
    """
    if not ranges:
        return None
    index = bisect_right([start for start, _ in ranges], v) - 1
    if index >= 0 and v < ranges[index][1]:
        return index
    return None


def binary_search_end(ends: Sequence[T], v: T) -> Optional[int]:
    """Index of the segment holding ``v`` given sorted segment end values.

    Segments are ``[0, ends[0])``, ``[ends[0], ends[1])`` and so on.
    Returns None when ``v`` is at or past the last end.
    """
    if not ends:
        return None
    if len(ends) == 1:
        return 0 if 0 <= v < ends[0] else None
    index = bisect_right(ends, v)
    return index if index < len(ends) else None


def premultiply_to_bgra(rgba: Sequence[int]) -> bytes:
    """Premultiply an RGBA pixel by its alpha and return it as B, G, R, A bytes."""
    red, green, blue, alpha = rgba
    return bytes(
        (
            (blue * alpha) // 255,
            (green * alpha) // 255,
            (red * alpha) // 255,
            alpha,
        )
    )