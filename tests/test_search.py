import pytest

from wayedges.search import (
    binary_search_end,
    binary_search_within_range,
    premultiply_to_bgra,
)

RANGES = [(0, 10), (10, 20), (30, 40), (45, 46), (50, 90)]
ENDS = [3, 7, 7, 12, 20, 21, 40]


@pytest.mark.parametrize("v", range(-5, 100))
def test_within_range_invariant(v):
    result = binary_search_within_range(RANGES, v)
    containing = [i for i, (start, end) in enumerate(RANGES) if start <= v < end]
    if result is None:
        assert containing == []
    else:
        start, end = RANGES[result]
        assert start <= v < end


def test_within_range_empty():
    assert binary_search_within_range([], 1) is None


def test_within_range_single():
    assert binary_search_within_range([(2, 4)], 2) == 0
    assert binary_search_within_range([(2, 4)], 4) is None


@pytest.mark.parametrize("v", range(0, 45))
def test_end_invariant(v):
    result = binary_search_end(ENDS, v)
    if result is None:
        assert v >= ENDS[-1]
    else:
        assert v < ENDS[result]
        assert result == 0 or v >= ENDS[result - 1]


def test_end_empty_and_single():
    assert binary_search_end([], 1) is None
    assert binary_search_end([5], 4) == 0
    assert binary_search_end([5], 5) is None
    assert binary_search_end([5], -1) is None


def test_premultiply_opaque_swaps_order():
    assert premultiply_to_bgra((10, 20, 30, 255)) == bytes((30, 20, 10, 255))


def test_premultiply_transparent_is_zero():
    assert premultiply_to_bgra((200, 100, 50, 0)) == bytes(4)


def test_premultiply_never_exceeds_alpha():
    for alpha in range(0, 256, 17):
        b, g, r, a = premultiply_to_bgra((255, 128, 1, alpha))
        assert a == alpha
        assert max(b, g, r) <= alpha