import pytest

from wayedges.color import (
    COLOR_BLACK,
    COLOR_RED,
    COLOR_WHITE,
    Color,
    ParseColorError,
    color_mix,
    color_transition,
    parse_color,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("#f00", (255, 0, 0, 255)),
        ("#ff0000", (255, 0, 0, 255)),
        ("#ff000080", (255, 0, 0, 128)),
        ("#fff000000", (255, 0, 0, 255)),
    ],
)
def test_parse_hex(text, expected):
    assert parse_color(text).as_rgba() == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("rgb(255, 0, 0)", (255, 0, 0, 255)),
        ("rgba(255, 0, 0, 0.5)", (255, 0, 0, 128)),
        ("rgb(100%, 50%, 0%)", (255, 128, 0, 255)),
    ],
)
def test_parse_rgb(text, expected):
    assert parse_color(text).as_rgba() == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("hsl(0, 100%, 50%)", (255, 0, 0, 255)),
        ("hsla(120, 100%, 50%, 0.5)", (0, 255, 0, 128)),
    ],
)
def test_parse_hsl(text, expected):
    assert parse_color(text).as_rgba() == expected


def test_parse_is_case_and_space_insensitive():
    assert parse_color("  #FF0000 ") == parse_color("#ff0000")
    assert parse_color("RGB(255, 0, 0)") == COLOR_RED


def test_parse_percent_alpha():
    assert parse_color("rgba(255, 0, 0, 50%)") == parse_color("rgba(255, 0, 0, 0.5)")


@pytest.mark.parametrize(
    "text",
    ["red", "#12", "#ggg", "rgb(256, 0, 0)", "rgb(1, 2)", "hsl(0, 100, 50)", "rgba(1, 2, 3, 1.2.3)"],
)
def test_parse_errors(text):
    with pytest.raises(ParseColorError):
        parse_color(text)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_color("nope")


def test_color_rejects_out_of_range_channel():
    with pytest.raises(ValueError):
        Color(300, 0, 0)


def test_transition_bounds():
    assert color_transition(COLOR_BLACK, COLOR_WHITE, 0.0) == COLOR_BLACK
    assert color_transition(COLOR_BLACK, COLOR_WHITE, -1.0) == COLOR_BLACK
    assert color_transition(COLOR_BLACK, COLOR_WHITE, 1.0) == COLOR_WHITE
    assert color_transition(COLOR_BLACK, COLOR_WHITE, 2.0) == COLOR_WHITE


def test_transition_midpoint():
    assert color_transition(COLOR_BLACK, COLOR_WHITE, 0.5) == Color(128, 128, 128, 255)


def test_transition_is_monotonic():
    values = [color_transition(COLOR_BLACK, COLOR_WHITE, t / 10).r for t in range(11)]
    assert values == sorted(values)


def test_mix_opaque_top_wins():
    assert color_mix(COLOR_RED, COLOR_WHITE) == COLOR_RED


def test_mix_transparent_top_shows_bottom():
    assert color_mix(Color(0, 0, 0, 0), COLOR_RED) == COLOR_RED


def test_mix_both_transparent():
    assert color_mix(Color(10, 20, 30, 0), Color(40, 50, 60, 0)) == Color(0, 0, 0, 0)