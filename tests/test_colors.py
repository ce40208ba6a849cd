"""Tests for depth colouring."""

from icontree.colors import DEPTH_COLORS, RESET, colorize


def test_colorize_uses_level_color():
    r, g, b = DEPTH_COLORS[1]
    assert colorize("src", 1) == f"\033[38;2;{r};{g};{b}msrc{RESET}"


def test_levels_differ():
    assert colorize("x", 0) != colorize("x", 1)


def test_deep_levels_are_plain():
    assert colorize("deep", len(DEPTH_COLORS)) == "deep"
    assert colorize("deep", 42) == "deep"


def test_negative_level_is_plain():
    assert colorize("x", -1) == "x"
