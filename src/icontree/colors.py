"""Depth-based ANSI colouring for tree labels."""

from typing import Tuple

RESET = "\033[0m"

# One truecolor per nesting level, root first; deeper levels are left uncoloured
DEPTH_COLORS: Tuple[Tuple[int, int, int], ...] = (
    (254, 74, 73),
    (42, 183, 202),
    (254, 215, 102),
    (230, 230, 234),
    (244, 244, 248),
)


def colorize(text: str, level: int) -> str:
    """Wrap ``text`` in the truecolor escape sequence for nesting ``level``.

    Args:
        text: The label to colour.
        level: Nesting level of the entry, 0 for the root line.

    Returns:
        The coloured text, or ``text`` unchanged when the level has no colour.
    """
    if level < 0 or level >= len(DEPTH_COLORS):
        return text
    r, g, b = DEPTH_COLORS[level]
    return f"\033[38;2;{r};{g};{b}m{text}{RESET}"
