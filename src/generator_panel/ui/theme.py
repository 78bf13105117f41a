"""Theme definitions for the generator panel.

Central place for color pair ids, default color assignments and the palette
of drawing attributes handed to the renderer.
"""

import curses
from dataclasses import dataclass
from typing import Dict, Tuple

# Named color-pair ids
REGULAR_ROW: int = 1
HIGHLIGHTED_ROW: int = 2
BACKGROUND: int = 3
HANDLE: int = 4
KEY_HINT: int = 5

# Default theme: mapping of curses color pair id -> (fg_color, bg_color)
DEFAULT_THEME: Dict[int, Tuple[int, int]] = {
    REGULAR_ROW: (curses.COLOR_BLACK, curses.COLOR_WHITE),
    HIGHLIGHTED_ROW: (curses.COLOR_WHITE, curses.COLOR_CYAN),
    BACKGROUND: (curses.COLOR_BLUE, curses.COLOR_BLUE),
    HANDLE: (curses.COLOR_RED, curses.COLOR_WHITE),
    KEY_HINT: (curses.COLOR_BLUE, curses.COLOR_WHITE),
}

__all__ = [
    "REGULAR_ROW",
    "HIGHLIGHTED_ROW",
    "BACKGROUND",
    "HANDLE",
    "KEY_HINT",
    "DEFAULT_THEME",
    "Palette",
    "init_colors",
]

# Box-drawing characters for borders (exported so callers can reuse)
TL = '┌'  # top-left
TR = '┐'  # top-right
BL = '└'  # bottom-left
BR = '┘'  # bottom-right
HOR = '─'
VERT = '│'
LTEE = '├'
RTEE = '┤'

# Slider glyphs
SLIDER_TRACK = '-'
SLIDER_HANDLE = '|'
CHECKBOX = '[ ]'
CHECKMARK = 'X'

__all__.extend(["TL", "TR", "BL", "BR", "HOR", "VERT", "LTEE", "RTEE"])
__all__.extend(["SLIDER_TRACK", "SLIDER_HANDLE", "CHECKBOX", "CHECKMARK"])


@dataclass(frozen=True)
class Palette:
    """Drawing attributes used by the panel renderer.

    Attributes:
        regular: Unfocused labels, tracks and box content.
        focused: Label and track of the selected control.
        highlighted: Focus indicator (selected toggle label, active handle).
        handle: Slider handle and value of an unfocused handle.
        key_hint: Key names inside the help text.
        background: Screen background outside the panel.
    """

    regular: int
    focused: int
    highlighted: int
    handle: int
    key_hint: int
    background: int

    @classmethod
    def monochrome(cls) -> "Palette":
        """Palette built from plain attributes, usable before curses is initialised."""
        return cls(
            regular=curses.A_NORMAL,
            focused=curses.A_BOLD,
            highlighted=curses.A_REVERSE,
            handle=curses.A_BOLD,
            key_hint=curses.A_UNDERLINE,
            background=curses.A_NORMAL,
        )

    @classmethod
    def from_theme(cls) -> "Palette":
        """Palette built from the color pairs registered by init_colors()."""
        return cls(
            regular=curses.color_pair(REGULAR_ROW),
            focused=curses.color_pair(REGULAR_ROW) | curses.A_BOLD,
            highlighted=curses.color_pair(HIGHLIGHTED_ROW) | curses.A_BOLD,
            handle=curses.color_pair(HANDLE) | curses.A_BOLD,
            key_hint=curses.color_pair(KEY_HINT) | curses.A_BOLD,
            background=curses.color_pair(BACKGROUND),
        )


def init_colors() -> Palette:
    """Register DEFAULT_THEME with curses and return the matching palette.

    Falls back to the monochrome palette on terminals without color support.
    Must be called after curses.initscr().
    """
    if not curses.has_colors():
        return Palette.monochrome()

    curses.start_color()
    for pair_id, (fg, bg) in DEFAULT_THEME.items():
        curses.init_pair(pair_id, fg, bg)
    return Palette.from_theme()
