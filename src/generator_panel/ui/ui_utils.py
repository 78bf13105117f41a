"""
Shared UI utilities for the curses-based generator panel.

This module provides safe drawing functions and layout helpers. Every helper
ignores curses.error so that a panel partially outside a small terminal
degrades instead of crashing.
"""

import curses
import re
import textwrap
from typing import List, Tuple

from . import theme as THEME

# Key names inside help text are written as [KEY] and drawn with the key hint attribute.
KEY_HINT_PATTERN = re.compile(r"\[([^\]]+)\]")


def centered_origin(height: int, width: int, screen_lines: int, screen_cols: int) -> Tuple[int, int]:
    """Top-left corner that centers a height x width box on the screen, never negative."""
    return max(0, (screen_lines - height) // 2), max(0, (screen_cols - width) // 2)


def create_centered_window(height: int, width: int):
    """Create a window of the given size centered on the current terminal.

    The window is shrunk to the terminal size when the terminal is smaller,
    since curses refuses to create windows that do not fit.
    """
    lines, cols = curses.LINES, curses.COLS
    start_y, start_x = centered_origin(height, width, lines, cols)
    win = curses.newwin(max(1, min(height, lines)), max(1, min(width, cols)), start_y, start_x)
    win.keypad(True)
    return win


def fold_text(text: str, width: int) -> List[str]:
    """Wrap text to width, keeping explicit line breaks as paragraph ends."""
    lines: List[str] = []
    for paragraph in text.split("\n"):
        lines.extend(textwrap.wrap(paragraph, width) or [""])
    return lines


class CursesUIHelper:
    """Helper class for common curses UI operations."""

    @staticmethod
    def draw_text(win, y: int, x: int, text: str, attr: int = 0, max_width: int | None = None) -> None:
        """Draw text safely with optional truncation."""
        try:
            h, w = win.getmaxyx()
            if y < 0 or y >= h or x < 0 or x >= w:
                return

            width_to_use: int = max_width if max_width is not None else (w - x)
            width_to_use = max(0, min(width_to_use, w - x))
            display_text = text[:width_to_use]
            if display_text:
                win.addstr(y, x, display_text, attr)
        except curses.error:
            pass

    @staticmethod
    def draw_borders(win, attr: int = 0) -> None:
        """Draw a box around the whole window safely."""
        h, w = win.getmaxyx()
        if h < 2 or w < 2:
            return
        CursesUIHelper.draw_text(win, 0, 0, THEME.TL + THEME.HOR * (w - 2) + THEME.TR, attr)
        for y in range(1, h - 1):
            CursesUIHelper.draw_text(win, y, 0, THEME.VERT, attr)
            CursesUIHelper.draw_text(win, y, w - 1, THEME.VERT, attr)
        # bottom-right cell raises in curses even when drawn correctly
        CursesUIHelper.draw_text(win, h - 1, 0, THEME.BL + THEME.HOR * (w - 2) + THEME.BR, attr)

    @staticmethod
    def draw_separator(win, y: int, attr: int = 0) -> None:
        """Draw a horizontal separator joined to the window border."""
        _, w = win.getmaxyx()
        if w < 2:
            return
        CursesUIHelper.draw_text(win, y, 0, THEME.LTEE + THEME.HOR * (w - 2) + THEME.RTEE, attr)

    @staticmethod
    def draw_centered(win, y: int, text: str, attr: int = 0) -> None:
        """Draw text horizontally centered in the window."""
        _, w = win.getmaxyx()
        CursesUIHelper.draw_text(win, y, max(0, (w - len(text)) // 2), text, attr)

    @staticmethod
    def draw_key_hints(win, y: int, x: int, line: str, attr: int, hint_attr: int) -> None:
        """Draw one help line, rendering [KEY] segments with hint_attr."""
        cursor = x
        position = 0
        for match in KEY_HINT_PATTERN.finditer(line):
            before = line[position:match.start(1)]
            CursesUIHelper.draw_text(win, y, cursor, before, attr)
            cursor += len(before)
            key = match.group(1)
            CursesUIHelper.draw_text(win, y, cursor, key, hint_attr)
            cursor += len(key)
            position = match.end(1)
        CursesUIHelper.draw_text(win, y, cursor, line[position:], attr)
