"""
Shared UI toolkit for the generator panel.

Exposes theming constants and curses helpers used by the panel renderer.
"""

from . import theme, ui_utils

__all__ = ["theme", "ui_utils"]
