"""
Localization strings for the generator panel.

This module contains all user-facing strings used by the panel and its
launcher. Strings are looked up through gettext at the moment they are shown,
so installing a catalog for the "generator_panel" domain translates the UI
without touching the panel code.
"""

import gettext
from pathlib import Path

TRANSLATION_DOMAIN = "generator_panel"
LOCALE_DIR = Path(__file__).resolve().parent / "locale"

_translation = gettext.translation(TRANSLATION_DOMAIN, localedir=str(LOCALE_DIR), fallback=True)


def _(message: str) -> str:
    """Translate a display string through the installed catalog."""
    return _translation.gettext(message)


# Panel header
PANEL_TITLE = "Generator controls"

# Control labels
LABEL_ENABLED = "Enabled"
LABEL_LOAD = "Generator load (% of Maximum)"
LABEL_BATTERY_FILL = "Fill battery until %"
LABEL_OPERATING_RANGE = "Operating range (% of Maximum)"
LABEL_RANGE_LOW = "Operating range low"
LABEL_RANGE_HIGH = "Operating range high"

# Slider values
VALUE_PERCENT = "{}%"

# Help text; key names in brackets are highlighted by the renderer
HELP_SELECT = "Use [{}] and [{}] to select option."
HELP_TOGGLE = "Use [{}] to change value."
HELP_SWITCH_HANDLE = "Use [{}] or [{}] to switch between sliders."
HELP_MOVE = "Use [{}] and [{}] to move sliders."
HELP_QUIT = "Use [{}] to apply changes and quit."

# Key descriptions
KEY_SEPARATOR = "/"
KEY_NAME_UP = "↑"
KEY_NAME_DOWN = "↓"
KEY_NAME_LEFT = "←"
KEY_NAME_RIGHT = "→"
KEY_NAME_ENTER = "ENTER"
KEY_NAME_TAB = "TAB"
KEY_NAME_ESC = "ESC"
KEY_NAME_SPACE = "SPACE"
KEY_NAME_UNBOUND = "<unbound>"

# Terminal size messages
MSG_TERMINAL_TOO_SMALL = "Terminal too small!"
MSG_RESIZE_CONTINUE = "Please resize to continue"

# Launcher
LAUNCHER_DESCRIPTION = "Interactive generator control panel"
LAUNCHER_PICK_VARIANT = "Choose the panel layout:"
LAUNCHER_VARIANT_DUAL = "Load and battery sliders"
LAUNCHER_VARIANT_RANGE = "Single operating range slider"
LAUNCHER_RESULT_TITLE = "Generator settings"
LAUNCHER_RESULT_ENABLED = "  Enabled:      {}"
LAUNCHER_RESULT_LOW = "  {}: {}%"
LAUNCHER_RESULT_HIGH = "  {}: {}%"
LAUNCHER_INTERRUPTED = "\n✗ Generator panel interrupted by user"
LAUNCHER_CONFIG_ERROR = "[ERROR] {}"

# Log messages
LOG_PANEL_CREATED = "Panel created: variant={} controls={}"
LOG_TRANSITION = "Action {} -> selected={} handle={} values={}"
LOG_RESIZE = "Terminal resized to {}x{}, panel recreated"
LOG_STARTING = "Generator panel starting with {}"
LOG_FINISHED = "Generator panel closed with {}"
LOG_CONFIG_LOADED = "Configuration loaded from {}"
LOG_CONFIG_DEFAULTS = "No configuration file found, using defaults"
