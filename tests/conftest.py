import curses
import os
import tempfile

# keep test runs from writing logs/ into the working directory
os.environ.setdefault("GENERATOR_PANEL_LOG_DIR", tempfile.mkdtemp(prefix="generator_panel_logs_"))

import pytest  # noqa: E402

from generator_panel.configuration import PanelConfig  # noqa: E402
from generator_panel.panel import PanelController, SettingsBinding  # noqa: E402
from generator_panel.panel.controls import range_slider_controls  # noqa: E402
from generator_panel.ui.theme import Palette  # noqa: E402


class FakeWindow:
    """In-memory stand-in for a curses window: a grid of (char, attr) cells and a key queue."""

    def __init__(self, height=36, width=52, keys=()):
        self.height = height
        self.width = width
        self.keys = list(keys)
        self.cells = {}
        self.refreshes = 0

    def getmaxyx(self):
        return self.height, self.width

    def erase(self):
        self.cells.clear()

    def addstr(self, y, x, text, attr=0):
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise curses.error("addstr() returned ERR")
        for offset, char in enumerate(text):
            if x + offset >= self.width:
                raise curses.error("addstr() returned ERR")
            self.cells[(y, x + offset)] = (char, attr)

    def refresh(self):
        self.refreshes += 1

    def noutrefresh(self):
        self.refreshes += 1

    def keypad(self, flag):
        pass

    def bkgd(self, char, attr=0):
        pass

    def getch(self):
        if not self.keys:
            raise RuntimeError("FakeWindow ran out of keys")
        key = self.keys.pop(0)
        return ord(key) if isinstance(key, str) else key

    def row(self, y):
        return "".join(self.cells.get((y, x), (" ", 0))[0] for x in range(self.width))

    def text(self):
        return "\n".join(self.row(y) for y in range(self.height))

    def attr_at(self, y, x):
        return self.cells.get((y, x), (" ", 0))[1]


@pytest.fixture
def palette():
    return Palette.monochrome()


@pytest.fixture
def storage():
    return {"enabled": False, "value_low": 50, "value_high": 60}


@pytest.fixture
def binding(storage):
    return SettingsBinding.from_mapping(storage, value_high="value_high")


@pytest.fixture
def dual_panel(binding, palette):
    return PanelController(binding, config=PanelConfig(), palette=palette)


@pytest.fixture
def range_panel(binding, palette):
    return PanelController(binding, controls=range_slider_controls(), palette=palette)


@pytest.fixture
def fake_window():
    return FakeWindow
