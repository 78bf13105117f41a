import curses

import pytest

from generator_panel.panel import PanelController
from generator_panel.panel.controls import range_slider_controls


def test_quit_first_leaves_values_unchanged(dual_panel, fake_window, storage):
    win = fake_window(keys=["q"])

    dual_panel.control(win)

    assert storage == {"enabled": False, "value_low": 50, "value_high": 60}
    assert win.refreshes == 1


def test_escape_quits(dual_panel, fake_window):
    win = fake_window(keys=[27])

    dual_panel.control(win)

    assert win.keys == []


def test_keys_drive_the_bound_values(binding, palette, fake_window, storage):
    panel = PanelController(binding, controls=range_slider_controls(), palette=palette)
    keys = [" ", curses.KEY_DOWN, curses.KEY_RIGHT, "l", "l", "\t", curses.KEY_LEFT, "q"]

    panel.control(fake_window(keys=keys))

    assert storage == {"enabled": True, "value_low": 60, "value_high": 65}
    assert panel.state.active_slider == 1


def test_unbound_keys_are_ignored(dual_panel, fake_window, storage):
    dual_panel.control(fake_window(keys=["z", "?", curses.KEY_F1, "q"]))

    assert storage == {"enabled": False, "value_low": 50, "value_high": 60}
    assert dual_panel.state.selected_control == 0


def test_every_iteration_renders(dual_panel, fake_window):
    win = fake_window(keys=["j", "j", "k", "q"])

    dual_panel.control(win)

    assert win.refreshes == 4
    assert dual_panel.state.selected_control == 1


def test_resize_recreates_window_and_keeps_state(binding, palette, fake_window, storage):
    first = fake_window(keys=["j", "\t", curses.KEY_RESIZE])
    second = fake_window(height=40, width=60, keys=["l", "q"])
    panel = PanelController(binding, controls=range_slider_controls(), palette=palette,
                            window_factory=lambda: second)

    panel.control(first)

    assert panel.win is second
    assert panel.state.selected_control == 1
    assert panel.state.active_slider == 1
    assert storage["value_high"] == 65
    assert second.refreshes == 2


def test_resize_to_tiny_terminal_then_back(binding, palette, fake_window, storage):
    tiny = fake_window(height=10, width=20, keys=["j", "l", curses.KEY_RESIZE])
    windows = iter([tiny, fake_window(keys=["q"])])
    panel = PanelController(binding, palette=palette, window_factory=lambda: next(windows))

    panel.control(fake_window(keys=[curses.KEY_RESIZE]))

    # input keeps working while the panel is too small to draw
    assert "Terminal too small!" in tiny.text()
    assert storage["value_low"] == 55


def test_interrupt_propagates(dual_panel, fake_window, storage):
    class InterruptingWindow(fake_window):
        def getch(self):
            raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        dual_panel.control(InterruptingWindow())

    assert storage == {"enabled": False, "value_low": 50, "value_high": 60}
