import curses

from generator_panel.configuration import PanelLayout
from generator_panel.panel import InputContext, PanelAction, PanelController, PanelRenderer, PanelState
from generator_panel.panel.controls import dual_slider_controls, range_slider_controls


def draw(panel, fake_window, **size):
    win = fake_window(**size)
    panel.render(win)
    return win


def test_title_and_frame(dual_panel, fake_window):
    win = draw(dual_panel, fake_window)

    assert win.row(0).startswith("┌") and win.row(0).endswith("┐")
    assert win.row(1)[17:35] == "Generator controls"
    assert win.row(2).startswith("├") and win.row(2).endswith("┤")
    assert win.row(35).startswith("└")


def test_toggle_row(dual_panel, fake_window, storage):
    win = draw(dual_panel, fake_window)
    assert win.row(5)[6:17] == "[ ] Enabled"

    storage["enabled"] = True
    win = draw(dual_panel, fake_window)
    assert win.row(5)[6:17] == "[X] Enabled"


def test_dual_slider_rows(dual_panel, fake_window):
    win = draw(dual_panel, fake_window)

    assert win.row(9)[6:].startswith("Generator load (% of Maximum)")
    track = win.row(11)[6:46]
    assert set(track) == {"-", "|"}
    assert track.index("|") == 20
    assert win.row(12)[24:27] == "50%"

    assert win.row(14)[6:].startswith("Fill battery until %")
    assert win.row(16)[30] == "|"
    assert win.row(17)[28:31] == "60%"


def test_range_slider_values_do_not_overlap(range_panel, fake_window, storage):
    storage["value_low"], storage["value_high"] = 50, 55
    win = draw(range_panel, fake_window)

    assert win.row(9)[6:].startswith("Operating range (% of Maximum)")
    assert win.row(11)[26] == "|"
    assert win.row(11)[28] == "|"
    assert win.row(12)[24:31] == "50% 55%"


def test_handle_positions_follow_values(dual_panel, fake_window, storage):
    for value in (0, 5, 25, 90, 95):
        storage["value_low"] = value
        win = draw(dual_panel, fake_window)
        assert win.row(11)[6 + value * 40 // 100] == "|"


def test_selected_toggle_label_is_highlighted(dual_panel, fake_window, palette):
    win = draw(dual_panel, fake_window)

    assert win.attr_at(5, 10) == palette.highlighted
    assert win.attr_at(9, 6) == palette.regular


def test_selected_slider_highlights_its_handle(dual_panel, fake_window, palette):
    dual_panel.handle_action(PanelAction.DOWN)
    win = draw(dual_panel, fake_window)

    assert win.attr_at(5, 10) == palette.regular
    assert win.attr_at(9, 6) == palette.focused
    assert win.attr_at(11, 26) == palette.highlighted
    assert win.attr_at(16, 30) == palette.handle


def test_active_range_handle_is_highlighted(range_panel, fake_window, palette):
    range_panel.handle_action(PanelAction.DOWN)
    win = draw(range_panel, fake_window)
    assert win.attr_at(11, 26) == palette.highlighted
    assert win.attr_at(11, 30) == palette.handle

    range_panel.handle_action(PanelAction.NEXT_TARGET)
    win = draw(range_panel, fake_window)
    assert win.attr_at(11, 26) == palette.handle
    assert win.attr_at(11, 30) == palette.highlighted


def test_render_is_pure(range_panel, fake_window, storage):
    range_panel.handle_action(PanelAction.DOWN)
    range_panel.handle_action(PanelAction.NEXT_TARGET)
    before_state = (range_panel.state.selected_control, range_panel.state.active_slider)
    before_values = dict(storage)

    first = draw(range_panel, fake_window)
    second = draw(range_panel, fake_window)

    assert first.cells == second.cells
    assert (range_panel.state.selected_control, range_panel.state.active_slider) == before_state
    assert storage == before_values


def test_render_clears_previous_frame(dual_panel, fake_window, storage):
    win = fake_window()
    dual_panel.render(win)
    storage["value_low"] = 90
    dual_panel.render(win)

    assert win.row(11)[26] == "-"
    assert win.row(11)[42] == "|"


def test_help_mentions_handle_switch_only_for_range(palette):
    renderer = PanelRenderer(PanelLayout(), palette, InputContext())

    dual_help = " ".join(renderer.help_lines(dual_slider_controls()))
    range_help = " ".join(renderer.help_lines(range_slider_controls()))

    assert "switch between sliders" not in dual_help
    assert "switch between sliders" in range_help
    assert "[↑/k] and [↓/j]" in dual_help
    assert "[q/Q/ESC]" in dual_help


def test_help_lines_fit_inside_border(palette):
    renderer = PanelRenderer(PanelLayout(), palette, InputContext())

    for line in renderer.help_lines(range_slider_controls()):
        assert len(line) <= 50


def test_help_is_drawn_at_bottom_with_key_hints(dual_panel, fake_window, palette):
    win = draw(dual_panel, fake_window)
    lines = dual_panel._renderer.help_lines(dual_panel.controls)
    top = 35 - len(lines)

    assert win.row(top)[1:].startswith(lines[0])
    assert win.row(34)[1:].startswith(lines[-1])
    # "Use [↑/k] ..." -> the key text starts after "Use ["
    assert win.attr_at(top, 6) == palette.key_hint
    assert win.attr_at(top, 1) == palette.regular


def test_help_follows_custom_bindings(binding, palette, fake_window):
    panel = PanelController(binding, input_ctx=InputContext({"QUIT": ["x"]}), palette=palette)
    win = draw(panel, fake_window)

    assert "Use [x] to apply changes and quit." in win.text()


def test_too_small_window_shows_message(dual_panel, fake_window):
    win = draw(dual_panel, fake_window, height=20, width=40)

    assert "Terminal too small!" in win.row(10)
    assert "Generator controls" not in win.text()


def test_state_outlives_too_small_frames(range_panel, fake_window):
    range_panel.handle_action(PanelAction.DOWN)
    draw(range_panel, fake_window, height=10, width=10)

    assert range_panel.state == PanelState(selected_control=1, active_slider=0)


def test_monochrome_palette_is_used_before_curses_starts(dual_panel, fake_window):
    dual_panel.palette = None
    win = draw(dual_panel, fake_window)

    assert win.attr_at(5, 10) == curses.A_REVERSE
