"""
Drawing of the generator panel.

The renderer is a pure function of (controls, state, binding) onto a curses
window: it reads values through the binding but never writes them, and it
never touches the panel state.
"""

from typing import List, Sequence

import generator_panel.labels as LABELS
from generator_panel.configuration import PanelLayout
from generator_panel.panel.controls import ControlSpec, SliderControl, ToggleControl
from generator_panel.panel.input_context import InputContext, PanelAction
from generator_panel.panel.panel_state import PanelState
from generator_panel.panel.settings_binding import SettingsBinding
from generator_panel.ui import theme as THEME
from generator_panel.ui.theme import Palette
from generator_panel.ui.ui_utils import CursesUIHelper, fold_text

_ = LABELS._


class PanelRenderer:
    TITLE_Y = 1
    SEPARATOR_Y = 2

    def __init__(self, layout: PanelLayout, palette: Palette, input_ctx: InputContext) -> None:
        self.layout = layout
        self.palette = palette
        self.input_ctx = input_ctx

    def render(
        self,
        win,
        controls: Sequence[ControlSpec],
        state: PanelState,
        binding: SettingsBinding,
    ) -> None:
        """Redraw the whole panel into win."""
        win.erase()

        h, w = win.getmaxyx()
        if h < self.layout.height or w < self.layout.width:
            self._draw_too_small(win, h)
            return

        CursesUIHelper.draw_borders(win, self.palette.regular)
        CursesUIHelper.draw_centered(win, self.TITLE_Y, _(LABELS.PANEL_TITLE), self.palette.focused)
        CursesUIHelper.draw_separator(win, self.SEPARATOR_Y, self.palette.regular)

        for index, control in enumerate(controls):
            y = self.layout.control_center_y(index)
            selected = index == state.selected_control
            if isinstance(control, ToggleControl):
                self._draw_toggle(win, y, control, selected, binding)
            else:
                self._draw_slider(win, y, control, selected, state, binding)

        self._draw_help(win, controls)

    def _draw_too_small(self, win, h: int) -> None:
        CursesUIHelper.draw_centered(win, h // 2, _(LABELS.MSG_TERMINAL_TOO_SMALL), self.palette.regular)
        CursesUIHelper.draw_centered(win, h // 2 + 1, _(LABELS.MSG_RESIZE_CONTINUE), self.palette.regular)

    def _draw_toggle(self, win, y: int, control: ToggleControl, selected: bool, binding: SettingsBinding) -> None:
        x = self.layout.left_margin
        CursesUIHelper.draw_text(win, y, x, THEME.CHECKBOX, self.palette.regular)
        if binding.get(control.field):
            CursesUIHelper.draw_text(win, y, x + 1, THEME.CHECKMARK, self.palette.focused)
        label_attr = self.palette.highlighted if selected else self.palette.regular
        CursesUIHelper.draw_text(win, y, x + len(THEME.CHECKBOX) + 1, _(control.label), label_attr)

    def _draw_slider(
        self,
        win,
        y: int,
        control: SliderControl,
        selected: bool,
        state: PanelState,
        binding: SettingsBinding,
    ) -> None:
        x = self.layout.left_margin
        line_attr = self.palette.focused if selected else self.palette.regular

        CursesUIHelper.draw_text(win, y - 1, x, _(control.label), line_attr)
        CursesUIHelper.draw_text(win, y + 1, x, THEME.SLIDER_TRACK * self.layout.slider_width, line_attr)

        active = state.active_handle(control.handle_count)
        for handle, name in enumerate(control.fields):
            value = binding.get(name)
            handle_x = x + self.layout.slider_offset(value)
            attr = self.palette.highlighted if selected and handle == active else self.palette.handle

            CursesUIHelper.draw_text(win, y + 1, handle_x, THEME.SLIDER_HANDLE, attr)

            # low value ends at its handle, high value starts at its handle
            text = _(LABELS.VALUE_PERCENT).format(value)
            text_x = handle_x if handle > 0 else handle_x - len(text) + 1
            CursesUIHelper.draw_text(win, y + 2, max(x, text_x), text, attr)

    def help_lines(self, controls: Sequence[ControlSpec]) -> List[str]:
        """Help text for the bound keys, folded to the panel's inner width."""
        desc = self.input_ctx.get_desc
        parts = [
            _(LABELS.HELP_SELECT).format(desc(PanelAction.UP), desc(PanelAction.DOWN)),
            _(LABELS.HELP_TOGGLE).format(desc(PanelAction.CONFIRM)),
        ]
        if any(control.handle_count > 1 for control in controls):
            parts.append(
                _(LABELS.HELP_SWITCH_HANDLE).format(desc(PanelAction.NEXT_TARGET), desc(PanelAction.CONFIRM))
            )
        parts.append(_(LABELS.HELP_MOVE).format(desc(PanelAction.LEFT), desc(PanelAction.RIGHT)))
        parts.append(_(LABELS.HELP_QUIT).format(desc(PanelAction.QUIT)))
        return fold_text("\n".join(parts), self.layout.width - 2)

    def _draw_help(self, win, controls: Sequence[ControlSpec]) -> None:
        lines = self.help_lines(controls)
        top = self.layout.height - 1 - len(lines)
        for offset, line in enumerate(lines):
            CursesUIHelper.draw_key_hints(win, top + offset, 1, line, self.palette.regular, self.palette.key_hint)
