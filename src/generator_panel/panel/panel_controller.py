"""
PanelController - interactive curses panel for generator settings.

The controller shows an enabled flag and one or two percentage sliders in a
fixed-size window centered on the terminal, and writes every change straight
through a SettingsBinding into the caller's storage:

- UP/DOWN cycle through the controls.
- CONFIRM toggles the flag, or switches handles on a range slider.
- NEXT_TARGET switches between the low and high handle of a range slider.
- LEFT/RIGHT move the active slider handle in steps, clamped to the limits.
- QUIT closes the panel; the edited values are already in the caller's storage.

Example:
    settings = GeneratorSettings(enabled=False, load=50, battery=60)
    binding = SettingsBinding.from_attributes(settings, value_low="load", value_high="battery")
    PanelController(binding).run()
"""

import curses
from typing import Callable, Optional, Sequence

import generator_panel.labels as LABELS
from generator_panel.configuration import NextTargetPolicy, PanelConfig
from generator_panel.logger import Logger
from generator_panel.panel.controls import (
    ControlSpec,
    SliderControl,
    ToggleControl,
    controls_for_variant,
    validate_controls,
)
from generator_panel.panel.input_context import InputContext, PanelAction
from generator_panel.panel.panel_state import PanelState
from generator_panel.panel.renderer import PanelRenderer
from generator_panel.panel.settings_binding import SettingsBinding
from generator_panel.ui import theme as THEME
from generator_panel.ui.ui_utils import create_centered_window

log = Logger().setup_logger('Panel controller')

VERTICAL = {PanelAction.UP: -1, PanelAction.DOWN: 1}
HORIZONTAL = {PanelAction.LEFT: -1, PanelAction.RIGHT: 1}


def clamp(value: int, minimum: int, maximum: int) -> int:
    return max(minimum, min(value, maximum))


class PanelController:
    """
    Core state machine and render/input loop of the generator panel.

    Attributes:
        binding (SettingsBinding): View over the caller's settings; the only output of the panel.
        controls (tuple): Ordered controls shown in the panel.
        state (PanelState): Selected control and active slider handle.
        input_ctx (InputContext): Key code to action mapping.
    """

    def __init__(
        self,
        binding: SettingsBinding,
        controls: Optional[Sequence[ControlSpec]] = None,
        config: Optional[PanelConfig] = None,
        input_ctx: Optional[InputContext] = None,
        palette: Optional[THEME.Palette] = None,
        window_factory: Optional[Callable[[], object]] = None,
    ) -> None:
        """
        Initialize the panel over the caller's settings.

        Args:
            binding (SettingsBinding): Fields the panel edits.
            controls (Sequence[ControlSpec] | None): Controls to show. Defaults to the configured variant.
            config (PanelConfig | None): Layout, limits, key bindings and policies. Defaults to built-ins.
            input_ctx (InputContext | None): Key mapping. Defaults to one built from config.keybindings.
            palette (Palette | None): Drawing attributes. Defaults to the theme colors once curses is up.
            window_factory (Callable | None): Creates the panel window, called again on every resize.

        Raises:
            ValueError: If the controls do not match the binding, or a key binding is invalid.
        """
        self.binding = binding
        self.config = config or PanelConfig()
        self.controls = tuple(controls) if controls is not None else controls_for_variant(self.config.variant)
        validate_controls(self.controls, binding)

        self.state = PanelState()
        self.input_ctx = input_ctx or InputContext(self.config.keybindings)
        self.palette = palette
        self.win = None
        self._window_factory = window_factory
        self._screen = None
        self._renderer: Optional[PanelRenderer] = None

        log.debug(LABELS.LOG_PANEL_CREATED.format(self.config.variant.value, len(self.controls)))

    @property
    def control_count(self) -> int:
        return len(self.controls)

    @property
    def selected(self) -> ControlSpec:
        return self.controls[self.state.selected_control]

    # -------------------------------------------------------------------------
    # Main Execution Loop
    # -------------------------------------------------------------------------
    def run(self) -> None:
        """Open the panel and block until the user quits."""
        curses.wrapper(self._main_loop)

    def _main_loop(self, stdscr) -> None:
        try:
            curses.curs_set(0)  # Hide cursor
        except curses.error:
            pass  # terminal cannot hide the cursor
        stdscr.keypad(True)

        if self.palette is None:
            self.palette = THEME.init_colors()
        self._screen = stdscr
        stdscr.bkgd(' ', self.palette.background)
        stdscr.refresh()

        self.control(self._create_window())

    def control(self, window) -> None:
        """Run the render/input loop on an existing window until QUIT."""
        self.win = window
        while True:
            self.render(self.win)
            self.win.refresh()

            action = self.input_ctx.handle_input(self.win)
            if action == PanelAction.RESIZE:
                self._on_resize()
                continue
            if not self.handle_action(action):
                break

    def _create_window(self):
        if self._window_factory is not None:
            return self._window_factory()

        curses.update_lines_cols()
        if self._screen is not None:
            self._screen.erase()
            self._screen.refresh()
        win = create_centered_window(self.config.layout.height, self.config.layout.width)
        win.bkgd(' ', self.palette.regular)
        return win

    def _on_resize(self) -> None:
        self.win = self._create_window()
        h, w = self.win.getmaxyx()
        log.debug(LABELS.LOG_RESIZE.format(w, h))

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------
    def render(self, window) -> None:
        """Draw the current state; leaves state and bound values untouched."""
        palette = self.palette or THEME.Palette.monochrome()
        if self._renderer is None or self._renderer.palette != palette:
            self._renderer = PanelRenderer(self.config.layout, palette, self.input_ctx)
        self._renderer.render(window, self.controls, self.state, self.binding)

    # -------------------------------------------------------------------------
    # State Transitions
    # -------------------------------------------------------------------------
    def handle_action(self, action: Optional[PanelAction]) -> bool:
        """Apply one action to the panel state and the bound settings.

        Returns:
            False when the action is QUIT, True otherwise. Unbound input (None)
            and resize notifications change nothing.
        """
        if action is None or action == PanelAction.RESIZE:
            return True
        if action == PanelAction.QUIT:
            log.debug(LABELS.LOG_TRANSITION.format(action.value, self.state.selected_control,
                                                   self.state.active_slider, self.binding.snapshot()))
            return False

        control = self.selected
        if action in VERTICAL:
            self.state.select(VERTICAL[action], self.control_count)
        elif action == PanelAction.CONFIRM:
            self._confirm(control)
        elif action == PanelAction.NEXT_TARGET:
            if control.handle_count > 1:
                self.state.next_handle(control.handle_count)
            elif self.config.next_target_policy == NextTargetPolicy.CONFIRM:
                self._confirm(control)
        elif action in HORIZONTAL and isinstance(control, SliderControl):
            self._move_handle(control, HORIZONTAL[action])

        log.debug(LABELS.LOG_TRANSITION.format(action.value, self.state.selected_control,
                                               self.state.active_slider, self.binding.snapshot()))
        return True

    def _confirm(self, control: ControlSpec) -> None:
        if isinstance(control, ToggleControl):
            self.binding.set(control.field, not self.binding.get(control.field))
        elif control.handle_count > 1:
            self.state.next_handle(control.handle_count)

    def _move_handle(self, control: SliderControl, dx: int) -> None:
        limits = self.config.limits
        handle = self.state.active_handle(control.handle_count)
        name = control.fields[handle]

        minimum, maximum = limits.minimum, limits.maximum
        if control.is_range and handle == 1:
            # high handle range is shifted by the gap so the low handle stays within limits
            minimum, maximum = minimum + limits.min_gap, maximum + limits.min_gap

        value = clamp((self.binding.get(name) // limits.step + dx) * limits.step, minimum, maximum)
        self.binding.set(name, value)

        if not control.is_range:
            return
        low_name, high_name = control.fields
        if handle == 0:
            self.binding.set(high_name, max(self.binding.get(high_name), value + limits.min_gap))
        else:
            self.binding.set(low_name, min(self.binding.get(low_name), value - limits.min_gap))
