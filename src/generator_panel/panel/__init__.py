from .controls import (
    ControlSpec,
    SliderControl,
    ToggleControl,
    controls_for_variant,
    dual_slider_controls,
    range_slider_controls,
)
from .input_context import InputContext, PanelAction
from .panel_controller import PanelController
from .panel_state import PanelState
from .renderer import PanelRenderer
from .settings_binding import BoundField, SettingsBinding

__all__ = [
    "ControlSpec",
    "SliderControl",
    "ToggleControl",
    "controls_for_variant",
    "dual_slider_controls",
    "range_slider_controls",
    "InputContext",
    "PanelAction",
    "PanelController",
    "PanelState",
    "PanelRenderer",
    "BoundField",
    "SettingsBinding",
]
