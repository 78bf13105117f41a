from ._panel_config import ACTION_NAMES, Config, ConfigError, PanelConfig
from ._panel_layout import DEFAULT_LAYOUT, DEFAULT_LIMITS, PanelLayout, SliderLimits
from ._panel_variant import NextTargetPolicy, PanelVariant

__all__ = [
    "ACTION_NAMES",
    "Config",
    "ConfigError",
    "PanelConfig",
    "DEFAULT_LAYOUT",
    "DEFAULT_LIMITS",
    "PanelLayout",
    "SliderLimits",
    "NextTargetPolicy",
    "PanelVariant",
]
