import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple

import jmespath  # http://jmespath.org/tutorial.html

import generator_panel.labels as LABELS
from generator_panel.configuration._panel_layout import DEFAULT_LAYOUT, DEFAULT_LIMITS, PanelLayout, SliderLimits
from generator_panel.configuration._panel_variant import NextTargetPolicy, PanelVariant
from generator_panel.logger import Logger

log = Logger().setup_logger('Configuration')

CONFIG_ENV = 'GENERATOR_PANEL_CONFIG'
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / 'generator_panel.default.json'

ACTION_NAMES = ('UP', 'DOWN', 'LEFT', 'RIGHT', 'CONFIRM', 'NEXT_TARGET', 'QUIT')


class ConfigError(ValueError):
    """Raised when the configuration file is unreadable or holds invalid values."""


@dataclass(frozen=True)
class PanelConfig:
    """Everything the panel reads from configuration, resolved once at startup."""

    variant: PanelVariant = PanelVariant.DUAL_SLIDER
    next_target_policy: NextTargetPolicy = NextTargetPolicy.IGNORE
    layout: PanelLayout = DEFAULT_LAYOUT
    limits: SliderLimits = DEFAULT_LIMITS
    keybindings: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)


class Config:
    VARIANT = 'generator_panel[0].variant'
    NEXT_TARGET_ON_SINGLE_HANDLE = 'generator_panel[0].next_target_on_single_handle'

    LAYOUT_WIDTH = 'generator_panel[0].layout[0].width'
    LAYOUT_HEIGHT = 'generator_panel[0].layout[0].height'
    LAYOUT_LEFT_MARGIN = 'generator_panel[0].layout[0].left_margin'
    LAYOUT_ITEM_HEIGHT = 'generator_panel[0].layout[0].item_height'
    LAYOUT_SLIDER_WIDTH = 'generator_panel[0].layout[0].slider_width'

    SLIDER_STEP = 'generator_panel[0].slider[0].step'
    SLIDER_MINIMUM = 'generator_panel[0].slider[0].minimum'
    SLIDER_MAXIMUM = 'generator_panel[0].slider[0].maximum'
    SLIDER_MIN_GAP = 'generator_panel[0].slider[0].min_gap'

    KEYBINDINGS = 'generator_panel[0].keybindings[0]'

    def __init__(self, values: Dict[str, Any] | None = None, defaults: Dict[str, Any] | None = None):
        self.values = values or {}
        self.defaults = defaults if defaults is not None else self._read_json(DEFAULT_CONFIG_PATH)

    @classmethod
    def load(cls, path: str | os.PathLike | None = None) -> 'Config':
        """Load the configuration file at path, or from $GENERATOR_PANEL_CONFIG.

        A missing file means built-in defaults; an unreadable one raises ConfigError.
        """
        if path is None:
            path = os.environ.get(CONFIG_ENV)

        if path is None or not Path(path).exists():
            log.debug(LABELS.LOG_CONFIG_DEFAULTS)
            return cls()

        values = cls._read_json(Path(path))
        log.info(LABELS.LOG_CONFIG_LOADED.format(path))
        return cls(values)

    @staticmethod
    def _read_json(path: Path) -> Dict[str, Any]:
        try:
            with open(path, encoding='utf-8') as json_file:
                values = json.load(json_file)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Configuration file {path} is not valid JSON: {e}") from e
        except OSError as e:
            raise ConfigError(f"Configuration file {path} could not be read: {e}") from e

        if not isinstance(values, dict):
            raise ConfigError(f"Configuration file {path} must hold a JSON object")
        return values

    def get(self, search_pattern):
        """Value at search_pattern in the loaded file, falling back to the defaults."""
        value = jmespath.search(search_pattern, self.values)
        if value is None:
            value = jmespath.search(search_pattern, self.defaults)
        log.debug(search_pattern + ': ' + str(value))
        return value

    def _get_int(self, search_pattern, minimum: int = 0) -> int:
        value = self.get(search_pattern)
        if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
            raise ConfigError(f"{search_pattern} must be an integer >= {minimum}, got {value!r}")
        return value

    def _get_enum(self, search_pattern, enum_type):
        value = self.get(search_pattern)
        try:
            return enum_type(value)
        except ValueError:
            choices = ', '.join(member.value for member in enum_type)
            raise ConfigError(f"{search_pattern} must be one of {choices}, got {value!r}") from None

    def layout(self) -> PanelLayout:
        layout = PanelLayout(
            width=self._get_int(self.LAYOUT_WIDTH, minimum=1),
            height=self._get_int(self.LAYOUT_HEIGHT, minimum=1),
            left_margin=self._get_int(self.LAYOUT_LEFT_MARGIN),
            item_height=self._get_int(self.LAYOUT_ITEM_HEIGHT, minimum=1),
            slider_width=self._get_int(self.LAYOUT_SLIDER_WIDTH, minimum=1),
        )
        if layout.left_margin + layout.slider_width >= layout.width:
            raise ConfigError(
                f"{self.LAYOUT_SLIDER_WIDTH} plus {self.LAYOUT_LEFT_MARGIN} must be smaller than {self.LAYOUT_WIDTH}"
            )
        return layout

    def limits(self) -> SliderLimits:
        limits = SliderLimits(
            step=self._get_int(self.SLIDER_STEP, minimum=1),
            minimum=self._get_int(self.SLIDER_MINIMUM),
            maximum=self._get_int(self.SLIDER_MAXIMUM),
            min_gap=self._get_int(self.SLIDER_MIN_GAP),
        )
        if limits.minimum >= limits.maximum:
            raise ConfigError(f"{self.SLIDER_MINIMUM} must be smaller than {self.SLIDER_MAXIMUM}")
        if limits.maximum + limits.min_gap > 100:
            raise ConfigError(f"{self.SLIDER_MAXIMUM} plus {self.SLIDER_MIN_GAP} must not exceed 100")
        return limits

    def keybindings(self) -> Dict[str, Tuple[str, ...]]:
        # user bindings replace the defaults action by action
        bindings = dict(jmespath.search(self.KEYBINDINGS, self.defaults) or {})
        overrides = jmespath.search(self.KEYBINDINGS, self.values)
        if overrides is not None and not isinstance(overrides, dict):
            raise ConfigError(f"{self.KEYBINDINGS} must be an object of action -> key names")
        bindings.update(overrides or {})

        resolved: Dict[str, Tuple[str, ...]] = {}
        for action, keys in bindings.items():
            if action not in ACTION_NAMES:
                raise ConfigError(f"{self.KEYBINDINGS} has unknown action {action!r}")
            if isinstance(keys, str):
                keys = [keys]
            if not isinstance(keys, list) or not all(isinstance(key, str) for key in keys):
                raise ConfigError(f"{self.KEYBINDINGS}.{action} must be a list of key names")
            resolved[action] = tuple(keys)
        return resolved

    def panel_config(self) -> PanelConfig:
        """Resolve and validate every panel setting."""
        return PanelConfig(
            variant=self._get_enum(self.VARIANT, PanelVariant),
            next_target_policy=self._get_enum(self.NEXT_TARGET_ON_SINGLE_HANDLE, NextTargetPolicy),
            layout=self.layout(),
            limits=self.limits(),
            keybindings=self.keybindings(),
        )
