"""
Control specifications for the generator panel.

A panel is an ordered sequence of controls. Each control is either a toggle
bound to the enabled flag or a slider bound to one or two percentage fields.
A slider with two fields is a range: its first handle is the low bound, its
second the high bound, and the two are kept at least min_gap apart.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import generator_panel.labels as LABELS
from generator_panel.configuration import PanelVariant
from generator_panel.panel.settings_binding import FIELD_ENABLED, FIELD_VALUE_HIGH, FIELD_VALUE_LOW

MAX_HANDLES = 2


@dataclass(frozen=True)
class ToggleControl:
    label: str
    field: str = FIELD_ENABLED

    @property
    def handle_count(self) -> int:
        return 1

    @property
    def fields(self) -> Tuple[str, ...]:
        return (self.field,)


@dataclass(frozen=True)
class SliderControl:
    label: str
    fields: Tuple[str, ...] = (FIELD_VALUE_LOW,)

    @property
    def handle_count(self) -> int:
        return len(self.fields)

    @property
    def is_range(self) -> bool:
        return self.handle_count == MAX_HANDLES


ControlSpec = Union[ToggleControl, SliderControl]


def dual_slider_controls() -> Tuple[ControlSpec, ...]:
    """Flag plus two independent sliders: generator load and battery fill level."""
    return (
        ToggleControl(LABELS.LABEL_ENABLED),
        SliderControl(LABELS.LABEL_LOAD, (FIELD_VALUE_LOW,)),
        SliderControl(LABELS.LABEL_BATTERY_FILL, (FIELD_VALUE_HIGH,)),
    )


def range_slider_controls() -> Tuple[ControlSpec, ...]:
    """Flag plus one range slider whose handles are switched with NEXT_TARGET."""
    return (
        ToggleControl(LABELS.LABEL_ENABLED),
        SliderControl(LABELS.LABEL_OPERATING_RANGE, (FIELD_VALUE_LOW, FIELD_VALUE_HIGH)),
    )


def controls_for_variant(variant: PanelVariant) -> Tuple[ControlSpec, ...]:
    if variant == PanelVariant.RANGE_SLIDER:
        return range_slider_controls()
    return dual_slider_controls()


def validate_controls(controls: Sequence[ControlSpec], binding) -> None:
    """Check that controls can be driven over binding.

    Raises:
        ValueError: On an empty control list, a slider with no handles or more
            than two, or a control naming a field the binding does not have.
    """
    if not controls:
        raise ValueError("A panel needs at least one control")

    for control in controls:
        if not isinstance(control, (ToggleControl, SliderControl)):
            raise ValueError(f"Unsupported control: {control!r}")
        if isinstance(control, SliderControl) and not 1 <= control.handle_count <= MAX_HANDLES:
            raise ValueError(f"Slider '{control.label}' must have 1 or {MAX_HANDLES} handles")
        for name in control.fields:
            if not binding.has_field(name):
                raise ValueError(f"Control '{control.label}' is bound to missing field '{name}'")
