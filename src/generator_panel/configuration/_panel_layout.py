from dataclasses import dataclass


@dataclass(frozen=True)
class PanelLayout:
    """Fixed geometry of the panel window, in character cells."""

    width: int = 52
    height: int = 36
    left_margin: int = 6
    # vertical space reserved for each control; y of a control is the middle of it
    item_height: int = 5
    slider_width: int = 40

    def control_center_y(self, index: int) -> int:
        """Row at the vertical center of the index-th control."""
        return 3 + self.item_height // 2 + index * self.item_height

    def slider_offset(self, value: int) -> int:
        """Column offset of a percentage value on the slider track."""
        return value * self.slider_width // 100


@dataclass(frozen=True)
class SliderLimits:
    """Stepping and clamping rules applied to every slider handle."""

    step: int = 5
    minimum: int = 5
    maximum: int = 90
    # smallest allowed distance between the low and high handle of one slider
    min_gap: int = 5


DEFAULT_LAYOUT = PanelLayout()
DEFAULT_LIMITS = SliderLimits()
