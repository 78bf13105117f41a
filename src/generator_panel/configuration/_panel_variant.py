from enum import Enum


class PanelVariant(Enum):
    """Control sets the panel can be opened with."""

    # flag + two independent sliders (load and battery fill)
    DUAL_SLIDER = 'dual_slider'
    # flag + one slider with a low and a high handle
    RANGE_SLIDER = 'range_slider'


class NextTargetPolicy(Enum):
    """What NEXT_TARGET does on a control with a single handle."""

    IGNORE = 'ignore'
    CONFIRM = 'confirm'
