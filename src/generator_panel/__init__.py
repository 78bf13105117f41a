"""
Generator Panel Package
-----------------------
Provides a curses-based control panel for generator settings: an enabled
flag plus load and battery sliders, or a single operating range slider.

This package can be executed directly via:
    python3 -m generator_panel
or imported to edit settings owned by another program:
    from generator_panel import PanelController, SettingsBinding
"""

__version__ = "1.0.0"

from .panel import PanelController, SettingsBinding
