from dataclasses import dataclass


@dataclass
class PanelState:
    """UI-only state of an open panel; never visible to the caller."""

    # index into the panel's controls, cyclic
    selected_control: int = 0
    # active handle of a multi-handle slider; taken modulo the handle count
    active_slider: int = 0

    def select(self, delta: int, control_count: int) -> None:
        self.selected_control = (self.selected_control + control_count + delta) % control_count

    def active_handle(self, handle_count: int) -> int:
        return self.active_slider % handle_count

    def next_handle(self, handle_count: int) -> None:
        self.active_slider = (self.active_handle(handle_count) + 1) % handle_count
