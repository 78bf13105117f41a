"""
Keyboard input mapping for the generator panel.

Raw curses key codes are resolved into named PanelActions here, so the panel
controller never deals with key codes. Bindings are given as key names:
curses constants ("KEY_UP"), the specials ENTER, TAB, ESC and SPACE, or a
single character.
"""

import curses
from enum import Enum
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import generator_panel.labels as LABELS


class PanelAction(Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    CONFIRM = "CONFIRM"
    NEXT_TARGET = "NEXT_TARGET"
    QUIT = "QUIT"
    # terminal size changed; not a user action, always bound to KEY_RESIZE
    RESIZE = "RESIZE"


DEFAULT_BINDINGS: Dict[str, Tuple[str, ...]] = {
    "UP": ("KEY_UP", "k"),
    "DOWN": ("KEY_DOWN", "j"),
    "LEFT": ("KEY_LEFT", "h"),
    "RIGHT": ("KEY_RIGHT", "l"),
    "CONFIRM": ("ENTER", "SPACE"),
    "NEXT_TARGET": ("TAB",),
    "QUIT": ("q", "Q", "ESC"),
}

SPECIAL_KEYS: Dict[str, Tuple[int, ...]] = {
    "ENTER": (ord("\n"), ord("\r"), curses.KEY_ENTER),
    "TAB": (ord("\t"),),
    "ESC": (27,),
    "SPACE": (ord(" "),),
}

KEY_DESCRIPTIONS: Dict[str, str] = {
    "KEY_UP": LABELS.KEY_NAME_UP,
    "KEY_DOWN": LABELS.KEY_NAME_DOWN,
    "KEY_LEFT": LABELS.KEY_NAME_LEFT,
    "KEY_RIGHT": LABELS.KEY_NAME_RIGHT,
    "ENTER": LABELS.KEY_NAME_ENTER,
    "TAB": LABELS.KEY_NAME_TAB,
    "ESC": LABELS.KEY_NAME_ESC,
    "SPACE": LABELS.KEY_NAME_SPACE,
}


def key_codes(name: str) -> Tuple[int, ...]:
    """Key codes produced by the key called name.

    Raises:
        ValueError: If name is not a curses key constant, a special key or a single character.
    """
    if name in SPECIAL_KEYS:
        return SPECIAL_KEYS[name]
    if name.startswith("KEY_"):
        code = getattr(curses, name, None)
        if isinstance(code, int):
            return (code,)
    elif len(name) == 1:
        return (ord(name),)
    raise ValueError(f"Unknown key name: {name!r}")


def describe_key(name: str) -> str:
    if name in KEY_DESCRIPTIONS:
        return LABELS._(KEY_DESCRIPTIONS[name])
    if name.startswith("KEY_"):
        return name[len("KEY_"):]
    return name


class InputContext:
    """Resolves key codes into PanelActions according to a set of bindings."""

    def __init__(self, bindings: Optional[Mapping[str, Sequence[str]]] = None) -> None:
        """
        Args:
            bindings: Action name -> key names. Actions missing here keep their default keys.

        Raises:
            ValueError: On an unknown action name or key name, a key bound to
                two actions, or a key that produces KEY_RESIZE.
        """
        merged: Dict[str, Sequence[str]] = dict(DEFAULT_BINDINGS)
        merged.update(bindings or {})

        self._keymap: Dict[int, PanelAction] = {curses.KEY_RESIZE: PanelAction.RESIZE}
        self._names: Dict[PanelAction, List[str]] = {}

        for action_name, names in merged.items():
            try:
                action = PanelAction(action_name)
            except ValueError:
                raise ValueError(f"Unknown action name: {action_name!r}") from None
            if action == PanelAction.RESIZE:
                raise ValueError("RESIZE is always bound to KEY_RESIZE")

            self._names[action] = list(names)
            for name in names:
                for code in key_codes(name):
                    bound = self._keymap.get(code)
                    if bound is not None and bound != action:
                        raise ValueError(f"Key {name!r} of {action.value} is already bound to {bound.value}")
                    self._keymap[code] = action

    def resolve(self, key: int) -> Optional[PanelAction]:
        """Action bound to key, or None for unbound keys."""
        return self._keymap.get(key)

    def handle_input(self, window) -> Optional[PanelAction]:
        """Block for one key press on window and resolve it."""
        return self.resolve(window.getch())

    def get_desc(self, action: PanelAction) -> str:
        """Human-readable list of the keys bound to action, e.g. "↑/k"."""
        names = self._names.get(action)
        if not names:
            return LABELS._(LABELS.KEY_NAME_UNBOUND)
        return LABELS.KEY_SEPARATOR.join(describe_key(name) for name in names)
