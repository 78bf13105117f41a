"""
Non-owning view over the caller's generator settings.

The binding holds getter/setter pairs instead of values, so every write goes
straight to the caller's storage. It performs no validation: clamping and the
low/high gap are enforced by the panel controller when it mutates a value.
The caller must keep the bound storage alive while the panel is running.
"""

from typing import Any, Callable, Dict, MutableMapping, Optional

FIELD_ENABLED = "enabled"
FIELD_VALUE_LOW = "value_low"
FIELD_VALUE_HIGH = "value_high"


class BoundField:
    """A getter/setter pair over one caller-owned value."""

    __slots__ = ("name", "_getter", "_setter")

    def __init__(self, name: str, getter: Callable[[], Any], setter: Callable[[Any], None]):
        self.name = name
        self._getter = getter
        self._setter = setter

    @classmethod
    def attribute(cls, name: str, owner: object, attribute: str) -> "BoundField":
        return cls(name, lambda: getattr(owner, attribute), lambda value: setattr(owner, attribute, value))

    @classmethod
    def item(cls, name: str, mapping: MutableMapping[str, Any], key: str) -> "BoundField":
        return cls(name, lambda: mapping[key], lambda value: mapping.__setitem__(key, value))

    def get(self) -> Any:
        return self._getter()

    def set(self, value: Any) -> None:
        self._setter(value)

    def __repr__(self) -> str:
        return f"BoundField({self.name!r})"


class SettingsBinding:
    """
    View over an enabled flag and one or two percentage values.

    Attributes:
        enabled (bool): Generator on/off flag.
        value_low (int): First percentage value.
        value_high (int): Second percentage value, only when bound (see has_high).
    """

    def __init__(self, enabled: BoundField, value_low: BoundField, value_high: Optional[BoundField] = None):
        self._fields: Dict[str, BoundField] = {
            FIELD_ENABLED: enabled,
            FIELD_VALUE_LOW: value_low,
        }
        if value_high is not None:
            self._fields[FIELD_VALUE_HIGH] = value_high

    @classmethod
    def from_attributes(
        cls,
        owner: object,
        enabled: str = FIELD_ENABLED,
        value_low: str = FIELD_VALUE_LOW,
        value_high: Optional[str] = None,
    ) -> "SettingsBinding":
        """Bind to attributes of owner, e.g. a dataclass instance."""
        return cls(
            BoundField.attribute(FIELD_ENABLED, owner, enabled),
            BoundField.attribute(FIELD_VALUE_LOW, owner, value_low),
            BoundField.attribute(FIELD_VALUE_HIGH, owner, value_high) if value_high else None,
        )

    @classmethod
    def from_mapping(
        cls,
        mapping: MutableMapping[str, Any],
        enabled: str = FIELD_ENABLED,
        value_low: str = FIELD_VALUE_LOW,
        value_high: Optional[str] = None,
    ) -> "SettingsBinding":
        """Bind to keys of a mutable mapping."""
        return cls(
            BoundField.item(FIELD_ENABLED, mapping, enabled),
            BoundField.item(FIELD_VALUE_LOW, mapping, value_low),
            BoundField.item(FIELD_VALUE_HIGH, mapping, value_high) if value_high else None,
        )

    @property
    def has_high(self) -> bool:
        return FIELD_VALUE_HIGH in self._fields

    def has_field(self, name: str) -> bool:
        return name in self._fields

    def field(self, name: str) -> BoundField:
        """Return the bound field called name.

        Raises:
            AttributeError: If the binding was built without that field.
        """
        try:
            return self._fields[name]
        except KeyError:
            raise AttributeError(f"SettingsBinding has no field {name!r}") from None

    def get(self, name: str) -> Any:
        return self.field(name).get()

    def set(self, name: str, value: Any) -> None:
        self.field(name).set(value)

    @property
    def enabled(self) -> bool:
        return self.get(FIELD_ENABLED)

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self.set(FIELD_ENABLED, value)

    @property
    def value_low(self) -> int:
        return self.get(FIELD_VALUE_LOW)

    @value_low.setter
    def value_low(self, value: int) -> None:
        self.set(FIELD_VALUE_LOW, value)

    @property
    def value_high(self) -> int:
        return self.get(FIELD_VALUE_HIGH)

    @value_high.setter
    def value_high(self, value: int) -> None:
        self.set(FIELD_VALUE_HIGH, value)

    def snapshot(self) -> Dict[str, Any]:
        """Current values of every bound field, copied into a plain dict."""
        return {name: bound.get() for name, bound in self._fields.items()}

    def __repr__(self) -> str:
        return f"SettingsBinding({self.snapshot()!r})"
