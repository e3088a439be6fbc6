from __future__ import annotations
from dataclasses import dataclass, fields, asdict
from typing import Any, Dict, List, Type


class LaserProperty:
    """
    Base class for the settings attached to a vector command or a
    raster part. Concrete subclasses are dataclasses; their fields are
    the capabilities they provide (power, speed, ...).
    """

    def get_property_keys(self) -> List[str]:
        return [f.name for f in fields(self)]  # type: ignore[arg-type]

    def get_property(self, key: str) -> Any:
        if key not in self.get_property_keys():
            raise KeyError(f"{self.__class__.__name__} has no '{key}'")
        return getattr(self, key)

    def set_property(self, key: str, value: Any) -> None:
        if key not in self.get_property_keys():
            raise KeyError(f"{self.__class__.__name__} has no '{key}'")
        setattr(self, key, float(value))

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"type": self.__class__.__name__}
        d.update(asdict(self))  # type: ignore[call-overload]
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LaserProperty":
        data = dict(data)
        type_name = data.pop("type", None)
        prop_cls = _PROPERTY_TYPES.get(type_name)
        if prop_cls is None:
            raise ValueError(f"Unknown laser property type: {type_name}")
        return prop_cls(**{k: float(v) for k, v in data.items()})


@dataclass
class PowerSpeedFocusProperty(LaserProperty):
    power: float = 20.0  # percent
    speed: float = 100.0  # percent
    focus: float = 0.0  # mm


@dataclass
class PowerSpeedFocusFrequencyProperty(PowerSpeedFocusProperty):
    frequency: float = 5000.0  # Hz


_PROPERTY_TYPES: Dict[str, Type[LaserProperty]] = {
    cls.__name__: cls
    for cls in (PowerSpeedFocusProperty, PowerSpeedFocusFrequencyProperty)
}
