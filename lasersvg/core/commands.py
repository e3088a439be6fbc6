from __future__ import annotations
from typing import Any, Dict, Tuple
from .property import LaserProperty


class Command:
    """
    A single instruction inside a vector part. Coordinates are given in
    device units at the resolution (dpi) of the owning part.
    """

    def __repr__(self) -> str:
        return f"<{super().__repr__()} {self.__dict__}"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def is_state_command(self) -> bool:
        """Whether this command changes the laser settings."""
        return False

    def is_cutting_command(self) -> bool:
        """Whether it is a movement with the laser on."""
        return False

    def is_travel_command(self) -> bool:
        """Whether it is a movement with the laser off."""
        return False

    def to_dict(self) -> Dict[str, Any]:
        """Serializes the command to a dictionary."""
        return {"type": self.__class__.__name__}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Command":
        type_name = data.get("type")
        if type_name == SetPropertyCommand.__name__:
            return SetPropertyCommand(
                LaserProperty.from_dict(data["property"])
            )
        if type_name == MoveToCommand.__name__:
            return MoveToCommand(*data["end"])
        if type_name == LineToCommand.__name__:
            return LineToCommand(*data["end"])
        raise ValueError(f"Unknown command type: {type_name}")


class MovingCommand(Command):
    def __init__(self, x: float, y: float) -> None:
        self.end: Tuple[float, float] = float(x), float(y)

    @property
    def x(self) -> float:
        return self.end[0]

    @property
    def y(self) -> float:
        return self.end[1]

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["end"] = list(self.end)
        return d


class MoveToCommand(MovingCommand):
    def is_travel_command(self) -> bool:
        return True


class LineToCommand(MovingCommand):
    def is_cutting_command(self) -> bool:
        return True


class SetPropertyCommand(Command):
    def __init__(self, property: LaserProperty) -> None:
        self.property = property

    def is_state_command(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["property"] = self.property.to_dict()
        return d
