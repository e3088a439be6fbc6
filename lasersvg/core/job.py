"""
The job model: a laser job is an ordered list of parts. Vector parts
carry a list of commands, raster parts only carry their settings and the
size of their bitmap.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Type
from .commands import (
    Command,
    MoveToCommand,
    LineToCommand,
    SetPropertyCommand,
)
from .property import LaserProperty


MM_PER_INCH = 25.4


def mm_to_px(mm: float, dpi: float) -> float:
    return mm * dpi / MM_PER_INCH


def px_to_mm(px: float, dpi: float) -> float:
    return px * MM_PER_INCH / dpi


@dataclass
class JobPart:
    dpi: float

    def __post_init__(self):
        if self.dpi <= 0:
            raise ValueError(f"dpi must be positive, got {self.dpi}")
        self.dpi = float(self.dpi)

    def translate(self, dx_mm: float, dy_mm: float) -> None:
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.__class__.__name__, "dpi": self.dpi}


@dataclass
class VectorPart(JobPart):
    commands: List[Command] = field(default_factory=list)

    def set_property(self, prop: LaserProperty) -> None:
        self.commands.append(SetPropertyCommand(prop))

    def move_to(self, x: float, y: float) -> None:
        self.commands.append(MoveToCommand(x, y))

    def line_to(self, x: float, y: float) -> None:
        self.commands.append(LineToCommand(x, y))

    def translate(self, dx_mm: float, dy_mm: float) -> None:
        dx = mm_to_px(dx_mm, self.dpi)
        dy = mm_to_px(dy_mm, self.dpi)
        for i, cmd in enumerate(self.commands):
            if cmd.is_travel_command() or cmd.is_cutting_command():
                self.commands[i] = type(cmd)(cmd.x + dx, cmd.y + dy)

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["commands"] = [cmd.to_dict() for cmd in self.commands]
        return d


@dataclass
class RasterPart(JobPart):
    settings: Optional[LaserProperty] = None
    width: int = 0  # in pixels
    height: int = 0  # in pixels
    origin: Tuple[float, float] = (0.0, 0.0)  # in pixels

    def translate(self, dx_mm: float, dy_mm: float) -> None:
        x, y = self.origin
        self.origin = (
            x + mm_to_px(dx_mm, self.dpi),
            y + mm_to_px(dy_mm, self.dpi),
        )

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["settings"] = self.settings.to_dict() if self.settings else None
        d["width"] = self.width
        d["height"] = self.height
        d["origin"] = list(self.origin)
        return d


@dataclass
class Raster3DPart(RasterPart):
    pass


_PART_TYPES: Dict[str, Type[JobPart]] = {
    cls.__name__: cls for cls in (VectorPart, RasterPart, Raster3DPart)
}


def part_from_dict(data: Dict[str, Any]) -> JobPart:
    type_name = data.get("type")
    part_cls = _PART_TYPES.get(type_name)  # type: ignore[arg-type]
    if part_cls is None:
        raise ValueError(f"Unknown job part type: {type_name}")
    if part_cls is VectorPart:
        return VectorPart(
            dpi=data["dpi"],
            commands=[
                Command.from_dict(c) for c in data.get("commands") or []
            ],
        )
    settings = data.get("settings")
    return part_cls(
        dpi=data["dpi"],
        settings=LaserProperty.from_dict(settings) if settings else None,
        width=int(data.get("width", 0)),
        height=int(data.get("height", 0)),
        origin=tuple(data.get("origin", (0.0, 0.0))),  # type: ignore
    )


@dataclass
class Job:
    title: str = "Unnamed job"
    parts: List[JobPart] = field(default_factory=list)
    rotary_axis_enabled: bool = False
    rotary_axis_diameter_mm: float = 0.0
    start_point: Tuple[float, float] = (0.0, 0.0)  # in mm

    def apply_start_point(self) -> None:
        """
        Moves all parts so that the start point becomes the origin.
        Afterwards the start point is (0, 0).
        """
        x, y = self.start_point
        if x == 0 and y == 0:
            return
        for part in self.parts:
            part.translate(-x, -y)
        self.start_point = (0.0, 0.0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "rotary_axis_enabled": self.rotary_axis_enabled,
            "rotary_axis_diameter_mm": self.rotary_axis_diameter_mm,
            "start_point": list(self.start_point),
            "parts": [part.to_dict() for part in self.parts],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Job":
        start_x, start_y = data.get("start_point") or (0.0, 0.0)
        return cls(
            title=data.get("title", cls.title),
            parts=[part_from_dict(p) for p in data.get("parts") or []],
            rotary_axis_enabled=bool(data.get("rotary_axis_enabled", False)),
            rotary_axis_diameter_mm=float(
                data.get("rotary_axis_diameter_mm", 0.0)
            ),
            start_point=(float(start_x), float(start_y)),
        )
