"""
The core module contains the job model: parts, vector commands and the
laser settings attached to them.
"""

from .property import (
    LaserProperty,
    PowerSpeedFocusProperty,
    PowerSpeedFocusFrequencyProperty,
)
from .commands import (
    Command,
    MovingCommand,
    MoveToCommand,
    LineToCommand,
    SetPropertyCommand,
)
from .job import (
    Job,
    JobPart,
    VectorPart,
    RasterPart,
    Raster3DPart,
    MM_PER_INCH,
)

__all__ = [
    "LaserProperty",
    "PowerSpeedFocusProperty",
    "PowerSpeedFocusFrequencyProperty",
    "Command",
    "MovingCommand",
    "MoveToCommand",
    "LineToCommand",
    "SetPropertyCommand",
    "Job",
    "JobPart",
    "VectorPart",
    "RasterPart",
    "Raster3DPart",
    "MM_PER_INCH",
]
