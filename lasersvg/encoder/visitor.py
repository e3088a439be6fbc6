import logging
from typing import Callable, Optional
from ..core.job import Job, JobPart, VectorPart, RasterPart, Raster3DPart
from ..core.commands import (
    Command,
    MoveToCommand,
    LineToCommand,
    SetPropertyCommand,
)
from ..core.property import (
    LaserProperty,
    PowerSpeedFocusProperty,
    PowerSpeedFocusFrequencyProperty,
)
from ..driver.driver import IllegalJobError
from .svgencoder import SvgEncoder


logger = logging.getLogger(__name__)


class JobVisitor:
    """
    Walks the parts of a job, checks that the settings of every part
    are of the kind this driver understands, and feeds the vector data
    into an SvgEncoder.

    Every part and command is also reported as a one-line diagnostic
    message, both to the log and to the optional trace callback.
    """

    def __init__(
        self,
        encoder: SvgEncoder,
        trace: Optional[Callable[[str], None]] = None,
    ):
        self.encoder = encoder
        self.trace = trace

    def visit(self, job: Job) -> SvgEncoder:
        """
        Encodes all parts of the job. Raises IllegalJobError on the first
        part or command with unsupported settings; the encoder should
        then be discarded. The encoder is not flushed.
        """
        self._emit(f"got LaserJob: {job.title}")
        for part in job.parts:
            self.visit_part(part)
        return self.encoder

    def visit_part(self, part: JobPart) -> None:
        self.encoder.start_part(type(part).__name__, part.dpi)
        match part:
            case VectorPart():
                self._emit("VectorPart")
                for cmd in part.commands:
                    self.visit_command(cmd)
            case Raster3DPart() | RasterPart():
                self._emit(
                    f"{type(part).__name__} {part.width}x{part.height} "
                    f"at {part.origin}"
                )
                self._check_raster_settings(part.settings)
            case _:
                raise TypeError(f"Unsupported job part: {part!r}")

    def visit_command(self, cmd: Command) -> None:
        match cmd:
            case SetPropertyCommand():
                if not isinstance(
                    cmd.property, PowerSpeedFocusFrequencyProperty
                ):
                    raise IllegalJobError(
                        "This driver expects Power, Speed, Frequency and "
                        "Focus as settings"
                    )
                self._emit(repr(cmd.property))
            case LineToCommand():
                self._emit(f"LINETO \t{cmd.x}, \t{cmd.y}")
                self.encoder.line_to(cmd.x, cmd.y)
            case MoveToCommand():
                self._emit(f"MOVETO \t{cmd.x}, \t{cmd.y}")
                self.encoder.move_to(cmd.x, cmd.y)
            case _:
                raise TypeError(f"Unsupported vector command: {cmd!r}")

    def _check_raster_settings(
        self, settings: Optional[LaserProperty]
    ) -> None:
        if settings is None:
            self._emit("no settings")
            return
        # rasters have no frequency, so only the plain variant is accepted
        if not isinstance(settings, PowerSpeedFocusProperty) or isinstance(
            settings, PowerSpeedFocusFrequencyProperty
        ):
            raise IllegalJobError(
                "This driver expects Power, Speed and Focus as settings"
            )
        self._emit(repr(settings))

    def _emit(self, message: str) -> None:
        logger.info(message)
        if self.trace:
            self.trace(message)
