import re
import logging
from enum import Enum, auto
from typing import List, Optional, Protocol
from ..core.job import MM_PER_INCH
from ..render.document import SvgDocumentRenderer


logger = logging.getLogger(__name__)

PART_STYLE = "fill:none;stroke:#000000;stroke-width:0.1mm;"
ID_PREFIX = "lasersvg"


class EncoderUsageError(RuntimeError):
    """Raised when the encoder is driven in an invalid order."""

    pass


class CanvasSize(Protocol):
    """Anything that knows the size of the laser bed in mm."""

    @property
    def bed_width(self) -> float: ...

    @property
    def bed_height(self) -> float: ...


class EncoderState(Enum):
    IDLE = auto()
    PART_OPEN = auto()
    PATH_OPEN = auto()


class SvgEncoder:
    """
    Builds an SVG fragment from a stream of move/draw primitives.

    Every job part becomes a <g> element, and every run of consecutive
    line_to() calls becomes one <path>. Coordinates are given in device
    units and converted to mm using the dpi of the current part.

    The encoder is a small state machine:

        IDLE -> PART_OPEN       start_part()
        PART_OPEN -> PATH_OPEN  line_to()
        PATH_OPEN -> PART_OPEN  move_to()
        any -> IDLE             end_part(), flush()

    start_part() and flush() silently close whatever is still open.
    An instance must not be shared between concurrent encodings.
    """

    def __init__(
        self,
        canvas: CanvasSize,
        renderer: Optional[SvgDocumentRenderer] = None,
    ):
        self.canvas = canvas
        self.renderer = renderer or SvgDocumentRenderer()
        self._state = EncoderState.IDLE
        self.dpi = MM_PER_INCH  # device units are mm until a part starts
        self.prev_pos = 0.0, 0.0  # in mm
        self.pos = 0.0, 0.0  # in mm
        self._path_count = 0  # reset on flush()
        self._part_count = 0  # never reset
        self._fragment: List[str] = []

    @property
    def state(self) -> EncoderState:
        return self._state

    @property
    def path_count(self) -> int:
        """Number of paths written since the last flush()."""
        return self._path_count

    @property
    def part_count(self) -> int:
        return self._part_count

    @property
    def fragment(self) -> str:
        """The SVG data accumulated since the last flush()."""
        return "".join(self._fragment)

    def start_part(self, title: str, dpi: float) -> None:
        """
        Starts a new group. Any open part (and path) is closed first.
        The title is included in the group id. A non-positive dpi is
        rejected before anything is closed.
        """
        if dpi <= 0:
            raise ValueError(f"dpi must be positive, got {dpi}")
        self.end_part()
        self._part_count += 1
        self.dpi = dpi
        self._open_part(re.sub(r"[^a-zA-Z0-9]", "_", title))

    def end_part(self) -> None:
        self.move_to(0, 0)
        if self.state is EncoderState.PART_OPEN:
            self._close_part()

    def move_to(self, x: float, y: float) -> None:
        """Move with the laser off."""
        self._set_location(x, y)
        if self.state is EncoderState.PATH_OPEN:
            self._close_path()

    def line_to(self, x: float, y: float) -> None:
        """Move with the laser on."""
        if self.state is EncoderState.IDLE:
            raise EncoderUsageError("line_to() called outside of a part")
        self._set_location(x, y)
        if self.state is EncoderState.PART_OPEN:
            self._open_path()
        self._fragment.append(f"{self.pos[0]},{self.pos[1]} ")

    def flush(self) -> str:
        """
        Returns the complete SVG document and deletes all path data.
        The part counter keeps running, so that group ids stay unique
        when encoding continues after a flush.
        """
        self.end_part()
        svg = self.renderer.render(
            self.fragment, self.canvas.bed_width, self.canvas.bed_height
        )
        logger.debug(
            f"Flushed {self.path_count} paths, {len(svg)} characters"
        )
        self._fragment = []
        self._path_count = 0
        return svg

    def _set_location(self, x: float, y: float) -> None:
        self.prev_pos = self.pos
        self.pos = x * MM_PER_INCH / self.dpi, y * MM_PER_INCH / self.dpi

    def _open_part(self, label: str) -> None:
        self._fragment.append(
            f'<g style="{PART_STYLE}" '
            f'id="{ID_PREFIX}-part{self.part_count}-{label}">\n'
        )
        self._state = EncoderState.PART_OPEN

    def _close_part(self) -> None:
        self._fragment.append("</g>\n")
        self._state = EncoderState.IDLE

    def _open_path(self) -> None:
        prev_x, prev_y = self.prev_pos
        self._fragment.append(
            f'<path id="{ID_PREFIX}-{self.path_count}" '
            f'd="M {prev_x},{prev_y} '
        )
        self._path_count += 1
        self._state = EncoderState.PATH_OPEN

    def _close_path(self) -> None:
        self._fragment.append('"/>\n')
        self._state = EncoderState.PART_OPEN
