import logging
from typing import IO
from ..core.job import Job
from ..encoder.svgencoder import SvgEncoder
from ..encoder.visitor import JobVisitor
from ..render.output import store_debug_output, write_document
from ..varset import Var, VarSet
from .driver import Driver, EstimationError


logger = logging.getLogger(__name__)


def _positive(value: float) -> None:
    if value <= 0:
        raise ValueError("must be greater than zero")


class DummyDriver(Driver):
    """
    A driver that accepts laser jobs without a machine. It logs what it
    receives and writes the vector data as SVG for debugging, e.g. to
    check the order in which paths are cut.
    """

    label = _("Dummy")
    subtitle = _("No machine, SVG debug output")

    def __init__(self):
        super().__init__()
        self.settings = VarSet(title=_("Dummy driver settings"))
        self.settings.add(Var(
            key="bed_width",
            label=_("Laserbed width"),
            var_type=float,
            default=250.0,
            validator=_positive,
        ))
        self.settings.add(Var(
            key="bed_height",
            label=_("Laserbed height"),
            var_type=float,
            default=280.0,
            validator=_positive,
        ))
        self.settings.add(Var(
            key="fake_runtime",
            label=_("Fake estimated run-time in seconds (-1 to disable)"),
            var_type=int,
            default=-1,
        ))
        self.settings.add(Var(
            key="svg_outdir",
            label=_("SVG Debug output directory (set empty to disable)"),
            var_type=str,
            default="",
        ))
        self.settings.add(Var(
            key="rotary_axis",
            label=_("Rotary Axis supported"),
            var_type=bool,
            default=False,
        ))

    def get_setting_vars(self) -> VarSet:
        return self.settings

    def get_settings(self):
        return self.settings.get_values()

    def apply_settings(self, values) -> None:
        self.settings.set_values(values)

    @property
    def bed_width(self) -> float:
        return self.settings["bed_width"].value

    @bed_width.setter
    def bed_width(self, width: float):
        self.settings["bed_width"].value = width

    @property
    def bed_height(self) -> float:
        return self.settings["bed_height"].value

    @bed_height.setter
    def bed_height(self, height: float):
        self.settings["bed_height"].value = height

    @property
    def svg_outdir(self) -> str:
        return self.settings["svg_outdir"].value or ""

    @property
    def fake_runtime(self) -> int:
        return self.settings["fake_runtime"].value

    def is_rotary_axis_supported(self) -> bool:
        return bool(self.settings["rotary_axis"].value)

    def job_to_svg(self, job: Job) -> SvgEncoder:
        """
        Feeds all parts of the job into a new SvgEncoder and returns it,
        not yet flushed.
        """
        visitor = JobVisitor(SvgEncoder(self), trace=self._log)
        return visitor.visit(job)

    def send_job(self, job: Job) -> None:
        self._set_progress(0)
        self._set_task(_("checking job"))
        self.check_job(job)
        self._log(
            f"Rotary engrave enabled: {job.rotary_axis_enabled}, "
            f"Diameter: {job.rotary_axis_diameter_mm:f}"
        )
        job.apply_start_point()
        self._set_task(_("sending"))
        self._set_task(_("sent."))
        encoder = self.job_to_svg(job)
        self._log("end of job.")
        store_debug_output(encoder, self.svg_outdir)
        self._set_progress(100)

    def save_job(self, stream: IO, job: Job) -> None:
        """Writes the job as SVG to the stream."""
        encoder = self.job_to_svg(job)
        write_document(stream, encoder.flush())

    def can_estimate_job_duration(self) -> bool:
        return self.fake_runtime >= 0

    def estimate_job_duration(self, job: Job) -> int:
        """
        Returns the configured fake runtime instead of a real estimate,
        to exercise the code paths of the callers.
        """
        if not self.can_estimate_job_duration():
            raise EstimationError(
                "Cannot estimate job duration: the fake runtime of the "
                "dummy driver is negative"
            )
        return self.fake_runtime

    def clone(self) -> "DummyDriver":
        clone = self.__class__()
        clone.apply_settings(self.get_settings())
        return clone
