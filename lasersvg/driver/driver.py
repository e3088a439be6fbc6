import logging
from abc import ABC, abstractmethod
from typing import IO, Any, List
from blinker import Signal
from ..core.job import Job
from ..varset import VarSet


logger = logging.getLogger(__name__)


class IllegalJobError(Exception):
    """Raised when a job cannot be processed by a driver."""

    pass


class EstimationError(Exception):
    """Raised when a driver is asked for a duration it cannot estimate."""

    pass


class Driver(ABC):
    """
    Abstract base class for all drivers.
    All drivers must provide the following methods:

       get_setting_vars()
       send_job()
       save_job()

    All drivers provide the following signals:
       log_received: for log messages
       progress_changed: job progress in percent
       task_changed: a short description of what the driver is doing

    Subclasses MUST NOT emit these signals directly; they should instead
    call self._log, self._set_progress and self._set_task.
    """

    label: str
    subtitle: str

    def __init__(self):
        self.log_received = Signal()
        self.progress_changed = Signal()
        self.task_changed = Signal()

    @abstractmethod
    def get_setting_vars(self) -> VarSet:
        """
        Returns the VarSet holding the driver's settings.
        """
        pass

    def get_property_keys(self) -> List[str]:
        """The human readable names of all settings."""
        return [var.label for var in self.get_setting_vars()]

    def get_property(self, label: str) -> Any:
        """Returns the setting with the given label, or None."""
        var = self.get_setting_vars().get_by_label(label)
        return var.value if var else None

    def set_property(self, label: str, value: Any) -> None:
        """Changes the setting with the given label. Unknown labels are
        ignored."""
        var = self.get_setting_vars().get_by_label(label)
        if var is None:
            logger.warning(f"{self.label}: ignoring unknown setting {label}")
            return
        var.value = value

    def get_resolutions(self) -> List[float]:
        """The resolutions (in dpi) that parts of a job may use."""
        return [500.0]

    def check_job(self, job: Job) -> None:
        """
        Raises IllegalJobError if the job uses a feature that the
        driver does not support.
        """
        resolutions = self.get_resolutions()
        for part in job.parts:
            if part.dpi not in resolutions:
                raise IllegalJobError(
                    f"Resolution of {part.dpi} dpi is not supported"
                )
        if job.rotary_axis_enabled and not self.is_rotary_axis_supported():
            raise IllegalJobError("This driver has no rotary axis")

    def is_rotary_axis_supported(self) -> bool:
        return False

    @abstractmethod
    def send_job(self, job: Job) -> None:
        """
        Converts the given job into commands for the machine, and
        executes them.
        """
        pass

    @abstractmethod
    def save_job(self, stream: IO, job: Job) -> None:
        """
        Writes the job to the stream in the format of the driver.
        """
        pass

    def can_estimate_job_duration(self) -> bool:
        return False

    def estimate_job_duration(self, job: Job) -> int:
        """Returns the estimated duration of the job in seconds."""
        raise EstimationError(f"{self.label} cannot estimate job duration")

    def _log(self, message: str):
        logger.info(message)
        self.log_received.send(self, message=message)

    def _set_progress(self, progress: int):
        logger.debug(f"{self.label}: progress {progress}%")
        self.progress_changed.send(self, progress=progress)

    def _set_task(self, task: str):
        logger.debug(f"{self.label}: {task}")
        self.task_changed.send(self, task=task)
