from .driver import Driver, IllegalJobError, EstimationError

__all__ = ["Driver", "IllegalJobError", "EstimationError"]
