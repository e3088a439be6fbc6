from .svgencoder import SvgEncoder, EncoderState, EncoderUsageError
from .visitor import JobVisitor

__all__ = [
    "SvgEncoder",
    "EncoderState",
    "EncoderUsageError",
    "JobVisitor",
]
