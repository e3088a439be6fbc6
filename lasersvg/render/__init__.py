from .document import SvgDocumentRenderer, SVG_MARKER
from .output import store_text, store_debug_output, write_document

__all__ = [
    "SvgDocumentRenderer",
    "SVG_MARKER",
    "store_text",
    "store_debug_output",
    "write_document",
]
