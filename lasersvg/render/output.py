import io
import logging
from pathlib import Path
from typing import IO, List, Optional, Union, TYPE_CHECKING
from .document import SvgDocumentRenderer

if TYPE_CHECKING:
    from ..encoder.svgencoder import SvgEncoder


logger = logging.getLogger(__name__)

SVG_FILENAME = "lasersvg-debug.svg"
VIEWER_FILENAME = "lasersvg-output-viewer.xhtml"


def store_text(path: Union[str, Path], text: str) -> bool:
    """
    Writes the text to the given file. Failures are logged, not raised,
    because the debug output must never break a job.
    """
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as e:
        logger.error(f"Could not write debug output to {path}: {e}")
        return False
    return True


def store_debug_output(
    encoder: "SvgEncoder",
    directory: Optional[Union[str, Path]],
    renderer: Optional[SvgDocumentRenderer] = None,
) -> List[Path]:
    """
    Flushes the encoder and stores the SVG plus the XHTML viewer in the
    given directory. An empty directory disables the output. Returns the
    paths of the files that were written.
    """
    if not directory:
        logger.info(
            "Not writing debug SVG - no output directory set "
            "(edit the driver settings to change)"
        )
        return []
    renderer = renderer or encoder.renderer
    directory = Path(directory)
    written = []

    svg_path = directory / SVG_FILENAME
    logger.info(f"Storing SVG debug output to {svg_path}")
    svg = encoder.flush()
    if store_text(svg_path, svg):
        written.append(svg_path)

    viewer_path = directory / VIEWER_FILENAME
    try:
        template = renderer.load_template()
    except OSError as e:
        logger.error(f"Could not load the XHTML viewer template: {e}")
        return written
    logger.info(f"Storing SVG debug output (XHTML viewer) to {viewer_path}")
    if store_text(viewer_path, renderer.render_viewer(svg, template)):
        written.append(viewer_path)
    return written


def write_document(stream: IO, text: str) -> None:
    """
    Writes a document to a text or binary stream using \\n line endings.
    Errors are not caught.
    """
    text = text.replace("\r\n", "\n")
    if _is_binary(stream):
        stream.write(text.encode("utf-8"))
    else:
        stream.write(text)
    stream.flush()


def _is_binary(stream: IO) -> bool:
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return True
    if isinstance(stream, io.TextIOBase):
        return False
    return "b" in getattr(stream, "mode", "")
