import importlib.resources
import logging
from typing import Iterable, List, Optional
from .. import resources


logger = logging.getLogger(__name__)

VIEWER_TEMPLATE = "viewer.xhtml"
SVG_MARKER = "<!-- REPLACE THIS WITH SVG -->"


class SvgDocumentRenderer:
    """
    Turns an SVG fragment (the groups and paths produced by the encoder)
    into a complete SVG document, and splices such a document into the
    bundled XHTML viewer.
    """

    creator = "lasersvg debug output"

    def render(self, fragment: str, width: float, height: float) -> str:
        """
        Wraps the fragment with the SVG header and footer. Width and height
        are the canvas size in mm.
        """
        return self.header(width, height) + fragment + self.footer()

    def header(self, width: float, height: float) -> str:
        return (
            '<?xml version="1.0" encoding="UTF-8" standalone="no"?> \n'
            f"<!-- Created by {self.creator} -->\n"
            '<svg xmlns:svg="http://www.w3.org/2000/svg" '
            'xmlns="http://www.w3.org/2000/svg" '
            f'width="{width}mm" height="{height}mm" '
            f'viewBox="0 0 {width} {height}" '
            'version="1.1" id="svg"> \n'
        )

    def footer(self) -> str:
        return "</svg>\n"

    def load_template(self) -> List[str]:
        """
        Reads the viewer template from the package resources.
        Raises FileNotFoundError if the resource is missing.
        """
        template = importlib.resources.files(resources) / VIEWER_TEMPLATE
        with template.open("r", encoding="utf-8") as f:
            return f.read().splitlines()

    def render_viewer(
        self, svg: str, template_lines: Optional[Iterable[str]] = None
    ) -> str:
        """
        Returns the viewer template with the marker line replaced by the
        SVG document. The first line of the SVG (the XML declaration) is
        dropped, as it is not allowed inside the XHTML body.
        """
        if template_lines is None:
            template_lines = self.load_template()
        first_newline = svg.find("\n")
        body = svg[first_newline:] if first_newline >= 0 else svg
        xhtml = []
        for line in template_lines:
            if SVG_MARKER in line:
                line = body
            xhtml.append(line + "\n")
        return "".join(xhtml)
