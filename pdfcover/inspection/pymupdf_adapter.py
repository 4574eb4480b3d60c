import pymupdf

from pdfcover.inspection.base import BasePdfInspector
from pdfcover.inspection.exceptions import InspectionError
from pdfcover.inspection.models import Box, PageSummary


class PyMuPdfInspector(BasePdfInspector):
    """Inspects PDF pages using PyMuPDF."""

    def inspect(self, pdf_bytes: bytes) -> list[PageSummary]:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                return [self._summarize(page) for page in doc]
        except InspectionError:
            raise
        except Exception as exc:
            raise InspectionError(f"pymupdf inspection failed: {exc}") from exc

    def _summarize(self, page: pymupdf.Page) -> PageSummary:
        to_pdf = ~page.transformation_matrix
        boxes: list[Box] = []
        for drawing in page.get_drawings():
            if drawing.get("fill") is None:
                continue
            rect = drawing["rect"] * to_pdf
            boxes.append((rect.x0, rect.y0, rect.x1, rect.y1))
        return PageSummary(
            width=page.mediabox.width,
            height=page.mediabox.height,
            text=page.get_text().strip(),
            boxes=boxes,
        )
