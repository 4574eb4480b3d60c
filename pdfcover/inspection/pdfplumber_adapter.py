import io

import pdfplumber
from pdfplumber.page import Page

from pdfcover.inspection.base import BasePdfInspector
from pdfcover.inspection.exceptions import InspectionError
from pdfcover.inspection.models import Box, PageSummary


class PdfPlumberInspector(BasePdfInspector):
    """Inspects PDF pages using pdfplumber."""

    def inspect(self, pdf_bytes: bytes) -> list[PageSummary]:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                return [self._summarize(page) for page in pdf.pages]
        except InspectionError:
            raise
        except Exception as exc:
            raise InspectionError(f"pdfplumber inspection failed: {exc}") from exc

    def _summarize(self, page: Page) -> PageSummary:
        boxes: list[Box] = [
            (float(r["x0"]), float(r["y0"]), float(r["x1"]), float(r["y1"]))
            for r in (*page.rects, *page.curves)
            if r.get("fill")
        ]
        return PageSummary(
            width=float(page.width),
            height=float(page.height),
            text=(page.extract_text() or "").strip(),
            boxes=boxes,
        )
