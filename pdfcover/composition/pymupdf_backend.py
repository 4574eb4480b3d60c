from collections.abc import Sequence

import pymupdf

from pdfcover.composition.base import BasePdfBackend, PdfHandle
from pdfcover.composition.exceptions import CompositionError, DocumentParseError
from pdfcover.composition.models import PaintOperation, SourceDocument

_WHITE = (1, 1, 1)


class PyMuPdfBackend(BasePdfBackend):
    """Merges and paints documents with PyMuPDF."""

    def __init__(self, font_name: str = "helv") -> None:
        self._font_name = font_name

    def open_source(self, document: SourceDocument) -> PdfHandle:
        try:
            doc = pymupdf.open(stream=document.data, filetype="pdf")  # type: ignore[no-untyped-call]
        except Exception as exc:
            raise DocumentParseError(
                f"'{document.display_name}' is not a valid PDF: {exc}"
            ) from exc
        if doc.needs_pass:
            doc.close()
            raise DocumentParseError(f"'{document.display_name}' is password protected")
        if doc.page_count == 0:
            doc.close()
            raise DocumentParseError(f"'{document.display_name}' has no pages")
        return doc

    def new_output(self) -> PdfHandle:
        return pymupdf.open()  # type: ignore[no-untyped-call]

    def append_pages(self, output: PdfHandle, source: PdfHandle) -> int:
        try:
            output.insert_pdf(source)
        except Exception as exc:
            raise CompositionError(f"pymupdf page copy failed: {exc}") from exc
        return int(source.page_count)

    def page_sizes(self, output: PdfHandle) -> list[tuple[float, float]]:
        return [(page.mediabox.width, page.mediabox.height) for page in output]

    def paint(
        self,
        output: PdfHandle,
        page_index: int,
        operations: Sequence[PaintOperation],
    ) -> None:
        page = output[page_index]
        # PDF space (bottom-left origin) -> PyMuPDF page space (top-left origin)
        to_page = page.transformation_matrix
        try:
            for op in operations:
                if not op.cover.is_empty:
                    cover = pymupdf.Rect(op.cover.x, op.cover.y, op.cover.x1, op.cover.y1)
                    page.draw_rect(cover * to_page, color=None, fill=_WHITE, width=0, overlay=True)
                if op.text:
                    origin = pymupdf.Point(*op.text_origin) * to_page
                    page.insert_text(
                        origin,
                        op.text,
                        fontsize=op.font_size,
                        fontname=self._font_name,
                        color=op.color,
                    )
        except Exception as exc:
            raise CompositionError(
                f"pymupdf painting failed on page {page_index + 1}: {exc}"
            ) from exc

    def serialize(self, output: PdfHandle) -> bytes:
        try:
            return bytes(output.tobytes(garbage=3, deflate=True))
        except Exception as exc:
            raise CompositionError(f"pymupdf serialization failed: {exc}") from exc

    def close(self, handle: PdfHandle) -> None:
        handle.close()
