from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from pdfcover.composition.models import PaintOperation, SourceDocument

PdfHandle = Any


class BasePdfBackend(ABC):
    """Contract for the PDF library doing the merge/paint/serialize work.

    Geometry handed to :meth:`paint` is in PDF-point space with a
    bottom-left origin. Adapters translate it to their own page space.
    """

    @abstractmethod
    def open_source(self, document: SourceDocument) -> PdfHandle:
        """Parse a source document.

        Raises:
            DocumentParseError: if the bytes are not a readable PDF.
        """

    @abstractmethod
    def new_output(self) -> PdfHandle:
        """Create an empty output document."""

    @abstractmethod
    def append_pages(self, output: PdfHandle, source: PdfHandle) -> int:
        """Copy every page of ``source`` to the end of ``output``; return the count."""

    @abstractmethod
    def page_sizes(self, output: PdfHandle) -> list[tuple[float, float]]:
        """Width and height in points of each output page, in page order."""

    @abstractmethod
    def paint(
        self,
        output: PdfHandle,
        page_index: int,
        operations: Sequence[PaintOperation],
    ) -> None:
        """Draw covers and text onto one output page."""

    @abstractmethod
    def serialize(self, output: PdfHandle) -> bytes:
        """Flatten ``output`` to PDF bytes."""

    @abstractmethod
    def close(self, handle: PdfHandle) -> None:
        """Release a handle returned by this backend."""
