from abc import ABC, abstractmethod

from pdfcover.inspection.models import PageSummary


class BasePdfInspector(ABC):
    """Contract for read-only PDF inspection adapters."""

    @abstractmethod
    def inspect(self, pdf_bytes: bytes) -> list[PageSummary]:
        """Summarize every page of a PDF.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            One PageSummary per page, in page order.

        Raises:
            InspectionError: if inspection fails for any reason.
        """
