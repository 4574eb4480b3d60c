import io
from collections.abc import Callable

import pytest
from reportlab.lib.pagesizes import A4, letter
from reportlab.pdfgen import canvas

PdfFactory = Callable[..., bytes]


def _build_pdf(page_texts: list[str], pagesize: tuple[float, float] = letter) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=pagesize)
    for text in page_texts:
        if text:
            c.drawString(72, 720, text)
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def make_pdf() -> PdfFactory:
    """Factory building a PDF with one page per given text."""
    return _build_pdf


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page letter PDF with known text content."""
    return _build_pdf(["Hello PDF World"])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page letter PDF with known text on each page."""
    return _build_pdf(["Page one content", "Page two content"])


@pytest.fixture()
def a4_pdf_bytes() -> bytes:
    """Generate a single-page A4 PDF, a different size from the letter fixtures."""
    return _build_pdf(["A4 page content"], pagesize=A4)
