from dataclasses import dataclass, field

from pdfcover.composition.geometry import PdfBox
from pdfcover.rectangles.colors import RGB
from pdfcover.rectangles.models import Rectangle


@dataclass(frozen=True)
class SourceDocument:
    """One uploaded file. Immutable once created."""

    id: str
    display_name: str
    data: bytes = field(repr=False)


@dataclass(frozen=True)
class CompositionJob:
    """Everything one composition run reads. Consumed once."""

    documents: tuple[SourceDocument, ...]
    rectangles: tuple[Rectangle, ...]
    fallback_text: str = ""
    preview_scale: float = 1.2
    reference_page_size: tuple[float, float] | None = None


@dataclass(frozen=True)
class PaintOperation:
    """White cover plus optional text for one rectangle on one page."""

    rectangle_id: str
    cover: PdfBox
    text: str
    text_origin: tuple[float, float]
    font_size: float
    color: RGB


@dataclass(frozen=True)
class CompositionResult:
    data: bytes = field(repr=False)
    filename: str
    page_count: int
    pages_painted: int
