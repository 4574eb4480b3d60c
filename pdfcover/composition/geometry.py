"""Preview-pixel <-> PDF-point coordinate mapping.

Preview space has its origin at the top-left and is measured in canvas
pixels rendered at ``preview_scale`` pixels per point. PDF space has its
origin at the bottom-left and is measured in points.
"""

from dataclasses import dataclass

from pdfcover.rectangles.models import PixelBounds


@dataclass(frozen=True)
class PdfBox:
    """Axis-aligned box in PDF-point space (bottom-left origin)."""

    x: float
    y: float
    width: float
    height: float

    @property
    def x1(self) -> float:
        return self.x + self.width

    @property
    def y1(self) -> float:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class PageTransform:
    """Maps preview pixels onto one page of ``page_width`` x ``page_height`` points.

    ``reference_width``/``reference_height`` describe the page the preview was
    rendered from. When omitted the page itself is the reference, which makes
    both scale factors collapse to ``1 / preview_scale``.
    """

    page_width: float
    page_height: float
    preview_scale: float
    reference_width: float | None = None
    reference_height: float | None = None

    def __post_init__(self) -> None:
        if self.preview_scale <= 0:
            raise ValueError("preview_scale must be positive")

    @property
    def scale_x(self) -> float:
        reference = self.reference_width or self.page_width
        return self.page_width / (reference * self.preview_scale)

    @property
    def scale_y(self) -> float:
        reference = self.reference_height or self.page_height
        return self.page_height / (reference * self.preview_scale)

    def to_pdf(self, bounds: PixelBounds) -> PdfBox:
        return PdfBox(
            x=bounds.x * self.scale_x,
            y=self.page_height - (bounds.y + bounds.h) * self.scale_y,
            width=bounds.w * self.scale_x,
            height=bounds.h * self.scale_y,
        )

    def to_pixels(self, box: PdfBox) -> PixelBounds:
        """Inverse of :meth:`to_pdf`."""
        h = box.height / self.scale_y
        return PixelBounds(
            x=box.x / self.scale_x,
            y=(self.page_height - box.y) / self.scale_y - h,
            w=box.width / self.scale_x,
            h=h,
        )

    def cover_box(self, bounds: PixelBounds, padding: float) -> PdfBox:
        """PDF box grown by ``padding`` preview pixels on each side."""
        box = self.to_pdf(bounds)
        pad_x = padding * self.scale_x
        pad_y = padding * self.scale_y
        return PdfBox(
            x=box.x - pad_x,
            y=box.y - pad_y,
            width=box.width + 2 * pad_x,
            height=box.height + 2 * pad_y,
        )

    def text_origin(self, bounds: PixelBounds, font_size: float) -> tuple[float, float]:
        """Baseline origin for overlay text.

        The left edge sits at the box's horizontal midpoint; text width is
        not measured. Vertically the baseline is half a font size below center.
        """
        box = self.to_pdf(bounds)
        return (
            box.x + box.width / 2,
            box.y + box.height / 2 - font_size / 2,
        )
