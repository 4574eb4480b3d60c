from collections.abc import Sequence

from pdfcover.composition.geometry import PageTransform
from pdfcover.composition.models import PaintOperation
from pdfcover.rectangles.colors import hex_to_rgb01
from pdfcover.rectangles.models import Rectangle


def resolve_text(rectangle: Rectangle, fallback_text: str) -> str:
    """Rectangle text if set, otherwise the job fallback (possibly empty)."""
    return rectangle.text or fallback_text


def plan_page(
    transform: PageTransform,
    rectangles: Sequence[Rectangle],
    fallback_text: str = "",
) -> list[PaintOperation]:
    """Build the cover/text operations for one page, in rectangle order."""
    operations: list[PaintOperation] = []
    for rectangle in rectangles:
        bounds = rectangle.bounds
        text = resolve_text(rectangle, fallback_text)
        operations.append(
            PaintOperation(
                rectangle_id=rectangle.id,
                cover=transform.cover_box(bounds, rectangle.padding),
                text=text,
                text_origin=transform.text_origin(bounds, rectangle.font_size),
                font_size=rectangle.font_size,
                color=hex_to_rgb01(rectangle.color),
            )
        )
    return operations
