from dataclasses import dataclass, field

Box = tuple[float, float, float, float]


@dataclass(frozen=True)
class PageSummary:
    """What one page of a produced PDF looks like.

    ``boxes`` are filled rectangles as ``(x0, y0, x1, y1)`` in PDF-point
    space with a bottom-left origin.
    """

    width: float
    height: float
    text: str = ""
    boxes: list[Box] = field(default_factory=list)
