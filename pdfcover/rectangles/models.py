from dataclasses import dataclass


@dataclass(frozen=True)
class PixelBounds:
    """Axis-aligned box in preview-pixel space (top-left origin)."""

    x: float
    y: float
    w: float
    h: float

    @classmethod
    def from_drag(
        cls,
        start: tuple[float, float],
        end: tuple[float, float],
    ) -> "PixelBounds":
        """Normalize a pointer drag in any direction to a top-left box."""
        (x0, y0), (x1, y1) = start, end
        return cls(
            x=min(x0, x1),
            y=min(y0, y1),
            w=abs(x1 - x0),
            h=abs(y1 - y0),
        )


@dataclass(frozen=True)
class StyleOptions:
    """Non-geometric rectangle fields."""

    padding: float = 0.0
    radius: float = 0.0
    font_size: float = 12.0
    color: str = "#064e3b"


@dataclass
class Rectangle:
    """A user-drawn cover region, applied to every page of every document.

    ``radius`` is preview-only and never reaches the output geometry.
    An empty ``text`` means the job-level fallback text is used.
    """

    id: str
    x: float
    y: float
    w: float
    h: float
    padding: float = 0.0
    radius: float = 0.0
    font_size: float = 12.0
    color: str = "#064e3b"
    text: str = ""

    @property
    def bounds(self) -> PixelBounds:
        return PixelBounds(x=self.x, y=self.y, w=self.w, h=self.h)

    @property
    def style(self) -> StyleOptions:
        return StyleOptions(
            padding=self.padding,
            radius=self.radius,
            font_size=self.font_size,
            color=self.color,
        )
