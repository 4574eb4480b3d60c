import math
import uuid
from collections.abc import Iterator
from dataclasses import replace

from pdfcover.logging.logger import Log
from pdfcover.rectangles.models import PixelBounds, Rectangle, StyleOptions


def _validate(bounds: PixelBounds, style: StyleOptions) -> None:
    for field_name in ("x", "y", "w", "h"):
        value = getattr(bounds, field_name)
        if not math.isfinite(value):
            raise ValueError(f"Rectangle '{field_name}' must be finite")
        if value < 0:
            raise ValueError(f"Rectangle '{field_name}' must be non-negative")
    for field_name in ("padding", "radius", "font_size"):
        if not math.isfinite(getattr(style, field_name)):
            raise ValueError(f"Rectangle {field_name} must be finite")
    if style.padding < 0:
        raise ValueError("Rectangle padding must be non-negative")
    if style.font_size <= 0:
        raise ValueError("Rectangle font_size must be positive")


class RectangleModel:
    """Ordered, in-memory list of cover rectangles in preview-pixel space."""

    def __init__(self, default_style: StyleOptions | None = None) -> None:
        self._default_style = default_style if default_style is not None else StyleOptions()
        self._rectangles: list[Rectangle] = []

    @property
    def default_style(self) -> StyleOptions:
        return self._default_style

    def add_rectangle(
        self,
        bounds: PixelBounds,
        style: StyleOptions | None = None,
    ) -> Rectangle:
        """Append a new rectangle with a fresh id and empty text.

        Raises:
            ValueError: on negative geometry or padding, or non-positive font size.
        """
        style = self._with_font_fallback(style if style is not None else self._default_style)
        _validate(bounds, style)
        rectangle = Rectangle(
            id=str(uuid.uuid4()),
            x=bounds.x,
            y=bounds.y,
            w=bounds.w,
            h=bounds.h,
            padding=style.padding,
            radius=style.radius,
            font_size=style.font_size,
            color=style.color,
        )
        self._rectangles.append(rectangle)
        return rectangle

    def update_rectangle_style(self, rectangle_id: str, style: StyleOptions) -> None:
        """Replace padding/radius/font size/color in place. Unknown ids are ignored."""
        rectangle = self.get(rectangle_id)
        if rectangle is None:
            Log.debug(f"Ignoring style update for unknown rectangle {rectangle_id}")
            return
        style = self._with_font_fallback(style)
        _validate(rectangle.bounds, style)
        rectangle.padding = style.padding
        rectangle.radius = style.radius
        rectangle.font_size = style.font_size
        rectangle.color = style.color

    def set_rectangle_text(self, rectangle_id: str, text: str) -> None:
        rectangle = self.get(rectangle_id)
        if rectangle is None:
            Log.debug(f"Ignoring text update for unknown rectangle {rectangle_id}")
            return
        rectangle.text = text

    def clear_all(self) -> None:
        self._rectangles.clear()

    def get(self, rectangle_id: str) -> Rectangle | None:
        return next((r for r in self._rectangles if r.id == rectangle_id), None)

    def snapshot(self) -> tuple[Rectangle, ...]:
        """Detached copies, safe to hand to a composition job."""
        return tuple(replace(r) for r in self._rectangles)

    def __len__(self) -> int:
        return len(self._rectangles)

    def __iter__(self) -> Iterator[Rectangle]:
        return iter(list(self._rectangles))

    def _with_font_fallback(self, style: StyleOptions) -> StyleOptions:
        # A missing/zero font size behaves like an empty control: use the default.
        if not style.font_size:
            return replace(style, font_size=self._default_style.font_size)
        return style
