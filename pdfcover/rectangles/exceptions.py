class RectangleError(Exception):
    """Base exception for rectangle model errors."""


class MalformedColorError(RectangleError):
    """Raised when a color string is not a 6-digit hex value."""
