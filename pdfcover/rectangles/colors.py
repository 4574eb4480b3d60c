"""Hex color parsing for cover text."""

import re

from pdfcover.logging.logger import Log
from pdfcover.rectangles.exceptions import MalformedColorError

RGB = tuple[float, float, float]

DEFAULT_RGB: RGB = (0.1, 0.4, 0.3)

_HEX_RE = re.compile(r"#?([0-9a-f]{6})", re.IGNORECASE)


def parse_hex_color(value: object) -> RGB:
    """Parse ``#rrggbb`` (leading ``#`` optional) into normalized RGB.

    Raises:
        MalformedColorError: if value is not a string holding six hex digits.
    """
    if not isinstance(value, str):
        raise MalformedColorError(f"Color must be a string, got {type(value).__name__}")
    match = _HEX_RE.fullmatch(value)
    if match is None:
        raise MalformedColorError(f"Invalid hex color: {value!r}")
    packed = int(match.group(1), 16)
    red = (packed >> 16) & 0xFF
    green = (packed >> 8) & 0xFF
    blue = packed & 0xFF
    return (red / 255, green / 255, blue / 255)


def hex_to_rgb01(value: object) -> RGB:
    """Like :func:`parse_hex_color` but returns DEFAULT_RGB on bad input."""
    try:
        return parse_hex_color(value)
    except MalformedColorError as exc:
        Log.debug(f"Falling back to default color: {exc}")
        return DEFAULT_RGB
