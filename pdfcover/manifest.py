"""Validates a JSON job manifest and builds the session inputs it describes."""

import math
from dataclasses import dataclass, field, replace
from typing import Any

from pdfcover.rectangles.models import PixelBounds, StyleOptions

_MAX_RECTANGLES = 500
_STYLE_FIELDS = ("padding", "radius", "font_size", "color")


class ManifestValidationError(Exception):
    """Raised when a manifest does not have the expected structure."""


@dataclass(frozen=True)
class ManifestRectangle:
    bounds: PixelBounds
    style: StyleOptions
    text: str = ""


@dataclass(frozen=True)
class Manifest:
    documents: list[str]
    rectangles: list[ManifestRectangle] = field(default_factory=list)
    fallback_text: str = ""
    reference_page_size: tuple[float, float] | None = None


def validate_and_build(
    data: Any,
    default_style: StyleOptions | None = None,
) -> Manifest:
    """Validate raw parsed JSON and build a Manifest.

    Style keys missing from a rectangle take their value from ``default_style``.

    Raises:
        ManifestValidationError: on any validation failure.
    """
    if not isinstance(data, dict):
        raise ManifestValidationError("Manifest must be a JSON object")
    for key in ("documents", "rectangles"):
        if key not in data:
            raise ManifestValidationError(f"Missing required top-level field: {key}")
    style = default_style if default_style is not None else StyleOptions()
    return Manifest(
        documents=_build_documents(data["documents"]),
        rectangles=_build_rectangles(data["rectangles"], style),
        fallback_text=_build_fallback_text(data.get("fallback_text")),
        reference_page_size=_build_reference_size(data.get("reference_page_size")),
    )


def _build_documents(raw: Any) -> list[str]:
    if not isinstance(raw, list):
        raise ManifestValidationError("'documents' must be a list")
    for i, item in enumerate(raw):
        if not isinstance(item, str) or not item:
            raise ManifestValidationError(f"'documents[{i}]' must be a non-empty string")
    return list(raw)


def _build_rectangles(raw: Any, default_style: StyleOptions) -> list[ManifestRectangle]:
    if not isinstance(raw, list):
        raise ManifestValidationError("'rectangles' must be a list")
    if len(raw) > _MAX_RECTANGLES:
        raise ManifestValidationError(
            f"Too many rectangles: {len(raw)} (max {_MAX_RECTANGLES})"
        )
    return [_build_rectangle(item, i, default_style) for i, item in enumerate(raw)]


def _build_rectangle(raw: Any, index: int, default_style: StyleOptions) -> ManifestRectangle:
    prefix = f"rectangles[{index}]"
    if not isinstance(raw, dict):
        raise ManifestValidationError(f"'{prefix}' must be an object")
    geometry = {
        key: _require_number(raw.get(key), f"{prefix}.{key}", minimum=0.0)
        for key in ("x", "y", "w", "h")
    }
    overrides: dict[str, Any] = {}
    for key in _STYLE_FIELDS:
        if key not in raw:
            continue
        if key == "color":
            # Bad colors are tolerated here and fall back at paint time.
            overrides[key] = raw[key] if isinstance(raw[key], str) else ""
        else:
            overrides[key] = _require_number(raw[key], f"{prefix}.{key}", minimum=0.0)
    text = raw.get("text", "")
    if text is None:
        text = ""
    if not isinstance(text, str):
        raise ManifestValidationError(f"'{prefix}.text' must be a string")
    return ManifestRectangle(
        bounds=PixelBounds(**geometry),
        style=replace(default_style, **overrides),
        text=text,
    )


def _build_fallback_text(raw: Any) -> str:
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise ManifestValidationError("'fallback_text' must be a string or null")
    return raw


def _build_reference_size(raw: Any) -> tuple[float, float] | None:
    if raw is None:
        return None
    if not isinstance(raw, list) or len(raw) != 2:
        raise ManifestValidationError("'reference_page_size' must be [width, height]")
    width = _require_number(raw[0], "reference_page_size[0]", minimum=0.0, strict=True)
    height = _require_number(raw[1], "reference_page_size[1]", minimum=0.0, strict=True)
    return (width, height)


def _require_number(raw: Any, path: str, minimum: float, strict: bool = False) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ManifestValidationError(f"'{path}' must be a number")
    value = float(raw)
    if not math.isfinite(value):
        raise ManifestValidationError(f"'{path}' must be finite")
    if value < minimum or (strict and value == minimum):
        qualifier = "positive" if strict else "non-negative"
        raise ManifestValidationError(f"'{path}' must be {qualifier}")
    return value
