from typing import Any

import pytest

from pdfcover.manifest import ManifestValidationError, validate_and_build
from pdfcover.rectangles.models import PixelBounds, StyleOptions


def _valid_manifest() -> dict[str, Any]:
    return {
        "documents": ["a.pdf", "sub/b.pdf"],
        "fallback_text": "REDACTED",
        "rectangles": [
            {"x": 10, "y": 20, "w": 100, "h": 30, "padding": 2, "font_size": 14, "text": "ACME"},
            {"x": 0, "y": 0, "w": 5, "h": 5},
        ],
    }


class TestValidManifest:
    def test_builds_documents_and_fallback(self) -> None:
        manifest = validate_and_build(_valid_manifest())
        assert manifest.documents == ["a.pdf", "sub/b.pdf"]
        assert manifest.fallback_text == "REDACTED"
        assert manifest.reference_page_size is None

    def test_builds_rectangle_geometry_and_text(self) -> None:
        first = validate_and_build(_valid_manifest()).rectangles[0]
        assert first.bounds == PixelBounds(x=10, y=20, w=100, h=30)
        assert first.text == "ACME"
        assert first.style.padding == 2
        assert first.style.font_size == 14

    def test_missing_style_keys_use_defaults(self) -> None:
        default = StyleOptions(padding=4, radius=3, font_size=11, color="#123456")
        second = validate_and_build(_valid_manifest(), default_style=default).rectangles[1]
        assert second.style == default
        assert second.text == ""

    def test_optional_keys_may_be_omitted(self) -> None:
        manifest = validate_and_build({"documents": ["a.pdf"], "rectangles": []})
        assert manifest.fallback_text == ""
        assert manifest.rectangles == []

    def test_malformed_color_is_tolerated(self) -> None:
        data = _valid_manifest()
        data["rectangles"][0]["color"] = "notacolor"
        assert validate_and_build(data).rectangles[0].style.color == "notacolor"

    def test_reference_page_size(self) -> None:
        data = _valid_manifest()
        data["reference_page_size"] = [612, 792]
        assert validate_and_build(data).reference_page_size == (612.0, 792.0)


class TestInvalidManifest:
    def test_non_object_raises(self) -> None:
        with pytest.raises(ManifestValidationError, match="JSON object"):
            validate_and_build(["a.pdf"])

    @pytest.mark.parametrize("key", ["documents", "rectangles"])
    def test_missing_required_key_raises(self, key: str) -> None:
        data = _valid_manifest()
        del data[key]
        with pytest.raises(ManifestValidationError, match=key):
            validate_and_build(data)

    def test_empty_document_path_raises(self) -> None:
        data = _valid_manifest()
        data["documents"] = [""]
        with pytest.raises(ManifestValidationError, match=r"documents\[0\]"):
            validate_and_build(data)

    def test_negative_geometry_raises(self) -> None:
        data = _valid_manifest()
        data["rectangles"][1]["w"] = -5
        with pytest.raises(ManifestValidationError, match=r"rectangles\[1\]\.w"):
            validate_and_build(data)

    def test_missing_geometry_raises(self) -> None:
        data = _valid_manifest()
        del data["rectangles"][0]["h"]
        with pytest.raises(ManifestValidationError, match="must be a number"):
            validate_and_build(data)

    def test_nan_geometry_raises(self) -> None:
        data = _valid_manifest()
        data["rectangles"][0]["w"] = float("nan")
        with pytest.raises(ManifestValidationError, match="finite"):
            validate_and_build(data)

    def test_boolean_is_not_a_number(self) -> None:
        data = _valid_manifest()
        data["rectangles"][0]["x"] = True
        with pytest.raises(ManifestValidationError, match="must be a number"):
            validate_and_build(data)

    def test_non_string_text_raises(self) -> None:
        data = _valid_manifest()
        data["rectangles"][0]["text"] = 42
        with pytest.raises(ManifestValidationError, match="text"):
            validate_and_build(data)

    def test_non_string_fallback_raises(self) -> None:
        data = _valid_manifest()
        data["fallback_text"] = 1
        with pytest.raises(ManifestValidationError, match="fallback_text"):
            validate_and_build(data)

    def test_zero_reference_size_raises(self) -> None:
        data = _valid_manifest()
        data["reference_page_size"] = [0, 792]
        with pytest.raises(ManifestValidationError, match="positive"):
            validate_and_build(data)

    def test_too_many_rectangles_raises(self) -> None:
        data = _valid_manifest()
        data["rectangles"] = [{"x": 0, "y": 0, "w": 1, "h": 1}] * 501
        with pytest.raises(ManifestValidationError, match="Too many rectangles"):
            validate_and_build(data)
