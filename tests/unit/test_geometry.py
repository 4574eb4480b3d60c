import pytest

from pdfcover.composition.geometry import PageTransform, PdfBox
from pdfcover.rectangles.models import PixelBounds

LETTER = (612.0, 792.0)
A4 = (595.2756, 841.8898)


def _letter(scale: float = 1.2) -> PageTransform:
    return PageTransform(page_width=LETTER[0], page_height=LETTER[1], preview_scale=scale)


class TestScaleFactors:
    def test_preview_mode_is_inverse_of_scale(self) -> None:
        transform = _letter()
        assert transform.scale_x == pytest.approx(1 / 1.2)
        assert transform.scale_y == pytest.approx(1 / 1.2)

    def test_preview_mode_ignores_page_size(self) -> None:
        a4 = PageTransform(page_width=A4[0], page_height=A4[1], preview_scale=1.2)
        assert a4.scale_x == pytest.approx(_letter().scale_x)
        assert a4.scale_y == pytest.approx(_letter().scale_y)

    def test_reference_size_stretches_onto_other_pages(self) -> None:
        transform = PageTransform(
            page_width=A4[0],
            page_height=A4[1],
            preview_scale=1.2,
            reference_width=LETTER[0],
            reference_height=LETTER[1],
        )
        assert transform.scale_x == pytest.approx(A4[0] / (LETTER[0] * 1.2))
        assert transform.scale_y == pytest.approx(A4[1] / (LETTER[1] * 1.2))

    def test_non_positive_scale_raises(self) -> None:
        with pytest.raises(ValueError, match="preview_scale"):
            _letter(scale=0)


class TestToPdf:
    def test_flips_origin_to_bottom_left(self) -> None:
        box = _letter().to_pdf(PixelBounds(x=120, y=60, w=240, h=120))
        assert box.x == pytest.approx(100)
        assert box.y == pytest.approx(792 - 150)
        assert box.width == pytest.approx(200)
        assert box.height == pytest.approx(100)

    def test_top_left_pixel_maps_to_page_top(self) -> None:
        box = _letter().to_pdf(PixelBounds(x=0, y=0, w=0, h=0))
        assert (box.x, box.y) == pytest.approx((0, 792))

    def test_zero_size_box_is_empty(self) -> None:
        assert _letter().to_pdf(PixelBounds(x=10, y=10, w=0, h=0)).is_empty

    @pytest.mark.parametrize(
        "bounds",
        [
            PixelBounds(0, 0, 0, 0),
            PixelBounds(120, 60, 240, 120),
            PixelBounds(733.3, 12.7, 1.1, 940.5),
            PixelBounds(5.5, 900.25, 300, 0),
        ],
    )
    def test_inverse_recovers_pixels(self, bounds: PixelBounds) -> None:
        transform = PageTransform(
            page_width=A4[0],
            page_height=A4[1],
            preview_scale=1.5,
            reference_width=LETTER[0],
            reference_height=LETTER[1],
        )
        recovered = transform.to_pixels(transform.to_pdf(bounds))
        assert recovered.x == pytest.approx(bounds.x)
        assert recovered.y == pytest.approx(bounds.y)
        assert recovered.w == pytest.approx(bounds.w)
        assert recovered.h == pytest.approx(bounds.h)


class TestCoverBox:
    def test_padding_grows_each_side(self) -> None:
        cover = _letter().cover_box(PixelBounds(x=120, y=60, w=240, h=120), padding=12)
        assert cover.x == pytest.approx(90)
        assert cover.y == pytest.approx(632)
        assert cover.width == pytest.approx(220)
        assert cover.height == pytest.approx(120)
        assert cover.x1 == pytest.approx(310)
        assert cover.y1 == pytest.approx(752)

    def test_zero_padding_matches_box(self) -> None:
        transform = _letter()
        bounds = PixelBounds(x=120, y=60, w=240, h=120)
        assert transform.cover_box(bounds, padding=0) == transform.to_pdf(bounds)

    def test_zero_size_with_padding_is_not_empty(self) -> None:
        cover = _letter().cover_box(PixelBounds(x=60, y=60, w=0, h=0), padding=6)
        assert not cover.is_empty
        assert cover.width == pytest.approx(10)


class TestTextOrigin:
    def test_left_edge_at_horizontal_midpoint(self) -> None:
        origin = _letter().text_origin(PixelBounds(x=120, y=60, w=240, h=120), font_size=12)
        assert origin == pytest.approx((200, 642 + 50 - 6))

    def test_degenerate_rectangle_uses_point(self) -> None:
        origin = _letter().text_origin(PixelBounds(x=60, y=120, w=0, h=0), font_size=10)
        assert origin == pytest.approx((50, 792 - 100 - 5))


class TestPdfBox:
    def test_negative_extent_is_empty(self) -> None:
        assert PdfBox(x=0, y=0, width=-1, height=5).is_empty
