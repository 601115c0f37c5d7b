"""Tests for tdesktop_theme_generator.extraction."""

import numpy as np
import pytest
from PIL import Image

from tdesktop_theme_generator.config import ExtractionOptions
from tdesktop_theme_generator.errors import ExtractionFailure, ImageDecodeError
from tdesktop_theme_generator.extraction import ColorExtractor, ExtractedColor
from tdesktop_theme_generator.extraction.extractor import resized_dimensions

from .conftest import banded_array, solid_array


@pytest.fixture
def extractor():
    return ColorExtractor(ExtractionOptions(color_count=4))


class TestResizedDimensions:
    def test_never_upscales(self):
        assert resized_dimensions(100, 50, 400) == (100, 50)

    def test_landscape(self):
        assert resized_dimensions(800, 400, 400) == (400, 200)

    def test_portrait(self):
        assert resized_dimensions(300, 900, 300) == (100, 300)

    def test_extreme_aspect_keeps_one_pixel(self):
        assert resized_dimensions(10000, 1, 100) == (100, 1)


class TestExtract:
    def test_two_color_image(self, extractor, red_blue_image):
        colors = extractor.extract(red_blue_image)
        assert {c.hex for c in colors} == {"ff0000", "0000ff"}

    def test_sorted_by_vibrancy(self):
        image = banded_array([(128, 128, 128), (255, 0, 0), (30, 60, 90)])
        colors = ColorExtractor(ExtractionOptions(color_count=3)).extract(image)
        assert [c.hex for c in colors] == ["ff0000", "1e3c5a", "808080"]
        vibrancies = [c.vibrancy for c in colors]
        assert vibrancies == sorted(vibrancies, reverse=True)

    def test_metrics_in_range(self, extractor):
        image = banded_array([(12, 200, 40), (250, 120, 5), (5, 5, 5), (90, 90, 240)])
        for c in extractor.extract(image):
            assert 0 <= c.vibrancy <= 1
            assert 0 <= c.brightness <= 255

    def test_respects_color_count(self):
        image = banded_array([(255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 0, 255)])
        colors = ColorExtractor(ExtractionOptions(color_count=2)).extract(image)
        assert 1 <= len(colors) <= 2

    def test_per_call_options(self, extractor, red_blue_image):
        colors = extractor.extract(red_blue_image, ExtractionOptions(color_count=1))
        assert len(colors) == 1

    def test_accepts_pil_image(self, extractor):
        image = Image.new("RGB", (50, 50), (10, 200, 30))
        colors = extractor.extract(image)
        assert [c.hex for c in colors] == ["0ac81e"]

    def test_large_image_is_downscaled(self):
        image = Image.new("RGB", (1200, 600), (10, 200, 30))
        extractor = ColorExtractor(ExtractionOptions(max_size=100))
        assert len(extractor._pixel_buffer(image, 100)) == 100 * 50
        assert extractor.extract(image)[0].hex == "0ac81e"

    def test_deterministic(self, extractor):
        image = banded_array([(12, 200, 40), (250, 120, 5), (90, 90, 240)])
        assert extractor.extract(image) == extractor.extract(image)

    def test_near_white_uses_fallback(self, extractor, near_white_image):
        colors = extractor.extract(near_white_image)
        assert [c.hex for c in colors] == ["fcfcfb"]

    def test_fallback_when_quantizer_fails(self, extractor, red_blue_image, monkeypatch):
        def broken(pixels, options):
            raise RuntimeError("quantizer exploded")

        monkeypatch.setattr(extractor, "_quantize", broken)
        colors = extractor.extract(red_blue_image)
        # Best-effort: stride sampling finds some, not necessarily all, colors
        assert 1 <= len(colors) <= 4
        assert {c.hex for c in colors} <= {"ff0000", "0000ff"}

    def test_skips_transparent_pixels(self, extractor):
        image = np.concatenate(
            [solid_array((255, 0, 0, 255), (10, 20)), solid_array((0, 255, 0, 0), (10, 20))]
        )
        assert [c.hex for c in extractor.extract(image)] == ["ff0000"]

    def test_fully_transparent_fails(self, extractor, transparent_image):
        with pytest.raises(ExtractionFailure):
            extractor.extract(transparent_image)

    @pytest.mark.parametrize(
        "image",
        [np.zeros((10, 10), dtype=np.uint8), np.zeros((0, 0, 3), dtype=np.uint8), "not an image"],
    )
    def test_unreadable_surface(self, extractor, image):
        with pytest.raises(ImageDecodeError):
            extractor.extract(image)


class TestQueries:
    def test_grayscale(self, extractor):
        image = banded_array([(40, 40, 40), (200, 205, 210)])
        assert extractor.is_grayscale(image)

    def test_not_grayscale(self, extractor, red_blue_image):
        assert not extractor.is_grayscale(red_blue_image)

    def test_single_color(self, extractor, near_white_image):
        assert extractor.is_single_color(near_white_image)

    def test_similar_shades_count_as_single(self, extractor):
        image = banded_array([(200, 40, 40), (210, 45, 45)])
        assert extractor.is_single_color(image)

    def test_not_single_color(self, extractor, red_blue_image):
        assert not extractor.is_single_color(red_blue_image)

    def test_average_brightness(self, extractor):
        assert extractor.average_brightness(solid_array((100, 100, 100))) == pytest.approx(100)

    def test_average_brightness_transparent(self, extractor, transparent_image):
        assert extractor.average_brightness(transparent_image) == 0.0


def rgba_rows(*runs):
    """Flat (N, 4) pixel buffer from (rgba, count) runs."""
    return np.concatenate(
        [np.tile(np.array(rgba, dtype=np.uint8), (count, 1)) for rgba, count in runs]
    )


class TestFallbackSampler:
    # Best-effort path: only dedup, the cap and the stride are checked

    def test_near_duplicates_collapse(self, extractor):
        pixels = rgba_rows(
            ((200, 40, 40, 255), 10),
            ((210, 45, 45, 255), 10),
            ((40, 40, 200, 255), 10),
        )
        colors = extractor._sample_pixels(pixels, 4)
        reds = [c for c in colors if c in {(200, 40, 40), (210, 45, 45)}]
        assert len(reds) == 1
        assert (40, 40, 200) in colors
        assert len(colors) <= 4

    def test_caps_at_color_count(self, extractor):
        pixels = rgba_rows(
            ((255, 0, 0, 255), 5),
            ((0, 255, 0, 255), 5),
            ((0, 0, 255, 255), 5),
            ((255, 255, 0, 255), 5),
        )
        assert len(extractor._sample_pixels(pixels, 2)) == 2

    def test_skips_transparent(self, extractor):
        pixels = rgba_rows(((0, 255, 0, 0), 10), ((255, 0, 0, 255), 10))
        assert extractor._sample_pixels(pixels, 4) == [(255, 0, 0)]

    def test_stride_limits_samples(self, extractor):
        # 800 pixels with 2 colors requested gives a stride of 4 pixels
        pixels = np.tile(np.array((0, 0, 255, 255), dtype=np.uint8), (800, 1))
        pixels[::4] = (255, 0, 0, 255)
        assert extractor._sample_pixels(pixels, 2) == [(255, 0, 0)]


class TestExtractedColor:
    def test_from_rgb(self):
        c = ExtractedColor.from_rgb((255, 0, 0))
        assert c.hex == "ff0000"
        assert c.rgb == (255, 0, 0)
        assert c.vibrancy == pytest.approx(1)
        assert c.brightness == pytest.approx(0.299 * 255)
