"""Tests for the end-to-end pipeline and image loading."""

import io

import pytest
from PIL import Image

from tdesktop_theme_generator import (
    ExtractionFailure,
    GeneratorOptions,
    ImageDecodeError,
    ThemeGenerator,
    generate_theme,
    load_image,
)
from tdesktop_theme_generator.extraction import ColorExtractor


def png_bytes(image):
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


class TestGenerateTheme:
    def test_generates_valid_theme(self, red_blue_image):
        theme = generate_theme(red_blue_image, GeneratorOptions(theme_name="Flag"))
        assert theme.name == "Flag"
        assert theme.valid
        assert theme.content.startswith("// Flag\n")

    def test_roles_come_from_image(self, red_blue_image):
        result = ThemeGenerator(GeneratorOptions(mode="dark")).run(red_blue_image)
        assert {result.roles.primary, result.roles.accent} == {"ff0000", "0000ff"}
        assert result.theme.mode == "dark"
        assert result.colors[0].hex == result.roles.primary

    def test_byte_identical_runs(self, red_blue_image):
        options = GeneratorOptions(mode="light")
        assert generate_theme(red_blue_image, options).content == generate_theme(
            red_blue_image, options
        ).content

    def test_near_white_image_falls_back_to_default_primary(self, near_white_image):
        options = GeneratorOptions(color_count=4)
        assert ColorExtractor(options.extraction()).is_single_color(near_white_image)

        result = ThemeGenerator(options).run(near_white_image)
        assert len(result.colors) <= 4
        assert result.roles.primary == "40a7e3"

    def test_extraction_failure_propagates(self, transparent_image):
        with pytest.raises(ExtractionFailure):
            generate_theme(transparent_image)

    def test_aaa_level_raises_targets(self, red_blue_image):
        theme = generate_theme(red_blue_image, GeneratorOptions(level="AAA"))
        assert all(r.target_ratio == 7.0 for r in theme.contrast_results.values())


class TestLoadImage:
    def test_from_bytes(self):
        image = load_image(png_bytes(Image.new("RGB", (8, 4), (1, 2, 3))))
        assert image.size == (8, 4)

    def test_from_path(self, tmp_path):
        path = tmp_path / "pic.png"
        Image.new("RGBA", (5, 5), (9, 9, 9, 255)).save(path)
        assert load_image(path).mode == "RGBA"
        assert load_image(str(path)).size == (5, 5)

    def test_garbage_bytes(self):
        with pytest.raises(ImageDecodeError) as excinfo:
            load_image(b"definitely not a png")
        assert excinfo.value.details["source"] == "<20 bytes>"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ImageDecodeError):
            load_image(tmp_path / "missing.png")
