"""Tests for tdesktop_theme_generator.contrast."""

import pytest

from tdesktop_theme_generator.color import hex_to_hsl
from tdesktop_theme_generator.config import ContrastOptions
from tdesktop_theme_generator.contrast import (
    TEXT_PAIRS,
    ColorPair,
    ContrastOptimizer,
    contrast_ratio,
    relative_luminance,
)

SAMPLE_COLORS = ["000000", "ffffff", "cccccc", "40a7e3", "5dc452", "17212b", "dd4b39", "ffff00"]


@pytest.fixture
def optimizer():
    return ContrastOptimizer()


class TestContrastRatio:
    def test_black_on_white(self):
        assert contrast_ratio("000000", "ffffff") == pytest.approx(21, abs=0.01)

    def test_identical_colors(self):
        for c in SAMPLE_COLORS:
            assert contrast_ratio(c, c) == pytest.approx(1)

    def test_symmetric(self):
        for a in SAMPLE_COLORS:
            for b in SAMPLE_COLORS:
                assert contrast_ratio(a, b) == pytest.approx(contrast_ratio(b, a))

    def test_range(self):
        for a in SAMPLE_COLORS:
            for b in SAMPLE_COLORS:
                assert 1 <= contrast_ratio(a, b) <= 21.0001

    def test_accepts_hash_and_shorthand(self):
        assert contrast_ratio("#000", "#FFFFFF") == pytest.approx(21, abs=0.01)

    def test_relative_luminance(self):
        assert relative_luminance("000000") == 0
        assert relative_luminance("ffffff") == pytest.approx(1)


class TestStandards:
    @pytest.mark.parametrize(
        "level,size,expected",
        [("AA", "normal", 4.5), ("AA", "large", 3.0), ("AAA", "normal", 7.0), ("AAA", "large", 4.5)],
    )
    def test_target_ratio(self, optimizer, level, size, expected):
        assert optimizer.target_ratio(level, size) == expected

    def test_default_target_is_aa_normal(self, optimizer):
        assert optimizer.target_ratio() == 4.5

    def test_meets_standard(self, optimizer):
        assert optimizer.meets_standard("767676", "ffffff")
        assert not optimizer.meets_standard("777777", "ffffff")
        assert optimizer.meets_standard("777777", "ffffff", "AA", "large")


class TestEnsureContrast:
    def test_compliant_pair_untouched(self, optimizer):
        result = optimizer.ensure_contrast("000000", "#FFFFFF")
        assert result.was_adjusted is False
        assert result.iterations == 0
        assert result.meets_target is True
        assert result.adjusted_foreground == "000000"
        assert result.background == "ffffff"

    def test_light_gray_on_white_is_darkened(self, optimizer):
        result = optimizer.ensure_contrast("#cccccc", "#ffffff")
        assert result.original_ratio == pytest.approx(1.6, abs=0.05)
        assert result.was_adjusted is True
        assert result.final_ratio >= 4.49
        assert result.meets_target is True
        h, s, l = hex_to_hsl(result.adjusted_foreground)
        assert (h, s) == hex_to_hsl("cccccc")[:2]
        assert l < hex_to_hsl("cccccc")[2]

    def test_brand_color_keeps_hue(self, optimizer):
        result = optimizer.ensure_contrast("40a7e3", "ffffff")
        assert result.was_adjusted is True
        assert result.final_ratio >= 4.49
        h0, s0, _ = hex_to_hsl("40a7e3")
        h1, s1, _ = hex_to_hsl(result.adjusted_foreground)
        # Only 8-bit quantization can move hue or saturation
        assert abs(h0 - h1) <= 2
        assert abs(s0 - s1) <= 2

    def test_dark_background_lightens(self, optimizer):
        result = optimizer.ensure_contrast("2b3945", "17212b")
        assert result.final_ratio >= 4.49
        assert hex_to_hsl(result.adjusted_foreground)[2] > hex_to_hsl("2b3945")[2]

    @pytest.mark.parametrize("same", ["ffffff", "000000", "808080"])
    def test_identical_colors_are_separated(self, optimizer, same):
        result = optimizer.ensure_contrast(same, same)
        assert result.was_adjusted is True
        assert result.final_ratio > 1

    def test_final_ratio_never_worse(self, optimizer):
        for fg in SAMPLE_COLORS:
            for bg in SAMPLE_COLORS:
                result = optimizer.ensure_contrast(fg, bg)
                assert result.final_ratio >= result.original_ratio

    def test_unreachable_target_is_flagged(self):
        optimizer = ContrastOptimizer(ContrastOptions(level="AAA"))
        result = optimizer.ensure_contrast("ffffff", "777777")
        assert result.was_adjusted is True
        assert result.meets_target is False
        assert result.final_ratio == pytest.approx(result.original_ratio)

    def test_forced_direction_keeps_original_when_worse(self):
        optimizer = ContrastOptimizer(ContrastOptions(prefer_lighten=True))
        result = optimizer.ensure_contrast("777777", "ffffff")
        assert result.meets_target is False
        assert result.adjusted_foreground == "777777"

    def test_explicit_target(self, optimizer):
        result = optimizer.ensure_contrast("cccccc", "ffffff", target_ratio=3.0)
        assert result.target_ratio == 3.0
        assert result.final_ratio >= 2.99

    def test_iterations_bounded(self):
        optimizer = ContrastOptimizer(ContrastOptions(max_iterations=3))
        result = optimizer.ensure_contrast("cccccc", "ffffff")
        assert result.iterations <= 3

    def test_output_is_normalized(self, optimizer):
        result = optimizer.ensure_contrast("#CCC", "#FFFFFFFF")
        assert len(result.adjusted_foreground) == 6
        assert result.adjusted_foreground == result.adjusted_foreground.lower()


class TestOptimizePairs:
    def test_only_present_pairs(self, optimizer):
        properties = {"windowFg": "cccccc", "windowBg": "ffffff", "boxTextFg": "000000"}
        results = optimizer.optimize_pairs(TEXT_PAIRS, properties)
        assert set(results) == {"windowFg"}
        assert properties["windowFg"] == "cccccc"

    def test_custom_pairs(self, optimizer):
        pairs = [ColorPair("a", "b", "Custom")]
        results = optimizer.optimize_pairs(pairs, {"a": "000000", "b": "000000"})
        assert results["a"].was_adjusted

    def test_lightness_helpers(self, optimizer):
        assert optimizer.adjust_lightness("ff0000", -50) == "000000"
        assert optimizer.set_lightness("00ff00", 100) == "ffffff"


class TestOptions:
    def test_rejects_unknown_level(self):
        with pytest.raises(ValueError):
            ContrastOptions(level="AAAA")

    def test_rejects_negative_tolerance(self):
        with pytest.raises(ValueError):
            ContrastOptions(tolerance=-1)
