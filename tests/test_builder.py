"""Tests for tdesktop_theme_generator.theme.builder."""

import dataclasses
import re

import pytest

from tdesktop_theme_generator.color import darken, lighten
from tdesktop_theme_generator.config import BuilderOptions, ContrastOptions
from tdesktop_theme_generator.contrast import ContrastOptimizer, contrast_ratio
from tdesktop_theme_generator.errors import ErrorCode
from tdesktop_theme_generator.palette import map_colors
from tdesktop_theme_generator.schema import KNOWN_KEYS
from tdesktop_theme_generator.theme import ThemeBuilder, serialize_theme, theme_filename

DATA_LINE = re.compile(r"^[A-Za-z0-9]+: #[0-9a-f]{6}([0-9a-f]{2})?;$")


@pytest.fixture
def light_roles(blue_yellow_colors):
    return map_colors(blue_yellow_colors, "light")


@pytest.fixture
def dark_roles(blue_yellow_colors):
    return map_colors(blue_yellow_colors, "dark")


def build(roles, mode="light", **options):
    return ThemeBuilder(BuilderOptions(mode=mode, **options)).build(roles)


class TestSerialization:
    def test_deterministic(self, light_roles):
        assert build(light_roles).content == build(light_roles).content

    def test_header(self, dark_roles):
        theme = build(dark_roles, "dark", name="Night", author="me")
        assert theme.content.splitlines()[:3] == ["// Night", "// Generated by me", "// Mode: dark"]

    def test_data_lines_sorted_and_well_formed(self, light_roles):
        lines = build(light_roles).content.splitlines()[3:]
        assert all(DATA_LINE.match(line) for line in lines)
        keys = [line.split(":")[0] for line in lines]
        assert keys == sorted(keys)
        assert len(keys) == 320

    def test_serialize_theme(self):
        text = serialize_theme({"b": "222222", "a": "111111cc"}, "T", "A", "light")
        assert text == "// T\n// Generated by A\n// Mode: light\na: #111111cc;\nb: #222222;\n"

    def test_newlines_in_header_fields_stay_in_comments(self):
        text = serialize_theme(
            {"a": "111111"}, "Evil\nwindowBg: #000000;", "me\r\nyou", "light"
        )
        lines = text.splitlines()
        assert lines[:3] == [
            "// Evil windowBg: #000000;",
            "// Generated by me you",
            "// Mode: light",
        ]
        assert lines[3:] == ["a: #111111;"]


class TestBuild:
    @pytest.mark.parametrize("mode", ["light", "dark"])
    def test_covers_schema_and_validates(self, blue_yellow_colors, mode):
        theme = build(map_colors(blue_yellow_colors, mode), mode)
        assert set(theme.properties) == KNOWN_KEYS
        assert theme.validation.errors == []
        assert theme.valid
        assert theme.mode == mode

    def test_roles_flow_into_properties(self, light_roles):
        properties = build(light_roles).properties
        assert properties["windowBg"] == light_roles.background
        assert properties["windowBgActive"] == light_roles.primary
        assert properties["activeButtonBg"] == light_roles.primary
        assert properties["activeButtonBgOver"] == light_roles.primary_light
        assert properties["dialogsBgActive"] == light_roles.primary

    def test_alpha_variants(self, light_roles):
        properties = build(light_roles).properties
        assert properties["scrollBarBg"] == light_roles.primary + "53"
        assert properties["msgServiceBg"] == light_roles.primary + "a7"
        assert properties["msgSelectOverlay"] == light_roles.primary + "66"
        assert properties["callBg"] == "26282cf2"

    def test_selected_state_rule(self, light_roles):
        properties = build(light_roles).properties
        assert properties["msgOutBgSelected"] == darken(properties["msgOutBg"], 0.1)
        assert properties["msgInBgSelected"] == darken(properties["msgInBg"], 0.1)

    def test_outgoing_bubble_inverts_with_mode(self, light_roles, dark_roles):
        light = build(light_roles).properties
        dark = build(dark_roles, "dark").properties
        assert light["msgOutBg"] == lighten(light_roles.primary, 0.85)
        assert dark["msgOutBg"] == dark_roles.primary_dark
        assert light["msgInBg"] == light_roles.background
        assert dark["msgInBg"] == darken(dark_roles.background, 0.1)

    def test_error_color_per_mode(self, light_roles, dark_roles):
        assert build(light_roles).properties["boxTextFgError"] == "dd4b39"
        assert build(dark_roles, "dark").properties["boxTextFgError"] == "e48383"

    def test_mode_argument_overrides_options(self, dark_roles):
        theme = ThemeBuilder().build(dark_roles, "dark")
        assert theme.mode == "dark"
        assert "// Mode: dark" in theme.content

    def test_rejects_unknown_mode(self, light_roles):
        with pytest.raises(ValueError):
            ThemeBuilder().build(light_roles, "sepia")

    def test_custom_defaults(self, light_roles):
        theme = ThemeBuilder().build(light_roles, defaults={"windowBg": "#ABCDEF", "extraFg": "#123"})
        assert theme.properties["windowBg"] == light_roles.background
        assert theme.properties["extraFg"] == "112233"

    def test_properties_read_only(self, light_roles):
        theme = build(light_roles)
        with pytest.raises(TypeError):
            theme.properties["windowBg"] = "000000"


class TestContrastPass:
    def test_foreground_repaired(self, light_roles):
        # Yellow accent on white is unreadable until the pass darkens it
        assert light_roles.accent == "ffff00"
        theme = build(light_roles)
        properties = theme.properties
        assert properties["lightButtonBg"] == "ffffff"
        assert properties["lightButtonFg"] != "ffff00"
        assert contrast_ratio(properties["lightButtonFg"], properties["lightButtonBg"]) >= 4.49
        assert theme.contrast_results["lightButtonFg"].was_adjusted

    def test_only_adjusted_foregrounds_change(self, light_roles):
        unoptimized = build(light_roles, optimize_contrast=False).properties
        theme = build(light_roles)
        for key, value in theme.properties.items():
            result = theme.contrast_results.get(key)
            if result is not None and result.was_adjusted:
                assert value == result.adjusted_foreground
            else:
                assert value == unoptimized[key]

    def test_disabled(self, light_roles):
        theme = build(light_roles, optimize_contrast=False)
        assert theme.properties["lightButtonFg"] == "ffff00"
        assert dict(theme.contrast_results) == {}

    def test_unmet_targets_become_warnings(self):
        roles = map_colors([], "light")
        roles = dataclasses.replace(roles, primary="ffff00")
        builder = ThemeBuilder(optimizer=ContrastOptimizer(ContrastOptions(prefer_lighten=True)))
        theme = builder.build(roles)
        assert "windowFgActive" in theme.unmet_contrast()
        codes = [w.code for w in theme.warnings()]
        assert ErrorCode.CONTRAST_OPTIMIZATION_FAILED in codes


class TestFilename:
    def test_slug(self):
        builder = ThemeBuilder(BuilderOptions(name="My Cool Theme!"))
        assert builder.filename() == "my-cool-theme.tdesktop-theme"

    def test_theme_filename(self, light_roles):
        assert build(light_roles, name="  Ocean -- Blue ").filename == "ocean-blue.tdesktop-theme"

    def test_module_helper(self):
        assert theme_filename("Generated Theme") == "generated-theme.tdesktop-theme"
