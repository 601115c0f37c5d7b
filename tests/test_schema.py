"""Tests for tdesktop_theme_generator.schema."""

import pytest

from tdesktop_theme_generator.color import is_color_token
from tdesktop_theme_generator.schema import (
    DEFAULT_DARK_THEME,
    DEFAULT_LIGHT_THEME,
    KNOWN_KEYS,
    REQUIRED_PROPERTIES,
    THEME_PROPERTIES,
    ThemeCategory,
    default_theme,
    get_property,
    properties_by_category,
)


class TestCatalog:
    def test_keys_unique(self):
        keys = [prop.key for prop in THEME_PROPERTIES]
        assert len(keys) == len(set(keys)) == 320

    def test_required_subset(self):
        assert len(REQUIRED_PROPERTIES) == 16
        assert set(REQUIRED_PROPERTIES) <= KNOWN_KEYS
        assert get_property("windowBg").required
        assert not get_property("windowBgRipple").required

    def test_every_property_has_category_and_description(self):
        for prop in THEME_PROPERTIES:
            assert isinstance(prop.category, ThemeCategory)
            assert prop.description

    def test_unknown_key(self):
        assert get_property("notAThing") is None

    def test_by_category(self):
        window = properties_by_category("window")
        assert window
        assert all(prop.category is ThemeCategory.WINDOW for prop in window)
        assert properties_by_category(ThemeCategory.WINDOW) == window

    def test_categories_partition_catalog(self):
        total = sum(len(properties_by_category(c)) for c in ThemeCategory)
        assert total == len(THEME_PROPERTIES)

    def test_unknown_category(self):
        with pytest.raises(ValueError):
            properties_by_category("kitchen")


class TestDefaults:
    @pytest.mark.parametrize("table", [DEFAULT_LIGHT_THEME, DEFAULT_DARK_THEME])
    def test_cover_catalog(self, table):
        assert set(table) == KNOWN_KEYS

    @pytest.mark.parametrize("table", [DEFAULT_LIGHT_THEME, DEFAULT_DARK_THEME])
    def test_values_are_tokens(self, table):
        for key, value in table.items():
            assert is_color_token(value), key
            assert value == value.lower()

    def test_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_LIGHT_THEME["windowBg"] = "000000"

    def test_default_theme_is_a_copy(self):
        original = DEFAULT_LIGHT_THEME["windowBg"]
        theme = default_theme("light")
        theme["windowBg"] = "123456"
        assert DEFAULT_LIGHT_THEME["windowBg"] == original
        assert default_theme("light")["windowBg"] == original

    def test_modes_differ(self):
        assert default_theme("dark")["windowBg"] != default_theme("light")["windowBg"]

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            default_theme("sepia")
