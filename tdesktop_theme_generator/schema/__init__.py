from .defaults import DEFAULT_DARK_THEME, DEFAULT_LIGHT_THEME, default_theme
from .properties import (
    KNOWN_KEYS,
    REQUIRED_PROPERTIES,
    THEME_PROPERTIES,
    ThemeCategory,
    ThemeProperty,
    get_property,
    properties_by_category,
)

__all__ = [
    "DEFAULT_DARK_THEME",
    "DEFAULT_LIGHT_THEME",
    "KNOWN_KEYS",
    "REQUIRED_PROPERTIES",
    "THEME_PROPERTIES",
    "ThemeCategory",
    "ThemeProperty",
    "default_theme",
    "get_property",
    "properties_by_category",
]
