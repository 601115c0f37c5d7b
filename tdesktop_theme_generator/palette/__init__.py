from .loader import load_palette_from_json
from .mapper import ROLE_NAMES, SemanticThemeColors, ThemeColorMapper, map_colors

__all__ = [
    "ROLE_NAMES",
    "SemanticThemeColors",
    "ThemeColorMapper",
    "load_palette_from_json",
    "map_colors",
]
