"""Semantic color roles derived from an extracted palette."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from ..color import adjust_lightness, normalize_hex
from ..config import MapperOptions, validate_mode

# Structural colors never come from the image, so every theme stays legible
# whatever the source picture looks like.
STRUCTURAL_COLORS = {
    "light": {
        "background": "ffffff",
        "background_secondary": "f5f5f5",
        "background_tertiary": "eeeeee",
        "text_primary": "000000",
        "text_secondary": "707070",
        "text_muted": "a0a0a0",
        "text_on_primary": "ffffff",
    },
    "dark": {
        "background": "17212b",
        "background_secondary": "232e3c",
        "background_tertiary": "2b3945",
        "text_primary": "ffffff",
        "text_secondary": "8b9aab",
        "text_muted": "6c7883",
        "text_on_primary": "ffffff",
    },
}

ONLINE = "4fae4e"
OFFLINE = "8b9aab"

# Lightness shifts (HSL percent) for primary variants, per mode
PRIMARY_VARIANT_SHIFT = {"light": 20, "dark": 10}
ACCENT_LIGHT_SHIFT = 15


@dataclass(frozen=True)
class SemanticThemeColors:
    """Abstract color roles, independent of any theme property name."""

    primary: str
    primary_light: str
    primary_dark: str
    accent: str
    accent_light: str
    background: str
    background_secondary: str
    background_tertiary: str
    text_primary: str
    text_secondary: str
    text_muted: str
    text_on_primary: str
    online: str
    offline: str

    def to_dict(self):
        return asdict(self)

    @classmethod
    def from_dict(cls, data):
        return cls(**{name: normalize_hex(data[name]) for name in ROLE_NAMES})


ROLE_NAMES = tuple(SemanticThemeColors.__dataclass_fields__)


def map_colors(colors, mode="light", options=None):
    """Turn a vibrancy-ranked palette into semantic roles for ``mode``.

    Primary and accent are the two most vibrant palette colors that clear
    ``options.min_vibrancy``; fixed defaults fill in when the palette has too
    few usable colors. Only primary, accent and their variants depend on the
    image.
    """
    validate_mode(mode)
    options = options or MapperOptions()

    ranked = sorted(colors, key=lambda c: c.vibrancy, reverse=True)
    usable = [c.hex for c in ranked if c.vibrancy >= options.min_vibrancy]

    primary = usable[0] if usable else normalize_hex(options.default_primary)
    accent = usable[1] if len(usable) > 1 else normalize_hex(options.default_accent)

    shift = PRIMARY_VARIANT_SHIFT[mode]
    return SemanticThemeColors(
        primary=primary,
        primary_light=adjust_lightness(primary, shift),
        primary_dark=adjust_lightness(primary, -shift),
        accent=accent,
        accent_light=adjust_lightness(accent, ACCENT_LIGHT_SHIFT),
        online=ONLINE,
        offline=OFFLINE,
        **STRUCTURAL_COLORS[mode],
    )


class ThemeColorMapper:
    """Holds mapper options so callers can reuse one configured mapper."""

    def __init__(self, options=None):
        self.options = options or MapperOptions()

    def map(self, colors, mode="light"):
        return map_colors(colors, mode, self.options)
