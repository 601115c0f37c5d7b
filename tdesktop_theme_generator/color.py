"""Color helpers shared by every stage of the theme pipeline.

All hex values handled here are *color tokens*: lowercase hex digits without a
leading ``#``. Six digits for opaque colors, eight when a trailing alpha byte is
present.
"""

import colorsys
import math
import re

HEX_TOKEN_RE = re.compile(r"[0-9a-f]{6}([0-9a-f]{2})?", re.IGNORECASE)
_HEX_DIGITS_RE = re.compile(r"[0-9a-fA-F]+")


def _round(value):
    # Half-up rounding; Python's round() is banker's rounding
    return int(math.floor(value + 0.5))


def _clamp(value, low, high):
    return max(low, min(high, value))


def normalize_hex(color):
    """Normalize a hex color to 6 lowercase digits.

    Strips a leading ``#``, expands 3-digit shorthand and drops the alpha pair
    of an 8-digit value.
    """
    normalized = color.strip().lstrip("#").lower()
    if len(normalized) == 3:
        normalized = "".join(c * 2 for c in normalized)
    if len(normalized) == 8:
        normalized = normalized[:6]
    if len(normalized) != 6 or not _HEX_DIGITS_RE.fullmatch(normalized):
        raise ValueError(f"Not a hex color: {color!r}")
    return normalized


def normalize_token(color):
    """Normalize a property value, keeping an alpha byte when one is present."""
    token = color.strip().lstrip("#").lower()
    if len(token) == 8 and _HEX_DIGITS_RE.fullmatch(token):
        return token
    return normalize_hex(token)


def is_color_token(value):
    return isinstance(value, str) and HEX_TOKEN_RE.fullmatch(value) is not None


def rgb_to_hex(r, g, b):
    r, g, b = (_clamp(_round(c), 0, 255) for c in (r, g, b))
    return f"{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color):
    hex_color = normalize_hex(hex_color)
    return tuple(int(hex_color[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hsl(r, g, b):
    """Convert 8-bit RGB to HSL rounded to whole degrees and percents."""
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    return (_round(h * 360) % 360, _round(s * 100), _round(l * 100))


def hsl_to_rgb(h, s, l):
    h = (h % 360) / 360
    s = _clamp(s, 0, 100) / 100
    l = _clamp(l, 0, 100) / 100
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return (_round(r * 255), _round(g * 255), _round(b * 255))


def hex_to_hsl(hex_color):
    return rgb_to_hsl(*hex_to_rgb(hex_color))


def hsl_to_hex(h, s, l):
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def adjust_lightness(hex_color, amount):
    """Shift HSL lightness by ``amount`` percent, keeping hue and saturation."""
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(h, s, _clamp(l + amount, 0, 100))


def set_lightness(hex_color, lightness):
    h, s, _ = hex_to_hsl(hex_color)
    return hsl_to_hex(h, s, _clamp(lightness, 0, 100))


def blend_colors(color1, color2, factor):
    """Blend two colors together. factor=0 returns color1, factor=1 returns color2."""
    r1, g1, b1 = hex_to_rgb(color1)
    r2, g2, b2 = hex_to_rgb(color2)
    return rgb_to_hex(
        r1 + (r2 - r1) * factor,
        g1 + (g2 - g1) * factor,
        b1 + (b2 - b1) * factor,
    )


def lighten(hex_color, amount):
    """Mix ``amount`` (0-1) of white into the color."""
    return blend_colors(hex_color, "ffffff", amount)


def darken(hex_color, amount):
    """Mix ``amount`` (0-1) of black into the color."""
    return blend_colors(hex_color, "000000", amount)


def with_alpha(hex_color, alpha):
    """Append a 2-digit alpha suffix, replacing any alpha already present."""
    if len(alpha) != 2 or not _HEX_DIGITS_RE.fullmatch(alpha):
        raise ValueError(f"Alpha must be two hex digits: {alpha!r}")
    return normalize_hex(hex_color) + alpha.lower()


def perceived_brightness(rgb):
    """Perceptual brightness on a 0-255 scale (ITU-R BT.601 weights)."""
    r, g, b = rgb
    return 0.299 * r + 0.587 * g + 0.114 * b


def vibrancy(rgb):
    """Score saturated mid-tones high and near-black/near-white colors low.

    Returns HSL saturation multiplied by how close lightness is to 50%, in [0, 1].
    """
    r, g, b = (c / 255 for c in rgb)
    high = max(r, g, b)
    low = min(r, g, b)
    delta = high - low
    lightness = (high + low) / 2
    if delta == 0:
        return 0.0
    saturation = delta / (1 - abs(2 * lightness - 1))
    brightness_score = 1 - abs(lightness - 0.5) * 2
    return _clamp(saturation * brightness_score, 0.0, 1.0)


def color_distance(c1, c2):
    """Euclidean distance between two RGB triples."""
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(c1, c2)))
