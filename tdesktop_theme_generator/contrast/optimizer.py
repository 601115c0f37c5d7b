"""Contrast ratio calculation and hue-preserving text color repair."""

from __future__ import annotations

import logging

from .. import color
from ..config import ContrastOptions
from .wcag import WCAG_CONTRAST_RATIOS, ContrastResult

logger = logging.getLogger(__name__)

# Binary search stops once the lightness interval is this narrow
MIN_LIGHTNESS_STEP = 0.1


def relative_luminance(hex_color):
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = color.hex_to_rgb(hex_color)
    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def contrast_ratio(foreground, background):
    """Contrast ratio of two hex colors, from 1 (identical) to 21 (black on white)."""
    lum1 = relative_luminance(foreground)
    lum2 = relative_luminance(background)
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


class ContrastOptimizer:
    """Checks text/background pairs against WCAG targets and repairs failures.

    Repairs only ever move the foreground's HSL lightness; hue and saturation
    are kept so brand colors stay recognizable.
    """

    def __init__(self, options=None):
        self.options = options or ContrastOptions()

    def contrast_ratio(self, foreground, background):
        return contrast_ratio(foreground, background)

    def relative_luminance(self, hex_color):
        return relative_luminance(hex_color)

    def target_ratio(self, level=None, text_size=None):
        level = level or self.options.level
        text_size = text_size or self.options.text_size
        return WCAG_CONTRAST_RATIOS[level][text_size]

    def meets_standard(self, foreground, background, level=None, text_size=None):
        ratio = contrast_ratio(foreground, background)
        return ratio >= self.target_ratio(level, text_size)

    def ensure_contrast(self, foreground, background, target_ratio=None):
        """Adjust ``foreground`` until it reaches ``target_ratio`` against ``background``.

        The background never changes. If the target cannot be reached the best
        color found is returned with ``meets_target`` set to False.
        """
        target = target_ratio if target_ratio is not None else self.target_ratio()
        fg = color.normalize_hex(foreground)
        bg = color.normalize_hex(background)
        original_ratio = contrast_ratio(fg, bg)

        if original_ratio >= target:
            return ContrastResult(
                original_foreground=fg,
                background=bg,
                adjusted_foreground=fg,
                original_ratio=original_ratio,
                final_ratio=original_ratio,
                target_ratio=target,
                was_adjusted=False,
                meets_target=True,
                iterations=0,
            )

        should_lighten = self.options.prefer_lighten
        if should_lighten is None:
            should_lighten = relative_luminance(bg) < 0.5

        adjusted, final_ratio, iterations = self._binary_search(
            fg, bg, target, should_lighten
        )
        if final_ratio < original_ratio:
            adjusted, final_ratio = fg, original_ratio
        meets_target = final_ratio >= target - self.options.tolerance
        if not meets_target:
            logger.debug(
                "Could not reach %.2f:1 for %s on %s, best %.2f:1",
                target,
                fg,
                bg,
                final_ratio,
            )

        return ContrastResult(
            original_foreground=fg,
            background=bg,
            adjusted_foreground=adjusted,
            original_ratio=original_ratio,
            final_ratio=final_ratio,
            target_ratio=target,
            was_adjusted=True,
            meets_target=meets_target,
            iterations=iterations,
        )

    def optimize_pairs(self, pairs, properties):
        """Check every pair whose keys are both present in ``properties``.

        Returns a dict of foreground key -> ContrastResult. ``properties`` is
        not modified.
        """
        results = {}
        for pair in pairs:
            fg = properties.get(pair.foreground)
            bg = properties.get(pair.background)
            if fg and bg:
                results[pair.foreground] = self.ensure_contrast(fg, bg)
        return results

    def adjust_lightness(self, hex_color, amount):
        return color.adjust_lightness(hex_color, amount)

    def set_lightness(self, hex_color, lightness):
        return color.set_lightness(hex_color, lightness)

    def _binary_search(self, foreground, background, target, should_lighten):
        h, s, l = color.hex_to_hsl(foreground)
        tolerance = self.options.tolerance

        if should_lighten:
            low, high = l, 100
        else:
            low, high = 0, l

        best_color = color.hsl_to_hex(h, s, l)
        best_ratio = contrast_ratio(best_color, background)
        iterations = 0

        while iterations < self.options.max_iterations and high - low > MIN_LIGHTNESS_STEP:
            mid = (low + high) / 2
            test_color = color.hsl_to_hex(h, s, mid)
            test_ratio = contrast_ratio(test_color, background)
            iterations += 1

            if test_ratio >= target - tolerance:
                best_color, best_ratio = test_color, test_ratio
                # Passing: move back toward the original lightness
                if should_lighten:
                    high = mid
                else:
                    low = mid
            elif should_lighten:
                low = mid
            else:
                high = mid

            if abs(test_ratio - target) < tolerance:
                best_color, best_ratio = test_color, test_ratio
                break

        if best_ratio < target - tolerance:
            extreme = color.hsl_to_hex(h, s, 100 if should_lighten else 0)
            extreme_ratio = contrast_ratio(extreme, background)
            if extreme_ratio > best_ratio:
                best_color, best_ratio = extreme, extreme_ratio

        return best_color, best_ratio, iterations
