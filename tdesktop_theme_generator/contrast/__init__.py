from .optimizer import ContrastOptimizer, contrast_ratio, relative_luminance
from .wcag import TEXT_PAIRS, WCAG_CONTRAST_RATIOS, ColorPair, ContrastResult

__all__ = [
    "ColorPair",
    "ContrastOptimizer",
    "ContrastResult",
    "TEXT_PAIRS",
    "WCAG_CONTRAST_RATIOS",
    "contrast_ratio",
    "relative_luminance",
]
