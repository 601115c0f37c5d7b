"""Generate desktop chat themes (.tdesktop-theme) from the colors of an image."""

from .config import (
    BuilderOptions,
    ContrastOptions,
    ExtractionOptions,
    GeneratorOptions,
    MapperOptions,
    ValidatorOptions,
)
from .contrast import ContrastOptimizer, ContrastResult
from .errors import (
    CanvasError,
    ErrorCode,
    ExtractionFailure,
    ImageDecodeError,
    PaletteLoadError,
    ThemeGeneratorError,
)
from .extraction import ColorExtractor, ExtractedColor
from .imaging import load_image
from .palette import SemanticThemeColors, ThemeColorMapper, map_colors
from .pipeline import GenerationResult, ThemeGenerator, generate_theme
from .theme import GeneratedTheme, ThemeBuilder, ThemeValidator, ValidationResult

__version__ = "0.1.0"

__all__ = [
    "BuilderOptions",
    "CanvasError",
    "ColorExtractor",
    "ContrastOptimizer",
    "ContrastOptions",
    "ContrastResult",
    "ErrorCode",
    "ExtractedColor",
    "ExtractionFailure",
    "ExtractionOptions",
    "GeneratedTheme",
    "GenerationResult",
    "GeneratorOptions",
    "ImageDecodeError",
    "MapperOptions",
    "PaletteLoadError",
    "SemanticThemeColors",
    "ThemeBuilder",
    "ThemeColorMapper",
    "ThemeGenerator",
    "ThemeGeneratorError",
    "ThemeValidator",
    "ValidationResult",
    "ValidatorOptions",
    "generate_theme",
    "load_image",
    "map_colors",
]
