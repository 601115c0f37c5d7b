"""Option records for each pipeline stage.

Every option has a documented default; out-of-range values raise ValueError at
construction time so a misconfigured stage never starts.
"""

from __future__ import annotations

from dataclasses import dataclass

THEME_MODES = ("light", "dark")
WCAG_LEVELS = ("AA", "AAA")
TEXT_SIZES = ("normal", "large")


def validate_mode(mode: str) -> str:
    if mode not in THEME_MODES:
        raise ValueError(f"mode must be one of {THEME_MODES}, got {mode!r}")
    return mode


def _require_positive(name: str, value: int) -> None:
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")


@dataclass(frozen=True)
class ExtractionOptions:
    """Configuration for dominant color extraction."""

    color_count: int = 6
    # Sample every Nth pixel when quantizing
    quality: int = 10
    # Long-edge size the image is downscaled to before quantizing
    max_size: int = 400

    def __post_init__(self) -> None:
        _require_positive("color_count", self.color_count)
        _require_positive("quality", self.quality)
        _require_positive("max_size", self.max_size)


@dataclass(frozen=True)
class ContrastOptions:
    """Configuration for the contrast optimizer."""

    level: str = "AA"
    text_size: str = "normal"
    max_iterations: int = 20
    tolerance: float = 0.01
    # None picks the direction from the background luminance
    prefer_lighten: bool | None = None

    def __post_init__(self) -> None:
        if self.level not in WCAG_LEVELS:
            raise ValueError(f"level must be one of {WCAG_LEVELS}, got {self.level!r}")
        if self.text_size not in TEXT_SIZES:
            raise ValueError(f"text_size must be one of {TEXT_SIZES}, got {self.text_size!r}")
        _require_positive("max_iterations", self.max_iterations)
        if self.tolerance < 0:
            raise ValueError(f"tolerance must be >= 0, got {self.tolerance}")


@dataclass(frozen=True)
class MapperOptions:
    """Configuration for turning a ranked palette into semantic roles."""

    # Palette colors below this vibrancy are never used as primary or accent
    min_vibrancy: float = 0.1
    default_primary: str = "40a7e3"
    default_accent: str = "5dc452"


@dataclass(frozen=True)
class BuilderOptions:
    """Configuration for the theme builder."""

    mode: str = "light"
    name: str = "Generated Theme"
    author: str = "Telegram Theme Generator"
    optimize_contrast: bool = True

    def __post_init__(self) -> None:
        validate_mode(self.mode)


@dataclass(frozen=True)
class ValidatorOptions:
    """Configuration for the theme validator."""

    # Report keys outside the catalog as info issues
    warn_unknown: bool = True
    min_score: float = 70
    check_contrast: bool = False
    check_semantic: bool = False


@dataclass(frozen=True)
class GeneratorOptions:
    """Input options of a full image-to-theme run."""

    color_count: int = 8
    quality: int = 10
    max_size: int = 400
    mode: str = "light"
    theme_name: str = "Generated Theme"
    level: str = "AA"

    def __post_init__(self) -> None:
        validate_mode(self.mode)

    def extraction(self) -> ExtractionOptions:
        return ExtractionOptions(
            color_count=self.color_count,
            quality=self.quality,
            max_size=self.max_size,
        )

    def builder(self) -> BuilderOptions:
        return BuilderOptions(mode=self.mode, name=self.theme_name)

    def contrast(self) -> ContrastOptions:
        return ContrastOptions(level=self.level)
