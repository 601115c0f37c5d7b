"""Error codes and error handling utilities for the theme generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for theme generation."""

    # Image acquisition and extraction
    IMAGE_LOAD_ERROR = "IMAGE_LOAD_ERROR"
    CANVAS_ERROR = "CANVAS_ERROR"
    COLOR_EXTRACTION_FAILED = "COLOR_EXTRACTION_FAILED"
    INSUFFICIENT_COLORS = "INSUFFICIENT_COLORS"

    # Theme generation
    THEME_GENERATION_FAILED = "THEME_GENERATION_FAILED"
    THEME_VALIDATION_FAILED = "THEME_VALIDATION_FAILED"
    CONTRAST_OPTIMIZATION_FAILED = "CONTRAST_OPTIMIZATION_FAILED"
    PALETTE_INVALID = "PALETTE_INVALID"

    UNKNOWN_ERROR = "UNKNOWN_ERROR"


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.IMAGE_LOAD_ERROR: "Unable to load the image. The file may be corrupted.",
    ErrorCode.CANVAS_ERROR: "Unable to read the image pixels.",
    ErrorCode.COLOR_EXTRACTION_FAILED: "Unable to extract colors from the image.",
    ErrorCode.INSUFFICIENT_COLORS: "The image doesn't have enough colors.",
    ErrorCode.THEME_GENERATION_FAILED: "Unable to generate the theme.",
    ErrorCode.THEME_VALIDATION_FAILED: "The generated theme did not pass validation.",
    ErrorCode.CONTRAST_OPTIMIZATION_FAILED: (
        "Some text colors could not reach the target contrast. "
        "The closest readable colors were used instead."
    ),
    ErrorCode.PALETTE_INVALID: "The palette file is missing colors or is not valid JSON.",
    ErrorCode.UNKNOWN_ERROR: "Something went wrong. Please try again.",
}

SUGGESTIONS: dict[ErrorCode, str] = {
    ErrorCode.IMAGE_LOAD_ERROR: "Try a PNG, JPEG or WebP image.",
    ErrorCode.CANVAS_ERROR: "Try re-saving the image in a common format.",
    ErrorCode.COLOR_EXTRACTION_FAILED: "Try a different image.",
    ErrorCode.INSUFFICIENT_COLORS: "Try a more colorful image.",
    ErrorCode.THEME_VALIDATION_FAILED: "Review the reported issues or try another image.",
    ErrorCode.PALETTE_INVALID: "Export a palette again or fix the listed keys.",
}


@dataclass
class ThemeGeneratorError(Exception):
    """Base exception with error code and context."""

    code: ErrorCode = ErrorCode.UNKNOWN_ERROR
    message: str = ""
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, ERROR_MESSAGES[ErrorCode.UNKNOWN_ERROR])
        if not self.suggestion:
            self.suggestion = SUGGESTIONS.get(self.code, "")

    def __str__(self) -> str:
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or display."""
        return {
            "code": self.code.name,
            "message": self.message,
            "details": self.details,
            "suggestion": self.suggestion,
        }


@dataclass
class ImageDecodeError(ThemeGeneratorError):
    """The image surface could not be decoded."""

    code: ErrorCode = ErrorCode.IMAGE_LOAD_ERROR


@dataclass
class CanvasError(ThemeGeneratorError):
    """Pixel data could not be read from a decoded surface."""

    code: ErrorCode = ErrorCode.CANVAS_ERROR


@dataclass
class ExtractionFailure(ThemeGeneratorError):
    """Neither the quantizer nor the fallback sampler produced a color."""

    code: ErrorCode = ErrorCode.COLOR_EXTRACTION_FAILED


@dataclass
class PaletteLoadError(ThemeGeneratorError):
    code: ErrorCode = ErrorCode.PALETTE_INVALID


def format_error_for_user(error: Exception) -> str:
    """Format an error for display to the user with actionable suggestions."""
    if not isinstance(error, ThemeGeneratorError):
        error = ThemeGeneratorError(
            ErrorCode.UNKNOWN_ERROR,
            details={"original": f"{type(error).__name__}: {error}"},
        )
    parts = [error.message]
    if error.suggestion and error.suggestion != error.message:
        parts.append(f"\n{error.suggestion}")
    return "".join(parts)
