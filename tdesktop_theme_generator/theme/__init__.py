from .builder import GeneratedTheme, ThemeBuilder, serialize_theme, theme_filename
from .validator import (
    ThemeValidator,
    ValidationCode,
    ValidationIssue,
    ValidationResult,
    ValidationRule,
    ValidationSeverity,
    ValidationSummary,
)

__all__ = [
    "GeneratedTheme",
    "ThemeBuilder",
    "ThemeValidator",
    "ValidationCode",
    "ValidationIssue",
    "ValidationResult",
    "ValidationRule",
    "ValidationSeverity",
    "ValidationSummary",
    "serialize_theme",
    "theme_filename",
]
