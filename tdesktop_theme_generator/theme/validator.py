"""Structural and quality checks for a theme property map.

Validation never raises: an invalid theme is reported as a ValidationResult
with ``valid`` set to False.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable

from ..color import is_color_token
from ..config import ValidatorOptions
from ..contrast.optimizer import contrast_ratio
from ..contrast.wcag import AA_NORMAL, TEXT_PAIRS
from ..schema import REQUIRED_PROPERTIES, THEME_PROPERTIES, ThemeCategory, get_property
from ..schema import properties_by_category as _properties_by_category

logger = logging.getLogger(__name__)

ERROR_PENALTY = 10
WARNING_PENALTY = 0.5
MAX_WARNING_PENALTY = 20
HIGH_COVERAGE = 95
HIGH_COVERAGE_BONUS = 5
LOW_COVERAGE = 70
LOW_COVERAGE_PENALTY = 10

# (state key, base key) pairs that must look different from each other
STATE_PAIRS = (
    ("windowBgOver", "windowBg"),
    ("windowBgActive", "windowBg"),
    ("dialogsBgOver", "dialogsBg"),
    ("dialogsBgActive", "dialogsBg"),
    ("activeButtonBgOver", "activeButtonBg"),
    ("lightButtonBgOver", "lightButtonBg"),
)


class ValidationSeverity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ValidationCode(str, Enum):
    MISSING_REQUIRED = "MISSING_REQUIRED"
    MISSING_OPTIONAL = "MISSING_OPTIONAL"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_ALPHA = "INVALID_ALPHA"
    COLOR_CONTRAST = "COLOR_CONTRAST"
    DUPLICATE_VALUE = "DUPLICATE_VALUE"
    UNKNOWN_PROPERTY = "UNKNOWN_PROPERTY"
    SEMANTIC_MISMATCH = "SEMANTIC_MISMATCH"
    RULE_FAILED = "RULE_FAILED"


@dataclass(frozen=True)
class ValidationIssue:
    severity: ValidationSeverity
    property: str
    message: str
    code: ValidationCode
    suggestion: str | None = None

    def __str__(self):
        return f"{self.message} ({self.property})" if self.property else self.message


@dataclass(frozen=True)
class ValidationRule:
    """A named custom check; ``validate`` maps a property map to issues."""

    name: str
    validate: Callable[[dict], list]
    description: str = ""


@dataclass(frozen=True)
class ValidationSummary:
    total_properties: int
    present_properties: int
    missing_required: int
    missing_optional: int
    invalid_formats: int
    # Percentage of known keys present
    coverage: float
    category_coverage: dict[str, float]


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    score: int
    errors: list[ValidationIssue]
    warnings: list[ValidationIssue]
    info: list[ValidationIssue]
    summary: ValidationSummary
    issues: list[ValidationIssue] = field(default_factory=list)


def _checked_issue(issue):
    # Malformed rule output counts as a failure of that rule
    if not isinstance(issue, ValidationIssue):
        raise TypeError(f"expected ValidationIssue, got {type(issue).__name__}")
    return replace(issue, severity=ValidationSeverity(issue.severity))


class ThemeValidator:
    """Validates theme property maps and scores their quality from 0 to 100.

    Checks required keys, value format, missing optional keys and unknown keys,
    plus optional contrast and semantic checks and any registered custom rules.
    """

    def __init__(self, options=None, rules=()):
        self.options = options or ValidatorOptions()
        self._rules = {}
        for rule in rules:
            self.add_rule(rule)

    @property
    def rules(self):
        return list(self._rules.values())

    def add_rule(self, rule):
        """Register ``rule``; a rule with the same name is replaced."""
        self._rules[rule.name] = rule

    def remove_rule(self, name):
        self._rules.pop(name, None)

    def validate(self, properties) -> ValidationResult:
        properties = dict(properties or {})
        errors = []
        warnings = []
        info = []

        errors.extend(self._check_required(properties))
        errors.extend(self._check_formats(properties))
        warnings.extend(self._check_optional(properties))

        if self.options.warn_unknown:
            info.extend(self._check_unknown(properties))
        if self.options.check_contrast:
            warnings.extend(self._check_contrast(properties))
        if self.options.check_semantic:
            warnings.extend(self._check_semantic(properties))

        buckets = {
            ValidationSeverity.ERROR: errors,
            ValidationSeverity.WARNING: warnings,
            ValidationSeverity.INFO: info,
        }
        for issue in self._run_rules(properties):
            buckets[issue.severity].append(issue)

        summary = self._summarize(properties, errors, warnings)
        score = self._score(summary, errors, warnings)
        valid = not errors and score >= self.options.min_score

        logger.debug(
            "Validated %d properties: score=%d errors=%d warnings=%d",
            len(properties),
            score,
            len(errors),
            len(warnings),
        )
        return ValidationResult(
            valid=valid,
            score=score,
            errors=errors,
            warnings=warnings,
            info=info,
            summary=summary,
            issues=errors + warnings + info,
        )

    def property_definition(self, key):
        return get_property(key)

    def is_required(self, key):
        return key in REQUIRED_PROPERTIES

    def properties_by_category(self, category):
        return _properties_by_category(category)

    def to_simple_result(self, result):
        """Flatten a result into plain message lists."""
        return {
            "valid": result.valid,
            "errors": [issue.message for issue in result.errors],
            "warnings": [issue.message for issue in result.warnings],
            "missing_properties": [
                issue.property
                for issue in result.errors
                if issue.code is ValidationCode.MISSING_REQUIRED
            ],
        }

    def _check_required(self, properties):
        return [
            ValidationIssue(
                ValidationSeverity.ERROR,
                key,
                f"Missing required property: {key}",
                ValidationCode.MISSING_REQUIRED,
                suggestion=f"Add the property: {key}: #RRGGBB;",
            )
            for key in REQUIRED_PROPERTIES
            if not properties.get(key)
        ]

    def _check_formats(self, properties):
        return [
            ValidationIssue(
                ValidationSeverity.ERROR,
                key,
                f"Invalid color format for {key}: {value!r}",
                ValidationCode.INVALID_FORMAT,
                suggestion="Use format RRGGBB or RRGGBBAA (hex without #)",
            )
            for key, value in properties.items()
            if not is_color_token(value)
        ]

    def _check_optional(self, properties):
        return [
            ValidationIssue(
                ValidationSeverity.WARNING,
                prop.key,
                f"Missing optional property: {prop.key} ({prop.description})",
                ValidationCode.MISSING_OPTIONAL,
            )
            for prop in THEME_PROPERTIES
            if not prop.required and not properties.get(prop.key)
        ]

    def _check_unknown(self, properties):
        return [
            ValidationIssue(
                ValidationSeverity.INFO,
                key,
                f"Unknown property: {key}",
                ValidationCode.UNKNOWN_PROPERTY,
                suggestion="This property may not be recognized by the desktop client",
            )
            for key in properties
            if get_property(key) is None
        ]

    def _check_contrast(self, properties):
        issues = []
        for pair in TEXT_PAIRS:
            fg = properties.get(pair.foreground)
            bg = properties.get(pair.background)
            if not (is_color_token(fg) and is_color_token(bg)):
                continue
            ratio = contrast_ratio(fg, bg)
            if ratio < AA_NORMAL:
                issues.append(
                    ValidationIssue(
                        ValidationSeverity.WARNING,
                        pair.foreground,
                        f"Low contrast for {pair.name.lower()}: "
                        f"{ratio:.2f}:1 against {pair.background}",
                        ValidationCode.COLOR_CONTRAST,
                        suggestion=f"Aim for at least {AA_NORMAL}:1",
                    )
                )
        return issues

    def _check_semantic(self, properties):
        issues = []
        for state_key, base_key in STATE_PAIRS:
            state = properties.get(state_key)
            if state and state == properties.get(base_key):
                issues.append(
                    ValidationIssue(
                        ValidationSeverity.WARNING,
                        state_key,
                        f"{state_key} is identical to {base_key}",
                        ValidationCode.SEMANTIC_MISMATCH,
                        suggestion="Hover and active states should be visually distinct",
                    )
                )

        error_color = properties.get("boxTextFgError")
        if error_color and error_color == properties.get("boxTextFgGood"):
            issues.append(
                ValidationIssue(
                    ValidationSeverity.WARNING,
                    "boxTextFgError",
                    "Error and success colors are identical",
                    ValidationCode.SEMANTIC_MISMATCH,
                    suggestion="Use distinct colors for errors and confirmations",
                )
            )
        return issues

    def _run_rules(self, properties):
        issues = []
        for rule in list(self._rules.values()):
            try:
                found = [_checked_issue(issue) for issue in rule.validate(dict(properties))]
            except Exception as exc:
                logger.warning("Validation rule %r failed: %s", rule.name, exc)
                issues.append(
                    ValidationIssue(
                        ValidationSeverity.ERROR,
                        "",
                        f"Validation rule {rule.name!r} failed: {exc}",
                        ValidationCode.RULE_FAILED,
                    )
                )
                continue
            issues.extend(found)
        return issues

    def _summarize(self, properties, errors, warnings):
        total = len(THEME_PROPERTIES)
        present = sum(1 for prop in THEME_PROPERTIES if properties.get(prop.key))

        category_coverage = {}
        for category in ThemeCategory:
            props = _properties_by_category(category)
            if props:
                found = sum(1 for prop in props if properties.get(prop.key))
                category_coverage[category.value] = found / len(props) * 100
            else:
                category_coverage[category.value] = 100.0

        def count(issues, code):
            return sum(1 for issue in issues if issue.code is code)

        return ValidationSummary(
            total_properties=total,
            present_properties=present,
            missing_required=count(errors, ValidationCode.MISSING_REQUIRED),
            missing_optional=count(warnings, ValidationCode.MISSING_OPTIONAL),
            invalid_formats=count(errors, ValidationCode.INVALID_FORMAT),
            coverage=present / total * 100,
            category_coverage=category_coverage,
        )

    def _score(self, summary, errors, warnings):
        score = 100.0
        score -= len(errors) * ERROR_PENALTY
        score -= min(len(warnings) * WARNING_PENALTY, MAX_WARNING_PENALTY)

        if summary.coverage >= HIGH_COVERAGE:
            score += HIGH_COVERAGE_BONUS
        elif summary.coverage < LOW_COVERAGE:
            score -= LOW_COVERAGE_PENALTY

        return int(max(0, min(100, math.floor(score + 0.5))))
