"""End-to-end theme generation: image -> colors -> roles -> theme."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import GeneratorOptions, ValidatorOptions
from .contrast import ContrastOptimizer
from .extraction import ColorExtractor, ExtractedColor
from .palette import SemanticThemeColors, ThemeColorMapper
from .theme import GeneratedTheme, ThemeBuilder, ThemeValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    colors: list[ExtractedColor]
    roles: SemanticThemeColors
    theme: GeneratedTheme


class ThemeGenerator:
    """Wires the pipeline stages together for one set of options.

    Stages hold no per-run state, so one generator can serve any number of
    images, including from several threads at once.
    """

    def __init__(self, options=None, validator_options=None, mapper=None):
        self.options = options or GeneratorOptions()
        self.extractor = ColorExtractor(self.options.extraction())
        self.mapper = mapper or ThemeColorMapper()
        self.builder = ThemeBuilder(
            self.options.builder(),
            optimizer=ContrastOptimizer(self.options.contrast()),
            validator=ThemeValidator(validator_options or ValidatorOptions()),
        )

    def run(self, image) -> GenerationResult:
        """Generate a theme from a decoded image (PIL image or numpy array).

        Raises:
            ImageDecodeError, CanvasError, ExtractionFailure
        """
        colors = self.extractor.extract(image)
        logger.debug("Extracted %d colors: %s", len(colors), ", ".join(c.hex for c in colors))

        roles = self.mapper.map(colors, self.options.mode)
        logger.debug("Primary %s, accent %s", roles.primary, roles.accent)

        theme = self.builder.build(roles, self.options.mode)
        logger.info(
            "Generated %s theme %r (score %d)", theme.mode, theme.name, theme.validation.score
        )
        return GenerationResult(colors=colors, roles=roles, theme=theme)

    def build_from_roles(self, roles) -> GeneratedTheme:
        return self.builder.build(roles, self.options.mode)


def generate_theme(image, options=None) -> GeneratedTheme:
    """Generate a theme from a decoded image with the given GeneratorOptions."""
    return ThemeGenerator(options).run(image).theme
