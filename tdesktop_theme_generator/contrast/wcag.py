"""WCAG 2.1 contrast requirements.

https://www.w3.org/WAI/WCAG21/Understanding/contrast-minimum.html
"""

from dataclasses import dataclass

# Minimum contrast ratios per conformance level and text size.
# Large text is 18pt+, or 14pt+ bold.
WCAG_CONTRAST_RATIOS = {
    "AA": {"normal": 4.5, "large": 3.0},
    "AAA": {"normal": 7.0, "large": 4.5},
}

AA_NORMAL = 4.5
AA_LARGE = 3.0
AAA_NORMAL = 7.0
AAA_LARGE = 4.5
MAX_CONTRAST = 21.0
MIN_CONTRAST = 1.0


@dataclass(frozen=True)
class ColorPair:
    """Theme keys of a text color and the surface it is drawn on."""

    foreground: str
    background: str
    name: str = ""


# Text/background pairs that must stay readable in every generated theme
TEXT_PAIRS = (
    ColorPair("windowFg", "windowBg", "Window text"),
    ColorPair("windowFgActive", "windowBgActive", "Active window text"),
    ColorPair("windowSubTextFg", "windowBg", "Subtitle text"),
    ColorPair("boxTextFg", "boxBg", "Dialog box text"),
    ColorPair("historyTextInFg", "msgInBg", "Incoming message text"),
    ColorPair("historyTextOutFg", "msgOutBg", "Outgoing message text"),
    ColorPair("dialogsNameFg", "dialogsBg", "Dialog name"),
    ColorPair("dialogsTextFg", "dialogsBg", "Dialog text"),
    ColorPair("activeButtonFg", "activeButtonBg", "Active button text"),
    ColorPair("lightButtonFg", "lightButtonBg", "Light button text"),
)


@dataclass(frozen=True)
class ContrastResult:
    """Outcome of checking, and possibly repairing, one foreground color."""

    original_foreground: str
    background: str
    adjusted_foreground: str
    original_ratio: float
    final_ratio: float
    target_ratio: float
    was_adjusted: bool
    meets_target: bool
    iterations: int
