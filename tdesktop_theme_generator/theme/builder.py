"""Expand semantic roles into a complete desktop theme property map."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType

from ..color import darken, lighten, normalize_hex, normalize_token, with_alpha
from ..config import BuilderOptions, validate_mode
from ..contrast import TEXT_PAIRS, ContrastOptimizer
from ..errors import ErrorCode, ThemeGeneratorError
from ..schema import default_theme
from .validator import ThemeValidator

logger = logging.getLogger(__name__)

THEME_EXTENSION = ".tdesktop-theme"

# State rules, applied the same way to every property of a kind
ACTIVE_LIGHTEN = 0.1
SELECTED_DARKEN = 0.1
RIPPLE_DARKEN = 0.2

# Alpha suffixes for translucent variants
ALPHA_SCROLL_BAR = "53"
ALPHA_SCROLL_BAR_OVER = "7a"
ALPHA_SCROLL_TRACK = "14"
ALPHA_SCROLL_TRACK_OVER = "29"
ALPHA_HISTORY_SCROLL_BAR = "7a"
ALPHA_HISTORY_SCROLL_BAR_OVER = "bc"
ALPHA_SHADOW = "29"
ALPHA_SERVICE = "a7"
ALPHA_SERVICE_SELECTED = "ab"
ALPHA_SELECT_OVERLAY = "66"
ALPHA_STICKER_OVERLAY = "7f"
ALPHA_MEDIA_DATE = "54"
ALPHA_PANEL_DELETE = "cc"
ALPHA_STICKER_PREVIEW = "eb"
ALPHA_SECONDARY_TEXT = "cc"
ALPHA_CALL_BG = "f2"
ALPHA_ANSWER_OUTER = "66"

CALL_SURFACE = "26282c"
ERROR_COLORS = {"light": "dd4b39", "dark": "e48383"}


def theme_filename(name):
    """Slugify ``name`` into a theme file name."""
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return f"{slug}{THEME_EXTENSION}"


def _row_states(key, base, active):
    # Plain, hover and selected-row variants of a list item color
    return {key: base, f"{key}Over": base, f"{key}Active": active}


def _header_field(value):
    # Keep each header field on its own comment line
    return " ".join(str(value).splitlines())


def serialize_theme(properties, name, author, mode):
    """Render the theme file text: three comment lines, then sorted properties."""
    lines = [
        f"// {_header_field(name)}",
        f"// Generated by {_header_field(author)}",
        f"// Mode: {_header_field(mode)}",
    ]
    lines.extend(f"{key}: #{properties[key]};" for key in sorted(properties))
    return "\n".join(lines) + "\n"


@dataclass(frozen=True)
class GeneratedTheme:
    """A finished theme; the text in ``content`` is what gets saved."""

    name: str
    mode: str
    content: str
    properties: MappingProxyType
    validation: object
    contrast_results: MappingProxyType = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def filename(self):
        return theme_filename(self.name)

    @property
    def valid(self):
        return self.validation.valid

    def unmet_contrast(self):
        """Text keys whose contrast target could not be reached."""
        return sorted(
            key for key, result in self.contrast_results.items() if not result.meets_target
        )

    def warnings(self):
        """Non-fatal problems of this theme, as (unraised) errors."""
        problems = []
        unmet = self.unmet_contrast()
        if unmet:
            problems.append(
                ThemeGeneratorError(
                    ErrorCode.CONTRAST_OPTIMIZATION_FAILED,
                    details={"properties": ", ".join(unmet)},
                )
            )
        if not self.validation.valid:
            problems.append(
                ThemeGeneratorError(
                    ErrorCode.THEME_VALIDATION_FAILED,
                    details={
                        "score": self.validation.score,
                        "errors": len(self.validation.errors),
                    },
                )
            )
        return problems


class ThemeBuilder:
    """Maps semantic colors onto every theme property the client knows.

    The mode's default theme is the starting point, so every property always
    has a value; each category method then overwrites the keys it derives from
    the roles. An optional contrast pass repairs text colors afterwards.
    """

    def __init__(self, options=None, optimizer=None, validator=None):
        self.options = options or BuilderOptions()
        self.optimizer = optimizer or ContrastOptimizer()
        self.validator = validator or ThemeValidator()

    @property
    def mode(self):
        return self.options.mode

    @property
    def name(self):
        return self.options.name

    def filename(self):
        return theme_filename(self.options.name)

    def build(self, roles, mode=None, defaults=None) -> GeneratedTheme:
        """Build a complete theme from ``roles`` (SemanticThemeColors).

        Args:
            roles: Semantic color roles
            mode: "light" or "dark"; defaults to the builder's mode
            defaults: Baseline property map; defaults to the mode's default theme
        """
        mode = validate_mode(mode or self.options.mode)
        if defaults is None:
            properties = default_theme(mode)
        else:
            properties = {key: normalize_token(value) for key, value in defaults.items()}

        properties.update(self.map_roles(roles, mode))

        contrast_results = {}
        if self.options.optimize_contrast:
            contrast_results = self.optimizer.optimize_pairs(TEXT_PAIRS, properties)
            for key, result in contrast_results.items():
                if result.was_adjusted:
                    logger.debug(
                        "%s: %s -> %s (%.2f:1 -> %.2f:1)",
                        key,
                        result.original_foreground,
                        result.adjusted_foreground,
                        result.original_ratio,
                        result.final_ratio,
                    )
                    properties[key] = result.adjusted_foreground

        content = serialize_theme(properties, self.options.name, self.options.author, mode)
        validation = self.validator.validate(properties)

        theme = GeneratedTheme(
            name=self.options.name,
            mode=mode,
            content=content,
            properties=MappingProxyType(properties),
            validation=validation,
            contrast_results=MappingProxyType(contrast_results),
        )
        for problem in theme.warnings():
            logger.warning("%s: %s", theme.name, problem)
        return theme

    def map_roles(self, roles, mode):
        """Return the property values derived from ``roles`` for ``mode``."""
        c = {name: normalize_hex(value) for name, value in roles.to_dict().items()}
        properties = {}
        for mapper in (
            self._window,
            self._menu,
            self._title_bar,
            self._dialogs,
            self._history,
            self._messages,
            self._compose,
            self._panels,
            self._buttons,
            self._media,
            self._calls,
            self._intro,
            self._settings,
        ):
            properties.update(mapper(c, mode))
        return properties

    # Categories

    def _window(self, c, mode):
        return {
            "windowBg": c["background"],
            "windowFg": c["text_primary"],
            "windowBgOver": c["background_secondary"],
            "windowBgRipple": c["background_tertiary"],
            "windowFgOver": c["text_primary"],
            "windowSubTextFg": c["text_secondary"],
            "windowSubTextFgOver": c["text_secondary"],
            "windowBoldFg": c["text_primary"],
            "windowBoldFgOver": c["text_primary"],
            "windowBgActive": c["primary"],
            "windowFgActive": c["text_on_primary"],
            "windowActiveTextFg": c["accent"],
            "scrollBarBg": with_alpha(c["primary"], ALPHA_SCROLL_BAR),
            "scrollBarBgOver": with_alpha(c["primary"], ALPHA_SCROLL_BAR_OVER),
            "scrollBg": with_alpha(c["text_primary"], ALPHA_SCROLL_TRACK),
            "scrollBgOver": with_alpha(c["text_primary"], ALPHA_SCROLL_TRACK_OVER),
            "linkFg": c["accent"],
            "linkOverFg": c["accent_light"],
            "tooltipBg": c["background_secondary"],
            "tooltipFg": c["text_primary"],
            "tooltipBorderFg": c["background_tertiary"],
            "placeholderFg": c["text_muted"],
            "placeholderFgActive": c["text_secondary"],
            "checkboxFg": c["text_muted"],
            "sliderBgInactive": c["background_tertiary"],
            "sliderBgActive": c["primary"],
            "inputBorderFg": c["background_tertiary"],
        }

    def _menu(self, c, mode):
        return {
            "menuBg": c["background_secondary"],
            "menuBgOver": c["background_tertiary"],
            "menuBgRipple": c["background_tertiary"],
            "menuIconFg": c["text_muted"],
            "menuIconFgOver": c["text_secondary"],
            "menuSubmenuArrowFg": c["text_primary"],
            "menuFgDisabled": c["text_muted"],
            "menuSeparatorFg": c["background_tertiary"],
        }

    def _title_bar(self, c, mode):
        return {
            "titleBg": c["background_secondary"],
            "titleBgActive": c["background_tertiary"],
            "titleFg": c["text_muted"],
            "titleFgActive": c["text_primary"],
        }

    def _dialogs(self, c, mode):
        error = ERROR_COLORS[mode]
        primary = c["primary"]
        on_primary = c["text_on_primary"]
        properties = {
            "dialogsBg": c["background"],
            "dialogsBgOver": c["background_secondary"],
            "dialogsBgActive": primary,
            "dialogsBgRipple": c["background_tertiary"],
            "dialogsOnlineBadgeFg": c["online"],
            "dialogsForwardBg": c["primary_dark"],
            "dialogsForwardFg": on_primary,
            "searchedBarBg": c["background_tertiary"],
            "searchedBarFg": c["text_primary"],
            "dialogsArchiveFg": c["text_secondary"],
            "dialogsArchiveFgOver": c["text_secondary"],
            "dialogsArchiveBg": c["text_muted"],
            "dialogsArchiveBgOver": c["text_muted"],
        }
        # Active rows sit on primary, so their content switches to on-primary
        properties.update(_row_states("dialogsNameFg", c["text_primary"], on_primary))
        properties.update(_row_states("dialogsChatIconFg", c["accent"], on_primary))
        properties.update(_row_states("dialogsDateFg", c["text_secondary"], on_primary))
        properties.update(_row_states("dialogsTextFg", c["text_secondary"], on_primary))
        properties.update(_row_states("dialogsTextFgService", c["accent"], on_primary))
        properties.update(
            _row_states("dialogsDraftFg", error, lighten(on_primary, ACTIVE_LIGHTEN))
        )
        properties.update(_row_states("dialogsVerifiedIconBg", primary, on_primary))
        properties.update(_row_states("dialogsVerifiedIconFg", on_primary, primary))
        properties.update(_row_states("dialogsSendingIconFg", c["text_muted"], on_primary))
        properties.update(_row_states("dialogsSentIconFg", c["online"], on_primary))
        properties.update(_row_states("dialogsUnreadBg", primary, on_primary))
        properties.update(_row_states("dialogsUnreadBgMuted", c["text_muted"], on_primary))
        properties.update(_row_states("dialogsUnreadFg", on_primary, primary))
        return properties

    def _history(self, c, mode):
        return {
            "historyPeerArchiveUserpicBg": c["text_secondary"],
            "historyScrollBarBg": with_alpha(c["primary"], ALPHA_HISTORY_SCROLL_BAR),
            "historyScrollBarBgOver": with_alpha(c["primary"], ALPHA_HISTORY_SCROLL_BAR_OVER),
            "historyScrollBg": with_alpha(c["text_primary"], ALPHA_SCROLL_TRACK),
            "historyScrollBgOver": with_alpha(c["text_primary"], ALPHA_SCROLL_TRACK_OVER),
            "historyForwardChooseBg": with_alpha("000000", ALPHA_SELECT_OVERLAY),
            "historyForwardChooseFg": c["text_on_primary"],
            "historyTextInFg": c["text_primary"],
            "historyTextInFgSelected": c["text_primary"],
            "historyTextOutFg": c["text_primary"],
            "historyTextOutFgSelected": c["text_primary"],
            "historyLinkInFg": c["accent"],
            "historyLinkInFgSelected": c["accent"],
            "historyOutIconFg": c["online"],
            "historyOutIconFgSelected": c["online"],
            "historyIconFgInverted": "ffffffc8",
            "historyToDownBg": c["background"],
            "historyToDownBgOver": c["background_secondary"],
            "historyToDownBgRipple": c["background_tertiary"],
            "historyToDownFg": c["accent"],
            "historyToDownFgOver": c["accent"],
            "historyToDownShadow": "00000040",
        }

    def _messages(self, c, mode):
        dark = mode == "dark"
        # Outgoing bubbles: deep primary in dark mode, a pale tint in light mode
        out_bg = c["primary_dark"] if dark else lighten(c["primary"], 0.85)
        in_bg = darken(c["background"], 0.1) if dark else c["background"]
        out_text = c["accent_light"] if dark else c["primary_dark"]
        out_date = c["accent_light"] if dark else lighten(c["primary_dark"], 0.3)
        out_link = c["accent_light"] if dark else c["accent"]
        waveform_out_inactive = c["primary_dark"] if dark else lighten(c["primary"], 0.5)

        properties = {
            "msgOutBg": out_bg,
            "msgOutBgSelected": darken(out_bg, SELECTED_DARKEN),
            "msgOutShadow": with_alpha(c["primary_dark"], ALPHA_SHADOW),
            "msgOutShadowSelected": with_alpha(c["primary_dark"], ALPHA_SHADOW),
            "msgInBg": in_bg,
            "msgInBgSelected": darken(in_bg, SELECTED_DARKEN),
            "msgInShadow": with_alpha(c["text_muted"], ALPHA_SHADOW),
            "msgInShadowSelected": with_alpha(c["text_muted"], ALPHA_SHADOW),
            "msgServiceBg": with_alpha(c["primary"], ALPHA_SERVICE),
            "msgServiceBgSelected": with_alpha(c["primary"], ALPHA_SERVICE_SELECTED),
            "msgServiceFg": c["text_on_primary"],
            "msgSelectOverlay": with_alpha(c["primary"], ALPHA_SELECT_OVERLAY),
            "msgStickerOverlay": with_alpha(c["primary"], ALPHA_STICKER_OVERLAY),
            "msgDateImgBg": with_alpha("000000", ALPHA_MEDIA_DATE),
            "msgDateImgFg": "ffffff",
            "msgWaveformInActive": c["accent"],
            "msgWaveformInInactive": c["background_tertiary"],
            "msgWaveformOutActive": out_text,
            "msgWaveformOutInactive": waveform_out_inactive,
            "historyLinkOutFg": out_link,
            "historyLinkOutFgSelected": out_link,
        }
        for key, value in (
            ("msgOutServiceFg", out_text),
            ("msgOutDateFg", out_date),
            ("msgInServiceFg", c["accent"]),
            ("msgInDateFg", c["text_muted"]),
            ("msgInMonoFg", out_text),
            ("msgOutMonoFg", out_text),
        ):
            properties[key] = value
            properties[key + "Selected"] = value
        properties["msgInReplyBarColor"] = c["accent"]
        properties["msgInReplyBarSelColor"] = c["accent"]
        properties["msgOutReplyBarColor"] = out_text
        properties["msgOutReplyBarSelColor"] = out_text
        return properties

    def _compose(self, c, mode):
        return {
            "historyComposeAreaBg": c["background"],
            "historyComposeAreaFg": c["text_primary"],
            "historyComposeAreaFgService": c["text_secondary"],
            "historyComposeIconFg": c["text_muted"],
            "historyComposeIconFgOver": c["accent"],
            "historySendIconFg": c["accent"],
            "historySendIconFgOver": c["accent_light"],
            "historyPinnedBg": c["background_secondary"],
            "historyReplyBg": c["background_secondary"],
            "historyReplyIconFg": c["accent"],
            "historyReplyCancelFg": c["text_muted"],
            "historyReplyCancelFgOver": c["text_secondary"],
        }

    def _panels(self, c, mode):
        return {
            "topBarBg": c["background"],
            "profileBg": c["background"],
            "profileVerifiedCheckBg": c["primary"],
            "profileVerifiedCheckFg": c["text_on_primary"],
            "emojiPanBg": c["background_secondary"],
            "emojiPanCategories": c["background_secondary"],
            "emojiPanHeaderBg": c["background_secondary"],
            "emojiPanHeaderFg": c["text_secondary"],
            "stickerPanDeleteBg": with_alpha(c["background_secondary"], ALPHA_PANEL_DELETE),
            "stickerPanDeleteFg": c["text_primary"],
            "stickerPreviewBg": with_alpha(c["background_secondary"], ALPHA_STICKER_PREVIEW),
            "boxBg": c["background"],
            "boxTextFg": c["text_primary"],
            "boxTextFgGood": c["online"],
            "boxTextFgError": ERROR_COLORS[mode],
            "boxTitleFg": c["text_primary"],
            "boxSearchBg": c["background_secondary"],
            "boxTitleAdditionalFg": c["text_muted"],
            "boxTitleCloseFg": c["text_muted"],
            "boxTitleCloseFgOver": c["text_secondary"],
            "notificationBg": c["background"],
        }

    def _buttons(self, c, mode):
        on_primary = c["text_on_primary"]
        return {
            "activeButtonBg": c["primary"],
            "activeButtonBgOver": c["primary_light"],
            "activeButtonBgRipple": c["primary_dark"],
            "activeButtonFg": on_primary,
            "activeButtonFgOver": on_primary,
            "activeButtonSecondaryFg": with_alpha(on_primary, ALPHA_SECONDARY_TEXT),
            "activeButtonSecondaryFgOver": with_alpha(on_primary, ALPHA_SECONDARY_TEXT),
            "activeLineFg": c["accent"],
            "activeLineFgError": ERROR_COLORS[mode],
            "lightButtonBg": c["background"],
            "lightButtonBgOver": c["background_secondary"],
            "lightButtonBgRipple": c["background_tertiary"],
            "lightButtonFg": c["accent"],
            "lightButtonFgOver": c["accent"],
            "cancelIconFg": c["text_muted"],
            "cancelIconFgOver": c["text_secondary"],
        }

    def _media(self, c, mode):
        return {
            "mediaPlayerBg": c["background"],
            "mediaPlayerActiveFg": c["accent"],
            "mediaPlayerInactiveFg": c["background_tertiary"],
            "mediaPlayerDisabledFg": c["background_secondary"],
        }

    def _calls(self, c, mode):
        error = ERROR_COLORS[mode]
        return {
            "callBg": with_alpha(CALL_SURFACE, ALPHA_CALL_BG),
            "callNameFg": "ffffff",
            "callFingerprintBg": "ffffff12",
            "callStatusFg": "ffffff",
            "callIconFg": "ffffff",
            "callAnswerBg": c["online"],
            "callAnswerRipple": darken(c["online"], RIPPLE_DARKEN),
            "callAnswerBgOuter": with_alpha(c["online"], ALPHA_ANSWER_OUTER),
            "callHangupBg": error,
            "callHangupRipple": darken(error, RIPPLE_DARKEN),
            "callBarBg": c["online"],
            "callBarFg": "ffffff",
        }

    def _intro(self, c, mode):
        return {
            "introBg": c["background"],
            "introTitleFg": c["text_primary"],
            "introDescriptionFg": c["text_secondary"],
            "introErrorFg": ERROR_COLORS[mode],
            "introCoverTopBg": c["primary_light"],
            "introCoverBottomBg": c["primary"],
            "introCoverIconsFg": c["accent"],
        }

    def _settings(self, c, mode):
        on_primary = c["text_on_primary"]
        return {
            "sideBarBg": c["background_secondary"],
            "sideBarBgActive": c["primary"],
            "sideBarBgRipple": c["background_tertiary"],
            "sideBarTextFg": c["text_primary"],
            "sideBarTextFgActive": on_primary,
            "sideBarIconFg": c["text_secondary"],
            "sideBarIconFgActive": on_primary,
            "sideBarBadgeBg": c["primary"],
            "sideBarBadgeBgMuted": c["text_muted"],
            "sideBarBadgeFg": on_primary,
        }
