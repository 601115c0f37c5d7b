"""Closed catalog of every property the desktop client's theme format recognizes.

Keys are grouped by the part of the interface they paint. The catalog is static
data, loaded once and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ThemeCategory(str, Enum):
    WINDOW = "window"
    MENU = "menu"
    TITLE_BAR = "title_bar"
    DIALOGS = "dialogs"
    HISTORY = "history"
    MEDIA = "media"
    CALLS = "calls"
    INTRO = "intro"
    PROFILE = "profile"
    SETTINGS = "settings"
    MISC = "misc"


# Properties every theme must define for the client to render at all
REQUIRED_PROPERTIES = (
    "windowBg",
    "windowFg",
    "windowBgOver",
    "windowFgOver",
    "windowBgActive",
    "windowFgActive",
    "dialogsBg",
    "dialogsNameFg",
    "dialogsTextFg",
    "msgInBg",
    "msgOutBg",
    "historyComposeAreaBg",
    "historyTextInFg",
    "historyTextOutFg",
    "activeButtonBg",
    "activeButtonFg",
)

_REQUIRED = frozenset(REQUIRED_PROPERTIES)


@dataclass(frozen=True, slots=True)
class ThemeProperty:
    """A single named entry of the theme format."""

    key: str
    category: ThemeCategory
    description: str

    @property
    def required(self):
        return self.key in _REQUIRED


def _prop(key, category, description):
    return ThemeProperty(key, category, description)


WINDOW = ThemeCategory.WINDOW
MENU = ThemeCategory.MENU
TITLE_BAR = ThemeCategory.TITLE_BAR
DIALOGS = ThemeCategory.DIALOGS
HISTORY = ThemeCategory.HISTORY
MEDIA = ThemeCategory.MEDIA
CALLS = ThemeCategory.CALLS
INTRO = ThemeCategory.INTRO
PROFILE = ThemeCategory.PROFILE
SETTINGS = ThemeCategory.SETTINGS
MISC = ThemeCategory.MISC

THEME_PROPERTIES = (
    # Window/General
    _prop("windowBg", WINDOW, "Main window background"),
    _prop("windowFg", WINDOW, "Main text color"),
    _prop("windowBgOver", WINDOW, "Background on hover"),
    _prop("windowBgRipple", WINDOW, "Ripple effect background"),
    _prop("windowFgOver", WINDOW, "Text color on hover"),
    _prop("windowSubTextFg", WINDOW, "Secondary text color"),
    _prop("windowSubTextFgOver", WINDOW, "Secondary text on hover"),
    _prop("windowBoldFg", WINDOW, "Bold text color"),
    _prop("windowBoldFgOver", WINDOW, "Bold text on hover"),
    _prop("windowBgActive", WINDOW, "Active item background"),
    _prop("windowFgActive", WINDOW, "Active item text"),
    _prop("windowActiveTextFg", WINDOW, "Active link text"),
    _prop("windowShadowFg", WINDOW, "Shadow color"),
    _prop("windowShadowFgFallback", WINDOW, "Shadow fallback"),
    # Scrollbar
    _prop("scrollBarBg", WINDOW, "Scrollbar background"),
    _prop("scrollBarBgOver", WINDOW, "Scrollbar on hover"),
    _prop("scrollBg", WINDOW, "Scroll area background"),
    _prop("scrollBgOver", WINDOW, "Scroll area on hover"),
    # Links
    _prop("linkFg", WINDOW, "Link color"),
    _prop("linkOverFg", WINDOW, "Link on hover"),
    # Tooltips
    _prop("tooltipBg", WINDOW, "Tooltip background"),
    _prop("tooltipFg", WINDOW, "Tooltip text"),
    _prop("tooltipBorderFg", WINDOW, "Tooltip border"),
    # Menu
    _prop("menuBg", MENU, "Menu background"),
    _prop("menuBgOver", MENU, "Menu item hover"),
    _prop("menuBgRipple", MENU, "Menu ripple"),
    _prop("menuIconFg", MENU, "Menu icon color"),
    _prop("menuIconFgOver", MENU, "Menu icon hover"),
    _prop("menuSubmenuArrowFg", MENU, "Submenu arrow"),
    _prop("menuFgDisabled", MENU, "Disabled menu item"),
    _prop("menuSeparatorFg", MENU, "Menu separator"),
    # Title bar
    _prop("titleBg", TITLE_BAR, "Title bar background"),
    _prop("titleBgActive", TITLE_BAR, "Active title background"),
    _prop("titleButtonBg", TITLE_BAR, "Title button background"),
    _prop("titleButtonFg", TITLE_BAR, "Title button color"),
    _prop("titleButtonBgOver", TITLE_BAR, "Title button hover"),
    _prop("titleButtonFgOver", TITLE_BAR, "Title button hover color"),
    _prop("titleButtonBgActive", TITLE_BAR, "Title button active"),
    _prop("titleButtonFgActive", TITLE_BAR, "Title button active color"),
    _prop("titleButtonBgActiveOver", TITLE_BAR, "Title button active hover"),
    _prop("titleButtonFgActiveOver", TITLE_BAR, "Title button active hover color"),
    _prop("titleButtonCloseBg", TITLE_BAR, "Close button background"),
    _prop("titleButtonCloseFg", TITLE_BAR, "Close button color"),
    _prop("titleButtonCloseBgOver", TITLE_BAR, "Close button hover"),
    _prop("titleButtonCloseFgOver", TITLE_BAR, "Close button hover color"),
    _prop("titleButtonCloseBgActive", TITLE_BAR, "Close button active"),
    _prop("titleButtonCloseFgActive", TITLE_BAR, "Close button active color"),
    _prop("titleButtonCloseBgActiveOver", TITLE_BAR, "Close button active hover"),
    _prop("titleButtonCloseFgActiveOver", TITLE_BAR, "Close button active hover color"),
    _prop("titleFg", TITLE_BAR, "Title text"),
    _prop("titleFgActive", TITLE_BAR, "Active title text"),
    # Tray icon
    _prop("trayCounterBg", WINDOW, "Tray counter background"),
    _prop("trayCounterBgMute", WINDOW, "Muted tray counter"),
    _prop("trayCounterFg", WINDOW, "Tray counter text"),
    _prop("trayCounterBgMacInvert", WINDOW, "Mac inverted counter"),
    _prop("trayCounterFgMacInvert", WINDOW, "Mac inverted text"),
    # Dialogs list
    _prop("dialogsBg", DIALOGS, "Dialogs background"),
    _prop("dialogsBgOver", DIALOGS, "Dialogs hover"),
    _prop("dialogsBgActive", DIALOGS, "Active dialog"),
    _prop("dialogsBgRipple", DIALOGS, "Dialogs ripple"),
    _prop("dialogsNameFg", DIALOGS, "Chat name"),
    _prop("dialogsNameFgOver", DIALOGS, "Chat name hover"),
    _prop("dialogsNameFgActive", DIALOGS, "Active chat name"),
    _prop("dialogsChatIconFg", DIALOGS, "Chat icon"),
    _prop("dialogsChatIconFgOver", DIALOGS, "Chat icon hover"),
    _prop("dialogsChatIconFgActive", DIALOGS, "Active chat icon"),
    _prop("dialogsDateFg", DIALOGS, "Date text"),
    _prop("dialogsDateFgOver", DIALOGS, "Date hover"),
    _prop("dialogsDateFgActive", DIALOGS, "Active date"),
    _prop("dialogsTextFg", DIALOGS, "Message preview"),
    _prop("dialogsTextFgOver", DIALOGS, "Message preview hover"),
    _prop("dialogsTextFgActive", DIALOGS, "Active message preview"),
    _prop("dialogsTextFgService", DIALOGS, "Service message"),
    _prop("dialogsTextFgServiceOver", DIALOGS, "Service message hover"),
    _prop("dialogsTextFgServiceActive", DIALOGS, "Active service message"),
    _prop("dialogsDraftFg", DIALOGS, "Draft label"),
    _prop("dialogsDraftFgOver", DIALOGS, "Draft hover"),
    _prop("dialogsDraftFgActive", DIALOGS, "Active draft"),
    _prop("dialogsVerifiedIconBg", DIALOGS, "Verified badge background"),
    _prop("dialogsVerifiedIconFg", DIALOGS, "Verified badge icon"),
    _prop("dialogsVerifiedIconBgOver", DIALOGS, "Verified hover"),
    _prop("dialogsVerifiedIconFgOver", DIALOGS, "Verified icon hover"),
    _prop("dialogsVerifiedIconBgActive", DIALOGS, "Active verified"),
    _prop("dialogsVerifiedIconFgActive", DIALOGS, "Active verified icon"),
    _prop("dialogsSendingIconFg", DIALOGS, "Sending icon"),
    _prop("dialogsSendingIconFgOver", DIALOGS, "Sending icon hover"),
    _prop("dialogsSendingIconFgActive", DIALOGS, "Active sending icon"),
    _prop("dialogsSentIconFg", DIALOGS, "Sent checkmark"),
    _prop("dialogsSentIconFgOver", DIALOGS, "Sent checkmark hover"),
    _prop("dialogsSentIconFgActive", DIALOGS, "Active sent checkmark"),
    _prop("dialogsUnreadBg", DIALOGS, "Unread counter"),
    _prop("dialogsUnreadBgOver", DIALOGS, "Unread counter hover"),
    _prop("dialogsUnreadBgActive", DIALOGS, "Active unread counter"),
    _prop("dialogsUnreadBgMuted", DIALOGS, "Muted unread"),
    _prop("dialogsUnreadBgMutedOver", DIALOGS, "Muted unread hover"),
    _prop("dialogsUnreadBgMutedActive", DIALOGS, "Active muted unread"),
    _prop("dialogsUnreadFg", DIALOGS, "Unread text"),
    _prop("dialogsUnreadFgOver", DIALOGS, "Unread text hover"),
    _prop("dialogsUnreadFgActive", DIALOGS, "Active unread text"),
    _prop("dialogsOnlineBadgeFg", DIALOGS, "Online badge"),
    _prop("dialogsScamFg", DIALOGS, "Scam label"),
    _prop("dialogsForwardBg", DIALOGS, "Forward panel"),
    _prop("dialogsForwardFg", DIALOGS, "Forward text"),
    # Search
    _prop("searchedBarBg", DIALOGS, "Search bar background"),
    _prop("searchedBarFg", DIALOGS, "Search bar text"),
    # Filter tabs
    _prop("dialogsArchiveFg", DIALOGS, "Archive folder icon"),
    _prop("dialogsArchiveFgOver", DIALOGS, "Archive hover"),
    _prop("dialogsArchiveBg", DIALOGS, "Archive background"),
    _prop("dialogsArchiveBgOver", DIALOGS, "Archive hover bg"),
    # Chat history
    _prop("historyPeerArchiveUserpicBg", HISTORY, "Archived user pic"),
    _prop("historyScrollBarBg", HISTORY, "History scrollbar"),
    _prop("historyScrollBarBgOver", HISTORY, "History scrollbar hover"),
    _prop("historyScrollBg", HISTORY, "History scroll bg"),
    _prop("historyScrollBgOver", HISTORY, "History scroll hover"),
    _prop("historyForwardChooseBg", HISTORY, "Forward choose bg"),
    _prop("historyForwardChooseFg", HISTORY, "Forward choose text"),
    # Message bubbles - outgoing
    _prop("msgOutBg", HISTORY, "Outgoing message background"),
    _prop("msgOutBgSelected", HISTORY, "Selected outgoing"),
    _prop("msgOutShadow", HISTORY, "Outgoing shadow"),
    _prop("msgOutShadowSelected", HISTORY, "Selected outgoing shadow"),
    _prop("msgOutServiceFg", HISTORY, "Outgoing service text"),
    _prop("msgOutServiceFgSelected", HISTORY, "Selected service text"),
    _prop("msgOutDateFg", HISTORY, "Outgoing date"),
    _prop("msgOutDateFgSelected", HISTORY, "Selected outgoing date"),
    # Message bubbles - incoming
    _prop("msgInBg", HISTORY, "Incoming message background"),
    _prop("msgInBgSelected", HISTORY, "Selected incoming"),
    _prop("msgInShadow", HISTORY, "Incoming shadow"),
    _prop("msgInShadowSelected", HISTORY, "Selected incoming shadow"),
    _prop("msgInServiceFg", HISTORY, "Incoming service text"),
    _prop("msgInServiceFgSelected", HISTORY, "Selected service"),
    _prop("msgInDateFg", HISTORY, "Incoming date"),
    _prop("msgInDateFgSelected", HISTORY, "Selected incoming date"),
    # Service messages
    _prop("msgServiceBg", HISTORY, "Service message bg"),
    _prop("msgServiceBgSelected", HISTORY, "Selected service bg"),
    _prop("msgServiceFg", HISTORY, "Service message text"),
    # Selection
    _prop("msgSelectOverlay", HISTORY, "Selection overlay"),
    _prop("msgStickerOverlay", HISTORY, "Sticker overlay"),
    # Reply/Forward bars
    _prop("msgInReplyBarColor", HISTORY, "Incoming reply bar"),
    _prop("msgInReplyBarSelColor", HISTORY, "Selected reply bar"),
    _prop("msgOutReplyBarColor", HISTORY, "Outgoing reply bar"),
    _prop("msgOutReplyBarSelColor", HISTORY, "Selected outgoing reply"),
    _prop("msgInMonoFg", HISTORY, "Incoming mono text"),
    _prop("msgInMonoFgSelected", HISTORY, "Selected mono"),
    _prop("msgOutMonoFg", HISTORY, "Outgoing mono text"),
    _prop("msgOutMonoFgSelected", HISTORY, "Selected outgoing mono"),
    # Media
    _prop("msgDateImgBg", HISTORY, "Media date bg"),
    _prop("msgDateImgFg", HISTORY, "Media date text"),
    _prop("msgFile1Bg", HISTORY, "File type 1 bg"),
    _prop("msgFile1BgDark", HISTORY, "File type 1 dark"),
    _prop("msgFile1BgOver", HISTORY, "File type 1 hover"),
    _prop("msgFile1BgSelected", HISTORY, "File type 1 selected"),
    _prop("msgFile2Bg", HISTORY, "File type 2 bg"),
    _prop("msgFile2BgDark", HISTORY, "File type 2 dark"),
    _prop("msgFile2BgOver", HISTORY, "File type 2 hover"),
    _prop("msgFile2BgSelected", HISTORY, "File type 2 selected"),
    _prop("msgFile3Bg", HISTORY, "File type 3 bg"),
    _prop("msgFile3BgDark", HISTORY, "File type 3 dark"),
    _prop("msgFile3BgOver", HISTORY, "File type 3 hover"),
    _prop("msgFile3BgSelected", HISTORY, "File type 3 selected"),
    _prop("msgFile4Bg", HISTORY, "File type 4 bg"),
    _prop("msgFile4BgDark", HISTORY, "File type 4 dark"),
    _prop("msgFile4BgOver", HISTORY, "File type 4 hover"),
    _prop("msgFile4BgSelected", HISTORY, "File type 4 selected"),
    _prop("msgWaveformInActive", HISTORY, "Voice wave active"),
    _prop("msgWaveformInInactive", HISTORY, "Voice wave inactive"),
    _prop("msgWaveformOutActive", HISTORY, "Out voice active"),
    _prop("msgWaveformOutInactive", HISTORY, "Out voice inactive"),
    # Chat compose
    _prop("historyComposeAreaBg", HISTORY, "Compose area bg"),
    _prop("historyComposeAreaFg", HISTORY, "Compose text"),
    _prop("historyComposeAreaFgService", HISTORY, "Compose service"),
    _prop("historyComposeIconFg", HISTORY, "Compose icons"),
    _prop("historyComposeIconFgOver", HISTORY, "Compose icons hover"),
    _prop("historySendIconFg", HISTORY, "Send button"),
    _prop("historySendIconFgOver", HISTORY, "Send button hover"),
    _prop("historyPinnedBg", HISTORY, "Pinned message bg"),
    _prop("historyReplyBg", HISTORY, "Reply preview bg"),
    _prop("historyReplyIconFg", HISTORY, "Reply icon"),
    _prop("historyReplyCancelFg", HISTORY, "Reply cancel"),
    _prop("historyReplyCancelFgOver", HISTORY, "Reply cancel hover"),
    # Chat background
    _prop("historyToDownBg", HISTORY, "Scroll down button"),
    _prop("historyToDownBgOver", HISTORY, "Scroll down hover"),
    _prop("historyToDownBgRipple", HISTORY, "Scroll down ripple"),
    _prop("historyToDownFg", HISTORY, "Scroll down icon"),
    _prop("historyToDownFgOver", HISTORY, "Scroll down icon hover"),
    _prop("historyToDownShadow", HISTORY, "Scroll down shadow"),
    # Input field
    _prop("historyTextInFg", HISTORY, "Input text"),
    _prop("historyTextInFgSelected", HISTORY, "Selected input"),
    _prop("historyTextOutFg", HISTORY, "Output text"),
    _prop("historyTextOutFgSelected", HISTORY, "Selected output"),
    _prop("historyLinkInFg", HISTORY, "Link in incoming"),
    _prop("historyLinkInFgSelected", HISTORY, "Selected link in"),
    _prop("historyLinkOutFg", HISTORY, "Link in outgoing"),
    _prop("historyLinkOutFgSelected", HISTORY, "Selected link out"),
    # Read markers
    _prop("historyOutIconFg", HISTORY, "Read checkmark"),
    _prop("historyOutIconFgSelected", HISTORY, "Selected checkmark"),
    _prop("historyIconFgInverted", HISTORY, "Inverted icon"),
    # Profile/Info
    _prop("topBarBg", PROFILE, "Top bar background"),
    _prop("profileBg", PROFILE, "Profile background"),
    _prop("profileOtherAdminStarFg", PROFILE, "Admin star"),
    _prop("profileVerifiedCheckBg", PROFILE, "Verified check bg"),
    _prop("profileVerifiedCheckFg", PROFILE, "Verified check fg"),
    _prop("profileAdminStartFg", PROFILE, "Admin star fg"),
    # Emoji panel
    _prop("emojiPanBg", MISC, "Emoji panel bg"),
    _prop("emojiPanCategories", MISC, "Emoji categories bg"),
    _prop("emojiPanHeaderBg", MISC, "Emoji header bg"),
    _prop("emojiPanHeaderFg", MISC, "Emoji header fg"),
    _prop("stickerPanDeleteBg", MISC, "Sticker delete bg"),
    _prop("stickerPanDeleteFg", MISC, "Sticker delete fg"),
    _prop("stickerPreviewBg", MISC, "Sticker preview bg"),
    # Box/Dialogs
    _prop("boxBg", MISC, "Dialog box bg"),
    _prop("boxTextFg", MISC, "Dialog text"),
    _prop("boxTextFgGood", MISC, "Success text"),
    _prop("boxTextFgError", MISC, "Error text"),
    _prop("boxTitleFg", MISC, "Dialog title"),
    _prop("boxSearchBg", MISC, "Search in dialog"),
    _prop("boxTitleAdditionalFg", MISC, "Additional title"),
    _prop("boxTitleCloseFg", MISC, "Close button"),
    _prop("boxTitleCloseFgOver", MISC, "Close hover"),
    # Buttons
    _prop("activeButtonBg", MISC, "Primary button bg"),
    _prop("activeButtonBgOver", MISC, "Primary button hover"),
    _prop("activeButtonBgRipple", MISC, "Primary button ripple"),
    _prop("activeButtonFg", MISC, "Primary button text"),
    _prop("activeButtonFgOver", MISC, "Primary button hover text"),
    _prop("activeButtonSecondaryFg", MISC, "Secondary text"),
    _prop("activeButtonSecondaryFgOver", MISC, "Secondary hover"),
    _prop("activeLineFg", MISC, "Active line"),
    _prop("activeLineFgError", MISC, "Error line"),
    _prop("lightButtonBg", MISC, "Light button bg"),
    _prop("lightButtonBgOver", MISC, "Light button hover"),
    _prop("lightButtonBgRipple", MISC, "Light button ripple"),
    _prop("lightButtonFg", MISC, "Light button text"),
    _prop("lightButtonFgOver", MISC, "Light button hover text"),
    _prop("cancelIconFg", MISC, "Cancel icon"),
    _prop("cancelIconFgOver", MISC, "Cancel hover"),
    # Checkboxes/Radio
    _prop("checkboxFg", MISC, "Checkbox border"),
    _prop("sliderBgInactive", MISC, "Inactive slider"),
    _prop("sliderBgActive", MISC, "Active slider"),
    # Input fields
    _prop("inputBorderFg", MISC, "Input border"),
    # Media player
    _prop("mediaPlayerBg", MEDIA, "Player background"),
    _prop("mediaPlayerActiveFg", MEDIA, "Player active"),
    _prop("mediaPlayerInactiveFg", MEDIA, "Player inactive"),
    _prop("mediaPlayerDisabledFg", MEDIA, "Player disabled"),
    _prop("mediaviewFileBg", MEDIA, "File view bg"),
    _prop("mediaviewFileNameFg", MEDIA, "File name"),
    _prop("mediaviewFileSizeFg", MEDIA, "File size"),
    _prop("mediaviewFileRedCornerFg", MEDIA, "File red corner"),
    _prop("mediaviewFileYellowCornerFg", MEDIA, "File yellow corner"),
    _prop("mediaviewFileGreenCornerFg", MEDIA, "File green corner"),
    _prop("mediaviewFileBlueCornerFg", MEDIA, "File blue corner"),
    _prop("mediaviewFileExtFg", MEDIA, "File extension"),
    _prop("mediaviewMenuBg", MEDIA, "Media menu bg"),
    _prop("mediaviewMenuBgOver", MEDIA, "Media menu hover"),
    _prop("mediaviewMenuFg", MEDIA, "Media menu fg"),
    _prop("mediaviewBg", MEDIA, "Media view bg"),
    _prop("mediaviewVideoBg", MEDIA, "Video view bg"),
    _prop("mediaviewControlBg", MEDIA, "Control bg"),
    _prop("mediaviewControlFg", MEDIA, "Control fg"),
    _prop("mediaviewCaptionBg", MEDIA, "Caption bg"),
    _prop("mediaviewCaptionFg", MEDIA, "Caption fg"),
    _prop("mediaviewTextLinkFg", MEDIA, "Media text link"),
    _prop("mediaviewSaveMsgBg", MEDIA, "Save message bg"),
    _prop("mediaviewSaveMsgFg", MEDIA, "Save message fg"),
    _prop("mediaviewPlaybackActive", MEDIA, "Playback active"),
    _prop("mediaviewPlaybackInactive", MEDIA, "Playback inactive"),
    _prop("mediaviewPlaybackActiveOver", MEDIA, "Playback hover"),
    _prop("mediaviewPlaybackInactiveOver", MEDIA, "Playback inactive hover"),
    _prop("mediaviewPlaybackProgressFg", MEDIA, "Progress fg"),
    _prop("mediaviewPlaybackIconFg", MEDIA, "Playback icon"),
    _prop("mediaviewPlaybackIconFgOver", MEDIA, "Playback icon hover"),
    _prop("mediaviewTransparentBg", MEDIA, "Transparent bg"),
    _prop("mediaviewTransparentFg", MEDIA, "Transparent fg"),
    # Notifications
    _prop("notificationBg", MISC, "Notification bg"),
    # Calls
    _prop("callBg", CALLS, "Call background"),
    _prop("callNameFg", CALLS, "Call name"),
    _prop("callFingerprintBg", CALLS, "Fingerprint bg"),
    _prop("callStatusFg", CALLS, "Call status"),
    _prop("callIconFg", CALLS, "Call icon"),
    _prop("callAnswerBg", CALLS, "Answer button"),
    _prop("callAnswerRipple", CALLS, "Answer ripple"),
    _prop("callAnswerBgOuter", CALLS, "Answer outer"),
    _prop("callHangupBg", CALLS, "Hangup button"),
    _prop("callHangupRipple", CALLS, "Hangup ripple"),
    _prop("callCancelBg", CALLS, "Cancel bg"),
    _prop("callCancelFg", CALLS, "Cancel fg"),
    _prop("callCancelRipple", CALLS, "Cancel ripple"),
    _prop("callMuteRipple", CALLS, "Mute ripple"),
    _prop("callBarBg", CALLS, "Call bar bg"),
    _prop("callBarMuteRipple", CALLS, "Call bar mute"),
    _prop("callBarBgMuted", CALLS, "Call bar muted"),
    _prop("callBarUnmuteRipple", CALLS, "Call bar unmute"),
    _prop("callBarFg", CALLS, "Call bar fg"),
    # Intro/Login
    _prop("introBg", INTRO, "Intro background"),
    _prop("introTitleFg", INTRO, "Intro title"),
    _prop("introDescriptionFg", INTRO, "Intro description"),
    _prop("introErrorFg", INTRO, "Intro error"),
    _prop("introCoverTopBg", INTRO, "Cover top bg"),
    _prop("introCoverBottomBg", INTRO, "Cover bottom bg"),
    _prop("introCoverIconsFg", INTRO, "Cover icons"),
    _prop("introCoverPlaneTrace", INTRO, "Plane trace"),
    _prop("introCoverPlaneOuter", INTRO, "Plane outer"),
    _prop("introCoverPlaneInner", INTRO, "Plane inner"),
    _prop("introCoverPlaneTop", INTRO, "Plane top"),
    # Settings sidebar
    _prop("sideBarBg", SETTINGS, "Sidebar background"),
    _prop("sideBarBgActive", SETTINGS, "Active sidebar item"),
    _prop("sideBarBgRipple", SETTINGS, "Sidebar ripple"),
    _prop("sideBarTextFg", SETTINGS, "Sidebar text"),
    _prop("sideBarTextFgActive", SETTINGS, "Active sidebar text"),
    _prop("sideBarIconFg", SETTINGS, "Sidebar icon"),
    _prop("sideBarIconFgActive", SETTINGS, "Active sidebar icon"),
    _prop("sideBarBadgeBg", SETTINGS, "Sidebar badge bg"),
    _prop("sideBarBadgeBgMuted", SETTINGS, "Muted badge bg"),
    _prop("sideBarBadgeFg", SETTINGS, "Sidebar badge text"),
    # Placeholder
    _prop("placeholderFg", MISC, "Placeholder text"),
    _prop("placeholderFgActive", MISC, "Active placeholder"),
    # Photos
    _prop("photosPhotoFg", MISC, "Photos fg"),
    _prop("photosPrimaryBg", MISC, "Photos primary"),
    _prop("photosIconBg", MISC, "Photos icon bg"),
    _prop("photosSelectBg", MISC, "Photos select bg"),
    # Report spam
    _prop("reportSpamBg", MISC, "Report spam bg"),
    _prop("reportSpamFg", MISC, "Report spam fg"),
)

del WINDOW, MENU, TITLE_BAR, DIALOGS, HISTORY, MEDIA, CALLS, INTRO
del PROFILE, SETTINGS, MISC

PROPERTIES_BY_KEY = {prop.key: prop for prop in THEME_PROPERTIES}
KNOWN_KEYS = frozenset(PROPERTIES_BY_KEY)


def get_property(key):
    """Return the catalog entry for ``key`` or None when the key is unknown."""
    return PROPERTIES_BY_KEY.get(key)


def properties_by_category(category):
    category = ThemeCategory(category)
    return [prop for prop in THEME_PROPERTIES if prop.category is category]
