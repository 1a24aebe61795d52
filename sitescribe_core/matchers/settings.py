"""
App-setting matchers

These run only when no document matcher produced an action. Each one maps
keyword presence to a single setting action with no document target.
"""

import re
from typing import List, Optional

from ..actions import (
    Action,
    ChangeFontSize,
    ChangeLanguage,
    ChangeTheme,
    ExportSettings,
    ImportSettings,
    ResetSettings,
    SetAutoSave,
    SetFullscreen,
    SetNotifications,
    ShowAbout,
    ShowFileHistory,
    ShowHelp,
    ShowShortcuts,
)
from .base import CommandContext

OFF_WORDS = ("off", "disable", "disabled", "deactivate", "stop", "exit", "leave", "no")
SETTINGS_NOUNS = ("settings", "setting", "preferences", "config", "configuration")

THEME_PATTERNS = (
    re.compile(r"\btheme\s+(?:to\s+|as\s+|=\s*)?([\w-]+)"),
    re.compile(r"\b([\w-]+)\s+(?:theme|mode)\b"),
)
THEME_STOPWORDS = {"the", "a", "app", "to", "change", "set", "switch", "use", "enable", "fullscreen", "full"}

FONT_SIZE_TRIGGERS = ("font size", "font-size", "text size", "font")
FONT_SIZE_WORDS = {
    "tiny": "small",
    "smaller": "small",
    "small": "small",
    "normal": "medium",
    "medium": "medium",
    "default": "medium",
    "bigger": "large",
    "larger": "large",
    "large": "large",
    "big": "large",
    "huge": "x-large",
    "x-large": "x-large",
    "extra large": "x-large",
}

LANGUAGE_RE = re.compile(r"\blanguage\s+(?:to\s+|as\s+|=\s*)?([a-z-]+)")
LANGUAGE_SWITCH_RE = re.compile(r"\b(?:switch|change|translate)\s+(?:\w+\s+)?(?:to|into)\s+([a-z]+)\s*$")
KNOWN_LANGUAGES = {
    "english", "polish", "german", "french", "spanish", "italian",
    "portuguese", "dutch", "russian", "ukrainian", "chinese", "japanese",
}


def _enabled(ctx: CommandContext) -> bool:
    return not ctx.has_word(*OFF_WORDS)


def match_theme(ctx: CommandContext) -> List[Action]:
    if not ctx.has_word("theme", "dark", "light") and not ctx.has("dark mode", "light mode"):
        return []
    for pattern in THEME_PATTERNS:
        for m in pattern.finditer(ctx.lowered):
            theme = m.group(1)
            if theme not in THEME_STOPWORDS:
                return [ChangeTheme(theme=theme)]
    return []


def _font_size_word(ctx: CommandContext) -> Optional[str]:
    if ctx.has("extra large"):
        return "x-large"
    for word in re.findall(r"[\w-]+", ctx.lowered):
        if word in FONT_SIZE_WORDS:
            return FONT_SIZE_WORDS[word]
    return None


def match_font_size_setting(ctx: CommandContext) -> List[Action]:
    if not ctx.has(*FONT_SIZE_TRIGGERS):
        return []
    size = _font_size_word(ctx)
    return [ChangeFontSize(size=size)] if size else []


def match_language(ctx: CommandContext) -> List[Action]:
    m = LANGUAGE_RE.search(ctx.lowered)
    if m:
        return [ChangeLanguage(language=m.group(1))]
    m = LANGUAGE_SWITCH_RE.search(ctx.lowered)
    if m and m.group(1) in KNOWN_LANGUAGES:
        return [ChangeLanguage(language=m.group(1))]
    return []


def match_autosave(ctx: CommandContext) -> List[Action]:
    if not ctx.has("autosave", "auto save", "auto-save"):
        return []
    return [SetAutoSave(enabled=_enabled(ctx))]


def match_shortcuts(ctx: CommandContext) -> List[Action]:
    if not ctx.has("shortcut", "hotkey", "key binding", "keybinding"):
        return []
    return [ShowShortcuts()]


def match_file_history(ctx: CommandContext) -> List[Action]:
    if not ctx.has("file history", "recent files", "recent documents") and not ctx.has_word("history"):
        return []
    return [ShowFileHistory()]


def match_export_settings(ctx: CommandContext) -> List[Action]:
    if not (ctx.has_word("export") and ctx.has_word(*SETTINGS_NOUNS)):
        return []
    return [ExportSettings()]


def match_import_settings(ctx: CommandContext) -> List[Action]:
    if not (ctx.has_word("import") and ctx.has_word(*SETTINGS_NOUNS)):
        return []
    return [ImportSettings()]


def match_notifications(ctx: CommandContext) -> List[Action]:
    if not ctx.has("notification"):
        return []
    return [SetNotifications(enabled=_enabled(ctx))]


def match_fullscreen(ctx: CommandContext) -> List[Action]:
    if not ctx.has("fullscreen", "full screen", "full-screen"):
        return []
    return [SetFullscreen(enabled=_enabled(ctx))]


def match_help(ctx: CommandContext) -> List[Action]:
    return [ShowHelp()] if ctx.has_word("help") else []


def match_about(ctx: CommandContext) -> List[Action]:
    if ctx.lowered.strip(" ?!.") == "about" or ctx.has("about sitescribe", "about the app", "about this app", "show about", "app version"):
        return [ShowAbout()]
    return []


def match_reset_settings(ctx: CommandContext) -> List[Action]:
    if not ctx.has_word("reset", "restore"):
        return []
    if not (ctx.has_word(*SETTINGS_NOUNS) or ctx.has("default")):
        return []
    return [ResetSettings()]
