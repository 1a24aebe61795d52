"""
Rule-based command matchers

Each matcher is a pure function CommandContext -> List[Action]. The document
matchers all run and their results are concatenated in order; the app-setting
matchers get a second chance only when no document action was produced.
"""

import logging
from typing import List

from ..actions import Action
from .base import CommandContext, Matcher
from .fields import match_field_modification
from .inserts import match_button, match_form, match_input
from .settings import (
    match_about,
    match_autosave,
    match_export_settings,
    match_file_history,
    match_font_size_setting,
    match_fullscreen,
    match_help,
    match_import_settings,
    match_language,
    match_notifications,
    match_reset_settings,
    match_shortcuts,
    match_theme,
)
from .styles import match_background_color, match_font_size, match_text_color
from .text import match_generic_text, match_heading_text, match_paragraph_text

logger = logging.getLogger(__name__)

DOCUMENT_MATCHERS: List[Matcher] = [
    match_background_color,
    match_text_color,
    match_font_size,
    match_heading_text,
    match_paragraph_text,
    match_generic_text,
    match_input,
    match_form,
    match_button,
    match_field_modification,
]

SETTING_MATCHERS: List[Matcher] = [
    match_theme,
    match_font_size_setting,
    match_language,
    match_autosave,
    match_shortcuts,
    match_file_history,
    match_export_settings,
    match_import_settings,
    match_notifications,
    match_fullscreen,
    match_help,
    match_about,
    match_reset_settings,
]


def run_matchers(matchers: List[Matcher], ctx: CommandContext) -> List[Action]:
    actions: List[Action] = []
    for matcher in matchers:
        found = matcher(ctx)
        if found:
            logger.debug(f"{matcher.__name__} -> {[a.kind for a in found]}")
            actions.extend(found)
    return actions


def run_cascade(ctx: CommandContext) -> List[Action]:
    """Document matchers first, app-setting matchers only if those found nothing"""
    actions = run_matchers(DOCUMENT_MATCHERS, ctx)
    if actions:
        return actions
    return run_matchers(SETTING_MATCHERS, ctx)


__all__ = [
    "CommandContext",
    "DOCUMENT_MATCHERS",
    "SETTING_MATCHERS",
    "run_cascade",
    "run_matchers",
]
