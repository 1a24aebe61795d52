"""Page-level style matchers: background color, text color, font size"""

import re
from typing import List

from ..actions import Action, ChangeStyle
from .base import CommandContext, trailing_value

BACKGROUND_TRIGGERS = ("bgcolor", "background color", "background-color", "background")
# "color" naming an input kind ("color input", "color picker") is not a page style
TEXT_COLOR_RE = re.compile(r"\b(?:text|font)\s+colou?r\b|\bcolou?r\b(?!\s+(?:input|picker|field|box|swatch)\b)")
FONT_SIZE_TRIGGERS = ("font size", "font-size", "text size")

# A captured value equal to one of these is the keyword echoing itself
# ("set background to background"), not a color.
BACKGROUND_GUARD = {"bgcolor", "background", "background-color", "color", "colour"}
COLOR_GUARD = {"color", "colour", "text", "font"}

FONT_SIZE_RE = re.compile(r"(\d+(?:\.\d+)?)\s*(px|em|rem|%|pt)?(?![\w.])", re.IGNORECASE)


def match_background_color(ctx: CommandContext) -> List[Action]:
    if not ctx.target_file or not ctx.has(*BACKGROUND_TRIGGERS):
        return []
    value = trailing_value(ctx.text)
    if not value or value.lower() in BACKGROUND_GUARD:
        return []
    return [ChangeStyle(file=ctx.target_file, selector="body", property="background-color", value=value)]


def match_text_color(ctx: CommandContext) -> List[Action]:
    if not ctx.target_file or not TEXT_COLOR_RE.search(ctx.lowered):
        return []
    # background commands belong to match_background_color alone
    if ctx.has(*BACKGROUND_TRIGGERS):
        return []
    value = trailing_value(ctx.text)
    if not value or value.lower() in COLOR_GUARD:
        return []
    return [ChangeStyle(file=ctx.target_file, selector="body", property="color", value=value)]


def match_font_size(ctx: CommandContext) -> List[Action]:
    if not ctx.target_file:
        return []
    positions = [ctx.lowered.find(t) for t in FONT_SIZE_TRIGGERS if t in ctx.lowered]
    if not positions:
        return []
    m = FONT_SIZE_RE.search(ctx.lowered, min(positions))
    if not m:
        # "set font size to large" is an app setting, not a page style
        return []
    value = m.group(1) + (m.group(2) or "px")
    return [ChangeStyle(file=ctx.target_file, selector="body", property="font-size", value=value)]
