"""Text replacement matchers: headings, paragraphs and generic text"""

import re
from typing import List, Optional

from ..actions import WILDCARD, Action, ChangeText
from .base import EDIT_VERBS, CommandContext, search, strip_quotes

HEADING_RE = re.compile(r"\bchange\s+(?:the\s+)?(?:main\s+)?(heading|h1|h2|h3)\b")
PARAGRAPH_RE = re.compile(r"\bchange\s+(?:the\s+)?(?:first\s+)?(paragraph|para|p)\b")

# "to <text>" stopping at a following "and"/"with" clause
NEW_TEXT_PATTERNS = (
    r"\bto\s+(.+?)(?:\s+(?:and|with)\s+|$)",
)
FROM_TO_RE = re.compile(r"\bfrom\s+(.+?)\s+to\s+(.+)$", re.IGNORECASE)

# keyword -> selector for the generic text matcher, first hit wins
TEXT_CONTEXT_SELECTORS = (
    ("heading", "h1"),
    ("paragraph", "p"),
    ("title", "title"),
    ("button", "button"),
    ("link", "a"),
)


def _new_text(ctx: CommandContext) -> Optional[str]:
    return search(NEW_TEXT_PATTERNS, ctx.text)


def match_heading_text(ctx: CommandContext) -> List[Action]:
    if not ctx.target_file:
        return []
    m = HEADING_RE.search(ctx.lowered)
    if not m:
        return []
    new_text = _new_text(ctx)
    if not new_text:
        return []
    level = m.group(1)
    selector = level if level in ("h2", "h3") else "h1"
    # "change heading h2 to ..." names the level after the noun
    if level == "heading":
        named = re.search(r"\b(h2|h3)\b", ctx.lowered)
        if named:
            selector = named.group(1)
    return [ChangeText(file=ctx.target_file, selector=selector, old_text=WILDCARD, new_text=new_text)]


def match_paragraph_text(ctx: CommandContext) -> List[Action]:
    if not ctx.target_file or not PARAGRAPH_RE.search(ctx.lowered):
        return []
    new_text = _new_text(ctx)
    if not new_text:
        return []
    return [ChangeText(file=ctx.target_file, selector="p", old_text=WILDCARD, new_text=new_text)]


def match_generic_text(ctx: CommandContext) -> List[Action]:
    if not ctx.target_file:
        return []
    if not (ctx.has_word(*EDIT_VERBS) and ctx.has_word("text")):
        return []

    m = FROM_TO_RE.search(ctx.text)
    if m:
        old_text, new_text = strip_quotes(m.group(1)), strip_quotes(m.group(2))
    else:
        old_text = WILDCARD
        new_text = search((r"\bto\s+(.+)$",), ctx.text)
    if not new_text or not old_text:
        return []

    selector = "body"
    for keyword, candidate in TEXT_CONTEXT_SELECTORS:
        if ctx.has_word(keyword):
            selector = candidate
            break
    return [ChangeText(file=ctx.target_file, selector=selector, old_text=old_text, new_text=new_text)]
