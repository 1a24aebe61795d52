"""
Field modification matcher

Handles commands such as:
  "change the email field placeholder to Your email"
  "make input named phone required"
  "set field #age min to 18 and max to 99"
  "make the first name field readonly"

The field is resolved by name, then id, then placeholder, then label; every
modification found in the command becomes its own action.
"""

import re
from typing import List, Optional

from ..actions import Action, AddAttribute, ModifyAttribute, ModifyStyle, RemoveAttribute
from .base import CommandContext, search, slugify

FIELD_NOUNS = ("input", "field", "textbox", "label")
FIELD_VERBS = ("change", "modify", "update", "set", "make")

# phrase -> canonical field name
FIELD_SHORTCUTS = (
    ("first name", "first_name"),
    ("last name", "last_name"),
    ("email", "email"),
    ("phone", "phone"),
    ("password", "password"),
    ("username", "username"),
    ("message", "message"),
    ("subject", "subject"),
    ("address", "address"),
)

NAME_ID_PATTERNS = (
    r"\b(?:field|input|textbox)\s+(?:named|with\s+name|name)\s+[\"']?([\w-]+)",
    r"\bname\s*=\s*[\"']?([\w-]+)",
)
ID_PATTERNS = (
    r"\b(?:field|input|textbox)\s+#([\w-]+)",
    r"\b(?:field|input|textbox)\s+with\s+id\s+[\"']?([\w-]+)",
    r"\bid\s*=\s*[\"']?([\w-]+)",
)
PLACEHOLDER_ID_PATTERNS = (
    r"\b(?:field|input|textbox)\s+with\s+placeholder\s+[\"']([^\"']+)[\"']",
    r"\b(?:field|input|textbox)\s+with\s+placeholder\s+(.+?)(?=\s+(?:to|and)\b|,|$)",
)
LABEL_ID_PATTERNS = (
    r"\b(?:the\s+)?[\"']([^\"']+)[\"']\s+(?:field|input|textbox)\b",
    r"\b(?:field|input|textbox)\s+(?:labeled|labelled)\s+[\"']?([\w ]+?)[\"']?(?=\s+(?:to|and|placeholder|name|value|type|required|disabled|readonly|min|max|step|background)\b|,|$)",
)

_END = r"(?=\s+and\b|,|$)"

NEW_LABEL_PATTERNS = (
    rf"\blabel\s+to\s+[\"']?(.+?)[\"']?{_END}",
    rf"\brename\s+(?:it\s+)?to\s+[\"']?(.+?)[\"']?{_END}",
)
NEW_NAME_PATTERNS = (r"\bname\s+to\s+[\"']?([\w-]+)",)
NEW_PLACEHOLDER_PATTERNS = (
    r"\bplaceholder\s+to\s+[\"']([^\"']+)[\"']",
    rf"\bplaceholder\s+to\s+(.+?){_END}",
)
NEW_VALUE_PATTERNS = (
    r"\bvalue\s+to\s+[\"']([^\"']+)[\"']",
    rf"\bvalue\s+to\s+(.+?){_END}",
)
NEW_TYPE_RE = re.compile(r"\btype\s+to\s+([\w-]+)")

ALLOWED_TYPES = {
    "text", "email", "password", "number", "tel", "url", "date", "time",
    "datetime-local", "month", "week", "checkbox", "radio", "file", "range",
    "color", "search", "hidden",
}

BACKGROUND_RE = re.compile(r"\bbackground(?:[\s-]+colou?r)?\s+(?:to\s+|as\s+)?([a-z]+)\b")
FIELD_BACKGROUNDS = {
    "red": "#ffebee",
    "green": "#e8f5e9",
    "blue": "#e3f2fd",
    "yellow": "#fffde7",
    "orange": "#fff3e0",
    "purple": "#f3e5f5",
    "gray": "#f5f5f5",
    "grey": "#f5f5f5",
    "white": "#ffffff",
}


def _is_field_command(ctx: CommandContext) -> bool:
    if not ctx.has_word(*FIELD_VERBS):
        return False
    return ctx.has_word(*FIELD_NOUNS) or any(ctx.has(phrase) for phrase, _ in FIELD_SHORTCUTS)


def _relaxed_selector(slug: str) -> str:
    variants = [slug]
    compact = slug.replace("_", "")
    if compact != slug:
        variants.append(compact)
    parts = []
    for v in variants:
        for attr in ("name", "id"):
            parts.append(f'input[{attr}*="{v}" i]')
            parts.append(f'textarea[{attr}*="{v}" i]')
    return ", ".join(parts)


def resolve_field_selector(ctx: CommandContext) -> Optional[str]:
    """Selector for the field a command talks about, or None"""
    name = search(NAME_ID_PATTERNS, ctx.text)
    if name:
        return f'input[name="{name}"]'
    field_id = search(ID_PATTERNS, ctx.text)
    if field_id:
        return f"#{field_id}"
    placeholder = search(PLACEHOLDER_ID_PATTERNS, ctx.text)
    if placeholder:
        return f'input[placeholder*="{placeholder}"]'
    label = search(LABEL_ID_PATTERNS, ctx.text)
    if label:
        return _relaxed_selector(slugify(label))
    for phrase, canonical in FIELD_SHORTCUTS:
        if ctx.has(phrase):
            return _relaxed_selector(canonical)
    return None


def _toggle(ctx: CommandContext, on_words: tuple, off_words: tuple) -> Optional[bool]:
    if ctx.has(*off_words):
        return False
    if ctx.has_word(*on_words):
        return True
    return None


def match_field_modification(ctx: CommandContext) -> List[Action]:
    if not ctx.target_file or not _is_field_command(ctx):
        return []
    selector = resolve_field_selector(ctx)
    if not selector:
        return []

    file = ctx.target_file
    actions: List[Action] = []

    new_label = search(NEW_LABEL_PATTERNS, ctx.text)
    if new_label:
        actions.append(ModifyAttribute(file=file, selector=selector, attribute="name", value=slugify(new_label)))

    new_name = search(NEW_NAME_PATTERNS, ctx.text)
    if new_name:
        actions.append(ModifyAttribute(file=file, selector=selector, attribute="name", value=new_name))

    placeholder = search(NEW_PLACEHOLDER_PATTERNS, ctx.text)
    if placeholder:
        actions.append(ModifyAttribute(file=file, selector=selector, attribute="placeholder", value=placeholder))

    value = search(NEW_VALUE_PATTERNS, ctx.text)
    if value:
        actions.append(ModifyAttribute(file=file, selector=selector, attribute="value", value=value))

    m = NEW_TYPE_RE.search(ctx.lowered)
    if m and m.group(1) in ALLOWED_TYPES:
        actions.append(ModifyAttribute(file=file, selector=selector, attribute="type", value=m.group(1)))

    required = _toggle(ctx, ("required", "mandatory"), ("not required", "optional", "unrequired"))
    if required is True:
        actions.append(AddAttribute(file=file, selector=selector, attribute="required", value=""))
    elif required is False:
        actions.append(RemoveAttribute(file=file, selector=selector, attribute="required"))

    disabled = _toggle(ctx, ("disable", "disabled"), ("enable", "not disabled"))
    if disabled is True:
        actions.append(AddAttribute(file=file, selector=selector, attribute="disabled", value=""))
    elif disabled is False:
        actions.append(RemoveAttribute(file=file, selector=selector, attribute="disabled"))

    if ctx.has("readonly", "read-only", "read only"):
        actions.append(AddAttribute(file=file, selector=selector, attribute="readonly", value=""))

    for bound in ("min", "max", "step"):
        number = search((rf"\b{bound}(?:imum)?\s+(?:to\s+|=\s*)?(-?\d+(?:\.\d+)?)",), ctx.text)
        if number:
            actions.append(ModifyAttribute(file=file, selector=selector, attribute=bound, value=number))

    bg = BACKGROUND_RE.search(ctx.lowered)
    if bg and bg.group(1) in FIELD_BACKGROUNDS:
        color = FIELD_BACKGROUNDS[bg.group(1)]
        actions.append(ModifyStyle(file=file, selector=selector, style=f"background-color: {color}"))

    return actions


__all__ = ["match_field_modification", "resolve_field_selector"]
