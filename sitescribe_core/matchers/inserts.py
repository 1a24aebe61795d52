"""
Insertion matchers: single inputs, complete forms and buttons

Each emits one addBlock action that appends a generated fragment to <body>.
"""

import re
from html import escape
from typing import Dict, List, Optional

from ..actions import Action, AddBlock
from ..presets import render_form
from .base import ADD_VERBS, CommandContext, search

# keyword -> input kind, checked in order ("datetime" before "date" and "time")
INPUT_KIND_KEYWORDS = (
    ("password", "password"),
    ("email", "email"),
    ("e-mail", "email"),
    ("number", "number"),
    ("numeric", "number"),
    ("textarea", "textarea"),
    ("text area", "textarea"),
    ("multiline", "textarea"),
    ("datetime", "datetime-local"),
    ("date", "date"),
    ("time", "time"),
    ("url", "url"),
    ("website", "url"),
    ("tel", "tel"),
    ("phone", "tel"),
    ("file", "file"),
    ("upload", "file"),
    ("checkbox", "checkbox"),
    ("radio", "radio"),
    ("range", "range"),
    ("slider", "range"),
    ("color", "color"),
    ("search", "search"),
)

# value terminators for unquoted sub-pattern captures
_STOP = r"(?=\s+(?:and|with|placeholder|name|named|min|max|step|required|default|value)\b|,|$)"

PLACEHOLDER_PATTERNS = (
    r"placeholder\s*(?:=|:|is|of|text)?\s*[\"']([^\"']+)[\"']",
    rf"placeholder\s*(?:=|:|is|of|text)?\s*(.+?){_STOP}",
)
NAME_PATTERNS = (
    r"\bname[d]?\s*(?:=|:|is|as)?\s*[\"']([\w-]+)[\"']",
    r"\bname[d]?\s*(?:=|:|is|as)?\s*([\w-]+)",
)
DEFAULT_VALUE_PATTERNS = (
    r"\b(?:default(?:\s+value)?|value)\s*(?:=|:|of|is|to)?\s*[\"']([^\"']+)[\"']",
    rf"\b(?:default(?:\s+value)?|value)\s*(?:=|:|of|is|to)?\s*(.+?){_STOP}",
)
NUMBER = r"(-?\d+(?:\.\d+)?)"

FORM_TYPE_KEYWORDS = (
    ("contact", "contact"),
    ("login", "login"),
    ("log in", "login"),
    ("sign in", "login"),
    ("registration", "registration"),
    ("register", "registration"),
    ("signup", "registration"),
    ("sign up", "registration"),
    ("search", "search"),
    ("feedback", "feedback"),
    ("order", "order"),
)
FORM_ACTION_PATTERNS = (
    r"\baction\s*(?:url)?\s*(?:=|:|to|is)?\s*[\"']?([^\s\"']+)",
    r"\b(?:submits?|posts?|sends?)\s+to\s+[\"']?([^\s\"']+)",
)
GET_METHOD_RE = re.compile(r"\bmethod\s*(?:=|:|is)?\s*get\b|\bget\s+method\b|\b(?:using|via|with)\s+get\b")

BUTTON_LABEL_PATTERNS = (
    r"[\"']([^\"']+)[\"']",
    r"\b(?:labeled|labelled|label|text|saying|called|named)\s*(?:=|:)?\s*(.+?)(?=\s+(?:and|with|type)\b|,|$)",
)
BUTTON_TYPE_RE = re.compile(r"\btype\s*(?:=|:|is)?\s*(submit|reset|button)\b")


def _attrs(attrs: Dict[str, Optional[str]]) -> str:
    parts = []
    for key, value in attrs.items():
        if value is None:
            continue
        parts.append(key if value == "" else f'{key}="{escape(value)}"')
    return " ".join(parts)


def input_kind(ctx: CommandContext) -> str:
    for keyword, kind in INPUT_KIND_KEYWORDS:
        if ctx.has_word(keyword):
            return kind
    return "text"


def build_input_fragment(ctx: CommandContext) -> str:
    kind = input_kind(ctx)
    attrs: Dict[str, Optional[str]] = {}
    if kind != "textarea":
        attrs["type"] = kind
    attrs["name"] = search(NAME_PATTERNS, ctx.text) or kind.split("-")[0]
    attrs["placeholder"] = search(PLACEHOLDER_PATTERNS, ctx.text)
    for bound in ("min", "max", "step"):
        attrs[bound] = search((rf"\b{bound}(?:imum)?\s*(?:=|:|of|is)?\s*{NUMBER}",), ctx.text)
    default = search(DEFAULT_VALUE_PATTERNS, ctx.text)
    if kind != "textarea":
        attrs["value"] = default
    if ctx.has_word("required", "mandatory") and not ctx.has("not required", "optional"):
        attrs["required"] = ""

    if kind == "textarea":
        return f"<textarea {_attrs(attrs)}>{escape(default or '')}</textarea>"
    return f"<input {_attrs(attrs)}>"


def match_input(ctx: CommandContext) -> List[Action]:
    if not ctx.target_file:
        return []
    triggered = ctx.has("add input", "add textbox", "add text field", "add text box") or (
        ctx.has_word("add") and ctx.has_word("input")
    )
    if not triggered:
        return []
    return [AddBlock(file=ctx.target_file, parent_selector="body", html_block=build_input_fragment(ctx))]


def match_form(ctx: CommandContext) -> List[Action]:
    if not ctx.target_file:
        return []
    if not (ctx.has_word(*ADD_VERBS) and ctx.has_word("form")):
        return []
    template = "contact"
    for keyword, name in FORM_TYPE_KEYWORDS:
        if ctx.has_word(keyword):
            template = name
            break
    action_url = search(FORM_ACTION_PATTERNS, ctx.text)
    method = "get" if GET_METHOD_RE.search(ctx.lowered) else "post"
    fragment = render_form(template, action=action_url, method=method)
    return [AddBlock(file=ctx.target_file, parent_selector="body", html_block=fragment)]


def match_button(ctx: CommandContext) -> List[Action]:
    if not ctx.target_file:
        return []
    if not (ctx.has_word(*ADD_VERBS) and ctx.has_word("button")):
        return []
    explicit = BUTTON_TYPE_RE.search(ctx.lowered)
    if explicit:
        button_type = explicit.group(1)
    elif ctx.has_word("reset"):
        button_type = "reset"
    elif ctx.has_word("submit"):
        button_type = "submit"
    else:
        button_type = "button"
    default_label = {"reset": "Reset", "submit": "Submit"}.get(button_type, "Click me")
    label = search(BUTTON_LABEL_PATTERNS, ctx.text) or default_label
    fragment = f'<button type="{button_type}">{escape(label)}</button>'
    return [AddBlock(file=ctx.target_file, parent_selector="body", html_block=fragment)]
