"""Shared context and extraction helpers for the rule-based matchers"""

import re
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

from ..actions import Action


@dataclass(frozen=True)
class CommandContext:
    """
    A command as seen by the matchers.

    `lowered` drives keyword triggers; values that end up in the document
    (replacement text, labels, placeholders) are extracted from `text` so the
    user's casing survives.
    """
    text: str
    target_file: Optional[str] = None
    lowered: str = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "text", " ".join((self.text or "").split()))
        object.__setattr__(self, "lowered", self.text.lower())

    def has(self, *phrases: str) -> bool:
        """True when any phrase occurs as a substring"""
        return any(p in self.lowered for p in phrases)

    def has_word(self, *words: str) -> bool:
        """True when any of the words occurs on word boundaries"""
        return any(re.search(rf"\b{re.escape(w)}\b", self.lowered) for w in words)


Matcher = Callable[[CommandContext], List[Action]]

EDIT_VERBS = ("change", "modify", "update", "set")
ADD_VERBS = ("add", "create", "insert")

# Last token after to/as/set/make, e.g. "set background color to #fafafa"
TRAILING_VALUE_RE = re.compile(r"\b(?:to|as|set|make)\b.*?\s(#?[\w.%(),-]+)\s*$", re.IGNORECASE)


def trailing_value(text: str) -> Optional[str]:
    m = TRAILING_VALUE_RE.search(text)
    return m.group(1).strip(".,") if m else None


def strip_quotes(value: str) -> str:
    return value.strip().strip("\"'“”‘’").strip()


def search(patterns: Iterable[str], text: str, group: int = 1) -> Optional[str]:
    """First capture of the first matching pattern (case-insensitive)"""
    for pattern in patterns:
        m = re.search(pattern, text, re.IGNORECASE)
        if m and m.group(group):
            value = strip_quotes(m.group(group))
            if value:
                return value
    return None


def slugify(label: str) -> str:
    """'First Name' -> 'first_name'"""
    return re.sub(r"[^a-z0-9]+", "_", label.lower()).strip("_")
