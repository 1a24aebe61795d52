"""
Selector Builder - structural CSS path for an element

Produces `body > div#main.content > h1` style paths that can be fed back to
`soup.select()` to find the element again. No positional indices: identical
siblings share a selector.
"""

from typing import List

import soupsieve
from bs4 import Tag

ROOT_NAMES = ("html", "[document]")


def segment_for(el: Tag) -> str:
    """Return tag with id/class markers, e.g. div#main.content.grid"""
    part = el.name
    _id = (el.get("id") or "").strip()
    classes = [c for c in (el.get("class") or []) if c]
    if _id:
        part += "#" + soupsieve.escape(_id)
    if classes:
        part += "." + ".".join(soupsieve.escape(c) for c in classes)
    return part


def build_selector(el: Tag) -> str:
    parts: List[str] = []
    node = el
    while isinstance(node, Tag) and node.name not in ROOT_NAMES:
        parts.append(segment_for(node))
        node = node.parent
    if not parts:
        # The element is the root itself
        parts.append(el.name)
    return " > ".join(reversed(parts))
