"""Inline style parsing and overlay for style="..." attributes."""

from typing import Dict, Mapping


def parse_style(style: str) -> Dict[str, str]:
    """
    Parse "color: red; font-size: 12px" into an ordered property map.

    A repeated property keeps its first position and takes the later value.
    Declarations without a property or a value are dropped.
    """
    props: Dict[str, str] = {}
    for rule in (style or "").split(";"):
        prop, _, val = rule.partition(":")
        prop, val = prop.strip(), val.strip()
        if prop and val:
            props[prop] = val
    return props


def serialize_style(props: Mapping[str, str]) -> str:
    return "; ".join(f"{prop}: {val}" for prop, val in props.items())


def overlay_style(current: str, patch: Mapping[str, str]) -> str:
    """Apply patch over the current style; new properties are appended"""
    props = parse_style(current)
    for prop, val in patch.items():
        props[prop] = val
    return serialize_style(props)


def set_property(current: str, prop: str, value: str) -> str:
    return overlay_style(current, {prop.strip(): value.strip()})


def merge_style(current: str, patch: str) -> str:
    return overlay_style(current, parse_style(patch))
