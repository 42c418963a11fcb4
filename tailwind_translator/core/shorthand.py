"""
Shorthand expansion for box and border properties.

Multi-value shorthands are expanded to their edges (or corners) using the
CSS top/right/bottom/left convention, mapped edge by edge, then collapsed
back into axis tokens wherever opposite edges agree:

    margin: 4px 8px 4px 8px  ->  mx-[8px] my-[4px]
    padding: 1rem 0.5rem 2rem ->  pt-4 px-2 pb-8
    border-radius: 0.5rem 0.5rem 0 0 -> rounded-t-lg rounded-b-none
"""

from __future__ import annotations

import re
from typing import List, Mapping, Tuple

from .config import TranslatorConfig
from .css_utils import is_color
from .defaults import BORDER_RADIUS_SCALE, PROPERTY_DEFAULTS, REM_SCALE
from .value_parsers import (
    expand_shorthand_box,
    get_custom_val,
    has_negative,
    is_unit,
    split_values,
)

__all__ = [
    "BORDER_STYLES",
    "BORDER_KEYWORDS",
    "scale_suffix",
    "radius_suffix",
    "expand_margin",
    "expand_padding",
    "expand_border_radius",
    "expand_border",
]

BORDER_STYLES: Mapping[str, str] = {
    "solid": "border-solid",
    "dashed": "border-dashed",
    "dotted": "border-dotted",
    "double": "border-double",
    "none": "border-none",
}

BORDER_KEYWORDS: Mapping[str, str] = {
    "transparent": "border-transparent",
    "currentColor": "border-current",
    "currentcolor": "border-current",
}

_ZERO = ("0", "0px")
_PAREN_GROUP_PATTERN = re.compile(r"\(.+?\)")
_WHITESPACE_PATTERN = re.compile(r"\s")

# (sign, suffix) for a single edge
Edge = Tuple[str, str]


def scale_suffix(value: str, config: TranslatorConfig) -> str:
    """Spacing scale step for a length, or the bracketed literal."""
    if config.use_default_scale and value in REM_SCALE:
        return REM_SCALE[value]
    return f"[{value}]"


def radius_suffix(value: str, config: TranslatorConfig) -> str:
    """
    Suffix appended to ``rounded``/``rounded-tl``... for one radius.

    The default table may yield an empty suffix (plain ``rounded``).
    """
    if config.use_default_scale and value in BORDER_RADIUS_SCALE:
        return BORDER_RADIUS_SCALE[value]
    return f"-[{get_custom_val(value)}]"


def _collapse(abbr: str, edges: Tuple[Edge, Edge, Edge, Edge]) -> str:
    top, right, bottom, left = edges

    def token(side: str, edge: Edge) -> str:
        sign, suffix = edge
        return f"{sign}{abbr}{side}-{suffix}"

    if top == right == bottom == left:
        parts = [token("", top)]
    elif top == bottom and right == left:
        parts = [token("x", right), token("y", top)]
    elif top == bottom:
        parts = [token("l", left), token("r", right), token("y", top)]
    elif right == left:
        parts = [token("t", top), token("x", right), token("b", bottom)]
    else:
        parts = [token("t", top), token("r", right), token("b", bottom), token("l", left)]
    return " ".join(parts)


def _box_values(value: str) -> List[str]:
    values = split_values(value)
    if not values or len(values) > 4:
        return []
    if any(not is_unit(v) for v in values):
        return []
    return values


def expand_margin(value: str, config: TranslatorConfig) -> str:
    """Map a ``margin`` shorthand; negative edges keep their sign."""
    values = _box_values(value)
    if not values:
        return ""

    def edge(v: str) -> Edge:
        if v in _ZERO:
            return "", "0"
        if v == "auto":
            return "", "auto"
        sign, rest = has_negative(v)
        return sign, scale_suffix(rest, config)

    return _collapse("m", expand_shorthand_box([edge(v) for v in values]))


def expand_padding(value: str, config: TranslatorConfig) -> str:
    """Map a ``padding`` shorthand."""
    values = _box_values(value)
    if not values:
        return ""

    def edge(v: str) -> Edge:
        if v in _ZERO:
            return "", "0"
        return "", scale_suffix(v, config)

    return _collapse("p", expand_shorthand_box([edge(v) for v in values]))


def expand_border_radius(value: str, config: TranslatorConfig) -> str:
    """
    Map a ``border-radius`` shorthand.

    Elliptical radii (``a / b``) cannot be split per corner and keep the
    whole value in one bracket token.
    """
    if value in _ZERO:
        return "rounded-none"
    if "/" in value:
        return f"rounded-[{get_custom_val(value)}]"

    values = _box_values(value)
    if not values:
        return ""

    suffixes = ["-none" if v in _ZERO else radius_suffix(v, config) for v in values]
    tl, tr, br, bl = expand_shorthand_box(suffixes)
    if tl == tr == br == bl:
        return f"rounded{tl}"
    if tl == tr and br == bl:
        return f"rounded-t{tl} rounded-b{br}"
    if tl == bl and tr == br:
        return f"rounded-l{tl} rounded-r{tr}"
    return f"rounded-tl{tl} rounded-tr{tr} rounded-br{br} rounded-bl{bl}"


def expand_border(value: str, config: TranslatorConfig) -> str:
    """
    Map the ``border`` shorthand token by token.

    Each part is classified on its own as a style keyword, colour keyword,
    width or colour; anything else is dropped.
    """
    value = _PAREN_GROUP_PATTERN.sub(lambda m: _WHITESPACE_PATTERN.sub("", m.group(0)), value)
    widths = PROPERTY_DEFAULTS["border-width"] if config.use_default_scale else {}

    tokens: List[str] = []
    for part in split_values(value):
        if part in BORDER_STYLES:
            tokens.append(BORDER_STYLES[part])
        elif part in BORDER_KEYWORDS:
            tokens.append(BORDER_KEYWORDS[part])
        elif part in widths:
            tokens.append(widths[part])
        elif is_unit(part) or is_color(part):
            tokens.append(f"border-[{part}]")
    return " ".join(tokens)
