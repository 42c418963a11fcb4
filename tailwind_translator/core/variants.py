"""
Variant decoration of mapped utility tokens.

Applied in a fixed order to the tokens of one declaration:
1. ``!important`` marker
2. pseudo-class / pseudo-element variant taken from the selector suffix
3. responsive breakpoint from an enclosing media query

Composite outputs (``filter ...``, ``backdrop-filter ...``, ``transform-none``)
are decorated as one unit; everything else token by token.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from .config import TranslatorConfig
from .defaults import MEDIA_DEFAULTS
from .value_parsers import get_custom_val

__all__ = [
    "PSEUDO_VARIANTS",
    "COMPOSITE_PREFIXES",
    "is_composite",
    "mark_important",
    "pseudo_variant",
    "canonical_media",
    "media_prefix",
    "decorate",
]

# Checked in order, first matching selector suffix wins
PSEUDO_VARIANTS: Tuple[Tuple[str, str], ...] = (
    (":hover", "hover"),
    (":focus", "focus"),
    (":active", "active"),
    ("::before", "before"),
    ("::after", "after"),
)

COMPOSITE_PREFIXES = ("backdrop-filter", "filter", "transform")

_PAREN_GROUP_PATTERN = re.compile(r"\(.+\)")
_WHITESPACE_PATTERN = re.compile(r"\s")
_SPACE_BEFORE_PAREN_PATTERN = re.compile(r"\s+\(")


def is_composite(tokens: str) -> bool:
    return tokens.startswith(COMPOSITE_PREFIXES)


def _important(token: str) -> str:
    if token.startswith("[") and token.endswith("]"):
        return f"{token[:-1]}!important]"
    return f"!{token}"


def mark_important(tokens: str) -> str:
    """
    Add the important marker.

    Examples:
        - "w-4 h-4" -> "!w-4 !h-4"
        - "[aspect-ratio:16/9]" -> "[aspect-ratio:16/9!important]"
        - "filter blur-sm" -> "!filter blur-sm"
    """
    if not tokens:
        return tokens
    if " " in tokens and not is_composite(tokens):
        return " ".join(_important(token) for token in tokens.split(" "))
    return _important(tokens)


def _with_variant(tokens: str, variant: str, composite: bool) -> str:
    if composite:
        return f"{variant}:{tokens}"
    return " ".join(f"{variant}:{token}" for token in tokens.split(" "))


def pseudo_variant(selector: str) -> Optional[str]:
    """Variant name for a selector ending in a supported pseudo-class/element."""
    for suffix, variant in PSEUDO_VARIANTS:
        if selector.endswith(suffix):
            return variant
    return None


def canonical_media(at_rule: str) -> str:
    """
    Normalise a media query for table lookup.

    Whitespace inside the condition is removed and remaining spaces become
    underscores: "@media not all and (min-width: 640px)" ->
    "@media_not_all_and(min-width:640px)".
    """
    text = _PAREN_GROUP_PATTERN.sub(lambda m: _WHITESPACE_PATTERN.sub("", m.group(0)), at_rule)
    text = _SPACE_BEFORE_PAREN_PATTERN.sub("(", text)
    return get_custom_val(text)


def media_prefix(at_rule: str, config: TranslatorConfig) -> str:
    """Breakpoint prefix for an ``@media`` wrapper (``md`` or ``[@media(...)]``)."""
    canonical = canonical_media(at_rule)
    themed = config.theme_value("media", at_rule) or config.theme_value("media", canonical)
    if themed:
        return themed
    if config.use_default_scale and canonical in MEDIA_DEFAULTS:
        return MEDIA_DEFAULTS[canonical]
    return f"[{canonical}]"


def decorate(
    selector: str,
    tokens: str,
    media: Optional[str] = None,
    important: bool = False,
) -> str:
    """
    Apply important, pseudo and breakpoint variants to mapped tokens.

    Args:
        selector: Rule selector the declaration belongs to
        tokens: Space separated utilities for one declaration
        media: Breakpoint prefix from ``media_prefix`` when nested in ``@media``
        important: Declaration carried ``!important``

    Returns:
        Decorated tokens ("" stays "")
    """
    if not tokens:
        return tokens
    composite = is_composite(tokens)
    if important:
        tokens = mark_important(tokens)
    variant = pseudo_variant(selector)
    if variant:
        tokens = _with_variant(tokens, variant, composite)
    if media:
        tokens = _with_variant(tokens, media, composite)
    return tokens
