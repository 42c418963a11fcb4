"""
CSS property to utility-class mapping table.

Every supported property maps to one of two rule kinds:
- StaticRule: an exact value lookup (``display: none`` -> ``hidden``)
- TransformRule: a function for open-ended values such as colours and lengths

Transform functions share one shape. Named keywords are checked first, then a
classifier (``is_unit``/``is_color``) decides between a scale token and the
arbitrary-value bracket form (``w-[10px]`` or ``[aspect-ratio:16/9]``). An
empty string means the value has no mapping and the declaration is dropped.

Examples:
    >>> map_declaration("display", "none", TranslatorConfig())
    'hidden'
    >>> map_declaration("width", "50%", TranslatorConfig())
    'w-1/2'
    >>> map_declaration("margin-top", "-1rem", TranslatorConfig(prefix="tw-"))
    '-tw-mt-4'
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional, Tuple, Union

from .composite import map_backdrop_filter, map_filter, map_transform
from .config import DEFAULT_CONFIG, THEME_CATEGORIES, TranslatorConfig
from .css_utils import is_color
from .defaults import PROPERTY_DEFAULTS, REM_SCALE, lookup_fraction
from .logger import get_logger
from .shorthand import (
    BORDER_KEYWORDS,
    BORDER_STYLES,
    expand_border,
    expand_border_radius,
    expand_margin,
    expand_padding,
    radius_suffix,
    scale_suffix,
)
from .value_parsers import (
    get_custom_val,
    has_negative,
    is_unit,
    normalize_percentage,
    seconds_to_ms,
)

log = get_logger(__name__)

__all__ = [
    "StaticRule",
    "TransformRule",
    "PropertyRule",
    "PROPERTY_MAP",
    "map_declaration",
    "apply_prefix",
    "supported_properties",
]

Transform = Callable[[str, TranslatorConfig, bool], str]


@dataclass(frozen=True)
class StaticRule:
    """Exact value -> utility lookup."""

    table: Mapping[str, str]

    def apply(self, value: str, config: TranslatorConfig, is_custom: bool = False) -> str:
        return self.table.get(value, "")


@dataclass(frozen=True)
class TransformRule:
    """Computed mapping for open-ended values."""

    func: Transform

    def apply(self, value: str, config: TranslatorConfig, is_custom: bool = False) -> str:
        return self.func(value, config, is_custom)


PropertyRule = Union[StaticRule, TransformRule]

_ZERO = ("0", "0px")
_INTEGER_PATTERN = re.compile(r"^-?\d+$")
_TIME_PATTERN = re.compile(r"^[.\d]+[ms]{1,2}$")
_WHITESPACE_PATTERN = re.compile(r"\s")
_FAMILY_NAME_PATTERN = re.compile(r"^[A-Za-z][\w-]*$")


# ---------------------------------------------------------------------------
# Rule builders
# ---------------------------------------------------------------------------


def _bracketed(prop: str, *values: str) -> StaticRule:
    """Static table whose every entry is the ``[prop:value]`` form."""
    return StaticRule({value: f"[{prop}:{value}]" for value in values})


def _arbitrary(prop: str) -> TransformRule:
    """Any value, kept verbatim as ``[prop:value]``."""
    return TransformRule(lambda value, config, is_custom: f"[{prop}:{get_custom_val(value)}]")


def _arbitrary_unit(prop: str) -> TransformRule:
    """Length-like values only, as ``[prop:value]``."""
    return TransformRule(
        lambda value, config, is_custom: f"[{prop}:{value}]" if is_unit(value) else ""
    )


def _unit_utility(utility: str, keywords: Optional[Mapping[str, str]] = None) -> TransformRule:
    """Named keywords first, then ``utility-[length]``."""
    keywords = keywords or {}

    def rule(value: str, config: TranslatorConfig, is_custom: bool) -> str:
        if value in keywords:
            return keywords[value]
        return f"{utility}-[{value}]" if is_unit(value) else ""

    return TransformRule(rule)


def _keyword_or(utility: str, keywords: Mapping[str, str], key: Callable[[str], str] = str) -> TransformRule:
    """Named keywords first, then ``utility-[value]`` for anything else."""

    def rule(value: str, config: TranslatorConfig, is_custom: bool) -> str:
        found = keywords.get(key(value))
        if found:
            return found
        return f"{utility}-[{get_custom_val(value)}]"

    return TransformRule(rule)


def _keyword_or_arbitrary(prop: str, keywords: Mapping[str, str]) -> TransformRule:
    """Named keywords first, then ``[prop:value]``."""

    def rule(value: str, config: TranslatorConfig, is_custom: bool) -> str:
        return keywords.get(value) or f"[{prop}:{get_custom_val(value)}]"

    return TransformRule(rule)


def _color(utility: str, keywords: Optional[Mapping[str, str]] = None) -> TransformRule:
    """
    Colour utility (``bg-[#fff]``).

    With ``is_custom`` the value is a theme colour name and is used as is
    (``bg-primary``).
    """
    keywords = keywords or {}

    def rule(value: str, config: TranslatorConfig, is_custom: bool) -> str:
        if value in keywords:
            return keywords[value]
        if is_custom:
            return f"{utility}-{value}"
        if is_color(value, True):
            return f"{utility}-[{get_custom_val(value)}]"
        return ""

    return TransformRule(rule)


def _arbitrary_color(prop: str) -> TransformRule:
    """Colour property without a utility of its own: ``[prop:colour]``."""

    def rule(value: str, config: TranslatorConfig, is_custom: bool) -> str:
        if is_custom:
            return f"[{prop}:{value}]"
        if is_color(value, True):
            return f"[{prop}:{get_custom_val(value)}]"
        return ""

    return TransformRule(rule)


def _side_style(prop: str) -> TransformRule:
    return TransformRule(
        lambda value, config, is_custom: f"[{prop}:{value}]" if value in BORDER_STYLES else ""
    )


def _side_width(utility: str) -> TransformRule:
    return TransformRule(
        lambda value, config, is_custom: f"{utility}-[{get_custom_val(value)}]"
        if is_unit(value)
        else ""
    )


def _sized(utility: str, excludes: Tuple[str, ...]) -> TransformRule:
    """
    Width/height style utilities: spacing scale, then fractions, then brackets.

    ``excludes`` lists viewport keywords that would be misleading for the
    axis (``w-screen`` is 100vw, never 100vh).
    """

    def rule(value: str, config: TranslatorConfig, is_custom: bool) -> str:
        if not is_unit(value):
            return ""
        if value == "auto":
            return f"{utility}-auto"
        if config.use_default_scale:
            step = REM_SCALE.get(value) or lookup_fraction(normalize_percentage(value), *excludes)
            if step:
                return f"{utility}-{step}"
        return f"{utility}-[{value}]"

    return TransformRule(rule)


def _inset(utility: str) -> TransformRule:
    """Signed placement utilities (``top-1/2``, ``-left-[3px]``)."""

    def rule(value: str, config: TranslatorConfig, is_custom: bool) -> str:
        if not is_unit(value):
            return ""
        sign, rest = has_negative(value)
        if rest == "auto":
            return f"{sign}{utility}-auto"
        if config.use_default_scale:
            step = lookup_fraction(normalize_percentage(rest), "100vw", "100vh")
            if step:
                return f"{sign}{utility}-{step}"
        return f"{sign}{utility}-[{rest}]"

    return TransformRule(rule)


def _margin_side(utility: str) -> TransformRule:
    def rule(value: str, config: TranslatorConfig, is_custom: bool) -> str:
        if value in _ZERO:
            return f"{utility}-0"
        if value == "auto":
            return f"{utility}-auto"
        if not is_unit(value):
            return ""
        sign, rest = has_negative(value)
        return f"{sign}{utility}-{scale_suffix(rest, config)}"

    return TransformRule(rule)


def _padding_side(utility: str) -> TransformRule:
    def rule(value: str, config: TranslatorConfig, is_custom: bool) -> str:
        if value in _ZERO:
            return f"{utility}-0"
        if not is_unit(value):
            return ""
        return f"{utility}-{scale_suffix(value, config)}"

    return TransformRule(rule)


def _corner(corner: str) -> TransformRule:
    def rule(value: str, config: TranslatorConfig, is_custom: bool) -> str:
        if value in _ZERO:
            return f"rounded-{corner}-none"
        if not is_unit(value):
            return ""
        return f"rounded-{corner}{radius_suffix(value, config)}"

    return TransformRule(rule)


def _gap(utility: str) -> TransformRule:
    return _unit_utility(utility, {"0": f"{utility}-0"})


def _lines(utility: str, count: int, *extra: Tuple[str, str]) -> Dict[str, str]:
    """``1`` ... ``count`` -> ``utility-N`` plus extra named entries."""
    table = {str(n): f"{utility}-{n}" for n in range(1, count + 1)}
    table.update(dict(extra))
    return table


def _spans(utility: str, count: int) -> Dict[str, str]:
    table = {f"span {n} / span {n}": f"{utility}-span-{n}" for n in range(1, count + 1)}
    table["auto"] = f"{utility}-auto"
    table["1 / -1"] = f"{utility}-span-full"
    return table


def _template(utility: str, count: int) -> TransformRule:
    table = {f"repeat({n},minmax(0,1fr))": f"{utility}-{n}" for n in range(1, count + 1)}
    table["none"] = f"{utility}-none"
    return _keyword_or(utility, table, key=lambda value: get_custom_val(value).replace("_", ""))


def _timing(utility: str) -> TransformRule:
    steps = ("75", "100", "150", "200", "300", "500", "700", "1000")
    table = {f"{step}ms": f"{utility}-{step}" for step in steps}

    def rule(value: str, config: TranslatorConfig, is_custom: bool) -> str:
        value = seconds_to_ms(value)
        if value in table:
            return table[value]
        return f"{utility}-[{get_custom_val(value)}]" if _TIME_PATTERN.match(value) else ""

    return TransformRule(rule)


def _flex_factor(utility: str) -> TransformRule:
    def rule(value: str, config: TranslatorConfig, is_custom: bool) -> str:
        if not is_unit(value):
            return ""
        return {"0": f"{utility}-0", "1": utility}.get(value, f"{utility}-[{value}]")

    return TransformRule(rule)


# ---------------------------------------------------------------------------
# Individual transforms
# ---------------------------------------------------------------------------

_BACKGROUND_ATTACHMENT = {"fixed": "bg-fixed", "local": "bg-local", "scroll": "bg-scroll"}
_BACKGROUND_REPEAT = {
    "repeat": "bg-repeat",
    "no-repeat": "bg-no-repeat",
    "repeat-x": "bg-repeat-x",
    "repeat-y": "bg-repeat-y",
    "round": "bg-repeat-round",
    "space": "bg-repeat-space",
}
_BACKGROUND_POSITION = {
    "bottom": "bg-bottom",
    "center": "bg-center",
    "left": "bg-left",
    "left bottom": "bg-left-bottom",
    "left top": "bg-left-top",
    "right": "bg-right",
    "right bottom": "bg-right-bottom",
    "right top": "bg-right-top",
    "top": "bg-top",
}
_BACKGROUND_SIZE = {"auto": "bg-auto", "cover": "bg-cover", "contain": "bg-contain"}
_BACKGROUND = {
    **_BACKGROUND_ATTACHMENT,
    **_BACKGROUND_REPEAT,
    **_BACKGROUND_POSITION,
    **_BACKGROUND_SIZE,
    "transparent": "bg-transparent",
    "currentColor": "bg-current",
    "currentcolor": "bg-current",
    "none": "bg-none",
}
_BLEND_MODES = (
    "normal",
    "multiply",
    "screen",
    "overlay",
    "darken",
    "lighten",
    "color-dodge",
    "color-burn",
    "hard-light",
    "soft-light",
    "difference",
    "exclusion",
    "hue",
    "saturation",
    "color",
    "luminosity",
)


def _font_family(value: str, config: TranslatorConfig, is_custom: bool) -> str:
    if not value:
        return ""
    if _FAMILY_NAME_PATTERN.match(value):
        return f"font-{value}"
    return f"font-[{get_custom_val(value)}]"


def _z_index(value: str, config: TranslatorConfig, is_custom: bool) -> str:
    named = {"0": "z-0", "10": "z-10", "20": "z-20", "30": "z-30", "40": "z-40", "50": "z-50", "auto": "z-auto"}
    if value in named:
        return named[value]
    return f"z-[{value}]" if _INTEGER_PATTERN.match(value) else ""


def _transition(value: str, config: TranslatorConfig, is_custom: bool) -> str:
    if value == "none":
        return "transition-none"
    return f"[transition:{get_custom_val(value)}]"


def _timing_function(value: str, config: TranslatorConfig, is_custom: bool) -> str:
    value = _WHITESPACE_PATTERN.sub("", value)
    named = {
        "linear": "ease-linear",
        "cubic-bezier(0.4,0,1,1)": "ease-in",
        "cubic-bezier(0,0,0.2,1)": "ease-out",
        "cubic-bezier(0.4,0,0.2,1)": "ease-in-out",
        "ease": "ease-[ease]",
        "ease-in": "ease-in",
        "ease-out": "ease-out",
        "ease-in-out": "ease-in-out",
    }
    if value in named:
        return named[value]
    return f"ease-[{value}]" if value.startswith("cubic-bezier") else ""


def _composite(mapper: Callable[[str, TranslatorConfig], str]) -> TransformRule:
    return TransformRule(lambda value, config, is_custom: mapper(value, config))


def _shorthand(expander: Callable[[str, TranslatorConfig], str]) -> TransformRule:
    return TransformRule(lambda value, config, is_custom: expander(value, config))


# ---------------------------------------------------------------------------
# The table
# ---------------------------------------------------------------------------

PROPERTY_MAP: Dict[str, PropertyRule] = {
    # Alignment
    "align-content": StaticRule(
        {
            "center": "content-center",
            "flex-start": "content-start",
            "flex-end": "content-end",
            "space-between": "content-between",
            "space-around": "content-around",
            "space-evenly": "content-evenly",
        }
    ),
    "align-items": StaticRule(
        {
            "flex-start": "items-start",
            "flex-end": "items-end",
            "center": "items-center",
            "baseline": "items-baseline",
            "stretch": "items-stretch",
        }
    ),
    "align-self": StaticRule(
        {
            "auto": "self-auto",
            "flex-start": "self-start",
            "flex-end": "self-end",
            "center": "self-center",
            "stretch": "self-stretch",
            "baseline": "self-baseline",
        }
    ),
    "all": _bracketed("all", "initial", "inherit", "unset"),
    # Animation
    "animation": _keyword_or("animate", {"none": "animate-none"}),
    "animation-delay": _arbitrary("animation-delay"),
    "animation-direction": _arbitrary("animation-direction"),
    "animation-duration": _arbitrary("animation-duration"),
    "animation-fill-mode": _arbitrary("animation-fill-mode"),
    "animation-iteration-count": _arbitrary("animation-iteration-count"),
    "animation-name": _arbitrary("animation-name"),
    "animation-play-state": _arbitrary("animation-play-state"),
    "animation-timing-function": _arbitrary("animation-timing-function"),
    "appearance": _keyword_or_arbitrary("appearance", {"none": "appearance-none"}),
    "aspect-ratio": _arbitrary("aspect-ratio"),
    # Filters
    "backdrop-filter": _composite(map_backdrop_filter),
    "filter": _composite(map_filter),
    "backface-visibility": _bracketed("backface-visibility", "visible", "hidden"),
    # Background
    "background": _keyword_or("bg", _BACKGROUND),
    "background-attachment": StaticRule(_BACKGROUND_ATTACHMENT),
    "background-blend-mode": StaticRule({mode: f"bg-blend-{mode}" for mode in _BLEND_MODES}),
    "background-clip": StaticRule(
        {
            "border-box": "bg-clip-border",
            "padding-box": "bg-clip-padding",
            "content-box": "bg-clip-content",
            "text": "bg-clip-text",
        }
    ),
    "background-color": _color(
        "bg", {"transparent": "bg-transparent", "currentColor": "bg-current", "currentcolor": "bg-current"}
    ),
    "background-image": _keyword_or("bg", {"none": "bg-none"}),
    "background-origin": StaticRule(
        {
            "border-box": "bg-origin-border",
            "padding-box": "bg-origin-padding",
            "content-box": "bg-origin-content",
        }
    ),
    "background-position": _keyword_or("bg", _BACKGROUND_POSITION),
    "background-repeat": StaticRule(_BACKGROUND_REPEAT),
    "background-size": _keyword_or_arbitrary("background-size", _BACKGROUND_SIZE),
    # Border
    "border": _shorthand(expand_border),
    "border-collapse": StaticRule({"collapse": "border-collapse", "separate": "border-separate"}),
    "border-color": _color("border", BORDER_KEYWORDS),
    "border-image": _arbitrary("border-image"),
    "border-image-outset": _arbitrary("border-image-outset"),
    "border-image-repeat": _arbitrary("border-image-repeat"),
    "border-image-slice": _arbitrary("border-image-slice"),
    "border-image-source": _arbitrary("border-image-source"),
    "border-image-width": TransformRule(
        lambda value, config, is_custom: f"[border-image-width:{get_custom_val(value)}]"
        if is_unit(value)
        else ""
    ),
    "border-radius": _shorthand(expand_border_radius),
    "border-top-left-radius": _corner("tl"),
    "border-top-right-radius": _corner("tr"),
    "border-bottom-right-radius": _corner("br"),
    "border-bottom-left-radius": _corner("bl"),
    "border-spacing": TransformRule(
        lambda value, config, is_custom: f"[border-spacing:{get_custom_val(value)}]"
        if is_unit(value)
        else ""
    ),
    "border-style": StaticRule(BORDER_STYLES),
    "border-width": _side_width("border"),
    # Box
    "box-align": _bracketed("box-align", "initial", "start", "end", "center", "baseline", "stretch"),
    "box-decoration-break": StaticRule({"slice": "decoration-slice", "clone": "decoration-clone"}),
    "box-direction": _bracketed("box-direction", "initial", "normal", "reverse", "inherit"),
    "box-flex": _arbitrary("box-flex"),
    "box-flex-group": _arbitrary("box-flex-group"),
    "box-lines": _bracketed("box-lines", "single", "multiple", "initial"),
    "box-ordinal-group": _arbitrary("box-ordinal-group"),
    "box-orient": _bracketed(
        "box-orient", "horizontal", "vertical", "inline-axis", "block-axis", "inherit", "initial"
    ),
    "box-pack": _bracketed("box-pack", "start", "end", "center", "justify", "initial"),
    "box-shadow": _arbitrary("box-shadow"),
    "box-sizing": StaticRule({"border-box": "box-border", "content-box": "box-content"}),
    "caption-side": _bracketed("caption-side", "top", "bottom", "inherit", "initial"),
    "clear": StaticRule(
        {"left": "clear-left", "right": "clear-right", "both": "clear-both", "none": "clear-none"}
    ),
    "clip": _arbitrary("clip"),
    "clip-path": _arbitrary("clip-path"),
    "color": _color(
        "text",
        {"transparent": "text-transparent", "currentColor": "text-current", "currentcolor": "text-current"},
    ),
    "color-scheme": _arbitrary("color-scheme"),
    # Columns
    "column-count": _arbitrary("column-count"),
    "column-fill": _bracketed("column-fill", "balance", "auto", "initial"),
    "column-gap": _gap("gap-x"),
    "column-rule": _arbitrary("column-rule"),
    "column-rule-color": _arbitrary_color("column-rule-color"),
    "column-rule-style": _bracketed(
        "column-rule-style",
        "none",
        "hidden",
        "dotted",
        "dashed",
        "solid",
        "double",
        "groove",
        "ridge",
        "inset",
        "outset",
        "initial",
    ),
    "column-rule-width": _arbitrary_unit("column-rule-width"),
    "column-span": _arbitrary("column-span"),
    "column-width": _arbitrary_unit("column-width"),
    "columns": _arbitrary("columns"),
    "contain-intrinsic-size": _arbitrary("contain-intrinsic-size"),
    "content": TransformRule(lambda value, config, is_custom: f"content-[{get_custom_val(value)}]"),
    "content-visibility": _arbitrary("content-visibility"),
    "counter-increment": _arbitrary("counter-increment"),
    "counter-reset": _arbitrary("counter-reset"),
    "counter-set": _arbitrary("counter-set"),
    "cursor": StaticRule(
        {
            "auto": "cursor-auto",
            "default": "cursor-default",
            "pointer": "cursor-pointer",
            "wait": "cursor-wait",
            "text": "cursor-text",
            "move": "cursor-move",
            "help": "cursor-help",
            "not-allowed": "cursor-not-allowed",
        }
    ),
    "direction": _bracketed("direction", "ltr", "rtl", "inherit", "initial"),
    "display": StaticRule(
        {
            "block": "block",
            "inline-block": "inline-block",
            "inline": "inline",
            "flex": "flex",
            "inline-flex": "inline-flex",
            "table": "table",
            "inline-table": "inline-table",
            "table-caption": "table-caption",
            "table-cell": "table-cell",
            "table-column": "table-column",
            "table-column-group": "table-column-group",
            "table-footer-group": "table-footer-group",
            "table-header-group": "table-header-group",
            "table-row-group": "table-row-group",
            "table-row": "table-row",
            "flow-root": "flow-root",
            "grid": "grid",
            "inline-grid": "inline-grid",
            "contents": "contents",
            "list-item": "list-item",
            "none": "hidden",
        }
    ),
    "empty-cells": _bracketed("empty-cells", "hide", "show", "inherit", "initial"),
    "fill": _color("fill", {"currentColor": "fill-current", "currentcolor": "fill-current"}),
    # Flexbox
    "flex": _keyword_or(
        "flex",
        {"1 1 0%": "flex-1", "1 1 auto": "flex-auto", "0 1 auto": "flex-initial", "none": "flex-none"},
    ),
    "flex-basis": _arbitrary_unit("flex-basis"),
    "flex-direction": StaticRule(
        {
            "row": "flex-row",
            "row-reverse": "flex-row-reverse",
            "column": "flex-col",
            "column-reverse": "flex-col-reverse",
        }
    ),
    "flex-flow": _arbitrary("flex-flow"),
    "flex-grow": _flex_factor("flex-grow"),
    "flex-shrink": _flex_factor("flex-shrink"),
    "flex-wrap": StaticRule(
        {"wrap": "flex-wrap", "wrap-reverse": "flex-wrap-reverse", "nowrap": "flex-nowrap"}
    ),
    "float": StaticRule({"right": "float-right", "left": "float-left", "none": "float-none"}),
    # Font
    "font": _arbitrary("font"),
    "font-family": TransformRule(_font_family),
    "font-size": _unit_utility("text"),
    "font-size-adjust": _arbitrary_unit("font-size-adjust"),
    "-webkit-font-smoothing": StaticRule({"antialiased": "antialiased", "auto": "subpixel-antialiased"}),
    "-moz-osx-font-smoothing": StaticRule({"grayscale": "antialiased", "auto": "subpixel-antialiased"}),
    "font-stretch": _bracketed(
        "font-stretch",
        "wider",
        "narrower",
        "ultra-condensed",
        "extra-condensed",
        "condensed",
        "semi-condensed",
        "normal",
        "semi-expanded",
        "expanded",
        "extra-expanded",
        "ultra-expanded",
        "inherit",
        "initial",
    ),
    "font-style": StaticRule({"italic": "italic", "normal": "not-italic"}),
    "font-variant": _bracketed("font-variant", "normal", "small-caps", "inherit", "initial"),
    "font-variant-numeric": StaticRule(
        {
            "normal": "normal-nums",
            "ordinal": "ordinal",
            "slashed-zero": "slashed-zero",
            "lining-nums": "lining-nums",
            "oldstyle-nums": "oldstyle-nums",
            "proportional-nums": "proportional-nums",
            "tabular-nums": "tabular-nums",
            "diagonal-fractions": "diagonal-fractions",
            "stacked-fractions": "stacked-fractions",
        }
    ),
    "font-variation-settings": _arbitrary("font-variation-settings"),
    "font-weight": _unit_utility("font"),
    # Grid
    "gap": _gap("gap"),
    "grid": _arbitrary("grid"),
    "grid-area": _arbitrary("grid-area"),
    "grid-auto-columns": _keyword_or(
        "auto-cols",
        {
            "auto": "auto-cols-auto",
            "min-content": "auto-cols-min",
            "max-content": "auto-cols-max",
            "minmax(0, 1fr)": "auto-cols-fr",
        },
    ),
    "grid-auto-flow": TransformRule(
        lambda value, config, is_custom: {
            "row": "grid-flow-row",
            "column": "grid-flow-col",
            "row_dense": "grid-flow-row-dense",
            "column_dense": "grid-flow-col-dense",
        }.get(get_custom_val(value), "")
    ),
    "grid-auto-rows": _keyword_or(
        "auto-rows",
        {
            "auto": "auto-rows-auto",
            "min-content": "auto-rows-min",
            "max-content": "auto-rows-max",
            "minmax(0, 1fr)": "auto-rows-fr",
        },
    ),
    "grid-column": _keyword_or("col", _spans("col", 12)),
    "grid-column-end": _keyword_or("col-end", _lines("col-end", 13, ("auto", "col-end-auto"))),
    "grid-column-gap": _gap("gap-x"),
    "grid-column-start": _keyword_or("col-start", _lines("col-start", 13, ("auto", "col-start-auto"))),
    "grid-gap": _gap("gap"),
    "grid-row": _keyword_or("row", _spans("row", 6)),
    "grid-row-end": _keyword_or("row-end", _lines("row-end", 7, ("auto", "row-end-auto"))),
    "grid-row-gap": _gap("gap-y"),
    "grid-row-start": _keyword_or("row-start", _lines("row-start", 7, ("auto", "row-start-auto"))),
    "grid-rows": _arbitrary("grid-rows"),
    "grid-template": _arbitrary("grid-template"),
    "grid-template-areas": _arbitrary("grid-template-areas"),
    "grid-template-columns": _template("grid-cols", 12),
    "grid-template-rows": _template("grid-rows", 6),
    "hanging-punctuation": _bracketed(
        "hanging-punctuation", "none", "first", "last", "allow-end", "force-end", "initial"
    ),
    # Sizing
    "height": _sized("h", ("100vw",)),
    "width": _sized("w", ("100vh",)),
    "max-height": _unit_utility("max-h", {"0px": "max-h-0", "100%": "max-h-full", "100vh": "max-h-screen"}),
    "max-width": _unit_utility(
        "max-w",
        {"none": "max-w-none", "100%": "max-w-full", "min-content": "max-w-min", "max-content": "max-w-max"},
    ),
    "min-height": _unit_utility("min-h", {"0px": "min-h-0", "100%": "min-h-full", "100vh": "min-h-screen"}),
    "min-width": _unit_utility(
        "min-w",
        {"0px": "min-w-0", "100%": "min-w-full", "min-content": "min-w-min", "max-content": "min-w-max"},
    ),
    "icon": _arbitrary("icon"),
    "image-orientation": _arbitrary("image-orientation"),
    "isolation": StaticRule({"isolate": "isolate", "auto": "isolation-auto"}),
    "justify-content": StaticRule(
        {
            "flex-start": "justify-start",
            "flex-end": "justify-end",
            "center": "justify-center",
            "space-between": "justify-between",
            "space-around": "justify-around",
            "space-evenly": "justify-evenly",
        }
    ),
    "justify-items": StaticRule(
        {
            "start": "justify-items-start",
            "end": "justify-items-end",
            "center": "justify-items-center",
            "stretch": "justify-items-stretch",
        }
    ),
    "justify-self": StaticRule(
        {
            "auto": "justify-self-auto",
            "start": "justify-self-start",
            "end": "justify-self-end",
            "center": "justify-self-center",
            "stretch": "justify-self-stretch",
        }
    ),
    # Placement
    "top": _inset("top"),
    "right": _inset("right"),
    "bottom": _inset("bottom"),
    "left": _inset("left"),
    # Typography
    "letter-spacing": _unit_utility(
        "tracking",
        {
            "-0.05em": "tracking-tighter",
            "-0.025em": "tracking-tight",
            "0em": "tracking-normal",
            "0.025em": "tracking-wide",
            "0.05em": "tracking-wider",
            "0.1em": "tracking-widest",
        },
    ),
    "line-height": _unit_utility(
        "leading",
        {
            "1": "leading-none",
            "2": "leading-loose",
            "1.25": "leading-tight",
            "1.375": "leading-snug",
            "1.5": "leading-normal",
            "1.625": "leading-relaxed",
        },
    ),
    "list-style": _arbitrary("list-style"),
    "list-style-image": _arbitrary("list-style-image"),
    "list-style-position": _keyword_or_arbitrary(
        "list-style-position", {"inside": "list-inside", "outside": "list-outside"}
    ),
    "list-style-type": _keyword_or(
        "list", {"none": "list-none", "disc": "list-disc", "decimal": "list-decimal"}
    ),
    "logical-height": _arbitrary_unit("logical-height"),
    "logical-width": _arbitrary_unit("logical-width"),
    # Spacing
    "margin": _shorthand(expand_margin),
    "margin-top": _margin_side("mt"),
    "margin-right": _margin_side("mr"),
    "margin-bottom": _margin_side("mb"),
    "margin-left": _margin_side("ml"),
    "padding": _shorthand(expand_padding),
    "padding-top": _padding_side("pt"),
    "padding-right": _padding_side("pr"),
    "padding-bottom": _padding_side("pb"),
    "padding-left": _padding_side("pl"),
    # Mask
    "mask": _arbitrary("mask"),
    "mask-clip": _arbitrary("mask-clip"),
    "mask-composite": _arbitrary("mask-composite"),
    "mask-image": _arbitrary("mask-image"),
    "mask-origin": _arbitrary("mask-origin"),
    "mask-position": _arbitrary("mask-position"),
    "mask-repeat": _arbitrary("mask-repeat"),
    "mask-size": _arbitrary("mask-size"),
    "mix-blend-mode": StaticRule({mode: f"mix-blend-{mode}" for mode in _BLEND_MODES}),
    "nav-down": _arbitrary("nav-down"),
    "nav-index": _arbitrary_unit("nav-index"),
    "nav-left": _arbitrary_unit("nav-left"),
    "nav-right": _arbitrary_unit("nav-right"),
    "nav-up": _arbitrary_unit("nav-up"),
    # Object
    "object-fit": StaticRule(
        {
            "contain": "object-contain",
            "cover": "object-cover",
            "fill": "object-fill",
            "none": "object-none",
            "scale-down": "object-scale-down",
        }
    ),
    "object-position": TransformRule(
        lambda value, config, is_custom: {
            "bottom": "object-bottom",
            "center": "object-center",
            "left": "object-left",
            "left_bottom": "object-left-bottom",
            "left_top": "object-left-top",
            "right": "object-right",
            "right_bottom": "object-right-bottom",
            "right_top": "object-right-top",
            "top": "object-top",
        }.get(get_custom_val(value), "")
    ),
    "opacity": _unit_utility(
        "opacity",
        {
            "0": "opacity-0",
            "1": "opacity-100",
            "0.05": "opacity-5",
            "0.1": "opacity-10",
            "0.2": "opacity-20",
            "0.25": "opacity-25",
            "0.3": "opacity-30",
            "0.4": "opacity-40",
            "0.5": "opacity-50",
            "0.6": "opacity-60",
            "0.7": "opacity-70",
            "0.75": "opacity-75",
            "0.8": "opacity-80",
            "0.9": "opacity-90",
            "0.95": "opacity-95",
        },
    ),
    "order": _unit_utility(
        "order",
        _lines("order", 12, ("0", "order-none"), ("9999", "order-last"), ("-9999", "order-first")),
    ),
    # Outline
    "outline": TransformRule(lambda value, config, is_custom: f"outline-[{get_custom_val(value)}]"),
    "outline-color": _color("outline"),
    "outline-offset": _unit_utility("outline-offset"),
    "outline-style": StaticRule(
        {
            "none": "outline-[none]",
            "dotted": "outline-dotted",
            "dashed": "outline-dashed",
            "solid": "[outline-style:solid]",
            "double": "outline-double",
            "groove": "[outline-style:groove]",
            "ridge": "[outline-style:ridge]",
            "inset": "[outline-style:inset]",
            "outset": "[outline-style:outset]",
        }
    ),
    "outline-width": _unit_utility("outline"),
    # Overflow
    "overflow": StaticRule({v: f"overflow-{v}" for v in ("auto", "hidden", "visible", "scroll")}),
    "overflow-anchor": _arbitrary("overflow-anchor"),
    "overflow-wrap": _keyword_or_arbitrary("overflow-wrap", {"break-word": "break-words"}),
    "overflow-x": StaticRule({v: f"overflow-x-{v}" for v in ("auto", "hidden", "visible", "scroll")}),
    "overflow-y": StaticRule({v: f"overflow-y-{v}" for v in ("auto", "hidden", "visible", "scroll")}),
    "overscroll-behavior": StaticRule({v: f"overscroll-{v}" for v in ("auto", "contain", "none")}),
    "overscroll-behavior-x": StaticRule({v: f"overscroll-x-{v}" for v in ("auto", "contain", "none")}),
    "overscroll-behavior-y": StaticRule({v: f"overscroll-y-{v}" for v in ("auto", "contain", "none")}),
    # Paging
    "page-break-after": _bracketed(
        "page-break-after", "auto", "always", "avoid", "left", "right", "inherit", "initial"
    ),
    "page-break-before": _bracketed(
        "page-break-before", "auto", "always", "avoid", "left", "right", "inherit", "initial"
    ),
    "page-break-inside": _bracketed("page-break-inside", "auto", "avoid", "inherit", "initial"),
    "perspective": _arbitrary_unit("perspective"),
    "perspective-origin": _arbitrary("perspective-origin"),
    # Place
    "place-content": StaticRule(
        {
            "center": "place-content-center",
            "start": "place-content-start",
            "end": "place-content-end",
            "space-between": "place-content-between",
            "space-around": "place-content-around",
            "space-evenly": "place-content-evenly",
            "stretch": "place-content-stretch",
        }
    ),
    "place-items": StaticRule({v: f"place-items-{v}" for v in ("start", "end", "center", "stretch")}),
    "place-self": StaticRule(
        {v: f"place-self-{v}" for v in ("auto", "start", "end", "center", "stretch")}
    ),
    "pointer-events": StaticRule({"none": "pointer-events-none", "auto": "pointer-events-auto"}),
    "position": StaticRule({v: v for v in ("static", "fixed", "absolute", "relative", "sticky")}),
    "punctuation-trim": _bracketed(
        "punctuation-trim", "none", "start", "end", "allow-end", "adjacent", "initial"
    ),
    "quotes": _arbitrary("quotes"),
    "resize": StaticRule(
        {"none": "resize-none", "vertical": "resize-y", "horizontal": "resize-x", "both": "resize"}
    ),
    "rotate": _arbitrary("rotate"),
    "row-gap": _gap("gap-y"),
    # Scrolling
    "scroll-snap-align": _arbitrary("scroll-snap-align"),
    "scroll-snap-stop": _arbitrary("scroll-snap-stop"),
    "scroll-snap-type": _arbitrary("scroll-snap-type"),
    "scrollbar-width": _arbitrary_unit("scrollbar-width"),
    "shape-image-threshold": _arbitrary("shape-image-threshold"),
    "shape-margin": _arbitrary("shape-margin"),
    "shape-outside": _arbitrary("shape-outside"),
    # SVG
    "stroke": _color("stroke", {"currentColor": "stroke-current", "currentcolor": "stroke-current"}),
    "stroke-width": _unit_utility("stroke"),
    # Table
    "tab-size": _arbitrary_unit("tab-size"),
    "table-layout": StaticRule({"auto": "table-auto", "fixed": "table-fixed"}),
    "target": _arbitrary("target"),
    "target-name": _arbitrary("target-name"),
    "target-new": _bracketed("target-new", "window", "tab", "none", "initial"),
    "target-position": _bracketed("target-position", "above", "behind", "front", "back", "initial"),
    # Text
    "text-align": StaticRule(
        {v: f"text-{v}" for v in ("left", "center", "right", "justify", "start", "end")}
    ),
    "text-align-last": _bracketed(
        "text-align-last",
        "auto",
        "left",
        "right",
        "center",
        "justify",
        "start",
        "end",
        "initial",
        "inherit",
    ),
    "text-decoration": StaticRule(
        {"underline": "underline", "line-through": "line-through", "none": "no-underline"}
    ),
    "text-decoration-color": _arbitrary_color("text-decoration-color"),
    "text-decoration-line": _bracketed(
        "text-decoration-line", "none", "underline", "overline", "line-through", "initial", "inherit"
    ),
    "text-decoration-skip-ink": _arbitrary("text-decoration-skip-ink"),
    "text-decoration-style": _bracketed(
        "text-decoration-style", "solid", "double", "dotted", "dashed", "wavy", "initial", "inherit"
    ),
    "text-emphasis-color": _arbitrary_color("text-emphasis-color"),
    "text-emphasis-position": _arbitrary("text-emphasis-position"),
    "text-emphasis-style": _arbitrary("text-emphasis-style"),
    "text-indent": _arbitrary_unit("text-indent"),
    "text-justify": _bracketed(
        "text-justify",
        "auto",
        "none",
        "inter-word",
        "inter-ideograph",
        "inter-cluster",
        "distribute",
        "kashida",
        "initial",
    ),
    "text-orientation": _arbitrary("text-orientation"),
    "text-outline": _arbitrary("text-outline"),
    "text-overflow": _keyword_or_arbitrary(
        "text-overflow", {"ellipsis": "overflow-ellipsis", "clip": "overflow-clip"}
    ),
    "text-shadow": _arbitrary("text-shadow"),
    "text-transform": StaticRule(
        {
            "uppercase": "uppercase",
            "lowercase": "lowercase",
            "capitalize": "capitalize",
            "none": "normal-case",
        }
    ),
    "text-underline-offset": _arbitrary("text-underline-offset"),
    "text-underline-position": _arbitrary("text-underline-position"),
    "text-wrap": _bracketed("text-wrap", "normal", "none", "unrestricted", "suppress", "initial"),
    # Transform & transition
    "transform": _composite(map_transform),
    "transform-origin": _keyword_or(
        "origin",
        {
            "center": "origin-center",
            "top": "origin-top",
            "top_right": "origin-top-right",
            "right": "origin-right",
            "bottom_right": "origin-bottom-right",
            "bottom": "origin-bottom",
            "bottom_left": "origin-bottom-left",
            "left": "origin-left",
            "top_left": "origin-top-left",
        },
        key=get_custom_val,
    ),
    "transform-style": _bracketed("transform-style", "flat", "preserve-3d", "initial"),
    "transition": TransformRule(_transition),
    "transition-delay": _timing("delay"),
    "transition-duration": _timing("duration"),
    "transition-property": _arbitrary("transition-property"),
    "transition-timing-function": TransformRule(_timing_function),
    "unicode-bidi": _bracketed("unicode-bidi", "normal", "embed", "bidi-override", "initial", "inherit"),
    "user-select": StaticRule(
        {"none": "select-none", "text": "select-text", "all": "select-all", "auto": "select-auto"}
    ),
    "vertical-align": StaticRule(
        {
            "baseline": "align-baseline",
            "top": "align-top",
            "middle": "align-middle",
            "bottom": "align-bottom",
            "text-top": "align-text-top",
            "text-bottom": "align-text-bottom",
        }
    ),
    "visibility": StaticRule({"visible": "visible", "hidden": "invisible"}),
    "white-space": StaticRule(
        {v: f"whitespace-{v}" for v in ("normal", "nowrap", "pre", "pre-line", "pre-wrap")}
    ),
    "word-break": StaticRule(
        {
            "break-all": "break-all",
            "normal": "[word-break:normal]",
            "keep-all": "[word-break:keep-all]",
            "initial": "[word-break:initial]",
        }
    ),
    "word-spacing": _arbitrary_unit("word-spacing"),
    "word-wrap": _bracketed("word-wrap", "normal", "break-word", "initial"),
    "writing-mode": _arbitrary("writing-mode"),
    "z-index": TransformRule(_z_index),
}

# Per-side border properties share one shape
for _side, _abbr in (("top", "t"), ("right", "r"), ("bottom", "b"), ("left", "l")):
    PROPERTY_MAP[f"border-{_side}"] = _arbitrary(f"border-{_side}")
    PROPERTY_MAP[f"border-{_side}-color"] = _arbitrary_color(f"border-{_side}-color")
    PROPERTY_MAP[f"border-{_side}-style"] = _side_style(f"border-{_side}-style")
    PROPERTY_MAP[f"border-{_side}-width"] = _side_width(f"border-{_abbr}")


def apply_prefix(tokens: str, prefix: str) -> str:
    """
    Prefix every whitespace separated token, keeping a leading minus in front.

    Examples:
        - ("mt-4 -ml-2", "tw-") -> "tw-mt-4 -tw-ml-2"
    """
    if not prefix or not tokens:
        return tokens
    prefixed: List[str] = []
    for token in tokens.split(" "):
        if not token:
            continue
        sign, rest = has_negative(token)
        prefixed.append(f"{sign}{prefix}{rest}")
    return " ".join(prefixed)


def map_declaration(
    prop: str,
    value: str,
    config: TranslatorConfig = DEFAULT_CONFIG,
    is_custom: bool = False,
) -> str:
    """
    Map a single ``property: value`` declaration to utility tokens.

    Lookup order: ``initial``/``inherit`` keywords, theme override for the
    property, per-property default table (when the default scale is on),
    then the property rule. Theme keys that name a category (``rotate``,
    ``media``...) hold suffixes for the decomposers and are not used as
    property overrides.

    Args:
        prop: CSS property name
        value: Declaration value with ``!important`` already removed
        config: Translator configuration
        is_custom: Treat colour values as theme colour names

    Returns:
        Space separated utility tokens, or "" when nothing maps
    """
    prop = prop.strip()
    value = value.strip()
    if not prop or not value:
        return ""

    if value in ("initial", "inherit"):
        return apply_prefix(f"[{prop}:{value}]", config.prefix)

    rule = PROPERTY_MAP.get(prop)
    mapped = None if prop in THEME_CATEGORIES else config.theme_value(prop, value)
    if not mapped and config.use_default_scale:
        mapped = PROPERTY_DEFAULTS.get(prop, {}).get(value)
    if not mapped:
        if rule is None:
            log.debug("Unsupported property: %s", prop)
            return ""
        mapped = rule.apply(value, config, is_custom)

    return apply_prefix(mapped, config.prefix)


def supported_properties() -> List[str]:
    """Sorted names of every property with a mapping rule."""
    return sorted(PROPERTY_MAP)
