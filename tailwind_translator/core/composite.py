"""
Decomposition of ``transform``, ``filter`` and ``backdrop-filter`` values.

The value is split into its top-level ``name(args)`` calls and every call is
mapped on its own. The result is all-or-nothing: one unknown function, an
unsupported argument count (such as the 3D ``scale(1,1,1)``) or a stray
segment that is not a call sends the whole value to ``[property:value]``.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from .config import TranslatorConfig
from .defaults import (
    BACKDROP_OPACITY_DEFAULTS,
    DROP_SHADOW_DEFAULTS,
    FILTER_DEFAULTS,
    ROTATE_DEFAULTS,
    SCALE_DEFAULTS,
    SKEW_DEFAULTS,
    TRANSLATE_DEFAULTS,
)
from .logger import get_logger
from .value_parsers import get_custom_val, has_negative, normalize_percentage

log = get_logger(__name__)

__all__ = [
    "split_calls",
    "map_transform",
    "map_filter",
    "map_backdrop_filter",
]

_CALL_PATTERN = re.compile(r"^([a-zA-Z][a-zA-Z0-9_-]*)\((.*)\)$")
_COMMA_SPACE_PATTERN = re.compile(r",\s+")

FILTER_FUNCTIONS = (
    "blur",
    "brightness",
    "contrast",
    "grayscale",
    "hue-rotate",
    "invert",
    "saturate",
    "sepia",
)
BACKDROP_FUNCTIONS = FILTER_FUNCTIONS + ("opacity",)

# Sub-mappers return None when the call cannot be expressed as utilities
SubMapper = Callable[[str, TranslatorConfig], Optional[str]]


def _balanced(text: str) -> bool:
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def split_calls(value: str) -> Optional[List[Tuple[str, str]]]:
    """
    Split a canonical (underscore separated) value into ``(name, args)`` calls.

    Whitespace inside the arguments is removed. Returns None when any
    top-level segment is not a single well-formed call.

    Examples:
        - "scale(1.5)_rotate(45deg)" -> [("scale", "1.5"), ("rotate", "45deg")]
        - "blur(4px)_foo" -> None
    """
    segments: List[str] = []
    depth = 0
    start = 0
    for index, char in enumerate(value):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char == "_" and depth == 0:
            segments.append(value[start:index])
            start = index + 1
    segments.append(value[start:])

    calls: List[Tuple[str, str]] = []
    for segment in segments:
        if segment == "":
            continue
        match = _CALL_PATTERN.match(segment)
        if not match or not _balanced(match.group(2)):
            return None
        calls.append((match.group(1), match.group(2).replace("_", "")))
    return calls


def _suffix(
    value: str, category: str, defaults: Mapping[str, str], config: TranslatorConfig
) -> str:
    themed = config.theme_value(category, value)
    if themed:
        return themed
    if config.use_default_scale and value in defaults:
        return defaults[value]
    return f"[{value}]"


def _axis_tokens(
    name: str,
    args: List[str],
    defaults: Mapping[str, str],
    config: TranslatorConfig,
    signed: bool = True,
    percentages: bool = False,
) -> str:
    tokens = []
    for axis, arg in zip(("x", "y"), args):
        sign, rest = has_negative(arg) if signed else ("", arg)
        if percentages:
            rest = normalize_percentage(rest)
        tokens.append(f"{sign}{name}-{axis}-{_suffix(rest, name, defaults, config)}")
    return " ".join(tokens)


def _scale(args: str, config: TranslatorConfig) -> Optional[str]:
    values = args.split(",")
    if len(values) == 1 or (len(values) == 2 and values[0] == values[1]):
        return f"scale-{_suffix(values[0], 'scale', SCALE_DEFAULTS, config)}"
    if len(values) == 2:
        return _axis_tokens("scale", values, SCALE_DEFAULTS, config, signed=False)
    return None


def _single_axis(name: str, axis: str, defaults: Mapping[str, str], **options) -> SubMapper:
    def mapper(args: str, config: TranslatorConfig) -> Optional[str]:
        if "," in args:
            return None
        sign, rest = has_negative(args) if options.get("signed", True) else ("", args)
        if options.get("percentages"):
            rest = normalize_percentage(rest)
        return f"{sign}{name}-{axis}-{_suffix(rest, name, defaults, config)}"

    return mapper


def _rotate(args: str, config: TranslatorConfig) -> Optional[str]:
    if "," in args:
        return None
    sign, rest = has_negative(args)
    return f"{sign}rotate-{_suffix(rest, 'rotate', ROTATE_DEFAULTS, config)}"


def _translate(args: str, config: TranslatorConfig) -> Optional[str]:
    values = args.split(",")
    if len(values) > 2:
        return None
    return _axis_tokens("translate", values, TRANSLATE_DEFAULTS, config, percentages=True)


def _skew(args: str, config: TranslatorConfig) -> Optional[str]:
    values = args.split(",")
    if len(values) > 2:
        return None
    return _axis_tokens("skew", values, SKEW_DEFAULTS, config)


TRANSFORM_FUNCTIONS: Dict[str, SubMapper] = {
    "scale": _scale,
    "scaleX": _single_axis("scale", "x", SCALE_DEFAULTS, signed=False),
    "scaleY": _single_axis("scale", "y", SCALE_DEFAULTS, signed=False),
    "rotate": _rotate,
    "rotateZ": _rotate,
    "translate": _translate,
    "translateX": _single_axis("translate", "x", TRANSLATE_DEFAULTS, percentages=True),
    "translateY": _single_axis("translate", "y", TRANSLATE_DEFAULTS, percentages=True),
    "skew": _skew,
    "skewX": _single_axis("skew", "x", SKEW_DEFAULTS),
    "skewY": _single_axis("skew", "y", SKEW_DEFAULTS),
}


def _filter_token(name: str, args: str, config: TranslatorConfig, backdrop: bool) -> Optional[str]:
    allowed = BACKDROP_FUNCTIONS if backdrop else FILTER_FUNCTIONS
    if name not in allowed or "," in args:
        return None

    utility = f"backdrop-{name}" if backdrop else name
    sign, rest = has_negative(args) if name == "hue-rotate" else ("", args)

    themed = config.theme_value(utility, rest)
    if themed:
        return f"{sign}{utility}-{themed}"

    if config.use_default_scale:
        call = f"{name}({args})"
        if backdrop and call in BACKDROP_OPACITY_DEFAULTS:
            return BACKDROP_OPACITY_DEFAULTS[call]
        default = FILTER_DEFAULTS.get(call)
        if default and backdrop:
            sign, default = has_negative(default)
            return f"{sign}backdrop-{default}"
        if default:
            return default

    return f"{sign}{utility}-[{rest}]"


def _decompose(
    prop: str, value: str, config: TranslatorConfig, mapper: Callable[[str, str], Optional[str]]
) -> Optional[List[str]]:
    canonical = get_custom_val(value)
    calls = split_calls(canonical)
    if calls is None:
        log.debug("Unparseable %s value %r", prop, value)
        return None

    tokens: List[str] = []
    for name, args in calls:
        mapped = mapper(name, args)
        if mapped is None:
            log.debug("Unsupported %s function %s(%s)", prop, name, args)
            return None
        for token in mapped.split(" "):
            if token and token not in tokens:
                tokens.append(token)
    return tokens


def map_transform(value: str, config: TranslatorConfig) -> str:
    if value == "none":
        return "transform-none"

    def mapper(name: str, args: str) -> Optional[str]:
        func = TRANSFORM_FUNCTIONS.get(name)
        return func(args, config) if func else None

    tokens = _decompose("transform", value, config, mapper)
    if tokens is None:
        return f"[transform:{get_custom_val(value)}]"
    return " ".join(tokens)


def map_filter(value: str, config: TranslatorConfig) -> str:
    if value == "none":
        return "filter-none"

    if config.use_default_scale:
        shadow = DROP_SHADOW_DEFAULTS.get(_COMMA_SPACE_PATTERN.sub(",", value.strip()))
        if shadow:
            return f"filter {shadow}"

    tokens = _decompose(
        "filter", value, config, lambda name, args: _filter_token(name, args, config, False)
    )
    if tokens is None:
        return f"[filter:{get_custom_val(value)}]"
    if not tokens:
        return ""
    return " ".join(["filter"] + tokens)


def map_backdrop_filter(value: str, config: TranslatorConfig) -> str:
    if value == "none":
        return "backdrop-filter-none"

    tokens = _decompose(
        "backdrop-filter",
        value,
        config,
        lambda name, args: _filter_token(name, args, config, True),
    )
    if tokens is None:
        return f"[backdrop-filter:{get_custom_val(value)}]"
    if not tokens:
        return ""
    return " ".join(["backdrop-filter"] + tokens)
