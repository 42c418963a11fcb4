from __future__ import annotations

import re
from typing import List, Optional, Tuple

from .logger import get_logger

log = get_logger(__name__)

__all__ = [
    "NAMED_COLORS",
    "FORBIDDEN_AT_RULES",
    "is_color",
    "split_declarations",
    "strip_important",
    "find_forbidden_at_rule",
]

# At-rules the translator refuses outright (raw substring match)
FORBIDDEN_AT_RULES: Tuple[str, ...] = ("@charset", "@font-face", "@import", "@keyframes")

_IMPORTANT = "!important"

_HEX_PATTERN = r"^\s*#([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})\s*$"
_RGB_PATTERN = (
    r"^\s*rgb\(\s*(\d{1,3}|[a-z]+)\s*,\s*(\d{1,3}|[a-z]+)\s*,\s*(\d{1,3}|[a-z]+)\s*\)\s*$"
)
_RGBA_PATTERN = (
    r"^\s*rgba\(\s*(\d{1,3}|[a-z]+)\s*,\s*(\d{1,3}|[a-z]+)\s*,\s*(\d{1,3}|[a-z]+)\s*,"
    r"\s*(\d*(\.\d+)?)\s*\)\s*$"
)
_HSL_PATTERN = r"^\s*hsl\(\s*(\d+)\s*,\s*(\d*(\.\d+)?%)\s*,\s*(\d*(\.\d+)?%)\)\s*$"
_HSLA_PATTERN = r"^\s*hsla\((\d+)\s*,\s*([\d.]+)%\s*,\s*([\d.]+)%\s*,\s*(\d*(\.\d+)?)\)\s*$"

_COLOR_FUNCTION_PATTERN = re.compile(
    "|".join((_HEX_PATTERN, _RGB_PATTERN, _RGBA_PATTERN, _HSL_PATTERN, _HSLA_PATTERN)),
    re.IGNORECASE,
)
_LINEAR_GRADIENT_PATTERN = re.compile(r"^\s*linear-gradient\([\w\W]+?\)\s*$")

NAMED_COLORS = frozenset(
    {
        "initial",
        "inherit",
        "currentColor",
        "currentcolor",
        "transparent",
        "aliceblue",
        "antiquewhite",
        "aqua",
        "aquamarine",
        "azure",
        "beige",
        "bisque",
        "black",
        "blanchedalmond",
        "blue",
        "blueviolet",
        "brown",
        "burlywood",
        "cadetblue",
        "chartreuse",
        "chocolate",
        "coral",
        "cornflowerblue",
        "cornsilk",
        "crimson",
        "cyan",
        "darkblue",
        "darkcyan",
        "darkgoldenrod",
        "darkgray",
        "darkgrey",
        "darkgreen",
        "darkkhaki",
        "darkmagenta",
        "darkolivegreen",
        "darkorange",
        "darkorchid",
        "darkred",
        "darksalmon",
        "darkseagreen",
        "darkslateblue",
        "darkslategray",
        "darkslategrey",
        "darkturquoise",
        "darkviolet",
        "deeppink",
        "deepskyblue",
        "dimgray",
        "dimgrey",
        "dodgerblue",
        "firebrick",
        "floralwhite",
        "forestgreen",
        "fuchsia",
        "gainsboro",
        "ghostwhite",
        "gold",
        "goldenrod",
        "gray",
        "grey",
        "green",
        "greenyellow",
        "honeydew",
        "hotpink",
        "indianred",
        "indigo",
        "ivory",
        "khaki",
        "lavender",
        "lavenderblush",
        "lawngreen",
        "lemonchiffon",
        "lightblue",
        "lightcoral",
        "lightcyan",
        "lightgoldenrodyellow",
        "lightgray",
        "lightgrey",
        "lightgreen",
        "lightpink",
        "lightsalmon",
        "lightseagreen",
        "lightskyblue",
        "lightslategray",
        "lightslategrey",
        "lightsteelblue",
        "lightyellow",
        "lime",
        "limegreen",
        "linen",
        "magenta",
        "maroon",
        "mediumaquamarine",
        "mediumblue",
        "mediumorchid",
        "mediumpurple",
        "mediumseagreen",
        "mediumslateblue",
        "mediumspringgreen",
        "mediumturquoise",
        "mediumvioletred",
        "midnightblue",
        "mintcream",
        "mistyrose",
        "moccasin",
        "navajowhite",
        "navy",
        "oldlace",
        "olive",
        "olivedrab",
        "orange",
        "orangered",
        "orchid",
        "palegoldenrod",
        "palegreen",
        "paleturquoise",
        "palevioletred",
        "papayawhip",
        "peachpuff",
        "peru",
        "pink",
        "plum",
        "powderblue",
        "purple",
        "rebeccapurple",
        "red",
        "rosybrown",
        "royalblue",
        "saddlebrown",
        "salmon",
        "sandybrown",
        "seagreen",
        "seashell",
        "sienna",
        "silver",
        "skyblue",
        "slateblue",
        "slategray",
        "slategrey",
        "snow",
        "springgreen",
        "steelblue",
        "tan",
        "teal",
        "thistle",
        "tomato",
        "turquoise",
        "violet",
        "wheat",
        "white",
        "whitesmoke",
        "yellow",
        "yellowgreen",
    }
)


def is_color(value: str, allow_gradient: bool = False) -> bool:
    """Recognise hex/rgb(a)/hsl(a) colours, named colours and optionally linear gradients."""
    if _COLOR_FUNCTION_PATTERN.match(value):
        return True
    if value in NAMED_COLORS:
        return True
    return allow_gradient and bool(_LINEAR_GRADIENT_PATTERN.match(value))


def find_forbidden_at_rule(code: str) -> Optional[str]:
    """Return the first unsupported at-rule keyword found anywhere in ``code``."""
    for keyword in FORBIDDEN_AT_RULES:
        if keyword in code:
            return keyword
    return None


def strip_important(value: str) -> Tuple[str, bool]:
    """Remove a ``!important`` flag from a declaration value."""
    if _IMPORTANT not in value:
        return value, False
    return value.replace(_IMPORTANT, "", 1).strip(), True


def split_declarations(body: str) -> List[Tuple[str, str]]:
    """
    Split a flat declaration block into (property, value) pairs.

    Each ``;`` separated piece is cut at its first colon; pieces without a
    colon keep an empty value so the mapping stage can drop them.
    """
    declarations: List[Tuple[str, str]] = []
    for piece in body.split(";"):
        if piece == "":
            continue
        prop, sep, value = piece.partition(":")
        if not sep:
            log.debug("Declaration without a value: %r", piece.strip())
        declarations.append((prop.strip(), value.strip()))
    return declarations
