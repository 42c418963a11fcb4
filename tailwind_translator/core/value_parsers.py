"""
Value classifiers shared by every mapping stage.

CSS values reaching the translator fall into a handful of shapes:
- Lengths/angles/times with an optional unit (e.g. "12px", "1.5rem", "45deg", "200ms")
- Bare numbers (e.g. "0", "-1", ".5")
- Sizing keywords that behave like lengths (e.g. "auto", "min-content", "thin")
- Variable references (e.g. "var(--gap)")
- Composite values that must travel inside one bracket token
  (e.g. "0 1px 2px red" -> "0_1px_2px_red")
"""

from __future__ import annotations

import re
from typing import List, Sequence, Tuple, TypeVar

__all__ = [
    "UNIT_KEYWORDS",
    "is_unit",
    "has_negative",
    "get_custom_val",
    "normalize_percentage",
    "seconds_to_ms",
    "split_values",
    "expand_shorthand_box",
]

T = TypeVar("T")

# Units and length-like keywords recognised once digits are stripped off
UNIT_KEYWORDS = frozenset(
    {
        "em",
        "ex",
        "ch",
        "rem",
        "vw",
        "vh",
        "vmin",
        "vmax",
        "cm",
        "mm",
        "in",
        "pt",
        "pc",
        "px",
        "min-content",
        "max-content",
        "fit-content",
        "deg",
        "grad",
        "rad",
        "turn",
        "ms",
        "s",
        "Hz",
        "kHz",
        "%",
        "length",
        "inherit",
        "thick",
        "medium",
        "thin",
        "initial",
        "auto",
    }
)

_UNIT_STRIP_PATTERN = re.compile(r"[.\d\s]")
_NUMERIC_PATTERN = re.compile(r"^[-.\d]+$")
_VAR_PATTERN = re.compile(r"^var\(.+\)$")
_WHITESPACE_PATTERN = re.compile(r"\s")
_UNDERSCORE_RUN_PATTERN = re.compile(r"_{2,}")
_LONG_PERCENT_PATTERN = re.compile(r"^\d+\.[1-9]{2,}%$")
_TWO_DECIMALS_PATTERN = re.compile(r"(\.[1-9]{2})\d+")
_SECONDS_PATTERN = re.compile(r"^([.\d]+)s$")
_TRAILING_ZEROS_PATTERN = re.compile(r"\.?0+$")


def is_unit(value: str) -> bool:
    """
    Check whether a value reads as a length, angle, time, number or variable.

    Examples:
        - "10px", "-1.5rem", "45deg", "200ms" -> True
        - "10", "-.5" -> True
        - "auto", "min-content" -> True
        - "var(--gap)" -> True
        - "", "abc", "red" -> False
    """
    if len(value) == 0:
        return False

    unit = _UNIT_STRIP_PATTERN.sub("", value)
    if unit.startswith("-"):
        unit = unit[1:]

    return (
        unit in UNIT_KEYWORDS
        or bool(_NUMERIC_PATTERN.match(value.strip()))
        or bool(_VAR_PATTERN.match(value))
    )


def has_negative(value: str) -> Tuple[str, str]:
    """Split a leading minus sign off a value: "-4px" -> ("-", "4px")."""
    if value.startswith("-"):
        return "-", value[1:]
    return "", value


def get_custom_val(value: str) -> str:
    """
    Canonicalise a value for use inside a single bracket token.

    Every whitespace character becomes an underscore and runs of underscores
    collapse to one, e.g. "0 1px  2px\\tred" -> "0_1px_2px_red".
    """
    value = _WHITESPACE_PATTERN.sub("_", value)
    return _UNDERSCORE_RUN_PATTERN.sub("_", value)


def normalize_percentage(value: str) -> str:
    """Truncate long repeating percentages to two decimals ("33.3333%" -> "33.33%")."""
    if not _LONG_PERCENT_PATTERN.match(value):
        return value
    fixed = _TWO_DECIMALS_PATTERN.sub(r"\1", f"{float(value[:-1]):.6f}", count=1)
    return f"{fixed}%"


def seconds_to_ms(value: str) -> str:
    """Express a plain seconds value in milliseconds ("1.5s" -> "1500ms")."""
    match = _SECONDS_PATTERN.match(value)
    if not match:
        return value
    try:
        seconds = float(match.group(1))
    except ValueError:
        return value
    millis = _TRAILING_ZEROS_PATTERN.sub("", f"{seconds * 1000:.6f}", count=1)
    return f"{millis or '0'}ms"


def split_values(value: str) -> List[str]:
    """Split a multi-value declaration on whitespace, dropping empty parts."""
    return [part for part in value.split(" ") if part != ""]


def expand_shorthand_box(values: Sequence[T]) -> Tuple[T, T, T, T]:
    """
    Expand CSS box model shorthand (padding, margin) to individual sides.

    CSS box model rules:
    - 1 value: all sides
    - 2 values: top/bottom, left/right
    - 3 values: top, left/right, bottom
    - 4 values: top, right, bottom, left (clockwise)

    Args:
        values: Sequence of 1-4 values

    Returns:
        Tuple of (top, right, bottom, left)
    """
    count = len(values)

    if count == 1:
        return values[0], values[0], values[0], values[0]
    elif count == 2:
        return values[0], values[1], values[0], values[1]
    elif count == 3:
        return values[0], values[1], values[2], values[1]
    elif count == 4:
        return values[0], values[1], values[2], values[3]
    else:
        raise ValueError(f"Cannot expand shorthand with {count} values")
