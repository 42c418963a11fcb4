"""
Default-scale reverse lookup tables.

Each table maps a computed CSS value back to the framework's canonical scale
step or full utility token. They are only consulted when
``TranslatorConfig.use_default_scale`` is enabled and are kept as literal
data so they can be audited and round-trip tested.
"""

from __future__ import annotations

from typing import Dict, Mapping

__all__ = [
    "REM_SCALE",
    "BORDER_RADIUS_SCALE",
    "FRACTIONS",
    "INSET_FRACTIONS",
    "FILTER_DEFAULTS",
    "DROP_SHADOW_DEFAULTS",
    "BACKDROP_OPACITY_DEFAULTS",
    "SCALE_DEFAULTS",
    "ROTATE_DEFAULTS",
    "SKEW_DEFAULTS",
    "TRANSLATE_DEFAULTS",
    "MEDIA_DEFAULTS",
    "PROPERTY_DEFAULTS",
    "lookup_fraction",
]

# Spacing scale: computed length -> scale step
REM_SCALE: Mapping[str, str] = {
    "0px": "0",
    "1px": "px",
    "0.125rem": "0.5",
    "0.25rem": "1",
    "0.375rem": "1.5",
    "0.5rem": "2",
    "0.625rem": "2.5",
    "0.75rem": "3",
    "0.875rem": "3.5",
    "1rem": "4",
    "1.25rem": "5",
    "1.5rem": "6",
    "1.75rem": "7",
    "2rem": "8",
    "2.25rem": "9",
    "2.5rem": "10",
    "2.75rem": "11",
    "3rem": "12",
    "3.5rem": "14",
    "4rem": "16",
    "5rem": "20",
    "6rem": "24",
    "7rem": "28",
    "8rem": "32",
    "9rem": "36",
    "10rem": "40",
    "11rem": "44",
    "12rem": "48",
    "13rem": "52",
    "14rem": "56",
    "15rem": "60",
    "16rem": "64",
    "18rem": "72",
    "20rem": "80",
    "24rem": "96",
}

# Border radius: computed length -> suffix appended to "rounded"/"rounded-tl"...
# The empty suffix is the bare "rounded" utility.
BORDER_RADIUS_SCALE: Mapping[str, str] = {
    "0px": "-none",
    "0.125rem": "-sm",
    "0.25rem": "",
    "0.375rem": "-md",
    "0.5rem": "-lg",
    "0.75rem": "-xl",
    "1rem": "-2xl",
    "1.5rem": "-3xl",
    "9999px": "-full",
}

# Percentages and sizing keywords -> fraction/keyword suffix (w-1/2, h-screen...)
FRACTIONS: Mapping[str, str] = {
    "auto": "auto",
    "50%": "1/2",
    "33.33%": "1/3",
    "66.66%": "2/3",
    "25%": "1/4",
    "75%": "3/4",
    "20%": "1/5",
    "40%": "2/5",
    "60%": "3/5",
    "80%": "4/5",
    "16.66%": "1/6",
    "83.33%": "5/6",
    "8.33%": "1/12",
    "41.66%": "5/12",
    "58.33%": "7/12",
    "91.66%": "11/12",
    "100%": "full",
    "100vw": "screen",
    "100vh": "screen",
    "min-content": "min",
    "max-content": "max",
}

# Inset utilities (top/right/bottom/left) use their own fraction spelling
INSET_FRACTIONS: Mapping[str, str] = {
    "auto": "auto",
    "50%": "2/4",
    "33.333333%": "1/3",
    "66.666667%": "2/3",
    "25%": "1/4",
    "75%": "3/4",
    "100%": "full",
}

FILTER_DEFAULTS: Mapping[str, str] = {
    "blur(0)": "blur-none",
    "blur(4px)": "blur-sm",
    "blur(8px)": "blur",
    "blur(12px)": "blur-md",
    "blur(16px)": "blur-lg",
    "blur(24px)": "blur-xl",
    "blur(40px)": "blur-2xl",
    "blur(64px)": "blur-3xl",
    "brightness(0)": "brightness-0",
    "brightness(.5)": "brightness-50",
    "brightness(.75)": "brightness-75",
    "brightness(.9)": "brightness-90",
    "brightness(.95)": "brightness-95",
    "brightness(1)": "brightness-100",
    "brightness(1.05)": "brightness-105",
    "brightness(1.1)": "brightness-110",
    "brightness(1.25)": "brightness-125",
    "brightness(1.5)": "brightness-150",
    "brightness(2)": "brightness-200",
    "contrast(0)": "contrast-0",
    "contrast(.5)": "contrast-50",
    "contrast(.75)": "contrast-75",
    "contrast(1)": "contrast-100",
    "contrast(1.25)": "contrast-125",
    "contrast(1.5)": "contrast-150",
    "contrast(2)": "contrast-200",
    "grayscale(0)": "grayscale-0",
    "grayscale(1)": "grayscale",
    "hue-rotate(-180deg)": "-hue-rotate-180",
    "hue-rotate(-90deg)": "-hue-rotate-90",
    "hue-rotate(-60deg)": "-hue-rotate-60",
    "hue-rotate(-30deg)": "-hue-rotate-30",
    "hue-rotate(-15deg)": "-hue-rotate-15",
    "hue-rotate(0deg)": "hue-rotate-0",
    "hue-rotate(15deg)": "hue-rotate-15",
    "hue-rotate(30deg)": "hue-rotate-30",
    "hue-rotate(60deg)": "hue-rotate-60",
    "hue-rotate(90deg)": "hue-rotate-90",
    "hue-rotate(180deg)": "hue-rotate-180",
    "invert(0)": "invert-0",
    "invert(1)": "invert",
    "saturate(0)": "saturate-0",
    "saturate(.5)": "saturate-50",
    "saturate(1)": "saturate-100",
    "saturate(1.5)": "saturate-150",
    "saturate(2)": "saturate-200",
    "sepia(0)": "sepia-0",
    "sepia(1)": "sepia",
}

# Whole filter values; matched after whitespace following commas is removed
DROP_SHADOW_DEFAULTS: Mapping[str, str] = {
    "drop-shadow(0 1px 1px rgba(0,0,0,0.05))": "drop-shadow-sm",
    "drop-shadow(0 1px 2px rgba(0,0,0,0.1)) drop-shadow(0 1px 1px rgba(0,0,0,0.06))": "drop-shadow",
    "drop-shadow(0 4px 3px rgba(0,0,0,0.07)) drop-shadow(0 2px 2px rgba(0,0,0,0.06))": "drop-shadow-md",
    "drop-shadow(0 10px 8px rgba(0,0,0,0.04)) drop-shadow(0 4px 3px rgba(0,0,0,0.1))": "drop-shadow-lg",
    "drop-shadow(0 20px 13px rgba(0,0,0,0.03)) drop-shadow(0 8px 5px rgba(0,0,0,0.08))": "drop-shadow-xl",
    "drop-shadow(0 25px 25px rgba(0,0,0,0.15))": "drop-shadow-2xl",
    "drop-shadow(0 0 #0000)": "drop-shadow-none",
}

BACKDROP_OPACITY_DEFAULTS: Mapping[str, str] = {
    "opacity(0)": "backdrop-opacity-0",
    "opacity(0.05)": "backdrop-opacity-5",
    "opacity(0.1)": "backdrop-opacity-10",
    "opacity(0.2)": "backdrop-opacity-20",
    "opacity(0.25)": "backdrop-opacity-25",
    "opacity(0.3)": "backdrop-opacity-30",
    "opacity(0.4)": "backdrop-opacity-40",
    "opacity(0.5)": "backdrop-opacity-50",
    "opacity(0.6)": "backdrop-opacity-60",
    "opacity(0.7)": "backdrop-opacity-70",
    "opacity(0.75)": "backdrop-opacity-75",
    "opacity(0.8)": "backdrop-opacity-80",
    "opacity(0.9)": "backdrop-opacity-90",
    "opacity(0.95)": "backdrop-opacity-95",
    "opacity(1)": "backdrop-opacity-100",
}

SCALE_DEFAULTS: Mapping[str, str] = {
    "0": "0",
    "1": "100",
    ".5": "50",
    ".75": "75",
    ".9": "90",
    ".95": "95",
    "1.05": "105",
    "1.1": "110",
    "1.25": "125",
    "1.5": "150",
}

ROTATE_DEFAULTS: Mapping[str, str] = {
    "0deg": "0",
    "1deg": "1",
    "2deg": "2",
    "3deg": "3",
    "6deg": "6",
    "12deg": "12",
    "45deg": "45",
    "90deg": "90",
    "180deg": "180",
}

SKEW_DEFAULTS: Mapping[str, str] = {
    "0deg": "0",
    "1deg": "1",
    "2deg": "2",
    "3deg": "3",
    "6deg": "6",
    "12deg": "12",
}

TRANSLATE_DEFAULTS: Mapping[str, str] = {
    **REM_SCALE,
    "50%": "1/2",
    "33.33%": "1/3",
    "66.66%": "2/3",
    "25%": "1/4",
    "75%": "3/4",
    "100%": "full",
}

# Canonical media query (see variants.canonical_media) -> breakpoint
MEDIA_DEFAULTS: Mapping[str, str] = {
    "@media(min-width:640px)": "sm",
    "@media(min-width:768px)": "md",
    "@media(min-width:1024px)": "lg",
    "@media(min-width:1280px)": "xl",
    "@media(min-width:1536px)": "2xl",
    "@media_not_all_and(min-width:640px)": "max-sm",
    "@media_not_all_and(min-width:768px)": "max-md",
    "@media_not_all_and(min-width:1024px)": "max-lg",
    "@media_not_all_and(min-width:1280px)": "max-xl",
    "@media_not_all_and(min-width:1536px)": "max-2xl",
}


def _inset_table(name: str) -> Dict[str, str]:
    table = {value: f"{name}-{step}" for value, step in REM_SCALE.items()}
    table.update({value: f"{name}-{step}" for value, step in INSET_FRACTIONS.items()})
    table.update(
        {f"-{value}": f"-{name}-{step}" for value, step in REM_SCALE.items() if value != "0px"}
    )
    table.update(
        {f"-{value}": f"-{name}-{step}" for value, step in INSET_FRACTIONS.items() if value != "auto"}
    )
    return table


def _scale_table(name: str, *, skip: tuple = ()) -> Dict[str, str]:
    return {value: f"{name}-{step}" for value, step in REM_SCALE.items() if value not in skip}


# Property -> computed value -> complete utility token
PROPERTY_DEFAULTS: Mapping[str, Mapping[str, str]] = {
    "top": _inset_table("top"),
    "right": _inset_table("right"),
    "bottom": _inset_table("bottom"),
    "left": _inset_table("left"),
    "gap": _scale_table("gap", skip=("1px",)),
    "column-gap": _scale_table("gap-x"),
    "row-gap": _scale_table("gap-y"),
    "max-height": _scale_table("max-h", skip=("0px",)),
    "max-width": {
        "0rem": "max-w-0",
        "20rem": "max-w-xs",
        "24rem": "max-w-sm",
        "28rem": "max-w-md",
        "32rem": "max-w-lg",
        "36rem": "max-w-xl",
        "42rem": "max-w-2xl",
        "48rem": "max-w-3xl",
        "56rem": "max-w-4xl",
        "64rem": "max-w-5xl",
        "72rem": "max-w-6xl",
        "80rem": "max-w-7xl",
        "65ch": "max-w-prose",
        "640px": "max-w-screen-sm",
        "768px": "max-w-screen-md",
        "1024px": "max-w-screen-lg",
        "1280px": "max-w-screen-xl",
        "1536px": "max-w-screen-2xl",
    },
    "font-family": {
        'ui-sans-serif, system-ui, -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, '
        '"Helvetica Neue", Arial, "Noto Sans", sans-serif, "Apple Color Emoji", '
        '"Segoe UI Emoji", "Segoe UI Symbol", "Noto Color Emoji"': "font-sans",
        'ui-serif, Georgia, Cambria, "Times New Roman", Times, serif': "font-serif",
        'ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, "Liberation Mono", '
        '"Courier New", monospace': "font-mono",
    },
    "font-weight": {
        "100": "font-thin",
        "200": "font-extralight",
        "300": "font-light",
        "400": "font-normal",
        "500": "font-medium",
        "600": "font-semibold",
        "700": "font-bold",
        "800": "font-extrabold",
        "900": "font-black",
        "normal": "font-normal",
        "bold": "font-bold",
    },
    "line-height": {
        "1": "leading-none",
        "2": "leading-loose",
        ".75rem": "leading-3",
        "1rem": "leading-4",
        "1.25rem": "leading-5",
        "1.5rem": "leading-6",
        "1.75rem": "leading-7",
        "2rem": "leading-8",
        "2.25rem": "leading-9",
        "2.5rem": "leading-10",
        "1.25": "leading-tight",
        "1.375": "leading-snug",
        "1.5": "leading-normal",
        "1.625": "leading-relaxed",
    },
    "border-width": {
        "0px": "border-0",
        "2px": "border-2",
        "4px": "border-4",
        "8px": "border-8",
        "1px": "border",
    },
    "border-top-width": {
        "0px": "border-t-0",
        "2px": "border-t-2",
        "4px": "border-t-4",
        "8px": "border-t-8",
        "1px": "border-t",
    },
    "border-right-width": {
        "0px": "border-r-0",
        "2px": "border-r-2",
        "4px": "border-r-4",
        "8px": "border-r-8",
        "1px": "border-r",
    },
    "border-bottom-width": {
        "0px": "border-b-0",
        "2px": "border-b-2",
        "4px": "border-b-4",
        "8px": "border-b-8",
        "1px": "border-b",
    },
    "border-left-width": {
        "0px": "border-l-0",
        "2px": "border-l-2",
        "4px": "border-l-4",
        "8px": "border-l-8",
        "1px": "border-l",
    },
    "transition": {
        "all 150ms cubic-bezier(0.4, 0, 0.2, 1)": "transition-all",
        "background-color, border-color, color, fill, stroke, opacity, box-shadow, "
        "transform, filter, backdrop-filter 150ms cubic-bezier(0.4, 0, 0.2, 1)": "transition",
        "background-color, border-color, color, fill, stroke 150ms "
        "cubic-bezier(0.4, 0, 0.2, 1)": "transition-colors",
        "opacity 150ms cubic-bezier(0.4, 0, 0.2, 1)": "transition-opacity",
        "box-shadow 150ms cubic-bezier(0.4, 0, 0.2, 1)": "transition-shadow",
        "transform 150ms cubic-bezier(0.4, 0, 0.2, 1)": "transition-transform",
    },
}


def lookup_fraction(value: str, *excludes: str) -> str:
    """Look a value up in FRACTIONS, ignoring the given keys ("" when absent)."""
    if value in excludes:
        return ""
    return FRACTIONS.get(value, "")
