"""
Translator configuration.

A ``TranslatorConfig`` is created once by the caller and passed explicitly to
every stage of the pipeline. It is frozen and its theme is stored as
read-only mappings, so one call cannot leak its theme or scale settings into
another.

Examples:
    >>> TranslatorConfig(prefix="tw-")
    >>> TranslatorConfig.model_validate({"useAllDefaultValues": False})
    >>> TranslatorConfig.load(Path("translator.json"))
"""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_serializer, field_validator

from .logger import get_logger

log = get_logger(__name__)

__all__ = ["CustomTheme", "THEME_CATEGORIES", "TranslatorConfig", "DEFAULT_CONFIG"]

# category or property name -> raw CSS value -> override
CustomTheme = Mapping[str, Mapping[str, str]]

_FILTER_CATEGORIES = (
    "blur",
    "brightness",
    "contrast",
    "grayscale",
    "hue-rotate",
    "invert",
    "saturate",
    "sepia",
)

# Theme keys whose entries are token suffixes or breakpoints, never whole tokens
THEME_CATEGORIES = frozenset(
    ("media", "scale", "rotate", "translate", "skew", "backdrop-opacity")
    + _FILTER_CATEGORIES
    + tuple(f"backdrop-{name}" for name in _FILTER_CATEGORIES)
)


class TranslatorConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    # Prepended to every emitted utility (after a leading "-" sign)
    prefix: str = ""
    use_default_scale: bool = Field(
        True,
        validation_alias=AliasChoices(
            "use_default_scale", "useDefaultScale", "useAllDefaultValues"
        ),
    )
    theme: CustomTheme = Field(
        default_factory=dict,
        validate_default=True,
        validation_alias=AliasChoices("theme", "customTheme"),
    )

    @field_validator("theme")
    @classmethod
    def _freeze_theme(cls, theme: Mapping[str, Mapping[str, str]]) -> CustomTheme:
        return MappingProxyType({key: MappingProxyType(dict(values)) for key, values in theme.items()})

    @field_serializer("theme")
    def _dump_theme(self, theme: CustomTheme) -> Dict[str, Dict[str, str]]:
        return {key: dict(values) for key, values in theme.items()}

    @classmethod
    def load(cls, path: Path) -> "TranslatorConfig":
        """Read and validate a JSON config file."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        config = cls.model_validate(data)
        log.debug("Loaded translator config from %s", path)
        return config

    def theme_value(self, key: str, value: str) -> Optional[str]:
        """Return a non-empty theme override for ``value`` under ``key``."""
        return self.theme.get(key, {}).get(value) or None

    def with_theme(self, theme: CustomTheme) -> "TranslatorConfig":
        """Copy of this config with ``theme`` merged over the current theme."""
        merged = {key: dict(values) for key, values in self.theme.items()}
        for key, values in theme.items():
            merged.setdefault(key, {}).update(values)
        return type(self)(prefix=self.prefix, use_default_scale=self.use_default_scale, theme=merged)


DEFAULT_CONFIG = TranslatorConfig()
