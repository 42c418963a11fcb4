"""Translate raw CSS rules into Tailwind-style utility classes."""

from .core.block_parser import ParseNode, parse_blocks
from .core.config import TranslatorConfig
from .core.property_map import map_declaration, supported_properties
from .core.translator import ResultEntry, TranslationResult, translate

__all__ = [
    "ParseNode",
    "ResultEntry",
    "TranslationResult",
    "TranslatorConfig",
    "map_declaration",
    "parse_blocks",
    "supported_properties",
    "translate",
]

__version__ = "0.1.0"
