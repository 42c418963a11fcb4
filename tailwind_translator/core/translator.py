"""
CSS to utility-class translation entry point.

Examples:
    >>> translate(".btn{margin:4px 8px;color:#fff}").results
    [ResultEntry(selector='.btn', classes='mx-[8px] my-[4px] text-[#fff]')]
    >>> translate("@keyframes spin{}").status
    'SyntaxError'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .block_parser import ParseNode, parse_blocks
from .config import DEFAULT_CONFIG, TranslatorConfig
from .css_utils import find_forbidden_at_rule, split_declarations, strip_important
from .logger import get_logger
from .property_map import map_declaration
from .variants import decorate, media_prefix

log = get_logger(__name__)

__all__ = [
    "STATUS_OK",
    "STATUS_SYNTAX_ERROR",
    "ResultEntry",
    "TranslationResult",
    "dedupe_tokens",
    "translate_rule",
    "translate",
]

STATUS_OK = "OK"
STATUS_SYNTAX_ERROR = "SyntaxError"

# Separates a media wrapper from the nested rule in result selectors
NESTED_SELECTOR_SEPARATOR = "-->"


@dataclass(frozen=True)
class ResultEntry:
    selector: str
    classes: str


@dataclass(frozen=True)
class TranslationResult:
    status: str
    results: List[ResultEntry] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "results": [{"selector": r.selector, "classes": r.classes} for r in self.results],
        }


def dedupe_tokens(tokens: str) -> str:
    """Drop repeated tokens, keeping the first occurrence."""
    return " ".join(dict.fromkeys(token for token in tokens.split(" ") if token))


def translate_rule(
    selector: str,
    body: str,
    config: TranslatorConfig = DEFAULT_CONFIG,
    media: Optional[str] = None,
) -> ResultEntry:
    """Translate the declarations of one rule block."""
    mapped: List[str] = []
    for prop, raw_value in split_declarations(body):
        value, important = strip_important(raw_value)
        tokens = map_declaration(prop, value, config)
        if not tokens:
            log.debug("No utility for %s: %s", prop, value)
            continue
        mapped.append(decorate(selector, tokens, media=media, important=important))
    return ResultEntry(selector, dedupe_tokens(" ".join(mapped)))


def _translate_media(node: ParseNode, config: TranslatorConfig) -> List[ResultEntry]:
    breakpoint = media_prefix(node.selector, config)
    entries: List[ResultEntry] = []
    for child in node.body:
        if not child.is_leaf:
            log.debug("Skipping nested block %r inside %r", child.selector, node.selector)
            continue
        entry = translate_rule(child.selector, child.body, config, media=breakpoint)
        entries.append(
            ResultEntry(
                f"{node.selector}{NESTED_SELECTOR_SEPARATOR}{entry.selector}",
                entry.classes,
            )
        )
    return entries


def translate(css_text: str, config: Optional[TranslatorConfig] = None) -> TranslationResult:
    """
    Translate CSS rule text into utility classes per selector.

    Input mentioning ``@charset``, ``@font-face``, ``@import`` or
    ``@keyframes`` anywhere is rejected with a ``SyntaxError`` status and no
    results. Wrappers other than ``@media`` are skipped.

    Args:
        css_text: One or more ``selector{declarations}`` blocks
        config: Translator configuration (defaults when None)

    Returns:
        TranslationResult with one entry per rule
    """
    config = config or DEFAULT_CONFIG

    keyword = find_forbidden_at_rule(css_text)
    if keyword:
        log.warning("Unsupported at-rule %s in input, nothing translated", keyword)
        return TranslationResult(STATUS_SYNTAX_ERROR, [])

    results: List[ResultEntry] = []
    for node in parse_blocks(css_text):
        if node.is_leaf:
            results.append(translate_rule(node.selector, node.body, config))
        elif "@media" in node.selector:
            results.extend(_translate_media(node, config))
        else:
            log.debug("Skipping unsupported block %r", node.selector)
    return TranslationResult(STATUS_OK, results)
