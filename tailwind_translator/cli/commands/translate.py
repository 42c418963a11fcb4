"""
Translate Command

CLI command for translating CSS rule text into utility classes.
"""

from __future__ import annotations
import json
import sys
from argparse import Namespace
from pathlib import Path

from pydantic import ValidationError

from ...core.config import TranslatorConfig
from ...core.logger import get_logger
from ...core.translator import translate


log = get_logger(__name__)

EXIT_SYNTAX_ERROR = 1
EXIT_BAD_INPUT = 2


def _read_css(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _build_config(args: Namespace) -> TranslatorConfig:
    """Config file first, then command line flags on top."""
    config = TranslatorConfig()
    if args.config:
        config = TranslatorConfig.load(Path(args.config))

    if args.theme:
        theme = json.loads(Path(args.theme).read_text(encoding="utf-8"))
        if not isinstance(theme, dict):
            raise ValueError(f"Theme file must hold a JSON object: {args.theme}")
        config = config.with_theme(TranslatorConfig(theme=theme).theme)

    updates = {}
    if args.prefix is not None:
        updates["prefix"] = args.prefix
    if args.no_default_scale:
        updates["use_default_scale"] = False
    if updates:
        config = TranslatorConfig(**{**config.model_dump(), **updates})
    return config


def run(args: Namespace) -> int:
    """
    Run translate command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Process exit code
    """
    try:
        config = _build_config(args)
    except (OSError, ValueError, ValidationError) as exc:
        log.error(f"Invalid configuration: {exc}")
        return EXIT_BAD_INPUT

    try:
        css = _read_css(args.css)
    except OSError as exc:
        log.error(f"Cannot read CSS input {args.css}: {exc}")
        return EXIT_BAD_INPUT

    result = translate(css, config)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    elif result.ok:
        for entry in result.results:
            print(f"{entry.selector}: {entry.classes}")

    if not result.ok:
        log.error("Input contains an unsupported at-rule (@charset, @font-face, @import, @keyframes)")
        return EXIT_SYNTAX_ERROR

    log.debug(f"Translated {len(result.results)} rule(s)")
    return 0
