from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from .commands import (
    translate as cmd_translate,
    properties as cmd_properties,
)
from ..core.logger import configure_logging


def entrypoint():
    sys.exit(main())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Translate CSS rules into Tailwind utility classes"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    t = sub.add_parser("translate", help="Translate CSS text into utility classes")
    t.add_argument(
        "css",
        type=str,
        nargs="?",
        default="-",
        help="CSS file to translate ('-' or omitted reads stdin)",
    )
    t.add_argument(
        "--prefix",
        type=str,
        default=None,
        help="Prefix added to every emitted utility (e.g. 'tw-')",
    )
    t.add_argument(
        "--no-default-scale",
        action="store_true",
        help="Always emit arbitrary values instead of default scale steps",
    )
    t.add_argument(
        "--theme",
        type=str,
        default=None,
        help="JSON file with theme overrides ({category: {value: token}})",
    )
    t.add_argument(
        "--config",
        type=str,
        default=None,
        help="JSON translator config (prefix, use_default_scale, theme)",
    )
    t.add_argument("--json", action="store_true", help="Print the result as JSON")

    sub.add_parser("properties", help="List supported CSS properties")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    if args.command == "translate":
        return cmd_translate.run(args)
    elif args.command == "properties":
        return cmd_properties.run(args)
    return 0
