"""
Brace-aware splitting of CSS text into rule blocks.

    ".a{color:red}@media (min-width:640px){.b{width:10px}}"

parses to

    [ParseNode(".a", "color:red"),
     ParseNode("@media (min-width:640px)", [ParseNode(".b", "width:10px")])]

Selectors and bodies are sliced out of the normalised input in a single
pass. Unbalanced input is handled best-effort and never raises.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Union

from .logger import get_logger

log = get_logger(__name__)

__all__ = ["ParseNode", "parse_blocks"]

_NEWLINE_PATTERN = re.compile(r"[\r\n]")


@dataclass
class ParseNode:
    selector: str
    body: Union[str, List["ParseNode"]]

    @property
    def is_leaf(self) -> bool:
        """Leaf nodes hold flat declarations, wrappers hold child nodes."""
        return isinstance(self.body, str)


def _make_node(selector: str, body: str) -> ParseNode:
    body = body.strip()
    if "{" in body:
        return ParseNode(selector.strip(), _scan(body))
    return ParseNode(selector.strip(), body)


def _scan(text: str) -> List[ParseNode]:
    nodes: List[ParseNode] = []
    depth = 0
    selector_start = 0
    selector_end = 0
    body_start: Optional[int] = None

    for index, char in enumerate(text):
        if char == "{":
            if depth == 0:
                selector_end = index
                body_start = index + 1
            depth += 1
        elif char == "}":
            if depth == 0:
                log.debug("Ignoring unmatched '}' at offset %d", index)
                selector_start = index + 1
                continue
            depth -= 1
            if depth == 0:
                nodes.append(_make_node(text[selector_start:selector_end], text[body_start:index]))
                selector_start = index + 1
                body_start = None

    if body_start is not None:
        log.debug("Unterminated block for selector %r", text[selector_start:selector_end].strip())
        nodes.append(_make_node(text[selector_start:selector_end], text[body_start:]))
    elif text[selector_start:].strip():
        log.debug("Discarding trailing text without a body: %r", text[selector_start:].strip())
    return nodes


def parse_blocks(text: str) -> List[ParseNode]:
    """
    Parse CSS text into an ordered list of rule nodes.

    Newlines are treated as spaces rather than deleted, so a selector split
    across two lines reads as a descendant selector (``.a .b``). A block
    whose body contains ``{`` (an ``@media`` wrapper) is parsed again into
    child nodes.
    """
    return _scan(_NEWLINE_PATTERN.sub(" ", text).strip())
