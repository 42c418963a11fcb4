from __future__ import annotations
from argparse import Namespace

from ...core.property_map import supported_properties


def run(args: Namespace) -> int:
    for name in supported_properties():
        print(name)
    return 0
