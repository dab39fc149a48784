# blog/content/scanners/diagrams.py
"""Extract ```mermaid diagram blocks. The definition is passed through as-is."""

import re

from ..fragments import Diagram
from .utils import split_by_pattern

MERMAID_REGEX = re.compile(r"```mermaid\b\s*(.*?)```", re.DOTALL)


def scan_diagrams(text: str) -> list:
    if not text:
        return []

    return split_by_pattern(
        text,
        MERMAID_REGEX,
        lambda match: Diagram(definition=match.group(1).strip()),
    )
