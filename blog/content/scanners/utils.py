"""Shared helpers for the single-pass fragment scanners."""

from __future__ import annotations

import re
from typing import Callable

from ..fragments import Fragment, Text


def split_by_pattern(
    text: str,
    pattern: re.Pattern,
    build: Callable[[re.Match], Fragment | None],
) -> list[Fragment]:
    """
    Partition ``text`` into Text gaps and the fragments built from matches.

    Walks ``pattern.finditer`` left to right. Text before the first match,
    between matches, and after the last match is emitted verbatim as Text;
    zero-length gaps are omitted. ``build`` turns a match into a fragment.
    When it returns None the match is kept as literal text and merged with
    the surrounding gaps.

    Args:
        text: Input string to scan
        pattern: Compiled pattern; matches never overlap
        build: Callback producing a fragment for a match, or None to skip it

    Returns:
        Fragments whose source spans cover ``text`` exactly once, in order
    """
    fragments: list[Fragment] = []
    last_index = 0

    for match in pattern.finditer(text):
        fragment = build(match)
        if fragment is None:
            continue

        # Add text before the match
        if match.start() > last_index:
            fragments.append(Text(text[last_index:match.start()]))

        fragments.append(fragment)
        last_index = match.end()

    # Add remaining text after the last match
    if last_index < len(text):
        fragments.append(Text(text[last_index:]))

    return fragments
