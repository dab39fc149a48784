# blog/content/assembler.py

import logging

from .config import get_content_config
from .fragments import is_text
from .scanners import (
    CASCADE_SCANNERS,
    apply_rich_scanners,
    extract_galleries,
    scan_code_blocks,
)

logger = logging.getLogger(__name__)


def _has_match(fragments):
    """A scanner matched if it produced anything other than plain text."""
    return any(not is_text(fragment) for fragment in fragments)


def _rich_fragments(text):
    """
    Special fragments found in one text segment, or None if there are none.

    Each scanner runs over the whole segment. Their special fragments are
    concatenated scanner by scanner (embeds, playgrounds, charts, diagrams)
    and the plain-text remainders are discarded, so text between two
    specials in the same segment is not kept.
    """
    results = apply_rich_scanners(text)
    if not any(_has_match(fragments) for fragments in results):
        return None

    return [
        fragment
        for fragments in results
        for fragment in fragments
        if not is_text(fragment)
    ]


def _cascade_fragments(text_fragment):
    """
    Run the scanners one after another over the remaining text fragments.

    Keeps the text between specials in source order. Each scanner only sees
    fragments that are still plain text.
    """
    fragments = [text_fragment]
    for scanner in CASCADE_SCANNERS:
        next_fragments = []
        for fragment in fragments:
            if is_text(fragment):
                next_fragments.extend(scanner(fragment.content))
            else:
                next_fragments.append(fragment)
        fragments = next_fragments
    return fragments


def assemble_fragments(raw, *, interleave_rich_text=None):
    """
    Main parsing function: raw post body -> ordered list of fragments.

    Pipeline:
        1. Code blocks are extracted from the whole body
        2. Every remaining text segment is checked for gallery markers and
           split around them
        3. Segments without galleries are scanned for embeds, playgrounds,
           charts and diagrams

    Args:
        raw: Post body as stored by the editor
        interleave_rich_text: Keep the plain text around embeds, playgrounds,
            charts and diagrams instead of dropping it. None falls back to
            the INTERLEAVE_RICH_TEXT setting.

    Returns:
        List of fragments for a renderer to walk
    """
    if interleave_rich_text is None:
        interleave_rich_text = get_content_config()["INTERLEAVE_RICH_TEXT"]

    fragments = []

    for fragment in scan_code_blocks(raw):
        if not is_text(fragment):
            fragments.append(fragment)
            continue

        # Galleries take precedence; the other scanners skip this segment
        galleries = extract_galleries(fragment.content)
        if galleries is not None:
            fragments.extend(galleries)
            continue

        if interleave_rich_text:
            fragments.extend(_cascade_fragments(fragment))
            continue

        rich = _rich_fragments(fragment.content)
        if rich is None:
            fragments.append(fragment)
        else:
            fragments.extend(rich)

    logger.debug(f"Assembled {len(fragments)} fragments")
    return fragments
