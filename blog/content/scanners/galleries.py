# blog/content/scanners/galleries.py
"""
Extract image galleries from editor markers.

The editor inserts galleries as empty placeholder divs:

    <div class="gallery-container"
         data-gallery='{"images": [{"url": "a.png", "caption": "", "alt": ""}]}'></div>

Each marker becomes a Gallery fragment and the surrounding HTML is split into
Text fragments. A marker whose JSON payload is broken is logged and dropped:
it has no useful literal representation.
"""

from __future__ import annotations

import json
import logging
import re

from bs4 import BeautifulSoup

from ..config import get_content_config
from ..fragments import Gallery, GalleryImage, Text

logger = logging.getLogger(__name__)

# Opening <div ...> tag; quoted attribute values may contain ">"
OPEN_DIV_REGEX = re.compile(
    r"""<div\b(?:[^>"']|"[^"]*"|'[^']*')*>""", re.IGNORECASE
)
# Closing tag of an empty marker: only whitespace may precede it
CLOSE_DIV_REGEX = re.compile(r"\s*</div\s*>", re.IGNORECASE)


def _marker_payload(tag_html: str, gallery_class: str) -> str | None:
    """Return the raw data-gallery value if the tag is a gallery marker."""
    div = BeautifulSoup(tag_html, "html.parser").find("div")
    if div is None:
        return None

    classes = div.get("class", [])
    if isinstance(classes, str):
        classes = classes.split()
    if gallery_class not in classes:
        return None

    return div.get("data-gallery")


def parse_gallery_payload(payload: str) -> Gallery:
    """
    Decode a marker's JSON payload into a Gallery.

    Raises:
        ValueError: If the payload is not JSON or has no ``images`` list
    """
    data = json.loads(payload)
    if not isinstance(data, dict) or not isinstance(data.get("images"), list):
        raise ValueError("gallery payload must be an object with an 'images' list")

    images = []
    for entry in data["images"]:
        if not isinstance(entry, dict) or not entry.get("url"):
            logger.warning(f"Skipping gallery image without url: {entry!r}")
            continue
        images.append(
            GalleryImage(
                url=entry["url"],
                caption=entry.get("caption"),
                alt=entry.get("alt"),
            )
        )

    return Gallery(images=tuple(images))


def find_gallery_markers(text: str) -> list[tuple[int, int, str]]:
    """
    Locate gallery markers in document order.

    Returns:
        List of (start, end, payload) tuples; ``end`` is past the closing
        </div> when it directly follows the opening tag, otherwise the
        marker is the opening tag alone
    """
    gallery_class = get_content_config()["GALLERY_CLASS"]
    markers = []
    position = 0

    while True:
        match = OPEN_DIV_REGEX.search(text, position)
        if match is None:
            break

        payload = _marker_payload(match.group(0), gallery_class)
        if payload is None:
            # Not a marker; markers may still be nested inside it
            position = match.end()
            continue

        closing = CLOSE_DIV_REGEX.match(text, match.end())
        end = closing.end() if closing else match.end()
        markers.append((match.start(), end, payload))
        position = end

    return markers


def extract_galleries(text: str) -> list | None:
    """
    Split text around gallery markers.

    Returns:
        Ordered Text/Gallery fragments, or None when the text holds no
        markers (the caller then runs the remaining scanners on it)
    """
    if not text:
        return None

    markers = find_gallery_markers(text)
    if not markers:
        return None

    fragments = []
    last_index = 0

    for start, end, payload in markers:
        # Add text before gallery
        if start > last_index:
            fragments.append(Text(text[last_index:start]))

        try:
            fragments.append(parse_gallery_payload(payload))
        except ValueError as e:
            logger.warning(f"Failed to parse gallery data: {e}")

        last_index = end

    # Add remaining text after last gallery
    if last_index < len(text):
        fragments.append(Text(text[last_index:]))

    logger.debug(f"Extracted {len(markers)} gallery marker(s)")
    return fragments
