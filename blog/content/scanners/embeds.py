# blog/content/scanners/embeds.py
"""
Turn bare social/video URLs into embed fragments.

Supported platforms, tried in this order:
    youtube    youtube.com/watch?v=<id>, youtu.be/<id>
    twitter    twitter.com|x.com/<user>/status/<id>
    instagram  instagram.com/p/<id>/

Any other URL, a supported URL without an extractable id, or a string that
does not parse as a URL stays in the output as literal Text.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import parse_qs, urlsplit

from ..config import get_content_config
from ..fragments import Embed, Text
from .utils import split_by_pattern

logger = logging.getLogger(__name__)

URL_REGEX = re.compile(r"https?://[^\s<>]+")

# (embed type, hostname fragments), in classification priority order
EMBED_HOSTS = [
    ("youtube", ("youtube.com", "youtu.be")),
    ("twitter", ("twitter.com", "x.com")),
    ("instagram", ("instagram.com",)),
]

EMBED_COMPONENTS = {
    "youtube": "YouTubeEmbed",
    "twitter": "TwitterEmbed",
    "instagram": "InstagramEmbed",
}


@dataclass(frozen=True)
class EmbedLookup:
    """Outcome of classifying a single URL."""

    embed_type: Optional[str]
    id: Optional[str]
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _classify_host(hostname: str) -> Optional[str]:
    for embed_type, hosts in EMBED_HOSTS:
        if any(host in hostname for host in hosts):
            return embed_type
    return None


def _youtube_id(parts) -> Optional[str]:
    if "youtu.be" in parts.hostname:
        return parts.path[1:] or None
    values = parse_qs(parts.query).get("v")
    return values[0] if values else None


def _twitter_id(parts) -> Optional[str]:
    if "/status/" not in parts.path:
        return None
    tweet_path = parts.path.split("/status/")[1]
    return tweet_path.split("?")[0].split("/")[0] or None


def _instagram_id(parts) -> Optional[str]:
    if "/p/" not in parts.path:
        return None
    return parts.path.split("/p/")[1].split("/")[0] or None


_ID_EXTRACTORS = {
    "youtube": _youtube_id,
    "twitter": _twitter_id,
    "instagram": _instagram_id,
}


def parse_embed_url(url: str) -> EmbedLookup:
    """
    Classify a URL and extract its embed id.

    Never raises: malformed URLs, unsupported hosts and missing ids are
    reported through ``EmbedLookup.error``.
    """
    try:
        parts = urlsplit(url)
        hostname = parts.hostname or ""
    except ValueError:
        return EmbedLookup(None, None, "Invalid URL format")

    embed_type = _classify_host(hostname)
    if embed_type is None:
        return EmbedLookup(None, None, "Unsupported URL type")

    embed_id = _ID_EXTRACTORS[embed_type](parts)
    if not embed_id:
        return EmbedLookup(None, None, f"Invalid {embed_type.capitalize()} URL format")

    return EmbedLookup(embed_type, embed_id)


def is_embeddable(url: str) -> bool:
    """True when the URL's host belongs to a supported embed platform."""
    try:
        hostname = urlsplit(url).hostname or ""
    except ValueError:
        return False
    return _classify_host(hostname) is not None


def get_embed_component(url: str) -> Optional[str]:
    """Name of the front-end component that renders this URL, if any."""
    return EMBED_COMPONENTS.get(parse_embed_url(url).embed_type)


def _embed_url(embed_type: str, embed_id: str, url: str, config: dict) -> str:
    if embed_type == "youtube":
        return config["YOUTUBE_EMBED_URL"].format(id=embed_id)
    if embed_type == "instagram":
        return config["INSTAGRAM_EMBED_URL"].format(id=embed_id)
    # Twitter widgets load from the original status URL
    return url


def scan_embeds(text: str) -> list:
    """
    Split text into Text and Embed fragments.

    Each URL token becomes an Embed when it is classifiable, otherwise a Text
    fragment holding the URL unchanged.
    """
    if not text:
        return []

    config = get_content_config()

    def build(match):
        url = match.group(0)
        lookup = parse_embed_url(url)
        if not lookup.ok:
            logger.debug(f"Leaving URL as text ({lookup.error}): {url}")
            return Text(url)

        return Embed(
            embed_type=lookup.embed_type,
            id=lookup.id,
            url=_embed_url(lookup.embed_type, lookup.id, url, config),
        )

    return split_by_pattern(text, URL_REGEX, build)
