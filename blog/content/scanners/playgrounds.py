# blog/content/scanners/playgrounds.py
"""
Extract interactive code playgrounds.

    ```playground {"language": "python", "readOnly": false, "height": "300px"}
    print("hello")
    ```

The header is a single-line JSON object. An unparsable header leaves the
whole block, fences included, in the output as literal text.
"""

import json
import logging
import re

from ..config import get_content_config
from ..fragments import Playground, PlaygroundOptions, Text
from .utils import split_by_pattern

logger = logging.getLogger(__name__)

PLAYGROUND_REGEX = re.compile(r"```playground\s*\{([^}]+)\}([^`]+)```")


def parse_header_options(inner: str) -> dict:
    """
    Parse the text captured between a fence header's braces.

    The capture excludes the braces themselves, so they are put back before
    decoding. Raises ValueError (json.JSONDecodeError) on malformed input.
    """
    return json.loads(f"{{{inner}}}")


def scan_playgrounds(text: str) -> list:
    """Split text into Text and Playground fragments."""
    if not text:
        return []

    defaults = get_content_config()["PLAYGROUND_DEFAULTS"]

    def build(match):
        try:
            options = parse_header_options(match.group(1))
        except ValueError as e:
            logger.warning(f"Error parsing playground options: {e}")
            return Text(match.group(0))

        return Playground(
            options=PlaygroundOptions(
                language=options.get("language") or defaults["language"],
                # Read-only unless explicitly disabled
                read_only=options.get("readOnly", defaults["readOnly"]) is not False,
                height=options.get("height") or defaults["height"],
            ),
            code=match.group(2).strip(),
        )

    return split_by_pattern(text, PLAYGROUND_REGEX, build)
