# blog/content/scanners/code_blocks.py
"""
First pass: extract fenced code blocks.

Recognises:
    ```lang:filename
    body
    ```

Language and filename are optional. Runs before every other scanner so that
code content is never rescanned for URLs, playgrounds or galleries.

Fences tagged with a special keyword (playground, chart, mermaid) belong to
later passes. They are matched as whole blocks, in the shape those passes
accept, and left inside the surrounding text, which also keeps their closing
fence from opening a bogus code block.
"""

import logging
import re
from functools import lru_cache

from ..config import get_content_config
from ..fragments import Code
from .utils import split_by_pattern

logger = logging.getLogger(__name__)

CODE_BLOCK_PATTERN = r"```(?P<language>\w+)?(?::(?P<filename>[^\n]+))?\n(?P<code>.*?)```"

# Body shapes the later scanners accept after a special keyword. A keyword
# mentioned in prose without this shape is not a fence.
HEADER_FENCE_BODY = r"\s*\{[^}]+\}[^`]+```"
SPECIAL_FENCE_BODIES = {
    "playground": HEADER_FENCE_BODY,
    "chart": HEADER_FENCE_BODY,
}
DEFAULT_FENCE_BODY = r"\b.*?```"


@lru_cache(maxsize=8)
def _compile_fence_pattern(special_fences: tuple) -> re.Pattern:
    """Code block pattern with special fences tried first at each position."""
    if not special_fences:
        return re.compile(CODE_BLOCK_PATTERN, re.DOTALL)

    alternatives = "|".join(
        re.escape(keyword) + SPECIAL_FENCE_BODIES.get(keyword, DEFAULT_FENCE_BODY)
        for keyword in special_fences
    )
    return re.compile(
        rf"(?P<special>```(?:{alternatives}))|{CODE_BLOCK_PATTERN}",
        re.DOTALL,
    )


def scan_code_blocks(raw: str) -> list:
    """
    Split raw post content into Text and Code fragments.

    Args:
        raw: Raw post body as stored by the editor

    Returns:
        Ordered fragments; text between blocks is kept verbatim (untrimmed)

    Example:
        >>> scan_code_blocks("pre```js:foo.js\\nconsole.log(1)\\n```post")
        [Text(content='pre'), Code(language='js', filename='foo.js', ...), Text(content='post')]
    """
    if not raw:
        return []

    config = get_content_config()
    default_language = config["DEFAULT_CODE_LANGUAGE"]
    pattern = _compile_fence_pattern(config["SPECIAL_FENCES"])

    def build(match):
        # Special fences stay in the text for the later passes
        if match.groupdict().get("special"):
            return None

        return Code(
            language=match.group("language") or default_language,
            filename=match.group("filename") or "",
            code=match.group("code").strip(),
        )

    fragments = split_by_pattern(raw, pattern, build)
    logger.debug(
        f"Code block pass produced {len(fragments)} fragments "
        f"({sum(isinstance(f, Code) for f in fragments)} code blocks)"
    )
    return fragments
