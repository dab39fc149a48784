# blog/content/__init__.py

from .assembler import assemble_fragments
from .fragments import (
    Chart,
    Code,
    Diagram,
    Embed,
    Fragment,
    Gallery,
    GalleryImage,
    Playground,
    PlaygroundOptions,
    Text,
    fragments_to_dicts,
    is_text,
)

__all__ = (
    "Chart",
    "Code",
    "Diagram",
    "Embed",
    "Fragment",
    "Gallery",
    "GalleryImage",
    "Playground",
    "PlaygroundOptions",
    "Text",
    "assemble_fragments",
    "fragments_to_dicts",
    "is_text",
)
