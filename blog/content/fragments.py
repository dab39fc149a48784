# blog/content/fragments.py
"""
Typed fragments produced by the content pipeline.

A post body is split into an ordered list of fragments that a renderer walks
one by one:

    Text        raw HTML rendered verbatim
    Code        fenced code block (```lang:filename)
    Embed       YouTube / Twitter / Instagram URL reduced to an embed id
    Playground  ```playground {options} interactive code sample
    Chart       ```chart {options} chart specification
    Diagram     ```mermaid diagram source
    Gallery     <div class="gallery-container" data-gallery='...'> marker

Fragments are immutable; ``to_dict()`` gives the shape the front-end
renderer expects (camelCase keys, ``type`` tag).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterable, Optional, Union


@dataclass(frozen=True)
class Text:
    type: ClassVar[str] = "text"

    content: str

    def to_dict(self) -> dict:
        return {"type": self.type, "content": self.content}


@dataclass(frozen=True)
class Code:
    type: ClassVar[str] = "code"

    language: str = "plaintext"
    filename: str = ""
    code: str = ""
    # Line highlighting syntax is not parsed yet; always empty
    highlighted_lines: tuple[int, ...] = ()

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "language": self.language,
            "filename": self.filename,
            "code": self.code,
            "highlightedLines": list(self.highlighted_lines),
        }


@dataclass(frozen=True)
class Embed:
    type: ClassVar[str] = "embed"

    embed_type: str  # "youtube" | "twitter" | "instagram"
    id: str
    url: str

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "embedType": self.embed_type,
            "id": self.id,
            "url": self.url,
        }


@dataclass(frozen=True)
class PlaygroundOptions:
    language: str = "javascript"
    read_only: bool = True
    height: str = "500px"

    def to_dict(self) -> dict:
        return {
            "language": self.language,
            "readOnly": self.read_only,
            "height": self.height,
        }


@dataclass(frozen=True)
class Playground:
    type: ClassVar[str] = "playground"

    options: PlaygroundOptions
    code: str

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "options": self.options.to_dict(),
            "code": self.code,
        }


@dataclass(frozen=True)
class Chart:
    type: ClassVar[str] = "chart"

    chart_type: str
    data: Any
    options: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "chartType": self.chart_type,
            "data": self.data,
            "options": dict(self.options),
        }


@dataclass(frozen=True)
class Diagram:
    type: ClassVar[str] = "diagram"

    definition: str

    def to_dict(self) -> dict:
        return {"type": self.type, "definition": self.definition}


@dataclass(frozen=True)
class GalleryImage:
    url: str
    caption: Optional[str] = None
    alt: Optional[str] = None

    def to_dict(self) -> dict:
        image = {"url": self.url}
        if self.caption is not None:
            image["caption"] = self.caption
        if self.alt is not None:
            image["alt"] = self.alt
        return image


@dataclass(frozen=True)
class Gallery:
    type: ClassVar[str] = "gallery"

    images: tuple[GalleryImage, ...] = ()

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "images": [image.to_dict() for image in self.images],
        }


Fragment = Union[Text, Code, Embed, Playground, Chart, Diagram, Gallery]


def is_text(fragment: Fragment) -> bool:
    """True for plain Text fragments, the only kind later passes rescan."""
    return isinstance(fragment, Text)


def fragments_to_dicts(fragments: Iterable[Fragment]) -> list[dict]:
    """Serialise fragments to the renderer's wire format."""
    return [fragment.to_dict() for fragment in fragments]
