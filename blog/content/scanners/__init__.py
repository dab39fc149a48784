# blog/content/scanners/__init__.py

from .charts import scan_charts
from .code_blocks import scan_code_blocks
from .diagrams import scan_diagrams
from .embeds import scan_embeds
from .galleries import extract_galleries
from .playgrounds import scan_playgrounds

# Scanners run independently over each text segment that holds no gallery
# markers. Order matters - their special fragments are emitted in this order
RICH_SCANNERS = [
    scan_embeds,
    scan_playgrounds,
    scan_charts,
    scan_diagrams,
]

# Order used when interleaving: fenced blocks first so URLs inside playground
# code or chart data are not turned into embeds
CASCADE_SCANNERS = [
    scan_playgrounds,
    scan_charts,
    scan_diagrams,
    scan_embeds,
]


def apply_rich_scanners(text):
    """Run every rich scanner over the same text, returning results in order."""
    return [scanner(text) for scanner in RICH_SCANNERS]


__all__ = [
    "CASCADE_SCANNERS",
    "RICH_SCANNERS",
    "apply_rich_scanners",
    "extract_galleries",
    "scan_charts",
    "scan_code_blocks",
    "scan_diagrams",
    "scan_embeds",
    "scan_playgrounds",
]
