# blog/content/fences.py
"""
Builders for the special blocks the post editor inserts.

These produce exactly the syntax the scanners read back:

    build_playground_fence  -> ```playground {...}
    build_chart_fence       -> ```chart {...}
    build_mermaid_fence     -> ```mermaid
    build_gallery_marker    -> <div class="gallery-container" data-gallery='...'>

Unlike the scanners, builders refuse bad input by raising, so malformed
content never reaches a stored post.
"""

import json
import logging

from django.utils.html import escape

logger = logging.getLogger(__name__)


class ChartDataError(ValueError):
    """Chart type or dataset rejected before insertion."""


class PlaygroundOptionsError(ValueError):
    """Playground options or code rejected before insertion."""


PLAYGROUND_LANGUAGES = ["javascript", "typescript", "python", "html", "css", "json"]

PLAYGROUND_TEMPLATES = {
    "javascript": """// Write your JavaScript code here
function example() {
    console.log("Hello, World!");
}""",
    "typescript": """// Write your TypeScript code here
interface Example {
    message: string;
}

function greet(data: Example): void {
    console.log(data.message);
}""",
    "python": """# Write your Python code here
def example():
    print("Hello, World!")""",
    "html": """<!-- Write your HTML code here -->
<!DOCTYPE html>
<html>
<head>
    <title>Example</title>
</head>
<body>
    <h1>Hello, World!</h1>
</body>
</html>""",
    "css": """/* Write your CSS code here */
.example {
    color: blue;
    font-size: 16px;
}""",
    "json": """{
    "example": {
        "message": "Hello, World!",
        "value": 42
    }
}""",
}

CHART_TYPES = ["line", "bar", "pie", "doughnut"]

_PIE_SAMPLE = {
    "labels": ["Red", "Blue", "Yellow"],
    "datasets": [
        {
            "data": [300, 50, 100],
            "backgroundColor": [
                "rgb(255, 99, 132)",
                "rgb(54, 162, 235)",
                "rgb(255, 205, 86)",
            ],
        }
    ],
}

SAMPLE_CHART_DATA = {
    "line": {
        "labels": ["January", "February", "March", "April", "May"],
        "datasets": [
            {
                "label": "Sample Data",
                "data": [65, 59, 80, 81, 56],
                "borderColor": "rgb(75, 192, 192)",
                "tension": 0.1,
            }
        ],
    },
    "bar": {
        "labels": ["Red", "Blue", "Yellow", "Green", "Purple"],
        "datasets": [
            {
                "label": "Sample Data",
                "data": [12, 19, 3, 5, 2],
                "backgroundColor": [
                    "rgba(255, 99, 132, 0.5)",
                    "rgba(54, 162, 235, 0.5)",
                    "rgba(255, 206, 86, 0.5)",
                    "rgba(75, 192, 192, 0.5)",
                    "rgba(153, 102, 255, 0.5)",
                ],
            }
        ],
    },
    "pie": _PIE_SAMPLE,
    "doughnut": _PIE_SAMPLE,
}

DIAGRAM_TEMPLATES = {
    "flowchart": """graph TD
    A[Start] --> B{Decision}
    B -->|Yes| C[Action]
    B -->|No| D[End]""",
    "sequence": """sequenceDiagram
    participant A as Alice
    participant B as Bob
    A->>B: Hello Bob
    B->>A: Hi Alice""",
    "class": """classDiagram
    class Animal {
        +name: string
        +makeSound(): void
    }
    class Dog {
        +bark(): void
    }
    Animal <|-- Dog""",
}


def _compact_json(value) -> str:
    """JSON on one line, matching what the fence header parser expects."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def sample_chart_data(chart_type: str) -> dict:
    """Deep copy of the sample dataset for a chart type."""
    if chart_type not in SAMPLE_CHART_DATA:
        raise ChartDataError(f"Unsupported chart type: {chart_type}")
    return json.loads(json.dumps(SAMPLE_CHART_DATA[chart_type]))


def build_playground_fence(
    code: str,
    *,
    language: str = "javascript",
    read_only: bool = True,
    height: str = "500px",
) -> str:
    """
    Build a ```playground block.

    Raises:
        PlaygroundOptionsError: Unsupported language, or content that would
            not survive a round trip through the scanner
    """
    if language not in PLAYGROUND_LANGUAGES:
        raise PlaygroundOptionsError(f"Unsupported playground language: {language}")
    if "`" in code:
        raise PlaygroundOptionsError("Playground code cannot contain backticks")

    header = _compact_json(
        {"language": language, "readOnly": read_only, "height": height or "500px"}
    )
    if "}" in header[1:-1]:
        raise PlaygroundOptionsError("Playground options cannot contain '}'")

    return f"```playground {header}\n{code}\n```"


def build_chart_fence(chart_type: str, data, *, title: str = "") -> str:
    """
    Build a ```chart block after validating the dataset.

    Args:
        chart_type: One of CHART_TYPES
        data: Dataset as a JSON string (as typed by the author) or an object
        title: Optional chart title

    Raises:
        ChartDataError: Invalid JSON or unsupported chart type. Nothing
            should be inserted; the message is meant for the author.
    """
    if chart_type not in CHART_TYPES:
        raise ChartDataError(f"Unsupported chart type: {chart_type}")

    if isinstance(data, str):
        try:
            data = json.loads(data)
        except ValueError as e:
            logger.info(f"Rejected chart insertion with invalid JSON: {e}")
            raise ChartDataError("Invalid JSON data format") from e

    header = _compact_json({"type": chart_type, "title": title})
    body = json.dumps(data, indent=2, ensure_ascii=False)
    if "}" in header[1:-1] or "`" in body:
        raise ChartDataError("Chart title or data contains unsupported characters")

    return f"```chart {header}\n{body}\n```"


def build_mermaid_fence(definition: str) -> str:
    """Build a ```mermaid block around a diagram definition."""
    return f"```mermaid\n{definition}\n```\n"


def build_gallery_marker(images) -> str:
    """
    Build the placeholder div for a gallery.

    ``images`` is the media selection handed over by the media picker: a
    sequence of mappings with ``url`` and optional ``caption`` and
    ``altText`` (or ``alt``). An empty selection inserts nothing.
    """
    images = list(images or [])
    if not images:
        return ""

    gallery = {
        "type": "gallery",
        "images": [
            {
                "url": media["url"],
                "caption": media.get("caption") or "",
                "alt": media.get("altText") or media.get("alt") or "",
            }
            for media in images
        ],
    }
    payload = escape(_compact_json(gallery))
    return f"<div class=\"gallery-container\" data-gallery='{payload}'></div><p></p>"
