# blog/content/scanners/charts.py
"""
Extract chart specifications.

    ```chart {"type": "bar", "title": "Visitors"}
    {"labels": ["Mon", "Tue"], "datasets": [{"data": [3, 5]}]}
    ```

Two JSON payloads per block: chart options in the fence header, the dataset
in the body. If either fails to parse, the whole block is kept as text.
"""

import json
import logging
import re

from ..config import get_content_config
from ..fragments import Chart, Text
from .playgrounds import parse_header_options
from .utils import split_by_pattern

logger = logging.getLogger(__name__)

CHART_REGEX = re.compile(r"```chart\s*\{([^}]+)\}([^`]+)```")

# Header keys lifted out of the options dict
RESERVED_OPTION_KEYS = ("type", "title")


def scan_charts(text: str) -> list:
    """Split text into Text and Chart fragments."""
    if not text:
        return []

    default_type = get_content_config()["DEFAULT_CHART_TYPE"]

    def build(match):
        try:
            options = parse_header_options(match.group(1))
            chart_data = json.loads(match.group(2))
        except ValueError as e:
            logger.warning(f"Error parsing chart data: {e}")
            return Text(match.group(0))

        title = options.get("title")
        if isinstance(chart_data, dict) and title:
            chart_data = {**chart_data, "title": title}

        return Chart(
            chart_type=options.get("type") or default_type,
            data=chart_data,
            options={
                key: value
                for key, value in options.items()
                if key not in RESERVED_OPTION_KEYS
            },
        )

    return split_by_pattern(text, CHART_REGEX, build)
