"""Tests for the editor-side fence builders."""

import pytest

from blog.content import assemble_fragments
from blog.content.fences import (
    CHART_TYPES,
    DIAGRAM_TEMPLATES,
    PLAYGROUND_LANGUAGES,
    PLAYGROUND_TEMPLATES,
    SAMPLE_CHART_DATA,
    ChartDataError,
    PlaygroundOptionsError,
    build_chart_fence,
    build_gallery_marker,
    build_mermaid_fence,
    build_playground_fence,
    sample_chart_data,
)
from blog.content.fragments import (
    Chart,
    Diagram,
    Gallery,
    GalleryImage,
    Playground,
    PlaygroundOptions,
    Text,
)
from blog.content.scanners import (
    extract_galleries,
    scan_charts,
    scan_diagrams,
    scan_playgrounds,
)


class TestPlaygroundFence:
    """Tests for build_playground_fence."""

    def test_scanner_reads_back_the_fence(self):
        fence = build_playground_fence(
            "print(1)", language="python", read_only=False, height="300px"
        )
        assert fence.startswith("```playground {")
        assert scan_playgrounds(fence) == [
            Playground(
                options=PlaygroundOptions(language="python", read_only=False, height="300px"),
                code="print(1)",
            )
        ]

    def test_every_template_survives_the_pipeline(self):
        for language in PLAYGROUND_LANGUAGES:
            fence = build_playground_fence(PLAYGROUND_TEMPLATES[language], language=language)
            result = assemble_fragments(fence)
            assert len(result) == 1, language
            assert result[0].code == PLAYGROUND_TEMPLATES[language].strip()

    def test_unsupported_language_is_rejected(self):
        with pytest.raises(PlaygroundOptionsError):
            build_playground_fence("x", language="cobol")

    def test_backticks_are_rejected(self):
        with pytest.raises(PlaygroundOptionsError):
            build_playground_fence("const s = `template`;")


class TestChartFence:
    """Tests for build_chart_fence and the sample datasets."""

    def test_scanner_reads_back_the_fence(self):
        fence = build_chart_fence("bar", '{"labels": ["a"], "datasets": []}', title="T")
        assert scan_charts(fence) == [
            Chart(
                chart_type="bar",
                data={"labels": ["a"], "datasets": [], "title": "T"},
                options={},
            )
        ]

    def test_accepts_parsed_data(self):
        fence = build_chart_fence("pie", sample_chart_data("pie"))
        result = scan_charts(fence)
        assert result[0].chart_type == "pie"
        assert result[0].data["labels"] == ["Red", "Blue", "Yellow"]

    def test_untitled_chart_data_has_no_title(self):
        fence = build_chart_fence("line", '{"labels": ["a"], "datasets": []}')
        assert scan_charts(fence)[0].data == {"labels": ["a"], "datasets": []}

    def test_invalid_json_is_refused(self):
        with pytest.raises(ChartDataError, match="Invalid JSON data format"):
            build_chart_fence("line", "{not json")

    def test_chart_data_error_is_a_value_error(self):
        assert issubclass(ChartDataError, ValueError)

    def test_unknown_chart_type_is_refused(self):
        with pytest.raises(ChartDataError):
            build_chart_fence("radar", "{}")

    def test_every_chart_type_has_sample_data(self):
        assert set(SAMPLE_CHART_DATA) == set(CHART_TYPES)

    def test_sample_data_is_a_copy(self):
        data = sample_chart_data("line")
        data["labels"].append("June")
        assert "June" not in SAMPLE_CHART_DATA["line"]["labels"]


class TestMermaidFence:
    def test_templates_read_back_as_diagrams(self):
        for name, template in DIAGRAM_TEMPLATES.items():
            result = scan_diagrams(build_mermaid_fence(template))
            assert result == [Diagram(definition=template), Text("\n")], name


class TestGalleryMarker:
    """Tests for build_gallery_marker."""

    def test_extractor_reads_back_the_marker(self):
        marker = build_gallery_marker(
            [
                {"url": "a.png", "caption": "It's here", "altText": "A"},
                {"url": "b.png"},
            ]
        )
        assert marker.startswith('<div class="gallery-container"')
        assert extract_galleries(marker) == [
            Gallery(
                images=(
                    GalleryImage(url="a.png", caption="It's here", alt="A"),
                    GalleryImage(url="b.png", caption="", alt=""),
                )
            ),
            Text("<p></p>"),
        ]

    def test_empty_selection_inserts_nothing(self):
        assert build_gallery_marker([]) == ""
        assert build_gallery_marker(None) == ""
