"""Tests for URL embed classification and scanning."""

import pytest

from blog.content.fragments import Embed, Text
from blog.content.scanners.embeds import (
    get_embed_component,
    is_embeddable,
    parse_embed_url,
    scan_embeds,
)


class TestScanEmbeds:
    """Tests for scan_embeds."""

    def test_youtu_be_short_link(self):
        assert scan_embeds("https://youtu.be/abc123") == [
            Embed(
                embed_type="youtube",
                id="abc123",
                url="https://www.youtube.com/embed/abc123",
            )
        ]

    def test_youtube_watch_link(self):
        result = scan_embeds("https://www.youtube.com/watch?v=abc123&t=10")
        assert len(result) == 1
        assert result[0].embed_type == "youtube"
        assert result[0].id == "abc123"

    def test_youtube_without_video_id_stays_text(self):
        url = "https://www.youtube.com/channel/xyz"
        assert scan_embeds(url) == [Text(url)]

    def test_twitter_status(self):
        url = "https://twitter.com/someone/status/12345?s=20"
        assert scan_embeds(url) == [Embed(embed_type="twitter", id="12345", url=url)]

    def test_x_dot_com_status(self):
        result = scan_embeds("https://x.com/someone/status/987/photo/1")
        assert result[0].embed_type == "twitter"
        assert result[0].id == "987"

    def test_twitter_profile_stays_text(self):
        url = "https://twitter.com/someone"
        assert scan_embeds(url) == [Text(url)]

    def test_instagram_post(self):
        result = scan_embeds("https://www.instagram.com/p/Cabc123/")
        assert result == [
            Embed(
                embed_type="instagram",
                id="Cabc123",
                url="https://www.instagram.com/p/Cabc123/embed",
            )
        ]

    def test_instagram_profile_stays_text(self):
        url = "https://www.instagram.com/someone/"
        assert scan_embeds(url) == [Text(url)]

    def test_unrecognized_host_passthrough(self):
        assert scan_embeds("https://example.com/page") == [
            Text("https://example.com/page")
        ]

    def test_malformed_url_does_not_raise(self):
        url = "http://[not-an-ipv6"
        assert scan_embeds(url) == [Text(url)]

    def test_surrounding_text_is_kept_in_order(self):
        result = scan_embeds("Watch https://youtu.be/abc now")
        assert result == [
            Text("Watch "),
            Embed(embed_type="youtube", id="abc", url="https://www.youtube.com/embed/abc"),
            Text(" now"),
        ]

    def test_url_stops_at_angle_bracket(self):
        result = scan_embeds("<p>https://youtu.be/abc</p>")
        assert result[0] == Text("<p>")
        assert result[1].id == "abc"
        assert result[2] == Text("</p>")

    def test_text_without_urls(self):
        assert scan_embeds("no links here") == [Text("no links here")]

    def test_empty_input(self):
        assert scan_embeds("") == []


class TestEmbedHelpers:
    """Tests for the URL helpers used by the editor and renderer."""

    def test_parse_embed_url_success(self):
        lookup = parse_embed_url("https://youtu.be/abc")
        assert lookup.ok
        assert (lookup.embed_type, lookup.id) == ("youtube", "abc")

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com/",
            "https://www.youtube.com/",
            "http://[broken",
        ],
    )
    def test_parse_embed_url_reports_error(self, url):
        lookup = parse_embed_url(url)
        assert not lookup.ok
        assert lookup.embed_type is None
        assert lookup.error

    def test_is_embeddable(self):
        assert is_embeddable("https://www.instagram.com/anything")
        assert not is_embeddable("https://example.com/")
        assert not is_embeddable("http://[broken")

    def test_get_embed_component(self):
        assert get_embed_component("https://youtu.be/abc") == "YouTubeEmbed"
        assert get_embed_component("https://x.com/a/status/1") == "TwitterEmbed"
        assert get_embed_component("https://instagram.com/p/x") == "InstagramEmbed"
        assert get_embed_component("https://example.com") is None
