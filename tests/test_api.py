"""Tests for the public library API."""
import xml.etree.ElementTree as ET

import json2rss
from json2rss.api import build_json_feed, render_rss
from json2rss.models import Feed, RenderOptions


class TestRenderRssApi:
    def test_accepts_dict_feed(self):
        out = render_rss({"title": "T", "items": [{"id": "not-a-url", "content_html": "<b>x</b>"}]})
        assert "<title>T</title>" in out
        assert '<guid isPermaLink="false">not-a-url</guid>' in out
        assert "<![CDATA[<b>x</b>]]>" in out

    def test_empty_items(self):
        out = render_rss({"items": []})
        root = ET.fromstring(out.encode("utf-8"))
        assert root.findall("channel/item") == []

    def test_feed_url_to_xml(self):
        out = render_rss({"feed_url": "https://x.test/feed.json"})
        assert 'href="https://x.test/feed.xml"' in out

    def test_camel_case_feed_keys(self):
        out = render_rss({
            "feedUrl": "https://x.test/feed.json",
            "homePageUrl": "https://x.test",
            "items": [{"content": "<p>x</p>", "datePublished": "2024-01-01"}],
        })
        assert 'href="https://x.test/feed.xml"' in out
        assert "<link>https://x.test</link>" in out
        assert "<![CDATA[<p>x</p>]]>" in out
        assert "<pubDate>Mon, 01 Jan 2024 00:00:00 GMT</pubDate>" in out

    def test_dict_options(self):
        out = render_rss(Feed(feed_url="https://x.test/feed.json"), {"feedUrl": "https://o.test/rss", "language": "fr"})
        assert 'href="https://o.test/rss"' in out
        assert "<language>fr</language>" in out

    def test_options_instance(self):
        out = render_rss(Feed(), RenderOptions(language="en-us"))
        assert "<language>en-us</language>" in out

    def test_exported_from_package(self):
        assert json2rss.render_rss is render_rss
        assert json2rss.build_json_feed is build_json_feed


class TestBuildJsonFeedApi:
    def test_example(self):
        feed = build_json_feed(
            {"title": "T", "description": "D", "url": "https://s.test"},
            {"a": {"title": "A", "body": '<img src="/x.png">', "date": "2024-01-01", "slug": "a"}},
        )
        assert len(feed.items) == 1
        item = feed.items[0]
        assert item.url == "https://s.test/posts/a"
        assert item.id == item.url
        assert item.content == '<img src="https://s.test/x.png">'

    def test_accepts_models(self, site_info, posts):
        feed = build_json_feed(site_info, posts)
        assert [i.title for i in feed.items] == ["A", "B & Co"]


class TestRoundTrip:
    def test_build_then_render(self, site_info, posts):
        out = render_rss(build_json_feed(site_info, posts))
        root = ET.fromstring(out.encode("utf-8"))
        channel = root.find("channel")
        items = channel.findall("item")
        assert [i.find("title").text for i in items] == ["A", "B & Co"]
        assert items[0].find("pubDate").text == "Mon, 01 Jan 2024 00:00:00 GMT"
        assert items[1].find("pubDate").text == "last tuesday"
        assert items[0].find("guid").get("isPermaLink") is None
        assert 'href="https://s.test/feed.xml"' in out
        assert channel.find("link").text == "https://s.test"

    def test_dict_round_trip_matches_models(self, site_info, posts):
        feed = build_json_feed(site_info, posts)
        assert render_rss(feed.to_dict()) == render_rss(feed)
