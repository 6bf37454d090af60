"""Public Python API for json2rss — use as a library.

Quick start:

    import json
    from json2rss.api import build_json_feed, render_rss

    with open("feed.json", encoding="utf-8") as f:
        xml = render_rss(json.load(f), {"language": "en-us"})

    feed = build_json_feed(
        {"title": "My Blog", "description": "Notes", "url": "https://blog.test"},
        {"hello": {"title": "Hello", "body": "<p>Hi</p>", "date": "2024-01-01"}},
    )
    xml = render_rss(feed)          # atom:link -> https://blog.test/feed.xml

Both functions accept model instances (json2rss.models) or plain dicts.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from json2rss.formatters import jsonfeed, rss_out
from json2rss.models import Feed, Post, RenderOptions, SiteInfo


def build_json_feed(
    site_info: Union[SiteInfo, Mapping[str, Any]],
    posts: Mapping[str, Union[Post, Mapping[str, Any]]],
) -> Feed:
    """Build a JSON Feed from site info and a slug -> post mapping.

    Args:
        site_info: SiteInfo or a dict with 'title', 'description' and 'url'.
        posts: Mapping of slug to Post (or dict with 'title', 'body', 'date').
            Iteration order becomes item order.

    Returns:
        A Feed with one item per post.
    """
    if not isinstance(site_info, SiteInfo):
        site_info = SiteInfo.from_dict(site_info)
    coerced = {
        slug: post if isinstance(post, Post) else Post.from_dict(post, slug=slug)
        for slug, post in posts.items()
    }
    return jsonfeed.build_json_feed(site_info, coerced)


def render_rss(
    feed: Union[Feed, Mapping[str, Any]],
    options: Optional[Union[RenderOptions, Mapping[str, Any]]] = None,
) -> str:
    """Render a JSON Feed as an RSS 2.0 document.

    Args:
        feed: Feed, or a parsed JSON Feed dict (snake_case JSON Feed keys).
        options: RenderOptions or a dict with optional 'feed_url' and
            'language' keys. 'feed_url' wins over the feed's own feed_url.

    Returns:
        The XML document as a string.
    """
    if not isinstance(feed, Feed):
        feed = Feed.from_dict(feed)
    if options is not None and not isinstance(options, RenderOptions):
        options = RenderOptions.from_dict(options)
    return rss_out.render_rss(feed, options)
