"""JSON Feed 1.1 output — https://www.jsonfeed.org/version/1.1/"""
import json
from typing import Mapping

from json2rss.models import JSONFEED_VERSION, Feed, FeedItem, Post, SiteInfo


def build_json_feed(site_info: SiteInfo, posts: Mapping[str, Post]) -> Feed:
    """Map a blog's site info and posts (keyed by slug) to a JSON Feed.

    Items keep the iteration order of ``posts``. Root-relative ``src="/...``
    references in post bodies are made absolute against the site URL.
    """
    base = site_info.url
    items = []
    for slug, post in posts.items():
        link = f"{base}/posts/{slug}"
        items.append(FeedItem(
            content=post.body.replace('src="/', f'src="{base}/'),
            date_published=post.date,
            id=link,
            title=post.title,
            url=link,
        ))
    return Feed(
        version=JSONFEED_VERSION,
        title=site_info.title,
        description=site_info.description,
        feed_url=f"{base}/feed.json",
        home_page_url=base,
        items=items,
    )


class JSONFeedFormatter:
    """Format a feed as a JSON Feed 1.1 document."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def format(self, feed: Feed) -> str:
        return json.dumps(feed.to_dict(), indent=self.indent, ensure_ascii=False)
