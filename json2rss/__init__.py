"""json2rss — JSON Feed to RSS 2.0 conversion."""
__version__ = "1.0.0"

from json2rss.api import build_json_feed, render_rss  # noqa: E402
from json2rss.models import Feed, FeedItem, Post, RenderOptions, SiteInfo  # noqa: E402

__all__ = ["build_json_feed", "render_rss", "Feed", "FeedItem", "Post", "RenderOptions", "SiteInfo"]
