"""Output formatters."""
from .jsonfeed import JSONFeedFormatter, build_json_feed
from .rss_out import RSSFormatter, render_item, render_rss

__all__ = ["JSONFeedFormatter", "RSSFormatter", "build_json_feed", "render_item", "render_rss"]
