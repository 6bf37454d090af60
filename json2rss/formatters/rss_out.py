"""RSS 2.0 output formatter — renders a JSON Feed as an RSS 2.0 document
with the Atom (self link) and Content (content:encoded) extensions."""
from typing import Optional

from json2rss.models import Feed, FeedItem, RenderOptions
from json2rss.utils import escape_xml, format_pub_date, is_absolute_url, json_to_xml_url

ATOM_NS = "http://www.w3.org/2005/Atom"
CONTENT_NS = "http://purl.org/rss/1.0/modules/content/"


def render_item(item: FeedItem) -> str:
    """Render one feed item as an <item> fragment.

    Elements are emitted only for fields that are set, in the order
    pubDate, title, link, guid, description, content:encoded.
    """
    date = format_pub_date(item.date_published) if item.date_published else ""
    date_element = f"      <pubDate>{date}</pubDate>\n" if date else ""
    title_element = f"      <title>{escape_xml(item.title)}</title>\n" if item.title else ""
    link_element = f"      <link>{item.url}</link>\n" if item.url else ""
    guid_element = ""
    if item.id:
        is_perma_link = "" if is_absolute_url(item.id) else ' isPermaLink="false"'
        guid_element = f"      <guid{is_perma_link}>{item.id}</guid>\n"
    description_element = (
        f"      <description>{escape_xml(item.summary)}</description>\n" if item.summary else ""
    )
    content_element = (
        f"      <content:encoded><![CDATA[{item.content}]]></content:encoded>\n" if item.content else ""
    )
    return (
        "    <item>\n"
        f"{date_element}{title_element}{link_element}{guid_element}{description_element}{content_element}"
        "    </item>\n"
    )


def resolve_feed_url(feed: Feed, options: RenderOptions) -> str:
    """Pick the URL for the atom:link self reference."""
    if options.feed_url:
        return options.feed_url
    if feed.feed_url:
        return json_to_xml_url(feed.feed_url)
    return ""


def render_rss(feed: Feed, options: Optional[RenderOptions] = None) -> str:
    """Render a whole feed as an RSS 2.0 XML document."""
    options = options or RenderOptions()
    feed_url = resolve_feed_url(feed, options)
    items = "".join(render_item(i) for i in (feed.items or []))

    title_element = f"    <title>{escape_xml(feed.title)}</title>\n" if feed.title else ""
    description_element = (
        f"    <description>{escape_xml(feed.description)}</description>\n" if feed.description else ""
    )
    link_element = f"    <link>{feed.home_page_url}</link>\n" if feed.home_page_url else ""
    language_element = f"    <language>{options.language}</language>\n" if options.language else ""
    self_link_element = f'    <atom:link href="{feed_url}" rel="self" type="application/rss+xml"/>\n'

    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<rss version="2.0" xmlns:atom="{ATOM_NS}" xmlns:content="{CONTENT_NS}">\n'
        "  <channel>\n"
        f"{title_element}{description_element}{link_element}{language_element}{self_link_element}{items}"
        "  </channel>\n"
        "</rss>"
    )


class RSSFormatter:
    """Format a JSON Feed as an RSS 2.0 feed."""

    def __init__(self, feed_url: Optional[str] = None, language: Optional[str] = None):
        self.options = RenderOptions(feed_url=feed_url, language=language)

    def format(self, feed: Feed) -> str:
        return render_rss(feed, self.options)
