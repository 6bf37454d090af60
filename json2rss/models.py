"""Data models for json2rss."""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Optional, Union

JSONFEED_VERSION = "https://jsonfeed.org/version/1.1"


def _first(data: Mapping[str, Any], *keys: str) -> Any:
    """Value of the first key present with a non-None value. JSON Feed keys
    come first, then the camelCase and short aliases."""
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


@dataclass(frozen=True)
class FeedItem:
    content: Optional[str] = None  # HTML body, "content_html" in JSON Feed
    id: Optional[str] = None
    summary: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None
    date_published: Optional[Union[datetime, str]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FeedItem":
        """Build an item from a JSON Feed item object. Unknown keys are ignored."""
        return cls(
            content=_first(data, "content_html", "contentHtml", "content"),
            id=data.get("id"),
            summary=data.get("summary"),
            title=data.get("title"),
            url=data.get("url"),
            date_published=_first(data, "date_published", "datePublished"),
        )

    def to_dict(self) -> Dict[str, Any]:
        published = self.date_published
        if isinstance(published, datetime):
            published = published.isoformat()
        item = {
            "id": self.id,
            "url": self.url,
            "title": self.title,
            "summary": self.summary,
            "content_html": self.content,
            "date_published": published,
        }
        return {k: v for k, v in item.items() if v is not None}


@dataclass(frozen=True)
class Feed:
    title: Optional[str] = None
    description: Optional[str] = None
    home_page_url: Optional[str] = None
    feed_url: Optional[str] = None
    items: List[FeedItem] = field(default_factory=list)
    version: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Feed":
        """Build a feed from a parsed JSON Feed document."""
        return cls(
            title=data.get("title"),
            description=data.get("description"),
            home_page_url=_first(data, "home_page_url", "homePageUrl"),
            feed_url=_first(data, "feed_url", "feedUrl"),
            items=[FeedItem.from_dict(i) for i in (data.get("items") or [])],
            version=data.get("version"),
        )

    def to_dict(self) -> Dict[str, Any]:
        feed = {
            "version": self.version,
            "title": self.title,
            "description": self.description,
            "home_page_url": self.home_page_url,
            "feed_url": self.feed_url,
        }
        out = {k: v for k, v in feed.items() if v is not None}
        out["items"] = [i.to_dict() for i in self.items]
        return out


@dataclass(frozen=True)
class RenderOptions:
    feed_url: Optional[str] = None  # overrides Feed.feed_url
    language: Optional[str] = None  # e.g. "en-us"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RenderOptions":
        return cls(
            feed_url=_first(data, "feed_url", "feedUrl"),
            language=data.get("language"),
        )


@dataclass(frozen=True)
class SiteInfo:
    title: str
    description: str
    url: str  # base URL, no trailing slash

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SiteInfo":
        missing = [k for k in ("title", "description", "url") if k not in data]
        if missing:
            raise ValueError(f"Site info is missing required key(s): {', '.join(missing)}")
        return cls(title=data["title"], description=data["description"], url=data["url"])


@dataclass(frozen=True)
class Post:
    title: str
    body: str
    date: str
    slug: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], slug: str = "") -> "Post":
        published = data.get("date", "")
        # YAML loads bare dates as date objects
        if isinstance(published, date):
            published = published.isoformat()
        return cls(
            title=data.get("title", ""),
            body=data.get("body", ""),
            date=str(published),
            slug=data.get("slug", slug),
        )
