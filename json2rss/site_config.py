"""YAML/JSON site file loader (site info + posts)."""
import logging
from pathlib import Path
from typing import Dict, Tuple

from json2rss.models import Post, SiteInfo

logger = logging.getLogger(__name__)


def load_site_file(path: str) -> Tuple[SiteInfo, Dict[str, Post]]:
    """Load site info and posts from a YAML or JSON file.

    Expected format (YAML):
        site:
          title: My Blog
          description: Notes and things
          url: https://blog.example.com
        posts:
          hello-world:
            title: Hello, World
            date: 2024-01-01
            body: <p>First post</p>

    ``posts`` may also be a list of post objects, each with a ``slug``.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Site file not found: {path}")

    content = p.read_text(encoding="utf-8")

    if p.suffix in (".yaml", ".yml"):
        import yaml
        data = yaml.safe_load(content)
    elif p.suffix == ".json":
        import json
        data = json.loads(content)
    else:
        raise ValueError(f"Unsupported site file format: {p.suffix} (use .yaml, .yml, or .json)")

    if not isinstance(data, dict) or not isinstance(data.get("site"), dict):
        raise ValueError("Site file must contain a top-level 'site' mapping with title, description and url")

    site = SiteInfo.from_dict(data["site"])
    posts = parse_posts(data.get("posts") or {})

    logger.info(f"Loaded {len(posts)} posts from {path}")
    return site, posts


def parse_posts(raw) -> Dict[str, Post]:
    """Normalize a posts mapping or list into an ordered slug -> Post dict."""
    posts: Dict[str, Post] = {}
    if isinstance(raw, dict):
        for slug, entry in raw.items():
            if not isinstance(entry, dict):
                raise ValueError(f"Post '{slug}' must be a mapping")
            posts[str(slug)] = Post.from_dict(entry, slug=str(slug))
    elif isinstance(raw, list):
        for i, entry in enumerate(raw):
            if not isinstance(entry, dict) or not entry.get("slug"):
                raise ValueError(f"Post #{i+1} must be a dict with at least 'slug'")
            post = Post.from_dict(entry)
            if post.slug in posts:
                logger.warning(f"Duplicate slug '{post.slug}', keeping the later post")
            posts[post.slug] = post
    else:
        raise ValueError("'posts' must be a mapping of slug to post or a list of posts")
    return posts
