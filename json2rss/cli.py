"""CLI entry point for json2rss."""
import argparse
import json
import logging
import sys

from rich.console import Console

from json2rss import __version__
from json2rss.api import build_json_feed, render_rss
from json2rss.formatters import JSONFeedFormatter
from json2rss.models import Feed, RenderOptions

logger = logging.getLogger(__name__)


def _read_feed(path: str) -> Feed:
    """Read a JSON Feed document from a file, or stdin for '-'."""
    if path == "-":
        data = json.load(sys.stdin)
    else:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError("JSON Feed document must be a JSON object")
    return Feed.from_dict(data)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="json2rss",
        description="Convert a JSON Feed (or a blog site file) to RSS 2.0",
    )
    parser.add_argument("feed", nargs="?", default=None,
                        help="JSON Feed file to convert ('-' for stdin)")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--site", type=str, default=None, metavar="FILE",
                        help="Build the feed from a site file (YAML or JSON) instead")
    parser.add_argument("-f", "--format", choices=["rss", "jsonfeed"], default="rss",
                        help="Output format (default: rss)")
    parser.add_argument("-o", "--output", type=str, default=None,
                        help="Write output to file instead of stdout")
    parser.add_argument("--feed-url", type=str, default=None, dest="feed_url",
                        help="URL of the RSS feed itself (default: derived from the JSON feed_url)")
    parser.add_argument("--language", type=str, default=None,
                        help="Channel language tag, e.g. en-us")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress status messages on stderr")
    parser.add_argument("--no-config", action="store_true",
                        help="Ignore config files (~/.json2rss.yaml, ./json2rss.yaml)")

    args = parser.parse_args(argv)

    # Apply config file defaults (CLI args always win)
    if not args.no_config:
        from json2rss.config import apply_config_defaults
        args = apply_config_defaults(parser, args)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    console = Console(stderr=True, quiet=args.quiet)

    if not args.feed and not args.site:
        parser.error("a JSON Feed file or --site FILE is required")

    if args.site:
        from json2rss.site_config import load_site_file
        try:
            site, posts = load_site_file(args.site)
        except Exception as e:
            print(f"Error loading site file: {e}", file=sys.stderr)
            sys.exit(1)
        feed = build_json_feed(site, posts)
        console.print(f"📂 Loaded {len(posts)} posts from {args.site}")
    else:
        try:
            feed = _read_feed(args.feed)
        except Exception as e:
            print(f"Error reading JSON Feed: {e}", file=sys.stderr)
            sys.exit(1)

    logger.debug(f"Rendering {len(feed.items)} items as {args.format}")
    if args.format == "jsonfeed":
        output = JSONFeedFormatter().format(feed)
    else:
        output = render_rss(feed, RenderOptions(feed_url=args.feed_url, language=args.language))

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        console.print(f"✅ Wrote {len(feed.items)} items to {args.output}")
    else:
        print(output)


if __name__ == "__main__":
    main()
