"""Config file support for json2rss.

Loads default CLI arguments from:
  1. ~/.json2rss.yaml  (user-level)
  2. ./json2rss.yaml   (project-level, overrides user-level)

Example config file:

    # ~/.json2rss.yaml
    language: en-us
    format: rss
    quiet: true
"""
import logging
import os
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

_BOOL_FIELDS = {"verbose", "quiet"}
_STR_FIELDS = {"feed_url", "language", "format", "output", "site"}


def load_config() -> Dict[str, Any]:
    """Load config from YAML files, merging user + project level."""
    config: Dict[str, Any] = {}

    paths = [
        Path.home() / ".json2rss.yaml",
        Path.home() / ".json2rss.yml",
        Path("json2rss.yaml"),
        Path("json2rss.yml"),
    ]

    for p in paths:
        if p.is_file():
            try:
                import yaml
                with open(p, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
                if isinstance(data, dict):
                    # Normalize keys: dashes → underscores
                    normalized = {str(k).replace("-", "_"): v for k, v in data.items()}
                    config.update(normalized)
                    logger.debug(f"[Config] Loaded {p}")
            except Exception as e:
                logger.warning(f"[Config] Failed to load {p}: {e}")

    return config


def load_env_config() -> Dict[str, Any]:
    """Load config from JSON2RSS_* environment variables.

    Maps JSON2RSS_LANGUAGE=en-us → language=en-us, JSON2RSS_QUIET=1 → quiet=True.
    """
    prefix = "JSON2RSS_"
    config: Dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(prefix):
            continue
        field = key[len(prefix):].lower()
        if field in _BOOL_FIELDS:
            config[field] = value.lower() in ("1", "true", "yes", "on")
        elif field in _STR_FIELDS:
            config[field] = value
    return config


def _choices_for(parser, dest):
    """The argparse choices registered for dest, if any."""
    for action in parser._actions:
        if action.dest == dest and action.choices:
            return list(action.choices)
    return None


def apply_config_defaults(parser, args):
    """Apply config file defaults to unset CLI args (CLI always wins).

    Priority: CLI flags > env vars (JSON2RSS_*) > config files > parser defaults.
    """
    config = load_config()
    config.update(load_env_config())
    if not config:
        return args

    for key, value in config.items():
        if not hasattr(args, key):
            continue
        if getattr(args, key) != parser.get_default(key):
            continue  # User explicitly set it, don't override

        choices = _choices_for(parser, key)
        if choices and value not in choices:
            logger.warning(f"[Config] Ignoring {key}={value!r}: must be one of {', '.join(choices)}")
            continue

        if key in _BOOL_FIELDS:
            setattr(args, key, bool(value))
        elif key in _STR_FIELDS:
            setattr(args, key, str(value))

    return args
