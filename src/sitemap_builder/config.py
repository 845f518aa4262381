from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .errors import ValidationError
from .models import Channel, Item, SitemapEntry
from .validators import validate_url

FORMATS = ("xml", "txt", "html", "rss", "rdf", "google-news")
DEFAULT_MAX_SIZE = 10485760  # 10 MiB

_BOOL_OPTIONS = {
    "escaping",
    "use_cache",
    "use_limit_size",
    "use_gzip",
    "use_styles",
    "strict_mode",
}


def _validate_option(name: str, value: Any) -> None:
    if name in _BOOL_OPTIONS:
        if not isinstance(value, bool):
            raise ValidationError(f"{name} must be a boolean, got: {value!r}")
    elif name == "max_size":
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"max_size must be an integer, got: {value!r}")
        if value <= 0:
            raise ValidationError("max_size must be greater than 0")
    elif name == "cache_path":
        if value is not None and not isinstance(value, str):
            raise ValidationError(f"cache_path must be a string, got: {value!r}")
    elif name == "domain":
        if value is not None:
            if not isinstance(value, str) or not validate_url(value)[0]:
                raise ValidationError(f"Invalid domain: {value!r}")
    elif name == "default_format":
        if value not in FORMATS:
            raise ValidationError(f"Invalid default format: {value!r}")


@dataclass
class SitemapConfig:
    """
    Rendering options. Every assignment, including the ones made by
    ``__init__``, is validated; invalid values raise ``ValidationError``.

    ``use_cache`` and ``cache_path`` are only carried for cache adapters.
    """

    escaping: bool = True
    use_cache: bool = False
    cache_path: Optional[str] = None
    use_limit_size: bool = False
    max_size: int = DEFAULT_MAX_SIZE
    use_gzip: bool = False
    use_styles: bool = True
    domain: Optional[str] = None
    strict_mode: bool = False
    default_format: str = "xml"

    def __setattr__(self, name: str, value: Any) -> None:
        _validate_option(name, value)
        super().__setattr__(name, value)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SitemapConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValidationError(f"Unknown configuration option(s): {', '.join(unknown)}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class SitemapDocument:
    """Everything a YAML sitemap file can describe."""

    config: SitemapConfig
    channel: Channel = field(default_factory=Channel)
    items: List[Item] = field(default_factory=list)
    sitemaps: List[SitemapEntry] = field(default_factory=list)


def _load_raw_config(path: Path) -> Dict[str, Any]:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValidationError("Config root must be a mapping")
    return data


def _section(raw: Dict[str, Any], key: str, kind: type) -> Any:
    value = raw.get(key)
    if value is None:
        return kind()
    if not isinstance(value, kind):
        raise ValidationError(f"Config `{key}` must be a {'mapping' if kind is dict else 'list'}")
    return value


def load_config(path: Path) -> SitemapConfig:
    """Read the ``sitemap:`` section of a YAML file into a ``SitemapConfig``."""
    raw = _load_raw_config(path)
    return SitemapConfig.from_dict(_section(raw, "sitemap", dict))


def load_document(path: Path) -> SitemapDocument:
    """Read config, channel, items and sitemap index entries from one YAML file."""
    raw = _load_raw_config(path)
    config = SitemapConfig.from_dict(_section(raw, "sitemap", dict))
    channel = Channel.from_dict(_section(raw, "channel", dict))
    items = [Item.from_dict(r) for r in _section(raw, "items", list)]
    sitemaps = [SitemapEntry.from_dict(r) for r in _section(raw, "sitemaps", list)]
    return SitemapDocument(config=config, channel=channel, items=items, sitemaps=sitemaps)
