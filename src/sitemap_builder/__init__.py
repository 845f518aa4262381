"""
sitemap-builder

Multi-format sitemap rendering: XML sitemaps and indexes, RSS, RDF,
Google News, HTML and plain-text URL lists.
"""

from .config import SitemapConfig, load_config
from .errors import (
    CompressionError,
    FormatError,
    ItemValidationError,
    SitemapError,
    SizeLimitError,
    ValidationError,
)
from .models import Alternate, Channel, GoogleNews, Image, Item, SitemapEntry, Translation, Video
from .renderers import Format
from .sitemap import FileStorage, Sitemap
from .store import ItemStore

__all__ = [
    "__version__",
    "Alternate",
    "Channel",
    "CompressionError",
    "FileStorage",
    "Format",
    "FormatError",
    "GoogleNews",
    "Image",
    "Item",
    "ItemStore",
    "ItemValidationError",
    "Sitemap",
    "SitemapConfig",
    "SitemapEntry",
    "SitemapError",
    "SizeLimitError",
    "Translation",
    "ValidationError",
    "Video",
    "load_config",
]

__version__ = "0.1.0"
