from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple
from xml.sax.saxutils import escape

from ..config import SitemapConfig
from ..errors import FormatError
from ..models import Channel, Item, SitemapEntry
from ..validators import check_items

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}

Escaper = Callable[[str], str]


class Format(str, Enum):
    XML = "xml"
    TXT = "txt"
    HTML = "html"
    RSS = "rss"
    RDF = "rdf"
    GOOGLE_NEWS = "google-news"

    @classmethod
    def parse(cls, name: "str | Format") -> "Format":
        try:
            return cls(name)
        except ValueError:
            raise FormatError(f"Unsupported format: {name}") from None


def escape_xml(value: str) -> str:
    """Escape ``& < > " '`` for element text and attribute values."""
    return escape(value, _QUOTE_ENTITIES)


def _verbatim(value: str) -> str:
    return value


def escaper_for(config: SitemapConfig) -> Escaper:
    return escape_xml if config.escaping else _verbatim


class Renderer(ABC):
    """
    Turns the store contents into one document. Renderers never mutate what
    they read and produce identical output for identical input.
    """

    format: Format

    def render(
        self,
        items: Sequence[Item],
        sitemap_entries: Sequence[SitemapEntry],
        config: SitemapConfig,
        channel: Optional[Channel] = None,
    ) -> str:
        if config.strict_mode:
            check_items(*self.emitted(items, sitemap_entries))
        return self._render(items, sitemap_entries, config, channel or Channel())

    def emitted(
        self, items: Sequence[Item], sitemap_entries: Sequence[SitemapEntry]
    ) -> Tuple[Sequence[Item], Sequence[SitemapEntry]]:
        """The records this format writes out; strict mode checks only these."""
        return items, ()

    @abstractmethod
    def _render(
        self,
        items: Sequence[Item],
        sitemap_entries: Sequence[SitemapEntry],
        config: SitemapConfig,
        channel: Channel,
    ) -> str:
        raise NotImplementedError
