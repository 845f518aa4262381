"""
Format renderers. Each output format is one ``Format`` member mapped to one
``Renderer`` subclass; adding a format means adding both.
"""
from __future__ import annotations

from typing import Dict, Type

from .base import Format, Renderer, escape_xml
from .feeds import GoogleNewsRenderer, RdfRenderer, RssRenderer
from .listing import HtmlRenderer, TxtRenderer
from .xml_sitemap import XmlSitemapRenderer

RENDERERS: Dict[Format, Type[Renderer]] = {
    Format.XML: XmlSitemapRenderer,
    Format.TXT: TxtRenderer,
    Format.HTML: HtmlRenderer,
    Format.RSS: RssRenderer,
    Format.RDF: RdfRenderer,
    Format.GOOGLE_NEWS: GoogleNewsRenderer,
}


def get_renderer(name: "str | Format") -> Renderer:
    """Renderer instance for ``name``; unknown names raise ``FormatError``."""
    return RENDERERS[Format.parse(name)]()


__all__ = [
    "Format",
    "Renderer",
    "RENDERERS",
    "escape_xml",
    "get_renderer",
]
