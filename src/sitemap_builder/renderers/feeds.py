"""Feed-style views of the item store: RSS 2.0, RDF (RSS 1.0) and Google News."""
from __future__ import annotations

from email.utils import format_datetime
from typing import List, Sequence

from ..config import SitemapConfig
from ..models import Channel, Item, SitemapEntry
from ..validators import parse_lastmod
from .base import XML_DECLARATION, Format, Renderer, escaper_for
from .xml_sitemap import NEWS_NS, SITEMAP_NS, URLSET_FOOTER, news_lines, text_element

RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
RSS1_NS = "http://purl.org/rss/1.0/"
DC_NS = "http://purl.org/dc/elements/1.1/"


def _channel_link(channel: Channel, config: SitemapConfig) -> str:
    return channel.link or config.domain or ""


def _rfc822(lastmod: str) -> str:
    """RSS wants RFC 822 dates; unparseable values are passed through."""
    parsed = parse_lastmod(lastmod)
    if parsed is None:
        return lastmod
    return format_datetime(parsed)


class RssRenderer(Renderer):
    format = Format.RSS

    def _render(
        self,
        items: Sequence[Item],
        sitemap_entries: Sequence[SitemapEntry],
        config: SitemapConfig,
        channel: Channel,
    ) -> str:
        esc = escaper_for(config)
        lines: List[str] = [
            XML_DECLARATION,
            '<rss version="2.0">',
            "  <channel>",
            text_element(4, "title", channel.title, esc),
            text_element(4, "link", _channel_link(channel, config), esc),
            text_element(4, "description", channel.description, esc),
        ]
        for item in items:
            lines.append("    <item>")
            lines.append(text_element(6, "title", item.title or item.loc, esc))
            lines.append(text_element(6, "link", item.loc, esc))
            lines.append(f'      <guid isPermaLink="true">{esc(item.loc)}</guid>')
            if item.lastmod:
                lines.append(text_element(6, "pubDate", _rfc822(item.lastmod), esc))
            lines.append("    </item>")
        lines.append("  </channel>")
        lines.append("</rss>")
        return "\n".join(lines)


class RdfRenderer(Renderer):
    format = Format.RDF

    def _render(
        self,
        items: Sequence[Item],
        sitemap_entries: Sequence[SitemapEntry],
        config: SitemapConfig,
        channel: Channel,
    ) -> str:
        esc = escaper_for(config)
        link = _channel_link(channel, config)
        lines: List[str] = [
            XML_DECLARATION,
            f'<rdf:RDF xmlns:rdf="{RDF_NS}" xmlns="{RSS1_NS}" xmlns:dc="{DC_NS}">',
            f'  <channel rdf:about="{esc(link)}">',
            text_element(4, "title", channel.title, esc),
            text_element(4, "link", link, esc),
            text_element(4, "description", channel.description, esc),
            "    <items>",
            "      <rdf:Seq>",
        ]
        for item in items:
            lines.append(f'        <rdf:li rdf:resource="{esc(item.loc)}"/>')
        lines.extend(["      </rdf:Seq>", "    </items>", "  </channel>"])
        for item in items:
            lines.append(f'  <item rdf:about="{esc(item.loc)}">')
            lines.append(text_element(4, "title", item.title or item.loc, esc))
            lines.append(text_element(4, "link", item.loc, esc))
            if item.lastmod:
                lines.append(text_element(4, "dc:date", item.lastmod, esc))
            lines.append("  </item>")
        lines.append("</rdf:RDF>")
        return "\n".join(lines)


class GoogleNewsRenderer(Renderer):
    """News sitemap holding only the items that carry a ``googlenews`` record."""

    format = Format.GOOGLE_NEWS

    def _render(
        self,
        items: Sequence[Item],
        sitemap_entries: Sequence[SitemapEntry],
        config: SitemapConfig,
        channel: Channel,
    ) -> str:
        esc = escaper_for(config)
        lines: List[str] = [
            XML_DECLARATION,
            f'<urlset xmlns="{SITEMAP_NS}" xmlns:news="{NEWS_NS}">',
        ]
        for item in items:
            if item.googlenews is None:
                continue
            lines.append("  <url>")
            lines.append(text_element(4, "loc", item.loc, esc))
            lines.extend(news_lines(item.googlenews, item.title or item.loc, esc))
            lines.append("  </url>")
        lines.append(URLSET_FOOTER)
        return "\n".join(lines)
