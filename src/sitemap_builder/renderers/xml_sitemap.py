"""
XML sitemap protocol rendering: ``urlset`` documents with the image, video,
xhtml-alternate and news extensions, and ``sitemapindex`` documents.

Documents are built line by line so that escaping can be switched off; with
``escaping`` disabled text is emitted exactly as given.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..config import SitemapConfig
from ..models import Channel, GoogleNews, Image, Item, SitemapEntry, Video
from ..validators import clean_freq, clean_priority
from .base import XML_DECLARATION, Escaper, Format, Renderer, escaper_for

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
IMAGE_NS = "http://www.google.com/schemas/sitemap-image/1.1"
VIDEO_NS = "http://www.google.com/schemas/sitemap-video/1.1"
XHTML_NS = "http://www.w3.org/1999/xhtml"
NEWS_NS = "http://www.google.com/schemas/sitemap-news/0.9"

URLSET_FOOTER = "</urlset>"


def text_element(indent: int, tag: str, value: str, esc: Escaper) -> str:
    return f"{' ' * indent}<{tag}>{esc(value)}</{tag}>"


def namespaces_for(items: Sequence[Item]) -> List[Tuple[str, str]]:
    """Extension namespaces actually used by ``items``, in a fixed order."""
    namespaces: List[Tuple[str, str]] = []
    if any(item.images for item in items):
        namespaces.append(("image", IMAGE_NS))
    if any(item.videos for item in items):
        namespaces.append(("video", VIDEO_NS))
    if any(item.translations or item.alternates for item in items):
        namespaces.append(("xhtml", XHTML_NS))
    if any(item.googlenews for item in items):
        namespaces.append(("news", NEWS_NS))
    return namespaces


def urlset_header(namespaces: Sequence[Tuple[str, str]]) -> str:
    attrs = [f'xmlns="{SITEMAP_NS}"']
    attrs.extend(f'xmlns:{prefix}="{uri}"' for prefix, uri in namespaces)
    return f"<urlset {' '.join(attrs)}>"


def _image_lines(image: Image, esc: Escaper) -> List[str]:
    lines = ["    <image:image>", text_element(6, "image:loc", image.url, esc)]
    if image.title:
        lines.append(text_element(6, "image:title", image.title, esc))
    if image.caption:
        lines.append(text_element(6, "image:caption", image.caption, esc))
    lines.append("    </image:image>")
    return lines


def _video_lines(video: Video, esc: Escaper) -> List[str]:
    lines = [
        "    <video:video>",
        text_element(6, "video:thumbnail_loc", video.thumbnail_loc, esc),
        text_element(6, "video:title", video.title, esc),
        text_element(6, "video:description", video.description, esc),
    ]
    if video.content_loc:
        lines.append(text_element(6, "video:content_loc", video.content_loc, esc))
    if video.player_loc:
        lines.append(text_element(6, "video:player_loc", video.player_loc, esc))
    if video.duration is not None:
        lines.append(text_element(6, "video:duration", str(video.duration), esc))
    if video.rating is not None:
        lines.append(text_element(6, "video:rating", f"{video.rating:.1f}", esc))
    if video.view_count is not None:
        lines.append(text_element(6, "video:view_count", str(video.view_count), esc))
    if video.publication_date:
        lines.append(text_element(6, "video:publication_date", video.publication_date, esc))
    if video.family_friendly is not None:
        lines.append(text_element(6, "video:family_friendly", "yes" if video.family_friendly else "no", esc))
    for tag in video.tags:
        lines.append(text_element(6, "video:tag", tag, esc))
    lines.append("    </video:video>")
    return lines


def _link_line(hreflang: str, href: str, esc: Escaper) -> str:
    return f'    <xhtml:link rel="alternate" hreflang="{esc(hreflang)}" href="{esc(href)}"/>'


def news_lines(news: GoogleNews, title: str, esc: Escaper) -> List[str]:
    lines = [
        "    <news:news>",
        "      <news:publication>",
        text_element(8, "news:name", news.sitename, esc),
        text_element(8, "news:language", news.language, esc),
        "      </news:publication>",
    ]
    if news.access:
        lines.append(text_element(6, "news:access", news.access, esc))
    if news.genres:
        lines.append(text_element(6, "news:genres", news.genres, esc))
    lines.append(text_element(6, "news:publication_date", news.publication_date, esc))
    lines.append(text_element(6, "news:title", title, esc))
    if news.keywords:
        lines.append(text_element(6, "news:keywords", news.keywords, esc))
    lines.append("    </news:news>")
    return lines


def url_lines(item: Item, config: SitemapConfig) -> List[str]:
    """One ``<url>`` block: core fields first, then extensions in fixed order."""
    esc = escaper_for(config)
    lines = ["  <url>", text_element(4, "loc", item.loc, esc)]
    if item.lastmod:
        lines.append(text_element(4, "lastmod", item.lastmod, esc))
    freq = clean_freq(item)
    if freq:
        lines.append(text_element(4, "changefreq", freq, esc))
    priority = clean_priority(item)
    if priority:
        lines.append(text_element(4, "priority", priority, esc))
    for image in item.images:
        lines.extend(_image_lines(image, esc))
    for video in item.videos:
        lines.extend(_video_lines(video, esc))
    for translation in item.translations:
        lines.append(_link_line(translation.lang, translation.url, esc))
    for alternate in item.alternates:
        lines.append(_link_line(alternate.hreflang, alternate.url, esc))
    if item.googlenews:
        lines.extend(news_lines(item.googlenews, item.title or item.loc, esc))
    lines.append("  </url>")
    return lines


def render_urlset(items: Sequence[Item], config: SitemapConfig) -> str:
    lines = [XML_DECLARATION, urlset_header(namespaces_for(items))]
    for item in items:
        lines.extend(url_lines(item, config))
    lines.append(URLSET_FOOTER)
    return "\n".join(lines)


def render_index(entries: Sequence[SitemapEntry], config: SitemapConfig) -> str:
    esc = escaper_for(config)
    lines = [XML_DECLARATION, f'<sitemapindex xmlns="{SITEMAP_NS}">']
    for entry in entries:
        lines.append("  <sitemap>")
        lines.append(text_element(4, "loc", entry.loc, esc))
        if entry.lastmod:
            lines.append(text_element(4, "lastmod", entry.lastmod, esc))
        lines.append("  </sitemap>")
    lines.append("</sitemapindex>")
    return "\n".join(lines)


class XmlSitemapRenderer(Renderer):
    """``sitemapindex`` when index entries exist, ``urlset`` otherwise."""

    format = Format.XML

    def emitted(self, items, sitemap_entries):
        return ((), sitemap_entries) if sitemap_entries else (items, ())

    def _render(
        self,
        items: Sequence[Item],
        sitemap_entries: Sequence[SitemapEntry],
        config: SitemapConfig,
        channel: Optional[Channel],
    ) -> str:
        if sitemap_entries:
            return render_index(sitemap_entries, config)
        return render_urlset(items, config)
