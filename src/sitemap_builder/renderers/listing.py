"""Human-oriented listings: an HTML index page and a plain-text URL list."""
from __future__ import annotations

from typing import List, Sequence

from ..config import SitemapConfig
from ..models import Channel, Item, SitemapEntry
from ..validators import clean_priority
from .base import Format, Renderer, escaper_for


class HtmlRenderer(Renderer):
    format = Format.HTML

    def _render(
        self,
        items: Sequence[Item],
        sitemap_entries: Sequence[SitemapEntry],
        config: SitemapConfig,
        channel: Channel,
    ) -> str:
        esc = escaper_for(config)
        heading = esc(channel.title or "Sitemap")
        lines: List[str] = [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            '  <meta charset="utf-8">',
            f"  <title>{heading}</title>",
            "</head>",
            "<body>",
            f"  <h1>{heading}</h1>",
            "  <table>",
            "    <thead>",
            "      <tr><th>URL</th><th>Title</th><th>Last modified</th><th>Priority</th></tr>",
            "    </thead>",
            "    <tbody>",
        ]
        for item in items:
            loc = esc(item.loc)
            cells = [
                f'<a href="{loc}">{loc}</a>',
                esc(item.title or item.loc),
                esc(item.lastmod or ""),
                clean_priority(item) or "",
            ]
            lines.append("      <tr>" + "".join(f"<td>{c}</td>" for c in cells) + "</tr>")
        lines.extend(["    </tbody>", "  </table>", "</body>", "</html>"])
        return "\n".join(lines)


class TxtRenderer(Renderer):
    """One URL per line; sitemap index entries take precedence over items."""

    format = Format.TXT

    def emitted(self, items, sitemap_entries):
        return ((), sitemap_entries) if sitemap_entries else (items, ())

    def _render(
        self,
        items: Sequence[Item],
        sitemap_entries: Sequence[SitemapEntry],
        config: SitemapConfig,
        channel: Channel,
    ) -> str:
        if sitemap_entries:
            return "\n".join(entry.loc for entry in sitemap_entries)
        return "\n".join(item.loc for item in items)
