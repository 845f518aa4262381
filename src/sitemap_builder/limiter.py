"""
Protocol limits for XML sitemaps.

A sitemap may list at most 50,000 URLs and, when size limiting is enabled,
at most ``max_size`` bytes. Larger item sets are cut into contiguous chunks
(greedy by serialized size), each chunk becomes its own ``urlset`` and a
``sitemapindex`` referencing the chunks replaces the single document.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence, Tuple
from urllib.parse import urlparse

from .config import SitemapConfig
from .errors import SizeLimitError
from .logger import get_logger
from .models import Item, SitemapEntry
from .output import apply_stylesheet, stylesheet_instruction
from .renderers.base import XML_DECLARATION
from .renderers.xml_sitemap import (
    URLSET_FOOTER,
    namespaces_for,
    render_index,
    render_urlset,
    url_lines,
    urlset_header,
)

logger = get_logger(__name__)

MAX_URLS_PER_SITEMAP = 50000


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


@dataclass
class SplitResult:
    """
    ``document`` is what the caller asked for: the single sitemap, or the
    index when the items had to be split. ``children`` holds
    ``(filename, document)`` pairs for the split case and is empty otherwise.
    """

    document: str
    children: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def is_split(self) -> bool:
        return bool(self.children)


class SizeLimiter:
    def __init__(
        self,
        config: SitemapConfig,
        *,
        max_urls: int = MAX_URLS_PER_SITEMAP,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.config = config
        self.max_urls = max_urls
        self._clock = clock or _utcnow

    def fits(self, document: str, url_count: int) -> bool:
        return url_count <= self.max_urls and _byte_len(document) <= self.config.max_size

    def partition(self, items: Sequence[Item], overhead: int = 0) -> List[List[Item]]:
        """
        Cut ``items`` into order-preserving chunks whose rendered urlset stays
        within both limits. ``overhead`` counts bytes added after rendering.
        """
        header = urlset_header(namespaces_for(items))
        # declaration, header and footer each end up on their own line
        base = _byte_len(XML_DECLARATION) + 1 + _byte_len(header) + 1 + _byte_len(URLSET_FOOTER) + overhead
        max_size = self.config.max_size

        chunks: List[List[Item]] = []
        current: List[Item] = []
        size = base
        for item in items:
            block = _byte_len("\n".join(url_lines(item, self.config))) + 1
            if base + block > max_size:
                raise SizeLimitError(
                    f"Item {item.loc} needs {base + block} bytes, more than max_size={max_size}"
                )
            if current and (size + block > max_size or len(current) >= self.max_urls):
                chunks.append(current)
                current = []
                size = base
            current.append(item)
            size += block
        if current:
            chunks.append(current)
        return chunks

    def _base_url(self, items: Sequence[Item]) -> str:
        if self.config.domain:
            return self.config.domain.rstrip("/")
        parsed = urlparse(items[0].loc) if items else None
        if parsed and parsed.scheme and parsed.netloc:
            return f"{parsed.scheme}://{parsed.netloc}"
        return ""

    def split(
        self,
        items: Sequence[Item],
        *,
        filename: str = "sitemap",
        style: Optional[str] = None,
    ) -> SplitResult:
        """Render ``items`` as one urlset, or as chunks plus an index if too large."""
        document = render_urlset(items, self.config)
        if style:
            document = apply_stylesheet(document, style)
        if not self.config.use_limit_size or self.fits(document, len(items)):
            return SplitResult(document=document)

        overhead = _byte_len(stylesheet_instruction(style)) + 1 if style else 0
        chunks = self.partition(items, overhead=overhead)
        suffix = ".xml.gz" if self.config.use_gzip else ".xml"
        base_url = self._base_url(items)
        lastmod = self._clock().isoformat(timespec="seconds")

        if len(chunks) > self.max_urls:
            raise SizeLimitError(
                f"Splitting {len(items)} URLs needs {len(chunks)} sitemaps, "
                f"more than one index can reference (max_urls={self.max_urls})"
            )

        children: List[Tuple[str, str]] = []
        entries: List[SitemapEntry] = []
        for n, chunk in enumerate(chunks, start=1):
            child_name = f"{filename}-{n}{suffix}"
            child = render_urlset(chunk, self.config)
            if style:
                child = apply_stylesheet(child, style)
            children.append((child_name, child))
            loc = f"{base_url}/{child_name}" if base_url else child_name
            entries.append(SitemapEntry(loc=loc, lastmod=lastmod))

        logger.info(
            f"Split {len(items)} URLs into {len(children)} sitemaps "
            f"(max_size={self.config.max_size}, max_urls={self.max_urls})"
        )
        index = render_index(entries, self.config)
        if style:
            index = apply_stylesheet(index, style)
        return SplitResult(document=index, children=children)
