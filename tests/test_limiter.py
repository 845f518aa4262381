"""
Size limiting / splitting tests
"""

import sys
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from sitemap_builder.config import SitemapConfig
from sitemap_builder.errors import SizeLimitError
from sitemap_builder.limiter import MAX_URLS_PER_SITEMAP, SizeLimiter
from sitemap_builder.models import Item
from sitemap_builder.renderers.xml_sitemap import SITEMAP_NS, render_urlset

NS = {"sm": SITEMAP_NS}
FIXED_NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _clock():
    return FIXED_NOW


def _items(count, host="https://example.com"):
    return [Item(loc=f"{host}/page-{i:04d}", priority="0.5") for i in range(count)]


def _locs(document):
    root = ET.fromstring(document.encode("utf-8"))
    return [l.text for l in root.findall("sm:url/sm:loc", NS)]


class TestSizeLimiter:
    def test_protocol_url_limit(self):
        assert MAX_URLS_PER_SITEMAP == 50000

    def test_disabled_never_splits(self):
        config = SitemapConfig(use_limit_size=False, max_size=200)
        result = SizeLimiter(config, clock=_clock).split(_items(50))
        assert not result.is_split
        assert len(_locs(result.document)) == 50

    def test_small_document_is_not_split(self):
        config = SitemapConfig(use_limit_size=True)
        result = SizeLimiter(config, clock=_clock).split(_items(10))
        assert result.children == []
        assert result.document.count("<url>") == 10

    def test_split_by_bytes(self):
        max_size = 1000
        items = _items(50)
        config = SitemapConfig(use_limit_size=True, max_size=max_size)
        result = SizeLimiter(config, clock=_clock).split(items, filename="sitemap")

        assert result.is_split
        assert len(result.children) > 1

        covered = []
        for name, document in result.children:
            assert len(document.encode("utf-8")) <= max_size
            covered.extend(_locs(document))
        # every item exactly once, in original order
        assert covered == [i.loc for i in items]

        index = ET.fromstring(result.document.encode("utf-8"))
        assert index.tag == f"{{{SITEMAP_NS}}}sitemapindex"
        locs = [l.text for l in index.findall("sm:sitemap/sm:loc", NS)]
        assert locs == [
            f"https://example.com/sitemap-{n}.xml" for n in range(1, len(result.children) + 1)
        ]
        assert [name for name, _ in result.children] == [
            f"sitemap-{n}.xml" for n in range(1, len(result.children) + 1)
        ]
        lastmods = {l.text for l in index.findall("sm:sitemap/sm:lastmod", NS)}
        assert lastmods == {"2024-01-01T00:00:00+00:00"}

    def test_split_by_url_count(self):
        config = SitemapConfig(use_limit_size=True)
        result = SizeLimiter(config, max_urls=3, clock=_clock).split(_items(7))
        assert [len(_locs(doc)) for _, doc in result.children] == [3, 3, 1]

    def test_chunks_are_filled_greedily(self):
        max_size = 1000
        config = SitemapConfig(use_limit_size=True, max_size=max_size)
        chunks = SizeLimiter(config, clock=_clock).partition(_items(50))
        assert sum(len(c) for c in chunks) == 50
        # every chunk but the last would overflow with the next item added
        for chunk, following in zip(chunks, chunks[1:]):
            grown = render_urlset(chunk + following[:1], config)
            assert len(grown.encode("utf-8")) > max_size

    def test_domain_is_used_for_child_locations(self):
        config = SitemapConfig(use_limit_size=True, domain="https://cdn.example.org/maps/")
        result = SizeLimiter(config, max_urls=2, clock=_clock).split(_items(3), filename="pages")
        index = ET.fromstring(result.document.encode("utf-8"))
        assert [l.text for l in index.findall("sm:sitemap/sm:loc", NS)] == [
            "https://cdn.example.org/maps/pages-1.xml",
            "https://cdn.example.org/maps/pages-2.xml",
        ]

    def test_gzip_child_names(self):
        config = SitemapConfig(use_limit_size=True, use_gzip=True)
        result = SizeLimiter(config, max_urls=2, clock=_clock).split(_items(3))
        assert [name for name, _ in result.children] == ["sitemap-1.xml.gz", "sitemap-2.xml.gz"]

    def test_stylesheet_counts_towards_size(self):
        max_size = 1000
        config = SitemapConfig(use_limit_size=True, max_size=max_size)
        result = SizeLimiter(config, clock=_clock).split(_items(50), style="/styles/sitemap.xsl")
        for _, document in result.children:
            assert "xml-stylesheet" in document
            assert len(document.encode("utf-8")) <= max_size

    def test_item_larger_than_limit(self):
        config = SitemapConfig(use_limit_size=True, max_size=100)
        with pytest.raises(SizeLimitError):
            SizeLimiter(config, clock=_clock).split(_items(3))

    def test_index_cannot_exceed_url_limit(self):
        config = SitemapConfig(use_limit_size=True)
        with pytest.raises(SizeLimitError):
            SizeLimiter(config, max_urls=2, clock=_clock).split(_items(7))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
