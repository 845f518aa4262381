"""In-memory ordered store of sitemap items and sitemap index entries."""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Union

from .models import EntryLike, Item, ItemLike, SitemapEntry, to_entry, to_item


class ItemStore:
    """
    Two independent append-only sequences: page items and child-sitemap
    entries. Items keep insertion order and are never de-duplicated.
    """

    def __init__(self) -> None:
        self._items: List[Item] = []
        self._sitemaps: List[SitemapEntry] = []

    @property
    def items(self) -> List[Item]:
        return self._items

    @property
    def sitemap_entries(self) -> List[SitemapEntry]:
        return self._sitemaps

    def add_item(self, record: Union[ItemLike, Sequence[ItemLike]]) -> None:
        """Append one item, or each item of a list in order."""
        if isinstance(record, (list, tuple)):
            # Convert everything first so a bad record leaves the store untouched
            items = [to_item(r) for r in record]
            self._items.extend(items)
            return
        self._items.append(to_item(record))

    def add_sitemap_entry(self, loc: str, lastmod: Optional[str] = None) -> SitemapEntry:
        entry = SitemapEntry(loc=loc, lastmod=lastmod)
        self._sitemaps.append(entry)
        return entry

    def reset_sitemap_entries(self, entries: Optional[Iterable[EntryLike]] = None) -> None:
        self._sitemaps = [to_entry(e) for e in entries or []]

    def __len__(self) -> int:
        return len(self._items)
