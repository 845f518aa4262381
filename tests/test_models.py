"""
Record types and item store tests
"""

import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from sitemap_builder.errors import ItemValidationError
from sitemap_builder.models import (
    Channel,
    GoogleNews,
    Image,
    Item,
    SitemapEntry,
    Translation,
    Video,
)
from sitemap_builder.store import ItemStore


class TestRecords:
    def test_item_requires_loc(self):
        with pytest.raises(ItemValidationError):
            Item(loc="")
        with pytest.raises(ItemValidationError):
            Item.from_dict({"title": "No loc"})

    def test_item_from_dict(self):
        item = Item.from_dict(
            {
                "loc": "https://example.com/",
                "lastmod": "2024-01-31",
                "priority": 0.8,
                "changefreq": "weekly",
                "images": [{"url": "https://example.com/a.jpg", "caption": "A"}],
                "translations": [{"lang": "de", "url": "https://example.com/de/"}],
                "alternates": [{"hreflang": "fr", "url": "https://example.com/fr/"}],
                "googlenews": {},
            }
        )
        assert item.priority == "0.8"
        assert item.freq == "weekly"
        assert item.images == [Image(url="https://example.com/a.jpg", caption="A")]
        assert item.translations == [Translation(lang="de", url="https://example.com/de/")]
        assert item.alternates[0].hreflang == "fr"
        assert item.googlenews is None

    def test_empty_strings_are_absent(self):
        item = Item.from_dict({"loc": "https://example.com/", "priority": "", "freq": ""})
        assert item.priority is None
        assert item.freq is None

    def test_numeric_priority_is_kept_as_text(self):
        assert Item(loc="https://example.com/", priority=1).priority == "1"

    def test_image_requires_url(self):
        with pytest.raises(ItemValidationError):
            Image.from_dict({"title": "no url"})

    def test_video_from_dict(self):
        video = Video.from_dict(
            {
                "thumbnail_loc": "https://example.com/t.jpg",
                "title": "Intro",
                "description": "An intro",
                "player_loc": "https://example.com/player",
                "duration": "120",
                "family_friendly": "no",
                "tags": "demo",
            }
        )
        assert video.duration == 120
        assert video.family_friendly is False
        assert video.tags == ["demo"]

    def test_video_bad_number(self):
        with pytest.raises(ItemValidationError):
            Video.from_dict(
                {
                    "thumbnail_loc": "https://example.com/t.jpg",
                    "title": "Intro",
                    "description": "An intro",
                    "duration": "two minutes",
                }
            )

    def test_google_news_defaults(self):
        news = GoogleNews.from_dict(
            {"sitename": "Example", "publication_date": "2024-01-31", "keywords": ["a", "b"]}
        )
        assert news.language == "en"
        assert news.keywords == "a, b"
        with pytest.raises(ItemValidationError):
            GoogleNews.from_dict({"sitename": "Example"})

    def test_sitemap_entry_requires_loc(self):
        with pytest.raises(ItemValidationError):
            SitemapEntry(loc=" ")

    def test_to_dict_round_trips(self):
        item = Item.from_dict(
            {
                "loc": "https://example.com/news/1",
                "lastmod": "2024-01-31",
                "priority": "0.7",
                "freq": "hourly",
                "title": "Launch",
                "images": [{"url": "https://example.com/a.jpg", "title": "A"}],
                "videos": [
                    {
                        "thumbnail_loc": "https://example.com/t.jpg",
                        "title": "Clip",
                        "description": "A clip",
                        "player_loc": "https://example.com/player",
                        "duration": 60,
                        "family_friendly": "no",
                        "tags": ["x", "y"],
                    }
                ],
                "translations": [{"lang": "de", "url": "https://example.com/de/news/1"}],
                "alternates": [{"hreflang": "fr", "url": "https://example.com/fr/news/1"}],
                "googlenews": {"sitename": "Example", "publication_date": "2024-01-31", "genres": ["Blog"]},
            }
        )
        data = item.to_dict()
        assert data["images"] == [{"url": "https://example.com/a.jpg", "title": "A", "caption": None}]
        assert data["videos"][0]["family_friendly"] is False
        assert data["googlenews"]["genres"] == "Blog"
        assert Item.from_dict(data) == item

        assert Item.from_dict(Item(loc="https://example.com/").to_dict()) == Item(loc="https://example.com/")
        entry = SitemapEntry(loc="https://example.com/s.xml", lastmod="2024-01-01")
        assert SitemapEntry.from_dict(entry.to_dict()) == entry
        channel = Channel(title="Example", link="https://example.com")
        assert Channel.from_dict(channel.to_dict()) == channel


class TestItemStore:
    def test_add_item_preserves_order_and_duplicates(self):
        store = ItemStore()
        store.add_item({"loc": "https://example.com/b"})
        store.add_item(Item(loc="https://example.com/a"))
        store.add_item({"loc": "https://example.com/b"})
        assert [i.loc for i in store.items] == [
            "https://example.com/b",
            "https://example.com/a",
            "https://example.com/b",
        ]
        assert len(store) == 3

    def test_batch_add(self):
        store = ItemStore()
        store.add_item([{"loc": "https://example.com/1"}, {"loc": "https://example.com/2"}])
        assert [i.loc for i in store.items] == ["https://example.com/1", "https://example.com/2"]

    def test_batch_add_with_bad_record_adds_nothing(self):
        store = ItemStore()
        with pytest.raises(ItemValidationError):
            store.add_item([{"loc": "https://example.com/1"}, {"loc": ""}])
        assert store.items == []

    def test_sitemap_entries(self):
        store = ItemStore()
        store.add_sitemap_entry("https://example.com/a.xml", "2024-01-01")
        store.add_sitemap_entry("https://example.com/b.xml")
        assert [e.loc for e in store.sitemap_entries] == [
            "https://example.com/a.xml",
            "https://example.com/b.xml",
        ]
        assert store.sitemap_entries[0].lastmod == "2024-01-01"

        store.reset_sitemap_entries([{"loc": "https://example.com/c.xml"}])
        assert [e.loc for e in store.sitemap_entries] == ["https://example.com/c.xml"]

        store.reset_sitemap_entries()
        assert store.sitemap_entries == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
