"""
Item validator tests
"""
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from sitemap_builder.errors import ItemValidationError
from sitemap_builder.models import Image, Item, SitemapEntry, Video
from sitemap_builder.validators import (
    check_item,
    check_items,
    clean_freq,
    clean_priority,
    format_priority,
    parse_lastmod,
    validate_frequency,
    validate_lastmod,
    validate_priority,
    validate_url,
    validate_video,
)


def test_validate_url():
    assert validate_url("https://example.com")[0] is True
    assert validate_url("http://example.com/path")[0] is True

    assert validate_url("")[0] is False
    assert validate_url("not-a-url")[0] is False
    assert validate_url("ftp://example.com")[0] is False
    assert validate_url("example.com")[0] is False


def test_validate_lastmod():
    assert validate_lastmod(None)[0] is True
    assert validate_lastmod("2024-01-31")[0] is True
    assert validate_lastmod("2024-01-31T12:00:00+00:00")[0] is True
    assert validate_lastmod("2024-01-31T12:00:00Z")[0] is True
    assert validate_lastmod("31/01/2024")[0] is False
    assert parse_lastmod("2024-01-31T12:00:00Z").utcoffset().total_seconds() == 0


def test_validate_priority():
    for value in ("0", "0.0", "0.5", "1", "1.0"):
        assert validate_priority(value)[0] is True
    for value in ("-0.1", "1.1", "high", "nan"):
        assert validate_priority(value)[0] is False


def test_validate_frequency():
    for value in ("always", "hourly", "daily", "weekly", "monthly", "yearly", "never"):
        assert validate_frequency(value)[0] is True
    assert validate_frequency("Daily")[0] is False
    assert validate_frequency("sometimes")[0] is False


def test_validate_video():
    video = Video(thumbnail_loc="https://example.com/t.jpg", title="Clip", description="A clip")
    assert validate_video(video)[0] is False
    video.player_loc = "https://example.com/player"
    assert validate_video(video)[0] is True


def test_format_priority():
    assert format_priority("1") == "1.0"
    assert format_priority("0.80") == "0.8"
    assert format_priority("0") == "0.0"


def test_clean_drops_invalid_values():
    item = Item(loc="https://example.com/", priority="7", freq="sometimes")
    assert clean_priority(item) is None
    assert clean_freq(item) is None

    item = Item(loc="https://example.com/", priority="0.50", freq="weekly")
    assert clean_priority(item) == "0.5"
    assert clean_freq(item) == "weekly"


def test_check_item_names_the_item():
    with pytest.raises(ItemValidationError, match="https://example.com/bad"):
        check_item(Item(loc="https://example.com/bad", lastmod="yesterday"))


def test_check_item_images():
    item = Item(loc="https://example.com/", images=[Image(url="/relative.jpg")])
    with pytest.raises(ItemValidationError):
        check_item(item)


def test_check_items_covers_entries():
    check_items([Item(loc="https://example.com/")])
    with pytest.raises(ItemValidationError):
        check_items([], [SitemapEntry(loc="sitemap-1.xml")])
