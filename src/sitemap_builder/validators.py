"""
Validation helpers for sitemap items.

Field checks return ``(is_valid, error_message)`` tuples. ``check_item`` and
``check_entry`` turn the first failure into an ``ItemValidationError`` and are
used in strict mode; ``clean_priority`` / ``clean_freq`` drop invalid values
in lenient mode.
"""
from __future__ import annotations

import math
from datetime import datetime
from typing import Iterable, Optional, Tuple
from urllib.parse import urlparse

from .errors import ItemValidationError
from .logger import get_logger
from .models import Image, Item, SitemapEntry, Video

logger = get_logger(__name__)

VALID_FREQUENCIES = (
    "always",
    "hourly",
    "daily",
    "weekly",
    "monthly",
    "yearly",
    "never",
)


def validate_url(url: str) -> Tuple[bool, str]:
    """
    Check that ``url`` is an absolute http(s) URL.

    Returns:
        (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL cannot be empty"

    url = url.strip()
    if not url:
        return False, "URL cannot be empty"

    try:
        parsed = urlparse(url)
    except ValueError as e:
        return False, f"Invalid URL format: {e}"
    if not parsed.scheme:
        return False, f"URL is missing a scheme: {url}"
    if parsed.scheme not in ("http", "https"):
        return False, f"URL must use http or https scheme: {url}"
    if not parsed.netloc:
        return False, f"URL is missing a host: {url}"
    return True, ""


def parse_lastmod(value: str) -> Optional[datetime]:
    """Parse an ISO-8601 date or timestamp; ``None`` if it does not parse."""
    text = (value or "").strip()
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def validate_lastmod(lastmod: Optional[str]) -> Tuple[bool, str]:
    if lastmod is None:
        return True, ""
    if parse_lastmod(lastmod) is None:
        return False, f"Invalid date format: {lastmod}. Use ISO 8601 format (e.g. 2024-01-31T12:00:00+00:00)"
    return True, ""


def validate_priority(priority: Optional[str]) -> Tuple[bool, str]:
    if priority is None:
        return True, ""
    try:
        value = float(priority)
    except (TypeError, ValueError):
        return False, f"Priority must be a decimal number, got: {priority}"
    if math.isnan(value) or value < 0.0 or value > 1.0:
        return False, f"Priority must be between 0.0 and 1.0, got: {priority}"
    return True, ""


def validate_frequency(freq: Optional[str]) -> Tuple[bool, str]:
    if freq is None:
        return True, ""
    if freq not in VALID_FREQUENCIES:
        return False, f"Invalid frequency: {freq}. Valid values are: {', '.join(VALID_FREQUENCIES)}"
    return True, ""


def validate_image(image: Image) -> Tuple[bool, str]:
    is_valid, msg = validate_url(image.url)
    if not is_valid:
        return False, f"Image {msg}"
    return True, ""


def validate_video(video: Video) -> Tuple[bool, str]:
    if not video.content_loc and not video.player_loc:
        return False, f"Video '{video.title}' needs content_loc or player_loc"
    return True, ""


def _raise_on_failure(results: Iterable[Tuple[bool, str]], loc: str) -> None:
    for is_valid, msg in results:
        if not is_valid:
            raise ItemValidationError(f"{msg} (item: {loc})")


def check_item(item: Item) -> None:
    """Strict validation of a single item; raises on the first failure."""
    _raise_on_failure(
        [
            validate_url(item.loc),
            validate_lastmod(item.lastmod),
            validate_priority(item.priority),
            validate_frequency(item.freq),
            *(validate_image(image) for image in item.images),
            *(validate_video(video) for video in item.videos),
        ],
        item.loc,
    )


def check_entry(entry: SitemapEntry) -> None:
    _raise_on_failure([validate_url(entry.loc), validate_lastmod(entry.lastmod)], entry.loc)


def check_items(items: Iterable[Item], entries: Iterable[SitemapEntry] = ()) -> None:
    for item in items:
        check_item(item)
    for entry in entries:
        check_entry(entry)


def format_priority(priority: str) -> str:
    return f"{float(priority):.1f}"


def clean_priority(item: Item) -> Optional[str]:
    """Formatted priority, or ``None`` when absent or out of range."""
    if item.priority is None:
        return None
    is_valid, msg = validate_priority(item.priority)
    if not is_valid:
        logger.debug(f"Dropping priority for {item.loc}: {msg}")
        return None
    return format_priority(item.priority)


def clean_freq(item: Item) -> Optional[str]:
    if item.freq is None:
        return None
    is_valid, msg = validate_frequency(item.freq)
    if not is_valid:
        logger.debug(f"Dropping changefreq for {item.loc}: {msg}")
        return None
    return item.freq
