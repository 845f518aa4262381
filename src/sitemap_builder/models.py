"""
Record types for sitemap items and sitemap index entries.

Each record accepts the loose mapping shape used in YAML files and by callers
through ``from_dict``; required fields are positional dataclass fields.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar, Union

from .errors import ItemValidationError

T = TypeVar("T")


def _required(data: Mapping[str, Any], key: str, kind: str) -> str:
    value = data.get(key)
    if value is None or not str(value).strip():
        raise ItemValidationError(f"{kind} requires a non-empty '{key}'")
    return str(value)


def _optional_str(data: Mapping[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None or value == "":
        return None
    return str(value)


def _optional_number(data: Mapping[str, Any], key: str, cast: type, kind: str) -> Any:
    value = data.get(key)
    if value is None or value == "":
        return None
    try:
        return cast(value)
    except (TypeError, ValueError):
        raise ItemValidationError(f"{kind} field '{key}' is not a number: {value!r}") from None


def _joined(value: Any) -> Optional[str]:
    """Lists (genres, keywords) are stored as comma separated strings."""
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return str(value)


def _coerce(cls: Type[T], value: Union[T, Mapping[str, Any]]) -> T:
    if isinstance(value, cls):
        return value
    if isinstance(value, Mapping):
        return cls.from_dict(value)  # type: ignore[attr-defined]
    raise ItemValidationError(f"Expected {cls.__name__} or mapping, got {type(value).__name__}")


def _coerce_list(cls: Type[T], values: Any) -> List[T]:
    if not values:
        return []
    if isinstance(values, (Mapping, cls)):
        values = [values]
    return [_coerce(cls, v) for v in values]


class _Record:
    def to_dict(self) -> Dict[str, Any]:
        """Plain mapping that ``from_dict`` accepts back; nested records become mappings."""
        return asdict(self)


@dataclass
class Image(_Record):
    url: str
    title: Optional[str] = None
    caption: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Image":
        return cls(
            url=_required(data, "url", "Image"),
            title=_optional_str(data, "title"),
            caption=_optional_str(data, "caption"),
        )


@dataclass
class Video(_Record):
    """A video attached to a page. Needs ``content_loc`` or ``player_loc`` to be valid."""

    thumbnail_loc: str
    title: str
    description: str
    content_loc: Optional[str] = None
    player_loc: Optional[str] = None
    duration: Optional[int] = None
    rating: Optional[float] = None
    view_count: Optional[int] = None
    publication_date: Optional[str] = None
    family_friendly: Optional[bool] = None
    tags: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Video":
        family = data.get("family_friendly")
        if isinstance(family, str):
            family = family.strip().lower() in ("yes", "true", "1")
        elif family is not None:
            family = bool(family)

        tags = data.get("tags") or []
        if isinstance(tags, str):
            tags = [tags]

        return cls(
            thumbnail_loc=_required(data, "thumbnail_loc", "Video"),
            title=_required(data, "title", "Video"),
            description=_required(data, "description", "Video"),
            content_loc=_optional_str(data, "content_loc"),
            player_loc=_optional_str(data, "player_loc"),
            duration=_optional_number(data, "duration", int, "Video"),
            rating=_optional_number(data, "rating", float, "Video"),
            view_count=_optional_number(data, "view_count", int, "Video"),
            publication_date=_optional_str(data, "publication_date"),
            family_friendly=family,
            tags=[str(t) for t in tags],
        )


@dataclass
class Translation(_Record):
    lang: str
    url: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Translation":
        return cls(
            lang=_required(data, "lang", "Translation"),
            url=_required(data, "url", "Translation"),
        )


@dataclass
class Alternate(_Record):
    hreflang: str
    url: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Alternate":
        return cls(
            hreflang=_required(data, "hreflang", "Alternate"),
            url=_required(data, "url", "Alternate"),
        )


@dataclass
class GoogleNews(_Record):
    sitename: str
    publication_date: str
    language: str = "en"
    access: Optional[str] = None
    genres: Optional[str] = None
    keywords: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GoogleNews":
        return cls(
            sitename=_required(data, "sitename", "Google News record"),
            publication_date=_required(data, "publication_date", "Google News record"),
            language=str(data.get("language") or "en"),
            access=_optional_str(data, "access"),
            genres=_joined(data.get("genres")),
            keywords=_joined(data.get("keywords")),
        )


@dataclass
class Item(_Record):
    """One page entry. Only ``loc`` is required."""

    loc: str
    lastmod: Optional[str] = None
    priority: Optional[str] = None
    freq: Optional[str] = None
    title: Optional[str] = None
    images: List[Image] = field(default_factory=list)
    videos: List[Video] = field(default_factory=list)
    translations: List[Translation] = field(default_factory=list)
    alternates: List[Alternate] = field(default_factory=list)
    googlenews: Optional[GoogleNews] = None

    def __post_init__(self) -> None:
        if self.loc is None or not str(self.loc).strip():
            raise ItemValidationError("Item loc cannot be empty")
        if self.priority is not None and not isinstance(self.priority, str):
            self.priority = str(self.priority)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Item":
        googlenews = data.get("googlenews")
        return cls(
            loc=_required(data, "loc", "Item"),
            lastmod=_optional_str(data, "lastmod"),
            priority=_optional_str(data, "priority"),
            freq=_optional_str(data, "freq") or _optional_str(data, "changefreq"),
            title=_optional_str(data, "title"),
            images=_coerce_list(Image, data.get("images")),
            videos=_coerce_list(Video, data.get("videos")),
            translations=_coerce_list(Translation, data.get("translations")),
            alternates=_coerce_list(Alternate, data.get("alternates")),
            googlenews=_coerce(GoogleNews, googlenews) if googlenews else None,
        )


@dataclass
class SitemapEntry(_Record):
    """A child sitemap referenced from a sitemap index."""

    loc: str
    lastmod: Optional[str] = None

    def __post_init__(self) -> None:
        if self.loc is None or not str(self.loc).strip():
            raise ItemValidationError("Sitemap entry loc cannot be empty")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SitemapEntry":
        return cls(
            loc=_required(data, "loc", "Sitemap entry"),
            lastmod=_optional_str(data, "lastmod"),
        )


@dataclass
class Channel(_Record):
    """Feed metadata for the RSS, RDF and HTML views."""

    title: str = ""
    link: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Channel":
        return cls(
            title=str(data.get("title") or ""),
            link=str(data.get("link") or ""),
            description=str(data.get("description") or ""),
        )


ItemLike = Union[Item, Mapping[str, Any]]
EntryLike = Union[SitemapEntry, Mapping[str, Any]]


def to_item(record: ItemLike) -> Item:
    return _coerce(Item, record)


def to_entry(record: EntryLike) -> SitemapEntry:
    return _coerce(SitemapEntry, record)

