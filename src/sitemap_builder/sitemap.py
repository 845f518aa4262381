from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence, Union

from .config import SitemapConfig
from .errors import ItemValidationError
from .limiter import SizeLimiter, SplitResult
from .logger import get_logger
from .models import Channel, EntryLike, ItemLike
from .output import apply_stylesheet, compress
from .renderers import Format, get_renderer
from .store import ItemStore
from .validators import check_items, validate_lastmod, validate_url

logger = get_logger(__name__)


class FileStorage:
    """Default persistence collaborator: writes bytes to the local filesystem."""

    def write(self, path: Path, data: bytes) -> bool:
        # Ensure output directory exists
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        logger.info(f"Wrote {len(data)} bytes to {path}")
        return True


def _with_extension(filename: str, extension: str, gzip: bool) -> str:
    name = filename if filename.endswith(f".{extension}") else f"{filename}.{extension}"
    if gzip and not name.endswith(".gz"):
        name += ".gz"
    return name


def _stem(filename: str, extension: str) -> str:
    for suffix in (f".{extension}.gz", f".{extension}"):
        if filename.endswith(suffix):
            return filename[: -len(suffix)]
    return filename


class Sitemap:
    """
    One sitemap session: a configuration, an item store and the render/store
    entry points used by framework adapters.

    Not meant to be shared between concurrent requests; create one instance
    per render.
    """

    def __init__(
        self,
        config: Optional[SitemapConfig] = None,
        *,
        channel: Optional[Channel] = None,
        storage: Optional[Any] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.config = config if config is not None else SitemapConfig()
        self.channel = channel if channel is not None else Channel()
        self._model = ItemStore()
        self._storage = storage if storage is not None else FileStorage()
        self._clock = clock

    def get_model(self) -> ItemStore:
        return self._model

    # -- data model -----------------------------------------------------

    def add(
        self,
        loc: str,
        lastmod: Optional[str] = None,
        priority: Optional[str] = None,
        freq: Optional[str] = None,
        images: Optional[List[Mapping[str, Any]]] = None,
        title: Optional[str] = None,
        translations: Optional[List[Mapping[str, Any]]] = None,
        videos: Optional[List[Mapping[str, Any]]] = None,
        googlenews: Optional[Mapping[str, Any]] = None,
        alternates: Optional[List[Mapping[str, Any]]] = None,
    ) -> "Sitemap":
        """Positional convenience over ``add_item``."""
        return self.add_item(
            {
                "loc": loc,
                "lastmod": lastmod,
                "priority": priority,
                "freq": freq,
                "images": images,
                "title": title,
                "translations": translations,
                "videos": videos,
                "googlenews": googlenews,
                "alternates": alternates,
            }
        )

    def add_item(self, record: Union[ItemLike, Sequence[ItemLike]]) -> "Sitemap":
        self._model.add_item(record)
        return self

    def add_sitemap(self, loc: str, lastmod: Optional[str] = None) -> "Sitemap":
        if self.config.strict_mode:
            for is_valid, msg in (validate_url(loc), validate_lastmod(lastmod)):
                if not is_valid:
                    raise ItemValidationError(msg)
        self._model.add_sitemap_entry(loc, lastmod)
        return self

    def reset_sitemaps(self, sitemaps: Optional[Iterable[EntryLike]] = None) -> "Sitemap":
        self._model.reset_sitemap_entries(sitemaps)
        return self

    # -- rendering ------------------------------------------------------

    def _resolve_format(self, format: Optional[Union[str, Format]]) -> Format:
        return Format.parse(format if format is not None else self.config.default_format)

    def split(
        self,
        format: Optional[Union[str, Format]] = None,
        *,
        filename: str = "sitemap",
        style: Optional[str] = None,
    ) -> SplitResult:
        """
        Render ``format`` and report any child documents produced by size
        limiting. Only a ``urlset`` XML document is ever split.
        """
        fmt = self._resolve_format(format)
        style = style if fmt is Format.XML and self.config.use_styles else None
        items = self._model.items
        entries = self._model.sitemap_entries

        if fmt is Format.XML and not entries:
            if self.config.strict_mode:
                check_items(items)
            limiter = SizeLimiter(self.config, clock=self._clock)
            return limiter.split(items, filename=_stem(filename, fmt.value), style=style)

        document = get_renderer(fmt).render(items, entries, self.config, self.channel)
        if style:
            document = apply_stylesheet(document, style)
        logger.debug(f"Rendered {fmt.value} sitemap ({len(items)} items, {len(entries)} sitemaps)")
        return SplitResult(document=document)

    def render(self, format: Optional[Union[str, Format]] = None, style: Optional[str] = None) -> str:
        """
        Render the sitemap.

        Args:
            format: One of xml, txt, html, rss, rdf, google-news; defaults to
                    ``config.default_format``
            style: XSL stylesheet href, injected into XML output when
                   ``use_styles`` is enabled

        Returns:
            The finished document. When size limiting splits the items this
            is the sitemap index; use ``split()`` or ``store()`` for children.
        """
        return self.split(format, style=style).document

    def generate(self, format: Optional[Union[str, Format]] = None, style: Optional[str] = None) -> str:
        """Alias of ``render``."""
        return self.render(format, style)

    def _encode(self, document: str) -> bytes:
        if self.config.use_gzip:
            return compress(document)
        return document.encode("utf-8")

    def to_bytes(self, format: Optional[Union[str, Format]] = None, style: Optional[str] = None) -> bytes:
        """Rendered document as bytes, gzip-compressed when ``use_gzip`` is set."""
        return self._encode(self.render(format, style))

    def store(
        self,
        format: Optional[Union[str, Format]] = None,
        filename: str = "sitemap",
        path: Optional[Union[str, Path]] = None,
        style: Optional[str] = None,
    ) -> bool:
        """
        Render and hand the bytes to the storage collaborator at
        ``path/filename.<format>`` (``.gz`` appended when compressing).
        Split children are stored next to the index.

        Returns:
            True when every write succeeded
        """
        fmt = self._resolve_format(format)
        result = self.split(fmt, filename=filename, style=style)
        directory = Path(path) if path is not None else Path.cwd()

        ok = True
        for child_name, child in result.children:
            ok = bool(self._storage.write(directory / child_name, self._encode(child))) and ok

        target = directory / _with_extension(filename, fmt.value, self.config.use_gzip)
        ok = bool(self._storage.write(target, self._encode(result.document))) and ok
        return ok
