"""
Exception hierarchy for sitemap-builder.

Every error raised by the package derives from ``SitemapError`` so adapters can
catch one type. Value-related errors also derive from ``ValueError``.
"""
from __future__ import annotations


class SitemapError(Exception):
    """Base class for all sitemap-builder errors."""


class ValidationError(SitemapError, ValueError):
    """An invalid configuration value was supplied."""


class ItemValidationError(SitemapError, ValueError):
    """An item or sitemap entry failed validation."""


class FormatError(SitemapError, ValueError):
    """An unknown output format was requested."""


class SizeLimitError(SitemapError):
    """A single item cannot fit into a document under the configured limits."""


class CompressionError(SitemapError):
    """Compressing a rendered document failed."""
