"""Final touches applied to a rendered document: XSL stylesheet and gzip."""
from __future__ import annotations

import gzip
import zlib

from .errors import CompressionError
from .renderers.base import XML_DECLARATION, escape_xml


def stylesheet_instruction(href: str) -> str:
    return f'<?xml-stylesheet type="text/xsl" href="{escape_xml(href)}"?>'


def apply_stylesheet(document: str, href: str) -> str:
    """Insert the stylesheet instruction right after the XML declaration."""
    instruction = stylesheet_instruction(href)
    if document.startswith(XML_DECLARATION):
        rest = document[len(XML_DECLARATION):]
        return f"{XML_DECLARATION}\n{instruction}{rest}"
    return f"{instruction}\n{document}"


def compress(document: str) -> bytes:
    """Gzip the UTF-8 encoded document. ``mtime=0`` keeps the bytes reproducible."""
    try:
        return gzip.compress(document.encode("utf-8"), mtime=0)
    except (OSError, ValueError, zlib.error) as e:
        raise CompressionError(f"Failed to compress sitemap: {e}") from e
