"""Pattern-based extraction of script and image elements from raw HTML.

This is a best-effort scan, not a validating parser: unterminated or
malformed tags simply do not match.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from .models import ImageStats, ImageTag, ScriptStats, ScriptTag

logger = logging.getLogger(__name__)

_SCRIPT_RE = re.compile(r"<script\b([^>]*)>([\s\S]*?)</script>", re.IGNORECASE)
_IMG_RE = re.compile(r"<img\b([^>]*?)>", re.IGNORECASE)


def extract_scripts(html: str) -> list[ScriptTag]:
    """Return every ``<script>...</script>`` element in document order."""
    return [
        ScriptTag(attributes=match.group(1) or "", body=match.group(2) or "")
        for match in _SCRIPT_RE.finditer(html)
    ]


def extract_images(html: str) -> list[ImageTag]:
    """Return every ``<img>`` element in document order."""
    return [ImageTag(attributes=match.group(1) or "") for match in _IMG_RE.finditer(html)]


def summarize_scripts(scripts: Iterable[ScriptTag]) -> ScriptStats:
    total = 0
    blocking = 0
    inline_bytes = 0
    for script in scripts:
        total += 1
        if script.is_blocking:
            blocking += 1
        inline_bytes += script.inline_bytes
    return ScriptStats(
        total_scripts=total,
        blocking_scripts=blocking,
        inline_bytes=inline_bytes,
    )


def summarize_images(images: Iterable[ImageTag]) -> ImageStats:
    total = 0
    no_lazy = 0
    suspected_large = 0
    for image in images:
        total += 1
        if not image.has_lazy:
            no_lazy += 1
        if image.is_suspected_large:
            suspected_large += 1
    return ImageStats(
        total_images=total,
        no_lazy=no_lazy,
        suspected_large=suspected_large,
    )


def scan_scripts(html: str) -> ScriptStats:
    """Extract and summarize scripts in one pass."""
    stats = summarize_scripts(extract_scripts(html))
    logger.debug(
        "scripts scanned",
        extra={
            "total_scripts": stats.total_scripts,
            "blocking_scripts": stats.blocking_scripts,
            "inline_bytes": stats.inline_bytes,
        },
    )
    return stats


def scan_images(html: str) -> ImageStats:
    """Extract and summarize images in one pass."""
    stats = summarize_images(extract_images(html))
    logger.debug(
        "images scanned",
        extra={
            "total_images": stats.total_images,
            "no_lazy": stats.no_lazy,
            "suspected_large": stats.suspected_large,
        },
    )
    return stats
