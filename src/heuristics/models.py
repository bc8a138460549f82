"""Data models for the heuristics pipeline."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cached_property

_DEFER_RE = re.compile(r"\bdefer\b", re.IGNORECASE)
_ASYNC_RE = re.compile(r"\basync\b", re.IGNORECASE)
_HAS_SRC_RE = re.compile(r"""\bsrc\s*=\s*["'][^"']+["']""", re.IGNORECASE)

_LAZY_RE = re.compile(r"""\bloading\s*=\s*["']lazy["']""", re.IGNORECASE)
_SRC_VALUE_RE = re.compile(r"""\bsrc\s*=\s*["']([^"']+)["']""", re.IGNORECASE)
_WIDTH_RE = re.compile(r"""\bwidth\s*=\s*["'](\d+)["']""", re.IGNORECASE)
_HEIGHT_RE = re.compile(r"""\bheight\s*=\s*["'](\d+)["']""", re.IGNORECASE)

RASTER_EXTENSIONS = (".png", ".jpg", ".jpeg")
LARGE_DIMENSION_PX = 1000


@dataclass(frozen=True)
class PageSource:
    """Raw HTML of one fetched page."""

    url: str
    html: str
    status_code: int = 200


@dataclass(frozen=True)
class ScriptTag:
    """A matched ``<script>`` element."""

    attributes: str = ""
    body: str = ""

    @cached_property
    def has_defer(self) -> bool:
        return bool(_DEFER_RE.search(self.attributes))

    @cached_property
    def has_async(self) -> bool:
        return bool(_ASYNC_RE.search(self.attributes))

    @cached_property
    def has_src(self) -> bool:
        return bool(_HAS_SRC_RE.search(self.attributes))

    @property
    def is_blocking(self) -> bool:
        # Placement (head vs body) is unknown without a DOM, so anything
        # lacking defer/async counts as a potential render blocker.
        return not self.has_defer and not self.has_async

    @property
    def is_inline(self) -> bool:
        return not self.has_src

    @property
    def inline_bytes(self) -> int:
        """UTF-8 size of the body, or 0 for external scripts."""
        if not self.is_inline:
            return 0
        return len(self.body.encode("utf-8"))


def _int_attr(pattern: re.Pattern[str], attributes: str) -> int | None:
    match = pattern.search(attributes)
    return int(match.group(1)) if match else None


@dataclass(frozen=True)
class ImageTag:
    """A matched ``<img>`` element."""

    attributes: str = ""

    @cached_property
    def has_lazy(self) -> bool:
        return bool(_LAZY_RE.search(self.attributes))

    @cached_property
    def src_value(self) -> str:
        match = _SRC_VALUE_RE.search(self.attributes)
        return match.group(1).lower() if match else ""

    @cached_property
    def width_value(self) -> int | None:
        return _int_attr(_WIDTH_RE, self.attributes)

    @cached_property
    def height_value(self) -> int | None:
        return _int_attr(_HEIGHT_RE, self.attributes)

    @property
    def is_suspected_large(self) -> bool:
        """Raster source with an explicit width or height hint above 1000px."""
        if not self.src_value.endswith(RASTER_EXTENSIONS):
            return False
        return any(
            value is not None and value > LARGE_DIMENSION_PX
            for value in (self.width_value, self.height_value)
        )


@dataclass(frozen=True)
class ScriptStats:
    total_scripts: int = 0
    blocking_scripts: int = 0
    inline_bytes: int = 0


@dataclass(frozen=True)
class ImageStats:
    total_images: int = 0
    no_lazy: int = 0
    suspected_large: int = 0
