"""Speed heuristics pipeline: fetch -> scan scripts -> scan images -> score -> report."""

from __future__ import annotations

import logging
from typing import Any, Mapping
from urllib.parse import urlparse

from src.api.schemas import AnalysisResult
from src.config import Settings

from .errors import MalformedInputError
from .extract import scan_images, scan_scripts
from .fetch import PageFetcher
from .report import build_result
from .scoring import DEFAULT_RULES, ScoringRules, compute_score

logger = logging.getLogger(__name__)

TOOL_NAME = "speed_heuristics_checker"
TOOL_DESCRIPTION = "Analyses a web page for speed heuristics"

_VALID_SCHEMES = {"http", "https"}


def analyze_html(url: str, html: str, rules: ScoringRules = DEFAULT_RULES) -> AnalysisResult:
    """Score already-fetched HTML. Pure: same input, same result."""
    scripts = scan_scripts(html)
    images = scan_images(html)
    score = compute_score(
        total_scripts=scripts.total_scripts,
        blocking_scripts=scripts.blocking_scripts,
        inline_bytes=scripts.inline_bytes,
        total_images=images.total_images,
        no_lazy=images.no_lazy,
        suspected_large=images.suspected_large,
        rules=rules,
    )
    return build_result(url, scripts, images, score)


def validate_url(value: Any) -> str:
    """Return *value* if it is an absolute http(s) URL, else raise MalformedInputError."""
    if not isinstance(value, str) or not value.strip():
        raise MalformedInputError("Missing or invalid url")
    url = value.strip()
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError as exc:
        raise MalformedInputError("Missing or invalid url") from exc
    if parsed.scheme not in _VALID_SCHEMES or not hostname:
        raise MalformedInputError("Missing or invalid url")
    return url


class SpeedHeuristicsChecker:
    """The tool callable: ``await checker.run({"url": ...})``."""

    def __init__(self, fetcher: PageFetcher, rules: ScoringRules = DEFAULT_RULES) -> None:
        self._fetcher = fetcher
        self._rules = rules

    @classmethod
    def from_settings(cls, settings: Settings) -> SpeedHeuristicsChecker:
        fetcher = PageFetcher(
            timeout=settings.fetch_timeout_seconds,
            connect_timeout=settings.fetch_connect_timeout_seconds,
            max_redirects=settings.fetch_max_redirects,
            user_agent=settings.user_agent,
        )
        return cls(fetcher)

    async def run(self, parameters: Mapping[str, Any]) -> AnalysisResult:
        """Fetch and analyse ``parameters["url"]``.

        Raises MalformedInputError for a bad url and FetchError when the page
        cannot be retrieved; no partial result is produced in either case.
        """
        url = validate_url(parameters.get("url"))
        page = await self._fetcher.fetch(url)
        result = analyze_html(page.url, page.html, self._rules)
        logger.info(
            "speed heuristics computed",
            extra={
                "url": url,
                "score": result.performance_smell_score,
                "total_scripts": result.total_scripts,
                "total_images": result.total_images,
            },
        )
        return result
