"""Exceptions raised by the heuristics pipeline."""

from __future__ import annotations


class HeuristicsError(Exception):
    """Base class for analysis failures surfaced to callers."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FetchError(HeuristicsError):
    """The page could not be retrieved (non-2xx status or transport failure)."""

    def __init__(self, url: str, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class MalformedInputError(HeuristicsError):
    """The tool was called without a usable absolute URL."""
