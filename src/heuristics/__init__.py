"""Heuristic page-speed analysis over raw HTML."""

from .analyzer import TOOL_DESCRIPTION, TOOL_NAME, SpeedHeuristicsChecker, analyze_html
from .errors import FetchError, HeuristicsError, MalformedInputError
from .extract import extract_images, extract_scripts, summarize_images, summarize_scripts
from .fetch import PageFetcher
from .models import ImageStats, ImageTag, PageSource, ScriptStats, ScriptTag
from .report import build_notes, build_result
from .scoring import ScoringRules, compute_score

__all__ = [
    "FetchError",
    "HeuristicsError",
    "ImageStats",
    "ImageTag",
    "MalformedInputError",
    "PageFetcher",
    "PageSource",
    "ScoringRules",
    "ScriptStats",
    "ScriptTag",
    "SpeedHeuristicsChecker",
    "TOOL_DESCRIPTION",
    "TOOL_NAME",
    "analyze_html",
    "build_notes",
    "build_result",
    "compute_score",
    "extract_images",
    "extract_scripts",
    "summarize_images",
    "summarize_scripts",
]
