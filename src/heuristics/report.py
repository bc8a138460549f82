"""Human-readable notes and the final result object."""

from __future__ import annotations

import math

from src.api.schemas import AnalysisResult

from .models import ImageStats, ScriptStats


def round_half_up(value: float) -> int:
    """Round to the nearest int, with .5 going up (banker's rounding would not)."""
    return int(math.floor(value + 0.5))


def inline_kb(inline_bytes: int) -> int:
    return round_half_up(inline_bytes / 1024)


def build_notes(scripts: ScriptStats, images: ImageStats) -> list[str]:
    """Produce the ordered notes; always at least two entries."""
    notes = [f"{scripts.total_scripts} <script> tags detected."]

    if scripts.blocking_scripts > 0:
        notes.append(
            f"{scripts.blocking_scripts} script(s) without async/defer "
            "(possible render-blockers)."
        )
    else:
        notes.append("Most scripts appear async/defer ✅")

    if scripts.inline_bytes > 0:
        notes.append(f"Inline JS total ~{inline_kb(scripts.inline_bytes)}KB.")

    if images.total_images > 0:
        notes.append(
            f'{images.no_lazy}/{images.total_images} images missing loading="lazy".'
        )
    else:
        notes.append("No <img> tags detected.")

    if images.suspected_large > 0:
        notes.append(
            f"{images.suspected_large} image(s) look very large "
            "( >1000px dimension hints )."
        )

    return notes


def build_result(
    url: str,
    scripts: ScriptStats,
    images: ImageStats,
    score: int,
) -> AnalysisResult:
    return AnalysisResult(
        url=url,
        total_scripts=scripts.total_scripts,
        blocking_scripts=scripts.blocking_scripts,
        inline_script_kb=inline_kb(scripts.inline_bytes),
        total_images=images.total_images,
        images_missing_lazy_load=images.no_lazy,
        suspected_large_images=images.suspected_large,
        performance_smell_score=score,
        notes=build_notes(scripts, images),
    )
