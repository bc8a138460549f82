"""Performance smell score: 100 minus additive penalties, floored at 0."""

from __future__ import annotations

from dataclasses import dataclass

BASE_SCORE = 100


@dataclass(frozen=True)
class ScoringRules:
    """Thresholds and penalty weights for the smell score."""

    script_count_threshold: int = 10
    script_count_weight: int = 2
    blocking_threshold: int = 5
    blocking_weight: int = 4
    inline_bytes_threshold: int = 50_000
    inline_bytes_penalty: int = 15
    heavy_inline_bytes_threshold: int = 150_000
    heavy_inline_bytes_penalty: int = 20
    no_lazy_ratio_threshold: float = 0.5
    no_lazy_penalty: int = 10
    large_image_weight: int = 5


DEFAULT_RULES = ScoringRules()


def compute_score(
    total_scripts: int,
    blocking_scripts: int,
    inline_bytes: int,
    total_images: int,
    no_lazy: int,
    suspected_large: int,
    rules: ScoringRules = DEFAULT_RULES,
) -> int:
    """Compute the 0-100 smell score from extracted counts."""
    score = BASE_SCORE

    if total_scripts > rules.script_count_threshold:
        score -= (total_scripts - rules.script_count_threshold) * rules.script_count_weight

    if blocking_scripts > rules.blocking_threshold:
        score -= (blocking_scripts - rules.blocking_threshold) * rules.blocking_weight

    if inline_bytes > rules.inline_bytes_threshold:
        score -= rules.inline_bytes_penalty
    # Stacks with the penalty above.
    if inline_bytes > rules.heavy_inline_bytes_threshold:
        score -= rules.heavy_inline_bytes_penalty

    if total_images > 0 and no_lazy / total_images > rules.no_lazy_ratio_threshold:
        score -= rules.no_lazy_penalty

    if suspected_large > 0:
        score -= suspected_large * rules.large_image_weight

    return max(0, score)
