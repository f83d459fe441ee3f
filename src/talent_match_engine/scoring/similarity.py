"""Similarity primitives: set overlap and numeric range overlap."""

from __future__ import annotations

import math
from collections.abc import Iterable


def to_score(value: float) -> int:
    """Round half-up and clamp to the integer score range [0, 100]."""
    return max(0, min(100, math.floor(value + 0.5)))


def jaccard_similarity(items_a: Iterable[str], items_b: Iterable[str]) -> float:
    """Compute case-insensitive Jaccard similarity between two string collections.

    Two empty collections are treated as identical (1.0); exactly one empty
    collection shares nothing (0.0).
    """
    set_a = {item.lower() for item in items_a}
    set_b = {item.lower() for item in items_b}
    if not set_a and not set_b:
        return 1.0
    if not set_a or not set_b:
        return 0.0
    return len(set_a & set_b) / len(set_a | set_b)


def ranges_overlap(
    candidate_min: float,
    candidate_max: float,
    target_min: float,
    target_max: float,
) -> bool:
    """Check whether two closed numeric ranges intersect."""
    return candidate_min <= target_max and candidate_max >= target_min


def overlap_fraction(
    candidate_min: float,
    candidate_max: float,
    target_min: float,
    target_max: float,
) -> float:
    """Fraction of the candidate range covered by the target range.

    Args:
        candidate_min: Lower bound of the candidate range.
        candidate_max: Upper bound of the candidate range.
        target_min: Lower bound of the target range.
        target_max: Upper bound of the target range.

    Returns:
        A value in [0, 1]. A degenerate candidate range uses a denominator
        of 1, so a single point inside the target range yields 0.0.
    """
    overlap = min(candidate_max, target_max) - max(candidate_min, target_min)
    span = candidate_max - candidate_min or 1
    return max(0.0, min(1.0, overlap / span))
