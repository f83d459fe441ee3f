"""Match scoring: similarity primitives, dimension scorers, aggregation."""

from talent_match_engine.scoring.aggregator import MatchScorer, aggregate_scores
from talent_match_engine.scoring.dimensions import (
    score_compensation,
    score_culture,
    score_industry,
    score_location,
    score_skills,
    score_stage_fit,
)
from talent_match_engine.scoring.similarity import (
    jaccard_similarity,
    overlap_fraction,
    ranges_overlap,
)

__all__ = [
    "MatchScorer",
    "aggregate_scores",
    "jaccard_similarity",
    "overlap_fraction",
    "ranges_overlap",
    "score_compensation",
    "score_culture",
    "score_industry",
    "score_location",
    "score_skills",
    "score_stage_fit",
]
