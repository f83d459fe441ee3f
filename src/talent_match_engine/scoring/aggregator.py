"""Weighted aggregation of dimension scores into an overall match score."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from talent_match_core.constants import CULTURE_SCORE_FLOOR, NEUTRAL_SKILLS_SCORE
from talent_match_core.models.candidate import CandidateProfile
from talent_match_core.models.company import CompanyProfile
from talent_match_core.models.enums import Dimension
from talent_match_core.models.job import JobSkill
from talent_match_core.models.match import DimensionScore, MatchBreakdown, MatchWeights
from talent_match_engine.scoring.dimensions import (
    score_compensation,
    score_culture,
    score_industry,
    score_location,
    score_skills,
    score_stage_fit,
)
from talent_match_engine.scoring.similarity import to_score

if TYPE_CHECKING:
    from talent_match_core.config.settings import Settings


def aggregate_scores(
    details: Mapping[Dimension, DimensionScore],
    weights: MatchWeights,
) -> int:
    """Weighted sum of dimension scores, rounded to an integer in [0, 100].

    Dimensions absent from ``details`` contribute zero.
    """
    total = 0.0
    for dimension, weight in weights.as_mapping().items():
        detail = details.get(dimension)
        if detail is not None:
            total += weight * detail.score
    return to_score(total)


class MatchScorer:
    """Score a candidate against a company across all six dimensions."""

    def __init__(
        self,
        weights: MatchWeights | None = None,
        culture_floor: int = CULTURE_SCORE_FLOOR,
        neutral_skills_score: int = NEUTRAL_SKILLS_SCORE,
    ) -> None:
        """Initialize with a weight table and scoring policy."""
        self.weights = weights or MatchWeights()
        self.culture_floor = culture_floor
        self.neutral_skills_score = neutral_skills_score

    @classmethod
    def from_settings(cls, settings: Settings) -> MatchScorer:
        """Build a scorer from application settings."""
        return cls(
            weights=settings.match_weights,
            culture_floor=settings.culture_score_floor,
            neutral_skills_score=settings.neutral_skills_score,
        )

    def score(
        self,
        candidate: CandidateProfile,
        company: CompanyProfile,
        requirements: Sequence[JobSkill],
    ) -> MatchBreakdown:
        """Compute the full match breakdown for one candidate/company pair."""
        details = {
            Dimension.SKILLS: score_skills(
                candidate, requirements, neutral_score=self.neutral_skills_score
            ),
            Dimension.INDUSTRY: score_industry(candidate, company),
            Dimension.CULTURE: score_culture(candidate, company, floor=self.culture_floor),
            Dimension.COMPENSATION: score_compensation(candidate, company),
            Dimension.LOCATION: score_location(candidate, company),
            Dimension.STAGE_FIT: score_stage_fit(candidate, company),
        }
        return MatchBreakdown(
            candidate_id=candidate.id,
            target_id=company.id,
            overall_score=aggregate_scores(details, self.weights),
            details=details,
        )
