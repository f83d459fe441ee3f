"""Match scoring models: per-dimension scores, weights, breakdowns."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from talent_match_core.models.candidate import CandidateProfile
from talent_match_core.models.enums import Dimension


class DimensionScore(BaseModel):
    """Score and short explanation for a single dimension."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100, description="Dimension score 0-100")
    reason: str = Field(description="Short human-readable explanation")


class MatchWeights(BaseModel):
    """Weight of each dimension in the overall score."""

    skills: float = Field(default=0.25, ge=0.0, le=1.0)
    industry: float = Field(default=0.15, ge=0.0, le=1.0)
    culture: float = Field(default=0.30, ge=0.0, le=1.0)
    compensation: float = Field(default=0.15, ge=0.0, le=1.0)
    location: float = Field(default=0.10, ge=0.0, le=1.0)
    stage_fit: float = Field(default=0.05, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def validate_total(self) -> MatchWeights:
        """Ensure the weights sum to 1.0."""
        total = sum(self.as_mapping().values())
        if abs(total - 1.0) > 1e-6:
            msg = f"match weights must sum to 1.0, got {total:.4f}"
            raise ValueError(msg)
        return self

    def as_mapping(self) -> dict[Dimension, float]:
        """Return the weights keyed by dimension."""
        return {dimension: getattr(self, dimension.value) for dimension in Dimension}


class MatchBreakdown(BaseModel):
    """Overall score plus itemized per-dimension scores for one candidate/target pair."""

    model_config = ConfigDict(frozen=True)

    candidate_id: str = Field(description="Scored candidate")
    target_id: str = Field(description="Company or job the candidate was scored against")
    overall_score: int = Field(ge=0, le=100, description="Weighted overall score 0-100")
    details: dict[Dimension, DimensionScore] = Field(description="Per-dimension scores")
    scored_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="When the match was computed"
    )


class CandidateMatch(BaseModel):
    """A candidate with its match breakdown and ranking position."""

    candidate: CandidateProfile = Field(description="The matched candidate")
    breakdown: MatchBreakdown = Field(description="Match scoring breakdown")
    rank: int | None = Field(default=None, ge=1, description="1-based rank in results")

    @property
    def overall_score(self) -> int:
        """Shortcut for the breakdown's overall score."""
        return self.breakdown.overall_score


class RecentCandidatesPage(BaseModel):
    """One page of the unranked, newest-first candidate feed."""

    candidates: list[CandidateProfile] = Field(default_factory=list)
    has_more: bool = Field(default=False, description="Whether another page exists")
    page: int = Field(ge=0, description="Zero-based page index")
    page_size: int = Field(ge=1, description="Requested page size")
    total: int = Field(default=0, ge=0, description="Total candidates in the feed")
