"""Company profile model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from talent_match_core.models.enums import FundingStage


class CompanyProfile(BaseModel):
    """Matching-relevant view of a hiring company."""

    id: str = Field(description="Company identifier")
    company_name: str = Field(default="", description="Company name")
    industries: list[str] = Field(default_factory=list, description="Industry tags")
    values: list[str] = Field(default_factory=list, description="Company values")
    desired_traits: list[str] = Field(
        default_factory=list, description="Character traits the company looks for"
    )
    funding_stage: FundingStage = Field(
        default=FundingStage.UNKNOWN, description="Funding stage"
    )
    remote_policy: str = Field(default="", description="Free-text remote work policy")
    headquarters_location: str = Field(default="", description="Headquarters location")
    company_size_range: str | None = Field(
        default=None, description="Company size bucket (e.g. '11-50')"
    )
    team_size: int = Field(default=0, ge=0, description="Numeric team size (fallback for size)")
    credits: int = Field(default=0, ge=0, description="Profile-unlock credit balance")

    @property
    def is_remote_first(self) -> bool:
        """Whether the remote policy reads as remote or distributed."""
        policy = self.remote_policy.lower()
        return "remote" in policy or "distributed" in policy

    @property
    def is_hybrid(self) -> bool:
        """Whether the remote policy mentions hybrid work."""
        return "hybrid" in self.remote_policy.lower()
