"""Candidate profile and skill models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from talent_match_core.models.enums import CandidateStatus, OrgSizePreference, WorkMode


def level_from_years(years: float) -> int:
    """Derive a 1-5 proficiency level from years of experience."""
    if years >= 8:
        return 5
    if years >= 5:
        return 4
    if years >= 3:
        return 3
    if years >= 1:
        return 2
    return 1


class Skill(BaseModel):
    """A skill held by a candidate."""

    name: str = Field(description="Skill name (case-insensitive identity)")
    years: float = Field(default=0.0, ge=0, description="Years of experience with this skill")
    level: int | None = Field(
        default=None, ge=1, le=5, description="Proficiency level 1-5, derived from years if unset"
    )

    @model_validator(mode="after")
    def derive_level(self) -> Skill:
        """Fill the proficiency level from years when it was not given."""
        if self.level is None:
            self.level = level_from_years(self.years)
        return self


class CandidateProfile(BaseModel):
    """Matching-relevant view of a candidate."""

    id: str = Field(description="Candidate identifier")
    name: str = Field(default="", description="Full name")
    headline: str = Field(default="", description="Short professional headline")
    email: str | None = Field(default=None, description="Contact email address")
    location: str | None = Field(default=None, description="Current location")
    status: CandidateStatus = Field(
        default=CandidateStatus.NOT_LOOKING, description="Job-search status"
    )
    skills: list[Skill] = Field(default_factory=list, description="Skills held")
    salary_min: int | None = Field(default=None, ge=0, description="Minimum expected salary")
    salary_max: int | None = Field(default=None, ge=0, description="Maximum expected salary")
    salary_currency: str = Field(default="USD", description="Salary currency")
    preferred_work_modes: list[WorkMode] = Field(
        default_factory=list, description="Preferred working arrangements"
    )
    willing_to_relocate: bool = Field(default=False, description="Open to relocation")
    interested_industries: list[str] = Field(
        default_factory=list, description="Industries of interest"
    )
    values: list[str] = Field(default_factory=list, description="Cultural values")
    character_traits: list[str] = Field(default_factory=list, description="Character traits")
    preferred_company_sizes: list[str] = Field(
        default_factory=list, description="Free-form preferred company size tags"
    )
    org_size_preference: OrgSizePreference = Field(
        default=OrgSizePreference.UNSPECIFIED, description="Preferred organization size"
    )
    created_at: datetime | None = Field(default=None, description="When the profile was created")

    @property
    def wants_remote(self) -> bool:
        """Whether the candidate lists remote work."""
        return WorkMode.REMOTE in self.preferred_work_modes

    @property
    def wants_hybrid(self) -> bool:
        """Whether the candidate lists hybrid work."""
        return WorkMode.HYBRID in self.preferred_work_modes

    @property
    def wants_on_site(self) -> bool:
        """Whether the candidate lists on-site work."""
        return WorkMode.ON_SITE in self.preferred_work_modes
