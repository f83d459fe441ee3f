"""Job posting and skill requirement models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from talent_match_core.models.enums import JobStatus


def required_level_from_years(minimum_years: float) -> int:
    """Derive a 1-5 required level from minimum years of experience."""
    if minimum_years >= 5:
        return 4
    if minimum_years >= 3:
        return 3
    return 2


class JobSkill(BaseModel):
    """A skill requirement attached to a job posting."""

    name: str = Field(description="Skill name (case-insensitive identity)")
    required_level: int | None = Field(
        default=None, ge=1, le=5, description="Required proficiency 1-5"
    )
    minimum_years: float = Field(default=0.0, ge=0, description="Minimum years of experience")
    weight: Literal["required", "preferred"] = Field(
        default="preferred", description="Whether the skill is required or nice-to-have"
    )

    @model_validator(mode="after")
    def derive_required_level(self) -> JobSkill:
        """Fill the required level from minimum years when it was not given."""
        if self.required_level is None:
            self.required_level = required_level_from_years(self.minimum_years)
        return self

    @property
    def key(self) -> str:
        """Case-insensitive identity of the skill."""
        return self.name.lower()


class AggregatedSkill(JobSkill):
    """A skill requirement aggregated across a company's published jobs."""

    frequency: int = Field(default=1, ge=1, description="Number of jobs requiring this skill")


class JobPosting(BaseModel):
    """Matching-relevant view of a job posting."""

    id: str = Field(description="Job identifier")
    company_id: str = Field(description="Owning company identifier")
    title: str = Field(default="", description="Job title")
    status: JobStatus = Field(default=JobStatus.DRAFT, description="Posting status")
    required_skills: list[JobSkill] = Field(
        default_factory=list, description="Structured skill requirements"
    )
