"""Factory functions returning valid domain model instances."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4

from talent_match_core.models.candidate import CandidateProfile, Skill
from talent_match_core.models.company import CompanyProfile
from talent_match_core.models.enums import CandidateStatus, FundingStage, JobStatus, WorkMode
from talent_match_core.models.job import JobPosting, JobSkill
from talent_match_core.models.unlock import RequesterContext


def make_candidate(**overrides: object) -> CandidateProfile:
    """Create an active candidate who fits ``make_company()`` well."""
    defaults: dict[str, object] = {
        "id": str(uuid4()),
        "name": "Jane Doe",
        "headline": "Backend engineer",
        "email": "jane@example.com",
        "location": "Berlin, Germany",
        "status": CandidateStatus.ACTIVELY_LOOKING,
        "skills": [Skill(name="Python", years=6), Skill(name="PostgreSQL", years=4)],
        "salary_min": 90_000,
        "salary_max": 110_000,
        "preferred_work_modes": [WorkMode.REMOTE],
        "interested_industries": ["Fintech"],
        "values": ["Ownership", "Transparency"],
        "character_traits": ["Curious", "Pragmatic"],
        "created_at": datetime(2026, 1, 1, tzinfo=UTC),
    }
    defaults.update(overrides)
    return CandidateProfile(**defaults)  # type: ignore[arg-type]


def make_blank_candidate(**overrides: object) -> CandidateProfile:
    """Create a candidate with every optional field left unspecified."""
    defaults: dict[str, object] = {
        "id": str(uuid4()),
        "status": CandidateStatus.ACTIVELY_LOOKING,
    }
    defaults.update(overrides)
    return CandidateProfile(**defaults)  # type: ignore[arg-type]


def make_company(**overrides: object) -> CompanyProfile:
    """Create a remote-first Series A fintech company with credits."""
    defaults: dict[str, object] = {
        "id": str(uuid4()),
        "company_name": "Acme Pay",
        "industries": ["Fintech"],
        "values": ["Ownership", "Transparency"],
        "desired_traits": ["Curious", "Pragmatic"],
        "funding_stage": FundingStage.SERIES_A,
        "remote_policy": "Remote-first",
        "headquarters_location": "Berlin, Germany",
        "company_size_range": "11-50",
        "credits": 5,
    }
    defaults.update(overrides)
    return CompanyProfile(**defaults)  # type: ignore[arg-type]


def make_job(**overrides: object) -> JobPosting:
    """Create a published job requiring Python and PostgreSQL."""
    defaults: dict[str, object] = {
        "id": str(uuid4()),
        "company_id": "company-1",
        "title": "Backend Engineer",
        "status": JobStatus.PUBLISHED,
        "required_skills": [
            JobSkill(name="Python", minimum_years=3, weight="required"),
            JobSkill(name="PostgreSQL", weight="preferred"),
        ],
    }
    defaults.update(overrides)
    return JobPosting(**defaults)  # type: ignore[arg-type]


def make_requester(**overrides: object) -> RequesterContext:
    """Create an authenticated recruiter context."""
    defaults: dict[str, object] = {
        "user_id": str(uuid4()),
        "role": "recruiter",
        "company_id": "company-1",
    }
    defaults.update(overrides)
    return RequesterContext(**defaults)  # type: ignore[arg-type]
